"""
Entities package for the product API.
Contains the outcome types product operations return.
"""

from .outcome import Failure, FailureKind, Outcome, Success

__all__ = ["Failure", "FailureKind", "Outcome", "Success"]
