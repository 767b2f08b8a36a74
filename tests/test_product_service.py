"""
Tests for ProductService outcomes against a private store.
"""

from __future__ import annotations

import asyncio

import pytest

from app.core.errors import status_for, unwrap
from app.dao.product_dao import InMemoryProductDAO
from app.entities.outcome import Failure, FailureKind, Success
from app.services.product_service import SEARCH_TERM_REQUIRED_MESSAGE, ProductService


@pytest.fixture
def service():
    return ProductService(InMemoryProductDAO())


def test_list_defaults_return_everything(service):
    outcome = asyncio.run(service.list_products())
    assert isinstance(outcome, Success)
    assert outcome.value["total"] == 3
    assert outcome.value["page"] == 1
    assert outcome.value["limit"] == 10
    assert len(outcome.value["products"]) == 3


def test_list_filters_then_paginates(service):
    outcome = asyncio.run(service.list_products(category="electronics", page=2, limit=1))
    assert outcome.value["total"] == 2
    assert [p.name for p in outcome.value["products"]] == ["Smartphone"]


def test_list_page_past_end_is_empty(service):
    outcome = asyncio.run(service.list_products(page=5, limit=10))
    assert outcome.ok
    assert outcome.value["total"] == 3
    assert outcome.value["products"] == []


def test_get_missing_is_not_found(service):
    outcome = asyncio.run(service.get_product("nope"))
    assert isinstance(outcome, Failure)
    assert outcome.kind == FailureKind.NOT_FOUND
    assert outcome.message == "Product not found"


def test_create_rejects_invalid_payload_without_side_effects(service, valid_payload):
    valid_payload["price"] = "cheap"
    outcome = asyncio.run(service.create_product(valid_payload))
    assert outcome.kind == FailureKind.VALIDATION
    assert len(service.product_dao) == 3


def test_update_validates_before_lookup(service, valid_payload):
    del valid_payload["name"]
    outcome = asyncio.run(service.update_product("nope", valid_payload))
    assert outcome.kind == FailureKind.VALIDATION


def test_update_missing_is_not_found(service, valid_payload):
    outcome = asyncio.run(service.update_product("nope", valid_payload))
    assert outcome.kind == FailureKind.NOT_FOUND


def test_delete_missing_is_not_found(service):
    outcome = asyncio.run(service.delete_product("nope"))
    assert outcome.kind == FailureKind.NOT_FOUND


@pytest.mark.parametrize("term", [None, ""])
def test_search_requires_term(service, term):
    outcome = asyncio.run(service.search_products(term))
    assert outcome.kind == FailureKind.BAD_REQUEST
    assert outcome.message == SEARCH_TERM_REQUIRED_MESSAGE


def test_search_is_case_insensitive_substring(service):
    outcome = asyncio.run(service.search_products("TOP"))
    assert [p.name for p in outcome.value] == ["Laptop"]
    outcome = asyncio.run(service.search_products("o"))
    assert [p.name for p in outcome.value] == ["Laptop", "Smartphone", "Coffee Maker"]


def test_stats_counts_by_category(service):
    outcome = asyncio.run(service.get_category_stats())
    assert outcome.value == {"electronics": 2, "kitchen": 1}


def test_stats_on_empty_store():
    service = ProductService(InMemoryProductDAO(seed=False))
    assert asyncio.run(service.get_category_stats()).value == {}


@pytest.mark.parametrize(
    "kind,expected",
    [
        (FailureKind.NOT_FOUND, 404),
        (FailureKind.VALIDATION, 400),
        (FailureKind.BAD_REQUEST, 400),
        (FailureKind.UNAUTHORIZED, 401),
    ],
)
def test_failure_kinds_map_to_status(kind, expected):
    assert status_for(Failure(kind, "x")) == expected


def test_unwrap_raises_http_exception_for_failures():
    from fastapi import HTTPException

    assert unwrap(Success(5)) == 5
    with pytest.raises(HTTPException) as excinfo:
        unwrap(Failure.not_found())
    assert excinfo.value.status_code == 404
    assert excinfo.value.detail == "Product not found"
