from typing import Any, Dict, Optional

from fastapi import HTTPException, status

from app.entities.outcome import Failure, FailureKind, Outcome, T

INTERNAL_ERROR_MESSAGE = "Internal Server Error"

STATUS_BY_KIND: Dict[FailureKind, int] = {
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    FailureKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    FailureKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
}


def status_for(failure: Failure) -> int:
    return STATUS_BY_KIND.get(failure.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def unwrap(outcome: Outcome[T]) -> T:
    """Return the success value or raise the HTTPException mapped from the failure."""
    if isinstance(outcome, Failure):
        raise HTTPException(status_code=status_for(outcome), detail=outcome.message)
    return outcome.value


def error_body(message: Optional[Any]) -> Dict[str, Any]:
    return {"error": message}
