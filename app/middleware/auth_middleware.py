from typing import Iterable, Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
import structlog

from app.core.errors import error_body, status_for
from app.entities.outcome import Failure
from app.core.security import UNAUTHORIZED_MESSAGE, verify_api_key

logger = structlog.get_logger()


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Reject requests without the shared API key before any route runs."""

    def __init__(
        self,
        app: ASGIApp,
        header_name: str = "x-api-key",
        public_paths: Iterable[str] = ("/",),
        api_key: Optional[str] = None,
    ):
        super().__init__(app)
        self.header_name = header_name
        self.public_paths = frozenset(public_paths)
        self.api_key = api_key

    async def dispatch(self, request: Request, call_next):
        if request.url.path in self.public_paths:
            return await call_next(request)

        provided = request.headers.get(self.header_name)
        if not verify_api_key(provided, self.api_key):
            logger.warning(
                "Rejected request with invalid API key",
                path=request.url.path,
                method=request.method,
                key_present=bool(provided),
            )
            failure = Failure.unauthorized(UNAUTHORIZED_MESSAGE)
            return JSONResponse(
                status_code=status_for(failure),
                content=error_body(failure.message),
            )

        return await call_next(request)
