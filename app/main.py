from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import uvicorn

from app.core.config import settings
from app.core.errors import INTERNAL_ERROR_MESSAGE, error_body
from app.core.logging import setup_logging
from app.controllers import product_controller
from app.dao.product_dao import product_dao
from app.middleware.auth_middleware import ApiKeyMiddleware
from app.middleware.logging_middleware import LoggingMiddleware

logger = setup_logging()

WELCOME_MESSAGE = "Welcome to the Product API! Go to /api/products to see all products."


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        "Application startup",
        environment=settings.environment,
        products=len(product_dao),
        port=settings.port,
    )
    yield
    logger.info("Application shutdown")


app = FastAPI(
    title="Product API",
    description="In-memory product catalog with API key authentication",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.docs_enabled else None,
    redoc_url="/redoc" if settings.docs_enabled else None,
    openapi_url="/openapi.json" if settings.docs_enabled else None,
)

# Middleware runs outermost-first in the reverse order of registration:
# CORS -> request logging -> API key gate -> routing.
app.add_middleware(
    ApiKeyMiddleware,
    header_name=settings.api_key_header,
    public_paths=settings.get_public_paths(),
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(product_controller.router, prefix=settings.api_prefix)


@app.get("/", response_class=PlainTextResponse)
async def root():
    return WELCOME_MESSAGE


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc):
    logger.warning(
        "HTTP Exception",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
        method=request.method
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.detail),
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request, exc):
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = f"Invalid request: {location} {first.get('msg', '')}".strip() if first else "Invalid request"
    logger.warning(
        "Request Validation Failed",
        path=request.url.path,
        method=request.method,
        errors=[{"loc": e.get("loc"), "msg": e.get("msg")} for e in errors],
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(message),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    request_id = getattr(request.state, "request_id", None)
    logger.error(
        "Unhandled Exception",
        error=str(exc),
        path=request.url.path,
        method=request.method,
        request_id=request_id,
        exc_info=exc,
    )
    # Runs outside the middleware stack, so the request id header is set here
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(INTERNAL_ERROR_MESSAGE),
        headers={"X-Request-ID": request_id} if request_id else None,
    )


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "local",
        log_config=None
    )
