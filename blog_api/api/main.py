"""
FastAPI application entrypoint with middleware, lifecycle, and error handling.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..config import get_settings
from ..logger import setup_logging
from .dependencies import lifespan_dependencies
from .errors import GatewayError
from .routes import admin_router, comments_router, posts_router, users_router
from .schemas import ErrorDetail, ErrorResponse

LOGGER = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Application Lifespan
# -----------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan context manager.

    The database engine lives for the whole process and is disposed here.
    """
    settings = get_settings()
    setup_logging(settings)

    LOGGER.info(
        "Starting %s v%s in %s environment",
        settings.app.name,
        settings.app.version,
        settings.app.environment.value,
    )

    async with lifespan_dependencies(settings):
        yield

    LOGGER.info("Application shutdown complete.")


def _error_response(request: Request, status_code: int, error: ErrorResponse) -> JSONResponse:
    error.request_id = getattr(request.state, "request_id", None)
    return JSONResponse(status_code=status_code, content=error.model_dump(exclude_none=True))


# -----------------------------------------------------------------------------
# Application Factory
# -----------------------------------------------------------------------------


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns a fully configured FastAPI instance with all routes and middleware.
    """
    settings = get_settings()
    docs = settings.app.docs_enabled

    app = FastAPI(
        title=settings.app.name,
        version=settings.app.version,
        description="CRUD gateway over the usuarios, publicaciones and comentarios tables",
        docs_url="/api-docs" if docs else None,
        redoc_url=None,
        openapi_url="/api-docs/openapi.json" if docs else None,
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # Request Logging Middleware
    # -------------------------------------------------------------------------

    @app.middleware("http")
    async def request_logging_middleware(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Log request details and add request ID header."""
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        start_time = time.perf_counter()

        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception:
            LOGGER.exception(
                "Unhandled exception for %s %s [%s]",
                request.method,
                request.url.path,
                request_id,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000

        LOGGER.info(
            "%s %s -> %d (%.2fms) [%s]",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request_id,
        )

        response.headers["X-Request-ID"] = request_id
        return response

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    @app.exception_handler(GatewayError)
    async def gateway_exception_handler(request: Request, exc: GatewayError) -> JSONResponse:
        """Render not-found and storage failures as the ``{error}`` envelope."""
        return _error_response(request, exc.status_code, ErrorResponse(error=exc.message))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Handle routing-level HTTP errors (unknown path, wrong method)."""
        return _error_response(request, exc.status_code, ErrorResponse(error=str(exc.detail)))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle malformed bodies with detailed field information."""
        details = [
            ErrorDetail(
                field=".".join(str(loc) for loc in error.get("loc", [])),
                message=error.get("msg", "Validation error"),
                code=error.get("type"),
            )
            for error in exc.errors()
        ]
        return _error_response(
            request,
            status.HTTP_422_UNPROCESSABLE_ENTITY,
            ErrorResponse(error="Solicitud inválida", details=details),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        LOGGER.exception("Unhandled exception: %s", exc)

        message = str(exc) if settings.app.debug else "Error interno del servidor"
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorResponse(error=message),
        )

    # -------------------------------------------------------------------------
    # Route Registration
    # -------------------------------------------------------------------------

    app.include_router(users_router)
    app.include_router(admin_router)
    app.include_router(posts_router)
    app.include_router(comments_router)

    return app


# -----------------------------------------------------------------------------
# Application Instance
# -----------------------------------------------------------------------------

app = create_app()


__all__ = ["app", "create_app"]
