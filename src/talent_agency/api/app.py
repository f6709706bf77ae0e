"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic.alias_generators import to_camel
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from talent_agency.api.auth import router as auth_router
from talent_agency.api.models import router as models_router
from talent_agency.app_logging import configure_logging
from talent_agency.containers import AppContainer
from talent_agency.domain.errors import (
    InfrastructureError,
    ModelNotFoundError,
    ModelValidationError,
)

SESSION_COOKIE_NAME = "admin_session"


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    settings = container.settings
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie=SESSION_COOKIE_NAME,
        max_age=settings.session_max_age,
        same_site="lax",
        https_only=settings.environment == "production",
    )

    app.include_router(auth_router)
    app.include_router(models_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.exception_handler(StarletteHTTPException)
    async def http_error(_: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            {"error": exc.detail}, status_code=exc.status_code, headers=exc.headers
        )

    @app.exception_handler(RequestValidationError)
    async def request_invalid(_: Request, exc: RequestValidationError) -> JSONResponse:
        fields = sorted({_error_field(error) for error in exc.errors()})
        return JSONResponse(
            {"error": "Invalid request", "fields": fields},
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(ModelValidationError)
    async def model_invalid(_: Request, exc: ModelValidationError) -> JSONResponse:
        return JSONResponse(
            {
                "error": "Missing required fields",
                "missingFields": [to_camel(name) for name in exc.missing_fields],
            },
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(ModelNotFoundError)
    async def model_not_found(_: Request, __: ModelNotFoundError) -> JSONResponse:
        return JSONResponse(
            {"error": "Model not found"}, status_code=status.HTTP_404_NOT_FOUND
        )

    @app.exception_handler(InfrastructureError)
    async def infrastructure_failed(
        request: Request, exc: InfrastructureError
    ) -> JSONResponse:
        logger.error(
            "Infrastructure failure on %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )
        return JSONResponse(
            {"error": "Internal server error"},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return app


def _error_field(error: dict[str, Any]) -> str:
    """Name the request field an error points at; undecodable JSON is ``body``."""
    if error["type"] == "json_invalid":
        return "body"
    return ".".join(str(part) for part in error["loc"][1:]) or "body"
