"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from photoflow.api.client import router as client_router
from photoflow.api.commerce import router as commerce_router
from photoflow.api.gallery import router as gallery_router
from photoflow.api.watermark import router as watermark_router
from photoflow.app_logging import configure_logging
from photoflow.containers import AppContainer
from photoflow.domain.errors import DomainError, ErrorCode
from photoflow.seed import seed_demo_data

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.SESSION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.GALLERY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PHOTO_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.ORDER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PACKAGE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFIG_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SELECTION_LIMIT_REACHED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SELECTION_NOT_ALLOWED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NO_PHOTOS_SELECTED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.ALREADY_PAID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WATERMARK_DISABLED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NO_PHOTOS_TO_PROCESS: status.HTTP_400_BAD_REQUEST,
    ErrorCode.SESSION_NOT_ACTIVE: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_STATUS_TRANSITION: status.HTTP_409_CONFLICT,
    ErrorCode.ACCESS_DENIED: status.HTTP_403_FORBIDDEN,
    ErrorCode.TOKEN_REQUIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_INVALID: status.HTTP_403_FORBIDDEN,
}


def status_for(code: ErrorCode) -> int:
    """HTTP status used when a domain error reaches the API."""
    return _STATUS_BY_CODE.get(code, status.HTTP_400_BAD_REQUEST)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        logger.info(
            "PhotoFlow starting",
            extra={"environment": state_container.settings.environment},
        )
        if state_container.settings.seed_demo_data:
            try:
                demo = seed_demo_data(state_container)
                logger.info("Demo gallery code: %s", demo.session.access_code)
            except Exception:
                logger.exception("Failed to seed demo data")
        yield
        logger.info("PhotoFlow stopped")

    app = FastAPI(title="PhotoFlow", lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        return JSONResponse(
            status_code=status_for(exc.code),
            content={"error": exc.message, "code": exc.code.value},
        )

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Invalid request",
                "code": ErrorCode.VALIDATION_ERROR.value,
                "details": jsonable_encoder(exc.errors()),
            },
        )

    app.include_router(gallery_router)
    app.include_router(client_router)
    app.include_router(commerce_router)
    app.include_router(watermark_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
