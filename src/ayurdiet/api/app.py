"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from ayurdiet.api.ai import router as ai_router
from ayurdiet.api.foods import router as foods_router
from ayurdiet.api.patients import router as patients_router
from ayurdiet.api.policies import router as policies_router
from ayurdiet.app_logging import configure_logging
from ayurdiet.containers import AppContainer
from ayurdiet.domain.errors import (
    AyurDietError,
    GenerationBackendError,
    GenerationContractViolation,
    InvalidDoshaType,
    InvalidNutrientKey,
    PatientNotFound,
    SpeechBackendError,
    StoreUnavailable,
    WeatherUnavailable,
)

_ERROR_STATUS: dict[type[AyurDietError], int] = {
    InvalidNutrientKey: status.HTTP_400_BAD_REQUEST,
    InvalidDoshaType: status.HTTP_400_BAD_REQUEST,
    PatientNotFound: status.HTTP_404_NOT_FOUND,
    GenerationBackendError: status.HTTP_502_BAD_GATEWAY,
    GenerationContractViolation: status.HTTP_502_BAD_GATEWAY,
    SpeechBackendError: status.HTTP_502_BAD_GATEWAY,
    WeatherUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
    StoreUnavailable: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(ai_router)
    app.include_router(foods_router)
    app.include_router(patients_router)
    app.include_router(policies_router)

    @app.exception_handler(AyurDietError)
    async def engine_error(request: Request, exc: AyurDietError) -> JSONResponse:
        status_code = error_status(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.warning(
                "Request failed: %s %s: %s",
                request.method,
                request.url.path,
                exc,
            )
        return JSONResponse(status_code=status_code, content={"error": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def error_status(exc: AyurDietError) -> int:
    """Map an engine error to its HTTP status code."""
    for error_type, status_code in _ERROR_STATUS.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR
