"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from fitness_tracker.api.files import router as files_router
from fitness_tracker.api.records import router as records_router
from fitness_tracker.api.views import router as views_router
from fitness_tracker.app_logging import configure_logging
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.errors import (
    FileFormatError,
    InvalidRecordError,
    RecordNotFoundError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Fitness Tracker")
    app.state.container = container

    app.include_router(records_router)
    app.include_router(views_router)
    app.include_router(files_router)

    @app.exception_handler(FileFormatError)
    async def file_format_error(request: Request, exc: FileFormatError) -> JSONResponse:
        logger.warning(
            "Rejected uploaded file",
            extra={"path": request.url.path, "error": str(exc)},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)}
        )

    @app.exception_handler(RecordNotFoundError)
    async def record_not_found(
        request: Request, exc: RecordNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(InvalidRecordError)
    async def invalid_record(
        request: Request, exc: InvalidRecordError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
