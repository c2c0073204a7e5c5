"""Exception handlers rendering radio API errors as ``{"err": ...}`` bodies."""

import logging
import os
import signal

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .exceptions import ConfigError, RadioAPIError

logger = logging.getLogger(__name__)


def request_shutdown() -> None:
    """Ask the server to stop, as if it received SIGTERM."""
    os.kill(os.getpid(), signal.SIGTERM)


def setup_exception_handlers(app: FastAPI) -> None:
    """Setup exception handlers for the app.

    Args:
        app: FastAPI application instance.
    """

    @app.exception_handler(ConfigError)
    async def config_exception_handler(request: Request, exc: ConfigError):
        """Station config broke while serving; the service cannot continue."""
        logger.critical(f"Configuration error: {exc.detail}")
        settings = getattr(app.state, "settings", None)
        if settings is None or settings.exit_on_config_error:
            logger.critical("Shutting down: station config is unusable")
            request_shutdown()
        return JSONResponse(status_code=exc.status_code, content={"err": exc.message})

    @app.exception_handler(RadioAPIError)
    async def radio_exception_handler(request: Request, exc: RadioAPIError):
        """Handle expected request failures without leaking internals."""
        logger.error(f"{request.method} {request.url.path}: {exc.message} ({exc.detail})")
        return JSONResponse(status_code=exc.status_code, content={"err": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle malformed request bodies."""
        logger.warning(f"Validation error: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"err": "Invalid request", "detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other exceptions."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"err": "Internal server error"},
        )
