"""Domain exceptions and their HTTP translation."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from loguru import logger


class RFMError(Exception):
    """Base class for errors raised by the RFM pipeline."""


class InvalidArgumentError(RFMError, ValueError):
    """Raised when a pipeline stage receives input it cannot work with."""


def init_error_handlers(app: FastAPI) -> None:
    """Translate pipeline errors into 400 responses."""

    async def invalid_argument_handler(request: Request, exc: InvalidArgumentError):
        logger.bind(path=str(request.url.path)).warning("invalid_argument: {}", exc)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc)},
        )

    app.add_exception_handler(InvalidArgumentError, invalid_argument_handler)
