"""
Centralized error handling for the application.
"""

import traceback
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from tubesummary.utils.logger import logging

GENERIC_ERROR_MESSAGE = "Unable to process this video. Please try a different one."


class SummarizerError(Exception):
    """Base exception for errors that are reported to the caller."""

    status_code = 500
    message = GENERIC_ERROR_MESSAGE

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class UserInputError(SummarizerError):
    """Missing or malformed video URL."""

    status_code = 400


class UpstreamUnavailableError(SummarizerError):
    """Video information could not be fetched."""

    status_code = 400
    message = "Could not fetch video information. Please check the URL."


class ProcessingError(SummarizerError):
    """Unexpected failure while processing a video."""

    status_code = 500


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the JSON body every error response shares."""
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """
    Attach the application exception handlers.

    Known errors keep their message; everything else is reported with the
    generic message and logged server-side only.
    """

    @app.exception_handler(SummarizerError)
    async def summarizer_error_handler(request: Request, exc: SummarizerError):
        if exc.status_code >= 500:
            logging.error(f"Processing failed for {request.url.path}: {exc.message}")
        else:
            logging.info(f"Rejected request to {request.url.path}: {exc.message}")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logging.error(f"Unreadable request body for {request.url.path}: {exc.errors()}")
        return error_response(500, GENERIC_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled exceptions."""
        logging.error(f"Unhandled error for {request.url.path}: {str(exc)}")
        logging.error("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))
        return error_response(500, GENERIC_ERROR_MESSAGE)
