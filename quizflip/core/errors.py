"""Domain errors raised by services and their HTTP mapping."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class QuizFlipError(Exception):
    """Base exception for the service layer."""

    status_code = 500
    default_message = "Server Error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_body(self) -> dict:
        return {"detail": self.message}


class ValidationFailed(QuizFlipError):
    """Raised when input passes schema checks but is still unusable."""

    status_code = 422
    default_message = "Validation error"

    def __init__(self, errors: list[dict], message: str | None = None):
        self.errors = errors
        super().__init__(message)

    def to_body(self) -> dict:
        return {"detail": self.message, "errors": self.errors}


class Unauthenticated(QuizFlipError):
    status_code = 401
    default_message = "No valid token, authorization denied"


class InvalidCredentials(QuizFlipError):
    status_code = 400
    default_message = "Invalid Credentials"


class Unauthorized(QuizFlipError):
    status_code = 403
    default_message = "Not authorized"


class NotFound(QuizFlipError):
    status_code = 404
    default_message = "Not found"


class Conflict(QuizFlipError):
    status_code = 409
    default_message = "Already exists"


class Internal(QuizFlipError):
    status_code = 500


async def quizflip_error_handler(request: Request, exc: QuizFlipError) -> JSONResponse:
    if isinstance(exc, Internal):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, Unauthenticated) else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_body(), headers=headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content=Internal().to_body())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(QuizFlipError, quizflip_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
