from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.platform.logger import get_logger
from app.platform.response import error_response

logger = get_logger(__name__)

INTERNAL_SERVER_ERROR = "Internal server error"
INVALID_REQUEST_BODY = "Invalid request body"


class WaitlistError(Exception):
    """Base class for waitlist domain errors."""


class DuplicateEmailError(WaitlistError):
    """The store already holds an entry with this email."""

    def __init__(self, email: str):
        super().__init__(f"Email already registered: {email}")
        self.email = email


class InvalidEmailDomainError(WaitlistError):
    """The email domain cannot receive mail. `message` is safe to show the caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def add_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(error=str(exc.detail) or "Error", status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Rejected malformed request body on {request.method} {request.url.path}")
        return error_response(error=INVALID_REQUEST_BODY, status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled exception on {request.method} {request.url.path}: {exc}")
        return error_response(
            error=INTERNAL_SERVER_ERROR,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
