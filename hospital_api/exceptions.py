import logging
from typing import Any, Dict, Optional

from fastapi import Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base for every failure a handler turns into an HTTP response."""
    status_code: int = 500
    default_message: str = "Server error"

    def __init__(self, message: Optional[str] = None, error: Optional[str] = None):
        self.message = message or self.default_message
        self.error = error
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Validation failed"


class ConflictError(AppError):
    status_code = 409
    default_message = "Resource already exists"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Not found"


class AuthError(AppError):
    status_code = 401
    default_message = "Invalid email or password"


class StoreError(AppError):
    status_code = 500
    default_message = "Server error"


def create_error_response(message: str, error: Optional[str] = None) -> Dict[str, Any]:
    """Create a standardized error envelope"""
    body: Dict[str, Any] = {"success": False, "message": message}
    if error is not None:
        body["error"] = error
    return body


def create_success_response(
    data: Any = None,
    message: Optional[str] = None,
    token: Optional[str] = None,
) -> Dict[str, Any]:
    """Create a standardized success envelope; keys that do not apply are omitted."""
    body: Dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    if token is not None:
        body["token"] = token
    return body


def json_response(content: Dict[str, Any], status_code: int = 200) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def error_to_response(exc: AppError) -> JSONResponse:
    """Single mapping from the error taxonomy to status code + body."""
    return json_response(create_error_response(exc.message, exc.error), exc.status_code)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, StoreError):
        logger.error(f"Store failure on {request.method} {request.url.path}: {exc.error}")
    return error_to_response(exc)


def validation_message(message: str):
    """Route dependency naming the 400 message used when the body fails validation."""
    async def _set_message(request: Request) -> None:
        request.state.validation_message = message
    return Depends(_set_message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Missing or malformed body fields become a 400 instead of FastAPI's default 422."""
    fields = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        if loc and loc[0] not in fields:
            fields.append(loc[0])
    message = getattr(request.state, "validation_message", None) or "Missing required fields"
    error = ", ".join(fields) if fields else None
    return error_to_response(ValidationError(message, error))
