"""
Error taxonomy for the menu API.

Every business-rule failure is a ``MenuboardError`` carrying the HTTP status
and the key its message is reported under. Bodies are flat objects with one
human-readable string, e.g. ``{"message": "..."}`` or ``{"error": "..."}``.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

log = logging.getLogger(__name__)


class MenuboardError(Exception):
    status_code = 400
    body_key = "message"
    default_message = "Request could not be processed."

    def __init__(self, message: str = None, body_key: str = None):
        self.message = message or self.default_message
        if body_key:
            self.body_key = body_key
        super().__init__(self.message)

    def to_body(self) -> dict:
        return {self.body_key: self.message}


class OwnerOnlyError(MenuboardError):
    # Reported as 400, not 403, for compatibility with existing clients
    default_message = "Only owners can use this API."


class CategoryNotFoundError(MenuboardError):
    body_key = "error"
    default_message = "Category does not exist."


class MenuNotFoundError(MenuboardError):
    body_key = "error"
    default_message = "Menu does not exist."


class NotMenuAuthorError(MenuboardError):
    status_code = 401
    default_message = "You do not have permission to modify this menu."


def _first_validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request."
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    msg = first.get("msg", "Invalid value")
    return f"{location}: {msg}" if location else msg


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(MenuboardError)
    async def menuboard_error_handler(request: Request, exc: MenuboardError):
        log.warning(
            "%s %s refused (%s): %s",
            request.method, request.url.path, exc.status_code, exc.message,
        )
        return JSONResponse(exc.to_body(), status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        message = _first_validation_message(exc)
        log.info("%s %s rejected: %s", request.method, request.url.path, message)
        return JSONResponse({"message": message}, status_code=400)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        log.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse({"message": "Internal server error."}, status_code=500)
