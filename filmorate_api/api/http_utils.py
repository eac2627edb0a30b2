import logging
from functools import wraps
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from filmorate_api.core.exceptions import (
    FilmorateError,
    NotFoundError,
    ValidationError,
)

log = logging.getLogger(__name__)

ERRMAP: dict[type[FilmorateError], HTTPStatus] = {
    ValidationError: HTTPStatus.BAD_REQUEST,
    NotFoundError: HTTPStatus.NOT_FOUND,
}


def error_response(status: HTTPStatus, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message})


def handle_domain_errors(mapping: dict[type[FilmorateError], HTTPStatus]):
    """
    Translate domain errors raised by the services into JSON responses.
    Example mapping: {NotFoundError: 404, ValidationError: 400}.
    Anything not in the mapping propagates (it is a defect, not a
    caller mistake).
    """
    def decorator(fn):
        @wraps(fn)
        async def wrapper(*args, **kwargs):
            try:
                return await fn(*args, **kwargs)
            except FilmorateError as e:
                for error_cls, status in mapping.items():
                    if isinstance(e, error_cls):
                        log.warning(
                            "request_rejected",
                            extra={"status": int(status),
                                   "error": e.message})
                        return error_response(status, e.message)
                raise
        return wrapper
    return decorator


async def request_validation_handler(
        request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed payloads are caller errors too: 400 with one message."""
    messages = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        messages.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg"))
    message = "; ".join(messages) or "invalid request"
    log.warning("request_invalid",
                extra={"path": request.url.path, "error": message})
    return error_response(HTTPStatus.BAD_REQUEST, message)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError,
                              request_validation_handler)
