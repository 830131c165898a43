# bookshelf/errors.py
"""
Error envelope shared by every failure path.

Handlers signal failures by raising ``HTTPException`` with a message
as ``detail``; the handlers registered by ``register_exception_handlers``
turn that into ``{"message": "..."}`` with a JSON content type. The
framework's own errors (unknown route, wrong method, request
validation) go through the same envelope.
"""

import logging
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)

UNSUPPORTED_MEDIA_TYPE = 415
BAD_REQUEST = 400
BAD_GATEWAY = 502
INTERNAL_SERVER_ERROR = 500

# pydantic error types that mean "right key, wrong kind of value".
_TYPE_MISMATCH_ERRORS = {
    "string_type",
    "int_type",
    "int_from_float",
    "int_parsing",
    "int_parsing_size",
    "greater_than_equal",
    "less_than_equal",
}


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def media_type_error() -> HTTPException:
    return HTTPException(
        status_code=UNSUPPORTED_MEDIA_TYPE,
        detail="Content Type is not application/json",
    )


def decode_error(errors: List[Dict[str, Any]]) -> HTTPException:
    """Translate pydantic validation errors into a single client error.

    ``errors`` comes from a ``ValidationError`` and is never empty.
    The first error decides the outcome. A known field holding the
    wrong type and an unexpected field both name the field and give
    400; anything else (broken JSON, empty body, a top-level value
    that is not an object) is a generic decode failure reported as
    502.
    """
    first = errors[0]
    loc = first.get("loc") or ()
    field = str(loc[0]) if loc else ""
    kind = first.get("type", "")

    if kind == "extra_forbidden" and field:
        return HTTPException(
            status_code=BAD_REQUEST,
            detail=f'bad request: unknown field "{field}"',
        )
    if kind in _TYPE_MISMATCH_ERRORS and field:
        return HTTPException(
            status_code=BAD_REQUEST,
            detail=f"bad request: incorrect type provided for field {field}",
        )
    return HTTPException(
        status_code=BAD_GATEWAY,
        detail=f"bad request: {first.get('msg', 'invalid body')}",
    )


def encode_error(exc: Exception) -> HTTPException:
    return HTTPException(
        status_code=INTERNAL_SERVER_ERROR,
        detail=f"json marshall error: {exc}",
    )


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    response = error_response(str(exc.detail), exc.status_code)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    http_exc = decode_error(list(exc.errors()))
    return error_response(http_exc.detail, http_exc.status_code)


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response("internal server error", INTERNAL_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
