"""
Route definitions for the catalogue API.

Endpoints under /api/books:
- POST   : add one book (JSON body, server assigns the id)
- GET    : list every book, sorted by title
- DELETE : remove every book
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool
from pydantic import ValidationError

from ..errors import decode_error, encode_error, media_type_error
from .schemas import Book, BookIn, BookList, ErrorMessage
from .store import BookStore


logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"

router = APIRouter(prefix="/api/books", tags=["books"])


def get_store(request: Request) -> BookStore:
    """Return the store attached to the running application."""
    return request.app.state.store


def _is_json(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == JSON_MEDIA_TYPE


def _encode(model) -> str:
    return model.model_dump_json()


def _json_response(model, status_code: int) -> Response:
    try:
        body = _encode(model)
    except (ValueError, TypeError) as exc:
        logger.error("Could not serialise %s: %s", type(model).__name__, exc)
        raise encode_error(exc)
    return Response(content=body, status_code=status_code, media_type=JSON_MEDIA_TYPE)


@router.post(
    "",
    status_code=201,
    response_model=Book,
    responses={400: {"model": ErrorMessage}, 415: {"model": ErrorMessage}, 502: {"model": ErrorMessage}},
)
async def add_book(request: Request, store: BookStore = Depends(get_store)) -> Response:
    """Add a book to the catalogue.

    The body is decoded here rather than through a typed parameter so
    that the content type is checked before anything is read and so
    that decode failures map onto our own error codes.
    """
    if not _is_json(request.headers.get("content-type", "")):
        raise media_type_error()

    raw = await request.body()
    try:
        book_in = BookIn.model_validate_json(raw)
    except ValidationError as exc:
        logger.warning("Rejected book payload: %s", exc.errors(include_url=False))
        raise decode_error(exc.errors(include_url=False))

    # The store lock is also taken by the sync handlers in the threadpool.
    book = await run_in_threadpool(store.create, book_in)
    return _json_response(book, 201)


# Listing answers 201 rather than 200; existing clients expect it.
@router.get("", status_code=201, response_model=BookList, responses={500: {"model": ErrorMessage}})
def list_books(store: BookStore = Depends(get_store)) -> Response:
    return _json_response(BookList(books=store.list_by_title()), 201)


@router.delete("", status_code=204, response_class=Response)
def delete_books(store: BookStore = Depends(get_store)) -> Response:
    store.clear()
    return Response(status_code=204)
