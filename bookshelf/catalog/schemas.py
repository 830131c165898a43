"""
Pydantic schema definitions for the catalog module.

``BookIn`` is the shape a client submits when adding a book. It is
strict on purpose: a string where an integer belongs, a year outside
the unsigned 64-bit range or an unknown key (including ``id``, which
only the server assigns) all fail validation instead of being
coerced. Missing keys fall back to their zero value. ``Book`` is the
stored record returned to clients, and ``BookList`` wraps the listing
under a ``books`` key.

Field names are the wire names, so ``yearPublished`` stays camel-case.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


MAX_YEAR = 2**64 - 1


class BookIn(BaseModel):
    """A book as submitted by a client, without an identifier."""

    model_config = ConfigDict(extra="forbid", strict=True)

    author: str = ""
    title: str = ""
    yearPublished: int = Field(default=0, ge=0, le=MAX_YEAR)


class Book(BaseModel):
    """A single catalogue entry."""

    author: str
    title: str
    yearPublished: int = Field(ge=0, le=MAX_YEAR)
    id: int = Field(ge=0)


class BookList(BaseModel):
    """Wrapper returned by ``GET /api/books``."""

    books: List[Book]


class ErrorMessage(BaseModel):
    message: str
