"""
In-memory data store for the catalogue API.

``BookStore`` owns the list of books for the lifetime of the process.
Nothing outside the store touches that list: handlers go through
``create``, ``list_by_title`` and ``clear``. Requests are served from
a thread pool, so every access is serialised with a single
``threading.Lock``.

Identifiers come from a counter kept next to the list. The counter is
bumped once per stored book and is not reset by ``clear``, so an
identifier is never handed out twice.
"""

from __future__ import annotations

import logging
import threading
from typing import List

from .schemas import Book, BookIn


logger = logging.getLogger(__name__)


class BookStore:
    """Ordered, lock-guarded collection of :class:`Book` records."""

    def __init__(self) -> None:
        self._books: List[Book] = []
        self._next_id = 1
        self._lock = threading.Lock()

    def create(self, book_in: BookIn) -> Book:
        """Assign the next identifier to ``book_in`` and append it.

        Parameters
        ----------
        book_in : BookIn
            The validated client payload.

        Returns
        -------
        Book
            The stored record, including its identifier.
        """
        with self._lock:
            book = Book(
                id=self._next_id,
                author=book_in.author,
                title=book_in.title,
                yearPublished=book_in.yearPublished,
            )
            self._books.append(book)
            self._next_id += 1
        logger.info("Stored book %d (%r)", book.id, book.title)
        return book

    def list_by_title(self) -> List[Book]:
        """Return a copy of the catalogue sorted by title.

        Titles are compared as plain strings (code point order). The
        stored insertion order is left as it is.
        """
        with self._lock:
            snapshot = list(self._books)
        return sorted(snapshot, key=lambda b: b.title)

    def clear(self) -> int:
        """Remove every book and return how many were removed."""
        with self._lock:
            removed = len(self._books)
            self._books.clear()
        logger.info("Cleared catalogue (%d books removed)", removed)
        return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def in_insertion_order(self) -> List[Book]:
        with self._lock:
            return list(self._books)
