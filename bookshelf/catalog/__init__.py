"""
Catalog package for the book catalogue API.

It holds the wire schemas, the lock-guarded in-memory store and the
``/api/books`` routes. The catalogue lives only as long as the
process; nothing is written to disk.
"""

from .router import router as catalog_router  # noqa: F401
