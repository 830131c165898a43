# bookshelf/main.py
import asyncio
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .catalog import catalog_router
from .catalog.store import BookStore
from .config import Settings, settings as default_settings
from .errors import error_response, register_exception_handlers
from .logging_config import setup_logging


logger = logging.getLogger(__name__)

HEALTH_TEXT = "Don't panic."


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application with an empty catalogue."""
    settings = settings or default_settings
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        description="In-memory book catalogue: add, list and clear books.",
        version=settings.api_version,
    )
    app.state.settings = settings
    app.state.store = BookStore()

    register_exception_handlers(app)

    @app.middleware("http")
    async def request_timeout(request: Request, call_next):
        try:
            return await asyncio.wait_for(call_next(request), timeout=settings.request_timeout)
        except asyncio.TimeoutError:
            logger.warning(
                "%s %s exceeded %.1fs", request.method, request.url.path, settings.request_timeout
            )
            return error_response("request timed out", 503)

    @app.get("/health", response_class=PlainTextResponse)
    def health_check():
        return HEALTH_TEXT

    app.include_router(catalog_router)
    return app


app = create_app()
