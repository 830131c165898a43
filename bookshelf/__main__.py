"""Run the book catalogue with uvicorn.

Usage::

    python -m bookshelf

Host, port, timeout and log level come from ``bookshelf.config``.
"""

import logging

from uvicorn import Config, Server

from .config import settings
from .logging_config import setup_logging


logger = logging.getLogger("bookshelf")


def main() -> None:
    setup_logging(settings.log_level)
    config = Config(
        app="bookshelf.main:app",
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=int(settings.request_timeout),
        log_level=settings.log_level.lower(),
        reload=False,
    )
    logger.info("Serving book catalogue on %s:%d", settings.host, settings.port)
    Server(config).run()


if __name__ == "__main__":
    main()
