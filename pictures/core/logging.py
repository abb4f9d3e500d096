from __future__ import annotations

import logging

from pictures.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_handler: logging.Handler | None = None


def configure_logging(level: str | None = None) -> None:
    """Install one stream handler on the root logger.

    Safe to call more than once; later calls only adjust the level.
    """
    global _handler

    resolved = str(level or settings.log_level or "INFO").strip().upper()
    root = logging.getLogger()
    root.setLevel(resolved)

    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(_handler)

    if not settings.database_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
