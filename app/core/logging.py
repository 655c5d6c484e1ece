"""Logging setup: stdlib logging with the request correlation id on every record."""

import logging
import sys

from asgi_correlation_id import CorrelationIdFilter

from app.core.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%SZ"


def configure_logging(settings: Settings) -> None:
    """Configure the root logger once; later calls only adjust the level."""
    root = logging.getLogger()
    if any(getattr(h, "_webeditor_handler", False) for h in root.handlers):
        root.setLevel(settings.LOG_LEVEL)
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter(uuid_length=32, default_value="-"))
    handler._webeditor_handler = True  # type: ignore[attr-defined]
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=[handler],
    )
    root.setLevel(settings.LOG_LEVEL)
