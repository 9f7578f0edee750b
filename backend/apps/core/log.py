"""Logging setup shared by the API and scripts."""
import logging

from apps.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_HANDLER_NAME = "mood-lens"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a single stream handler to the root logger (safe to call twice)."""
    root = logging.getLogger()
    root.setLevel((level or settings.LOG_LEVEL).upper())
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return root

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    return root
