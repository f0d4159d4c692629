"""Logging helpers shared by all paginate modules."""

import logging
import os

LOG_LEVEL_ENV = "PAGINATE_LOG_LEVEL"
ROOT_LOGGER_NAME = "paginate"

_configured = False


def _configure_root() -> None:
    global _configured
    if _configured:
        return
    root = logging.getLogger(ROOT_LOGGER_NAME)
    level_name = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    root.setLevel(getattr(logging, level_name, logging.WARNING))
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
        root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the paginate namespace.

    The level is read once from PAGINATE_LOG_LEVEL (default WARNING).
    """
    _configure_root()
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
