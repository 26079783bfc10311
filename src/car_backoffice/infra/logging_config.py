from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging() -> None:
    """Configure root logging from LOG_LEVEL. Safe to call more than once."""
    logging.basicConfig(level=log_level(), format=LOG_FORMAT)
    logging.getLogger().setLevel(log_level())
