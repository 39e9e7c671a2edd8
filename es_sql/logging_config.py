"""Logging configuration for processes using the SQL client."""

import logging
import os
from typing import Optional


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure Python logging for the process.

    Args:
        level: Log level name; falls back to LOG_LEVEL, then INFO
    """
    log_level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    # Request lines from the HTTP stacks are noisy at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("elastic_transport").setLevel(logging.WARNING)
