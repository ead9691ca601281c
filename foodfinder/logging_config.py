"""
Console logging setup for the food search service.
"""
from __future__ import annotations

import logging
import sys


def setup_logging(log_level: str = "INFO") -> None:
    """
    Configure root logging with a single stdout handler.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates on reload
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Third-party noise
    for name in ("uvicorn.access", "httpx", "httpcore", "groq"):
        logging.getLogger(name).setLevel(logging.WARNING)
