"""Logging configuration for the notemark service."""

import logging
import sys


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stderr handler to the ``notemark`` logger at ``level``.

    Safe to call more than once; an existing stderr handler is reused.
    """
    app_logger = logging.getLogger("notemark")
    app_logger.setLevel(level.upper())

    if not any(
        isinstance(h, logging.StreamHandler) and h.stream == sys.stderr
        for h in app_logger.handlers
    ):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        app_logger.addHandler(handler)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return app_logger
