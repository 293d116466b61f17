"""Logging configuration helpers."""

import logging

# The Supabase client logs every PostgREST request at INFO.
_QUIET_LOGGERS = ("httpx", "httpcore", "hpack")


def configure_logging(level: str = "INFO") -> None:
    """Configure the package logger with a single stream handler.

    Safe to call more than once; later calls only adjust the level.
    """
    logger = logging.getLogger("scale_down")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
