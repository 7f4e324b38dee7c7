"""Logger setup for betterset."""
import logging

LOGGER_NAME = "betterset"


def configure_logging(level: int = 15) -> logging.Logger:
    """
    Sends betterset log records at or above level to stderr, unformatted.
    Calling it again only changes the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    stream_handlers = [handler for handler in logger.handlers
                       if isinstance(handler, logging.StreamHandler)]
    if not stream_handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        stream_handlers = [handler]
    for handler in stream_handlers:
        handler.setLevel(level)
    logger.propagate = False
    return logger


def is_configured() -> bool:
    """True once configure_logging has installed its handler."""
    return bool(logging.getLogger(LOGGER_NAME).handlers)
