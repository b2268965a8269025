import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def get_logger(name: str, level: int = logging.INFO, handler: Optional[logging.Handler] = None) -> logging.Logger:
    """Configure and return a logger."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level)
        stream_handler = handler or logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
        logger.addHandler(stream_handler)
    return logger


def configure_domain_logging(level: int, handler: Optional[logging.Handler] = None) -> logging.Logger:
    """Route swing pipeline diagnostics (``domain.*`` loggers) to a stream handler."""
    logger = get_logger("domain", level=level, handler=handler)
    logger.setLevel(level)
    return logger
