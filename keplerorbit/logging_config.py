"""
Console and file logging for the ``keplerorbit`` command line.
"""
import logging
import sys
from typing import Optional

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Send ``keplerorbit`` log records to stderr, and to ``log_file`` when given.

    Calling it again replaces the handlers installed by the previous call.
    """
    logger = logging.getLogger('keplerorbit')
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    for handler in handlers:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
