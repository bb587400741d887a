"""
Logging setup for the navigator.

Render bounds, navigation steps and display failures are all logged under
the 'mandelbrot_navigator' logger; this module attaches its handlers.
"""
import logging
import sys


LOGGER_NAME = "mandelbrot_navigator"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level=logging.INFO, log_file=None):
    """
    Send navigator log records to stdout and, optionally, a file.

    Calling it again replaces the handlers from the previous call.

    Args:
        level: Level number or name ('DEBUG' shows every navigation step)
        log_file: Optional path of a log file, truncated on open
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %s", log_file or "stdout")
