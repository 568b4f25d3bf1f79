"""
Logging Configuration
The library only emits records; the runner decides what to show.

Console output is quiet (warnings only) unless verbose, in which case the
per-step simulator and per-iteration optimizer messages are shown. A log
file, when given, always captures the full debug trace.
"""
import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "apollo"

CONSOLE_FORMAT = '%(asctime)s %(levelname)-7s %(message)s'
FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the logger for the 'apollo' namespace.

    Args:
        verbose: Show debug messages on the console instead of warnings only.
        log_file: Optional path to write the full debug log to.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)

    # Calling again replaces the previous configuration
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    console_level = logging.DEBUG if verbose else logging.WARNING
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    logger.setLevel(logging.DEBUG if (verbose or log_file) else logging.WARNING)
    logger.debug("Logging initialized (verbose=%s, log_file=%s)", verbose, log_file)
    return logger
