"""Package-wide logger."""
import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(processName)s %(name)s: %(message)s"


def _build_logger() -> logging.Logger:
    log = logging.getLogger("shunting_yard")
    if not log.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        log.addHandler(handler)
    log.setLevel(os.environ.get("SHUNTING_YARD_LOG_LEVEL", "WARNING").upper())
    return log


logger = _build_logger()


def set_verbose(verbose: bool) -> None:
    """Switch the package logger to DEBUG, or back to the configured level."""
    if verbose:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(os.environ.get("SHUNTING_YARD_LOG_LEVEL", "WARNING").upper())
