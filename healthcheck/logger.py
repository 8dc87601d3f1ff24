"""
Logging configuration.

Reports go to stdout, so diagnostics are written to stderr.
"""
import logging

LOGGER_NAME = "healthcheck"

# Create logger
logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(logging.WARNING)

# Formatter
formatter = logging.Formatter(
    "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)


def get_logger(name: str) -> logging.Logger:
    """Get a child logger, e.g. get_logger(__name__)."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logger.getChild(name)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Attach a stderr handler to the package logger.

    Replaces any handler added by a previous call, so the handler always
    writes to the current sys.stderr.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
