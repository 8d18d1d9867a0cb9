"""Logging configuration for the pyzypper command-line interface."""

import logging

from rich.logging import RichHandler


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """Configure the pyzypper logger to write through Rich.

    Args:
        level: Logging level for the pyzypper logger.

    Returns:
        The configured "pyzypper" logger, suitable for passing to Client.
    """
    logger = logging.getLogger("pyzypper")
    logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(show_path=False, rich_tracebacks=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    return logger
