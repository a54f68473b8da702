"""Logging for marklex.

Every marklex logger hangs off the ``marklex`` root logger. The root gets a
NullHandler and nothing else, so an application that never configures
logging sees no "No handlers could be found" noise, and one that does
routes marklex records wherever it routes everything else.

The classifiers and normalizers run once per character and never log;
only configuration handling does.

Example:
    >>> from marklex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Ignoring unknown LexConfig keys: %s", "tabs")
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "marklex"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger in the marklex namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger named ``marklex.<name>`` unless name already is
        ``marklex`` or one of its submodules.

    Example:
        >>> get_logger("mymodule").name
        'marklex.mymodule'
        >>> get_logger("marklex.config").name
        'marklex.config'
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
