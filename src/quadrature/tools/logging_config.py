"""
Logging switches for the quadrature package.

The package is silent by default (NullHandler on the ``quadrature`` logger).
Set ``QUADRATURE_LOGGING=DEBUG`` and call :func:`configure_from_env`, or call
:func:`enable_console_logging` directly, to see the ``verbose`` output of the
integrator and of convergence studies.
"""
from __future__ import annotations

import logging
import os
from typing import Optional, Union

LOGGER_NAME = "quadrature"
ENV_LEVEL = "QUADRATURE_LOGGING"

FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

# above CRITICAL: nothing under the package logger gets through
SILENT = logging.CRITICAL + 1


def _level(level: Union[str, int]) -> int:
    """Numeric level for ``level``; unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def _drop_console(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        if getattr(handler, "quadrature_console", False):
            logger.removeHandler(handler)
            handler.close()


def enable_console_logging(level: Union[str, int] = "INFO",
                           fmt: str = FORMAT) -> logging.StreamHandler:
    """
    Send package records at ``level`` and above to stderr.

    Calling it again replaces the previous console handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    _drop_console(logger)

    handler = logging.StreamHandler()
    handler.quadrature_console = True
    handler.setFormatter(logging.Formatter(fmt))
    handler.setLevel(_level(level))

    logger.addHandler(handler)
    logger.setLevel(_level(level))
    return handler


def set_level(level: Union[str, int]) -> None:
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_level(level))
    for handler in logger.handlers:
        handler.setLevel(_level(level))


def disable_logging() -> None:
    """Silence the package entirely, including records bound for root handlers."""
    logger = logging.getLogger(LOGGER_NAME)
    _drop_console(logger)
    logger.setLevel(SILENT)


def configure_from_env() -> Optional[logging.Handler]:
    """
    Enable console logging at the level named by ``QUADRATURE_LOGGING``.

    Returns the handler, or None if the variable is unset.
    """
    level = os.environ.get(ENV_LEVEL)
    if not level:
        return None
    return enable_console_logging(level)
