"""Logging setup for the kernel's own loggers.

Every kernel module logs through ``logging.getLogger(__name__)``, so all
records land under the ``linalg_lib`` logger. The kernel only emits DEBUG
records, on degenerate fallbacks such as the centroid returned for parallel
lines. :func:`configure_kernel_logging` makes them visible without touching
the root logger or any other library's loggers.
"""

from __future__ import annotations

import logging
from typing import IO, Optional

PACKAGE_LOGGER = 'linalg_lib'

# Marks handlers installed here so a later call can replace them
_HANDLER_FLAG = '_linalg_lib_handler'


def configure_kernel_logging(
    level: str = 'DEBUG', stream: Optional[IO[str]] = None
) -> logging.Logger:
    """Send the kernel's log records to a stream.

    Sets the level of the ``linalg_lib`` logger and attaches one stream
    handler to it. Calling again replaces the handler from the previous
    call; handlers added by the application are left in place. Records
    still propagate, so an application that already configures the root
    logger will see them twice.

    Args:
        level: Level name ('DEBUG', 'INFO', ...). Unknown names mean DEBUG.
        stream: Where to write, defaults to stderr.

    Returns:
        The configured ``linalg_lib`` logger.

    Example:
        Watch for degenerate fallbacks while debugging a toolpath::

            from linalg_lib.utils import configure_kernel_logging
            configure_kernel_logging()
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, level.upper(), logging.DEBUG))

    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            package_logger.removeHandler(handler)
            handler.close()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter('%(levelname)s [%(name)s] %(message)s'))
    setattr(handler, _HANDLER_FLAG, True)
    package_logger.addHandler(handler)
    return package_logger
