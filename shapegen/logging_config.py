"""Logging setup shared by every shapegen module.

Modules obtain a logger with ``get_logger(__name__)``. Nothing is printed
until ``configure_logging`` installs a handler, so library use stays quiet.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "shapegen"

_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger inside the ``shapegen`` hierarchy.

    Args:
        name: Usually the calling module's ``__name__``.

    Returns:
        Logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | int = "WARNING", verbose: bool = False) -> None:
    """Install a rich handler on the package logger.

    Args:
        level: Log level name or number.
        verbose: Show timestamps and source paths.
    """
    global _configured

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    if not _configured:
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=verbose,
            show_path=verbose,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)
        _configured = True
    else:
        for handler in root.handlers:
            handler.setLevel(level)


logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
