"""Logging setup for xsd_codegen.

All package loggers live under the ``xsd_codegen`` namespace so a caller can
tune them in one place. ``configure_logging`` is optional; without it the
library stays silent apart from what the host application configures.
"""

import logging

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "xsd_codegen"

_handler = None


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package root logger.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(level: int | str = logging.WARNING, rich_output: bool = True) -> None:
    """Attach a handler to the package root logger.

    Args:
        level: Logging level (name or number).
        rich_output: Use rich's colored handler instead of a plain stream handler.
    """
    global _handler

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    if _handler is not None:
        if isinstance(_handler, RichHandler) == rich_output:
            return
        root.removeHandler(_handler)

    if rich_output:
        handler: logging.Handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    root.addHandler(handler)
    _handler = handler


def reset_logging() -> None:
    """Remove the handler installed by ``configure_logging``."""
    global _handler

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.NOTSET)
    if _handler is not None:
        root.removeHandler(_handler)
        _handler = None
