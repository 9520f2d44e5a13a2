"""Logging para la CLI (Rich).

Por qué aquí:
- stdout queda reservado para la salida de `cat`; los logs van a stderr.
- Los módulos solo hacen `logging.getLogger(__name__)`; la CLI decide el handler.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_ROOT_LOGGER_NAMES = ("adapters", "cli", "core")


def configure_logging(level: str = "WARNING", *, console: Console | None = None) -> None:
    """Instala un `RichHandler` en stderr. Llamarlo dos veces no duplica handlers."""

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    for name in _ROOT_LOGGER_NAMES:
        logger = logging.getLogger(name)
        for existing in list(logger.handlers):
            if isinstance(existing, RichHandler):
                logger.removeHandler(existing)
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False
