"""Logging de la aplicación.

Los logs van a stderr a través de Rich para no mezclarse con la salida del
menú; por defecto solo se muestran warnings.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str = "WARNING") -> None:
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    # httpx loguea cada request a INFO.
    logging.getLogger("httpx").setLevel(logging.WARNING)
