"""Logging mínimo del proyecto.

Usa el `logging` de la stdlib con el handler de Rich, así los mensajes de
servicios y CLI comparten el mismo formato en consola.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_ROOT_NAME = "aquamonitor"


def get_logger(name: str | None = None, level: str | None = None) -> logging.Logger:
    """Devuelve un logger hijo de `aquamonitor`, configurando el handler una sola vez.

    Args:
        name: sufijo del logger (p.ej. "loader" -> "aquamonitor.loader").
        level: nivel opcional ("INFO", "DEBUG"...). Si se omite, conserva el actual.
    """

    root = logging.getLogger(_ROOT_NAME)
    root.propagate = False

    if level is not None:
        root.setLevel(level.upper())
    elif root.level == logging.NOTSET:
        root.setLevel(logging.INFO)

    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)

    if not name:
        return root
    return root.getChild(name)
