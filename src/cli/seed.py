"""Entry point del seed.

Envuelve la rutina de seed: reporta en consola y convierte cualquier fallo
en código de salida 1. Es el único flujo donde un error es fatal.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

from rich.console import Console

from adapters.seeder import SeedReport, seed_database
from cli.ui_components import build_seed_table
from core.logger import get_logger

Seeder = Callable[[], Awaitable[object]]

_console = Console()
_log = get_logger("seed")


def run_seed(seeder: Seeder | None = None, *, console: Console | None = None) -> int:
    """Ejecuta `seeder` (por defecto `seed_database`) y devuelve el exit code."""

    console = console or _console
    seeder = seeder or seed_database

    console.print("🚀 Iniciando seed de la base de datos AquaMonitor...")
    console.print("")
    try:
        result = asyncio.run(seeder())
    except Exception as exc:
        _log.error("seed abortado", exc_info=exc)
        console.print(f"💥 Error durante el seed: {exc}", markup=False, highlight=False, emoji=False)
        return 1

    console.print("")
    console.print("🎉 ¡Seed completado exitosamente!")
    if isinstance(result, SeedReport):
        console.print(build_seed_table(result))
    console.print("")
    console.print("📝 Próximos pasos:")
    console.print("   1. Revisa los rangos con: aquamonitor especie-parametros")
    console.print("   2. Verifica la conexión con: aquamonitor doctor run")
    return 0
