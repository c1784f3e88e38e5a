"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Any, Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from adapters.seeder import SeedReport
from core.domain.models import EspecieParametro, Instalacion


def print_banner(console: Console) -> None:
    title = Text("AquaMonitor", style="bold cyan")
    subtitle = Text("Instalaciones • Especies • Parámetros", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_instalaciones_table(records: Iterable[Any]) -> Table:
    table = Table(title="Instalaciones")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Nombre", style="white")
    table.add_column("Tipo de uso", style="magenta")
    table.add_column("Estado", style="green")
    table.add_column("Sucursal", style="dim")
    for record in records:
        inst = Instalacion.from_record(record)
        table.add_row(
            str(inst.id_instalacion or "-"),
            inst.nombre_instalacion or "-",
            inst.tipo_uso or "-",
            inst.estado_operativo or "-",
            str(inst.id_empresa_sucursal or "-"),
        )
    return table


def build_rangos_table(items: Iterable[EspecieParametro]) -> Table:
    """Tabla de rangos `Rmin..Rmax` por especie y parámetro."""

    table = Table(title="Parámetros por especie")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Especie", style="white")
    table.add_column("Parámetro", style="white")
    table.add_column("Rmin", justify="right")
    table.add_column("Rmax", justify="right")
    table.add_column("Estado", style="green")
    for item in items:
        estado = item.estado.value if item.estado else "-"
        table.add_row(
            str(item.id_especie_parametro),
            str(item.id_especie),
            str(item.id_parametro),
            f"{item.Rmin:g}",
            f"{item.Rmax:g}",
            estado,
        )
    return table


def build_seed_table(report: SeedReport) -> Table:
    table = Table(title="Datos del seed")
    table.add_column("Catálogo", style="cyan")
    table.add_column("Creados", style="green", justify="right")
    table.add_column("Ya existían", style="dim", justify="right")
    table.add_row("Especies", str(report.especies_creadas), str(report.especies_existentes))
    table.add_row("Parámetros", str(report.parametros_creados), str(report.parametros_existentes))
    table.add_row("Rangos", str(report.rangos_creados), str(report.rangos_existentes))
    return table


def build_error_panel(message: str, detail: str | None = None) -> Panel:
    body = Text(message, style="bold red")
    if detail:
        body.append(f"\n{detail}", style="dim")
    return Panel(body, border_style="red")
