"""CLI de AquaMonitor (Typer).

Comandos:
- `seed`: catálogo base (especies, parámetros, rangos).
- `instalaciones` / `especie-parametros`: listados vía los loaders del Core.
- `doctor`: diagnóstico de configuración y conectividad.
"""

from __future__ import annotations

import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from adapters.http_client import HttpxFetcher
from cli.doctor import app as doctor_app
from cli.seed import run_seed
from cli.ui_components import (
    build_error_panel,
    build_instalaciones_table,
    build_rangos_table,
    print_banner,
)
from core.config import AppSettings
from core.domain.models import EstadoRegistro
from core.logger import get_logger
from core.services.resource_loader import (
    ResourceState,
    especie_parametros_loader,
    facilities_loader,
    load_collection,
)

app = typer.Typer(no_args_is_help=True, help="AquaMonitor: instalaciones, especies y parámetros.")
app.add_typer(doctor_app, name="doctor")

_console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Logging en nivel DEBUG."),
    banner: bool = typer.Option(False, "--banner", help="Muestra el banner antes del comando."),
) -> None:
    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Configuración inválida:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)
    get_logger(level="DEBUG" if verbose else settings.log_level)
    if banner:
        print_banner(_console)


def _report_error(state: ResourceState) -> None:
    detail = state.error_kind.value if state.error_kind else None
    _console.print(build_error_panel(state.error or "Error", detail))
    raise typer.Exit(code=1)


@app.command()
def seed() -> None:
    """Pobla el catálogo base a través de la API."""

    raise typer.Exit(code=run_seed())


@app.command()
def instalaciones() -> None:
    """Lista las instalaciones registradas."""

    loader = facilities_loader(HttpxFetcher(AppSettings()))
    state = asyncio.run(load_collection(loader))
    if state.error:
        _report_error(state)
    _console.print(build_instalaciones_table(state.items))


@app.command(name="especie-parametros")
def especie_parametros(
    incluir_inactivos: bool = typer.Option(
        False,
        "--incluir-inactivos",
        help="Incluye rangos dados de baja (estado inactivo).",
    ),
) -> None:
    """Lista los rangos Rmin..Rmax por especie y parámetro."""

    loader = especie_parametros_loader(HttpxFetcher(AppSettings()))
    state = asyncio.run(load_collection(loader))
    if state.error:
        _report_error(state)
    items = [
        item
        for item in state.items
        if incluir_inactivos or item.estado is not EstadoRegistro.INACTIVO
    ]
    _console.print(build_rangos_table(items))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
