"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from adapters.http_client import HttpxFetcher
from core.config import AppSettings, write_user_env_vars
from core.services.resource_loader import INSTALACIONES_PATH

app = typer.Typer(no_args_is_help=True, help="Diagnóstico de configuración y conectividad.")

_console = Console()


async def _check_api(settings: AppSettings) -> tuple[bool, str]:
    try:
        response = await HttpxFetcher(settings).fetch(INSTALACIONES_PATH)
    except Exception as exc:
        return False, str(exc) or type(exc).__name__
    return response.is_success, f"HTTP {response.status_code}"


@app.command()
def run() -> None:
    """Revisa la configuración y la conexión con la API."""

    try:
        settings = AppSettings()
    except ValidationError as exc:
        _console.print(f"[red]Configuración inválida:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    table = Table(title="AquaMonitor Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("API base_url", "OK", settings.api_base_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Log level", "OK", settings.log_level.upper())

    ok_api, detail_api = asyncio.run(_check_api(settings))
    table.add_row(f"GET {INSTALACIONES_PATH}", "OK" if ok_api else "FAIL", detail_api)

    _console.print(table)

    if not ok_api:
        _console.print(
            "\n[yellow]Nota:[/yellow] configura la URL con `aquamonitor doctor setup` "
            "o la variable AQUAMONITOR_API_BASE_URL."
        )
        raise typer.Exit(code=1)


@app.command()
def setup() -> None:
    """Guarda la URL de la API en el .env de usuario."""

    base_url = typer.prompt("API base URL", default=AppSettings().api_base_url, show_default=True).strip()
    if not base_url.startswith(("http://", "https://")):
        raise typer.BadParameter("la URL debe empezar por http:// o https://")

    env_path = write_user_env_vars({"AQUAMONITOR_API_BASE_URL": base_url})
    _console.print(f"[green]Configuración guardada en:[/green] {env_path}")
