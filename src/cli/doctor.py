"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_collection(settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(settings.heroes_path)
        return response.is_success, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or type(exc).__name__


def _settings_from(ctx: typer.Context) -> AppSettings:
    state = ctx.obj
    settings = getattr(state, "settings", None)
    return settings if isinstance(settings, AppSettings) else AppSettings()


@app.command()
def run(ctx: typer.Context) -> None:
    """Show the effective configuration and probe the heroes collection."""

    settings = _settings_from(ctx)

    table = Table(title="Heroes Client Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.api_base_url)
    table.add_row("Collection", "OK", settings.heroes_path)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Language", "OK", settings.default_language.label())
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    ok_http, detail_http = asyncio.run(_check_collection(settings))
    table.add_row("Backend", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        _console.print(
            "\n[yellow]Note:[/yellow] Point the client at your backend with `heroes doctor set-backend URL`."
        )


@app.command(name="set-backend")
def set_backend(url: str = typer.Argument(..., help="Backend base URL, e.g. http://localhost:8000")) -> None:
    """Store the backend base URL in the user config .env."""

    url = url.strip()
    if not url.startswith(("http://", "https://")):
        raise typer.BadParameter("url must start with http:// or https://")

    env_path = write_user_env_vars({"HEROES_API_BASE_URL": url})
    _console.print(f"[green]Saved backend URL to:[/green] {env_path}")
