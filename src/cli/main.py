"""CLI principal (Typer).

Por qué una CLI:
- Permite ejercitar el `HeroClient` contra un backend real desde terminal.
- Cada comando imprime su resultado y, debajo, el registro de mensajes: los
  fallos del backend no cambian el exit code, solo aparecen en ese registro.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Awaitable, Callable, TypeVar

import typer
from rich.console import Console

from adapters.hero_client import HeroClient, build_hero_client
from adapters.http_client import build_async_client
from adapters.json_exporter import export_heroes_json
from cli import doctor
from cli.ui_components import build_heroes_table, build_messages_panel, print_banner
from core.config import AppSettings
from core.domain.language import Language
from core.domain.models import Hero
from core.services.message_service import MessageService

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Client for the heroes REST collection.")
app.add_typer(doctor.app, name="doctor")

_console = Console()
_diagnostics = Console(stderr=True)


@dataclass
class CliState:
    settings: AppSettings
    language: Language
    banner: bool = True


@app.callback()
def main(
    ctx: typer.Context,
    spanish: bool = typer.Option(False, "--spanish", help="Message feed in Spanish."),
    base_url: str | None = typer.Option(None, "--base-url", help="Override HEROES_API_BASE_URL."),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    settings = AppSettings(api_base_url=base_url) if base_url else AppSettings()
    language = Language.SPANISH if spanish else settings.default_language
    ctx.obj = CliState(settings=settings, language=language, banner=not no_banner)


async def _call(state: CliState, action: Callable[[HeroClient], Awaitable[T]]) -> tuple[T, list[str]]:
    messages = MessageService()
    async with build_async_client(state.settings) as http:
        client = build_hero_client(
            http,
            messages,
            state.settings,
            language=state.language,
            diagnostics=_diagnostics,
        )
        result = await action(client)
    return result, messages.messages


def _run(ctx: typer.Context, action: Callable[[HeroClient], Awaitable[T]]) -> T:
    state: CliState = ctx.obj
    if state.banner:
        print_banner(_console)
    result, messages = asyncio.run(_call(state, action))
    _render(result)
    _console.print(build_messages_panel(messages))
    return result


def _render(result: object) -> None:
    if isinstance(result, list):
        _console.print(build_heroes_table(result))
    elif isinstance(result, Hero):
        _console.print(build_heroes_table([result], title="Hero"))
    elif result is None:
        _console.print("[dim]No hero.[/dim]")
    else:
        _console.print(result)


def _require_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise typer.BadParameter("name must not be empty")
    return name


@app.command("list")
def list_command(
    ctx: typer.Context,
    json_path: Path | None = typer.Option(None, "--json", help="Also write the heroes to a JSON file."),
) -> None:
    """List every hero."""

    heroes = _run(ctx, lambda client: client.list_heroes())
    if json_path is not None:
        out = export_heroes_json(heroes=heroes, output_path=json_path)
        _console.print(f"[green]Saved:[/green] {out}")


@app.command()
def get(ctx: typer.Context, hero_id: int = typer.Argument(..., help="Hero id.")) -> None:
    """Fetch one hero by id (a missing id is reported as a failure)."""

    _run(ctx, lambda client: client.get_hero(hero_id))


@app.command()
def find(ctx: typer.Context, hero_id: int = typer.Argument(..., help="Hero id.")) -> None:
    """Look a hero up by id (a missing id is not a failure)."""

    _run(ctx, lambda client: client.find_hero(hero_id))


@app.command()
def search(
    ctx: typer.Context,
    term: str = typer.Argument(..., help="Name fragment."),
    json_path: Path | None = typer.Option(None, "--json", help="Also write the matches to a JSON file."),
) -> None:
    """Search heroes whose name contains TERM."""

    heroes = _run(ctx, lambda client: client.search_heroes(term))
    if json_path is not None:
        out = export_heroes_json(heroes=heroes, output_path=json_path)
        _console.print(f"[green]Saved:[/green] {out}")


@app.command()
def add(ctx: typer.Context, name: str = typer.Argument(..., help="Name of the new hero.")) -> None:
    """Create a hero; the backend assigns its id."""

    hero = Hero(name=_require_name(name))
    _run(ctx, lambda client: client.add_hero(hero))


@app.command()
def update(
    ctx: typer.Context,
    hero_id: int = typer.Argument(..., help="Hero id."),
    name: str = typer.Argument(..., help="New name."),
) -> None:
    """Rename an existing hero."""

    hero = Hero(id=hero_id, name=_require_name(name))
    _run(ctx, lambda client: client.update_hero(hero))


@app.command()
def delete(ctx: typer.Context, hero_id: int = typer.Argument(..., help="Hero id.")) -> None:
    """Delete a hero by id."""

    _run(ctx, lambda client: client.delete_hero(hero_id))


def run() -> None:
    app()
