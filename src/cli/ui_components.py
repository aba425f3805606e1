"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en todos los comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Hero


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se puede desactivar con `--no-banner` (scripts/pipelines).
    """

    title = Text("Tour of Heroes", style="bold cyan")
    subtitle = Text("heroes REST client", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_heroes_table(heroes: Iterable[Hero], *, title: str = "Heroes") -> Table:
    table = Table(title=title)
    table.add_column("Id", style="cyan", no_wrap=True, justify="right")
    table.add_column("Name", style="white")
    for hero in heroes:
        table.add_row("" if hero.id is None else str(hero.id), hero.name)
    return table


def build_messages_panel(messages: Iterable[str]) -> Panel:
    """Panel con el registro de mensajes, en orden de llegada."""

    body = Text()
    lines = list(messages)
    for i, message in enumerate(lines):
        style = "red" if _is_failure(message) else None
        body.append(message, style=style)
        if i < len(lines) - 1:
            body.append("\n")
    if not lines:
        body.append("(no messages)", style="dim")
    return Panel(body, title=Text("Messages", style="bold yellow"), border_style="yellow")


def _is_failure(message: str) -> bool:
    return " failed: " in message or " falló: " in message
