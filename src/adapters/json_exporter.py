"""Exportación JSON de héroes.

Por qué JSON:
- Es el mismo formato de la API: el archivo se puede reenviar tal cual.
- Permite guardar un listado/búsqueda sin depender del render en terminal.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from core.domain.models import Hero


def export_heroes_json(*, heroes: Iterable[Hero], output_path: Path) -> Path:
    """Exporta héroes a un array JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [hero.model_dump(mode="json") for hero in heroes]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
