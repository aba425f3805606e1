"""
Tests for the JSON export of heroes.
"""

from __future__ import annotations

import json
from pathlib import Path

from adapters.json_exporter import export_heroes_json
from core.domain.models import Hero


def test_export_writes_sorted_utf8_array(tmp_path: Path) -> None:
    out = tmp_path / "nested" / "heroes.json"

    path = export_heroes_json(heroes=[Hero(id=12, name="Narco"), Hero(id=30, name="Señor")], output_path=out)

    assert path == out
    text = out.read_text(encoding="utf-8")
    assert "Señor" in text
    assert json.loads(text) == [{"id": 12, "name": "Narco"}, {"id": 30, "name": "Señor"}]


def test_export_empty_list(tmp_path: Path) -> None:
    out = export_heroes_json(heroes=[], output_path=tmp_path / "empty.json")

    assert json.loads(out.read_text(encoding="utf-8")) == []
