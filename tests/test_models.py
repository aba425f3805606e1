"""
Tests for the domain models: wire payloads and failure normalization.
"""

from __future__ import annotations

import json

import httpx
import pytest
from pydantic import ValidationError

from core.domain.models import Hero, TransportError


def test_payload_omits_missing_id() -> None:
    assert Hero(name="Storm").to_payload() == {"name": "Storm"}
    assert Hero(id=5, name="Storm").to_payload() == {"id": 5, "name": "Storm"}


def test_extra_wire_fields_are_ignored() -> None:
    hero = Hero.model_validate({"id": 3, "name": "Magma", "power": "lava"})

    assert hero == Hero(id=3, name="Magma")


def test_hero_requires_name() -> None:
    with pytest.raises(ValidationError):
        Hero.model_validate({"id": 3})


def test_transport_error_from_status_error() -> None:
    request = httpx.Request("GET", "http://test/api/heroes/7")
    response = httpx.Response(404, request=request)
    exc = httpx.HTTPStatusError("not found", request=request, response=response)

    error = TransportError.from_exception("get_hero id=7", exc)

    assert error.message == "Http failure response for http://test/api/heroes/7: 404 Not Found"
    assert error.status_code == 404
    assert error.url == "http://test/api/heroes/7"
    assert error.operation == "get_hero id=7"


def test_transport_error_from_timeout() -> None:
    request = httpx.Request("GET", "http://test/api/heroes")
    exc = httpx.ReadTimeout("timed out", request=request)

    error = TransportError.from_exception("list_heroes", exc)

    assert error.message == "Http failure during request to http://test/api/heroes: timed out"
    assert error.status_code is None


def test_transport_error_from_decode_error_uses_given_url() -> None:
    try:
        json.loads("not json")
    except ValueError as exc:
        error = TransportError.from_exception("list_heroes", exc, url="api/heroes")

    assert error.message.startswith("Http failure during parsing for api/heroes: Expecting value")
    assert error.url == "api/heroes"
