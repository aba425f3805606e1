"""Shared fixtures: an in-memory heroes backend behind `httpx.MockTransport`."""

from __future__ import annotations

import asyncio
import json
import re
from typing import Any, Awaitable, Callable
from unittest.mock import MagicMock

import httpx
import pytest
from rich.console import Console

from adapters.hero_client import HeroClient
from core.domain.language import Language
from core.services.message_service import MessageService

BASE_URL = "http://test"

SEED_HEROES: list[dict[str, Any]] = [
    {"id": 11, "name": "Dr Nice"},
    {"id": 12, "name": "Narco"},
    {"id": 13, "name": "Bombasto"},
    {"id": 14, "name": "Celeritas"},
    {"id": 15, "name": "Magneta"},
    {"id": 16, "name": "RubberMan"},
    {"id": 17, "name": "Dynama"},
    {"id": 18, "name": "Dr IQ"},
    {"id": 19, "name": "Magma"},
    {"id": 20, "name": "Tornado"},
]


class InMemoryHeroBackend:
    """Mimics the tutorial's in-memory web API for `api/heroes`.

    - `?id=` is an exact match, `?name=` a case-insensitive substring match.
    - Unknown ids on `GET <collection>/<id>` answer 404.
    - POST assigns `max(id) + 1` (11 for an empty collection).
    - PUT and DELETE answer 204 with no body.
    """

    def __init__(self, heroes: list[dict[str, Any]] | None = None) -> None:
        self.heroes = [dict(h) for h in (SEED_HEROES if heroes is None else heroes)]
        self.requests: list[httpx.Request] = []
        self.fail_status: int | None = None
        self.connect_error = False
        self.raw_body: bytes | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.connect_error:
            raise httpx.ConnectError("Connection refused", request=request)
        if self.fail_status is not None:
            return httpx.Response(self.fail_status, json={"error": "backend failure"})
        if self.raw_body is not None:
            return httpx.Response(200, content=self.raw_body)

        parts = request.url.path.strip("/").split("/")
        if parts[:2] != ["api", "heroes"] or len(parts) > 3:
            return httpx.Response(404)
        item_id = int(parts[2]) if len(parts) == 3 else None

        if request.method == "GET":
            if item_id is not None:
                hero = self._find(item_id)
                return httpx.Response(200, json=hero) if hero else httpx.Response(404)
            return httpx.Response(200, json=self._filter(request.url.params))
        if request.method == "POST":
            body = json.loads(request.content)
            hero = {"id": body.get("id") or self._gen_id(), "name": body["name"]}
            self.heroes.append(hero)
            return httpx.Response(201, json=hero)
        if request.method == "PUT":
            body = json.loads(request.content)
            hero = self._find(body.get("id"))
            if hero is None:
                return httpx.Response(404)
            hero.update(body)
            return httpx.Response(204)
        if request.method == "DELETE":
            self.heroes = [h for h in self.heroes if h["id"] != item_id]
            return httpx.Response(204)
        return httpx.Response(405)

    def _find(self, hero_id: Any) -> dict[str, Any] | None:
        return next((h for h in self.heroes if h["id"] == hero_id), None)

    def _filter(self, params: httpx.QueryParams) -> list[dict[str, Any]]:
        heroes = self.heroes
        if "id" in params:
            heroes = [h for h in heroes if str(h["id"]) == params["id"]]
        if "name" in params:
            pattern = re.compile(re.escape(params["name"]), re.IGNORECASE)
            heroes = [h for h in heroes if pattern.search(h["name"])]
        return heroes

    def _gen_id(self) -> int:
        return max((h["id"] for h in self.heroes), default=10) + 1


@pytest.fixture
def backend() -> InMemoryHeroBackend:
    return InMemoryHeroBackend()


@pytest.fixture
def messages() -> MessageService:
    return MessageService()


@pytest.fixture
def diagnostics() -> MagicMock:
    return MagicMock(spec=Console)


@pytest.fixture
def run_client(
    backend: InMemoryHeroBackend,
    messages: MessageService,
    diagnostics: MagicMock,
) -> Callable[..., Any]:
    """Run `action(client)` against the in-memory backend and return its result."""

    def _run(action: Callable[[HeroClient], Awaitable[Any]], *, language: Language = Language.ENGLISH) -> Any:
        async def _main() -> Any:
            transport = httpx.MockTransport(backend.handler)
            async with httpx.AsyncClient(transport=transport, base_url=BASE_URL) as http:
                client = HeroClient(http, messages, language=language, diagnostics=diagnostics)
                return await action(client)

        return asyncio.run(_main())

    return _run
