"""Cliente de la colección `heroes`.

Responsabilidad:
- Traducir las operaciones de dominio (listar, buscar, crear, ...) a llamadas
  HTTP sobre una única colección.
- Registrar cada resultado en el `MessageSink` con el prefijo del servicio.
- Normalizar fallos: ninguna llamada propaga un error al llamador; se escribe
  el detalle en la consola de diagnóstico, se registra un mensaje y se
  devuelve un valor de reserva (`[]` o `None`).
"""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError
from rich.console import Console

from core.config import AppSettings
from core.domain.language import Language
from core.domain.models import Hero, TransportError
from core.interfaces.messages import MessageSink

T = TypeVar("T")

SERVICE_TAG = "HeroClient: "
JSON_HEADERS = {"Content-Type": "application/json"}

# Fallos de red/status (httpx) y de parsing (JSON inválido, ValidationError).
_TRANSPORT_ERRORS = (httpx.HTTPError, ValueError)

_HERO_LIST = TypeAdapter(list[Hero])

_MESSAGES: dict[Language, dict[str, str]] = {
    Language.ENGLISH: {
        "heroes_fetched": "heroes fetched",
        "hero_found": "fetched hero id={id}",
        "hero_not_found": "did not find hero id={id}",
        "hero_fetched": "hero with id={id} fetched",
        "search_found": 'found heroes matching "{term}"',
        "search_empty": 'no heroes matching "{term}"',
        "hero_added": "hero with id={id} added",
        "hero_deleted": "hero with id={id} deleted",
        "hero_updated": "hero with id={id} updated",
        "failed": "{operation} failed: {message}",
    },
    Language.SPANISH: {
        "heroes_fetched": "héroes obtenidos",
        "hero_found": "obtenido héroe con id={id}",
        "hero_not_found": "no encontrado héroe con id={id}",
        "hero_fetched": "héroe con id={id} obtenido",
        "search_found": 'héroes encontrados que coinciden con "{term}"',
        "search_empty": 'no se encontraron héroes que coincidan con "{term}"',
        "hero_added": "héroe agregado con id={id}",
        "hero_deleted": "héroe con id={id} eliminado",
        "hero_updated": "héroe con id={id} actualizado",
        "failed": "{operation} falló: {message}",
    },
}


class HeroClient:
    """Fachada tolerante a fallos sobre `GET/POST/PUT/DELETE <heroes_url>`.

    No guarda estado mutable y no cierra el `httpx.AsyncClient` inyectado:
    su ciclo de vida es del llamador.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        messages: MessageSink,
        *,
        heroes_url: str = "api/heroes",
        language: Language | None = None,
        diagnostics: Console | None = None,
    ) -> None:
        self._http = http
        self._messages = messages
        self._heroes_url = heroes_url.rstrip("/")
        self._language = language or Language.default()
        self._diagnostics = diagnostics or Console(stderr=True)

    @property
    def heroes_url(self) -> str:
        return self._heroes_url

    async def list_heroes(self) -> list[Hero]:
        """GET: todos los héroes."""

        url = self._heroes_url
        try:
            response = await self._send("GET", url)
            url = str(response.url)
            heroes = _HERO_LIST.validate_python(response.json())
        except _TRANSPORT_ERRORS as exc:
            return self._handle_error("list_heroes", exc, [], url=url)
        self._log("heroes_fetched")
        return heroes

    async def find_hero(self, hero_id: int) -> Hero | None:
        """GET por filtro `?id=`: devuelve `None` si no existe, sin error.

        El filtro responde una lista de {0|1} elementos, así que un id
        inexistente no es un 404.
        """

        url = self._heroes_url
        try:
            response = await self._send("GET", url, params={"id": hero_id})
            url = str(response.url)
            heroes = _HERO_LIST.validate_python(response.json())
        except _TRANSPORT_ERRORS as exc:
            return self._handle_error(f"find_hero id={hero_id}", exc, None, url=url)
        hero = heroes[0] if heroes else None
        self._log("hero_found" if hero is not None else "hero_not_found", id=hero_id)
        return hero

    async def get_hero(self, hero_id: int) -> Hero | None:
        """GET `<heroes_url>/<id>`. Un id inexistente es un 404 y cae al fallback."""

        url = f"{self._heroes_url}/{hero_id}"
        try:
            response = await self._send("GET", url)
            url = str(response.url)
            hero = Hero.model_validate(response.json())
        except _TRANSPORT_ERRORS as exc:
            return self._handle_error(f"get_hero id={hero_id}", exc, None, url=url)
        self._log("hero_fetched", id=hero_id)
        return hero

    async def search_heroes(self, term: str) -> list[Hero]:
        """GET por filtro `?name=`.

        Un término vacío o de solo espacios no llama al backend ni registra nada.
        """

        if not term.strip():
            return []

        url = self._heroes_url
        try:
            response = await self._send("GET", url, params={"name": term})
            url = str(response.url)
            heroes = _HERO_LIST.validate_python(response.json())
        except _TRANSPORT_ERRORS as exc:
            return self._handle_error("search_heroes", exc, [], url=url)
        self._log("search_found" if heroes else "search_empty", term=term)
        return heroes

    async def add_hero(self, hero: Hero) -> Hero | None:
        """POST: crea el héroe; el backend asigna el `id`."""

        url = self._heroes_url
        try:
            response = await self._send("POST", url, json=hero.to_payload(), headers=JSON_HEADERS)
            url = str(response.url)
            created = Hero.model_validate(response.json())
        except _TRANSPORT_ERRORS as exc:
            return self._handle_error("add_hero", exc, None, url=url)
        self._log("hero_added", id=created.id)
        return created

    async def delete_hero(self, hero: Hero | int) -> Any:
        """DELETE `<heroes_url>/<id>`.

        Devuelve el héroe eliminado si la respuesta es un héroe, el cuerpo
        decodificado tal cual si no lo es (p.ej. `{}`) y `None` si viene vacía.
        Un `Hero` sin `id` lanza `ValueError` antes de enviar nada.
        """

        hero_id = _require_id(hero.id) if isinstance(hero, Hero) else hero
        url = f"{self._heroes_url}/{hero_id}"
        try:
            response = await self._send("DELETE", url, headers=JSON_HEADERS)
            url = str(response.url)
            body = _decode_optional(response)
            deleted = _as_hero(body)
        except _TRANSPORT_ERRORS as exc:
            return self._handle_error("delete_hero", exc, None, url=url)
        self._log("hero_deleted", id=hero_id)
        return deleted

    async def update_hero(self, hero: Hero) -> Any:
        """PUT sobre la colección. Devuelve el cuerpo decodificado (o `None`).

        Un `Hero` sin `id` lanza `ValueError` antes de enviar nada.
        """

        _require_id(hero.id)
        url = self._heroes_url
        try:
            response = await self._send("PUT", url, json=hero.to_payload(), headers=JSON_HEADERS)
            url = str(response.url)
            result = _decode_optional(response)
        except _TRANSPORT_ERRORS as exc:
            return self._handle_error("update_hero", exc, None, url=url)
        self._log("hero_updated", id=hero.id)
        return result

    async def _send(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        response = await self._http.request(method, url, params=params, json=json, headers=headers)
        response.raise_for_status()
        return response

    def _handle_error(self, operation: str, exc: Exception, fallback: T, *, url: str | None = None) -> T:
        """Convierte un fallo en un resultado "suave".

        Escribe el detalle en la consola de diagnóstico, registra
        `"<operation> failed: <message>"` y devuelve `fallback`.
        """

        error = TransportError.from_exception(operation, exc, url=url)
        self._diagnostics.print(error)
        self._log("failed", operation=operation, message=error.message)
        return fallback

    def _log(self, key: str, **values: Any) -> None:
        template = _MESSAGES[self._language][key]
        self._messages.add(SERVICE_TAG + template.format(**values))


def _decode_optional(response: httpx.Response) -> Any:
    if not response.content.strip():
        return None
    return response.json()


def _as_hero(body: Any) -> Any:
    """`Hero` si el cuerpo lo describe; si no, el cuerpo sin tocar."""

    if body is None:
        return None
    try:
        return Hero.model_validate(body)
    except ValidationError:
        return body


def _require_id(hero_id: int | None) -> int:
    if hero_id is None:
        raise ValueError("hero has no id; it must be created before it can be changed")
    return hero_id


def build_hero_client(
    http: httpx.AsyncClient,
    messages: MessageSink,
    settings: AppSettings | None = None,
    *,
    language: Language | None = None,
    diagnostics: Console | None = None,
) -> HeroClient:
    """Crea un `HeroClient` con la ruta e idioma de la configuración."""

    settings = settings or AppSettings()
    return HeroClient(
        http,
        messages,
        heroes_url=settings.heroes_path,
        language=language or settings.default_language,
        diagnostics=diagnostics,
    )
