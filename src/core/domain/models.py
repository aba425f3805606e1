"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación en el borde (respuestas JSON del backend) y documentación
  autocontenida (Field) sin acoplar el Core a librerías de I/O.
- Facilita la serialización del payload que se envía en escrituras.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Hero(BaseModel):
    """Un héroe de la colección `heroes`.

    El `id` lo asigna el backend al crear; antes de eso es `None`.
    """

    model_config = ConfigDict(extra="ignore")

    id: int | None = Field(
        default=None,
        description="Identificador asignado por el backend.",
    )
    name: str = Field(
        ...,
        description="Nombre visible del héroe (sin restricción de unicidad).",
    )

    def to_payload(self) -> dict[str, Any]:
        """Cuerpo JSON para POST/PUT. Omite `id` cuando aún no existe."""

        return self.model_dump(mode="json", exclude_none=True)


class TransportError(BaseModel):
    """Fallo de transporte normalizado.

    Por qué un modelo:
    - El cliente HTTP lanza excepciones de forma heterogénea (status, red,
      parsing). Aquí se reducen a un mensaje legible más contexto mínimo.
    """

    operation: str = Field(..., description="Operación que falló (p.ej. 'get_hero id=3').")
    message: str = Field(..., description="Mensaje legible del fallo.")
    status_code: int | None = Field(default=None, description="Status HTTP si hubo respuesta.")
    url: str | None = Field(default=None, description="URL de la petición si se conoce.")

    @classmethod
    def from_exception(
        cls,
        operation: str,
        exc: Exception,
        *,
        url: str | None = None,
    ) -> "TransportError":
        if isinstance(exc, httpx.HTTPStatusError):
            response = exc.response
            url = str(exc.request.url)
            return cls(
                operation=operation,
                message=f"Http failure response for {url}: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                url=url,
            )

        url = _request_url(exc) or url
        if isinstance(exc, httpx.HTTPError):
            detail = str(exc) or type(exc).__name__
            return cls(
                operation=operation,
                message=f"Http failure during request to {url}: {detail}",
                url=url,
            )

        # ValueError: JSON inválido o respuesta que no encaja con el modelo.
        return cls(
            operation=operation,
            message=f"Http failure during parsing for {url}: {_first_line(exc)}",
            url=url,
        )


def _request_url(exc: Exception) -> str | None:
    if not isinstance(exc, httpx.HTTPError):
        return None
    try:
        return str(exc.request.url)
    except RuntimeError:
        # `.request` lanza si la excepción no tiene request asociada.
        return None


def _first_line(exc: Exception) -> str:
    text = str(exc).strip()
    return text.splitlines()[0] if text else type(exc).__name__
