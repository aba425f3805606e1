"""Registro de mensajes en memoria.

Conserva, en orden de llegada, los mensajes que emiten los servicios para
mostrarlos al usuario. Nadie los relee para tomar decisiones.
"""

from __future__ import annotations

from typing import Iterator


class MessageService:
    """Implementación en memoria de `MessageSink`."""

    def __init__(self) -> None:
        self._messages: list[str] = []

    def add(self, message: str) -> None:
        self._messages.append(message)

    def clear(self) -> None:
        self._messages.clear()

    @property
    def messages(self) -> list[str]:
        """Copia de los mensajes en orden de inserción."""

        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._messages))
