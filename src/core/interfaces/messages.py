"""Contrato del registro de mensajes.

Por qué Protocol:
- El cliente solo necesita `add`; cualquier objeto con ese método sirve
  (el `MessageService` en memoria, una lista envuelta en tests, una UI).
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class MessageSink(Protocol):
    """Destino de mensajes legibles, de solo anexado."""

    def add(self, message: str) -> None:
        """Anexa un mensaje. No se consulta ningún valor de retorno."""

        ...
