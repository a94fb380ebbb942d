"""Contrato del cliente de chat completions.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- El bucle de ejecución depende de esta abstracción, así que los tests pueden
  sustituir el cliente HTTP real por uno en memoria.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ChatResult


@runtime_checkable
class ChatClient(Protocol):
    """Contrato mínimo para enviar una pregunta.

    Reglas de diseño:
    - `ask` es asíncrono porque hace I/O (HTTP).
    - Nunca lanza por fallos de red o de payload: los clasifica en el
      `ChatResult` devuelto.
    """

    async def ask(self, domain: str, api_key: str, question: str) -> ChatResult:
        """Envía `question` al endpoint de `domain` y clasifica la respuesta."""

        ...
