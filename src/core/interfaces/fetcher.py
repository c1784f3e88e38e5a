"""Contrato de acceso HTTP para los loaders.

Por qué Protocol:
- El loader no llama a un cliente global: recibe una capacidad de "emitir
  request, devolver response" que los tests sustituyen por un doble.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class Fetcher(Protocol):
    """Capacidad mínima de lectura.

    Reglas de diseño:
    - `fetch` es asíncrono: es el único punto de suspensión del loader.
    - No interpreta el status; eso lo decide quien consume la respuesta.
    - Los fallos de transporte se propagan como `httpx.TransportError`.
    """

    async def fetch(self, path: str) -> httpx.Response:
        """Emite un GET a `path` (relativo a la API) y devuelve la respuesta completa."""

        ...
