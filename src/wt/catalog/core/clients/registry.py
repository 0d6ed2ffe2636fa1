# wt/catalog/core/clients/registry.py
"""
Clients registry – stores the index and content store instances by name.
"""
from __future__ import annotations

import logging
from typing import Any, Iterator

logger = logging.getLogger(__name__)

INDEX_CLIENT = "index"
CONTENT_STORE_CLIENT = "content_store"


class ClientsRegistry:
    """Named registry for data clients."""

    def __init__(self) -> None:
        self._clients: dict[str, Any] = {}

    def register(self, name: str, client: Any) -> None:
        if name in self._clients:
            raise ValueError(f"Client '{name}' already registered")
        self._clients[name] = client
        logger.info("Registered client: %s (%s)", name, type(client).__name__)

    def get(self, name: str) -> Any:
        try:
            return self._clients[name]
        except KeyError:
            raise KeyError(
                f"Client '{name}' not found. Available: {list(self._clients)}"
            ) from None

    def has(self, name: str) -> bool:
        return name in self._clients

    def list(self) -> list[str]:
        return list(self._clients)

    def items(self) -> Iterator[tuple[str, Any]]:
        return iter(self._clients.items())

    def __contains__(self, name: str) -> bool:
        return name in self._clients

    def __len__(self) -> int:
        return len(self._clients)
