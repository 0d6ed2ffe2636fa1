# tests/conftest.py
from __future__ import annotations

from typing import Any, Callable, Iterable

import pytest

from wt.catalog.core.clients.memory import InMemoryContentStore, InMemoryEntityIndex
from wt.catalog.core.clients.registry import (
    CONTENT_STORE_CLIENT,
    INDEX_CLIENT,
    ClientsRegistry,
)
from wt.catalog.core.errors import ContentUnreachableError, IndexUnreachableError


def data_uri(ref: str) -> str:
    return f"mem://{ref}/data"


def description_uri(ref: str) -> str:
    return f"mem://{ref}/description"


def description_of(ref: str) -> dict[str, Any]:
    return {
        "name": f"Hotel {ref}",
        "description": f"Description of {ref}",
        "location": {"latitude": 1.0, "longitude": 2.0},
        "currency": "EUR",
        "roomTypes": {
            "single": {"name": "Single room"},
            "double": {"name": "Double room"},
        },
    }


class CountingIndex(InMemoryEntityIndex):
    """In-memory index that counts listing calls."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.get_all_calls = 0

    async def get_all(self) -> list[str]:
        self.get_all_calls += 1
        return await super().get_all()


class UnreachableIndex(InMemoryEntityIndex):
    async def get_all(self) -> list[str]:
        raise IndexUnreachableError("connection refused")

    async def get(self, ref: str):
        raise IndexUnreachableError("connection refused")


@pytest.fixture
def build_stores() -> Callable[..., tuple[CountingIndex, InMemoryContentStore]]:
    """Factory for an index + content store pair.

    Hotels in ``failing`` have an unreachable data document; hotels in
    ``malformed`` have a data document without ``descriptionUri``.
    """

    def _build(
        refs: Iterable[str],
        *,
        failing: Iterable[str] = (),
        malformed: Iterable[str] = (),
    ) -> tuple[CountingIndex, InMemoryContentStore]:
        refs = list(refs)
        failing = set(failing)
        malformed = set(malformed)
        index = CountingIndex(
            [{"address": r, "manager": f"manager-{r}", "dataUri": data_uri(r)} for r in refs]
        )
        store = InMemoryContentStore()
        for r in refs:
            if r in failing:
                store.put(data_uri(r), ContentUnreachableError("gateway timeout", uri=data_uri(r)))
            elif r in malformed:
                store.put(data_uri(r), {"somethingElse": True})
            else:
                store.put(data_uri(r), {"descriptionUri": description_uri(r)})
                store.put(description_uri(r), description_of(r))
        return index, store

    return _build


@pytest.fixture
def build_clients(build_stores) -> Callable[..., ClientsRegistry]:
    def _build(refs: Iterable[str], **kwargs: Any) -> ClientsRegistry:
        index, store = build_stores(refs, **kwargs)
        registry = ClientsRegistry()
        registry.register(INDEX_CLIENT, index)
        registry.register(CONTENT_STORE_CLIENT, store)
        return registry

    return _build


@pytest.fixture
def unreachable_clients() -> ClientsRegistry:
    registry = ClientsRegistry()
    registry.register(INDEX_CLIENT, UnreachableIndex())
    registry.register(CONTENT_STORE_CLIENT, InMemoryContentStore())
    return registry
