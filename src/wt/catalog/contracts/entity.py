# wt/catalog/contracts/entity.py
"""
Entity contracts for the hotel catalog.

A hotel is addressed by its entity reference (an address string) which is
also the pagination cursor. Its data is split across two collaborators:

- the **index**, which knows every reference in a stable order and exposes a
  few directly readable fields plus a content pointer;
- the **content store**, which serves the documents the pointer leads to.

Both collaborators are consumed through the protocols below so that HTTP
and in-memory implementations are interchangeable.
"""
from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

EntityRef = str


@runtime_checkable
class Entity(Protocol):
    """A single hotel as seen by the index."""

    address: EntityRef

    async def get(self, field: str) -> Any:
        """Return the value of an index-sourced field."""
        ...

    async def content_pointer(self) -> str:
        """Return the URI of the entity's data index document."""
        ...


@runtime_checkable
class EntityIndex(Protocol):
    """Ordered, append-only collection of hotel references."""

    async def get_all(self) -> Sequence[EntityRef]:
        ...

    async def get(self, ref: EntityRef) -> Entity:
        """Raises ``EntityNotFoundError`` when ``ref`` is not indexed."""
        ...


@runtime_checkable
class ContentStore(Protocol):
    """Dereferences content pointers into JSON documents."""

    async def fetch(self, uri: str) -> dict[str, Any]:
        ...
