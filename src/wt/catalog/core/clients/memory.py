# wt/catalog/core/clients/memory.py
"""
In-memory index and content store.

Used for local runs and tests. Both can be seeded from a YAML file::

    hotels:
      - address: "0xA"
        manager: "0xM"
        dataUri: "in-memory://0xA/data"
    documents:
      "in-memory://0xA/data":
        descriptionUri: "in-memory://0xA/description"
      "in-memory://0xA/description":
        name: "Hotel A"
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

from wt.catalog.core.clients.index_api import IndexedHotel
from wt.catalog.core.errors import ContentNotFoundError, EntityNotFoundError, MalformedContentError
from wt.catalog.core.loader import load_yaml_files

logger = logging.getLogger(__name__)


def _load_seed(seed_path: str | None) -> dict[str, Any]:
    if not seed_path:
        return {}
    docs = load_yaml_files([seed_path])
    merged: dict[str, Any] = {"hotels": [], "documents": {}}
    for doc in docs:
        merged["hotels"].extend(doc.get("hotels") or [])
        merged["documents"].update(doc.get("documents") or {})
    return merged


class InMemoryEntityIndex:
    """Index backed by a list of hotel records, kept in insertion order."""

    def __init__(
        self,
        hotels: Iterable[Mapping[str, Any]] | None = None,
        *,
        seed_path: str | None = None,
    ) -> None:
        self._hotels: dict[str, dict[str, Any]] = {}
        records = list(hotels or []) + list(_load_seed(seed_path).get("hotels", []))
        for record in records:
            self.add(record)

    def add(self, record: Mapping[str, Any]) -> None:
        address = record.get("address")
        if not address:
            raise ValueError(f"Hotel record without address: {dict(record)!r}")
        if address in self._hotels:
            raise ValueError(f"Hotel '{address}' already indexed")
        self._hotels[str(address)] = dict(record)

    async def get_all(self) -> list[str]:
        return list(self._hotels)

    async def get(self, ref: str) -> IndexedHotel:
        try:
            return IndexedHotel(ref, self._hotels[ref])
        except KeyError:
            raise EntityNotFoundError(ref) from None

    def __len__(self) -> int:
        return len(self._hotels)


class InMemoryContentStore:
    """Content store backed by a ``uri -> document`` mapping."""

    def __init__(
        self,
        documents: Mapping[str, Any] | None = None,
        *,
        seed_path: str | None = None,
    ) -> None:
        self._documents: dict[str, Any] = dict(documents or {})
        self._documents.update(_load_seed(seed_path).get("documents", {}))

    def put(self, uri: str, document: Any) -> None:
        self._documents[uri] = document

    async def fetch(self, uri: str) -> dict[str, Any]:
        try:
            document = self._documents[uri]
        except KeyError:
            raise ContentNotFoundError(f"Document not found: {uri}", uri=uri) from None
        if isinstance(document, BaseException):
            raise document
        if not isinstance(document, dict):
            raise MalformedContentError(f"Document at {uri} is not an object", uri=uri)
        return document
