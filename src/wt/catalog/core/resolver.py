# wt/catalog/core/resolver.py
"""
Entity resolver – turns one hotel into a flat field map.

Index fields are read from the index entity concurrently. Description
fields need two hops through the content store: the entity's content
pointer leads to a data index document whose ``descriptionUri`` leads to
the description document. Any failure on the way makes the whole
resolution a :class:`FailedEntity`; partially resolved hotels are never
reported as successes.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Iterable, Mapping

from wt.catalog.contracts.entity import ContentStore, Entity, EntityIndex, EntityRef
from wt.catalog.contracts.results import (
    FailedEntity,
    FailureKind,
    FieldMap,
    Resolution,
    ResolvedEntity,
)
from wt.catalog.core.errors import (
    CatalogError,
    ContentStoreError,
    IndexAccessError,
    MalformedContentError,
)
from wt.catalog.core.fields import ID_FIELD, ROOM_TYPES_FIELD, split_field_set

logger = logging.getLogger(__name__)

DESCRIPTION_POINTER_KEY = "descriptionUri"

CONTENT_ERROR_MESSAGE = "Cannot access off-chain data"
INDEX_ERROR_MESSAGE = "Cannot access index data"
GENERIC_ERROR_MESSAGE = "Cannot get hotel data"


def inject_room_type_ids(room_types: Any) -> dict[str, Any]:
    """Return a copy of ``room_types`` with each record's key set as ``id``."""
    if not isinstance(room_types, Mapping):
        raise MalformedContentError(
            f"Expected '{ROOM_TYPES_FIELD}' to be an object, got {type(room_types).__name__}"
        )
    out: dict[str, Any] = {}
    for room_type_id, record in room_types.items():
        if not isinstance(record, Mapping):
            raise MalformedContentError(f"Room type '{room_type_id}' is not an object")
        out[room_type_id] = {**record, "id": room_type_id}
    return out


class EntityResolver:
    """Resolves hotels against the index entity and the content store."""

    def __init__(self, content_store: ContentStore) -> None:
        self._content_store = content_store

    async def fetch_description(self, entity: Entity) -> dict[str, Any]:
        """Follow the content pointer chain to the description document."""
        pointer = await entity.content_pointer()
        if not pointer:
            raise MalformedContentError(f"Hotel '{entity.address}' has no content pointer")

        data_index = await self._content_store.fetch(pointer)
        description_uri = data_index.get(DESCRIPTION_POINTER_KEY)
        if not isinstance(description_uri, str) or not description_uri:
            raise MalformedContentError(
                f"Data index document has no '{DESCRIPTION_POINTER_KEY}'", uri=pointer
            )
        return await self._content_store.fetch(description_uri)

    async def _index_fields(self, entity: Entity, fields: list[str]) -> FieldMap:
        values = await asyncio.gather(*(entity.get(f) for f in fields))
        return dict(zip(fields, values))

    async def _description_fields(self, entity: Entity, fields: list[str]) -> FieldMap:
        description = await self.fetch_description(entity)
        out: FieldMap = {}
        for name in fields:
            if name not in description:
                continue
            value = description[name]
            if name == ROOM_TYPES_FIELD:
                value = inject_room_type_ids(value)
            out[name] = value
        return out

    async def resolve(self, entity: Entity, fields: Iterable[str]) -> Resolution:
        """Resolve ``fields`` for ``entity`` into a success or a failure."""
        index_names, description_names = split_field_set(fields)
        index_names = [f for f in index_names if f != ID_FIELD]

        index_values, description_values = await asyncio.gather(
            self._index_fields(entity, index_names) if index_names else _empty(),
            self._description_fields(entity, description_names)
            if description_names
            else _empty(),
            return_exceptions=True,
        )
        # description failures are reported first
        for outcome in (description_values, index_values):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                return self._failure(entity.address, outcome)

        return ResolvedEntity(
            id=entity.address,
            index_fields=index_values,
            description_fields=description_values,
        )

    async def resolve_reference(
        self,
        index: EntityIndex,
        ref: EntityRef,
        fields: Iterable[str],
    ) -> Resolution:
        """Look ``ref`` up in the index, then resolve it.

        Lookup failures are reported as failed entities so that one broken
        hotel never aborts a listing.
        """
        try:
            entity = await index.get(ref)
        except Exception as exc:
            return self._failure(ref, exc)
        return await self.resolve(entity, fields)

    @staticmethod
    def _failure(ref: EntityRef, exc: Exception) -> FailedEntity:
        if isinstance(exc, ContentStoreError):
            message = CONTENT_ERROR_MESSAGE
        elif isinstance(exc, IndexAccessError):
            message = INDEX_ERROR_MESSAGE
        else:
            message = GENERIC_ERROR_MESSAGE
        kind = exc.kind if isinstance(exc, CatalogError) else FailureKind.OTHER
        logger.info("Hotel '%s' not resolvable (%s): %s", ref, kind.value, exc)
        return FailedEntity(
            id=ref,
            error=message,
            original_error=str(exc),
            kind=kind,
        )


async def _empty() -> FieldMap:
    return {}
