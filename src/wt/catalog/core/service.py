# wt/catalog/core/service.py
"""
CatalogService – single entry-point for hotel lookups.

Wraps field set resolution, limit validation, index access, resolution
and page filling. Routes translate the errors raised here into HTTP
responses.
"""
from __future__ import annotations

import logging
from typing import Any

from wt.catalog.contracts.entity import ContentStore, Entity, EntityIndex
from wt.catalog.contracts.results import PageResult, Resolution
from wt.catalog.core.fields import resolve_field_set
from wt.catalog.core.filler import DEFAULT_MAX_ROUNDS, PageFiller
from wt.catalog.core.pagination import validate_limit
from wt.catalog.core.resolver import EntityResolver, inject_room_type_ids

logger = logging.getLogger(__name__)


class RoomTypeNotFoundError(KeyError):
    """Raised when a hotel has no room type with the requested id."""


class CatalogService:
    """Facade over the index, the content store and the page filler."""

    def __init__(
        self,
        *,
        index: EntityIndex,
        content_store: ContentStore,
        base_url: str = "",
        max_backfill_rounds: int = DEFAULT_MAX_ROUNDS,
    ) -> None:
        self._index = index
        self._resolver = EntityResolver(content_store)
        self._filler = PageFiller(
            index=index,
            resolver=self._resolver,
            base_url=base_url,
            max_rounds=max_backfill_rounds,
        )

    @property
    def index(self) -> EntityIndex:
        return self._index

    @property
    def resolver(self) -> EntityResolver:
        return self._resolver

    async def list_hotels(
        self,
        *,
        path: str,
        fields_query: str,
        limit: Any = None,
        start_with: str | None = None,
    ) -> PageResult:
        """Fill one listing page.

        ``limit`` is validated before the index is touched.

        Raises:
            LimitValidationError: invalid ``limit``.
            MissingStartWithError: ``start_with`` is not indexed.
            IndexUnreachableError: the reference listing cannot be fetched.
        """
        parsed_limit = validate_limit(limit)
        start_with = start_with or None
        fields = resolve_field_set(fields_query)
        collection = await self._index.get_all()
        logger.debug(
            "List hotels: total=%d limit=%s startWith=%s fields=%s",
            len(collection), parsed_limit, start_with, fields,
        )
        return await self._filler.fill(path, fields, collection, parsed_limit, start_with)

    async def get_entity(self, address: str) -> Entity:
        """Raises ``EntityNotFoundError`` when the hotel is not indexed."""
        return await self._index.get(address)

    async def get_hotel(self, address: str, fields_query: str) -> Resolution:
        entity = await self.get_entity(address)
        return await self._resolver.resolve(entity, resolve_field_set(fields_query))

    async def get_room_types(self, address: str) -> dict[str, Any]:
        entity = await self.get_entity(address)
        description = await self._resolver.fetch_description(entity)
        return inject_room_type_ids(description.get("roomTypes") or {})

    async def get_room_type(self, address: str, room_type_id: str) -> dict[str, Any]:
        room_types = await self.get_room_types(address)
        try:
            return room_types[room_type_id]
        except KeyError:
            raise RoomTypeNotFoundError(room_type_id) from None
