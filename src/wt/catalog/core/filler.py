# wt/catalog/core/filler.py
"""
Resilient page filler.

Fills a listing page with up to ``limit`` successfully resolved hotels.
When hotels in a window fail to resolve, further windows are pulled from
the cursor where the previous one stopped until the page is full or the
collection is exhausted.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from wt.catalog.contracts.entity import EntityIndex, EntityRef
from wt.catalog.contracts.results import FailedEntity, PageResult, ResolvedEntity
from wt.catalog.core.pagination import paginate, validate_limit
from wt.catalog.core.resolver import EntityResolver
from wt.catalog.core.responses import build_next_link

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 64


class PageFiller:
    """Orchestrates pagination and per-hotel resolution for listings."""

    def __init__(
        self,
        *,
        index: EntityIndex,
        resolver: EntityResolver,
        base_url: str = "",
        max_rounds: int = DEFAULT_MAX_ROUNDS,
    ) -> None:
        if max_rounds < 1:
            raise ValueError("max_rounds must be at least 1")
        self._index = index
        self._resolver = resolver
        self._base_url = base_url
        self._max_rounds = max_rounds

    async def _resolve_window(
        self, refs: Sequence[EntityRef], fields: Sequence[str]
    ) -> tuple[list[ResolvedEntity], list[FailedEntity]]:
        resolved = await asyncio.gather(
            *(self._resolver.resolve_reference(self._index, ref, fields) for ref in refs)
        )
        items = [r for r in resolved if isinstance(r, ResolvedEntity)]
        errors = [r for r in resolved if isinstance(r, FailedEntity)]
        return items, errors

    async def fill(
        self,
        path: str,
        fields: Sequence[str],
        collection: Sequence[EntityRef],
        limit: int | None = None,
        start_with: EntityRef | None = None,
    ) -> PageResult:
        """Fill one page.

        Each round resolves the next window of ``limit - len(items)``
        references. Another round runs only if the current one had
        failures, the page is still short and references remain. The cursor
        strictly advances every round, so the loop ends at the latest when
        the collection is exhausted.

        Raises:
            LimitValidationError: ``limit`` is not a positive integer.
            MissingStartWithError: ``start_with`` is not in ``collection``.
        """
        limit = validate_limit(limit)

        items: list[ResolvedEntity] = []
        errors: list[FailedEntity] = []
        remaining = limit
        cursor = start_with
        next_start: EntityRef | None = None

        for round_no in range(1, self._max_rounds + 1):
            window = paginate(collection, remaining, cursor)
            found, failed = await self._resolve_window(window.items, fields)
            items.extend(found)
            errors.extend(failed)
            next_start = window.next_start

            logger.debug(
                "Fill round %d: window=%d resolved=%d failed=%d next=%s",
                round_no, len(window.items), len(found), len(failed), next_start,
            )

            if remaining is None or not failed or next_start is None:
                break
            if len(found) >= remaining:
                break
            remaining -= len(found)
            cursor = next_start
        else:
            logger.warning(
                "Backfill stopped after %d rounds with %d item(s) for %s",
                self._max_rounds, len(items), path,
            )

        next_link = None
        if next_start is not None and items:
            next_link = build_next_link(
                base_url=self._base_url,
                path=path,
                limit=limit,
                fields=fields,
                start_with=next_start,
            )

        return PageResult(
            items=items,
            errors=errors,
            next=next_link,
            next_start=next_start,
        )
