# wt/catalog/core/responses.py
"""
Response shaping for hotel listings and single-hotel lookups.
"""
from __future__ import annotations

from typing import Any, Sequence
from urllib.parse import quote

from wt.catalog.contracts.results import FieldMap, PageResult, ResolvedEntity
from wt.catalog.core.fields import RESPONSE_FIELD_ALIASES


def map_hotel_to_response(fields: FieldMap) -> dict[str, Any]:
    """Rename canonical field names to their public aliases."""
    return {RESPONSE_FIELD_ALIASES.get(name, name): value for name, value in fields.items()}


def hotel_response(entity: ResolvedEntity) -> dict[str, Any]:
    return map_hotel_to_response(entity.fields)


def build_next_link(
    *,
    base_url: str,
    path: str,
    limit: int | None,
    fields: Sequence[str],
    start_with: str,
) -> str:
    """Format the continuation link of a listing."""
    return (
        f"{base_url.rstrip('/')}{path}"
        f"?limit={limit}&fields={','.join(fields)}&startWith={quote(start_with, safe='')}"
    )


def page_response(page: PageResult) -> dict[str, Any]:
    """Listing envelope; ``next`` is omitted when there is nothing to continue."""
    out: dict[str, Any] = {
        "items": [hotel_response(item) for item in page.items],
        "errors": [error.to_dict() for error in page.errors],
    }
    if page.next:
        out["next"] = page.next
    return out
