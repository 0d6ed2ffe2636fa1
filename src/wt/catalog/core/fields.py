# wt/catalog/core/fields.py
"""
Field catalog – which hotel fields exist and where they come from.

Index fields are read straight from the index entity. Description fields
live in the description document behind the entity's content pointer.
Clients may request fields by public alias; aliases are mapped back to
canonical names before the field set is computed.
"""
from __future__ import annotations

from typing import Iterable, Mapping

ID_FIELD = "id"

INDEX_FIELDS: tuple[str, ...] = (ID_FIELD, "manager")

DESCRIPTION_FIELDS: tuple[str, ...] = (
    "name",
    "description",
    "location",
    "contacts",
    "address",
    "roomTypes",
    "timezone",
    "currency",
    "images",
    "amenities",
    "updatedAt",
)

OBLIGATORY_FIELDS: tuple[str, ...] = (ID_FIELD,)

VALID_FIELDS: tuple[str, ...] = INDEX_FIELDS + tuple(
    f for f in DESCRIPTION_FIELDS if f not in INDEX_FIELDS
)

ROOM_TYPES_FIELD = "roomTypes"

# public name -> canonical name
QUERY_FIELD_ALIASES: Mapping[str, str] = {
    "managerAddress": "manager",
}

# canonical name -> public name
RESPONSE_FIELD_ALIASES: Mapping[str, str] = {
    canonical: public for public, canonical in QUERY_FIELD_ALIASES.items()
}

DEFAULT_HOTELS_FIELDS = "id,location,name"
DEFAULT_HOTEL_FIELDS = (
    "id,location,name,description,contacts,address,currency,images,amenities,updatedAt"
)


def map_fields_from_query(names: Iterable[str]) -> list[str]:
    """Translate public aliases into canonical names; unknown names pass through."""
    return [QUERY_FIELD_ALIASES.get(name, name) for name in names]


def resolve_field_set(requested_csv: str) -> tuple[str, ...]:
    """Compute the field set for a request.

    ``intersection(VALID_FIELDS, union(OBLIGATORY_FIELDS, mapped))`` in
    ``VALID_FIELDS`` order. Unknown names are dropped silently.
    """
    names = [n.strip() for n in (requested_csv or "").split(",")]
    wanted = set(OBLIGATORY_FIELDS)
    wanted.update(map_fields_from_query(n for n in names if n))
    return tuple(f for f in VALID_FIELDS if f in wanted)


def split_field_set(fields: Iterable[str]) -> tuple[list[str], list[str]]:
    """Partition a field set into (index fields, description fields)."""
    fields = list(fields)
    index_fields = [f for f in fields if f in INDEX_FIELDS]
    description_fields = [f for f in fields if f in DESCRIPTION_FIELDS]
    return index_fields, description_fields
