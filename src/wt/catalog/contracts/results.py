# wt/catalog/contracts/results.py
"""
Resolution and page result contracts.

Field maps are plain ``dict[str, FieldValue]`` keyed by canonical field
name. Index-sourced and description-sourced maps are kept apart until
:func:`merge_field_maps` combines them with a fixed precedence.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Union

from wt.catalog.contracts.entity import EntityRef

FieldValue = Union[str, int, float, bool, None, list[Any], dict[str, Any]]
FieldMap = dict[str, FieldValue]


class FailureKind(str, Enum):
    """Why an entity could not be resolved."""

    NOT_FOUND = "not_found"
    UNREACHABLE = "unreachable"
    MALFORMED = "malformed"
    OTHER = "other"


def merge_field_maps(
    index_fields: Mapping[str, FieldValue],
    description_fields: Mapping[str, FieldValue],
) -> FieldMap:
    """Merge both sources; description values win on name collisions."""
    merged: FieldMap = dict(index_fields)
    for name, value in description_fields.items():
        merged[name] = value
    return merged


@dataclass(frozen=True)
class ResolvedEntity:
    """Successfully resolved hotel."""

    id: EntityRef
    index_fields: FieldMap = field(default_factory=dict)
    description_fields: FieldMap = field(default_factory=dict)

    @property
    def fields(self) -> FieldMap:
        merged = merge_field_maps(self.index_fields, self.description_fields)
        merged["id"] = self.id
        return merged


@dataclass(frozen=True)
class FailedEntity:
    """Hotel whose resolution failed.

    Attributes:
        id: Reference of the hotel.
        error: Human readable summary of the failure.
        original_error: Message of the underlying exception.
        kind: Failure discriminant set where the error was raised.
    """

    id: EntityRef
    error: str
    original_error: str
    kind: FailureKind = FailureKind.OTHER

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "error": self.error,
            "originalError": self.original_error,
        }


Resolution = Union[ResolvedEntity, FailedEntity]


@dataclass
class PageResult:
    """Outcome of filling one listing page."""

    items: list[ResolvedEntity] = field(default_factory=list)
    errors: list[FailedEntity] = field(default_factory=list)
    next: str | None = None
    next_start: EntityRef | None = None
