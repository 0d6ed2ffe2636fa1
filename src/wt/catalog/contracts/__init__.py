"""Public contracts for the hotel catalog."""
from wt.catalog.contracts.entity import ContentStore, Entity, EntityIndex, EntityRef
from wt.catalog.contracts.results import (
    FailedEntity,
    FailureKind,
    FieldMap,
    FieldValue,
    PageResult,
    Resolution,
    ResolvedEntity,
    merge_field_maps,
)

__all__ = [
    "ContentStore", "Entity", "EntityIndex", "EntityRef",
    "FailedEntity", "FailureKind", "FieldMap", "FieldValue",
    "PageResult", "Resolution", "ResolvedEntity",
    "merge_field_maps",
]
