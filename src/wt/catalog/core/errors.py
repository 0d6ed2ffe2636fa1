# wt/catalog/core/errors.py
"""
Domain errors raised by index and content store clients.

Every error carries its :class:`FailureKind` from the point where it is
raised, so callers classify failures by type and never by message text.
"""
from __future__ import annotations

from wt.catalog.contracts.results import FailureKind


class CatalogError(Exception):
    """Base class for catalog data access errors."""

    kind: FailureKind = FailureKind.OTHER


class IndexAccessError(CatalogError):
    """Failure while talking to the entity index."""


class EntityNotFoundError(IndexAccessError):
    kind = FailureKind.NOT_FOUND

    def __init__(self, ref: str) -> None:
        self.ref = ref
        super().__init__(f"Entity '{ref}' not found in index")


class IndexUnreachableError(IndexAccessError):
    kind = FailureKind.UNREACHABLE


class ContentStoreError(CatalogError):
    """Failure while dereferencing a content pointer."""

    def __init__(self, message: str, *, uri: str | None = None) -> None:
        self.uri = uri
        super().__init__(message)


class ContentNotFoundError(ContentStoreError):
    kind = FailureKind.NOT_FOUND


class ContentUnreachableError(ContentStoreError):
    kind = FailureKind.UNREACHABLE


class MalformedContentError(ContentStoreError):
    kind = FailureKind.MALFORMED
