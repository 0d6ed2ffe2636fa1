# wt/catalog/core/pagination.py
"""
Cursor pagination over an ordered reference collection.

The cursor is the reference itself: a window starts at ``start_with``
(inclusive) and the next window starts at the reference following the
last one returned.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Sequence, TypeVar

T = TypeVar("T")


class PaginationError(ValueError):
    """Base class for pagination parameter errors."""


class LimitValidationError(PaginationError):
    """Raised when ``limit`` is not a natural number greater than 0."""


class MissingStartWithError(PaginationError):
    """Raised when ``start_with`` is not part of the collection."""


@dataclass(frozen=True)
class Window(Generic[T]):
    items: list[T] = field(default_factory=list)
    next_start: T | None = None


def validate_limit(raw: Any) -> int | None:
    """Parse a raw ``limit`` value; ``None`` and ``""`` mean "no limit"."""
    if raw is None or raw == "":
        return None
    if isinstance(raw, bool):
        raise LimitValidationError(f"Invalid limit: {raw!r}")
    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        if not (text.isascii() and text.isdigit()):
            raise LimitValidationError(f"Invalid limit: {raw!r}")
        try:
            value = int(text)
        except ValueError:
            raise LimitValidationError(f"Invalid limit: {text[:20]!r}") from None
    if value <= 0:
        raise LimitValidationError(f"Invalid limit: {raw!r}")
    return value


def paginate(
    collection: Sequence[T],
    limit: int | None = None,
    start_with: T | None = None,
) -> Window[T]:
    """Return the window of ``collection`` starting at ``start_with``.

    The window holds up to ``limit`` references (the whole remainder if
    ``limit`` is ``None``). ``start_with`` itself is the first returned
    reference.
    """
    limit = validate_limit(limit)

    start = 0
    if start_with is not None:
        try:
            start = list(collection).index(start_with)
        except ValueError:
            raise MissingStartWithError(
                f"Cannot find {start_with!r} in collection"
            ) from None

    end = len(collection) if limit is None else min(start + limit, len(collection))
    items = list(collection[start:end])
    next_start = collection[end] if end < len(collection) else None
    return Window(items=items, next_start=next_start)
