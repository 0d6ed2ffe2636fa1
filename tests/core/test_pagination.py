from __future__ import annotations

import pytest

from wt.catalog.core.pagination import (
    LimitValidationError,
    MissingStartWithError,
    paginate,
    validate_limit,
)

COLLECTION = ["A", "B", "C", "D", "E"]


class TestValidateLimit:
    @pytest.mark.parametrize("raw", [None, ""])
    def test_absent(self, raw):
        assert validate_limit(raw) is None

    @pytest.mark.parametrize("raw,expected", [(1, 1), ("3", 3), (" 10 ", 10)])
    def test_valid(self, raw, expected):
        assert validate_limit(raw) == expected

    @pytest.mark.parametrize(
        "raw", [0, -1, "0", "-2", "abc", "1.5", 2.0, True, "²", "١٢", "9" * 5000]
    )
    def test_invalid(self, raw):
        with pytest.raises(LimitValidationError):
            validate_limit(raw)


class TestPaginate:
    def test_first_window(self):
        window = paginate(COLLECTION, 2)
        assert window.items == ["A", "B"]
        assert window.next_start == "C"

    def test_start_with_is_first_item(self):
        window = paginate(COLLECTION, 2, "C")
        assert window.items == ["C", "D"]
        assert window.next_start == "E"

    def test_window_reaching_end_has_no_next(self):
        window = paginate(COLLECTION, 2, "D")
        assert window.items == ["D", "E"]
        assert window.next_start is None

    def test_limit_larger_than_remainder(self):
        window = paginate(COLLECTION, 10, "E")
        assert window.items == ["E"]
        assert window.next_start is None

    def test_no_limit_returns_remainder(self):
        window = paginate(COLLECTION, None, "B")
        assert window.items == ["B", "C", "D", "E"]
        assert window.next_start is None

    def test_empty_collection(self):
        window = paginate([], 3)
        assert window.items == []
        assert window.next_start is None

    def test_unknown_start_with(self):
        with pytest.raises(MissingStartWithError):
            paginate(COLLECTION, 2, "Z")

    def test_invalid_limit(self):
        with pytest.raises(LimitValidationError):
            paginate(COLLECTION, 0)

    def test_order_is_preserved(self):
        collection = ["z", "a", "m"]
        assert paginate(collection, 3).items == ["z", "a", "m"]
