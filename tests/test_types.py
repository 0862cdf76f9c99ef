"""Tests for Arc and InvalidInputError."""

from __future__ import annotations

import pytest


class TestArc:
    """Arc is a structural value type."""

    def test_structural_equality(self):
        from calendar_csp.types import Arc

        assert Arc(0, 1) == Arc(0, 1)
        assert Arc(0, 1) != Arc(1, 0)
        assert len({Arc(0, 1), Arc(0, 1), Arc(1, 0)}) == 2

    def test_reversed(self):
        from calendar_csp.types import Arc

        assert Arc(2, 5).reversed() == Arc(5, 2)

    def test_frozen(self):
        from calendar_csp.types import Arc

        arc = Arc(0, 1)
        with pytest.raises(AttributeError):
            arc.dependent = 3  # type: ignore[misc]


class TestInvalidInputError:

    def test_attributes(self):
        from calendar_csp.types import InvalidInputError

        err = InvalidInputError(["first problem", "second problem"])
        assert err.errors == ["first problem", "second problem"]
        assert "first problem" in str(err)
        assert "second problem" in str(err)

    def test_raise_and_catch_as_value_error(self):
        from calendar_csp.types import InvalidInputError

        with pytest.raises(ValueError) as exc_info:
            raise InvalidInputError(["bad"])
        assert isinstance(exc_info.value, InvalidInputError)
        assert exc_info.value.errors == ["bad"]
