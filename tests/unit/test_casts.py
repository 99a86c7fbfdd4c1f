"""Tests for the built-in casts and the cast registry."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional

import pytest

from castable.Casts import (
    BooleanCast,
    CastRegistry,
    DateCast,
    DateTimeCast,
    DecimalCast,
    EnumCast,
    FloatCast,
    IdentityCast,
    IntegerCast,
    JsonCast,
    StringCast,
    TimeCast
)
from castable.Enums import CoercionKind


class Color(Enum):
    RED = "red"
    GREEN = "green"


class Shout:
    """Custom cast used by registry tests."""

    def set(self, model: Optional[Any], key: str, value: Any, attributes: Dict[str, Any]) -> str:
        return str(value).upper()


class TestPrimitiveCasts:
    """Test suite for primitive casts."""

    def test_integer_cast_converts_numeric_values(self) -> None:
        """Test integer coercion of strings, floats and decimals."""
        cast = IntegerCast()

        assert cast.coerce("1") == 1
        assert cast.coerce(" 42 ") == 42
        assert cast.coerce(2) == 2
        assert cast.coerce("3.7") == 3
        assert cast.coerce(4.9) == 4
        assert cast.coerce(Decimal("5")) == 5

    @pytest.mark.parametrize("value", ["abc", float("inf"), True, object()])
    def test_integer_cast_rejects_invalid_values(self, value: Any) -> None:
        """Test that unconvertible values raise ValueError or TypeError."""
        with pytest.raises((ValueError, TypeError)):
            IntegerCast().coerce(value)

    def test_float_and_decimal_casts(self) -> None:
        """Test float and Decimal coercion."""
        assert FloatCast().coerce("1.5") == 1.5
        assert FloatCast().coerce(Decimal("2.5")) == 2.5
        assert DecimalCast().coerce(0.1) == Decimal("0.1")
        assert DecimalCast().coerce("1.10") == Decimal("1.10")

        with pytest.raises(ValueError):
            DecimalCast().coerce("ten")

    def test_boolean_cast_tokens(self) -> None:
        """Test truthy and falsy tokens."""
        cast = BooleanCast()

        assert cast.coerce("yes") is True
        assert cast.coerce("OFF") is False
        assert cast.coerce(1) is True
        assert cast.coerce(0) is False

        with pytest.raises(ValueError):
            cast.coerce(2)
        with pytest.raises(ValueError):
            cast.coerce("maybe")

    def test_string_cast(self) -> None:
        """Test string coercion of numbers, bytes, enums and dates."""
        cast = StringCast()

        assert cast.coerce(42) == "42"
        assert cast.coerce(Decimal("1.5")) == "1.5"
        assert cast.coerce(b"x") == "x"
        assert cast.coerce(Color.RED) == "red"
        assert cast.coerce(date(2020, 1, 2)) == "2020-01-02"

        with pytest.raises(TypeError):
            cast.coerce(True)
        with pytest.raises(TypeError):
            cast.coerce(object())

    def test_datetime_cast(self) -> None:
        """Test datetime coercion from strings, dates and timestamps."""
        cast = DateTimeCast()

        assert cast.coerce("2024-05-01T10:00:00") == datetime(2024, 5, 1, 10)
        assert cast.coerce(date(2024, 5, 1)) == datetime(2024, 5, 1)
        assert cast.coerce(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)
        assert DateTimeCast(format="%d/%m/%Y").coerce("01/05/2024") == datetime(2024, 5, 1)

        with pytest.raises(ValueError):
            cast.coerce("not a date")

    def test_date_and_time_casts(self) -> None:
        """Test date and time coercion."""
        assert DateCast().coerce("2024-05-01") == date(2024, 5, 1)
        assert DateCast().coerce(datetime(2024, 5, 1, 10)) == date(2024, 5, 1)
        assert DateCast(format="%d/%m/%Y").coerce("01/05/2024") == date(2024, 5, 1)
        assert TimeCast().coerce("10:30") == time(10, 30)
        assert TimeCast().coerce(datetime(2024, 5, 1, 10, 30)) == time(10, 30)

    def test_primitive_casts_report_kind(self) -> None:
        """Test the strategy family of primitive and identity casts."""
        assert IntegerCast().kind is CoercionKind.PRIMITIVE
        assert IdentityCast().kind is CoercionKind.IDENTITY
        assert IdentityCast().coerce([1]) == [1]


class TestEnumAndJsonCasts:
    """Test suite for enum and JSON casts."""

    def test_enum_cast_by_member_value_and_name(self) -> None:
        """Test that members, values and names resolve to the member."""
        cast = EnumCast(Color)

        assert cast.coerce(Color.GREEN) is Color.GREEN
        assert cast.coerce("red") is Color.RED
        assert cast.coerce("RED") is Color.RED

        with pytest.raises(ValueError):
            cast.coerce("purple")

    def test_json_cast(self) -> None:
        """Test that JSON text is decoded and other values pass."""
        cast = JsonCast()

        assert cast.coerce('{"a": 1}') == {"a": 1}
        assert cast.coerce([1, 2]) == [1, 2]

        with pytest.raises(ValueError):
            cast.coerce("not json")


class TestCastRegistry:
    """Test suite for the cast registry."""

    def test_register_cast_object(self) -> None:
        """Test registering a cast object under a tag."""
        registry = CastRegistry()
        registry.register("Shout", Shout())

        assert registry.has("shout")
        cast = registry.resolve("SHOUT", {})
        assert cast.set(None, "name", "hi", {}) == "HI"

    def test_register_cast_class_and_factory(self) -> None:
        """Test registering cast classes and option-aware factories."""
        registry = CastRegistry()
        registry.register(complex, Shout)
        registry.register("stamp", lambda options: DateTimeCast(format=options.get("format")))

        assert isinstance(registry.resolve(complex, {}), Shout)
        assert registry.resolve("stamp", {"format": "%Y"}).format == "%Y"
        assert registry.resolve("missing", {}) is None

    def test_register_rejects_invalid_keys_and_factories(self) -> None:
        """Test that keys must be tags or types and factories callable."""
        registry = CastRegistry()

        with pytest.raises(TypeError):
            registry.register(42, Shout())
        with pytest.raises(TypeError):
            registry.register("broken", "not callable")
