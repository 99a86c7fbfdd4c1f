from __future__ import annotations

from datetime import date, datetime, time, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional, FrozenSet

from .CastInterface import BaseCast

TRUE_VALUES: FrozenSet[str] = frozenset({'1', 'on', 't', 'true', 'y', 'yes'})
FALSE_VALUES: FrozenSet[str] = frozenset({'0', 'off', 'f', 'false', 'n', 'no'})


def _to_decimal(value: Any) -> Decimal:
    """Convert numbers and numeric strings to Decimal, raising ValueError otherwise."""
    if isinstance(value, bool):
        raise TypeError(f"Refusing to treat boolean {value!r} as a number")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        try:
            return Decimal(value.strip())
        except InvalidOperation as e:
            raise ValueError(f"Invalid numeric string {value!r}") from e
    raise TypeError(f"Cannot convert {type(value).__name__} to a number")


class StringCast(BaseCast):
    """Cast numbers, enums, bytes and dates to strings."""
    
    target = 'str'
    
    def coerce(self, value: Any) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, bool):
            raise TypeError("Booleans are not coerced to strings")
        if isinstance(value, (int, float, Decimal)):
            return str(value)
        if isinstance(value, Enum):
            return str(value.value)
        if isinstance(value, bytes):
            return value.decode('utf-8')
        if isinstance(value, (date, time)):
            return value.isoformat()
        raise TypeError(f"Cannot coerce {type(value).__name__} to str")


class IntegerCast(BaseCast):
    """Cast numeric values to int, truncating fractions."""
    
    target = 'int'
    
    def coerce(self, value: Any) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip(), 10)
            except ValueError:
                pass
        try:
            return int(_to_decimal(value))
        except (InvalidOperation, OverflowError) as e:
            raise ValueError(f"Cannot coerce {value!r} to int") from e


class FloatCast(BaseCast):
    """Cast numeric values to float."""
    
    target = 'float'
    
    def coerce(self, value: Any) -> float:
        if isinstance(value, float):
            return value
        return float(_to_decimal(value))


class DecimalCast(BaseCast):
    """Cast numeric values to Decimal."""
    
    target = 'Decimal'
    
    def coerce(self, value: Any) -> Decimal:
        return _to_decimal(value)


class BooleanCast(BaseCast):
    """Cast truthy and falsy tokens to bool."""
    
    target = 'bool'
    
    def coerce(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            token = value.strip().lower()
            if token in TRUE_VALUES:
                return True
            if token in FALSE_VALUES:
                return False
        raise ValueError(f"Cannot coerce {value!r} to bool")


class DateTimeCast(BaseCast):
    """
    Cast ISO strings, dates and timestamps to datetime.
    
    A `format` option switches string parsing to `strptime`.
    """
    
    target = 'datetime'
    
    def __init__(self, format: Optional[str] = None) -> None:
        self.format = format
    
    def coerce(self, value: Any) -> datetime:
        if isinstance(value, datetime):
            return value
        if isinstance(value, date):
            return datetime.combine(value, time())
        if isinstance(value, str):
            if self.format:
                return datetime.strptime(value.strip(), self.format)
            return datetime.fromisoformat(value.strip())
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            try:
                return datetime.fromtimestamp(value, tz=timezone.utc)
            except (OverflowError, OSError) as e:
                raise ValueError(f"Timestamp {value!r} is out of range") from e
        raise TypeError(f"Cannot coerce {type(value).__name__} to datetime")


class DateCast(DateTimeCast):
    """Cast ISO strings and datetimes to date."""
    
    target = 'date'
    
    def coerce(self, value: Any) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if isinstance(value, str) and not self.format:
            return date.fromisoformat(value.strip())
        return super().coerce(value).date()


class TimeCast(DateTimeCast):
    """Cast ISO strings and datetimes to time."""
    
    target = 'time'
    
    def coerce(self, value: Any) -> time:
        if isinstance(value, time):
            return value
        if isinstance(value, datetime):
            return value.timetz()
        if isinstance(value, str) and not self.format:
            return time.fromisoformat(value.strip())
        if isinstance(value, str):
            return datetime.strptime(value.strip(), self.format).time()
        raise TypeError(f"Cannot coerce {type(value).__name__} to time")
