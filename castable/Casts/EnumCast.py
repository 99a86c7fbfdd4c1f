from __future__ import annotations

from enum import Enum
from typing import Any, Type

from castable.Enums import CoercionKind
from .CastInterface import BaseCast


class EnumCast(BaseCast):
    """
    Cast for enum values.
    
    Accepts members, member values and member names, in that order.
    """
    
    kind = CoercionKind.PRIMITIVE
    
    def __init__(self, enum_class: Type[Enum]) -> None:
        self.enum_class = enum_class
        self.target = enum_class.__name__
    
    def coerce(self, value: Any) -> Enum:
        if isinstance(value, self.enum_class):
            return value
        
        try:
            return self.enum_class(value)
        except ValueError:
            pass
        
        if isinstance(value, str) and value in self.enum_class.__members__:
            return self.enum_class.__members__[value]
        
        raise ValueError(f"Invalid value '{value}' for enum {self.target}")
