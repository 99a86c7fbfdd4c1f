from __future__ import annotations

from enum import Enum
from typing import Any, List


class Visibility(Enum):
    """Writer visibility of a declared attribute"""
    PUBLIC = "public"
    PRIVATE = "private"
    
    @classmethod
    def from_value(cls, value: Any) -> 'Visibility':
        """Create visibility from an enum member or its string value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        raise ValueError(f"Invalid writer visibility '{value}'")
    
    @classmethod
    def values(cls) -> List[str]:
        """Get all visibility values."""
        return [member.value for member in cls]


class CoercionKind(Enum):
    """Strategy family a cast belongs to"""
    PRIMITIVE = "primitive"
    COLLECTION = "collection"
    EMBEDDED = "embedded"
    IDENTITY = "identity"
    CUSTOM = "custom"


class ModelMode(Enum):
    """Configuration state of a model class"""
    STANDARD = "standard"
    VALUE_OBJECT = "value_object"
