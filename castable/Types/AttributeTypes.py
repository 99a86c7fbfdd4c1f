"""Common type definitions for attribute declarations.

This module provides reusable type aliases for declaration options,
attribute-value mappings and JSON-like values handled by the casts.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Union
from typing_extensions import TypeAlias

# JSON-compatible value types
JsonValue: TypeAlias = Union[
    str,
    int,
    float,
    bool,
    None,
    List['JsonValue'],
    Dict[str, 'JsonValue']
]

# A declared type: a Python type, a typing generic, a string tag,
# a `[T]` / `{K: V}` literal, a cast object or None
TypeRef: TypeAlias = Any

# Declaration options (`writer`, `default`, `strict`, ... plus cast options)
OptionsMap: TypeAlias = Dict[str, Any]

# Raw attribute values handed to a constructor or to mass assignment
AttributeMap: TypeAlias = Mapping[Any, Any]

# Factory registered for a custom type tag
CastFactory: TypeAlias = Callable[[OptionsMap], Any]


class _Missing:
    """Marker for an attribute that has no stored value."""
    
    _instance: Optional['_Missing'] = None
    
    def __new__(cls) -> '_Missing':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance
    
    def __repr__(self) -> str:
        return 'MISSING'
    
    def __bool__(self) -> bool:
        return False


MISSING = _Missing()
