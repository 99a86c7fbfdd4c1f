from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Dict, Optional

from castable.Types import CastFactory, OptionsMap, TypeRef
from .JsonCast import JsonCast
from .PrimitiveCast import (
    StringCast,
    IntegerCast,
    FloatCast,
    DecimalCast,
    BooleanCast,
    DateCast,
    DateTimeCast,
    TimeCast
)


class CastRegistry:
    """Lookup table from type tags and Python types to cast factories."""
    
    def __init__(self) -> None:
        self._factories: Dict[Any, CastFactory] = {}
    
    def register(self, key: TypeRef, factory: Any) -> None:
        """
        Register a cast for a string tag or a Python type.
        
        @param key: String tag (case-insensitive) or type
        @param factory: Callable receiving the declaration options, or a cast object
        """
        normalized = self._normalize_key(key)
        if normalized is None:
            raise TypeError(f"Cast keys must be strings or types, got {key!r}")
        
        if isinstance(factory, type) and callable(getattr(factory, 'set', None)):
            cast_class = factory
            factory = lambda options: cast_class()
        elif callable(getattr(factory, 'set', None)):
            cast = factory
            factory = lambda options: cast
        elif not callable(factory):
            raise TypeError(f"Cast factory for {key!r} must be callable")
        
        self._factories[normalized] = factory
    
    def resolve(self, key: TypeRef, options: OptionsMap) -> Optional[Any]:
        """Build the cast registered for `key`, or None when nothing matches."""
        normalized = self._normalize_key(key)
        if normalized is None or normalized not in self._factories:
            return None
        return self._factories[normalized](options)
    
    def has(self, key: TypeRef) -> bool:
        normalized = self._normalize_key(key)
        return normalized is not None and normalized in self._factories
    
    def _normalize_key(self, key: TypeRef) -> Optional[Any]:
        if isinstance(key, str):
            return key.strip().lower()
        if isinstance(key, type):
            return key
        return None


def _temporal(cast_class: type) -> CastFactory:
    return lambda options: cast_class(format=options.get('format'))


def _plain(cast_class: type) -> CastFactory:
    return lambda options: cast_class()


def default_registry() -> CastRegistry:
    """Create a registry holding the built-in primitive casts."""
    registry = CastRegistry()
    
    primitives: Dict[Any, CastFactory] = {
        str: _plain(StringCast),
        'string': _plain(StringCast),
        'str': _plain(StringCast),
        int: _plain(IntegerCast),
        'integer': _plain(IntegerCast),
        'int': _plain(IntegerCast),
        float: _plain(FloatCast),
        'float': _plain(FloatCast),
        Decimal: _plain(DecimalCast),
        'decimal': _plain(DecimalCast),
        bool: _plain(BooleanCast),
        'boolean': _plain(BooleanCast),
        'bool': _plain(BooleanCast),
        date: _temporal(DateCast),
        'date': _temporal(DateCast),
        datetime: _temporal(DateTimeCast),
        'datetime': _temporal(DateTimeCast),
        time: _temporal(TimeCast),
        'time': _temporal(TimeCast),
        'json': _plain(JsonCast),
    }
    
    for key, factory in primitives.items():
        registry.register(key, factory)
    
    return registry


# Global registry used by the attribute builder
cast_registry = default_registry()


def register_cast(key: TypeRef, factory: Any) -> None:
    """Register a custom cast for a type tag or a Python type."""
    cast_registry.register(key, factory)


def get_cast_registry() -> CastRegistry:
    """Get the global cast registry."""
    return cast_registry
