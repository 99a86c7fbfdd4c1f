from __future__ import annotations

from .CastInterface import CastInterface, BaseCast, IdentityCast
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
from .CollectionCast import ArrayCast, MappingCast
from .EmbeddedCast import EmbeddedCast
from .EnumCast import EnumCast
from .JsonCast import JsonCast
from .CastRegistry import CastRegistry, register_cast, get_cast_registry

__all__ = [
    'CastInterface',
    'BaseCast',
    'IdentityCast',
    'StringCast',
    'IntegerCast',
    'FloatCast',
    'DecimalCast',
    'BooleanCast',
    'DateCast',
    'DateTimeCast',
    'TimeCast',
    'ArrayCast',
    'MappingCast',
    'EmbeddedCast',
    'EnumCast',
    'JsonCast',
    'CastRegistry',
    'register_cast',
    'get_cast_registry'
]
