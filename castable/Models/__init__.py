from __future__ import annotations

from .Model import Model, FRAMEWORK_NAMES
from .ValueObject import ValueObject
from .Accessor import AttributeAccessor
from .WriterPolicy import INVALID_WRITER_METHODS, allowed_writer_methods, invalidate_writer_cache

__all__ = [
    'Model',
    'ValueObject',
    'AttributeAccessor',
    'FRAMEWORK_NAMES',
    'INVALID_WRITER_METHODS',
    'allowed_writer_methods',
    'invalidate_writer_cache'
]
