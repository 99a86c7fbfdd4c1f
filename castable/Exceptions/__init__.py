from __future__ import annotations

from .AttributeExceptions import (
    CastableException,
    InvalidAttributeName,
    UnknownAttributeType,
    InvalidAttributeOption,
    CoercionError,
    InaccessibleWriterError,
    ValueObjectError
)

__all__ = [
    'CastableException',
    'InvalidAttributeName',
    'UnknownAttributeType',
    'InvalidAttributeOption',
    'CoercionError',
    'InaccessibleWriterError',
    'ValueObjectError'
]
