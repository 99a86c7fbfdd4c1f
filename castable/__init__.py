"""
castable: declared, coerced attributes for plain Python classes.

Classes:
- Model: Base class with a coercing constructor and guarded mass assignment
- ValueObject: Immutable model compared by attribute values
- Attribute / AttributeSet: Attribute metadata and the per-class registry

Helper Functions:
- register_cast: Register a custom cast for a type tag or a Python type
- get_settings / configure: Library configuration

Examples:
    from castable import Model

    class Book(Model):
        __attributes__ = {'title': str, 'page_count': int}

    Book({'title': 'Dune', 'page_count': '412'}).attributes
    # {'title': 'Dune', 'page_count': 412}
"""

from __future__ import annotations

from castable.Config import CastableSettings, get_settings, configure, reset_settings
from castable.Utils.Logger import apply_log_level
from castable.Enums import Visibility, CoercionKind, ModelMode
from castable.Exceptions import (
    CastableException,
    InvalidAttributeName,
    UnknownAttributeType,
    InvalidAttributeOption,
    CoercionError,
    InaccessibleWriterError,
    ValueObjectError
)
from castable.Casts import CastInterface, BaseCast, register_cast
from castable.Attributes import Attribute, AttributeSet
from castable.Models import Model, ValueObject
from castable.Types import MISSING

__version__ = "1.0.0"

apply_log_level(get_settings().castable_log_level)

__all__ = [
    'Model',
    'ValueObject',
    'Attribute',
    'AttributeSet',
    'CastInterface',
    'BaseCast',
    'register_cast',
    'Visibility',
    'CoercionKind',
    'ModelMode',
    'CastableException',
    'InvalidAttributeName',
    'UnknownAttributeType',
    'InvalidAttributeOption',
    'CoercionError',
    'InaccessibleWriterError',
    'ValueObjectError',
    'CastableSettings',
    'get_settings',
    'configure',
    'reset_settings',
    'MISSING',
]
