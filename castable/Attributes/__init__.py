"""
Attribute declaration module.

Classes:
- Attribute: Immutable metadata for one declared attribute
- AttributeBuilder: Resolves a declared type into an Attribute
- AttributeSet: Ordered per-class registry of attributes
- DefaultValue: Default value policies

Examples:
    attributes = AttributeSet()
    attributes.declare('title', str)
    attributes.declare('tags', list[str], {'default': list})
    attributes.names()  # ['title', 'tags']
"""

from .Attribute import Attribute
from .Builder import AttributeBuilder, merge_options
from .AttributeSet import AttributeSet, RESERVED_NAMES
from .DefaultValue import DefaultValue

__all__ = [
    'Attribute',
    'AttributeBuilder',
    'merge_options',
    'AttributeSet',
    'RESERVED_NAMES',
    'DefaultValue'
]
