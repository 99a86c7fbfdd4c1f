from __future__ import annotations

from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Optional

from castable.Exceptions import InvalidAttributeName
from castable.Types import OptionsMap, TypeRef
from .Attribute import Attribute
from .Builder import merge_options

RESERVED_NAMES: FrozenSet[str] = frozenset({'attributes', 'fill'})


class AttributeSet:
    """
    Ordered, name-keyed collection of the attributes declared on a class.

    Redeclaring a name replaces the attribute in place, so the declaration
    order of names never changes. Each model class owns one set; subclasses
    receive a copy, never a shared reference.
    """

    def __init__(
        self,
        attributes: Iterable[Attribute] = (),
        reserved: FrozenSet[str] = RESERVED_NAMES
    ) -> None:
        self._attributes: Dict[str, Attribute] = {}
        self.reserved = reserved

        for attribute in attributes:
            self.add(attribute)

    def declare(self, name: Any, type_ref: TypeRef = None, options: Optional[OptionsMap] = None) -> Attribute:
        """
        Declare an attribute, replacing any previous one with the same name.

        @param name: Attribute name
        @param type_ref: Declared type
        @param options: Declaration options
        @return: The stored Attribute
        """
        self.assert_valid_name(name)
        attribute = Attribute.build(type_ref, merge_options(name, options or {}))
        self._attributes[name] = attribute
        return attribute

    def add(self, attribute: Attribute) -> 'AttributeSet':
        """Store an already built attribute."""
        self.assert_valid_name(attribute.name)
        self._attributes[attribute.name] = attribute
        return self

    def assert_valid_name(self, name: Any) -> None:
        if not isinstance(name, str) or not name.isidentifier():
            raise InvalidAttributeName(name, "is not a valid identifier")
        if name.startswith('_'):
            raise InvalidAttributeName(name, "is reserved for internal use")
        if name in self.reserved:
            raise InvalidAttributeName(name)

    def lookup(self, name: str) -> Optional[Attribute]:
        return self._attributes.get(name)

    get = lookup

    def names(self) -> List[str]:
        """Get attribute names in declaration order."""
        return list(self._attributes)

    def copy(self) -> 'AttributeSet':
        return AttributeSet(self._attributes.values(), self.reserved)

    def __getitem__(self, name: str) -> Attribute:
        return self._attributes[name]

    def __contains__(self, name: object) -> bool:
        return name in self._attributes

    def __iter__(self) -> Iterator[Attribute]:
        return iter(list(self._attributes.values()))

    def __len__(self) -> int:
        return len(self._attributes)

    def __repr__(self) -> str:
        return f"AttributeSet({', '.join(self._attributes)})"
