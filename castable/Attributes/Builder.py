from __future__ import annotations

import collections.abc
import types
import typing
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Tuple

from castable.Casts import (
    ArrayCast,
    EmbeddedCast,
    EnumCast,
    IdentityCast,
    MappingCast,
    get_cast_registry
)
from castable.Config import get_settings
from castable.Enums import Visibility
from castable.Exceptions import InvalidAttributeName, InvalidAttributeOption, UnknownAttributeType
from castable.Types import OptionsMap, TypeRef
from .Attribute import Attribute
from .DefaultValue import DefaultValue

# Options consumed by the builder; anything else is handed to the cast
RECOGNIZED_OPTIONS: FrozenSet[str] = frozenset({'name', 'writer', 'default', 'strict', 'required', 'coerce'})

IDENTITY_TYPES: Tuple[Any, ...] = (None, object, typing.Any)

SEQUENCE_ORIGINS: Dict[Any, Callable[[Any], Any]] = {
    list: list,
    collections.abc.Sequence: list,
    collections.abc.MutableSequence: list,
    collections.abc.Iterable: list,
    collections.abc.Collection: list,
    set: set,
    collections.abc.Set: set,
    collections.abc.MutableSet: set,
    frozenset: frozenset,
}

MAPPING_ORIGINS: FrozenSet[Any] = frozenset({
    dict,
    collections.abc.Mapping,
    collections.abc.MutableMapping,
})

# Bare collection types and tags, coerced with untyped members
BARE_COLLECTIONS: Dict[Any, Callable[[Any], Any]] = {
    list: list,
    tuple: tuple,
    set: set,
    frozenset: frozenset,
    dict: dict,
    'array': list,
    'list': list,
    'tuple': tuple,
    'set': set,
    'hash': dict,
    'dict': dict,
}

UNION_TYPES: Tuple[Any, ...] = (typing.Union, getattr(types, 'UnionType', typing.Union))


def merge_options(name: str, options: OptionsMap) -> OptionsMap:
    """Merge declaration options with the injected attribute name."""
    if 'name' in options and options['name'] != name:
        raise InvalidAttributeName(options['name'], f"conflicts with declared attribute name {name!r}")
    return {**options, 'name': name}


class AttributeBuilder:
    """
    Resolves a declared type into an Attribute.

    Resolution order: identity types, `[T]` and `{K: V}` literals, typing
    generics, cast objects, registered tags and types, embedded models,
    enums, cast classes, bare collections. Anything left over raises
    UnknownAttributeType before the attribute is ever stored.
    """

    def __init__(self, type_ref: TypeRef, options: OptionsMap) -> None:
        if 'name' not in options:
            raise InvalidAttributeName(None, "is missing: attribute options need a name")

        self.type_ref = type_ref
        self.options = dict(options)
        self.name: str = self.options['name']

    def build(self) -> Attribute:
        writer_option = self.options.get('writer', Visibility.PUBLIC)
        try:
            writer = Visibility.from_value(writer_option)
        except ValueError as e:
            raise InvalidAttributeOption(self.name, 'writer', writer_option) from e

        strict = bool(self.options.get('strict', get_settings().castable_strict))

        cast = self.resolve(self.type_ref, strict)
        if not self.options.get('coerce', True):
            cast = IdentityCast()

        default = DefaultValue.build(self.options['default']) if 'default' in self.options else None

        return Attribute(
            name=self.name,
            type=self.type_ref,
            cast=cast,
            writer=writer,
            default=default,
            strict=strict,
            required=bool(self.options.get('required', False)),
            options=MappingProxyType(self.options)
        )

    def cast_options(self) -> OptionsMap:
        """Options left for the cast after the builder took its own."""
        return {key: value for key, value in self.options.items() if key not in RECOGNIZED_OPTIONS}

    def resolve(self, type_ref: TypeRef, strict: bool) -> Any:
        if any(type_ref is identity for identity in IDENTITY_TYPES):
            return IdentityCast()

        if isinstance(type_ref, list):
            return self._resolve_list_literal(type_ref, strict)

        if isinstance(type_ref, dict):
            return self._resolve_dict_literal(type_ref, strict)

        if typing.get_origin(type_ref) is not None:
            return self._resolve_generic(type_ref, strict)

        if not isinstance(type_ref, (type, str)) and callable(getattr(type_ref, 'set', None)):
            return type_ref

        registered = get_cast_registry().resolve(type_ref, self.cast_options())
        if registered is not None:
            return registered

        if isinstance(type_ref, type):
            return self._resolve_class(type_ref, strict)

        if isinstance(type_ref, str) and type_ref.strip().lower() in BARE_COLLECTIONS:
            return self._bare_collection(BARE_COLLECTIONS[type_ref.strip().lower()], strict)

        raise UnknownAttributeType(type_ref, self.name)

    def member(self, type_ref: TypeRef, suffix: str, strict: bool) -> Attribute:
        """Build the attribute that coerces collection members."""
        options = {**self.cast_options(), 'name': f"{self.name}{suffix}", 'strict': strict}
        return AttributeBuilder(type_ref, options).build()

    def _resolve_class(self, type_ref: type, strict: bool) -> Any:
        from castable.Models.Model import Model

        if issubclass(type_ref, Model):
            return EmbeddedCast(type_ref)

        if issubclass(type_ref, Enum):
            return EnumCast(type_ref)

        if callable(getattr(type_ref, 'set', None)):
            return type_ref()

        if type_ref in BARE_COLLECTIONS:
            return self._bare_collection(BARE_COLLECTIONS[type_ref], strict)

        raise UnknownAttributeType(type_ref, self.name)

    def _resolve_list_literal(self, type_ref: list, strict: bool) -> ArrayCast:
        if len(type_ref) > 1:
            raise UnknownAttributeType(type_ref, self.name)

        member_type = type_ref[0] if type_ref else None
        return ArrayCast(self.member(member_type, '[]', strict), list)

    def _resolve_dict_literal(self, type_ref: dict, strict: bool) -> MappingCast:
        if len(type_ref) > 1:
            raise UnknownAttributeType(type_ref, self.name)

        key_type, value_type = next(iter(type_ref.items())) if type_ref else (None, None)
        return MappingCast(
            self.member(key_type, '.key', strict),
            self.member(value_type, '.value', strict)
        )

    def _resolve_generic(self, type_ref: TypeRef, strict: bool) -> Any:
        origin = typing.get_origin(type_ref)
        args = typing.get_args(type_ref)

        if origin in UNION_TYPES:
            members = [arg for arg in args if arg is not type(None)]
            if len(members) != 1:
                raise UnknownAttributeType(type_ref, self.name)
            return self.resolve(members[0], strict)

        if origin is tuple:
            if not args:
                return self._bare_collection(tuple, strict)
            if len(args) == 2 and args[1] is Ellipsis:
                return ArrayCast(self.member(args[0], '[]', strict), tuple)
            raise UnknownAttributeType(type_ref, self.name)

        if origin in SEQUENCE_ORIGINS:
            if not args:
                return self._bare_collection(SEQUENCE_ORIGINS[origin], strict)
            if len(args) != 1:
                raise UnknownAttributeType(type_ref, self.name)
            return ArrayCast(self.member(args[0], '[]', strict), SEQUENCE_ORIGINS[origin])

        if origin in MAPPING_ORIGINS:
            if not args:
                return self._bare_collection(dict, strict)
            if len(args) != 2:
                raise UnknownAttributeType(type_ref, self.name)
            return MappingCast(
                self.member(args[0], '.key', strict),
                self.member(args[1], '.value', strict)
            )

        raise UnknownAttributeType(type_ref, self.name)

    def _bare_collection(self, container: Callable[[Any], Any], strict: bool) -> Any:
        if container is dict:
            return MappingCast(self.member(None, '.key', strict), self.member(None, '.value', strict))
        return ArrayCast(self.member(None, '[]', strict), container)
