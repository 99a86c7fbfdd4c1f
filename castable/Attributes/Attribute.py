from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, TYPE_CHECKING

from castable.Enums import CoercionKind, Visibility
from castable.Exceptions import CoercionError
from castable.Types import MISSING, OptionsMap, TypeRef
from castable.Utils.Logger import get_logger
from .DefaultValue import DefaultValue

if TYPE_CHECKING:
    from castable.Models.Model import Model

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class Attribute:
    """
    Metadata for one declared attribute.

    An attribute pairs a name with the cast resolved from its declared
    type, together with its writer visibility, default policy and strictness.
    Attributes are immutable; redeclaring a name builds a new one.

    Usage:
        title = Attribute.build(str, {'name': 'title', 'strict': True})
        title.coerce(42)  # '42'
    """

    name: str
    type: TypeRef
    cast: Any
    writer: Visibility = Visibility.PUBLIC
    default: Optional[DefaultValue] = None
    strict: bool = False
    required: bool = False
    options: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def build(cls, type_ref: TypeRef, options: OptionsMap) -> 'Attribute':
        """
        Resolve a declared type and its options into an attribute.

        @param type_ref: Declared type of the attribute
        @param options: Declaration options, `name` included
        @return: Configured Attribute
        """
        from .Builder import AttributeBuilder

        return AttributeBuilder(type_ref, options).build()

    @property
    def kind(self) -> CoercionKind:
        return getattr(self.cast, 'kind', CoercionKind.CUSTOM)

    @property
    def target(self) -> str:
        return str(getattr(self.cast, 'target', self.cast.__class__.__name__))

    @property
    def has_default(self) -> bool:
        return self.default is not None

    @property
    def public_writer(self) -> bool:
        return self.writer is Visibility.PUBLIC

    def default_value(self, model: Optional['Model'] = None) -> Any:
        """Evaluate the default for a model being built."""
        if self.default is None:
            return None
        return self.default.evaluate(model, self)

    def coerce(self, value: Any, model: Optional['Model'] = None) -> Any:
        """
        Coerce a raw value through the attribute's cast.

        None is never coerced. A value the cast rejects raises CoercionError
        when the attribute is strict and is kept as given otherwise.
        """
        if value is None:
            if self.required and self.strict:
                raise CoercionError(value, self.target, self.name, f"Attribute {self.name!r} is required")
            return None

        attributes: Dict[str, Any] = model.raw_attributes() if model is not None else {}

        try:
            return self.cast.set(model, self.name, value, attributes)
        except CoercionError:
            raise
        except (ValueError, TypeError) as e:
            if self.strict:
                raise CoercionError(value, self.target, self.name) from e

            logger.debug("Coercion failed, keeping raw value", {
                'attribute': self.name,
                'target': self.target,
                'value': value,
                'error': str(e)
            })
            return value

    def read(self, model: 'Model', value: Any) -> Any:
        """Transform a stored value on read through the cast's `get`, if any."""
        if value is MISSING:
            return None

        getter = getattr(self.cast, 'get', None)
        if getter is None:
            return value
        return getter(model, self.name, value, model.raw_attributes())

    def with_writer(self, writer: Visibility) -> 'Attribute':
        """Return a copy of this attribute with another writer visibility."""
        return replace(self, writer=writer)
