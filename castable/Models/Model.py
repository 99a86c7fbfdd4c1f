from __future__ import annotations

from contextlib import contextmanager
from typing import Any, ClassVar, Dict, FrozenSet, Iterator, Mapping, Optional, Tuple, Type, TypeVar

from castable.Attributes import AttributeSet, RESERVED_NAMES
from castable.Enums import ModelMode, Visibility
from castable.Exceptions import CoercionError, InaccessibleWriterError, InvalidAttributeName, ValueObjectError
from castable.Types import MISSING, AttributeMap, OptionsMap, TypeRef
from castable.Utils.Logger import get_logger
from .Accessor import AttributeAccessor
from .Equality import values_equal, values_hash
from .WriterPolicy import allowed_writer_methods, invalidate_writer_cache

T = TypeVar('T', bound='Model')

logger = get_logger(__name__)


class Model:
    """
    Base class for objects with declared, coerced attributes.

    Attributes are declared on the class, either declaratively through
    `__attributes__` or with the chainable `attribute` class method. Every
    model gets a constructor that coerces a mapping of values, guarded mass
    assignment through `fill`, and a snapshot of its values in `attributes`.

    Usage:
        class Book(Model):
            __attributes__ = {
                'title': str,
                'page_count': int,
                'tags': (list[str], {'default': list}),
            }

        Book.attribute('published_at', datetime)

        book = Book({'title': 'Dune', 'page_count': '412'})
        book.page_count  # 412
        book.fill({'title': 'Dune Messiah', 'rogue': 'ignored'})
    """

    # Declarative attributes: name -> type, or name -> (type, options)
    __attributes__: ClassVar[Dict[str, Any]] = {}

    # Writers kept public on value objects
    __allowed_writers__: ClassVar[Tuple[str, ...]] = ()

    _attribute_set: ClassVar[AttributeSet]
    _allowed_writers_cache: ClassVar[Optional[FrozenSet[str]]] = None
    _mode: ClassVar[ModelMode] = ModelMode.STANDARD

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)

        attribute_set = AttributeSet(reserved=FRAMEWORK_NAMES)
        for base in reversed(cls.__mro__[1:]):
            inherited = base.__dict__.get('_attribute_set')
            if inherited is not None:
                for attribute in inherited:
                    attribute_set.add(attribute)

        cls._attribute_set = attribute_set
        cls._allowed_writers_cache = None

        for name, declaration in cls.__dict__.get('__attributes__', {}).items():
            type_ref, options = cls._split_declaration(declaration)
            cls._declare_attribute(name, type_ref, options)

    def __init__(self, attributes: Optional[AttributeMap] = None, **kwargs: Any) -> None:
        self._attributes: Dict[str, Any] = {}

        values = self._normalize(attributes)
        values.update(kwargs)

        for attribute in type(self).attribute_set():
            if attribute.name in values:
                self._set_attribute(attribute.name, values[attribute.name])
            elif attribute.has_default:
                self._set_attribute(attribute.name, attribute.default_value(self))
            elif attribute.required and attribute.strict:
                raise CoercionError(None, attribute.target, attribute.name, f"Attribute {attribute.name!r} is required")

    # Declaration API

    @classmethod
    def attribute(cls: Type[T], name: str, type_ref: TypeRef = None, **options: Any) -> Type[T]:
        """
        Declare an attribute on the class.

        @param name: Attribute name
        @param type_ref: Declared type; None stores values as given
        @param options: writer, default, strict, required, coerce and cast options
        @return: The class, for chaining
        """
        return cls._declare_attribute(name, type_ref, options)

    @classmethod
    def _declare_attribute(cls: Type[T], name: str, type_ref: TypeRef, options: OptionsMap) -> Type[T]:
        options = dict(options)
        if cls.is_value_object():
            options.setdefault('writer', Visibility.PRIVATE)

        existing = cls.__dict__.get(name) if isinstance(name, str) else None
        if existing is not None and not isinstance(existing, AttributeAccessor) and _is_member(existing):
            raise InvalidAttributeName(name, f"would replace a member defined on {cls.__name__}")

        attribute = cls._attribute_set.declare(name, type_ref, options)

        if not isinstance(cls.__dict__.get(attribute.name), AttributeAccessor):
            setattr(cls, attribute.name, AttributeAccessor(attribute.name))

        invalidate_writer_cache(cls)

        logger.debug("Declared attribute", {
            'model': cls.__name__,
            'attribute': attribute.name,
            'target': attribute.target,
            'writer': attribute.writer.value
        })
        return cls

    @classmethod
    @contextmanager
    def as_value_object(cls: Type[T]) -> Iterator[Type[T]]:
        """
        Switch the class to value object mode for the declarations in the block.

        Attributes declared from now on get private writers, mass assignment
        becomes private and equality derives from the attribute values.
        """
        if cls.is_value_object():
            raise ValueObjectError(cls.__name__)

        cls._mode = ModelMode.VALUE_OBJECT
        invalidate_writer_cache(cls)

        logger.info("Activated value object mode", {'model': cls.__name__})
        yield cls

    @classmethod
    def attribute_set(cls) -> AttributeSet:
        return cls._attribute_set

    @classmethod
    def allowed_writer_methods(cls) -> FrozenSet[str]:
        """The writers mass assignment may invoke on this class."""
        return allowed_writer_methods(cls)

    @classmethod
    def is_value_object(cls) -> bool:
        return cls._mode is ModelMode.VALUE_OBJECT

    @classmethod
    def is_public_writer(cls, name: str) -> bool:
        attribute = cls._attribute_set.lookup(name)
        if attribute is None:
            return False
        return attribute.public_writer or name in cls.__allowed_writers__

    @classmethod
    def assert_public_writer(cls, name: str) -> None:
        if not cls.is_public_writer(name):
            raise InaccessibleWriterError(cls.__name__, name)

    # Instance API

    @property
    def attributes(self) -> Dict[str, Any]:
        """Snapshot of every set attribute, in declaration order."""
        return {
            attribute.name: attribute.read(self, self._attributes[attribute.name])
            for attribute in type(self).attribute_set()
            if attribute.name in self._attributes
        }

    @attributes.setter
    def attributes(self, attributes: AttributeMap) -> None:
        self.fill(attributes)

    def fill(self: T, attributes: AttributeMap) -> T:
        """
        Mass-assign attributes through their public writers.

        Keys without a declared attribute or without an allowed writer are
        skipped silently.
        """
        if type(self).is_value_object():
            raise InaccessibleWriterError(type(self).__name__, 'fill')
        return self._fill(attributes)

    def _fill(self: T, attributes: AttributeMap) -> T:
        model_class = type(self)
        allowed = model_class.allowed_writer_methods()
        values = self._normalize(attributes)

        for attribute in model_class.attribute_set():
            if attribute.name in values and attribute.name in allowed:
                self._set_attribute(attribute.name, values[attribute.name])

        skipped = [
            key for key in values
            if key not in allowed or key not in model_class.attribute_set()
        ]
        if skipped:
            logger.debug("Skipped mass assignment keys", {
                'model': model_class.__name__,
                'keys': skipped
            })
        return self

    def get_attribute(self, name: str) -> Any:
        """Read an attribute; unset attributes read as None."""
        attribute = type(self).attribute_set()[name]
        return attribute.read(self, self._attributes.get(name, MISSING))

    def set_attribute(self, name: str, value: Any) -> None:
        """Coerce and store an attribute through its public writer."""
        type(self).attribute_set()[name]
        type(self).assert_public_writer(name)
        self._set_attribute(name, value)

    def forget_attribute(self, name: str) -> None:
        """Unset an attribute through its public writer."""
        type(self).attribute_set()[name]
        type(self).assert_public_writer(name)
        self._forget_attribute(name)

    def _set_attribute(self, name: str, value: Any) -> None:
        attribute = type(self).attribute_set()[name]
        self._attributes[name] = attribute.coerce(value, self)

    def _forget_attribute(self, name: str) -> None:
        self._attributes.pop(name, None)

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    def raw_attributes(self) -> Dict[str, Any]:
        """Stored values without read-side casting."""
        return dict(self._attributes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the model to a dictionary, converting embedded models too."""
        return {key: _to_primitive(value) for key, value in self.attributes.items()}

    def with_(self: T, **changes: Any) -> T:
        """Build a new instance from this one's values updated with `changes`."""
        values = self.raw_attributes()
        values.update(changes)
        return type(self)(values)

    def __getitem__(self, name: str) -> Any:
        if name not in type(self).attribute_set():
            raise KeyError(name)
        return self.get_attribute(name)

    def __setitem__(self, name: str, value: Any) -> None:
        if name not in type(self).attribute_set():
            raise KeyError(name)
        self.set_attribute(name, value)

    def __eq__(self, other: object) -> bool:
        if not type(self).is_value_object():
            return NotImplemented
        return values_equal(self, other)

    def __hash__(self) -> int:
        if not type(self).is_value_object():
            return object.__hash__(self)
        return values_hash(self)

    def __repr__(self) -> str:
        values = ", ".join(f"{key}={value!r}" for key, value in self.attributes.items())
        return f"{self.__class__.__name__}({values})"

    # Helpers

    @staticmethod
    def _normalize(attributes: Optional[AttributeMap]) -> Dict[str, Any]:
        if attributes is None:
            return {}
        if not isinstance(attributes, Mapping):
            raise TypeError(f"Expected a mapping of attributes, got {type(attributes).__name__}")
        return {key if isinstance(key, str) else str(key): value for key, value in attributes.items()}

    @staticmethod
    def _split_declaration(declaration: Any) -> Tuple[TypeRef, OptionsMap]:
        if isinstance(declaration, tuple) and len(declaration) == 2 and isinstance(declaration[1], Mapping):
            return declaration[0], dict(declaration[1])
        return declaration, {}


def _is_member(value: Any) -> bool:
    return callable(value) or isinstance(value, (property, classmethod, staticmethod))


def _to_primitive(value: Any) -> Any:
    if isinstance(value, Model):
        return value.to_dict()
    if isinstance(value, tuple):
        return tuple(_to_primitive(item) for item in value)
    if isinstance(value, (list, set, frozenset)):
        return [_to_primitive(item) for item in value]
    if isinstance(value, dict):
        return {key: _to_primitive(item) for key, item in value.items()}
    return value


# Names a declared attribute may not shadow
FRAMEWORK_NAMES: FrozenSet[str] = RESERVED_NAMES | frozenset(
    name for name in dir(Model) if not name.startswith('_')
)

Model._attribute_set = AttributeSet(reserved=FRAMEWORK_NAMES)
