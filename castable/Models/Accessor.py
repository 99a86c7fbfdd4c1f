from __future__ import annotations

from typing import Any, Optional, Type, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from castable.Attributes import Attribute
    from castable.Models.Model import Model


class AttributeAccessor:
    """
    Data descriptor exposing one declared attribute on its model class.

    Reads go through `Model.get_attribute`. Writes go through the model's
    internal writer once the writer visibility check passes. Accessed on
    the class, it returns the Attribute itself.

    A subclass created before its parent declared the attribute inherits
    the descriptor but not the attribute; there it behaves as a missing
    attribute and raises AttributeError.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def __set_name__(self, owner: Type['Model'], name: str) -> None:
        self.name = name

    def __get__(self, instance: Optional['Model'], owner: Type['Model']) -> Union['Attribute', Any]:
        self._assert_declared(owner)
        if instance is None:
            return owner.attribute_set()[self.name]
        return instance.get_attribute(self.name)

    def __set__(self, instance: 'Model', value: Any) -> None:
        model_class = type(instance)
        self._assert_declared(model_class)
        model_class.assert_public_writer(self.name)
        instance._set_attribute(self.name, value)

    def __delete__(self, instance: 'Model') -> None:
        model_class = type(instance)
        self._assert_declared(model_class)
        model_class.assert_public_writer(self.name)
        instance._forget_attribute(self.name)

    def _assert_declared(self, owner: Type['Model']) -> None:
        if self.name not in owner.attribute_set():
            raise AttributeError(f"{owner.__name__!r} has no declared attribute {self.name!r}")

    def __repr__(self) -> str:
        return f"AttributeAccessor({self.name!r})"
