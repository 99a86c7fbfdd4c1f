from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable, Dict, Optional, TYPE_CHECKING

from castable.Enums import CoercionKind
from .CastInterface import BaseCast

if TYPE_CHECKING:
    from castable.Attributes.Attribute import Attribute
    from castable.Models.Model import Model


class ArrayCast(BaseCast):
    """
    Cast for sequences and sets of a member type.
    
    Every element is coerced through the member attribute, so element
    strictness follows the owning attribute.
    """
    
    kind = CoercionKind.COLLECTION
    
    def __init__(self, member: 'Attribute', container: Callable[[Any], Any] = list) -> None:
        self.member = member
        self.container = container
        self.target = f"{container.__name__}[{member.cast.target}]"
    
    def set(self, model: Optional['Model'], key: str, value: Any, attributes: Dict[str, Any]) -> Any:
        if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Iterable):
            raise TypeError(f"Cannot coerce {type(value).__name__} to {self.target}")
        
        return self.container(self.member.coerce(item, model) for item in value)


class MappingCast(BaseCast):
    """Cast for dictionaries with key and value member types."""
    
    kind = CoercionKind.COLLECTION
    
    def __init__(self, key: 'Attribute', value: 'Attribute') -> None:
        self.key = key
        self.value = value
        self.target = f"dict[{key.cast.target}, {value.cast.target}]"
    
    def set(self, model: Optional['Model'], key: str, value: Any, attributes: Dict[str, Any]) -> Dict[Any, Any]:
        if isinstance(value, Mapping):
            items = value.items()
        elif isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            items = dict(value).items()
        else:
            raise TypeError(f"Cannot coerce {type(value).__name__} to {self.target}")
        
        return {
            self.key.coerce(item_key, model): self.value.coerce(item_value, model)
            for item_key, item_value in items
        }
