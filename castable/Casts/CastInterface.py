from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, TYPE_CHECKING, runtime_checkable

from castable.Enums import CoercionKind

if TYPE_CHECKING:
    from castable.Models.Model import Model


@runtime_checkable
class CastInterface(Protocol):
    """Interface for attribute casting."""
    
    def set(self, model: Optional['Model'], key: str, value: Any, attributes: Dict[str, Any]) -> Any:
        """Convert a raw assigned value into the stored value."""
        ...


class BaseCast:
    """
    Base class for the built-in casts.
    
    Subclasses implement `coerce` and signal a value they cannot convert
    by raising ValueError or TypeError. The owning attribute decides whether
    that failure is raised or tolerated.
    """
    
    kind: CoercionKind = CoercionKind.PRIMITIVE
    target: str = 'object'
    
    def get(self, model: Optional['Model'], key: str, value: Any, attributes: Dict[str, Any]) -> Any:
        """Return the stored value unchanged."""
        return value
    
    def set(self, model: Optional['Model'], key: str, value: Any, attributes: Dict[str, Any]) -> Any:
        """Coerce the value being assigned."""
        return self.coerce(value)
    
    def coerce(self, value: Any) -> Any:
        raise NotImplementedError
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.target})"


class IdentityCast(BaseCast):
    """Cast that stores values as given."""
    
    kind = CoercionKind.IDENTITY
    target = 'object'
    
    def coerce(self, value: Any) -> Any:
        return value
