from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Optional, Type, TYPE_CHECKING

from castable.Enums import CoercionKind
from .CastInterface import BaseCast

if TYPE_CHECKING:
    from castable.Models.Model import Model


class EmbeddedCast(BaseCast):
    """
    Cast for attributes holding another model.
    
    Instances pass through; mappings are built into a new instance through
    the embedded model's own constructor.
    """
    
    kind = CoercionKind.EMBEDDED
    
    def __init__(self, model_class: Type['Model']) -> None:
        self.model_class = model_class
        self.target = model_class.__name__
    
    def set(self, model: Optional['Model'], key: str, value: Any, attributes: Dict[str, Any]) -> 'Model':
        if isinstance(value, self.model_class):
            return value
        if isinstance(value, Mapping):
            return self.model_class(value)
        raise TypeError(f"Cannot build {self.target} from {type(value).__name__}")
