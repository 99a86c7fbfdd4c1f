from __future__ import annotations

import copy
import inspect
from typing import Any, Callable, Optional, TYPE_CHECKING

from castable.Config import get_settings

if TYPE_CHECKING:
    from castable.Attributes.Attribute import Attribute
    from castable.Models.Model import Model

MUTABLE_DEFAULT_TYPES = (list, dict, set, bytearray)


class DefaultValue:
    """
    Default value policy of an attribute.
    
    Static values are returned as declared, mutable ones are deep-copied
    for every instance. Callables are producers evaluated on construction.
    """
    
    def __init__(self, value: Any) -> None:
        self.value = value
    
    @classmethod
    def build(cls, value: Any) -> 'DefaultValue':
        """Pick the policy matching the declared default."""
        if callable(value):
            return ProducedDefault(value)
        if isinstance(value, MUTABLE_DEFAULT_TYPES):
            return ClonedDefault(value)
        return cls(value)
    
    def evaluate(self, model: Optional['Model'], attribute: 'Attribute') -> Any:
        return self.value
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"


class ClonedDefault(DefaultValue):
    """Default holding a mutable value."""
    
    def evaluate(self, model: Optional['Model'], attribute: 'Attribute') -> Any:
        if not get_settings().castable_clone_defaults:
            return self.value
        return copy.deepcopy(self.value)


class ProducedDefault(DefaultValue):
    """Default computed by a callable with zero, one or two parameters."""
    
    def __init__(self, value: Callable[..., Any]) -> None:
        super().__init__(value)
        self.arity = self._count_parameters(value)
    
    def evaluate(self, model: Optional['Model'], attribute: 'Attribute') -> Any:
        if self.arity == 0:
            return self.value()
        if self.arity == 1:
            return self.value(model)
        return self.value(model, attribute)
    
    def _count_parameters(self, func: Callable[..., Any]) -> int:
        """
        Count positional parameters the producer accepts.
        
        @param func: Producer to inspect
        @return: 0, 1 or 2
        """
        try:
            signature = inspect.signature(func)
        except (TypeError, ValueError):
            return 0
        
        positional = [
            param for param in signature.parameters.values()
            if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD)
            and param.default is param.empty
        ]
        if any(param.kind == param.VAR_POSITIONAL for param in signature.parameters.values()):
            return 2
        return min(len(positional), 2)
