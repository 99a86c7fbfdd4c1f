from __future__ import annotations

from typing import Any, Optional


class CastableException(Exception):
    """Base exception for attribute declaration and assignment"""
    pass


class InvalidAttributeName(CastableException, ValueError):
    """Exception raised when an attribute is declared with a reserved name"""
    
    def __init__(self, name: Any, reason: Optional[str] = None) -> None:
        self.name = name
        self.reason = reason or "is not allowed as an attribute name"
        
        super().__init__(f"{name!r} {self.reason}")


class UnknownAttributeType(CastableException, TypeError):
    """Exception raised when a type reference cannot be resolved to a cast"""
    
    def __init__(self, type_ref: Any, name: Optional[str] = None) -> None:
        self.type_ref = type_ref
        self.name = name
        
        where = f" for attribute {name!r}" if name else ""
        super().__init__(f"Cannot resolve attribute type {type_ref!r}{where}")


class CoercionError(CastableException, ValueError):
    """Exception raised when a strict attribute cannot coerce its value"""
    
    def __init__(
        self,
        value: Any,
        target: Any,
        attribute: Optional[str] = None,
        message: Optional[str] = None
    ) -> None:
        self.value = value
        self.target = target
        self.attribute = attribute
        
        if message is None:
            message = f"Cannot coerce {value!r} to {target}"
            if attribute:
                message = f"{message} (attribute {attribute!r})"
        
        super().__init__(message)


class InvalidAttributeOption(CastableException, ValueError):
    """Exception raised when a declaration option has an unsupported value"""
    
    def __init__(self, name: Any, option: str, value: Any) -> None:
        self.name = name
        self.option = option
        self.value = value
        
        super().__init__(f"Invalid {option} {value!r} for attribute {name!r}")


class InaccessibleWriterError(CastableException, AttributeError):
    """Exception raised when a private writer is used from outside the class"""
    
    def __init__(self, owner: str, writer: str) -> None:
        self.owner = owner
        self.writer = writer
        
        super().__init__(f"Writer `{writer}` of {owner} is private")


class ValueObjectError(CastableException, RuntimeError):
    """Exception raised when value object mode is activated twice"""
    
    def __init__(self, owner: str) -> None:
        self.owner = owner
        
        super().__init__(f"{owner} is already a value object")
