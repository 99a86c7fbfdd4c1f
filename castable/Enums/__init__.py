from __future__ import annotations

from .AttributeEnums import Visibility, CoercionKind, ModelMode

__all__: list[str] = [
    'Visibility',
    'CoercionKind',
    'ModelMode',
]
