from __future__ import annotations

import json
from typing import Any

from .CastInterface import BaseCast
from castable.Types import JsonValue


class JsonCast(BaseCast):
    """Cast that decodes JSON text; decoded values pass through."""
    
    target = 'json'
    
    def coerce(self, value: Any) -> JsonValue:
        if isinstance(value, (str, bytes)):
            return json.loads(value)  # type: ignore[no-any-return]
        
        return value  # type: ignore[no-any-return]
