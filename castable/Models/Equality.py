from __future__ import annotations

from typing import Any, Hashable, Tuple, TYPE_CHECKING

from castable.Types import MISSING

if TYPE_CHECKING:
    from castable.Models.Model import Model


def value_key(model: 'Model') -> Tuple[Tuple[str, Any], ...]:
    """Pairs of attribute name and stored value, read from the registry at call time."""
    stored = model.raw_attributes()
    return tuple(
        (name, stored.get(name, MISSING))
        for name in type(model).attribute_set().names()
    )


def values_equal(left: 'Model', right: Any) -> bool:
    if type(left) is not type(right):
        return False
    return dict(value_key(left)) == dict(value_key(right))


def _freeze(value: Any) -> Hashable:
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(item) for item in value)
    if isinstance(value, dict):
        return frozenset((_freeze(key), _freeze(item)) for key, item in value.items())
    return value  # type: ignore[no-any-return]


def values_hash(model: 'Model') -> int:
    return hash((type(model), _freeze(value_key(model))))
