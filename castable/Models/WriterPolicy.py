from __future__ import annotations

import inspect
from typing import Any, FrozenSet, Type, TYPE_CHECKING

from .Accessor import AttributeAccessor

if TYPE_CHECKING:
    from castable.Models.Model import Model

# Writers that mass assignment must never reach
INVALID_WRITER_METHODS: FrozenSet[str] = frozenset({
    '__eq__',
    '__ne__',
    '__setitem__',
    'attributes',
    'fill',
})


def _is_writer(member: Any) -> bool:
    if isinstance(member, property):
        return member.fset is not None
    return hasattr(type(member), '__set__')


def compute_allowed_writers(model_class: Type['Model']) -> FrozenSet[str]:
    """
    Collect the writers mass assignment may call on a model class.

    Every public data descriptor with a setter counts as a writer. The
    denylist and privately declared attribute writers are removed, then
    the class's explicitly allowed writers are added back.
    """
    writers = set()

    for name in dir(model_class):
        if name.startswith('_'):
            continue

        member = inspect.getattr_static(model_class, name)
        if isinstance(member, AttributeAccessor):
            if model_class.is_public_writer(name):
                writers.add(name)
        elif _is_writer(member):
            writers.add(name)

    writers -= INVALID_WRITER_METHODS
    return frozenset(writers)


def allowed_writer_methods(model_class: Type['Model']) -> FrozenSet[str]:
    """Get the cached writer whitelist of a model class, computing it when stale."""
    cached = model_class.__dict__.get('_allowed_writers_cache')
    if cached is None:
        cached = compute_allowed_writers(model_class)
        model_class._allowed_writers_cache = cached
    return cached


def invalidate_writer_cache(model_class: Type['Model']) -> None:
    """Drop the cached whitelist of a class and all of its subclasses."""
    model_class._allowed_writers_cache = None
    for subclass in model_class.__subclasses__():
        invalidate_writer_cache(subclass)
