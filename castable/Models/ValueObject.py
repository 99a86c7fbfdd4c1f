from __future__ import annotations

from typing import ClassVar

from castable.Enums import ModelMode
from .Model import Model


class ValueObject(Model):
    """
    Base class for immutable, value-compared models.

    Attributes declared on a value object get private writers unless
    declared with `writer='public'` or listed in `__allowed_writers__`.
    Mass assignment is not available; build a changed copy with `with_`.
    Two instances are equal when they are of the same class and every
    declared attribute holds an equal value.

    Usage:
        class Money(ValueObject):
            __attributes__ = {'amount': Decimal, 'currency': str}

        price = Money(amount='9.99', currency='EUR')
        price == Money({'amount': Decimal('9.99'), 'currency': 'EUR'})  # True
        price.with_(currency='USD')
    """

    _mode: ClassVar[ModelMode] = ModelMode.VALUE_OBJECT
