from __future__ import annotations

import logging
import math
from decimal import Decimal
from numbers import Real

from order_placement.core.errors import InvalidInputError

logger = logging.getLogger(__name__)

PRICE_EPSILON = 1e-9
DEFAULT_CURRENCY = "THB"


class Price:
    """Immutable, finite, non-negative monetary amount.

    Arithmetic returns a new ``Price`` or raises ``InvalidInputError``; a result
    that would be negative is an error, never clamped to zero.
    """

    __slots__ = ("_amount",)

    def __init__(self, amount: float):
        if isinstance(amount, bool) or not isinstance(amount, (Real, Decimal)):
            raise InvalidInputError(f"price must be a number, got {type(amount).__name__}")
        value = _as_float(amount, "price")
        if math.isnan(value) or math.isinf(value):
            logger.error("price must be a finite number: %r", amount)
            raise InvalidInputError("price must be a finite number")
        if value < 0:
            logger.error("price cannot be negative: %r", amount)
            raise InvalidInputError("price cannot be negative")
        object.__setattr__(self, "_amount", value)

    @classmethod
    def of(cls, amount: float) -> Price:
        return cls(amount)

    @classmethod
    def zero(cls) -> Price:
        return cls(0.0)

    def __setattr__(self, name, value):
        raise AttributeError("Price is immutable")

    @property
    def amount(self) -> float:
        return self._amount

    def is_zero(self) -> bool:
        return self._amount == 0

    def is_positive(self) -> bool:
        return self._amount > 0

    def add(self, other: Price) -> Price:
        return Price(self._amount + _coerce(other).amount)

    def subtract(self, other: Price) -> Price:
        return Price(self._amount - _coerce(other).amount)

    def multiply(self, multiplier: float) -> Price:
        return Price(self._amount * _as_float(multiplier, "multiplier"))

    def multiply_by_int(self, quantity: int) -> Price:
        if quantity < 0:
            logger.error("quantity cannot be negative: %s", quantity)
            raise InvalidInputError("quantity cannot be negative")
        return self.multiply(_as_float(quantity, "quantity"))

    def divide(self, divisor: float) -> Price:
        if divisor == 0:
            logger.error("cannot divide price by zero")
            raise InvalidInputError("cannot divide by zero")
        return Price(self._amount / _as_float(divisor, "divisor"))

    def divide_by_int(self, divisor: int) -> Price:
        return self.divide(_as_float(divisor, "divisor"))

    def round(self, precision: int = 2) -> Price:
        multiplier = 10**precision
        return Price(math.floor(self._amount * multiplier + 0.5) / multiplier)

    def equals(self, other: Price | None) -> bool:
        if other is None:
            return False
        return abs(self._amount - other.amount) < PRICE_EPSILON

    def display(self, currency: str = "") -> str:
        return f"{currency or DEFAULT_CURRENCY} {self._amount:.2f}"

    __add__ = add
    __sub__ = subtract

    def __mul__(self, multiplier: float) -> Price:
        if isinstance(multiplier, int) and not isinstance(multiplier, bool):
            return self.multiply_by_int(multiplier)
        return self.multiply(multiplier)

    def __truediv__(self, divisor: float) -> Price:
        return self.divide(divisor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: Price) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return self._amount < other.amount and not self.equals(other)

    def __gt__(self, other: Price) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return self._amount > other.amount and not self.equals(other)

    def __le__(self, other: Price) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return not self > other

    def __ge__(self, other: Price) -> bool:
        if not isinstance(other, Price):
            return NotImplemented
        return not self < other

    def __float__(self) -> float:
        return self._amount

    def __str__(self) -> str:
        return f"{self._amount:.2f}"

    def __repr__(self) -> str:
        return f"Price({self._amount!r})"

    __hash__ = None


def _coerce(other: Price) -> Price:
    # No implicit zero for a missing operand; callers pass Price.zero() explicitly.
    if not isinstance(other, Price):
        raise InvalidInputError("price operand is required")
    return other


def _as_float(value: float, label: str) -> float:
    try:
        return float(value)
    except (OverflowError, TypeError, ValueError) as exc:
        logger.error("%s is not representable as a float: %s", label, exc)
        raise InvalidInputError(f"{label} is out of range") from exc
