"""Fixed-width checked integer wrapper for pricing arithmetic.

Python integers never overflow, but the routing core prices trades in the
same widths as the on-chain programs it models: 64-bit amounts and reserves
with 128-bit intermediates. SafeInt makes every operation checked against a
width:
- Results above the width raise WidthOverflow
- Subtraction underflow raises Underflow
- Division by zero raises DivisionByZero

All of these are CalculationOverflow, so callers that treat an unpriceable
edge as impassable only need to catch that one error.

Usage pattern:
    from wayfinder.safe_int import S

    def output(amount_in: int, reserve_in: int, reserve_out: int) -> int:
        # Inputs are 64-bit, the products 128-bit
        amount = S.u64(amount_in)
        numerator = S(amount) * reserve_out
        denominator = S(reserve_in) + amount

        # Raises WidthOverflow if the result does not fit 64 bits
        return (numerator // denominator).to_u64()
"""

from __future__ import annotations

from wayfinder.constants import U64_MAX, U128_MAX
from wayfinder.errors import CalculationOverflow


class SafeIntError(CalculationOverflow):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Result would be negative."""

    pass


class WidthOverflow(SafeIntError):
    """Value exceeds the maximum of its width."""

    pass


class SafeInt:
    """Unsigned integer with checked arithmetic in a fixed width.

    Attributes:
        value: The underlying integer value (read-only)
        max_value: Largest value representable in this width
    """

    __slots__ = ("_value", "_max")
    _value: int
    _max: int

    def __init__(self, value: int | SafeInt, max_value: int = U128_MAX) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Args:
            value: Integer value to wrap, or SafeInt to copy
            max_value: Upper bound of the width (default 128-bit)

        Raises:
            TypeError: If value is not an int or SafeInt
            Underflow: If value is negative
            WidthOverflow: If value exceeds max_value
        """
        if isinstance(value, SafeInt):
            raw = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            raw = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")
        if raw < 0:
            raise Underflow(f"Negative value cannot be unsigned: {raw}")
        if raw > max_value:
            raise WidthOverflow(f"Value {raw} exceeds width maximum {max_value}")
        self._value = raw
        self._max = max_value

    @classmethod
    def u64(cls, value: int | SafeInt) -> SafeInt:
        """Wrap a value that must fit in 64 bits."""
        return cls(value, U64_MAX)

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    @property
    def max_value(self) -> int:
        return self._max

    def __repr__(self) -> str:
        return f"SafeInt({self._value}, bits={self._max.bit_length()})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    def _wrap(self, result: int) -> SafeInt:
        return SafeInt(result, self._max)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        """Add two values.

        Raises:
            WidthOverflow: If the sum does not fit the width
        """
        return self._wrap(self._value + _extract_value(other))

    def __radd__(self, other: int) -> SafeInt:
        return self._wrap(other + self._value)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"{self._value} - {other_val} is below zero")
        return self._wrap(result)

    def __rsub__(self, other: int) -> SafeInt:
        result = other - self._value
        if result < 0:
            raise Underflow(f"{other} - {self._value} is below zero")
        return self._wrap(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        """Multiply two values.

        Raises:
            WidthOverflow: If the product does not fit the width
        """
        return self._wrap(self._value * _extract_value(other))

    def __rmul__(self, other: int) -> SafeInt:
        return self._wrap(other * self._value)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"{self._value} divided by zero")
        return self._wrap(self._value // other_val)

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SafeInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: SafeInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: SafeInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: SafeInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: SafeInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._value != 0

    # --- Named operations ---

    def checked_sub(self, other: SafeInt | int) -> SafeInt | None:
        """Subtract, returning None on underflow instead of raising."""
        result = self._value - _extract_value(other)
        if result < 0:
            return None
        return self._wrap(result)

    def checked_mul(self, other: SafeInt | int) -> SafeInt | None:
        """Multiply, returning None when the product does not fit the width."""
        result = self._value * _extract_value(other)
        if result > self._max:
            return None
        return self._wrap(result)

    def to_u64(self) -> int:
        """Narrow to a 64-bit value.

        Raises:
            WidthOverflow: If value exceeds 2^64-1
        """
        if self._value > U64_MAX:
            raise WidthOverflow(f"Value exceeds u64 max: {self._value}")
        return self._value

    def fits_u64(self) -> bool:
        """Check if value fits in 64 bits without raising."""
        return self._value <= U64_MAX


def _extract_value(x: SafeInt | int) -> int:
    """Raw int of a SafeInt operand; plain ints pass through."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Short alias used in pricing code
S = SafeInt
