"""Bounded integer wrapper for reserve and amount arithmetic.

Python integers never wrap, so the uint256 range of on-chain amounts has to
be enforced explicitly. SafeInt makes that the default:
- Operands outside [0, 2^256-1] raise ArithmeticOverflow on wrap
- Multiplication or addition past 2^256-1 raises ArithmeticOverflow
- Subtraction below zero raises Underflow
- Division by zero raises DivisionByZero

Usage pattern:
    from amm_router.safe_int import S

    def calculate(a: int, b: int, c: int) -> int:
        sa, sb, sc = S(a), S(b), S(c)
        result = (sa * sb) // sc  # Raises on overflow or sc == 0
        return result.value
"""

from __future__ import annotations

from amm_router.errors import RouterError

UINT256_MAX = 2**256 - 1


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class DivisionByZero(SafeIntError):
    """Division by zero."""

    pass


class Underflow(SafeIntError):
    """Subtraction would produce negative result."""

    pass


class ArithmeticOverflow(SafeIntError, RouterError):
    """Value does not fit in a uint256."""

    pass


def _check_uint256(value: int, op: str) -> int:
    if value < 0:
        raise ArithmeticOverflow(f"Negative value cannot be uint256: {op} = {value}")
    if value > UINT256_MAX:
        raise ArithmeticOverflow(f"Overflow: {op} exceeds uint256 max")
    return value


class SafeInt:
    """Unsigned 256-bit integer with checked arithmetic.

    Every SafeInt holds a value in [0, 2^256-1]. Results that would leave
    that range raise instead of being truncated, so a formula either produces
    the exact integer answer or fails with a typed error.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        """Create a SafeInt from an integer or another SafeInt.

        Raises:
            TypeError: If value is not an int or SafeInt
            ArithmeticOverflow: If value is negative or exceeds 2^256-1
        """
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = _check_uint256(value, str(value))
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: SafeInt | int) -> SafeInt:
        """Add two values.

        Raises:
            ArithmeticOverflow: If the sum exceeds 2^256-1
        """
        other_val = _extract_value(other)
        return SafeInt(_check_uint256(self._value + other_val, f"{self._value} + {other_val}"))

    def __radd__(self, other: int) -> SafeInt:
        return self.__add__(other)

    def __sub__(self, other: SafeInt | int) -> SafeInt:
        """Subtract other from self.

        Raises:
            Underflow: If result would be negative
        """
        other_val = _extract_value(other)
        result = self._value - other_val
        if result < 0:
            raise Underflow(f"Underflow: {self._value} - {other_val} = {result}")
        return SafeInt(result)

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        """Multiply two values.

        Raises:
            ArithmeticOverflow: If the product exceeds 2^256-1
        """
        other_val = _extract_value(other)
        return SafeInt(_check_uint256(self._value * other_val, f"{self._value} * {other_val}"))

    def __rmul__(self, other: int) -> SafeInt:
        return self.__mul__(other)

    def __floordiv__(self, other: SafeInt | int) -> SafeInt:
        """Integer division.

        Raises:
            DivisionByZero: If other is zero
        """
        other_val = _extract_value(other)
        if other_val == 0:
            raise DivisionByZero(f"Division by zero: {self._value} // 0")
        return SafeInt(self._value // other_val)

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

    @classmethod
    def zero(cls) -> SafeInt:
        """Create a SafeInt with value 0."""
        return cls(0)


def _extract_value(x: SafeInt | int) -> int:
    """Extract integer value from SafeInt or int."""
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
