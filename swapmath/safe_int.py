"""Fixed-width unsigned integers with checked arithmetic.

Python ints never overflow, so on-chain u8/u64/u128 arithmetic has to be
emulated explicitly. CheckedUint carries a value together with its working
width and exposes checked operations that return None instead of wrapping:
- Multiplication past the width returns None
- Subtraction below zero returns None
- Division by zero returns None
- Narrowing to a smaller width returns None if the value does not fit

Usage pattern:
    from swapmath.safe_int import u64

    def mul_div(a: int, b: int, c: int) -> int | None:
        # Wrap at entry
        product = u64(a).checked_mul(b)
        if product is None:
            return None
        quotient = product.checked_div(c)

        # Unwrap at exit
        return None if quotient is None else quotient.value
"""

from __future__ import annotations

U8_BITS = 8
U32_BITS = 32
U64_BITS = 64
U128_BITS = 128

U8_MAX = 2**U8_BITS - 1
U64_MAX = 2**U64_BITS - 1
U128_MAX = 2**U128_BITS - 1


class CheckedUintError(ArithmeticError):
    """Base class for CheckedUint errors."""

    pass


class WidthOverflow(CheckedUintError):
    """Value cannot be represented in the requested width."""

    pass


class WidthMismatch(CheckedUintError):
    """Operands of a binary operation have different widths."""

    pass


def max_for_bits(bits: int) -> int:
    """Largest unsigned value representable in ``bits`` bits."""
    return (1 << bits) - 1


class CheckedUint:
    """Unsigned integer bound to a fixed bit width.

    Construction validates the range; every arithmetic method is checked and
    returns None rather than producing a value outside the width. Binary
    operations accept a plain int (validated against the same width) or a
    CheckedUint of the same width.

    Attributes:
        value: The underlying integer value (read-only)
        bits: The working width in bits (read-only)
    """

    __slots__ = ("_value", "_bits")
    _value: int
    _bits: int

    def __init__(self, value: int | CheckedUint, bits: int = U64_BITS) -> None:
        """Create a CheckedUint from an integer or another CheckedUint.

        Args:
            value: Integer value to wrap, or CheckedUint to re-width
            bits: Working width in bits

        Raises:
            TypeError: If value is not an int or CheckedUint (bools rejected)
            WidthOverflow: If value is negative or exceeds 2^bits - 1
        """
        if isinstance(value, CheckedUint):
            raw = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            raw = value
        else:
            raise TypeError(f"CheckedUint requires int, got {type(value).__name__}")
        if raw < 0:
            raise WidthOverflow(f"Negative value cannot be u{bits}: {raw}")
        if raw > max_for_bits(bits):
            raise WidthOverflow(f"Value exceeds u{bits} max: {raw}")
        self._value = raw
        self._bits = bits

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    @property
    def bits(self) -> int:
        """The working width in bits."""
        return self._bits

    @property
    def max(self) -> int:
        """Largest value representable at this width."""
        return max_for_bits(self._bits)

    def __repr__(self) -> str:
        return f"CheckedUint({self._value}, bits={self._bits})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    def __eq__(self, other: object) -> bool:
        # Width is not part of identity; must agree with __hash__
        if isinstance(other, CheckedUint):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __gt__(self, other: CheckedUint | int) -> bool:
        return self._value > _extract_value(other)

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._value != 0

    # --- Checked arithmetic ---

    def checked_sub(self, other: CheckedUint | int) -> CheckedUint | None:
        """Subtract, returning None on underflow."""
        result = self._value - self._operand(other)
        if result < 0:
            return None
        return CheckedUint(result, self._bits)

    def checked_mul(self, other: CheckedUint | int) -> CheckedUint | None:
        """Multiply, returning None if the product exceeds the width."""
        result = self._value * self._operand(other)
        if result > self.max:
            return None
        return CheckedUint(result, self._bits)

    def checked_div(self, other: CheckedUint | int) -> CheckedUint | None:
        """Floor-divide, returning None on a zero divisor."""
        divisor = self._operand(other)
        if divisor == 0:
            return None
        return CheckedUint(self._value // divisor, self._bits)

    # --- Width conversion ---

    def widen(self, bits: int) -> CheckedUint:
        """Promote to a wider (or equal) width. Always succeeds.

        Raises:
            ValueError: If bits is narrower than the current width
        """
        if bits < self._bits:
            raise ValueError(f"Cannot widen u{self._bits} to u{bits}; use narrow()")
        return CheckedUint(self._value, bits)

    def narrow(self, bits: int) -> CheckedUint | None:
        """Convert to a narrower width, returning None if the value does not fit."""
        if self._value > max_for_bits(bits):
            return None
        return CheckedUint(self._value, bits)

    def to_u64(self) -> CheckedUint | None:
        """Narrow to u64."""
        return self.narrow(U64_BITS)

    def _operand(self, other: CheckedUint | int) -> int:
        if isinstance(other, CheckedUint):
            if other._bits != self._bits:
                raise WidthMismatch(f"Operand width u{other._bits} does not match u{self._bits}")
            return other._value
        return CheckedUint(other, self._bits)._value


def _extract_value(x: CheckedUint | int) -> int:
    """Extract integer value from CheckedUint or int."""
    if isinstance(x, CheckedUint):
        return x._value
    return x


def u8(value: int | CheckedUint) -> CheckedUint:
    """Wrap value as a u8."""
    return CheckedUint(value, U8_BITS)


def u64(value: int | CheckedUint) -> CheckedUint:
    """Wrap value as a u64."""
    return CheckedUint(value, U64_BITS)

