"""Display-only scaled decimal.

Price feeds and token amounts arrive as integers scaled by 10^decimals.
Decimal pairs the raw integer with its scale and renders it as a decimal
string without any float or context-rounded arithmetic.
"""

from __future__ import annotations

import decimal
from dataclasses import dataclass

from swapmath.safe_int import U32_BITS, U128_BITS, CheckedUint

__all__ = ["Decimal"]


@dataclass(frozen=True)
class Decimal:
    """Unsigned integer magnitude with a decimal-place count.

    Attributes:
        value: Scaled magnitude (u128)
        decimals: Number of digits after the decimal point (u32)

    Examples:
        str(Decimal(12345, 2))  -> "123.45"
        str(Decimal(5, 3))      -> "0.005"
        str(Decimal(7, 0))      -> "7."
    """

    value: int
    decimals: int

    def __post_init__(self) -> None:
        CheckedUint(self.value, U128_BITS)
        CheckedUint(self.decimals, U32_BITS)

    def __str__(self) -> str:
        digits = str(self.value)
        if len(digits) <= self.decimals:
            return "0." + digits.rjust(self.decimals, "0")
        split = len(digits) - self.decimals
        return digits[:split] + "." + digits[split:]

    def to_decimal(self) -> decimal.Decimal:
        """Exact stdlib Decimal for the scaled value."""
        return decimal.Decimal(str(self))
