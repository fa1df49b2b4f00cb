"""Overflow-safe multiply-then-divide for u64 token amounts.

Both primitives compute ``floor(a * b / c)``. The product of two u64 values
can need up to 128 bits, so when an operand is large enough for the product
to leave u64 range the computation is promoted to u128 and the quotient is
narrowed back with a range check. Small operands stay on the u64 path.

Every failure (overflow, quotient wider than u64, division by zero) is
reported as None. Nothing here raises for those conditions.

A narrow-path product of exactly 2^64 (2^32 * 2^32 in mul_div, 2^48 * 2^16
in mul_div_imbalanced) is recomputed in u128, so mul_div(2^32, 2^32, 2)
returns 2^63. The on-chain Rust version returns no result for these inputs.
"""

from __future__ import annotations

from swapmath.safe_int import U128_BITS, CheckedUint, u64

__all__ = [
    "MAX",
    "MAX_BIG",
    "MAX_SMALL",
    "mul_div",
    "mul_div_imbalanced",
]

# Below this, a * b always fits in u64
MAX = 1 << 32

# Thresholds for amount * rate shapes: the amount may approach u64 range,
# the rate numerator stays small
MAX_BIG = 1 << 48
MAX_SMALL = 1 << 16


def _mul_div_wide(a: CheckedUint, b: CheckedUint, c: CheckedUint) -> int | None:
    """u128 multiply and divide, narrowed back to u64."""
    product = a.widen(U128_BITS).checked_mul(b.widen(U128_BITS))
    if product is None:
        return None
    quotient = product.checked_div(c.widen(U128_BITS))
    if quotient is None:
        return None
    narrowed = quotient.to_u64()
    return None if narrowed is None else narrowed.value


def _mul_div_narrow(a: CheckedUint, b: CheckedUint, c: CheckedUint) -> int | None:
    """u64 multiply and divide."""
    product = a.checked_mul(b)
    if product is None:
        # Only reachable when the product is exactly 2^64 (2^32 * 2^32 or
        # 2^48 * 2^16); the quotient may still fit
        return _mul_div_wide(a, b, c)
    quotient = product.checked_div(c)
    return None if quotient is None else quotient.value


def mul_div(a: int, b: int, c: int) -> int | None:
    """Multiply two u64s then divide by a third, rounding down.

    Uses u64 arithmetic when both operands are at most 2^32, u128 otherwise.

    Args:
        a: First factor (u64)
        b: Second factor (u64)
        c: Divisor (u64)

    Returns:
        floor(a * b / c), or None if c is zero or the result does not fit u64

    Raises:
        TypeError: If an argument is not an int
        WidthOverflow: If an argument is outside u64 range
    """
    sa, sb, sc = u64(a), u64(b), u64(c)
    if sa > MAX or sb > MAX:
        return _mul_div_wide(sa, sb, sc)
    return _mul_div_narrow(sa, sb, sc)


def mul_div_imbalanced(a: int, b: int, c: int) -> int | None:
    """Multiply two u64s then divide by a third, assuming a is the larger factor.

    Same contract as mul_div. The u64 path is kept while a <= 2^48 and
    b <= 2^16, which covers amount * fee-numerator products.

    Args:
        a: Large factor, typically a token amount (u64)
        b: Small factor, typically a fee numerator (u64)
        c: Divisor (u64)

    Returns:
        floor(a * b / c), or None if c is zero or the result does not fit u64
    """
    sa, sb, sc = u64(a), u64(b), u64(c)
    if sa > MAX_BIG or sb > MAX_SMALL:
        return _mul_div_wide(sa, sb, sc)
    return _mul_div_narrow(sa, sb, sc)
