"""Integer math primitives for swap fee calculation.

This package provides:
- mul_div / mul_div_imbalanced: overflow-safe floor(a * b / c) on u64 inputs
- Decimal: display-only rendering of scaled integers
"""

from swapmath.math.decimal_display import Decimal
from swapmath.math.mul_div import MAX, MAX_BIG, MAX_SMALL, mul_div, mul_div_imbalanced

__all__ = [
    "Decimal",
    "MAX",
    "MAX_BIG",
    "MAX_SMALL",
    "mul_div",
    "mul_div_imbalanced",
]
