"""Fixed-point fee math for token-swap pools."""

from swapmath.errors import InvalidFeeConfig, InvalidInstructionData, SwapMathError
from swapmath.fees import FeeCalculator, FeeConfig, require_fee
from swapmath.math import mul_div, mul_div_imbalanced
from swapmath.models import FeesModel
from swapmath.safe_int import WidthOverflow

__version__ = "0.1.0"
__all__ = [
    "FeeCalculator",
    "FeeConfig",
    "FeesModel",
    "InvalidFeeConfig",
    "InvalidInstructionData",
    "SwapMathError",
    "WidthOverflow",
    "mul_div",
    "mul_div_imbalanced",
    "require_fee",
    "__version__",
]
