"""Error classes for swapmath.

Unrepresentable arithmetic results are never raised; they are returned as
None. These exceptions cover caller contract violations and the failure a
swap program raises when it refuses to continue without a fee.
"""


class SwapMathError(Exception):
    """Base error for swapmath."""

    pass


class InvalidFeeConfig(SwapMathError, ValueError):
    """A fee parameter is outside u64 range."""

    pass


class InvalidInstructionData(SwapMathError):
    """A required fee could not be computed; the enclosing operation must abort."""

    pass
