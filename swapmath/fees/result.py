"""Turning absent fee results into a hard failure."""

from __future__ import annotations

import structlog

from swapmath.errors import InvalidInstructionData

logger = structlog.get_logger()


def require_fee(fee: int | None, operation: str) -> int:
    """Return fee, or abort the enclosing swap operation if it is absent.

    Swap, deposit and withdraw handlers call this on every fee they depend
    on. There is no fallback value: an uncomputable fee fails the operation.

    Args:
        fee: Result of a FeeCalculator method
        operation: Name of the fee operation, for the error message

    Returns:
        The fee, unchanged

    Raises:
        InvalidInstructionData: If fee is None
    """
    if fee is None:
        logger.warning("fee_unrepresentable", operation=operation)
        raise InvalidInstructionData(f"{operation} could not be computed")
    return fee
