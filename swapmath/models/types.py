"""Shared type definitions for fee configuration models."""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from swapmath.safe_int import U64_MAX


def validate_uint64(value: Any) -> int:
    """Validate that a value is a u64, given as int or decimal string.

    Args:
        value: Value to validate (string or int)

    Returns:
        Valid u64 as int

    Raises:
        ValueError: If value is not a non-negative integer within u64 range
    """
    if isinstance(value, bool):
        raise ValueError("Uint64 must be string or int, got bool")

    if isinstance(value, int):
        int_value = value
    elif isinstance(value, str):
        try:
            int_value = int(value)
        except ValueError as err:
            raise ValueError(f"Uint64 must be a decimal integer string: '{value}'") from err
    else:
        raise ValueError(f"Uint64 must be string or int, got {type(value).__name__}")

    if int_value < 0:
        raise ValueError(f"Uint64 cannot be negative: {value}")
    if int_value > U64_MAX:
        raise ValueError(f"Uint64 overflow: {value} > 2^64-1")

    return int_value


# 64-bit unsigned integer, accepted as int or decimal string
Uint64 = Annotated[
    int,
    BeforeValidator(validate_uint64),
    Field(description="64-bit unsigned integer"),
]
