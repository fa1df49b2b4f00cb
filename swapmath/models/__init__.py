"""Pydantic models for fee configuration input."""

from swapmath.models.fees import FeesModel
from swapmath.models.types import Uint64, validate_uint64

__all__ = [
    "FeesModel",
    "Uint64",
    "validate_uint64",
]
