"""Test helpers module for shared test utilities.

- constants: Fee schedule constants
- factories: FeeConfig factory
"""

from tests.helpers.constants import ADMIN_FEE_BPS, BPS_DENOMINATOR, TRADE_FEE_BPS
from tests.helpers.factories import make_fee_config

__all__ = [
    "ADMIN_FEE_BPS",
    "BPS_DENOMINATOR",
    "TRADE_FEE_BPS",
    "make_fee_config",
]
