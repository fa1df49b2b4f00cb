"""Pytest configuration and fixtures."""

import pytest

from swapmath.fees import FeeConfig
from tests.helpers import ADMIN_FEE_BPS, BPS_DENOMINATOR, TRADE_FEE_BPS, make_fee_config


@pytest.fixture
def fees() -> FeeConfig:
    """Typical stable pool schedule: 0.25% trade fee, half of it to the admin."""
    return make_fee_config(
        admin_trade_fee_numerator=ADMIN_FEE_BPS,
        admin_trade_fee_denominator=BPS_DENOMINATOR,
        admin_withdraw_fee_numerator=ADMIN_FEE_BPS,
        admin_withdraw_fee_denominator=BPS_DENOMINATOR,
        trade_fee_numerator=TRADE_FEE_BPS,
        trade_fee_denominator=BPS_DENOMINATOR,
        withdraw_fee_numerator=50,
        withdraw_fee_denominator=BPS_DENOMINATOR,
    )


@pytest.fixture
def zero_denominator_fees() -> FeeConfig:
    """Every denominator is zero, so every fee is absent."""
    return make_fee_config(
        admin_trade_fee_numerator=1,
        admin_trade_fee_denominator=0,
        admin_withdraw_fee_numerator=1,
        admin_withdraw_fee_denominator=0,
        trade_fee_numerator=1,
        trade_fee_denominator=0,
        withdraw_fee_numerator=1,
        withdraw_fee_denominator=0,
    )
