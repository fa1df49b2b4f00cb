"""Shared constants for tests."""

# Common fee schedule
BPS_DENOMINATOR = 10_000
TRADE_FEE_BPS = 25  # 0.25%
ADMIN_FEE_BPS = 5_000  # 50% of the trade fee
