"""Fee configuration for a swap pool."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

import structlog

from swapmath.errors import InvalidFeeConfig
from swapmath.math.mul_div import mul_div, mul_div_imbalanced
from swapmath.safe_int import U64_MAX, u8

logger = structlog.get_logger()

# adjusted_fee_numerator = fee * n_coins / (4 * (n_coins - 1)), from Curve's
# stableswap simulation
NORMALIZED_FEE_FACTOR = 4


@dataclass(frozen=True)
class FeeConfig:
    """Fee rates for a pool, each as a u64 numerator/denominator pair.

    Implements FeeCalculator. A zero denominator is accepted here and makes
    the corresponding fee computation return None. Numerators above their
    denominators (fees over 100%) are not rejected.

    Attributes:
        admin_trade_fee_numerator: Share of the trade fee kept by the admin
        admin_trade_fee_denominator: Denominator for the admin trade fee
        admin_withdraw_fee_numerator: Share of the withdraw fee kept by the admin
        admin_withdraw_fee_denominator: Denominator for the admin withdraw fee
        trade_fee_numerator: Fee charged on trades
        trade_fee_denominator: Denominator for the trade fee
        withdraw_fee_numerator: Fee charged on withdrawals
        withdraw_fee_denominator: Denominator for the withdraw fee
    """

    admin_trade_fee_numerator: int
    admin_trade_fee_denominator: int
    admin_withdraw_fee_numerator: int
    admin_withdraw_fee_denominator: int
    trade_fee_numerator: int
    trade_fee_denominator: int
    withdraw_fee_numerator: int
    withdraw_fee_denominator: int

    def __post_init__(self) -> None:
        for field in fields(self):
            v = getattr(self, field.name)
            if not isinstance(v, int) or isinstance(v, bool):
                raise TypeError(f"{field.name} must be an int, got {type(v).__name__}")
            if not (0 <= v <= U64_MAX):
                raise InvalidFeeConfig(f"{field.name} must be in [0, 2^64-1]: {v}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> FeeConfig:
        """Build a FeeConfig from a camelCase or snake_case mapping.

        Raises:
            pydantic.ValidationError: If a field is missing or not a u64
        """
        from swapmath.models.fees import FeesModel

        return FeesModel.model_validate(data).to_config()

    def admin_trade_fee(self, fee_amount: int) -> int | None:
        """Apply admin trade fee."""
        fee = mul_div_imbalanced(
            fee_amount,
            self.admin_trade_fee_numerator,
            self.admin_trade_fee_denominator,
        )
        if fee is None:
            logger.debug(
                "admin_trade_fee_unrepresentable",
                fee_amount=fee_amount,
                numerator=self.admin_trade_fee_numerator,
                denominator=self.admin_trade_fee_denominator,
            )
        return fee

    def admin_withdraw_fee(self, fee_amount: int) -> int | None:
        """Apply admin withdraw fee."""
        fee = mul_div_imbalanced(
            fee_amount,
            self.admin_withdraw_fee_numerator,
            self.admin_withdraw_fee_denominator,
        )
        if fee is None:
            logger.debug(
                "admin_withdraw_fee_unrepresentable",
                fee_amount=fee_amount,
                numerator=self.admin_withdraw_fee_numerator,
                denominator=self.admin_withdraw_fee_denominator,
            )
        return fee

    def trade_fee(self, trade_amount: int) -> int | None:
        """Compute trade fee from amount."""
        fee = mul_div_imbalanced(
            trade_amount,
            self.trade_fee_numerator,
            self.trade_fee_denominator,
        )
        if fee is None:
            logger.debug(
                "trade_fee_unrepresentable",
                trade_amount=trade_amount,
                numerator=self.trade_fee_numerator,
                denominator=self.trade_fee_denominator,
            )
        return fee

    def withdraw_fee(self, withdraw_amount: int) -> int | None:
        """Compute withdraw fee from amount."""
        fee = mul_div_imbalanced(
            withdraw_amount,
            self.withdraw_fee_numerator,
            self.withdraw_fee_denominator,
        )
        if fee is None:
            logger.debug(
                "withdraw_fee_unrepresentable",
                withdraw_amount=withdraw_amount,
                numerator=self.withdraw_fee_numerator,
                denominator=self.withdraw_fee_denominator,
            )
        return fee

    def normalized_trade_fee(self, n_coins: int, amount: int) -> int | None:
        """Compute normalized fee for symmetric/asymmetric deposits/withdraws.

        The trade fee numerator is scaled by n_coins / (4 * (n_coins - 1))
        before being applied to amount. n_coins is u8: 0 underflows, 1 gives
        a zero divisor and 65 or more overflows 4 * (n_coins - 1). All three
        return None.
        """
        coins = u8(n_coins)
        divisor = coins.checked_sub(1)
        if divisor is not None:
            divisor = divisor.checked_mul(NORMALIZED_FEE_FACTOR)
        if not divisor:
            logger.debug("normalized_trade_fee_invalid_pool_size", n_coins=n_coins)
            return None

        adjusted_numerator = mul_div(self.trade_fee_numerator, coins.value, divisor.value)
        if adjusted_numerator is None:
            logger.debug(
                "normalized_trade_fee_unrepresentable",
                n_coins=n_coins,
                numerator=self.trade_fee_numerator,
            )
            return None

        fee = mul_div(amount, adjusted_numerator, self.trade_fee_denominator)
        if fee is None:
            logger.debug(
                "normalized_trade_fee_unrepresentable",
                n_coins=n_coins,
                amount=amount,
                adjusted_numerator=adjusted_numerator,
                denominator=self.trade_fee_denominator,
            )
        return fee
