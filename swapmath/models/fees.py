"""Pydantic model for loading pool fee parameters from external configuration.

Field names follow the camelCase JSON layout used by swap clients; snake_case
names are accepted as well.
"""

from pydantic import BaseModel, Field

from swapmath.fees.config import FeeConfig
from swapmath.models.types import Uint64


class FeesModel(BaseModel):
    """Fee rates as numerator/denominator pairs."""

    model_config = {"populate_by_name": True}

    admin_trade_fee_numerator: Uint64 = Field(alias="adminTradeFeeNumerator")
    admin_trade_fee_denominator: Uint64 = Field(alias="adminTradeFeeDenominator")
    admin_withdraw_fee_numerator: Uint64 = Field(alias="adminWithdrawFeeNumerator")
    admin_withdraw_fee_denominator: Uint64 = Field(alias="adminWithdrawFeeDenominator")
    trade_fee_numerator: Uint64 = Field(alias="tradeFeeNumerator")
    trade_fee_denominator: Uint64 = Field(alias="tradeFeeDenominator")
    withdraw_fee_numerator: Uint64 = Field(alias="withdrawFeeNumerator")
    withdraw_fee_denominator: Uint64 = Field(alias="withdrawFeeDenominator")

    def to_config(self) -> FeeConfig:
        """Convert to the immutable FeeConfig used by the fee calculator."""
        return FeeConfig(**self.model_dump())
