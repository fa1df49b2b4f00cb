"""Tests for FeeConfig construction and validation."""

from dataclasses import FrozenInstanceError

import pytest
from pydantic import ValidationError

from swapmath.errors import InvalidFeeConfig
from swapmath.fees import FeeConfig
from swapmath.safe_int import U64_MAX
from tests.helpers import make_fee_config


class TestFeeConfigValidation:
    """Each field must be a u64 int."""

    def test_accepts_bounds(self):
        """0 and u64 max are valid for every field."""
        make_fee_config(trade_fee_numerator=0, trade_fee_denominator=U64_MAX)

    def test_zero_denominator_allowed(self):
        """Zero denominators are a computation failure, not a config error."""
        fees = make_fee_config(withdraw_fee_denominator=0)
        assert fees.withdraw_fee_denominator == 0

    def test_numerator_above_denominator_allowed(self):
        """Fees above 100% are the caller's responsibility."""
        fees = make_fee_config(admin_trade_fee_numerator=5, admin_trade_fee_denominator=1)
        assert fees.admin_trade_fee(10) == 50

    def test_negative_rejected(self):
        """Negative fields raise InvalidFeeConfig."""
        with pytest.raises(InvalidFeeConfig) as exc_info:
            make_fee_config(trade_fee_numerator=-1)
        assert "trade_fee_numerator" in str(exc_info.value)

    def test_above_u64_rejected(self):
        """Fields above u64 max raise InvalidFeeConfig."""
        with pytest.raises(InvalidFeeConfig):
            make_fee_config(withdraw_fee_denominator=U64_MAX + 1)

    def test_invalid_fee_config_is_value_error(self):
        """InvalidFeeConfig can be caught as ValueError."""
        with pytest.raises(ValueError):
            make_fee_config(admin_withdraw_fee_numerator=-5)

    def test_non_int_rejected(self):
        """Floats, strings and bools are type errors."""
        with pytest.raises(TypeError):
            make_fee_config(trade_fee_numerator=0.25)  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            make_fee_config(trade_fee_numerator="25")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            make_fee_config(trade_fee_denominator=True)


class TestFeeConfigValue:
    """FeeConfig is immutable and hashable."""

    def test_frozen(self, fees):
        """Fields cannot be reassigned."""
        with pytest.raises(FrozenInstanceError):
            fees.trade_fee_numerator = 1

    def test_equality_and_hash(self):
        """Equal configs are interchangeable."""
        a = make_fee_config(trade_fee_numerator=25, trade_fee_denominator=10_000)
        b = make_fee_config(trade_fee_numerator=25, trade_fee_denominator=10_000)
        assert a == b
        assert hash(a) == hash(b)


class TestFeeConfigFromMapping:
    """FeeConfig.from_mapping validates through FeesModel."""

    def test_camel_case(self):
        """JSON-style keys are accepted."""
        fees = FeeConfig.from_mapping(
            {
                "adminTradeFeeNumerator": 0,
                "adminTradeFeeDenominator": 1,
                "adminWithdrawFeeNumerator": 0,
                "adminWithdrawFeeDenominator": 1,
                "tradeFeeNumerator": "25",
                "tradeFeeDenominator": "10000",
                "withdrawFeeNumerator": 0,
                "withdrawFeeDenominator": 1,
            }
        )
        assert fees == make_fee_config(trade_fee_numerator=25, trade_fee_denominator=10_000)

    def test_missing_field(self):
        """All eight fields are required."""
        with pytest.raises(ValidationError):
            FeeConfig.from_mapping({"tradeFeeNumerator": 25})
