"""Fee calculator capability.

FeeCalculator is the interface swap instruction handlers program against.
FeeConfig is the only implementation today; a second fee schedule can be
added without touching callers.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class FeeCalculator(Protocol):
    """Protocol for deriving fees from token amounts.

    Every method returns the fee in the token's smallest unit, or None when
    the result cannot be represented (overflow, zero denominator, invalid
    pool size). Callers must not substitute a default for None.
    """

    def admin_trade_fee(self, fee_amount: int) -> int | None:
        """Apply the admin trade fee to an already-charged trade fee."""
        ...

    def admin_withdraw_fee(self, fee_amount: int) -> int | None:
        """Apply the admin withdraw fee to an already-charged withdraw fee."""
        ...

    def trade_fee(self, trade_amount: int) -> int | None:
        """Compute the trade fee for a trade amount."""
        ...

    def withdraw_fee(self, withdraw_amount: int) -> int | None:
        """Compute the withdraw fee for a withdraw amount."""
        ...

    def normalized_trade_fee(self, n_coins: int, amount: int) -> int | None:
        """Compute the pool-size normalized trade fee.

        Used for imbalanced deposits and withdrawals, where the fee is
        charged on the deviation from the ideal balance.

        Args:
            n_coins: Number of coins in the pool (u8)
            amount: Amount the fee applies to (u64)
        """
        ...
