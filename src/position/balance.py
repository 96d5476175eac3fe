"""Per-account balances tracked against a pool's compounding index."""

from __future__ import annotations

from dataclasses import dataclass

from src.protocol.errors import InsufficientBalance
from src.protocol.fixed_point import ONE, ZERO, FixedU128


@dataclass(frozen=True)
class BalanceInfo:
    """An account's principal and the pool index it was last settled at.

    The present value grows with the pool index:
        current = amount * pool_index / index
    """

    amount: FixedU128 = ZERO
    index: FixedU128 = ONE

    def current(self, pool_index: FixedU128) -> FixedU128:
        if self.amount.is_zero():
            return ZERO
        return self.amount * pool_index / self.index

    def settle(self, pool_index: FixedU128) -> BalanceInfo:
        """Roll accrued interest into the principal at ``pool_index``."""
        return BalanceInfo(amount=self.current(pool_index), index=pool_index)

    def increase(self, delta: FixedU128, pool_index: FixedU128) -> BalanceInfo:
        settled = self.settle(pool_index)
        return BalanceInfo(amount=settled.amount + delta, index=pool_index)

    def decrease(self, delta: FixedU128, pool_index: FixedU128) -> BalanceInfo:
        settled = self.settle(pool_index)
        if delta > settled.amount:
            raise InsufficientBalance("balance", settled.amount, delta)
        return BalanceInfo(amount=settled.amount - delta, index=pool_index)
