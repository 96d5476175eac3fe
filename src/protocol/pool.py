"""Floating-rate lending pool ledger.

A pool tracks aggregate supply and debt for one currency together with the
compounding indices used to convert individual shares to present value.
Storage, dispatch and authorization live outside this module; every method
operates on the in-memory value only.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass

from src.data.constants import DEFAULT_CLOSE_MINIMAL_AMOUNT, MAX_ACCRUAL_PERIODS
from src.protocol.errors import InsufficientBalance, Overflow
from src.protocol.fixed_point import ONE, ZERO, FixedU128
from src.protocol.interest_rate import InterestModel, LinearParams, utilization_ratio

logger = logging.getLogger(__name__)


@dataclass
class Pool:
    """The floating-rate pool for one currency."""

    id: int
    name: str
    currency_id: Hashable

    can_be_collateral: bool
    enabled: bool

    # --- Supply and debt ---
    supply: FixedU128
    total_supply_index: FixedU128
    debt: FixedU128
    total_debt_index: FixedU128
    interest_updated_at: int

    # --- Parameters ---
    minimal_amount: FixedU128  # minimum per transaction and to stay in the pool
    safe_factor: FixedU128  # collateral value multiplier
    close_factor: FixedU128  # fraction of collateral liquidatable at a time
    close_minimal_amount: FixedU128  # USD value under which everything is closable
    discount_factor: FixedU128  # price multiplier offered to liquidators
    utilization_factor: FixedU128  # multiplier on the utilization ratio
    initial_interest_rate: FixedU128  # constant term of the debt rate

    # --- Metadata ---
    last_updated: int
    last_updated_by: Hashable
    created_by: Hashable
    created_at: int

    @classmethod
    def new(
        cls,
        id: int,
        name: str,
        currency_id: Hashable,
        can_be_collateral: bool,
        safe_factor: FixedU128,
        close_factor: FixedU128,
        discount_factor: FixedU128,
        utilization_factor: FixedU128,
        initial_interest_rate: FixedU128,
        minimal_amount: FixedU128,
        owner: Hashable,
        block_number: int,
        close_minimal_amount: FixedU128 | None = None,
    ) -> Pool:
        """Create a disabled pool with empty balances and unit indices.

        Parameters are captured as given; range checks belong to the caller.
        """
        if close_minimal_amount is None:
            close_minimal_amount = FixedU128.from_integer(DEFAULT_CLOSE_MINIMAL_AMOUNT)
        return cls(
            id=id,
            name=name,
            currency_id=currency_id,
            can_be_collateral=can_be_collateral,
            enabled=False,
            supply=ZERO,
            total_supply_index=ONE,
            debt=ZERO,
            total_debt_index=ONE,
            interest_updated_at=block_number,
            minimal_amount=minimal_amount,
            safe_factor=safe_factor,
            close_factor=close_factor,
            close_minimal_amount=close_minimal_amount,
            discount_factor=discount_factor,
            utilization_factor=utilization_factor,
            initial_interest_rate=initial_interest_rate,
            last_updated=block_number,
            last_updated_by=owner,
            created_by=owner,
            created_at=block_number,
        )

    # ------------------------------------------------------------------
    # Rates
    # ------------------------------------------------------------------

    def interest_model(self) -> InterestModel:
        """The linear curve quoted by this pool's parameters."""
        return InterestModel.linear(
            LinearParams(
                base=self.initial_interest_rate,
                multiplier=self.utilization_factor,
            )
        )

    @property
    def utilization(self) -> FixedU128:
        return utilization_ratio(self.supply, self.debt)

    def debt_interest_rate(self) -> FixedU128:
        """Per-period debt rate.

        An empty pool quotes ``initial_interest_rate``; otherwise
        ``initial_interest_rate + utilization_factor * debt / supply``.

        Raises:
            Overflow: if the multiplication or addition overflows.
        """
        if self.supply.is_zero():
            return self.initial_interest_rate
        return self.interest_model().debt_rate(self.utilization)

    def supply_interest_rate(self) -> FixedU128:
        """Per-period supply rate, ``debt_interest_rate * debt / supply``.

        Zero for an empty pool.
        """
        if self.supply.is_zero():
            return ZERO
        return self.debt_interest_rate() * self.utilization

    # ------------------------------------------------------------------
    # Accrual
    # ------------------------------------------------------------------

    def accrue_interest(self, now: int) -> None:
        """Accrue interest from ``interest_updated_at`` up to ``now``.

        Interest is linear over the elapsed span and compounded once per
        call. Calls with ``now`` at or before the last update are no-ops.
        Either every balance, index and the timestamp are updated, or an
        ``Overflow`` is raised and nothing changes.
        """
        if now <= self.interest_updated_at:
            return

        elapsed_periods = now - self.interest_updated_at
        if elapsed_periods > MAX_ACCRUAL_PERIODS:
            raise Overflow(
                f"Elapsed periods {elapsed_periods} exceed {MAX_ACCRUAL_PERIODS}"
            )
        elapsed = FixedU128.from_integer(elapsed_periods)

        s_rate = self.supply_interest_rate()
        d_rate = self.debt_interest_rate()
        supply_multiplier = ONE + s_rate * elapsed
        debt_multiplier = ONE + d_rate * elapsed

        supply = supply_multiplier * self.supply
        total_supply_index = self.total_supply_index * supply_multiplier
        debt = debt_multiplier * self.debt
        total_debt_index = self.total_debt_index * debt_multiplier

        self.supply = supply
        self.total_supply_index = total_supply_index
        self.debt = debt
        self.total_debt_index = total_debt_index
        self.interest_updated_at = now

        logger.debug(
            "Pool %s accrued %d periods: supply_rate=%s debt_rate=%s",
            self.id,
            elapsed_periods,
            s_rate,
            d_rate,
        )

    # ------------------------------------------------------------------
    # Balance mutation
    # ------------------------------------------------------------------

    def increment_supply(self, amount: FixedU128) -> None:
        self.supply = self.supply + amount

    def decrement_supply(self, amount: FixedU128) -> None:
        """Decrement the supply; raises ``InsufficientBalance`` if it would go negative."""
        if amount > self.supply:
            raise InsufficientBalance("supply", self.supply, amount)
        self.supply = self.supply - amount

    def increment_debt(self, amount: FixedU128) -> None:
        self.debt = self.debt + amount

    def decrement_debt(self, amount: FixedU128) -> None:
        """Decrement the debt; raises ``InsufficientBalance`` if it would go negative."""
        if amount > self.debt:
            raise InsufficientBalance("debt", self.debt, amount)
        self.debt = self.debt - amount

    # ------------------------------------------------------------------
    # Liquidation sizing
    # ------------------------------------------------------------------

    def is_dust(self, amount: FixedU128, price: FixedU128) -> bool:
        """Whether ``amount`` at ``price`` is worth at most ``close_minimal_amount``."""
        return amount.saturating_mul(price) <= self.close_minimal_amount

    def closable_amount(self, amount: FixedU128, price: FixedU128) -> FixedU128:
        """Amount of collateral that may be closed in one liquidation.

        Positions worth at most ``close_minimal_amount`` are closable in
        full; larger ones only up to ``close_factor``.
        """
        if self.is_dust(amount, price):
            return amount
        return self.close_factor * amount

    def discounted_price(self, price: FixedU128) -> FixedU128:
        """Price at which a liquidator acquires collateral."""
        return self.discount_factor * price

    # ------------------------------------------------------------------
    # Misc
    # ------------------------------------------------------------------

    def meets_minimal_amount(self, amount: FixedU128) -> bool:
        return amount >= self.minimal_amount

    def touch(self, actor: Hashable, block_number: int) -> None:
        """Record who last modified the pool and when."""
        self.last_updated = block_number
        self.last_updated_by = actor
