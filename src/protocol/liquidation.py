"""Liquidation quotes and collateral valuation for a pool."""

from __future__ import annotations

from dataclasses import dataclass

from src.data.interfaces import PriceOracle
from src.protocol.fixed_point import ZERO, FixedU128
from src.protocol.pool import Pool


@dataclass(frozen=True)
class LiquidationQuote:
    """What a liquidator may seize from one position and what it costs."""

    closable_amount: FixedU128
    discounted_price: FixedU128
    repay_value: FixedU128  # closable_amount * discounted_price
    full_close: bool  # True when the position is under the dust threshold


def collateral_value(pool: Pool, amount: FixedU128, price: FixedU128) -> FixedU128:
    """Value counted toward borrowing power.

    value = amount * price * safe_factor, or zero if the pool cannot be
    used as collateral.
    """
    if not pool.can_be_collateral:
        return ZERO
    return amount * price * pool.safe_factor


def quote_liquidation(pool: Pool, amount: FixedU128, price: FixedU128) -> LiquidationQuote:
    closable = pool.closable_amount(amount, price)
    discounted = pool.discounted_price(price)
    return LiquidationQuote(
        closable_amount=closable,
        discounted_price=discounted,
        repay_value=closable * discounted,
        full_close=pool.is_dust(amount, price),
    )


def quote_from_oracle(pool: Pool, amount: FixedU128, oracle: PriceOracle) -> LiquidationQuote:
    """Quote a liquidation at the oracle's current price for the pool currency."""
    return quote_liquidation(pool, amount, oracle.get_price(pool.currency_id))
