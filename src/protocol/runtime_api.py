"""Pool queries and accrual over a ``PoolStore``.

These helpers load a pool value by id, run the pool operation on it and,
for accrual, write it back only when the operation succeeded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.data.interfaces import PoolStore
from src.position.balance import BalanceInfo
from src.protocol.fixed_point import FixedU128
from src.protocol.pool import Pool

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PoolRates:
    """Snapshot of a pool's utilization and per-period rates."""

    pool_id: int
    utilization: FixedU128
    supply_rate: FixedU128
    debt_rate: FixedU128


def supply_rate(store: PoolStore, pool_id: int) -> FixedU128:
    return store.get(pool_id).supply_interest_rate()


def debt_rate(store: PoolStore, pool_id: int) -> FixedU128:
    return store.get(pool_id).debt_interest_rate()


def pool_rates(store: PoolStore, pool_id: int) -> PoolRates:
    pool = store.get(pool_id)
    return PoolRates(
        pool_id=pool_id,
        utilization=pool.utilization,
        supply_rate=pool.supply_interest_rate(),
        debt_rate=pool.debt_interest_rate(),
    )


def accrue_pool(store: PoolStore, pool_id: int, now: int) -> Pool:
    """Accrue interest on the stored pool and persist the result.

    Raises:
        PoolNotExist: if no pool is stored under ``pool_id``.
        Overflow: if accrual overflows; the stored pool is left untouched.
    """
    pool = store.get(pool_id)
    previous = pool.interest_updated_at
    pool.accrue_interest(now)
    if pool.interest_updated_at != previous:
        store.put(pool)
        logger.info(
            "Accrued pool %s from %d to %d (supply index %s, debt index %s)",
            pool_id,
            previous,
            now,
            pool.total_supply_index,
            pool.total_debt_index,
        )
    return pool


def supply_balance(store: PoolStore, pool_id: int, info: BalanceInfo) -> FixedU128:
    """Present value of a supply position at the pool's current supply index."""
    return info.current(store.get(pool_id).total_supply_index)


def debt_balance(store: PoolStore, pool_id: int, info: BalanceInfo) -> FixedU128:
    """Present value of a debt position at the pool's current debt index."""
    return info.current(store.get(pool_id).total_debt_index)
