"""Replay pool accrual over a schedule of heights."""

from __future__ import annotations

import copy
from collections.abc import Sequence

import numpy as np
import pandas as pd

from src.protocol.errors import InvalidParameters
from src.protocol.pool import Pool

COLUMNS = [
    "height",
    "supply",
    "debt",
    "total_supply_index",
    "total_debt_index",
    "utilization",
    "supply_rate",
    "debt_rate",
]


def _whole_height(height: object) -> int:
    """Heights count whole periods; numpy integers are accepted, floats are not."""
    if isinstance(height, bool) or not isinstance(height, (int, np.integer)):
        raise InvalidParameters(f"Accrual height must be an integer, got {height!r}")
    return int(height)


def _snapshot(pool: Pool) -> dict[str, float]:
    return {
        "height": pool.interest_updated_at,
        "supply": pool.supply.to_float(),
        "debt": pool.debt.to_float(),
        "total_supply_index": pool.total_supply_index.to_float(),
        "total_debt_index": pool.total_debt_index.to_float(),
        "utilization": pool.utilization.to_float(),
        "supply_rate": pool.supply_interest_rate().to_float(),
        "debt_rate": pool.debt_interest_rate().to_float(),
    }


def simulate_accrual(pool: Pool, heights: Sequence[int]) -> pd.DataFrame:
    """Accrue a copy of ``pool`` at each height and record its state.

    The first row is the pool as given; one row follows per height.
    Does NOT mutate ``pool``.

    Args:
        pool: Starting pool state.
        heights: Non-decreasing accrual heights.

    Returns:
        DataFrame with columns: height, supply, debt, total_supply_index,
        total_debt_index, utilization, supply_rate, debt_rate
    """
    schedule = [_whole_height(h) for h in heights]
    if any(later < earlier for earlier, later in zip(schedule, schedule[1:])):
        raise InvalidParameters("Accrual heights must be non-decreasing")

    sim = copy.deepcopy(pool)
    rows = [_snapshot(sim)]
    for height in schedule:
        sim.accrue_interest(height)
        rows.append(_snapshot(sim))

    return pd.DataFrame(rows, columns=COLUMNS)


def simulate_uniform_accrual(
    pool: Pool, n_steps: int, step: int
) -> pd.DataFrame:
    """Accrue every ``step`` periods for ``n_steps`` steps from the pool's last update."""
    start = pool.interest_updated_at
    heights = [start + step * i for i in range(1, n_steps + 1)]
    return simulate_accrual(pool, heights)
