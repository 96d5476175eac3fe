"""Factories for the pool store and price oracle."""

from __future__ import annotations

import logging
import os
from collections.abc import Hashable, Mapping

from src.data.memory_store import InMemoryPoolStore, StaticPriceOracle
from src.data.static_params import ASSET_PRICES, POOL_PRESETS, PoolPreset
from src.protocol.fixed_point import FixedU128
from src.protocol.pool import Pool

logger = logging.getLogger(__name__)

POOLS_ENV_VAR = "FLOATING_RATE_POOLS"


def pool_from_preset(
    pool_id: int,
    name: str,
    preset: PoolPreset,
    owner: Hashable,
    block_number: int,
) -> Pool:
    """Build a fresh pool from a preset's decimal-string parameters."""
    return Pool.new(
        id=pool_id,
        name=name,
        currency_id=preset.currency_id,
        can_be_collateral=preset.can_be_collateral,
        safe_factor=FixedU128.from_str(preset.safe_factor),
        close_factor=FixedU128.from_str(preset.close_factor),
        discount_factor=FixedU128.from_str(preset.discount_factor),
        utilization_factor=FixedU128.from_str(preset.utilization_factor),
        initial_interest_rate=FixedU128.from_str(preset.initial_interest_rate),
        minimal_amount=FixedU128.from_str(preset.minimal_amount),
        owner=owner,
        block_number=block_number,
        close_minimal_amount=FixedU128.from_str(preset.close_minimal_amount),
    )


def _resolve_pool_names(pools: list[str] | None) -> list[str]:
    if pools is not None:
        return list(pools)
    raw = os.environ.get(POOLS_ENV_VAR)
    if not raw:
        return list(POOL_PRESETS)
    return [name.strip() for name in raw.split(",") if name.strip()]


def create_store(
    pools: list[str] | None = None,
    owner: Hashable = "root",
    block_number: int = 0,
) -> InMemoryPoolStore:
    """Create an in-memory store seeded with preset pools.

    Parameters
    ----------
    pools : list[str] | None
        Preset names to create, in id order.  Falls back to the
        comma-separated ``FLOATING_RATE_POOLS`` environment variable, then
        to every known preset.
    owner : Hashable
        Account recorded as creator of each pool.
    block_number : int
        Creation height.

    Returns
    -------
    InMemoryPoolStore
        Store holding one disabled pool per recognised preset name.
    """
    store = InMemoryPoolStore()
    for name in _resolve_pool_names(pools):
        preset = POOL_PRESETS.get(name)
        if preset is None:
            logger.warning("Unknown pool preset %r; skipping", name)
            continue
        store.put(pool_from_preset(store.next_id(), name, preset, owner, block_number))
    logger.info("Created pool store with %d pools", len(store))
    return store


def create_oracle(prices: Mapping[Hashable, FixedU128] | None = None) -> StaticPriceOracle:
    """Create a static oracle from the preset price table plus overrides."""
    table: dict[Hashable, FixedU128] = {
        currency: FixedU128.from_str(price) for currency, price in ASSET_PRICES.items()
    }
    if prices:
        table.update(prices)
    return StaticPriceOracle(table)
