"""In-memory collaborators used by tests, simulations and local tooling."""

from __future__ import annotations

import copy
import logging
from collections.abc import Hashable, Mapping

from src.data.interfaces import PoolStore, PriceOracle
from src.protocol.errors import PoolNotExist, PriceNotReady
from src.protocol.fixed_point import FixedU128
from src.protocol.pool import Pool

logger = logging.getLogger(__name__)


class InMemoryPoolStore(PoolStore):
    """Dict-backed pool store with value semantics.

    ``get`` hands out a copy and ``put`` stores a copy, so a pool mutated by
    a failed operation never leaks into the store.
    """

    def __init__(self, pools: list[Pool] | None = None) -> None:
        self._pools: dict[int, Pool] = {}
        for pool in pools or []:
            self.put(pool)

    def get(self, pool_id: int) -> Pool:
        pool = self._pools.get(pool_id)
        if pool is None:
            raise PoolNotExist(pool_id)
        return copy.deepcopy(pool)

    def put(self, pool: Pool) -> None:
        self._pools[pool.id] = copy.deepcopy(pool)
        logger.debug("Stored pool %s (%s)", pool.id, pool.name)

    def ids(self) -> list[int]:
        return sorted(self._pools)

    def __contains__(self, pool_id: object) -> bool:
        return pool_id in self._pools

    def __len__(self) -> int:
        return len(self._pools)

    def next_id(self) -> int:
        return max(self._pools, default=-1) + 1


class StaticPriceOracle(PriceOracle):
    """Price oracle serving a fixed table of prices."""

    def __init__(self, prices: Mapping[Hashable, FixedU128] | None = None) -> None:
        self._prices: dict[Hashable, FixedU128] = dict(prices or {})

    def get_price(self, currency_id: Hashable) -> FixedU128:
        price = self._prices.get(currency_id)
        if price is None:
            raise PriceNotReady(currency_id)
        return price

    def set_price(self, currency_id: Hashable, price: FixedU128) -> None:
        self._prices[currency_id] = price
