"""Tests for store-level pool queries and accrual."""

import pytest

from src.data.memory_store import InMemoryPoolStore
from src.position.balance import BalanceInfo
from src.protocol import runtime_api
from src.protocol.errors import Overflow, PoolNotExist
from src.protocol.fixed_point import ONE, FixedU128
from src.protocol.pool import Pool


def fx(text: str) -> FixedU128:
    return FixedU128.from_str(text)


def make_pool(pool_id: int = 0, initial_interest_rate: str = "0.02") -> Pool:
    pool = Pool.new(
        id=pool_id,
        name="DOT",
        currency_id="DOT",
        can_be_collateral=False,
        safe_factor=fx("0.7"),
        close_factor=fx("0.5"),
        discount_factor=fx("0.95"),
        utilization_factor=fx("0.1"),
        initial_interest_rate=fx(initial_interest_rate),
        minimal_amount=fx("0.001"),
        owner="root",
        block_number=10,
    )
    pool.increment_supply(fx("1000"))
    pool.increment_debt(fx("500"))
    return pool


@pytest.fixture
def store() -> InMemoryPoolStore:
    return InMemoryPoolStore([make_pool()])


class TestRates:
    def test_supply_and_debt_rate(self, store: InMemoryPoolStore) -> None:
        assert runtime_api.debt_rate(store, 0) == fx("0.07")
        assert runtime_api.supply_rate(store, 0) == fx("0.035")

    def test_pool_rates(self, store: InMemoryPoolStore) -> None:
        rates = runtime_api.pool_rates(store, 0)
        assert rates.pool_id == 0
        assert rates.utilization == fx("0.5")
        assert rates.debt_rate == fx("0.07")
        assert rates.supply_rate == fx("0.035")

    def test_unknown_pool(self, store: InMemoryPoolStore) -> None:
        with pytest.raises(PoolNotExist):
            runtime_api.debt_rate(store, 99)


class TestAccruePool:
    def test_accrual_is_persisted(self, store: InMemoryPoolStore) -> None:
        returned = runtime_api.accrue_pool(store, 0, 20)
        stored = store.get(0)
        assert returned == stored
        assert stored.supply == fx("1350")
        assert stored.total_debt_index == fx("1.7")
        assert stored.interest_updated_at == 20

    def test_stale_accrual_keeps_store(self, store: InMemoryPoolStore) -> None:
        runtime_api.accrue_pool(store, 0, 5)
        assert store.get(0).interest_updated_at == 10

    def test_failed_accrual_not_persisted(self) -> None:
        store = InMemoryPoolStore([make_pool(initial_interest_rate="1000000000")])
        pool = store.get(0)
        pool.increment_supply(FixedU128.from_integer(10**9))
        pool.increment_debt(FixedU128.from_integer(10**9))
        store.put(pool)
        with pytest.raises(Overflow):
            runtime_api.accrue_pool(store, 0, 10 + 10**9)
        assert store.get(0).interest_updated_at == 10


class TestBalances:
    def test_balances_follow_indices(self, store: InMemoryPoolStore) -> None:
        runtime_api.accrue_pool(store, 0, 20)
        info = BalanceInfo(amount=fx("100"), index=ONE)
        assert runtime_api.supply_balance(store, 0, info) == fx("135")
        assert runtime_api.debt_balance(store, 0, info) == fx("170")
