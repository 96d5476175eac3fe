"""Tests for store and oracle configuration."""

import logging

import pytest

from src.data.constants import BTC, DOT, ETH
from src.data.provider_factory import POOLS_ENV_VAR, create_oracle, create_store, pool_from_preset
from src.data.static_params import POOL_PRESETS
from src.protocol.fixed_point import ONE, ZERO, FixedU128


class TestCreateStore:
    def test_explicit_pools(self) -> None:
        store = create_store([ETH, BTC], owner="gov", block_number=5)
        assert store.ids() == [0, 1]
        eth = store.get(0)
        assert eth.name == ETH
        assert eth.currency_id == ETH
        assert eth.can_be_collateral is True
        assert eth.enabled is False
        assert eth.created_by == "gov"
        assert eth.interest_updated_at == 5

    def test_all_presets_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(POOLS_ENV_VAR, raising=False)
        store = create_store()
        assert len(store) == len(POOL_PRESETS)

    def test_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(POOLS_ENV_VAR, "DOT, ETH")
        store = create_store()
        assert [p.name for p in store] == [DOT, ETH]

    def test_unknown_preset_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            store = create_store(["DOGE", DOT])
        assert [p.name for p in store] == [DOT]
        assert "DOGE" in caplog.text


class TestPoolFromPreset:
    def test_parameters_parsed_exactly(self) -> None:
        pool = pool_from_preset(9, ETH, POOL_PRESETS[ETH], "root", 0)
        assert pool.safe_factor == FixedU128.from_str("0.75")
        assert pool.close_factor == FixedU128.from_str("0.5")
        assert pool.close_minimal_amount == FixedU128.from_integer(100)
        assert pool.supply == ZERO
        assert pool.total_supply_index == ONE


class TestCreateOracle:
    def test_static_prices(self) -> None:
        oracle = create_oracle()
        assert oracle.get_price(ETH) == FixedU128.from_integer(3000)

    def test_overrides(self) -> None:
        oracle = create_oracle({ETH: FixedU128.from_integer(2500)})
        assert oracle.get_price(ETH) == FixedU128.from_integer(2500)
        assert oracle.get_price(BTC) == FixedU128.from_integer(45000)
