"""Governance parameter presets for the supported pools."""

from dataclasses import dataclass

from src.data.constants import BTC, DORA, DOT, ETH, KONO, LIT


@dataclass(frozen=True)
class PoolPreset:
    """Risk parameters for one pool as exact decimal strings."""

    currency_id: str
    can_be_collateral: bool
    safe_factor: str
    close_factor: str
    discount_factor: str
    utilization_factor: str
    initial_interest_rate: str
    minimal_amount: str
    close_minimal_amount: str = "100"


# --- Per-block rates; collateral enabled only for ETH and BTC ---

POOL_PRESETS: dict[str, PoolPreset] = {
    KONO: PoolPreset(
        currency_id=KONO,
        can_be_collateral=False,
        safe_factor="0.7",
        close_factor="0.5",
        discount_factor="0.95",
        utilization_factor="0.00000003",
        initial_interest_rate="0.000000003",
        minimal_amount="0.0001",
    ),
    DOT: PoolPreset(
        currency_id=DOT,
        can_be_collateral=False,
        safe_factor="0.7",
        close_factor="0.5",
        discount_factor="0.95",
        utilization_factor="0.00000003",
        initial_interest_rate="0.000000003",
        minimal_amount="0.0001",
    ),
    ETH: PoolPreset(
        currency_id=ETH,
        can_be_collateral=True,
        safe_factor="0.75",
        close_factor="0.5",
        discount_factor="0.95",
        utilization_factor="0.00000002",
        initial_interest_rate="0.000000002",
        minimal_amount="0.00001",
    ),
    BTC: PoolPreset(
        currency_id=BTC,
        can_be_collateral=True,
        safe_factor="0.75",
        close_factor="0.5",
        discount_factor="0.95",
        utilization_factor="0.00000002",
        initial_interest_rate="0.000000002",
        minimal_amount="0.000001",
    ),
    DORA: PoolPreset(
        currency_id=DORA,
        can_be_collateral=False,
        safe_factor="0.6",
        close_factor="0.5",
        discount_factor="0.9",
        utilization_factor="0.00000005",
        initial_interest_rate="0.000000005",
        minimal_amount="0.001",
    ),
    LIT: PoolPreset(
        currency_id=LIT,
        can_be_collateral=False,
        safe_factor="0.6",
        close_factor="0.5",
        discount_factor="0.9",
        utilization_factor="0.00000005",
        initial_interest_rate="0.000000005",
        minimal_amount="0.001",
    ),
}

# USD unit prices used when no live oracle is wired in
ASSET_PRICES: dict[str, str] = {
    KONO: "1",
    DOT: "30",
    ETH: "3000",
    BTC: "45000",
    DORA: "5",
    LIT: "3",
}
