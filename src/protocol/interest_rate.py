"""Utilization-based interest rate models.

A model maps a utilization ratio to a per-period debt rate and supply rate.
Models are a closed set keyed by ``ModelKind``; each kind carries its own
parameter struct and a matching branch in ``InterestModel``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np
import pandas as pd

from src.data.constants import PERCENT_SCALE
from src.protocol.errors import InvalidParameters
from src.protocol.fixed_point import ZERO, FixedU128


def utilization_ratio(supply: FixedU128, debt: FixedU128) -> FixedU128:
    """Fraction of supply currently borrowed, ``debt / supply``.

    Defined as zero when nothing is supplied.
    """
    if supply.is_zero():
        return ZERO
    return debt / supply


@dataclass(frozen=True)
class TwoSegmentLinearParams:
    """Kinked curve parameters as two-decimal percentages.

    Each value is an integer scaled by 10000, so 8051 means 80.51%.
    """

    kink: int
    base: int
    multiplier: int
    jump_multiplier: int

    def __post_init__(self) -> None:
        for name in ("kink", "base", "multiplier", "jump_multiplier"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidParameters(f"{name} must be an integer, got {value!r}")
            if not 0 <= value <= PERCENT_SCALE:
                raise InvalidParameters(
                    f"{name} must be within [0, {PERCENT_SCALE}], got {value}"
                )


@dataclass(frozen=True)
class LinearParams:
    """Single-segment curve ``base + multiplier * utilization``."""

    base: FixedU128
    multiplier: FixedU128


class ModelKind(str, Enum):
    TWO_SEGMENT_LINEAR = "two_segment_linear"
    LINEAR = "linear"


_PARAMS_BY_KIND: dict[ModelKind, type] = {
    ModelKind.TWO_SEGMENT_LINEAR: TwoSegmentLinearParams,
    ModelKind.LINEAR: LinearParams,
}


@dataclass(frozen=True)
class InterestRates:
    """Rates quoted for one supply/debt snapshot."""

    utilization: FixedU128
    debt_rate: FixedU128
    supply_rate: FixedU128


@dataclass(frozen=True)
class InterestModel:
    """An interest rate model tagged by kind."""

    kind: ModelKind
    params: TwoSegmentLinearParams | LinearParams

    def __post_init__(self) -> None:
        try:
            kind = ModelKind(self.kind)
        except ValueError as exc:
            raise InvalidParameters(f"Unknown interest model kind: {self.kind!r}") from exc
        object.__setattr__(self, "kind", kind)

        expected = _PARAMS_BY_KIND[kind]
        if not isinstance(self.params, expected):
            raise InvalidParameters(
                f"{self.kind.value} model requires {expected.__name__}, "
                f"got {type(self.params).__name__}"
            )

    @classmethod
    def two_segment_linear(cls, params: TwoSegmentLinearParams) -> InterestModel:
        return cls(ModelKind.TWO_SEGMENT_LINEAR, params)

    @classmethod
    def linear(cls, params: LinearParams) -> InterestModel:
        return cls(ModelKind.LINEAR, params)

    def debt_rate(self, utilization: FixedU128) -> FixedU128:
        """Per-period debt rate at the given utilization.

        Two-segment curve:
            rate = base + multiplier * u                          if u < kink
            rate = base + multiplier * u + (u - kink) * jump      if u >= kink

        Raises:
            Overflow: if an intermediate result is not representable.
        """
        if self.kind is ModelKind.TWO_SEGMENT_LINEAR:
            p = self.params
            kink = FixedU128.from_bps(p.kink)
            base = FixedU128.from_bps(p.base)
            multiplier = FixedU128.from_bps(p.multiplier)
            jump_multiplier = FixedU128.from_bps(p.jump_multiplier)

            rate = multiplier * utilization + base
            if kink <= utilization:
                rate = (utilization - kink) * jump_multiplier + rate
            return rate
        if self.kind is ModelKind.LINEAR:
            return self.params.multiplier * utilization + self.params.base
        raise InvalidParameters(f"Unknown interest model kind: {self.kind!r}")

    def supply_rate(self, utilization: FixedU128) -> FixedU128:
        """Supply rate: the debt rate scaled by the borrowed fraction."""
        return self.debt_rate(utilization) * utilization

    def rates(self, supply: FixedU128, debt: FixedU128) -> InterestRates:
        u = utilization_ratio(supply, debt)
        debt_rate = self.debt_rate(u)
        return InterestRates(
            utilization=u,
            debt_rate=debt_rate,
            supply_rate=debt_rate * u,
        )

    def rate_curve(self, n_points: int = 200) -> pd.DataFrame:
        """Sample the curve over utilization in [0, 1] for plotting.

        Returns:
            DataFrame with columns: utilization, debt_rate, supply_rate
        """
        if n_points < 2:
            raise InvalidParameters(f"n_points must be at least 2, got {n_points}")
        points = [FixedU128.from_rational(i, n_points - 1) for i in range(n_points)]
        debt_rates = [self.debt_rate(u) for u in points]
        supply_rates = [self.supply_rate(u) for u in points]

        return pd.DataFrame(
            {
                "utilization": np.array([u.to_float() for u in points]),
                "debt_rate": np.array([r.to_float() for r in debt_rates]),
                "supply_rate": np.array([r.to_float() for r in supply_rates]),
            }
        )
