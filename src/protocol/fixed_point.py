"""Unsigned 128-bit fixed-point number used for every ledger value.

Values are stored as an integer mantissa with an implicit divisor of 1e18,
the same layout as Substrate's FixedU128. Arithmetic never wraps: checked
operations raise ``Overflow`` and saturating operations clamp to the range.
Multiplication and division round toward zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_FLOOR, Decimal, InvalidOperation, localcontext

from src.data.constants import DIV, MAX_INNER, PERCENT_SCALE
from src.protocol.errors import InvalidParameters, Overflow


def _clamp(inner: int) -> int:
    return max(0, min(MAX_INNER, inner))


@dataclass(frozen=True, order=True)
class FixedU128:
    """Fixed-point value ``inner / 1e18`` with ``0 <= inner <= 2**128 - 1``."""

    inner: int

    def __post_init__(self) -> None:
        if isinstance(self.inner, bool) or not isinstance(self.inner, int):
            raise TypeError(f"FixedU128 inner must be an int, got {type(self.inner).__name__}")
        if self.inner < 0 or self.inner > MAX_INNER:
            raise Overflow(f"FixedU128 out of range: inner={self.inner}")

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls) -> FixedU128:
        return cls(0)

    @classmethod
    def one(cls) -> FixedU128:
        return cls(DIV)

    @classmethod
    def max_value(cls) -> FixedU128:
        return cls(MAX_INNER)

    @classmethod
    def from_inner(cls, inner: int) -> FixedU128:
        return cls(inner)

    @classmethod
    def from_integer(cls, n: int) -> FixedU128:
        """Exact integer; raises ``Overflow`` when ``n`` is negative or too large."""
        return cls(n * DIV)

    @classmethod
    def saturating_from_integer(cls, n: int) -> FixedU128:
        return cls(_clamp(n * DIV))

    @classmethod
    def from_rational(cls, n: int, d: int) -> FixedU128:
        """``n / d`` rounded toward zero; raises ``Overflow`` when not representable."""
        if d == 0:
            raise Overflow("Division by zero in from_rational")
        if (n < 0) != (d < 0) and n != 0:
            raise Overflow(f"Negative rational {n}/{d}")
        return cls(abs(n) * DIV // abs(d))

    @classmethod
    def saturating_from_rational(cls, n: int, d: int) -> FixedU128:
        if d == 0:
            return cls(MAX_INNER) if n > 0 else cls(0)
        if (n < 0) != (d < 0) and n != 0:
            return cls(0)
        return cls(_clamp(abs(n) * DIV // abs(d)))

    @classmethod
    def from_bps(cls, value: int) -> FixedU128:
        """Two-decimal percentage to a fraction, e.g. 8051 -> 0.8051."""
        return cls.from_rational(value, PERCENT_SCALE)

    @classmethod
    def from_str(cls, text: str) -> FixedU128:
        """Parse an exact decimal string such as ``"0.035"``.

        Digits beyond the 18th decimal place are truncated.
        """
        with localcontext() as ctx:
            ctx.prec = 80
            try:
                value = Decimal(text)
            except InvalidOperation as exc:
                raise InvalidParameters(f"Not a decimal number: {text!r}") from exc
            if not value.is_finite():
                raise InvalidParameters(f"Not a finite number: {text!r}")
            if value < 0:
                raise InvalidParameters(f"Negative value: {text!r}")
            scaled = (value * DIV).to_integral_value(rounding=ROUND_FLOOR)
        return cls(int(scaled))

    # ------------------------------------------------------------------
    # Checked arithmetic
    # ------------------------------------------------------------------

    def checked_add(self, other: FixedU128) -> FixedU128:
        return FixedU128(self.inner + other.inner)

    def checked_sub(self, other: FixedU128) -> FixedU128:
        return FixedU128(self.inner - other.inner)

    def checked_mul(self, other: FixedU128) -> FixedU128:
        return FixedU128(self.inner * other.inner // DIV)

    def checked_div(self, other: FixedU128) -> FixedU128:
        if other.inner == 0:
            raise Overflow("Division by zero")
        return FixedU128(self.inner * DIV // other.inner)

    # ------------------------------------------------------------------
    # Saturating arithmetic
    # ------------------------------------------------------------------

    def saturating_add(self, other: FixedU128) -> FixedU128:
        return FixedU128(_clamp(self.inner + other.inner))

    def saturating_sub(self, other: FixedU128) -> FixedU128:
        return FixedU128(_clamp(self.inner - other.inner))

    def saturating_mul(self, other: FixedU128) -> FixedU128:
        return FixedU128(_clamp(self.inner * other.inner // DIV))

    # ------------------------------------------------------------------
    # Operators (checked)
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> FixedU128:
        if not isinstance(other, FixedU128):
            return NotImplemented
        return self.checked_add(other)

    def __sub__(self, other: object) -> FixedU128:
        if not isinstance(other, FixedU128):
            return NotImplemented
        return self.checked_sub(other)

    def __mul__(self, other: object) -> FixedU128:
        if not isinstance(other, FixedU128):
            return NotImplemented
        return self.checked_mul(other)

    def __truediv__(self, other: object) -> FixedU128:
        if not isinstance(other, FixedU128):
            return NotImplemented
        return self.checked_div(other)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def is_zero(self) -> bool:
        return self.inner == 0

    def is_one(self) -> bool:
        return self.inner == DIV

    def trunc(self) -> int:
        """Integer part."""
        return self.inner // DIV

    def to_float(self) -> float:
        """Lossy conversion for display and charts only."""
        return self.inner / DIV

    def __str__(self) -> str:
        whole, frac = divmod(self.inner, DIV)
        if frac == 0:
            return str(whole)
        return f"{whole}.{frac:018d}".rstrip("0")

    def __repr__(self) -> str:
        return f"FixedU128({self})"


ZERO = FixedU128.zero()
ONE = FixedU128.one()
