"""Error types raised by the lending pool core."""

from typing import Any


class LendingError(Exception):
    """Base class for all lending pool errors."""


class Overflow(LendingError, ArithmeticError):
    """A fixed-point operation left the representable range (over- or underflow)."""


class InsufficientBalance(LendingError, ValueError):
    """A decrement asked for more than the current balance."""

    def __init__(self, balance_name: str, balance: Any, amount: Any) -> None:
        super().__init__(
            f"Cannot decrement {balance_name} by {amount}: only {balance} available"
        )
        self.balance_name = balance_name
        self.balance = balance
        self.amount = amount


class InvalidParameters(LendingError, ValueError):
    """Some or one of the parameters are/is invalid."""


class PoolNotExist(LendingError, KeyError):
    """No pool is stored under the requested id."""

    def __init__(self, pool_id: int) -> None:
        super().__init__(f"Pool does not exist: {pool_id}")
        self.pool_id = pool_id

    def __str__(self) -> str:
        return self.args[0]


class PriceNotReady(LendingError):
    """The oracle has no price for the requested currency."""

    def __init__(self, currency_id: Any) -> None:
        super().__init__(f"Price is not ready for {currency_id}")
        self.currency_id = currency_id
