"""Abstract collaborators: pool persistence and price feeds."""

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterator

from src.protocol.fixed_point import FixedU128
from src.protocol.pool import Pool


class PoolStore(ABC):
    """Keyed store of pool records.

    The pool core never touches the store; hosts load a pool value, operate
    on it and put it back.
    """

    @abstractmethod
    def get(self, pool_id: int) -> Pool:
        """Load the pool stored under ``pool_id``; raises ``PoolNotExist``."""

    @abstractmethod
    def put(self, pool: Pool) -> None:
        """Store ``pool`` under its own id, replacing any previous record."""

    @abstractmethod
    def ids(self) -> list[int]:
        """All stored pool ids in ascending order."""

    def __contains__(self, pool_id: object) -> bool:
        return pool_id in self.ids()

    def __iter__(self) -> Iterator[Pool]:
        for pool_id in self.ids():
            yield self.get(pool_id)


class PriceOracle(ABC):
    """Unit price feed per currency."""

    @abstractmethod
    def get_price(self, currency_id: Hashable) -> FixedU128:
        """Current unit price in USD; raises ``PriceNotReady`` when unknown."""
