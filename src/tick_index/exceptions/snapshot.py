from collections.abc import Iterable
from typing import Any

from tick_index.exceptions.base import TickIndexError, TickIndexValueError


class ValidationError(TickIndexValueError):
    """
    Raised when a liquidity snapshot is malformed, e.g. a tick is not aligned to the tick spacing,
    appears twice, lies outside the protocol tick range, or carries zero gross liquidity.
    """

    def __reduce__(self) -> tuple[Any, ...]:
        # Pickling will raise an exception if a reduction method is not defined
        return self.__class__, (self.message,)


class IncompleteSnapshot(TickIndexError):
    """
    Raised when a snapshot includes ticks that could not be fetched. A failed fetch is not
    evidence that the tick is uninitialized, so the snapshot is rejected instead of treating the
    tick as empty.
    """

    def __init__(self, ticks: Iterable[int]) -> None:
        self.ticks = tuple(sorted(ticks))
        super().__init__(message=f"Tick data unavailable for ticks {list(self.ticks)}")

    def __reduce__(self) -> tuple[Any, ...]:
        return self.__class__, (self.ticks,)
