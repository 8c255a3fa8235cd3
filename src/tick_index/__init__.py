from .config import settings
from .version import __version__

# isort: split

from .constants import MAX_TICK, MIN_TICK
from .exceptions import IncompleteSnapshot, TickIndexError, TickIndexValueError, ValidationError
from .logging import logger
from .provider import AsyncTickDataProvider
from .snapshot import PoolSnapshot, load_snapshot_file
from .tick_liquidity_index import TickLiquidityIndex
from .types import EMPTY_TICK, TickInfo

__all__ = (
    "EMPTY_TICK",
    "MAX_TICK",
    "MIN_TICK",
    "AsyncTickDataProvider",
    "IncompleteSnapshot",
    "PoolSnapshot",
    "TickIndexError",
    "TickIndexValueError",
    "TickInfo",
    "TickLiquidityIndex",
    "ValidationError",
    "__version__",
    "load_snapshot_file",
    "logger",
    "settings",
)
