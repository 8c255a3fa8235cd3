from tick_index.exceptions.base import TickIndexError, TickIndexValueError
from tick_index.exceptions.snapshot import IncompleteSnapshot, ValidationError

from . import snapshot

__all__ = (
    "IncompleteSnapshot",
    "TickIndexError",
    "TickIndexValueError",
    "ValidationError",
    "snapshot",
)
