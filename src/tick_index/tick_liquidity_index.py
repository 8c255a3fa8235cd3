from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Iterator, Mapping
from functools import cached_property
from types import MappingProxyType
from typing import Any

import pydantic

from tick_index.constants import MAX_INT24, MAX_TICK, MIN_TICK
from tick_index.exceptions import TickIndexValueError, ValidationError
from tick_index.functions import (
    get_tick_word_and_bit_position,
    get_word_tick_bounds,
    is_tick_in_range,
)
from tick_index.logging import logger
from tick_index.types import EMPTY_TICK, BitmapWord, Tick, TickBitmap, TickInfo

type TickData = Mapping[Tick, TickInfo | Mapping[str, Any]] | Iterable[
    tuple[Tick, TickInfo | Mapping[str, Any]]
]


def _validate_tick_info(tick: Tick, info: TickInfo | Mapping[str, Any]) -> TickInfo:
    if isinstance(info, TickInfo):
        return info
    try:
        return TickInfo.model_validate(info)
    except pydantic.ValidationError as exc:
        raise ValidationError(message=f"Tick {tick} has invalid liquidity data: {exc}") from exc


class TickLiquidityIndex:
    """
    An immutable index of the initialized ticks of a concentrated liquidity pool.

    The index is built once from a snapshot of pool state and answers the two queries made by a
    swap traversal: the liquidity held at a tick, and the nearest initialized tick in a given
    direction. Initialized ticks are held in a sorted tuple, so directional lookups are a binary
    search instead of a scan over every spaced tick in the range.

    Construction rejects malformed snapshots with `ValidationError`. Once built, every query is a
    total function and the index may be shared between threads without locking.
    """

    def __init__(
        self,
        tick_spacing: int,
        ticks: TickData,
    ) -> None:
        if (
            not isinstance(tick_spacing, int)
            or isinstance(tick_spacing, bool)
            or not (0 < tick_spacing <= MAX_INT24)
        ):
            raise ValidationError(message=f"Invalid tick spacing {tick_spacing!r}")

        tick_data: dict[Tick, TickInfo] = {}
        for tick, info in ticks.items() if isinstance(ticks, Mapping) else ticks:
            if not isinstance(tick, int) or isinstance(tick, bool):
                raise ValidationError(message=f"Tick {tick!r} is not an integer")
            if tick in tick_data:
                raise ValidationError(message=f"Tick {tick} appears more than once")
            if tick % tick_spacing != 0:
                raise ValidationError(
                    message=f"Tick {tick} is not a multiple of tick spacing {tick_spacing}"
                )
            if not is_tick_in_range(tick):
                raise ValidationError(
                    message=f"Tick {tick} is outside the range [{MIN_TICK}, {MAX_TICK}]"
                )

            tick_info = _validate_tick_info(tick, info)
            if tick_info.liquidity_gross == 0:
                raise ValidationError(message=f"Tick {tick} has zero gross liquidity")
            tick_data[tick] = tick_info

        self._tick_spacing = tick_spacing
        self._tick_data = tick_data
        self._ticks: tuple[Tick, ...] = tuple(sorted(tick_data))

        logger.debug(
            f"Built tick index with {len(self._ticks)} initialized ticks "
            f"(spacing {tick_spacing})"
        )

    @classmethod
    def from_liquidity_map(
        cls,
        tick_spacing: int,
        tick_data: TickData,
    ) -> "TickLiquidityIndex":
        """
        Build an index from a liquidity mapping, or an iterable of (tick, liquidity) pairs. The
        liquidity values may be `TickInfo` instances or dicts with `liquidity_net` and
        `liquidity_gross` keys.
        """

        return cls(tick_spacing=tick_spacing, ticks=tick_data)

    def __contains__(self, tick: object) -> bool:
        return tick in self._tick_data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TickLiquidityIndex):
            return NotImplemented
        return self._tick_spacing == other._tick_spacing and self._tick_data == other._tick_data

    def __hash__(self) -> int:
        return hash((self._tick_spacing, self._ticks))

    def __iter__(self) -> Iterator[Tick]:
        return iter(self._ticks)

    def __len__(self) -> int:
        return len(self._ticks)

    def __repr__(self) -> str:  # pragma: no cover
        return (
            f"{self.__class__.__name__}(tick_spacing={self._tick_spacing}, "
            f"initialized_ticks={len(self._ticks)})"
        )

    @property
    def tick_spacing(self) -> int:
        return self._tick_spacing

    @property
    def initialized_ticks(self) -> tuple[Tick, ...]:
        return self._ticks

    def is_initialized(self, tick: Tick) -> bool:
        return tick in self._tick_data

    def get_tick(self, tick: Tick) -> TickInfo:
        """
        Get the liquidity held at the tick. Ticks absent from the index hold no liquidity, so a
        zero-valued `TickInfo` is returned for them.
        """

        return self._tick_data.get(tick, EMPTY_TICK)

    def next_initialized_tick_within_one_word(
        self,
        tick: Tick,
        less_than_or_equal: bool,
        tick_spacing: int,  # noqa: ARG002
    ) -> tuple[Tick, bool]:
        """
        Find the nearest initialized tick strictly below (`less_than_or_equal=True`) or strictly
        above (`less_than_or_equal=False`) the given tick. The starting tick is never returned.

        If no initialized tick exists in that direction, the protocol boundary tick (`MIN_TICK`
        when searching down, `MAX_TICK` when searching up) is returned with `False`. A starting
        tick outside the protocol range also returns the boundary.

        `tick_spacing` is accepted for compatibility with swap engines that pass it, and must
        match the spacing of the index.
        """

        if less_than_or_equal:
            if not is_tick_in_range(tick):
                return MIN_TICK, False
            index = bisect_left(self._ticks, tick)
            if index == 0:
                return MIN_TICK, False
            return self._ticks[index - 1], True

        if not is_tick_in_range(tick):
            return MAX_TICK, False
        index = bisect_right(self._ticks, tick)
        if index == len(self._ticks):
            return MAX_TICK, False
        return self._ticks[index], True

    def initialized_ticks_in_range(self, lower: Tick, upper: Tick) -> tuple[Tick, ...]:
        """
        Get the initialized ticks between `lower` and `upper`, inclusive, in ascending order.
        """

        if lower > upper:
            raise TickIndexValueError(message=f"Lower tick {lower} exceeds upper tick {upper}")

        return self._ticks[bisect_left(self._ticks, lower) : bisect_right(self._ticks, upper)]

    def word_bitmap(self, word_position: BitmapWord) -> TickBitmap:
        """
        Build the 256-bit initialization bitmap for a word, with bit `i` set if the `i`-th
        compressed tick of the word is initialized.
        """

        lowest_tick, highest_tick = get_word_tick_bounds(word_position, self._tick_spacing)
        if lowest_tick > highest_tick:
            # The word lies entirely outside the protocol tick range
            return 0

        bitmap = 0
        for tick in self.initialized_ticks_in_range(lowest_tick, highest_tick):
            _, bit_position = get_tick_word_and_bit_position(tick, self._tick_spacing)
            bitmap |= 1 << bit_position
        return bitmap

    @cached_property
    def tick_bitmap(self) -> MappingProxyType[BitmapWord, TickBitmap]:
        """
        The initialization bitmap for every word holding at least one initialized tick.
        """

        tick_bitmap: dict[BitmapWord, TickBitmap] = {}
        for tick in self._ticks:
            word_position, bit_position = get_tick_word_and_bit_position(
                tick, self._tick_spacing
            )
            tick_bitmap[word_position] = tick_bitmap.get(word_position, 0) | (1 << bit_position)
        return MappingProxyType(tick_bitmap)
