from functools import cache

from tick_index.constants import MAX_TICK, MIN_TICK, TICKS_PER_WORD
from tick_index.types import BitmapWord, Tick


def compress_tick(tick: Tick, tick_spacing: int) -> int:
    """
    Divide the tick by the spacing, rounding towards negative infinity.

    Python's floor division already rounds down, so the abs-and-modulo correction used by the
    Solidity contract is unnecessary.
    """

    return tick // tick_spacing


@cache
def position(compressed_tick: int) -> tuple[BitmapWord, int]:
    """
    Computes the position in the tick initialization bitmap for the given compressed tick.

    This function does not account for tick spacing. For a higher level function that accounts
    for tick spacing, use `get_tick_word_and_bit_position`.
    """

    return (
        compressed_tick >> 8,  # word_pos
        compressed_tick % TICKS_PER_WORD,  # bit_pos
    )


def get_tick_word_and_bit_position(tick: Tick, tick_spacing: int) -> tuple[BitmapWord, int]:
    """
    Retrieves the word and bit position of the tick bitmap that tracks the given tick.
    """

    return position(compress_tick(tick, tick_spacing))


def get_word_tick_bounds(word_position: BitmapWord, tick_spacing: int) -> tuple[Tick, Tick]:
    """
    The lowest and highest tick tracked by the given bitmap word, clamped to the protocol range.
    """

    lowest_tick = tick_spacing * TICKS_PER_WORD * word_position
    highest_tick = lowest_tick + tick_spacing * (TICKS_PER_WORD - 1)
    return max(lowest_tick, MIN_TICK), min(highest_tick, MAX_TICK)


def is_tick_in_range(tick: Tick) -> bool:
    return MIN_TICK <= tick <= MAX_TICK
