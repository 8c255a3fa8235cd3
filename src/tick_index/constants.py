__all__ = (
    "MAX_INT24",
    "MAX_INT128",
    "MAX_TICK",
    "MAX_UINT24",
    "MAX_UINT128",
    "MAX_UINT160",
    "MIN_INT24",
    "MIN_INT128",
    "MIN_TICK",
    "MIN_UINT24",
    "MIN_UINT128",
    "MIN_UINT160",
    "TICKS_PER_WORD",
)

import typing


def _min_uint(_: int) -> int:
    return 0


def _max_uint(bits: int) -> int:
    return typing.cast("int", 2**bits - 1)


def _min_int(bits: int) -> int:
    return typing.cast("int", -(2 ** (bits - 1)))


def _max_int(bits: int) -> int:
    return typing.cast("int", (2 ** (bits - 1)) - 1)


MIN_INT24 = _min_int(24)
MAX_INT24 = _max_int(24)

MIN_INT128 = _min_int(128)
MAX_INT128 = _max_int(128)

MIN_UINT24 = _min_uint(24)
MAX_UINT24 = _max_uint(24)

MIN_UINT128 = _min_uint(128)
MAX_UINT128 = _max_uint(128)

MIN_UINT160 = _min_uint(160)
MAX_UINT160 = _max_uint(160)


# Protocol-wide tick bounds, derived from log base 1.0001 of 2**128
MIN_TICK = -887272
MAX_TICK = -MIN_TICK

# Each word of the tick bitmap tracks 256 compressed ticks
TICKS_PER_WORD = 256
