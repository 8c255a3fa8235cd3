import asyncio

from tick_index.constants import MAX_TICK, MIN_TICK
from tick_index.provider import AsyncTickDataProvider
from tick_index.tick_liquidity_index import TickLiquidityIndex
from tick_index.types import EMPTY_TICK, TickInfo


async def test_async_provider_delegates_to_index(sparse_ticks: dict[int, TickInfo]):
    provider = AsyncTickDataProvider(TickLiquidityIndex(tick_spacing=60, ticks=sparse_ticks))

    assert await provider.get_tick(60) == TickInfo(liquidity_net=-1000, liquidity_gross=1000)
    assert await provider.get_tick(0) == EMPTY_TICK
    assert await provider.next_initialized_tick_within_one_word(
        tick=0, less_than_or_equal=False, tick_spacing=60
    ) == (60, True)
    assert await provider.next_initialized_tick_within_one_word(
        tick=0, less_than_or_equal=True, tick_spacing=60
    ) == (-120, True)
    assert await provider.next_initialized_tick_within_one_word(
        tick=60, less_than_or_equal=False, tick_spacing=60
    ) == (MAX_TICK, False)


async def test_async_provider_camel_case_aliases(sparse_ticks: dict[int, TickInfo]):
    provider = AsyncTickDataProvider(TickLiquidityIndex(tick_spacing=60, ticks=sparse_ticks))

    assert await provider.getTick(-120) == TickInfo(liquidity_net=1000, liquidity_gross=1000)
    assert await provider.nextInitializedTickWithinOneWord(-120, True, 60) == (MIN_TICK, False)


async def test_async_provider_concurrent_queries(sparse_ticks: dict[int, TickInfo]):
    provider = AsyncTickDataProvider(TickLiquidityIndex(tick_spacing=60, ticks=sparse_ticks))

    results = await asyncio.gather(
        *(provider.next_initialized_tick_within_one_word(0, False, 60) for _ in range(100))
    )
    assert results == [(60, True)] * 100
