from tick_index.tick_liquidity_index import TickLiquidityIndex
from tick_index.types import Tick, TickInfo


class AsyncTickDataProvider:
    """
    Presents a `TickLiquidityIndex` through the awaitable tick data provider interface expected by
    some swap engines. The index is queried synchronously; the coroutines never suspend.

    The camelCase aliases match the method names used by the Uniswap V3 SDK.
    """

    def __init__(self, index: TickLiquidityIndex) -> None:
        self.index = index

    async def get_tick(self, tick: Tick) -> TickInfo:
        return self.index.get_tick(tick)

    async def next_initialized_tick_within_one_word(
        self,
        tick: Tick,
        less_than_or_equal: bool,
        tick_spacing: int,
    ) -> tuple[Tick, bool]:
        return self.index.next_initialized_tick_within_one_word(
            tick=tick,
            less_than_or_equal=less_than_or_equal,
            tick_spacing=tick_spacing,
        )

    getTick = get_tick  # noqa: N815
    nextInitializedTickWithinOneWord = next_initialized_tick_within_one_word  # noqa: N815
