import pydantic

from tick_index.validation.evm_values import ValidatedInt128, ValidatedUint128

type BitmapWord = int
type Tick = int
type TickBitmap = int


class TickInfo(pydantic.BaseModel, frozen=True):
    """
    Liquidity bookkeeping for a single tick.

    `liquidity_net` is added to the active liquidity when the price crosses the tick moving up,
    and subtracted when moving down. `liquidity_gross` counts all positions referencing the tick
    and is non-zero for every initialized tick.
    """

    liquidity_net: ValidatedInt128
    liquidity_gross: ValidatedUint128


EMPTY_TICK = TickInfo(liquidity_net=0, liquidity_gross=0)
