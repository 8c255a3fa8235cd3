import pathlib
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

import pydantic
import pydantic_core

from tick_index.config import settings
from tick_index.exceptions import IncompleteSnapshot, ValidationError
from tick_index.logging import logger
from tick_index.tick_liquidity_index import TickLiquidityIndex
from tick_index.types import Tick, TickInfo
from tick_index.validation.evm_values import (
    ValidatedInt24,
    ValidatedInt24NonZero,
    ValidatedUint24,
    ValidatedUint128,
    ValidatedUint160,
)


def _to_int(value: Any, name: str) -> int:
    """
    Convert an integer or a decimal string to an integer. Fetchers commonly serialize values
    wider than 53 bits as strings to survive a JSON round trip.
    """

    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.isascii() and value.removeprefix("-").isdigit():
        return int(value, 10)
    raise ValidationError(message=f"{name} must be an integer, got {value!r}")


class PoolSnapshot(pydantic.BaseModel, frozen=True):
    """
    The state of a concentrated liquidity pool at a point in time: the scalar values consumed by a
    swap engine, and the liquidity at every initialized tick.

    The tick data is validated when the snapshot is created, and the `TickLiquidityIndex` built
    from it is available through `build_index`.
    """

    fee: ValidatedUint24
    sqrt_price_x96: ValidatedUint160
    tick: ValidatedInt24
    liquidity: ValidatedUint128
    tick_spacing: ValidatedInt24NonZero
    zero_for_one: bool = True
    ticks: Mapping[Tick, TickInfo] = pydantic.Field(default_factory=dict, validate_default=True)

    _index: TickLiquidityIndex = pydantic.PrivateAttr()

    @pydantic.field_validator("ticks", mode="after")
    @classmethod
    def _freeze_ticks(cls, ticks: Mapping[Tick, TickInfo]) -> Mapping[Tick, TickInfo]:
        # The index is built from these ticks, so they must not change afterwards
        return MappingProxyType(dict(ticks))

    @pydantic.field_serializer("ticks")
    def _serialize_ticks(self, ticks: Mapping[Tick, TickInfo]) -> dict[Tick, TickInfo]:
        return dict(ticks)

    def model_post_init(self, context: Any, /) -> None:
        self._index = TickLiquidityIndex(tick_spacing=self.tick_spacing, ticks=self.ticks)

    @classmethod
    def from_pool_data(cls, data: Mapping[str, Any]) -> "PoolSnapshot":
        """
        Build a snapshot from the pool data shape produced by the snapshot fetcher:

        {
            "fee": int,
            "sqrtPriceX96": int | str,
            "tickCurrent": int,
            "liquidity": int | str,
            "tickSpacing": int,
            "zeroForOne": bool,
            "ticks": {
                "<tick>": {
                    "liquidityNet": int | str,
                    "liquidityGross": int | str,  # optional
                    "initialized": bool,  # optional
                } | null,
                ...
            }
        }

        A tick entry of `null` marks a tick whose fetch failed, and raises `IncompleteSnapshot`.
        An entry with `"initialized": false` is dropped. If `liquidityGross` is missing, the
        absolute value of `liquidityNet` is used, which is the smallest gross liquidity consistent
        with the net value.
        """

        if not isinstance(data, Mapping):
            raise ValidationError(
                message=f"Pool data must be an object, got {type(data).__name__}"
            )

        try:
            fee = _to_int(data["fee"], "fee")
            sqrt_price_x96 = _to_int(data["sqrtPriceX96"], "sqrtPriceX96")
            tick = _to_int(data["tickCurrent"], "tickCurrent")
            liquidity = _to_int(data["liquidity"], "liquidity")
            tick_spacing = _to_int(data["tickSpacing"], "tickSpacing")
        except KeyError as exc:
            raise ValidationError(message=f"Pool data is missing {exc.args[0]!r}") from None

        tick_data: dict[Tick, TickInfo] = {}
        failed_ticks: list[Tick] = []
        seen_ticks: set[Tick] = set()
        raw_ticks = data.get("ticks", {})
        if not isinstance(raw_ticks, Mapping):
            raise ValidationError(
                message=f"Pool data 'ticks' must be an object, got {type(raw_ticks).__name__}"
            )

        for raw_tick, entry in raw_ticks.items():
            tick_key = _to_int(raw_tick, "tick")
            if tick_key in seen_ticks:
                raise ValidationError(message=f"Tick {tick_key} appears more than once")
            seen_ticks.add(tick_key)

            if entry is None:
                failed_ticks.append(tick_key)
                continue
            if not isinstance(entry, Mapping):
                raise ValidationError(
                    message=f"Tick {tick_key} data must be an object, got {type(entry).__name__}"
                )
            if entry.get("initialized") is False:
                logger.debug(f"Dropping uninitialized tick {tick_key}")
                continue
            if "liquidityNet" not in entry:
                raise ValidationError(message=f"Tick {tick_key} is missing 'liquidityNet'")

            liquidity_net = _to_int(entry["liquidityNet"], "liquidityNet")
            liquidity_gross = (
                _to_int(entry["liquidityGross"], "liquidityGross")
                if entry.get("liquidityGross") is not None
                else abs(liquidity_net)
            )
            try:
                tick_data[tick_key] = TickInfo(
                    liquidity_net=liquidity_net,
                    liquidity_gross=liquidity_gross,
                )
            except pydantic.ValidationError as exc:
                raise ValidationError(
                    message=f"Tick {tick_key} has invalid liquidity data: {exc}"
                ) from exc

        if failed_ticks:
            logger.warning(f"Tick data was not fetched for {len(failed_ticks)} ticks")
            raise IncompleteSnapshot(failed_ticks)

        try:
            return cls(
                fee=fee,
                sqrt_price_x96=sqrt_price_x96,
                tick=tick,
                liquidity=liquidity,
                tick_spacing=tick_spacing,
                zero_for_one=data.get("zeroForOne", True),
                ticks=tick_data,
            )
        except pydantic.ValidationError as exc:
            raise ValidationError(message=f"Invalid pool data: {exc}") from exc

    def build_index(self) -> TickLiquidityIndex:
        return self._index


def load_snapshot_file(path: pathlib.Path | str) -> PoolSnapshot:
    """
    Load a pool snapshot from a JSON file holding the fetcher's pool data. A relative path that
    does not exist in the working directory is looked up in the configured snapshot directory.
    """

    path = pathlib.Path(path).expanduser()
    if not path.is_absolute() and not path.exists():
        path = settings.snapshot_dir.expanduser() / path
    path = path.absolute()
    logger.debug(f"Loading pool snapshot from {path}")

    try:
        pool_data: Any = pydantic_core.from_json(path.read_bytes())
    except ValueError as exc:
        raise ValidationError(message=f"Could not decode snapshot file {path}") from exc

    return PoolSnapshot.from_pool_data(pool_data)
