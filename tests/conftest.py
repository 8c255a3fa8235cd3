import logging

import pytest

from tick_index.logging import logger
from tick_index.types import TickInfo


@pytest.fixture(scope="session", autouse=True)
def _set_tick_index_logging():
    """
    Set the logging level to DEBUG for the test run
    """
    logger.setLevel(logging.DEBUG)


@pytest.fixture
def pool_data() -> dict:
    """
    Pool data in the shape produced by the snapshot fetcher, with large values as strings
    """
    return {
        "fee": 3000,
        "sqrtPriceX96": "1829744519839346889661884864",
        "tickCurrent": -74959,
        "liquidity": "3161000000",
        "tickSpacing": 60,
        "zeroForOne": True,
        "ticks": {
            "-74960": {"liquidityNet": "1000000", "liquidityGross": "1000000"},
            "-74900": {"liquidityNet": "-500000", "liquidityGross": "500000"},
            "-74840": {"liquidityNet": "-500000", "liquidityGross": "500000"},
        },
    }


@pytest.fixture
def sparse_ticks() -> dict[int, TickInfo]:
    return {
        -120: TickInfo(liquidity_net=1000, liquidity_gross=1000),
        60: TickInfo(liquidity_net=-1000, liquidity_gross=1000),
    }
