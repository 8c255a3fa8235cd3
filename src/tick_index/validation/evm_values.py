from typing import Annotated

from pydantic import Field

from tick_index.constants import (
    MAX_INT24,
    MAX_INT128,
    MAX_UINT24,
    MAX_UINT128,
    MAX_UINT160,
    MIN_INT24,
    MIN_INT128,
    MIN_UINT24,
    MIN_UINT128,
    MIN_UINT160,
)

type ValidatedInt24 = Annotated[int, Field(strict=True, ge=MIN_INT24, le=MAX_INT24)]
type ValidatedInt24NonZero = Annotated[int, Field(strict=True, gt=0, le=MAX_INT24)]
type ValidatedInt128 = Annotated[int, Field(strict=True, ge=MIN_INT128, le=MAX_INT128)]

type ValidatedUint24 = Annotated[int, Field(strict=True, ge=MIN_UINT24, le=MAX_UINT24)]
type ValidatedUint128 = Annotated[int, Field(strict=True, ge=MIN_UINT128, le=MAX_UINT128)]
type ValidatedUint160 = Annotated[int, Field(strict=True, ge=MIN_UINT160, le=MAX_UINT160)]
