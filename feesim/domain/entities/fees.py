from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Chain(Enum):
    ETHEREUM = 1
    MANTLE = 2

    @property
    def unit(self) -> str:
        return "ETH" if self is Chain.ETHEREUM else "MNT"


class FeeStrategy(Enum):
    SIMPLE_BLENDED = "simple_blended"
    EXECUTION_PLUS_ROLLUP = "execution_plus_rollup"


class Asset(Enum):
    ETHEREUM = "ethereum"
    MANTLE = "mantle"


@dataclass(frozen=True)
class GasRange:
    min_price: float
    max_price: float


@dataclass(frozen=True)
class AssetPrices:
    eth_usd: float
    mnt_usd: float


@dataclass(frozen=True)
class DailyFee:
    day: int
    fee: float
    fee_usd: float


@dataclass(frozen=True)
class FeeSimulationResult:
    unit: str
    days: int
    total_fee: float
    total_usd: float


@dataclass(frozen=True)
class RollupFeeBreakdown:
    execution_fee: float
    rollup_fee: float
    total_fee: float
