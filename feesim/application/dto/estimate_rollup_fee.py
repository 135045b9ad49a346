from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EstimateRollupFeeInput:
    l2_gas_price: float
    l2_gas_used: int
    l1_gas_price: float
    overhead: float


@dataclass(frozen=True)
class EstimateRollupFeeOutput:
    execution_fee: float
    rollup_fee: float
    total_fee: float
    total_usd: float
    eth_to_mnt_ratio: float
