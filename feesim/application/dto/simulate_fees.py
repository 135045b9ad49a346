from __future__ import annotations

from dataclasses import dataclass

from feesim.domain.entities.fees import Chain, GasRange


@dataclass(frozen=True)
class SimulateFeesInput:
    chain: Chain
    days: int
    l1_gas_range: GasRange
    l1_gas_used: int
    l2_gas_range: GasRange | None = None
    l2_gas_used: int | None = None


@dataclass(frozen=True)
class SimulateFeesOutput:
    unit: str
    days: int
    total_fee: float
    total_usd: float
