from __future__ import annotations

from feesim.domain.entities.fees import RollupFeeBreakdown


GWEI_PER_UNIT = 1_000_000_000.0


def native_fee(*, gas_price: float, gas_used: int) -> float:
    """Fee of a base-chain transaction in its native unit."""
    return gas_price * float(gas_used) / GWEI_PER_UNIT


def blended_l2_fee(
    *,
    l2_gas_price: float,
    l2_gas_used: int,
    l1_gas_price: float,
    l1_gas_used: int,
) -> float:
    """
    L2 fee with both gas components summed before a single Gwei conversion.

    The L1 component is priced in the base chain's Gwei but is added to the L2
    component as-is, so the result mixes units.
    """
    return (l2_gas_price * float(l2_gas_used) + l1_gas_price * float(l1_gas_used)) / GWEI_PER_UNIT


def execution_plus_rollup_fee(
    *,
    l2_gas_price: float,
    l2_gas_used: int,
    l1_gas_price: float,
    overhead: float,
    eth_to_mnt_ratio: float,
) -> RollupFeeBreakdown:
    execution_fee = l2_gas_price * float(l2_gas_used) / GWEI_PER_UNIT
    rollup_fee = l1_gas_price * overhead * eth_to_mnt_ratio / GWEI_PER_UNIT
    return RollupFeeBreakdown(
        execution_fee=execution_fee,
        rollup_fee=rollup_fee,
        total_fee=execution_fee + rollup_fee,
    )
