from __future__ import annotations

import random
from typing import Callable

from feesim.domain.entities.fees import Chain, DailyFee, FeeSimulationResult, GasRange
from feesim.domain.services.fee_model import blended_l2_fee, native_fee


DayCallback = Callable[[DailyFee], None]


def draw_gas_price(rng: random.Random, gas_range: GasRange) -> float:
    """Uniform sample from the closed interval [min_price, max_price]."""
    low, high = gas_range.min_price, gas_range.max_price
    value = rng.uniform(low, high)
    if low <= high:
        # uniform() can round one ulp past `high`
        return min(max(value, low), high)
    return value


def accumulate_daily_fees(
    *,
    unit: str,
    days: int,
    usd_price: float,
    fee_for_day: Callable[[], float],
    on_day: DayCallback | None = None,
) -> FeeSimulationResult:
    """
    Run the day loop and return only the running totals.

    Each day's row is handed to `on_day` as soon as it is computed and is not
    kept afterwards, so memory does not grow with `days`.
    """
    total_fee = 0.0
    total_usd = 0.0
    for day in range(days):
        fee = fee_for_day()
        fee_usd = fee * usd_price
        total_fee += fee
        total_usd += fee_usd
        if on_day is not None:
            on_day(DailyFee(day=day, fee=fee, fee_usd=fee_usd))
    return FeeSimulationResult(
        unit=unit,
        days=days,
        total_fee=total_fee,
        total_usd=total_usd,
    )


def simulate_native_fees(
    *,
    rng: random.Random,
    days: int,
    gas_range: GasRange,
    gas_used: int,
    eth_usd: float,
    on_day: DayCallback | None = None,
) -> FeeSimulationResult:
    def fee_for_day() -> float:
        return native_fee(gas_price=draw_gas_price(rng, gas_range), gas_used=gas_used)

    return accumulate_daily_fees(
        unit=Chain.ETHEREUM.unit,
        days=days,
        usd_price=eth_usd,
        fee_for_day=fee_for_day,
        on_day=on_day,
    )


def simulate_blended_l2_fees(
    *,
    rng: random.Random,
    days: int,
    l1_gas_range: GasRange,
    l1_gas_used: int,
    l2_gas_range: GasRange,
    l2_gas_used: int,
    mnt_usd: float,
    on_day: DayCallback | None = None,
) -> FeeSimulationResult:
    def fee_for_day() -> float:
        # L1 price is drawn before the L2 price each day.
        l1_gas_price = draw_gas_price(rng, l1_gas_range)
        l2_gas_price = draw_gas_price(rng, l2_gas_range)
        return blended_l2_fee(
            l2_gas_price=l2_gas_price,
            l2_gas_used=l2_gas_used,
            l1_gas_price=l1_gas_price,
            l1_gas_used=l1_gas_used,
        )

    return accumulate_daily_fees(
        unit=Chain.MANTLE.unit,
        days=days,
        usd_price=mnt_usd,
        fee_for_day=fee_for_day,
        on_day=on_day,
    )
