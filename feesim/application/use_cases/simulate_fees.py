from __future__ import annotations

import logging
import random

from feesim.application.dto.simulate_fees import SimulateFeesInput, SimulateFeesOutput
from feesim.application.ports.asset_price_port import AssetPricePort
from feesim.domain.entities.fees import Chain
from feesim.domain.exceptions import InputParseError
from feesim.domain.services.fee_simulation import (
    DayCallback,
    simulate_blended_l2_fees,
    simulate_native_fees,
)


logger = logging.getLogger(__name__)


class SimulateFeesUseCase:
    def __init__(self, *, asset_price_port: AssetPricePort, rng: random.Random | None = None):
        self._asset_price_port = asset_price_port
        self._rng = rng or random.Random()

    def execute(
        self,
        command: SimulateFeesInput,
        *,
        on_day: DayCallback | None = None,
    ) -> SimulateFeesOutput:
        if command.days < 0:
            raise InputParseError("days must be >= 0.")
        if command.l1_gas_used < 0:
            raise InputParseError("Ethereum gas used must be >= 0.")
        if command.chain is Chain.MANTLE:
            if command.l2_gas_range is None or command.l2_gas_used is None:
                raise InputParseError("L2 gas range and L2 gas used are required for Mantle.")
            if command.l2_gas_used < 0:
                raise InputParseError("L2 gas used must be >= 0.")

        prices = self._asset_price_port.get_prices()

        logger.info("simulate_fees: start chain=%s days=%s", command.chain.name, command.days)
        if command.chain is Chain.ETHEREUM:
            result = simulate_native_fees(
                rng=self._rng,
                days=command.days,
                gas_range=command.l1_gas_range,
                gas_used=command.l1_gas_used,
                eth_usd=prices.eth_usd,
                on_day=on_day,
            )
        else:
            result = simulate_blended_l2_fees(
                rng=self._rng,
                days=command.days,
                l1_gas_range=command.l1_gas_range,
                l1_gas_used=command.l1_gas_used,
                l2_gas_range=command.l2_gas_range,
                l2_gas_used=command.l2_gas_used,
                mnt_usd=prices.mnt_usd,
                on_day=on_day,
            )
        logger.info(
            "simulate_fees: done unit=%s total_fee=%s total_usd=%s",
            result.unit,
            result.total_fee,
            result.total_usd,
        )

        return SimulateFeesOutput(
            unit=result.unit,
            days=result.days,
            total_fee=result.total_fee,
            total_usd=result.total_usd,
        )
