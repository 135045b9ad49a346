from __future__ import annotations

import logging

from feesim.application.dto.estimate_rollup_fee import EstimateRollupFeeInput
from feesim.application.dto.simulate_fees import SimulateFeesInput
from feesim.application.ports.simulation_input_port import SimulationInputPort
from feesim.domain.entities.fees import Chain, FeeStrategy, GasRange
from feesim.domain.exceptions import InvalidSelectionError


logger = logging.getLogger(__name__)


def resolve_chain(selection: int) -> Chain:
    try:
        return Chain(selection)
    except ValueError as exc:
        raise InvalidSelectionError(f"Unsupported chain selection: {selection}") from exc


def _warn_if_inverted(label: str, gas_range: GasRange) -> None:
    if gas_range.min_price > gas_range.max_price:
        logger.warning(
            "configure_session: min gas price above max range=%s min=%s max=%s",
            label,
            gas_range.min_price,
            gas_range.max_price,
        )


class ConfigureSessionUseCase:
    """Collects the parameters of one run, in prompt order."""

    def __init__(self, *, input_port: SimulationInputPort):
        self._input_port = input_port

    def execute(self, strategy: FeeStrategy) -> SimulateFeesInput | EstimateRollupFeeInput:
        chain = resolve_chain(self._input_port.read_chain_selection())
        logger.info("configure_session: chain=%s strategy=%s", chain.name, strategy.value)

        if chain is Chain.MANTLE and strategy is FeeStrategy.EXECUTION_PLUS_ROLLUP:
            return EstimateRollupFeeInput(
                l2_gas_price=self._input_port.read_l2_gas_price(),
                l2_gas_used=self._input_port.read_l2_gas_used(),
                l1_gas_price=self._input_port.read_l1_gas_price(),
                overhead=self._input_port.read_overhead(),
            )

        days = self._input_port.read_days()
        l1_gas_range = GasRange(
            min_price=self._input_port.read_min_gas_price(),
            max_price=self._input_port.read_max_gas_price(),
        )
        l1_gas_used = self._input_port.read_l1_gas_used()
        _warn_if_inverted("l1", l1_gas_range)

        if chain is Chain.ETHEREUM:
            return SimulateFeesInput(
                chain=chain,
                days=days,
                l1_gas_range=l1_gas_range,
                l1_gas_used=l1_gas_used,
            )

        l2_gas_range = GasRange(
            min_price=self._input_port.read_min_l2_gas_price(),
            max_price=self._input_port.read_max_l2_gas_price(),
        )
        _warn_if_inverted("l2", l2_gas_range)
        return SimulateFeesInput(
            chain=chain,
            days=days,
            l1_gas_range=l1_gas_range,
            l1_gas_used=l1_gas_used,
            l2_gas_range=l2_gas_range,
            l2_gas_used=self._input_port.read_l2_gas_used(),
        )
