from __future__ import annotations

import logging

from feesim.application.dto.estimate_rollup_fee import EstimateRollupFeeInput, EstimateRollupFeeOutput
from feesim.application.ports.asset_price_port import AssetPricePort
from feesim.domain.exceptions import InputParseError, PriceFeedError
from feesim.domain.services.fee_model import execution_plus_rollup_fee


logger = logging.getLogger(__name__)


class EstimateRollupFeeUseCase:
    def __init__(self, *, asset_price_port: AssetPricePort):
        self._asset_price_port = asset_price_port

    def execute(self, command: EstimateRollupFeeInput) -> EstimateRollupFeeOutput:
        if command.l2_gas_used < 0:
            raise InputParseError("L2 gas used must be >= 0.")

        prices = self._asset_price_port.get_prices()
        if prices.mnt_usd == 0:
            raise PriceFeedError("Mantle price is zero; ETH/MNT ratio is undefined.")
        eth_to_mnt_ratio = prices.eth_usd / prices.mnt_usd

        breakdown = execution_plus_rollup_fee(
            l2_gas_price=command.l2_gas_price,
            l2_gas_used=command.l2_gas_used,
            l1_gas_price=command.l1_gas_price,
            overhead=command.overhead,
            eth_to_mnt_ratio=eth_to_mnt_ratio,
        )
        logger.info(
            "estimate_rollup_fee: execution=%s rollup=%s ratio=%s",
            breakdown.execution_fee,
            breakdown.rollup_fee,
            eth_to_mnt_ratio,
        )
        return EstimateRollupFeeOutput(
            execution_fee=breakdown.execution_fee,
            rollup_fee=breakdown.rollup_fee,
            total_fee=breakdown.total_fee,
            total_usd=breakdown.total_fee * prices.mnt_usd,
            eth_to_mnt_ratio=eth_to_mnt_ratio,
        )
