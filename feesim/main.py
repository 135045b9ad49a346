from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import Callable

from feesim.application.dto.estimate_rollup_fee import EstimateRollupFeeInput
from feesim.application.ports.asset_price_port import AssetPricePort
from feesim.application.ports.simulation_input_port import SimulationInputPort
from feesim.application.use_cases.configure_session import ConfigureSessionUseCase
from feesim.application.use_cases.estimate_rollup_fee import EstimateRollupFeeUseCase
from feesim.application.use_cases.simulate_fees import SimulateFeesUseCase
from feesim.domain.entities.fees import DailyFee, FeeStrategy
from feesim.domain.exceptions import InputParseError, InvalidSelectionError, PriceFeedError
from feesim.infrastructure.clients.asset_price_provider import PriceServiceAdapter
from feesim.infrastructure.clients.pricing import CoingeckoPriceProvider, PriceOverrides, PriceService
from feesim.infrastructure.console.prompt_input import ConsolePromptInput
from feesim.infrastructure.console.report import (
    INVALID_SELECTION_NOTICE,
    format_daily_lines,
    format_rollup_fee_report,
    format_simulation_summary,
)
from feesim.shared.config import ConfigError, Settings, get_settings


logger = logging.getLogger(__name__)


def get_asset_price_port(settings: Settings) -> AssetPricePort:
    overrides = PriceOverrides(settings.price_overrides)
    coingecko = CoingeckoPriceProvider(
        api_base=settings.coingecko_api_base,
        timeout_seconds=settings.coingecko_timeout_seconds,
    )
    return PriceServiceAdapter(PriceService(overrides=overrides, coingecko=coingecko))


def run(
    *,
    input_port: SimulationInputPort,
    asset_price_port: AssetPricePort,
    strategy: FeeStrategy,
    rng: random.Random,
    emit: Callable[[str], None] = print,
) -> None:
    """Run one session, emitting each report line as soon as it is known."""
    command = ConfigureSessionUseCase(input_port=input_port).execute(strategy)
    if isinstance(command, EstimateRollupFeeInput):
        rollup = EstimateRollupFeeUseCase(asset_price_port=asset_price_port).execute(command)
        for line in format_rollup_fee_report(rollup):
            emit(line)
        return

    unit = command.chain.unit

    def on_day(row: DailyFee) -> None:
        for line in format_daily_lines(day=row.day, fee=row.fee, fee_usd=row.fee_usd, unit=unit):
            emit(line)

    output = SimulateFeesUseCase(asset_price_port=asset_price_port, rng=rng).execute(command, on_day=on_day)
    for line in format_simulation_summary(output):
        emit(line)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Estimate Ethereum / Mantle transaction fees and simulate them over several days."
    )
    p.add_argument(
        "--strategy",
        choices=[member.value for member in FeeStrategy],
        help="Mantle fee model (default from MANTLE_FEE_STRATEGY).",
    )
    p.add_argument("--seed", type=int, help="Seed for the daily gas price draws (default from FEESIM_RANDOM_SEED).")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        settings = get_settings()
    except ConfigError as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 1
    logging.basicConfig(
        level=settings.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    strategy = FeeStrategy(args.strategy) if args.strategy else settings.mantle_fee_strategy
    seed = args.seed if args.seed is not None else settings.random_seed

    try:
        run(
            input_port=ConsolePromptInput(),
            asset_price_port=get_asset_price_port(settings),
            strategy=strategy,
            rng=random.Random(seed),
        )
    except InvalidSelectionError as exc:
        logger.info("main: rejected selection reason=%s", exc)
        print(INVALID_SELECTION_NOTICE)
        return 0
    except (InputParseError, PriceFeedError) as exc:
        logger.error("main: run aborted error=%s", type(exc).__name__)
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    return 0


def cli() -> None:
    try:
        raise SystemExit(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli()
