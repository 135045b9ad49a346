from __future__ import annotations

from feesim.application.dto.estimate_rollup_fee import EstimateRollupFeeOutput
from feesim.application.dto.simulate_fees import SimulateFeesOutput


INVALID_SELECTION_NOTICE = "Invalid selection. Please run the program again."


def format_daily_lines(*, day: int, fee: float, fee_usd: float, unit: str) -> list[str]:
    return [
        f"Day {day}: Total Transaction Fee: {fee:.18f} {unit}",
        f"(~${fee_usd:.2f} USD)",
    ]


def format_simulation_summary(output: SimulateFeesOutput) -> list[str]:
    return [
        "",
        f"Total {output.unit} fees over {output.days} days: {output.total_fee:.18f} {output.unit}",
        f"Total USD equivalent: ${output.total_usd:.2f}",
    ]


def format_rollup_fee_report(output: EstimateRollupFeeOutput) -> list[str]:
    return [
        f"Execution Fee: {output.execution_fee:.18f} MNT",
        f"Rollup Fee: {output.rollup_fee:.18f} MNT",
        f"Total Transaction Fee: {output.total_fee:.18f} MNT",
        f"(~${output.total_usd:.2f} USD)",
    ]
