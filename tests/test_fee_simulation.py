from __future__ import annotations

import math
import random
import unittest

from feesim.domain.entities.fees import DailyFee, GasRange
from feesim.domain.services.fee_simulation import (
    accumulate_daily_fees,
    draw_gas_price,
    simulate_blended_l2_fees,
    simulate_native_fees,
)


class RecordingRandom:
    def __init__(self):
        self.calls: list[tuple[float, float]] = []

    def uniform(self, a: float, b: float) -> float:
        self.calls.append((a, b))
        return a


class DrawGasPriceTests(unittest.TestCase):
    def test_draws_stay_within_closed_range(self):
        rng = random.Random(1234)
        ranges = [
            GasRange(min_price=0.0, max_price=0.0),
            GasRange(min_price=5.0, max_price=5.0),
            GasRange(min_price=0.0, max_price=1e-9),
            GasRange(min_price=0.1, max_price=0.3),
            GasRange(min_price=1.0, max_price=250.0),
            GasRange(min_price=1e6, max_price=1e6 + 1.0),
        ]
        for gas_range in ranges:
            for _ in range(10_000):
                value = draw_gas_price(rng, gas_range)
                self.assertGreaterEqual(value, gas_range.min_price)
                self.assertLessEqual(value, gas_range.max_price)

    def test_degenerate_range_returns_bound(self):
        rng = random.Random(7)
        self.assertEqual(draw_gas_price(rng, GasRange(min_price=12.5, max_price=12.5)), 12.5)


class SimulateNativeFeesTests(unittest.TestCase):
    def test_zero_days_produces_no_rows_and_zero_totals(self):
        rows: list[DailyFee] = []
        result = simulate_native_fees(
            rng=random.Random(0),
            days=0,
            gas_range=GasRange(min_price=1.0, max_price=100.0),
            gas_used=21000,
            eth_usd=3000.0,
            on_day=rows.append,
        )
        self.assertEqual(rows, [])
        self.assertEqual(result.total_fee, 0.0)
        self.assertEqual(result.total_usd, 0.0)
        self.assertEqual(result.unit, "ETH")

    def test_degenerate_range_gives_identical_days(self):
        days = 7
        rows: list[DailyFee] = []
        result = simulate_native_fees(
            rng=random.Random(0),
            days=days,
            gas_range=GasRange(min_price=5.0, max_price=5.0),
            gas_used=21000,
            eth_usd=3000.0,
            on_day=rows.append,
        )
        per_day = 5.0 * 21000 / 1e9
        self.assertEqual([row.day for row in rows], list(range(days)))
        for row in rows:
            self.assertEqual(row.fee, rows[0].fee)
            self.assertTrue(math.isclose(row.fee, per_day, rel_tol=1e-12))
        self.assertTrue(math.isclose(result.total_fee, days * per_day, rel_tol=1e-12))

    def test_seeded_runs_are_reproducible(self):
        kwargs = dict(days=5, gas_range=GasRange(min_price=1.0, max_price=80.0), gas_used=50_000, eth_usd=2500.0)
        first = simulate_native_fees(rng=random.Random(99), **kwargs)
        second = simulate_native_fees(rng=random.Random(99), **kwargs)
        self.assertEqual(first, second)

    def test_draws_once_per_day(self):
        rng = RecordingRandom()
        simulate_native_fees(
            rng=rng,
            days=3,
            gas_range=GasRange(min_price=2.0, max_price=9.0),
            gas_used=21000,
            eth_usd=1.0,
        )
        self.assertEqual(rng.calls, [(2.0, 9.0)] * 3)


class SimulateBlendedL2FeesTests(unittest.TestCase):
    def test_draws_l1_then_l2_each_day(self):
        rng = RecordingRandom()
        simulate_blended_l2_fees(
            rng=rng,
            days=2,
            l1_gas_range=GasRange(min_price=10.0, max_price=20.0),
            l1_gas_used=21000,
            l2_gas_range=GasRange(min_price=0.01, max_price=0.05),
            l2_gas_used=100_000,
            mnt_usd=0.8,
        )
        self.assertEqual(
            rng.calls,
            [(10.0, 20.0), (0.01, 0.05), (10.0, 20.0), (0.01, 0.05)],
        )

    def test_degenerate_ranges_match_blended_formula(self):
        rows: list[DailyFee] = []
        result = simulate_blended_l2_fees(
            rng=random.Random(3),
            days=4,
            l1_gas_range=GasRange(min_price=30.0, max_price=30.0),
            l1_gas_used=21000,
            l2_gas_range=GasRange(min_price=0.02, max_price=0.02),
            l2_gas_used=250_000,
            mnt_usd=0.5,
            on_day=rows.append,
        )
        per_day = (0.02 * 250_000 + 30.0 * 21000) / 1e9
        self.assertEqual(result.unit, "MNT")
        self.assertEqual(len(rows), 4)
        for row in rows:
            self.assertTrue(math.isclose(row.fee, per_day, rel_tol=1e-12))
            self.assertTrue(math.isclose(row.fee_usd, per_day * 0.5, rel_tol=1e-12))
        self.assertTrue(math.isclose(result.total_fee, 4 * per_day, rel_tol=1e-12))


class AccumulateDailyFeesTests(unittest.TestCase):
    def test_totals_are_naive_sums_in_day_order(self):
        fees = iter([0.1, 0.2, 0.3, 1e-17])
        rows: list[DailyFee] = []
        result = accumulate_daily_fees(
            unit="ETH",
            days=4,
            usd_price=2.0,
            fee_for_day=lambda: next(fees),
            on_day=rows.append,
        )

        expected_fee = 0.0
        expected_usd = 0.0
        for value in (0.1, 0.2, 0.3, 1e-17):
            expected_fee += value
            expected_usd += value * 2.0
        self.assertEqual(result.total_fee, expected_fee)
        self.assertEqual(result.total_usd, expected_usd)
        self.assertEqual([row.fee for row in rows], [0.1, 0.2, 0.3, 1e-17])

    def test_each_day_is_handed_out_before_the_next_is_computed(self):
        events: list[str] = []
        fees = iter([1.0, 2.0, 3.0])

        def fee_for_day() -> float:
            fee = next(fees)
            events.append(f"compute {fee}")
            return fee

        def on_day(row: DailyFee) -> None:
            events.append(f"emit day={row.day}")

        accumulate_daily_fees(unit="MNT", days=3, usd_price=1.0, fee_for_day=fee_for_day, on_day=on_day)

        self.assertEqual(
            events,
            [
                "compute 1.0",
                "emit day=0",
                "compute 2.0",
                "emit day=1",
                "compute 3.0",
                "emit day=2",
            ],
        )

    def test_result_keeps_only_totals(self):
        result = accumulate_daily_fees(unit="ETH", days=50_000, usd_price=1.0, fee_for_day=lambda: 0.5)

        self.assertFalse(hasattr(result, "daily"))
        self.assertEqual(result.days, 50_000)
        self.assertEqual(result.total_fee, 25_000.0)
