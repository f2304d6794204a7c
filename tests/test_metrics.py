"""Tests for efficiency, significant-figure rounding and window averages."""

import pytest

from sleep.domain.metrics import (
    average_efficiency,
    average_quality,
    average_sleep_hours,
    average_sleep_hours_including_naps,
    compute_efficiency,
    percent_of_target,
    record_efficiency,
    round_to_significant_figures,
    summarize_window,
)
from tests.conftest import make_record


@pytest.mark.parametrize(
    "value, expected",
    [
        (87.34, 87.0),
        (8.734, 8.7),
        (3.456, 3.5),
        (93.75, 94.0),
        (94.5, 95.0),  # halves round away from zero
        (100.0, 100.0),
        (99.6, 100.0),
        (123.4, 120.0),
        (0.04, 0.04),
        (0.0456, 0.046),
        (0.0, 0.0),
        (-8.734, -8.7),
        (-94.5, -95.0),
    ],
)
def test_round_to_two_significant_figures(value, expected):
    assert round_to_significant_figures(value) == expected


def test_round_to_three_significant_figures():
    assert round_to_significant_figures(93.75, figures=3) == 93.8


class TestComputeEfficiency:
    def test_zero_time_in_bed(self):
        assert compute_efficiency(0, 0, 0) == 0.0

    def test_typical_night(self):
        # 450 / 480 * 100 = 93.75 -> 94
        assert compute_efficiency(450, 20, 10) == 94.0

    def test_no_disruption_is_hundred_percent(self):
        assert compute_efficiency(480, 0, 0) == 100.0

    def test_small_value_keeps_two_figures(self):
        # 30 / 900 * 100 = 3.333... -> 3.3
        assert compute_efficiency(30, 800, 70) == 3.3

    def test_tiny_value(self):
        # 1 / 2500 * 100 = 0.04
        assert compute_efficiency(1, 2000, 499) == 0.04

    def test_no_sleep_is_zero(self):
        assert compute_efficiency(0, 30, 30) == 0.0

    def test_negative_input_propagates(self):
        # 500 / (500 - 20 + 0) * 100 = 104.166... -> 100
        assert compute_efficiency(500, -20, 0) == 100.0

    def test_negatives_cancelling_to_zero_hit_guard(self):
        assert compute_efficiency(10, -10, 0) == 0.0


class TestAverageEfficiency:
    def test_empty(self):
        assert average_efficiency([]) == 0.0

    def test_all_zero_records(self):
        records = [make_record(total_sleep_minutes=0, awake_minutes=0, sleep_latency_minutes=0)] * 3
        assert average_efficiency(records) == 0.0

    def test_rounds_per_record_before_averaging(self):
        a = make_record(total_sleep_minutes=87, awake_minutes=13, sleep_latency_minutes=0)
        b = make_record(total_sleep_minutes=1, awake_minutes=0, sleep_latency_minutes=1)
        # per record: 87.0 and 50.0 -> mean 68.5
        assert average_efficiency([a, b]) == 68.5
        # pooled: 88 / 102 * 100 = 86.27..., not what is reported
        assert average_efficiency([a, b]) != compute_efficiency(88, 13, 1)

    def test_matches_single_record_efficiency(self, record):
        assert average_efficiency([record]) == record_efficiency(record) == 94.0


class TestAverages:
    def test_empty_inputs(self):
        assert average_quality([]) == 0.0
        assert average_sleep_hours([]) == 0.0
        assert average_sleep_hours_including_naps([]) == 0.0

    def test_quality_not_rounded(self):
        records = [make_record(sleep_quality_score=q) for q in (4, 5, 5)]
        assert average_quality(records) == pytest.approx(14 / 3)

    def test_sleep_hours_excludes_naps(self):
        records = [
            make_record(total_sleep_minutes=420, nap_minutes=30),
            make_record(total_sleep_minutes=480, nap_minutes=0),
        ]
        assert average_sleep_hours(records) == 7.5

    def test_sleep_hours_including_naps(self):
        records = [
            make_record(total_sleep_minutes=420, nap_minutes=30),
            make_record(total_sleep_minutes=480, nap_minutes=0),
        ]
        assert average_sleep_hours_including_naps(records) == 7.75

    @pytest.mark.parametrize("naps", [(0, 0, 0), (15, 0, 90), (1, 2, 3)])
    def test_including_naps_never_below_night_sleep(self, naps):
        records = [
            make_record(total_sleep_minutes=sleep, nap_minutes=nap)
            for sleep, nap in zip((400, 455, 380), naps, strict=True)
        ]
        assert average_sleep_hours_including_naps(records) >= average_sleep_hours(records)


class TestPercentOfTarget:
    def test_full_window(self):
        assert percent_of_target(510, "22:30", "07:00") == 100.0

    def test_partial_window(self):
        assert percent_of_target(450, "23:00", "07:00") == 93.75

    def test_malformed_times_use_full_day(self):
        assert percent_of_target(720, "x", "y") == 50.0


class TestSummarizeWindow:
    def test_empty_window(self):
        summary = summarize_window([], 7)
        assert summary.days == 7
        assert summary.entry_count == 0
        assert not summary.has_data
        assert summary.average_efficiency == 0.0

    def test_populated_window(self, record):
        summary = summarize_window([record, record], 30)
        assert summary.entry_count == 2
        assert summary.has_data
        assert summary.average_efficiency == 94.0
        assert summary.average_quality == 4.0
        assert summary.average_sleep_hours == 7.5
        assert summary.average_sleep_hours_including_naps == 7.5


def test_repeated_calls_are_identical():
    records = [
        make_record(total_sleep_minutes=401, awake_minutes=37, sleep_latency_minutes=13),
        make_record(total_sleep_minutes=333, nap_minutes=17, sleep_quality_score=2),
    ]
    functions = (
        average_efficiency,
        average_quality,
        average_sleep_hours,
        average_sleep_hours_including_naps,
    )
    for fn in functions:
        first = fn(records)
        assert all(fn(records).hex() == first.hex() for _ in range(5))
    assert compute_efficiency(401, 37, 13).hex() == compute_efficiency(401, 37, 13).hex()
