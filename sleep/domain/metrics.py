"""Sleep efficiency and windowed aggregation.

Pure functions over fully materialized sequences of SleepRecord. Nothing
here filters, sorts, logs or raises: empty input and zero denominators
come back as 0.0.

Average efficiency is the mean of per-record efficiencies, each already
rounded to two significant figures. It is intentionally not the
efficiency of pooled totals.
"""

import math
from collections.abc import Sequence

from sleep.domain.models import SleepRecord, WindowSummary
from sleep.domain.timeutil import sleep_window_minutes

EFFICIENCY_SIGNIFICANT_FIGURES = 2


def _round_half_away_from_zero(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def round_to_significant_figures(
    value: float, figures: int = EFFICIENCY_SIGNIFICANT_FIGURES
) -> float:
    """Round to a fixed count of leading digits, halves away from zero.

    87.34 -> 87.0, 8.734 -> 8.7, 94.5 -> 95.0, 0.0 -> 0.0.
    """
    if value == 0:
        return 0.0
    magnitude = math.floor(math.log10(abs(value)))
    shift = figures - 1 - magnitude
    # Integer powers keep the scale-back exact for whole-number results.
    if shift >= 0:
        factor = 10**shift
        return _round_half_away_from_zero(value * factor) / factor
    factor = 10**-shift
    return float(_round_half_away_from_zero(value / factor) * factor)


def compute_efficiency(sleep_minutes: int, awake_minutes: int, latency_minutes: int) -> float:
    """Percentage of time in bed spent asleep, to two significant figures."""
    time_in_bed = sleep_minutes + awake_minutes + latency_minutes
    if time_in_bed == 0:
        return 0.0
    return round_to_significant_figures(sleep_minutes / time_in_bed * 100)


def record_efficiency(record: SleepRecord) -> float:
    return compute_efficiency(
        record.total_sleep_minutes,
        record.awake_minutes,
        record.sleep_latency_minutes,
    )


def average_efficiency(records: Sequence[SleepRecord]) -> float:
    if not records:
        return 0.0
    return sum(record_efficiency(r) for r in records) / len(records)


def average_quality(records: Sequence[SleepRecord]) -> float:
    if not records:
        return 0.0
    return sum(r.sleep_quality_score for r in records) / len(records)


def average_sleep_hours(records: Sequence[SleepRecord]) -> float:
    """Mean night sleep in hours; naps excluded."""
    if not records:
        return 0.0
    total_minutes = sum(r.total_sleep_minutes for r in records)
    return total_minutes / len(records) / 60


def average_sleep_hours_including_naps(records: Sequence[SleepRecord]) -> float:
    if not records:
        return 0.0
    total_minutes = sum(r.total_sleep_minutes + r.nap_minutes for r in records)
    return total_minutes / len(records) / 60


def percent_of_target(total_sleep_minutes: int, bedtime: str, wake_target: str) -> float:
    """Total sleep as a percentage of the bedtime-to-target-wake window."""
    window = sleep_window_minutes(bedtime, wake_target)
    if window == 0:
        return 0.0
    return 100.0 * total_sleep_minutes / window


def summarize_window(records: Sequence[SleepRecord], days: int) -> WindowSummary:
    """Aggregate one window; records must already be scoped to it."""
    return WindowSummary(
        days=days,
        entry_count=len(records),
        average_efficiency=average_efficiency(records),
        average_quality=average_quality(records),
        average_sleep_hours=average_sleep_hours(records),
        average_sleep_hours_including_naps=average_sleep_hours_including_naps(records),
    )
