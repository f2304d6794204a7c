"""Advisory validation rules for a new sleep entry.

Issues are reported to the user and logged, but never block a save:
the metrics core accepts any record and degrades bad values to
defined results. Returns a list of ValidationIssue; empty list means
the entry looks clean.
"""

import re
from dataclasses import dataclass
from typing import Any

from sleep.domain.models import SleepEntryInput
from sleep.domain.timeutil import parse_clock_string


@dataclass
class ValidationIssue:
    field: str
    rule: str
    reason: str
    value: Any


_CLOCK = re.compile(r"([0-9]{1,2}):([0-9]{2})")
_QUALITY_RANGE = (1, 5)
_NON_NEGATIVE_FIELDS = (
    "nap_minutes",
    "awake_minutes",
    "sleep_latency_minutes",
    "wake_count",
)


def _is_wall_clock(value: str) -> bool:
    match = _CLOCK.fullmatch(value)
    return match is not None and int(match[1]) < 24 and int(match[2]) < 60


def _is_duration(value: str) -> bool:
    match = _CLOCK.fullmatch(value)
    return match is not None and int(match[2]) < 60


def validate_sleep_entry(entry: SleepEntryInput) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []

    # Rule 1: Wall-clock times within 00:00-23:59
    for clock_field in ("bedtime", "wake_time_target", "wake_time_actual"):
        value = getattr(entry, clock_field)
        if not _is_wall_clock(value):
            issues.append(ValidationIssue(clock_field, "format", "invalid_clock_time", value))

    # Rule 2: Total sleep as an HH:MM duration (read as 0 otherwise)
    if not _is_duration(entry.total_sleep):
        issues.append(
            ValidationIssue("total_sleep", "format", "invalid_sleep_duration", entry.total_sleep)
        )

    # Rule 3: Quality on the 1-5 scale
    low, high = _QUALITY_RANGE
    if not low <= entry.sleep_quality_score <= high:
        issues.append(
            ValidationIssue(
                "sleep_quality_score", "range", "quality_out_of_range", entry.sleep_quality_score
            )
        )

    # Rule 4: Non-negative counts
    for count_field in _NON_NEGATIVE_FIELDS:
        value = getattr(entry, count_field)
        if value < 0:
            issues.append(ValidationIssue(count_field, "non_negative", "negative_count", value))

    # Rule 5: Some time in bed, otherwise efficiency reads as 0%
    time_in_bed = (
        parse_clock_string(entry.total_sleep) + entry.awake_minutes + entry.sleep_latency_minutes
    )
    if time_in_bed == 0:
        issues.append(ValidationIssue("time_in_bed", "non_zero", "no_time_in_bed", time_in_bed))

    return issues
