"""Shared test fixtures."""

import sys
from datetime import date
from pathlib import Path

import pytest
import structlog

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sleep.domain.models import SleepEntryInput, SleepRecord  # noqa: E402

ENTRY_DATE = date(2024, 3, 14)


def make_record(**overrides) -> SleepRecord:
    """A typical night: 7h30 asleep, 20 min awake, 10 min latency."""
    fields = {
        "entry_date": ENTRY_DATE,
        "bedtime": "22:30",
        "wake_time_target": "07:00",
        "wake_time_actual": "07:15",
        "nap_minutes": 0,
        "sleep_quality_score": 4,
        "total_sleep_minutes": 450,
        "awake_minutes": 20,
        "sleep_latency_minutes": 10,
        "wake_count": 2,
        "notes": "",
    }
    return SleepRecord(**{**fields, **overrides})


@pytest.fixture(autouse=True)
def reset_logging():
    """main() binds structlog to the captured stderr; undo that after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def record():
    return make_record()


@pytest.fixture
def valid_entry():
    """A fully valid raw prompt entry."""
    return SleepEntryInput(
        bedtime="22:30",
        wake_time_target="07:00",
        wake_time_actual="07:15",
        nap_minutes=20,
        sleep_quality_score=4,
        total_sleep="07:30",
        awake_minutes=20,
        sleep_latency_minutes=10,
        wake_count=2,
        notes="late coffee",
    )
