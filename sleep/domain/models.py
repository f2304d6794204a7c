"""SleepRecord domain model.

One night's self-reported sleep, as entered at the prompt and as read
back from the store for reporting.

Design principles:
- Immutable: built once at entry, never mutated by the metrics core
- Unvalidated: negative or out-of-scale values are accepted as-is and
  flow into statistics; advisory checks live in validation.py
- Clock values stay as the "HH:MM" strings the user typed; the total
  sleep duration is converted to minutes before a record is built
"""

from dataclasses import dataclass
from datetime import date

from pydantic import BaseModel, ConfigDict

from sleep.domain.timeutil import parse_clock_string


class SleepRecord(BaseModel):
    """One night's sleep entry."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    # Identity (None until stored)
    id: int | None = None

    # Temporal
    entry_date: date
    bedtime: str
    wake_time_target: str
    wake_time_actual: str

    # Self-reported metrics
    nap_minutes: int = 0
    sleep_quality_score: int = 0
    total_sleep_minutes: int = 0
    awake_minutes: int = 0
    sleep_latency_minutes: int = 0
    wake_count: int = 0

    notes: str = ""

    @property
    def time_in_bed_minutes(self) -> int:
        """Denominator for efficiency: sleep + awake + latency."""
        return self.total_sleep_minutes + self.awake_minutes + self.sleep_latency_minutes


@dataclass(frozen=True)
class SleepEntryInput:
    """Raw answers collected at the prompt, before conversion."""

    bedtime: str
    wake_time_target: str
    wake_time_actual: str
    nap_minutes: int
    sleep_quality_score: int
    total_sleep: str  # "HH:MM" duration
    awake_minutes: int
    sleep_latency_minutes: int
    wake_count: int
    notes: str = ""

    def to_record(self, entry_date: date) -> SleepRecord:
        return SleepRecord(
            entry_date=entry_date,
            bedtime=self.bedtime,
            wake_time_target=self.wake_time_target,
            wake_time_actual=self.wake_time_actual,
            nap_minutes=self.nap_minutes,
            sleep_quality_score=self.sleep_quality_score,
            total_sleep_minutes=parse_clock_string(self.total_sleep),
            awake_minutes=self.awake_minutes,
            sleep_latency_minutes=self.sleep_latency_minutes,
            wake_count=self.wake_count,
            notes=self.notes,
        )


@dataclass(frozen=True)
class WindowSummary:
    """Averages over one reporting window."""

    days: int
    entry_count: int
    average_efficiency: float
    average_quality: float
    average_sleep_hours: float
    average_sleep_hours_including_naps: float

    @property
    def has_data(self) -> bool:
        return self.entry_count > 0
