"""Tracker service: record an entry, build the efficiency report.

Sits between the prompt loop and the store. Each operation runs in its
own session scope, so a failed save leaves nothing half-written.
"""

from dataclasses import dataclass, field
from datetime import date

import structlog
from sqlalchemy.orm import Session, sessionmaker

from shared.config import settings
from shared.database import session_scope
from sleep.domain.metrics import (
    compute_efficiency,
    percent_of_target,
    summarize_window,
)
from sleep.domain.models import SleepEntryInput, SleepRecord, WindowSummary
from sleep.domain.validation import ValidationIssue, validate_sleep_entry
from sleep.repository import SleepEntryRepository

logger = structlog.get_logger()


@dataclass
class EntryResult:
    """Outcome of saving one entry."""

    entry_id: int
    record: SleepRecord
    efficiency: float
    percent_of_target: float
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def total_sleep_hours(self) -> float:
        return self.record.total_sleep_minutes / 60


@dataclass
class EfficiencyReport:
    """Window summaries plus the most recent entries of the short window."""

    windows: list[WindowSummary] = field(default_factory=list)
    recent_entries: list[SleepRecord] = field(default_factory=list)


def record_sleep_entry(
    session_factory: sessionmaker[Session],
    entry: SleepEntryInput,
    entry_date: date | None = None,
) -> EntryResult:
    """Validate (advisory only), convert and store one entry."""
    issues = validate_sleep_entry(entry)
    if issues:
        logger.warning("sleep_entry_issues", reasons=[i.reason for i in issues])

    record = entry.to_record(entry_date or date.today())
    with session_scope(session_factory) as session:
        entry_id = SleepEntryRepository(session).insert(record)

    efficiency = compute_efficiency(
        record.total_sleep_minutes, record.awake_minutes, record.sleep_latency_minutes
    )
    logger.info(
        "sleep_entry_saved",
        entry_id=entry_id,
        entry_date=record.entry_date.isoformat(),
        efficiency=efficiency,
    )
    return EntryResult(
        entry_id=entry_id,
        record=record.model_copy(update={"id": entry_id}),
        efficiency=efficiency,
        percent_of_target=percent_of_target(
            record.total_sleep_minutes, record.bedtime, record.wake_time_target
        ),
        issues=issues,
    )


def build_efficiency_report(
    session_factory: sessionmaker[Session],
    today: date | None = None,
    window_days: tuple[int, ...] | None = None,
    recent_limit: int | None = None,
) -> EfficiencyReport:
    """Summarize each window; recent entries come from the first (shortest) one."""
    if window_days is None:
        window_days = (settings.short_window_days, settings.long_window_days)
    if recent_limit is None:
        recent_limit = settings.recent_entries_limit

    report = EfficiencyReport()
    with session_scope(session_factory) as session:
        repo = SleepEntryRepository(session)
        for position, days in enumerate(window_days):
            records = repo.get_recent_entries(days, today=today)
            report.windows.append(summarize_window(records, days))
            if position == 0:
                report.recent_entries = records[:recent_limit]

    logger.info(
        "efficiency_report_built",
        windows={w.days: w.entry_count for w in report.windows},
    )
    return report
