"""Sleep entry repository — all DB access for the sleep domain.

Encapsulates inserts and the date-window queries that feed reporting.
Rows are converted to immutable SleepRecord values on the way out.
"""

from datetime import date, timedelta

from sqlalchemy import select
from sqlalchemy.orm import Session

from sleep.domain.models import SleepRecord
from sleep.domain.orm import SleepEntryModel


class SleepEntryRepository:
    def __init__(self, session: Session):
        self.session = session

    def insert(self, record: SleepRecord) -> int:
        """Store a new entry and return its id. Any id on the record is ignored."""
        row = SleepEntryModel(**record.model_dump(exclude={"id"}))
        self.session.add(row)
        self.session.flush()
        return row.id

    def list_all(self) -> list[SleepRecord]:
        """All entries, most recently inserted first."""
        query = select(SleepEntryModel).order_by(SleepEntryModel.id.desc())
        rows = self.session.execute(query).scalars().all()
        return [SleepRecord.model_validate(r) for r in rows]

    def get_recent_entries(self, days: int, today: date | None = None) -> list[SleepRecord]:
        """Entries dated on or after today minus `days`, newest date first."""
        cutoff = (today or date.today()) - timedelta(days=days)
        query = (
            select(SleepEntryModel)
            .where(SleepEntryModel.entry_date >= cutoff)
            .order_by(SleepEntryModel.entry_date.desc(), SleepEntryModel.id.desc())
        )
        rows = self.session.execute(query).scalars().all()
        return [SleepRecord.model_validate(r) for r in rows]
