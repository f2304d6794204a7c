"""SQLAlchemy ORM model for the answers table.

One row per sleep entry. Columns mirror SleepRecord; no check
constraints, since the metrics core accepts any stored value.
"""

from datetime import date

from sqlalchemy import Date, Index, Integer, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class SleepEntryModel(Base):
    __tablename__ = "answers"

    # Identity
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Temporal
    entry_date: Mapped[date] = mapped_column(Date, nullable=False, default=date.today)
    bedtime: Mapped[str] = mapped_column(Text, nullable=False)
    wake_time_target: Mapped[str] = mapped_column(Text, nullable=False)
    wake_time_actual: Mapped[str] = mapped_column(Text, nullable=False)

    # Self-reported metrics
    nap_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    sleep_quality_score: Mapped[int] = mapped_column(Integer, nullable=False)
    total_sleep_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    awake_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    sleep_latency_minutes: Mapped[int] = mapped_column(Integer, nullable=False)
    wake_count: Mapped[int] = mapped_column(Integer, nullable=False)

    notes: Mapped[str] = mapped_column(Text, nullable=False, default="")

    __table_args__ = (Index("idx_answers_entry_date", entry_date.desc()),)
