# -*- coding: utf-8 -*-
from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from sqlalchemy.ext.hybrid import hybrid_property

from ..extensions import db

MIN_CLEANERS = 1
MAX_CLEANERS = 10


# --- derived fields, computed on read and never stored ---

def is_complete(time_to: Optional[time]) -> bool:
    """A visit is complete once its end time is known."""
    return time_to is not None


def total_hours(time_from: time, time_to: Optional[time], cleaner_count: int) -> Optional[float]:
    """Billable hours = visit length × cleaners; None while the visit is ongoing.

    A visit crossing midnight (time_to < time_from) gives a negative value.
    """
    if time_to is None:
        return None
    start = datetime.combine(date.min, time_from)
    end = datetime.combine(date.min, time_to)
    return (end - start).total_seconds() / 3600 * cleaner_count


class CleaningRecord(db.Model):
    __tablename__ = "cleaning_record"

    id = db.Column(db.Integer, primary_key=True)
    date = db.Column(db.Date, nullable=False, index=True)
    time_from = db.Column(db.Time, nullable=False)
    time_to = db.Column(db.Time, nullable=True)  # empty while the visit is ongoing
    cleaner_count = db.Column(db.Integer, nullable=False, default=MIN_CLEANERS)
    is_paid = db.Column(db.Boolean, nullable=False, default=False, index=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    @hybrid_property
    def is_complete(self) -> bool:
        return is_complete(self.time_to)

    @is_complete.expression
    def is_complete(cls):
        return cls.time_to.isnot(None)

    @property
    def total_hours(self) -> Optional[float]:
        return total_hours(self.time_from, self.time_to, self.cleaner_count)

    def __repr__(self) -> str:
        return f"<CleaningRecord {self.id} {self.date} {self.time_from}-{self.time_to}>"
