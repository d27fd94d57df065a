# -*- coding: utf-8 -*-
"""
Record store: every read and write of ``cleaning_record`` goes through here.

Each write commits immediately. Missing ids are not errors: update and
delete simply report that nothing happened.
"""
from __future__ import annotations

import logging
from datetime import date, time
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError

from .extensions import db
from .models import CleaningRecord

log = logging.getLogger(__name__)


def _commit() -> None:
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise


def create_record(
    *,
    date: date,
    time_from: time,
    time_to: Optional[time],
    cleaner_count: int,
    is_paid: bool = False,
) -> CleaningRecord:
    r = CleaningRecord(
        date=date,
        time_from=time_from,
        time_to=time_to,
        cleaner_count=cleaner_count,
        is_paid=is_paid,
    )
    db.session.add(r)
    _commit()
    log.info("record %s created (%s %s)", r.id, r.date, r.time_from)
    return r


def get_record(record_id: int) -> Optional[CleaningRecord]:
    return db.session.get(CleaningRecord, record_id)


def update_record(
    record_id: int,
    *,
    date: date,
    time_from: time,
    time_to: Optional[time],
    cleaner_count: int,
    is_paid: bool,
) -> Optional[CleaningRecord]:
    """Replace the editable fields; returns None when the record is gone."""
    r = get_record(record_id)
    if r is None:
        log.info("record %s not found, update skipped", record_id)
        return None
    r.date = date
    r.time_from = time_from
    r.time_to = time_to
    r.cleaner_count = cleaner_count
    r.is_paid = is_paid
    _commit()
    log.info("record %s updated", record_id)
    return r


def delete_record(record_id: int) -> bool:
    r = get_record(record_id)
    if r is None:
        log.info("record %s not found, delete skipped", record_id)
        return False
    db.session.delete(r)
    _commit()
    log.info("record %s deleted", record_id)
    return True


def list_records() -> List[CleaningRecord]:
    """Newest first: date desc, then start time desc."""
    return (
        CleaningRecord.query
        .order_by(CleaningRecord.date.desc(), CleaningRecord.time_from.desc(), CleaningRecord.id.desc())
        .all()
    )


def mark_all_paid() -> int:
    """Flag every unpaid record as paid in one statement; returns rows changed."""
    res = db.session.execute(
        update(CleaningRecord)
        .where(CleaningRecord.is_paid.is_(False))
        .values(is_paid=True)
        .execution_options(synchronize_session=False)
    )
    _commit()
    changed = res.rowcount or 0
    log.info("%d record(s) marked paid", changed)
    return changed
