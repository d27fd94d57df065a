# -*- coding: utf-8 -*-
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from ...i18n import Locale, month_label
from ...models import CleaningRecord


@dataclass
class UnpaidSummary:
    count: int = 0
    incomplete: int = 0
    hours: float = 0.0

    @property
    def any(self) -> bool:
        return self.count > 0


@dataclass
class MonthGroup:
    year: int
    month: int
    label: str
    records: List[CleaningRecord] = field(default_factory=list)


def partition_paid(records: Iterable[CleaningRecord]) -> Tuple[List[CleaningRecord], List[CleaningRecord]]:
    paid: List[CleaningRecord] = []
    unpaid: List[CleaningRecord] = []
    for r in records:
        (paid if r.is_paid else unpaid).append(r)
    return paid, unpaid


def unpaid_summary(records: Iterable[CleaningRecord]) -> UnpaidSummary:
    """Banner numbers: unpaid count, unpaid-and-unfinished count, unpaid hours.

    Unfinished visits have no hours yet and add nothing to the total.
    """
    s = UnpaidSummary()
    _, unpaid = partition_paid(records)
    for r in unpaid:
        s.count += 1
        if not r.is_complete:
            s.incomplete += 1
        hours = r.total_hours
        if hours is not None:
            s.hours += hours
    return s


def group_by_month(records: Iterable[CleaningRecord], loc: Locale) -> List[MonthGroup]:
    """Split an already sorted list into consecutive month-year groups."""
    groups: List[MonthGroup] = []
    for r in records:
        key = (r.date.year, r.date.month)
        if not groups or (groups[-1].year, groups[-1].month) != key:
            groups.append(MonthGroup(key[0], key[1], month_label(key[0], key[1], loc)))
        groups[-1].records.append(r)
    return groups
