from __future__ import annotations

from datetime import date, time

from uklid import store
from uklid.i18n import get_locale
from uklid.modules.records.summary import group_by_month, partition_paid, unpaid_summary


def test_banner_counts_incomplete_without_hours(app, make_record):
    make_record(paid=True)
    make_record(t_to=None, paid=False)

    s = unpaid_summary(store.list_records())
    assert s.any
    assert (s.count, s.incomplete, s.hours) == (1, 1, 0.0)


def test_unpaid_hours_sum_complete_unpaid_only(app, make_record):
    make_record(t_from=time(8, 0), t_to=time(10, 30), cleaners=2)   # 5.0
    make_record(t_from=time(12, 0), t_to=time(13, 0), cleaners=3)   # 3.0
    make_record(t_from=time(8, 0), t_to=time(18, 0), cleaners=1, paid=True)
    make_record(t_to=None)

    s = unpaid_summary(store.list_records())
    assert s.count == 3
    assert s.incomplete == 1
    assert s.hours == 8.0


def test_no_unpaid_records(app, make_record):
    make_record(paid=True)
    assert not unpaid_summary(store.list_records()).any


def test_partition_paid(app, make_record):
    p = make_record(paid=True)
    u = make_record(paid=False)
    paid, unpaid = partition_paid(store.list_records())
    assert [r.id for r in paid] == [p.id]
    assert [r.id for r in unpaid] == [u.id]


def test_group_by_month_keeps_order(app, make_record):
    make_record(d=date(2024, 3, 1))
    make_record(d=date(2024, 3, 20))
    make_record(d=date(2024, 1, 5))
    make_record(d=date(2023, 3, 1))

    groups = group_by_month(store.list_records(), get_locale("cs"))
    assert [g.label for g in groups] == ["březen 2024", "leden 2024", "březen 2023"]
    assert [len(g.records) for g in groups] == [2, 1, 1]
    assert groups[0].records[0].date == date(2024, 3, 20)
