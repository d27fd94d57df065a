from __future__ import annotations

from datetime import date, time

from uklid.models import CleaningRecord, is_complete, total_hours


def test_total_hours_multiplies_by_cleaners():
    assert total_hours(time(8, 0), time(10, 30), 2) == 5.0


def test_total_hours_absent_while_ongoing():
    assert total_hours(time(8, 0), None, 3) is None
    assert is_complete(None) is False


def test_total_hours_minutes_are_exact():
    assert total_hours(time(9, 15), time(9, 45), 1) == 0.5
    assert total_hours(time(9, 0), time(9, 0), 4) == 0.0


def test_visit_over_midnight_gives_negative_hours():
    # known limitation: no wrap-around
    assert total_hours(time(22, 0), time(1, 0), 1) == -21.0


def test_model_properties():
    r = CleaningRecord(date=date(2024, 3, 1), time_from=time(8, 0), time_to=time(10, 30), cleaner_count=2)
    assert r.is_complete is True
    assert r.total_hours == 5.0

    r.time_to = None
    assert r.is_complete is False
    assert r.total_hours is None


def test_is_complete_works_in_queries(app, make_record):
    make_record(t_to=time(12, 0))
    make_record(t_to=None)
    make_record(t_to=None)

    assert CleaningRecord.query.filter(CleaningRecord.is_complete).count() == 1
    assert CleaningRecord.query.filter(~CleaningRecord.is_complete).count() == 2
