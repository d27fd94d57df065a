from __future__ import annotations

from datetime import date, time

import pytest

from uklid.i18n import (
    format_date,
    format_hours,
    format_time,
    get_locale,
    month_label,
    parse_date,
    parse_int,
    parse_time,
)

CS = get_locale("cs")
EN = get_locale("en")
FALLBACK = date(2000, 1, 1)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("01.03.2024", date(2024, 3, 1)),
        ("1.3.2024", date(2024, 3, 1)),
        (" 15.12.2023 ", date(2023, 12, 15)),
        ("2024-03-01", date(2024, 3, 1)),
    ],
)
def test_parse_date_accepts_day_month_year_and_iso(text, expected):
    assert parse_date(text, FALLBACK, CS) == expected


@pytest.mark.parametrize("text", ["", None, "yesterday", "32.1.2024", "1/3/2024", "29.2.2023"])
def test_parse_date_falls_back(text):
    assert parse_date(text, FALLBACK, CS) == FALLBACK


def test_parse_time():
    assert parse_time("8:05", None, CS) == time(8, 5)
    assert parse_time("17:30", None, CS) == time(17, 30)
    assert parse_time("17:30:00", None, CS) == time(17, 30)
    assert parse_time("25:00", time(9, 0), CS) == time(9, 0)
    assert parse_time("", None, CS) is None
    assert parse_time("noon", None, CS) is None


def test_parse_int():
    assert parse_int("3", 1) == 3
    assert parse_int(" 4 ", 1) == 4
    assert parse_int("three", 1) == 1
    assert parse_int(None, 7) == 7
    assert parse_int("2.5", 1) == 1


def test_formatting_uses_the_given_locale():
    assert format_date(date(2024, 3, 1), CS) == "01.03.2024"
    assert format_time(time(8, 0), CS) == "08:00"
    assert format_hours(5.0, CS) == "5,0"
    assert format_hours(5.0, EN) == "5.0"
    assert format_hours(None, CS) == ""
    assert format_date(None, CS) == ""
    assert format_time(None, CS) == ""


def test_month_label():
    assert month_label(2024, 3, CS) == "březen 2024"
    assert month_label(2024, 12, EN) == "December 2024"


def test_unknown_locale_falls_back_to_czech():
    assert get_locale("xx") is CS
    assert get_locale(None) is CS
    assert get_locale("EN") is EN
