# -*- coding: utf-8 -*-
"""
Locale-aware parsing and formatting of dates, times and hours.

Nothing here reads process-wide state: every function takes the locale it
should use, so a request can never leak its formatting into another one.

    loc = get_locale("cs")
    parse_date("1.3.2024", date.today(), loc)   # -> date(2024, 3, 1)
    format_hours(5.0, loc)                       # -> "5,0"
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional, Sequence

DEFAULT_LOCALE = "cs"


@dataclass(frozen=True)
class Locale:
    code: str
    date_format: str
    time_format: str
    months: Sequence[str]
    decimal_sep: str = "."


LOCALES = {
    "cs": Locale(
        code="cs",
        date_format="%d.%m.%Y",
        time_format="%H:%M",
        months=(
            "leden", "únor", "březen", "duben", "květen", "červen",
            "červenec", "srpen", "září", "říjen", "listopad", "prosinec",
        ),
        decimal_sep=",",
    ),
    "en": Locale(
        code="en",
        date_format="%d.%m.%Y",
        time_format="%H:%M",
        months=(
            "January", "February", "March", "April", "May", "June",
            "July", "August", "September", "October", "November", "December",
        ),
    ),
}


def get_locale(code: str | None) -> Locale:
    return LOCALES.get((code or "").strip().lower(), LOCALES[DEFAULT_LOCALE])


# ------------ parsing ---------------------------------------------------------
# All parsers return the fallback instead of raising: a bad field never
# rejects the whole form.

def parse_date(text: str | None, fallback: Optional[date], loc: Locale) -> Optional[date]:
    s = (text or "").strip()
    if not s:
        return fallback
    for fmt in (loc.date_format, "%Y-%m-%d"):
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    return fallback


def parse_time(text: str | None, fallback: Optional[time], loc: Locale) -> Optional[time]:
    s = (text or "").strip()
    if not s:
        return fallback
    for fmt in (loc.time_format, "%H:%M:%S"):
        try:
            return datetime.strptime(s, fmt).time()
        except ValueError:
            continue
    return fallback


def parse_int(text: str | None, fallback: int) -> int:
    try:
        return int(str(text).strip())
    except (TypeError, ValueError):
        return fallback


# ------------ formatting ------------------------------------------------------
def format_date(value: date | None, loc: Locale) -> str:
    if value is None:
        return ""
    return value.strftime(loc.date_format)


def format_time(value: time | None, loc: Locale) -> str:
    if value is None:
        return ""
    return value.strftime(loc.time_format)


def format_hours(value: float | None, loc: Locale) -> str:
    if value is None:
        return ""
    return f"{value:.1f}".replace(".", loc.decimal_sep)


def month_label(year: int, month: int, loc: Locale) -> str:
    return f"{loc.months[(month - 1) % 12]} {year}"
