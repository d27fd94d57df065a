# -*- coding: utf-8 -*-
from __future__ import annotations

from datetime import date, time
from typing import Any

from flask import Blueprint, current_app, flash, redirect, render_template, request, url_for

from ... import store
from ...i18n import Locale, format_date, format_time, get_locale, parse_date, parse_int, parse_time
from ...models import MAX_CLEANERS, MIN_CLEANERS, CleaningRecord
from .summary import group_by_month, unpaid_summary

bp = Blueprint("records", __name__)

DEFAULT_TIME_FROM = time(9, 0)
DEFAULT_CLEANERS = 1


# ------------ helpers ---------------------------------------------------------
def _loc() -> Locale:
    return get_locale(current_app.config.get("UKLID_LOCALE"))


def _checked(f, name: str) -> bool:
    return (f.get(name) or "").strip().lower() in ("true", "on", "1")


def _cleaners(text: str | None, fallback: int) -> int:
    """Cleaner count from the form; out of range counts as unreadable."""
    n = parse_int(text, fallback)
    return n if MIN_CLEANERS <= n <= MAX_CLEANERS else fallback


def _form_values(item: CleaningRecord | None, loc: Locale) -> dict[str, Any]:
    """Strings for the form inputs: the record's values or the create defaults."""
    if item is None:
        return {
            "date": format_date(date.today(), loc),
            "timeFrom": format_time(DEFAULT_TIME_FROM, loc),
            "timeTo": "",
            "cleanerCount": DEFAULT_CLEANERS,
            "isPaid": False,
        }
    return {
        "date": format_date(item.date, loc),
        "timeFrom": format_time(item.time_from, loc),
        "timeTo": format_time(item.time_to, loc),
        "cleanerCount": item.cleaner_count,
        "isPaid": bool(item.is_paid),
    }


def _render_form(item: CleaningRecord | None):
    return render_template(
        "records/form.html",
        item=item,
        values=_form_values(item, _loc()),
        min_cleaners=MIN_CLEANERS,
        max_cleaners=MAX_CLEANERS,
    )


# ------------ list ------------------------------------------------------------
@bp.route("/", methods=["GET"])
def index():
    records = store.list_records()
    return render_template(
        "records/index.html",
        groups=group_by_month(records, _loc()),
        summary=unpaid_summary(records),
    )


# ------------ create ----------------------------------------------------------
@bp.route("/add", methods=["GET", "POST"])
def add():
    if request.method == "GET":
        return _render_form(None)

    # bad fields fall back to the defaults, an unreadable end time to "ongoing"
    f = request.form
    loc = _loc()
    store.create_record(
        date=parse_date(f.get("date"), date.today(), loc),
        time_from=parse_time(f.get("timeFrom"), DEFAULT_TIME_FROM, loc),
        time_to=parse_time(f.get("timeTo"), None, loc),
        cleaner_count=_cleaners(f.get("cleanerCount"), DEFAULT_CLEANERS),
    )
    flash("Záznam byl přidán.", "success")
    return redirect(url_for("records.index"))


# ------------ edit / delete ---------------------------------------------------
@bp.route("/edit/<int:record_id>", methods=["GET", "POST"])
def edit(record_id: int):
    r = store.get_record(record_id)

    if request.method == "GET":
        if r is None:
            return redirect(url_for("records.index"))
        return _render_form(r)

    f = request.form
    if "delete" in f:
        if store.delete_record(record_id):
            flash("Záznam byl smazán.", "info")
        return redirect(url_for("records.index"))

    if r is None:
        return redirect(url_for("records.index"))

    # bad fields keep the record's current value; an emptied end time clears it
    loc = _loc()
    raw_to = (f.get("timeTo") or "").strip()
    store.update_record(
        record_id,
        date=parse_date(f.get("date"), r.date, loc),
        time_from=parse_time(f.get("timeFrom"), r.time_from, loc),
        time_to=parse_time(raw_to, r.time_to, loc) if raw_to else None,
        cleaner_count=_cleaners(f.get("cleanerCount"), r.cleaner_count),
        is_paid=_checked(f, "isPaid"),
    )
    flash("Záznam byl uložen.", "success")
    return redirect(url_for("records.index"))


# ------------ bulk ------------------------------------------------------------
@bp.route("/mark-all-paid", methods=["POST"])
def mark_all_paid():
    n = store.mark_all_paid()
    if n:
        flash(f"Označeno jako zaplaceno: {n}", "success")
    return redirect(url_for("records.index"))
