"""
Pytest fixtures: a fresh app on an in-memory SQLite database per test.

The app context stays pushed for the whole test, so store functions can be
called directly next to requests made through the test client.
"""

from __future__ import annotations

from datetime import date, time
from typing import Iterator

import pytest
from flask import Flask

from uklid import create_app
from uklid.config import TestingConfig
from uklid.extensions import db


@pytest.fixture()
def app() -> Iterator[Flask]:
    app = create_app(TestingConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app: Flask):
    return app.test_client()


@pytest.fixture()
def make_record(app: Flask):
    from uklid import store

    def _make(
        d: date = date(2024, 3, 1),
        t_from: time = time(8, 0),
        t_to: time | None = time(10, 30),
        cleaners: int = 2,
        paid: bool = False,
    ):
        return store.create_record(
            date=d, time_from=t_from, time_to=t_to, cleaner_count=cleaners, is_paid=paid
        )

    return _make
