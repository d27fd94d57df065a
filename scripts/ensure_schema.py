"""
Bring the database schema up to date without touching existing rows.

Creates any table declared in the models that is missing from the configured
database (instance/uklid.db by default, or DATABASE_URL).

Run:
  python scripts/ensure_schema.py
"""

from __future__ import annotations

import sys
from pathlib import Path

from sqlalchemy import inspect

# project root on sys.path so the package imports without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from uklid import create_app  # noqa: E402
from uklid.extensions import db  # noqa: E402


def _tables() -> set[str]:
    return set(inspect(db.engine).get_table_names())


def main() -> int:
    print("[ensure] loading app...")
    app = create_app({"AUTO_CREATE_SCHEMA": False})
    with app.app_context():
        print(f"[ensure] SQLALCHEMY_DATABASE_URI = {app.config.get('SQLALCHEMY_DATABASE_URI', '')}")

        before = _tables()
        print(f"[ensure] tables before: {len(before)}")

        from uklid import models  # noqa: F401
        db.create_all()

        created = sorted(_tables() - before)
        if created:
            print(f"[ensure] created: {', '.join(created)}")
        else:
            print("[ensure] nothing to create.")

        n = db.session.execute(db.text('SELECT COUNT(*) FROM "cleaning_record"')).scalar() or 0
        print(f"[ensure] cleaning_record rows: {n}")
        print("[ensure] done.")
        return 0


if __name__ == "__main__":
    sys.exit(main())
