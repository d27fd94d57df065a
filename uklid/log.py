"""
Logging setup shared by the web app and the scripts.

Standard library logging with one stream handler on the root logger; modules
get their loggers with ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(level: str = "INFO", force: bool = False) -> None:
    """Attach a stream handler to the root logger at ``level``.

    Does nothing if the root logger already has handlers (gunicorn, pytest)
    unless ``force`` is set.
    """
    root = logging.getLogger()
    lvl = logging.getLevelName(str(level).upper())
    if not isinstance(lvl, int):
        lvl = logging.INFO
    if root.handlers and not force:
        root.setLevel(lvl)
        return
    logging.basicConfig(level=lvl, format=_FORMAT, force=force)
