"""
Process-wide logging setup.

Modules log through `logging.getLogger(__name__)` using `event key=value`
messages, e.g. `favorite_added user_id=abc pet_id=3`.
"""

from __future__ import annotations

import logging

from . import config

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    resolved = (level or config.log_level()).upper()
    if logging.getLevelName(resolved) == f"Level {resolved}":
        resolved = "INFO"

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=resolved, format=LOG_FORMAT)
    root.setLevel(resolved)
