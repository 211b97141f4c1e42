from __future__ import annotations
"""server/portfolio_cms/core/logging.py
~~~~~~~~~~~~~~~~~~~~~~~~
Configuration logs.
"""
import logging

from portfolio_cms.core.config import settings


def setup_logging(level: int | str | None = None) -> None:
    if level is None:
        level = settings.LOG_LEVEL.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
