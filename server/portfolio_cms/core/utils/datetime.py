# server/portfolio_cms/core/utils/datetime.py
"""server/portfolio_cms/core/utils/datetime.py
~~~~~~~~~~~~~~~~~~~~~~~~
Utilitaires pour la gestion des dates et heures.
"""

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    """Horodatage courant, timezone-aware UTC (valeur par défaut des champs `created_at`)."""
    return datetime.now(timezone.utc)


def as_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalise un datetime en UTC aware.
    SQLite renvoie des datetimes naïfs : on les considère comme UTC.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def isoformat_utc(dt: Optional[datetime]) -> Optional[str]:
    """ISO 8601 avec offset UTC explicite (None si absent)."""
    value = as_utc(dt)
    return value.isoformat() if value is not None else None
