from __future__ import annotations
"""server/portfolio_cms/api/v1/serializers/user.py
~~~~~~~~~~~~~~~~~~~~~~~~
Sérialisation utilisateurs (le hash n'est jamais exposé).
"""
from typing import Any, Dict

from portfolio_cms.core.utils.datetime import isoformat_utc
from portfolio_cms.infrastructure.persistence.database.models.user import User


def serialize_user(u: User) -> Dict[str, Any]:
    return {
        "id": str(u.id),
        "name": u.name,
        "email": u.email,
        "role": u.role,
        "password_is_set": bool(u.password_hash),
        "created_at": isoformat_utc(u.created_at),
    }
