from __future__ import annotations
"""
server/portfolio_cms/domain/access.py

Contrôle d'accès par opération.

Un prédicat reçoit la session courante (ou None) et renvoie un booléen.
Chaque liste déclare un ListAccess : un prédicat par opération
(query / create / update / delete). Aucune dépendance à la DB ni à FastAPI.
"""

import uuid
from dataclasses import dataclass
from typing import Callable, Optional

from portfolio_cms.core.errors import AccessDeniedError
from portfolio_cms.domain.choices import UserRole

OPERATIONS = ("query", "create", "update", "delete")


@dataclass(frozen=True)
class SessionData:
    """Acteur authentifié, rechargé depuis la table users à chaque requête."""
    user_id: uuid.UUID
    name: str
    email: str
    role: str


AccessPredicate = Callable[[Optional[SessionData]], bool]


def is_signed_in(session: Optional[SessionData]) -> bool:
    return session is not None


def is_super_admin(session: Optional[SessionData]) -> bool:
    return session is not None and session.role == UserRole.SUPER_ADMIN.value


def allow_all(session: Optional[SessionData]) -> bool:  # noqa: ARG001
    return True


@dataclass(frozen=True)
class ListAccess:
    query: AccessPredicate = allow_all
    create: AccessPredicate = allow_all
    update: AccessPredicate = allow_all
    delete: AccessPredicate = allow_all

    def allows(self, operation: str, session: Optional[SessionData]) -> bool:
        if operation not in OPERATIONS:
            raise ValueError(f"Unknown operation {operation!r}")
        predicate: AccessPredicate = getattr(self, operation)
        return bool(predicate(session))

    def ensure(self, list_key: str, operation: str, session: Optional[SessionData]) -> None:
        """Lève AccessDeniedError si l'opération est refusée."""
        if not self.allows(operation, session):
            raise AccessDeniedError(list_key, operation, authenticated=session is not None)


ALLOW_ALL = ListAccess()
