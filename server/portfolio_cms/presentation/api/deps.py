from __future__ import annotations
"""
server/portfolio_cms/presentation/api/deps.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Dépendances communes côté "presentation" (API).

- get_session_data : lit le jeton de session (cookie ou `Authorization: Bearer`),
  vérifie le JWT et recharge l'utilisateur en DB. Retourne None (anonyme) si
  le jeton est absent, invalide, expiré, ou si l'utilisateur n'existe plus.
- require_session : comme ci-dessus mais 401 si anonyme.

L'utilisateur est relu à chaque requête : un changement de rôle ou une
suppression prend effet immédiatement.
"""
import logging
import uuid
from typing import Optional

from fastapi import Cookie, Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from portfolio_cms.core.security import SESSION_COOKIE, decode_token
from portfolio_cms.domain.access import SessionData
from portfolio_cms.infrastructure.persistence.database.models.user import User
from portfolio_cms.infrastructure.persistence.database.session import get_db

logger = logging.getLogger(__name__)


def _bearer(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_session_data(
    session_token: Optional[str] = Cookie(default=None, alias=SESSION_COOKIE),
    authorization: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
) -> Optional[SessionData]:
    token = _bearer(authorization) or session_token
    if not token:
        return None

    claims = decode_token(token)
    sub = (claims or {}).get("sub")
    if not sub:
        return None
    try:
        user_id = uuid.UUID(str(sub))
    except ValueError:
        logger.info("session token with malformed subject")
        return None

    user: User | None = db.get(User, user_id)
    if user is None:
        logger.info("session for deleted user %s ignored", user_id)
        return None

    return SessionData(user_id=user.id, name=user.name, email=user.email, role=user.role)


def require_session(session: Optional[SessionData] = Depends(get_session_data)) -> SessionData:
    if session is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="not_authenticated")
    return session