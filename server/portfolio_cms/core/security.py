from __future__ import annotations
"""server/portfolio_cms/core/security.py
~~~~~~~~~~~~~~~~~~~~~~~~
Sécurité : hash des mots de passe (bcrypt) + jetons de session signés (JWT).

- hash_password / verify_password : passlib CryptContext (bcrypt)
- create_access_token / decode_token : PyJWT, HS256 par défaut
- cookie_kwargs : attributs du cookie de session (HttpOnly, SameSite=Lax)

Le secret est relu depuis l'environnement à l'import du module, ce qui permet
aux tests de le fixer puis de recharger le module.
"""
import logging
import os
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt
from passlib.context import CryptContext

from portfolio_cms.core.config import settings

logger = logging.getLogger(__name__)

SESSION_COOKIE = settings.SESSION_COOKIE
JWT_SECRET = os.getenv("JWT_SECRET") or settings.JWT_SECRET
JWT_ALGORITHM = settings.JWT_ALGORITHM
SESSION_MAX_AGE_SECONDS = int(settings.SESSION_MAX_AGE_DAYS) * 86400

_pwd_ctx = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    return _pwd_ctx.hash(password)


def verify_password(password: str, password_hash: str | None) -> bool:
    if not password_hash:
        return False
    try:
        return _pwd_ctx.verify(password, password_hash)
    except ValueError:
        # hash corrompu / format inconnu
        logger.warning("password hash could not be verified (unknown format)")
        return False


def create_access_token(data: dict[str, Any], expires_seconds: int | None = None) -> str:
    now = datetime.now(timezone.utc)
    ttl = SESSION_MAX_AGE_SECONDS if expires_seconds is None else int(expires_seconds)
    payload = dict(data)
    payload.update({"iat": now, "exp": now + timedelta(seconds=ttl)})
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_token(token: str) -> dict[str, Any] | None:
    """Retourne les claims, ou None si le jeton est invalide / expiré."""
    try:
        return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("session token expired")
        return None
    except jwt.InvalidTokenError:
        logger.info("invalid session token")
        return None


def cookie_kwargs(max_age: int) -> dict[str, Any]:
    return {
        "max_age": max_age,
        "httponly": True,
        "secure": bool(settings.COOKIE_SECURE),
        "samesite": "lax",
        "path": "/",
    }
