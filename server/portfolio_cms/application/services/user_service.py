from __future__ import annotations
"""server/portfolio_cms/application/services/user_service.py
~~~~~~~~~~~~~~~~~~~~~~~~
Utilisateurs : CRUD (réservé aux super admins hors lecture), authentification
et création du premier utilisateur.
"""
import logging
from typing import Any, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portfolio_cms.presentation.api.schemas.auth import InitFirstItemIn
from portfolio_cms.application.services.item_service import ItemService
from portfolio_cms.core.errors import ConflictError, InvalidInputError
from portfolio_cms.core.security import hash_password, verify_password
from portfolio_cms.domain import lists
from portfolio_cms.domain.choices import UserRole
from portfolio_cms.infrastructure.persistence.database.models.user import User
from portfolio_cms.infrastructure.persistence.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def email_conflict() -> ConflictError:
    return ConflictError("Un utilisateur existe déjà avec cet email", code="email_already_exists")


def is_email_violation(exc: IntegrityError) -> bool:
    """Violation de l'index unique sur l'email (SQLite : users.email, PostgreSQL : ix_users_email)."""
    message = str(exc.orig)
    if "unique" not in message.lower():
        return False
    return "users.email" in message or "ix_users_email" in message


class UserService(ItemService[User]):
    spec = lists.USER
    model = User

    repo: UserRepository

    def _make_repo(self) -> UserRepository:
        return UserRepository(self.db)

    def _apply_fields(self, obj: User, values: dict[str, Any], *, creating: bool) -> None:
        email = values.get("email")
        if email is not None and self.repo.email_taken(email, exclude_id=obj.id):
            raise email_conflict()
        if "role" in values and values["role"] is None:
            raise InvalidInputError("role est requis", code="required_field")
        self._set_scalars(obj, values, ("name", "email", "role"))
        if values.get("password") is not None:
            obj.password_hash = hash_password(values["password"])

    def _conflict(self, exc: IntegrityError) -> Exception:
        if is_email_violation(exc):
            return email_conflict()
        return super()._conflict(exc)


def authenticate(db: Session, email: str, password: str) -> Optional[User]:
    user = UserRepository(db).get_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("login failed for %s", email)
        return None
    logger.info("login ok for %s", email)
    return user


def create_first_user(db: Session, data: InitFirstItemIn) -> User:
    """
    Premier utilisateur (écran d'initialisation de l'admin).
    Autorisé uniquement tant que la table users est vide ; le compte créé
    est super admin quel que soit le rôle demandé.
    """
    repo = UserRepository(db)
    if repo.count() > 0:
        raise ConflictError("L'administration est déjà initialisée", code="already_initialized")
    user = User(
        name=data.name,
        email=data.email,
        password_hash=hash_password(data.password),
        role=UserRole.SUPER_ADMIN.value,
    )
    try:
        repo.add(user)
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise email_conflict() from exc
    logger.info("first user created: %s (superAdmin)", user.email)
    return user
