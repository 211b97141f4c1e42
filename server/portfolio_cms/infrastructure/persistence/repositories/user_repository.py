from __future__ import annotations
"""server/portfolio_cms/infrastructure/persistence/repositories/user_repository.py
~~~~~~~~~~~~~~~~~~~~~~~~
Repo utilisateurs.
"""
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from portfolio_cms.infrastructure.persistence.database.models.user import User
from portfolio_cms.infrastructure.persistence.repositories.item_repository import ItemRepository


class UserRepository(ItemRepository[User]):
    def __init__(self, db: Session) -> None:
        super().__init__(db, User, order_by=(User.created_at, User.email))

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.scalar(select(User).where(User.email == email))

    def email_taken(self, email: str, exclude_id=None) -> bool:
        u = self.get_by_email(email)
        return u is not None and u.id != exclude_id
