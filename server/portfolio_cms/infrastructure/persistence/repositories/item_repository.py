from __future__ import annotations

"""server/portfolio_cms/infrastructure/persistence/repositories/item_repository.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Repository générique d'une liste (un modèle ORM).
- Le repo **reçoit** une Session SQLAlchemy fournie par l'appelant.
- Pas de commit ici : le service commite une fois par mutation.
"""

from typing import Any, Generic, Iterable, Optional, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from portfolio_cms.infrastructure.persistence.database.base import Base

T = TypeVar("T", bound=Base)


class ItemRepository(Generic[T]):
    def __init__(self, db: Session, model: type[T], order_by: Sequence[Any] = ()) -> None:
        self.db = db
        self.model = model
        self.order_by = tuple(order_by) or (model.id,)

    def get(self, item_id: UUID) -> Optional[T]:
        return self.db.get(self.model, item_id)

    def get_many(self, ids: Iterable[UUID]) -> dict[UUID, T]:
        """Charge plusieurs lignes ; les ids absents ne figurent pas dans le résultat."""
        wanted = set(ids)
        if not wanted:
            return {}
        rows = self.db.scalars(select(self.model).where(self.model.id.in_(wanted))).all()
        return {row.id: row for row in rows}

    def list(self, skip: int = 0, take: Optional[int] = None) -> list[T]:
        stmt = select(self.model).order_by(*self.order_by).offset(skip)
        if take is not None:
            stmt = stmt.limit(take)
        return list(self.db.scalars(stmt).all())

    def count(self) -> int:
        return int(self.db.scalar(select(func.count()).select_from(self.model)) or 0)

    def add(self, obj: T) -> T:
        """Ajoute **sans commit** ; flush pour matérialiser l'id."""
        self.db.add(obj)
        self.db.flush()
        return obj

    def delete(self, obj: T) -> None:
        self.db.delete(obj)
        self.db.flush()
