from __future__ import annotations
"""server/portfolio_cms/application/services/item_service.py
~~~~~~~~~~~~~~~~~~~~~~~~
Socle commun des services de liste.

Pour chaque opération :
1) contrôle d'accès (ListAccess de la liste) avant tout accès aux données
2) application des champs puis des relations
3) un seul commit par mutation (rollback sur erreur)

Les sous-classes déclarent `spec`, `model`, `order_by` et implémentent
`_apply_fields()` / `_apply_relations()`.
"""
import logging
from contextlib import contextmanager
from typing import Any, ClassVar, Generic, Iterator, Optional, Sequence, TypeVar
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portfolio_cms.core.errors import AccessDeniedError, ConflictError, InvalidInputError, NotFoundError
from portfolio_cms.domain.access import SessionData
from portfolio_cms.domain.document import validate_document
from portfolio_cms.domain.lists import ListSpec
from portfolio_cms.infrastructure.persistence.database.base import Base
from portfolio_cms.infrastructure.persistence.repositories.item_repository import ItemRepository

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Base)


class ItemService(Generic[T]):
    spec: ClassVar[ListSpec]
    model: ClassVar[type]
    order_by: ClassVar[Sequence[Any]] = ()

    def __init__(self, db: Session, session: Optional[SessionData]) -> None:
        self.db = db
        self.session = session
        self.repo = self._make_repo()

    def _make_repo(self) -> ItemRepository[T]:
        return ItemRepository(self.db, self.model, self.order_by)

    # --- accès ---------------------------------------------------------------

    def ensure(self, operation: str) -> None:
        try:
            self.spec.access.ensure(self.spec.key, operation, self.session)
        except AccessDeniedError:
            logger.info(
                "access denied: %s on %s (user=%s)",
                operation,
                self.spec.key,
                self.session.email if self.session else "anonymous",
            )
            raise

    # --- lecture -------------------------------------------------------------

    def list(self, skip: int = 0, take: Optional[int] = None) -> tuple[list[T], int]:
        self.ensure("query")
        return self.repo.list(skip=skip, take=take), self.repo.count()

    def get(self, item_id: UUID) -> T:
        self.ensure("query")
        return self._load(item_id)

    def _load(self, item_id: UUID) -> T:
        obj = self.repo.get(item_id)
        if obj is None:
            raise NotFoundError(f"{self.spec.key} {item_id} introuvable")
        return obj

    # --- écriture ------------------------------------------------------------

    def create(self, data: BaseModel) -> T:
        self.ensure("create")
        values = {name: getattr(data, name) for name in type(data).model_fields}
        with self._transaction():
            obj = self.model()
            self._apply_fields(obj, values, creating=True)
            self.db.add(obj)
            self._apply_relations(obj, values)
            self.db.flush()
        logger.info("%s created: %s", self.spec.key, obj.id)
        return obj

    def update(self, item_id: UUID, data: BaseModel) -> T:
        self.ensure("update")
        obj = self._load(item_id)
        values = {name: getattr(data, name) for name in data.model_fields_set}
        with self._transaction():
            self._apply_fields(obj, values, creating=False)
            self._apply_relations(obj, values)
            self.db.flush()
        logger.info("%s updated: %s (%s)", self.spec.key, obj.id, ", ".join(sorted(values)) or "-")
        return obj

    def delete(self, item_id: UUID) -> T:
        self.ensure("delete")
        obj = self._load(item_id)
        with self._transaction():
            self.repo.delete(obj)
        logger.info("%s deleted: %s", self.spec.key, item_id)
        return obj

    # --- hooks ---------------------------------------------------------------

    def _apply_fields(self, obj: T, values: dict[str, Any], *, creating: bool) -> None:
        raise NotImplementedError

    def _apply_relations(self, obj: T, values: dict[str, Any]) -> None:
        """Par défaut : aucune relation."""

    def _conflict(self, exc: IntegrityError) -> Exception:
        return ConflictError("Contrainte d'intégrité violée", code="integrity_error")

    # --- helpers -------------------------------------------------------------

    def _check_required(self, values: dict[str, Any]) -> None:
        for f in self.spec.fields:
            if f.required and f.name in values and values[f.name] is None:
                raise InvalidInputError(f"{f.name} est requis", code="required_field")

    def _set_scalars(self, obj: T, values: dict[str, Any], names: Sequence[str]) -> None:
        self._check_required(values)
        for name in names:
            if name in values:
                value = values[name]
                setattr(obj, name, getattr(value, "value", value))

    def _set_document(self, obj: T, values: dict[str, Any], name: str = "content") -> None:
        if name in values:
            setattr(obj, name, validate_document(values[name], self.spec.get_field(name).document))

    @contextmanager
    def _transaction(self) -> Iterator[None]:
        try:
            yield
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            logger.warning("%s: integrity error: %s", self.spec.key, exc.orig)
            raise self._conflict(exc) from exc
        except Exception:
            self.db.rollback()
            raise
