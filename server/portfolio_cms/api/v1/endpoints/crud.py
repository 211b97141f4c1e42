"""server/portfolio_cms/api/v1/endpoints/crud.py
~~~~~~~~~~~~~~~~~~~~~~~~
Router CRUD générique des listes de contenu.

    GET    ""       liste paginée (skip/take) -> {"items", "total"}
    GET    /{id}
    POST   ""       201
    PATCH  /{id}    champs absents inchangés
    DELETE /{id}    204

Les annotations des schémas sont résolues à la création du router,
ce module n'utilise donc pas `from __future__ import annotations`.
"""
import uuid
from typing import Any, Callable, Dict, Optional, Type

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel
from sqlalchemy.orm import Session

from portfolio_cms.application.services.item_service import ItemService
from portfolio_cms.domain.access import SessionData
from portfolio_cms.infrastructure.persistence.database.session import get_db
from portfolio_cms.infrastructure.storage.local_storage import LocalImageStorage, get_image_storage
from portfolio_cms.presentation.api.deps import get_session_data

Serializer = Callable[[Any, LocalImageStorage], Dict[str, Any]]


def build_crud_router(
    *,
    prefix: str,
    name: str,
    service: Type[ItemService],
    create_schema: Type[BaseModel],
    update_schema: Type[BaseModel],
    serialize: Serializer,
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[prefix.strip("/")])

    @router.get("", name=f"list_{name}")
    def list_items(
        skip: int = Query(0, ge=0),
        take: Optional[int] = Query(None, ge=1, le=1000),
        db: Session = Depends(get_db),
        session: Optional[SessionData] = Depends(get_session_data),
        storage: LocalImageStorage = Depends(get_image_storage),
    ) -> Dict[str, Any]:
        items, total = service(db, session).list(skip=skip, take=take)
        return {"items": [serialize(obj, storage) for obj in items], "total": total}

    @router.get("/{item_id}", name=f"get_{name}")
    def get_item(
        item_id: uuid.UUID,
        db: Session = Depends(get_db),
        session: Optional[SessionData] = Depends(get_session_data),
        storage: LocalImageStorage = Depends(get_image_storage),
    ) -> Dict[str, Any]:
        return serialize(service(db, session).get(item_id), storage)

    @router.post("", name=f"create_{name}", status_code=status.HTTP_201_CREATED)
    def create_item(
        payload: create_schema,  # type: ignore[valid-type]
        db: Session = Depends(get_db),
        session: Optional[SessionData] = Depends(get_session_data),
        storage: LocalImageStorage = Depends(get_image_storage),
    ) -> Dict[str, Any]:
        return serialize(service(db, session).create(payload), storage)

    @router.patch("/{item_id}", name=f"update_{name}")
    def update_item(
        item_id: uuid.UUID,
        payload: update_schema,  # type: ignore[valid-type]
        db: Session = Depends(get_db),
        session: Optional[SessionData] = Depends(get_session_data),
        storage: LocalImageStorage = Depends(get_image_storage),
    ) -> Dict[str, Any]:
        return serialize(service(db, session).update(item_id, payload), storage)

    @router.delete("/{item_id}", name=f"delete_{name}", status_code=status.HTTP_204_NO_CONTENT)
    def delete_item(
        item_id: uuid.UUID,
        db: Session = Depends(get_db),
        session: Optional[SessionData] = Depends(get_session_data),
    ) -> None:
        service(db, session).delete(item_id)

    return router
