from __future__ import annotations
"""server/portfolio_cms/api/v1/endpoints/users.py
~~~~~~~~~~~~~~~~~~~~~~~~
Utilisateurs : lecture pour tout utilisateur connecté, écriture réservée aux
super admins (contrôlé par UserService).
"""
import uuid
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from portfolio_cms.api.schemas.user import UserCreate, UserUpdate
from portfolio_cms.api.v1.serializers.user import serialize_user
from portfolio_cms.application.services.user_service import UserService
from portfolio_cms.domain.access import SessionData
from portfolio_cms.infrastructure.persistence.database.session import get_db
from portfolio_cms.presentation.api.deps import get_session_data

router = APIRouter(prefix="/users", tags=["users"])


@router.get("")
def list_users(
    skip: int = Query(0, ge=0),
    take: Optional[int] = Query(None, ge=1, le=1000),
    db: Session = Depends(get_db),
    session: Optional[SessionData] = Depends(get_session_data),
) -> Dict[str, Any]:
    items, total = UserService(db, session).list(skip=skip, take=take)
    return {"items": [serialize_user(u) for u in items], "total": total}


@router.get("/{item_id}")
def get_user(
    item_id: uuid.UUID,
    db: Session = Depends(get_db),
    session: Optional[SessionData] = Depends(get_session_data),
) -> Dict[str, Any]:
    return serialize_user(UserService(db, session).get(item_id))


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(
    payload: UserCreate,
    db: Session = Depends(get_db),
    session: Optional[SessionData] = Depends(get_session_data),
) -> Dict[str, Any]:
    return serialize_user(UserService(db, session).create(payload))


@router.patch("/{item_id}")
def update_user(
    item_id: uuid.UUID,
    payload: UserUpdate,
    db: Session = Depends(get_db),
    session: Optional[SessionData] = Depends(get_session_data),
) -> Dict[str, Any]:
    return serialize_user(UserService(db, session).update(item_id, payload))


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    item_id: uuid.UUID,
    db: Session = Depends(get_db),
    session: Optional[SessionData] = Depends(get_session_data),
) -> None:
    UserService(db, session).delete(item_id)
