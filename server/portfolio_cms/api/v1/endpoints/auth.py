# server/portfolio_cms/api/v1/endpoints/auth.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from portfolio_cms.application.services.user_service import authenticate, create_first_user
from portfolio_cms.core.security import (
    SESSION_COOKIE,
    SESSION_MAX_AGE_SECONDS,
    cookie_kwargs,
    create_access_token,
)
from portfolio_cms.domain.access import SessionData
from portfolio_cms.infrastructure.persistence.database.models.user import User
from portfolio_cms.infrastructure.persistence.database.session import get_db
from portfolio_cms.presentation.api.deps import get_session_data, require_session
from portfolio_cms.presentation.api.schemas.auth import InitFirstItemIn, LoginIn, MeOut

router = APIRouter(prefix="/auth", tags=["auth"])

logger = logging.getLogger(__name__)


def make_session_token(user: User) -> str:
    return create_access_token({"sub": str(user.id), "role": user.role})


def _start_session(response: Response, user: User) -> MeOut:
    response.set_cookie(SESSION_COOKIE, make_session_token(user), **cookie_kwargs(SESSION_MAX_AGE_SECONDS))
    return MeOut(id=str(user.id), name=user.name, email=user.email, role=user.role)


@router.post("/login", response_model=MeOut)
def login(body: LoginIn, response: Response, s: Session = Depends(get_db)):
    user = authenticate(s, body.email, body.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid_credentials")
    return _start_session(response, user)


@router.post("/init-first-item", response_model=MeOut, status_code=status.HTTP_201_CREATED)
def init_first_item(body: InitFirstItemIn, response: Response, s: Session = Depends(get_db)):
    # 409 dès qu'un utilisateur existe
    user = create_first_user(s, body)
    return _start_session(response, user)


@router.post("/logout")
def logout(response: Response, session: Optional[SessionData] = Depends(get_session_data)):
    # delete_cookie remet un Max-Age négatif (path doit matcher)
    response.delete_cookie(SESSION_COOKIE, path="/")
    logger.info("logout: %s", session.email if session else "anonymous")
    return {"ok": True}


@router.get("/me", response_model=MeOut)
def me(session: SessionData = Depends(require_session)):
    return MeOut(id=str(session.user_id), name=session.name, email=session.email, role=session.role)
