from __future__ import annotations
"""
Schemas Pydantic pour les endpoints d'authentification.
"""
from pydantic import BaseModel, EmailStr, Field, field_validator

from portfolio_cms.api.schemas.user import PASSWORD_MIN_LENGTH, check_password_bytes


class LoginIn(BaseModel):
    email: EmailStr
    password: str


class InitFirstItemIn(BaseModel):
    """Création du premier utilisateur (table users vide)."""
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)

    _password_bytes = field_validator("password")(check_password_bytes)


class MeOut(BaseModel):
    id: str
    name: str
    email: EmailStr
    role: str
