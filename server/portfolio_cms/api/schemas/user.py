from __future__ import annotations
"""server/portfolio_cms/api/schemas/user.py
~~~~~~~~~~~~~~~~~~~~~~~~
Schemas utilisateurs.

Le mot de passe n'est jamais renvoyé ; bcrypt ne prend en compte que
les 72 premiers octets, on refuse donc au-delà.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from portfolio_cms.domain.choices import UserRole

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_BYTES = 72


def check_password_bytes(v: Optional[str]) -> Optional[str]:
    if v is not None and len(v.encode("utf-8")) > PASSWORD_MAX_BYTES:
        raise ValueError(f"password must be at most {PASSWORD_MAX_BYTES} bytes")
    return v


class UserCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=PASSWORD_MIN_LENGTH)
    role: UserRole = UserRole.ADMIN

    _password_bytes = field_validator("password")(check_password_bytes)


class UserUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=PASSWORD_MIN_LENGTH)
    role: Optional[UserRole] = None

    _password_bytes = field_validator("password")(check_password_bytes)

    @field_validator("role")
    @classmethod
    def role_not_null(cls, v: Optional[UserRole]) -> UserRole:
        # absent => inchangé ; null explicite => refusé (colonne NOT NULL, défaut admin)
        if v is None:
            raise ValueError("role cannot be null")
        return v
