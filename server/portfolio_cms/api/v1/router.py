from __future__ import annotations
"""server/portfolio_cms/api/v1/router.py
~~~~~~~~~~~~~~~~~~~~~~~~
Router principal API v1.
"""
from fastapi import APIRouter

from portfolio_cms.api.v1.endpoints import (
    about,
    admin,
    auth,
    expositions,
    health,
    images,
    sections_about,
    sections_travaux,
    textes,
    travaux,
    users,
)

api_router = APIRouter()
api_router.include_router(health.router, tags=["health"])
api_router.include_router(auth.router)
api_router.include_router(admin.router)
api_router.include_router(users.router)
api_router.include_router(textes.router)
api_router.include_router(images.router)
api_router.include_router(expositions.router)
api_router.include_router(travaux.router)
api_router.include_router(sections_travaux.router)
api_router.include_router(about.router)
api_router.include_router(sections_about.router)
