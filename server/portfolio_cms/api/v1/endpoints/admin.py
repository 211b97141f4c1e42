from __future__ import annotations
"""server/portfolio_cms/api/v1/endpoints/admin.py
~~~~~~~~~~~~~~~~~~~~~~~~
Métadonnées de l'interface d'administration.

GET /admin/config : logo (surcharge du composant par défaut) et listes
visibles pour la session courante (User et Image masquées hors super admin).
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends

from portfolio_cms.core.config import settings
from portfolio_cms.domain.access import SessionData
from portfolio_cms.domain.lists import visible_lists
from portfolio_cms.presentation.api.deps import require_session

router = APIRouter(prefix="/admin", tags=["admin"])


def admin_components() -> Dict[str, Any]:
    return {"logo": {"src": settings.ADMIN_LOGO_PATH, "alt": settings.ADMIN_LOGO_ALT}}


@router.get("/config")
def admin_config(session: SessionData = Depends(require_session)) -> Dict[str, Any]:
    return {
        "components": admin_components(),
        "lists": [spec.describe() for spec in visible_lists(session)],
    }
