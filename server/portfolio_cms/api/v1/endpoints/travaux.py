"""server/portfolio_cms/api/v1/endpoints/travaux.py
~~~~~~~~~~~~~~~~~~~~~~~~
CRUD travaux (accès libre).
"""
from portfolio_cms.api.schemas.travaux import TravauxCreate, TravauxUpdate
from portfolio_cms.api.v1.endpoints.crud import build_crud_router
from portfolio_cms.api.v1.serializers.content import serialize_travaux
from portfolio_cms.application.services.content_service import TravauxService

router = build_crud_router(
    prefix="/travaux",
    name="travail",
    service=TravauxService,
    create_schema=TravauxCreate,
    update_schema=TravauxUpdate,
    serialize=serialize_travaux,
)
