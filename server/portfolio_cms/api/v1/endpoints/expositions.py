"""server/portfolio_cms/api/v1/endpoints/expositions.py
~~~~~~~~~~~~~~~~~~~~~~~~
CRUD expositions (accès libre).
"""
from portfolio_cms.api.schemas.exposition import ExpositionCreate, ExpositionUpdate
from portfolio_cms.api.v1.endpoints.crud import build_crud_router
from portfolio_cms.api.v1.serializers.content import serialize_exposition
from portfolio_cms.application.services.content_service import ExpositionService

router = build_crud_router(
    prefix="/expositions",
    name="exposition",
    service=ExpositionService,
    create_schema=ExpositionCreate,
    update_schema=ExpositionUpdate,
    serialize=serialize_exposition,
)
