"""server/portfolio_cms/api/v1/endpoints/sections_travaux.py
~~~~~~~~~~~~~~~~~~~~~~~~
CRUD sections d'un travail (accès libre).
"""
from portfolio_cms.api.schemas.section_travaux import SectionTravauxCreate, SectionTravauxUpdate
from portfolio_cms.api.v1.endpoints.crud import build_crud_router
from portfolio_cms.api.v1.serializers.content import serialize_section_travaux
from portfolio_cms.application.services.content_service import SectionTravauxService

router = build_crud_router(
    prefix="/sections-travaux",
    name="section_travaux",
    service=SectionTravauxService,
    create_schema=SectionTravauxCreate,
    update_schema=SectionTravauxUpdate,
    serialize=serialize_section_travaux,
)
