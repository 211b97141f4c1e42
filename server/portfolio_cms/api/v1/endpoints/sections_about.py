"""server/portfolio_cms/api/v1/endpoints/sections_about.py
~~~~~~~~~~~~~~~~~~~~~~~~
CRUD sections de la page à propos (accès libre).
"""
from portfolio_cms.api.schemas.section_about import SectionAboutCreate, SectionAboutUpdate
from portfolio_cms.api.v1.endpoints.crud import build_crud_router
from portfolio_cms.api.v1.serializers.content import serialize_section_about
from portfolio_cms.application.services.content_service import SectionAboutService

router = build_crud_router(
    prefix="/sections-about",
    name="section_about",
    service=SectionAboutService,
    create_schema=SectionAboutCreate,
    update_schema=SectionAboutUpdate,
    serialize=serialize_section_about,
)
