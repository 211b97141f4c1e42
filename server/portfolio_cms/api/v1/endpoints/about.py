"""server/portfolio_cms/api/v1/endpoints/about.py
~~~~~~~~~~~~~~~~~~~~~~~~
Page à propos : lecture et mise à jour pour tout utilisateur connecté,
création et suppression réservées aux super admins (AboutService).
"""
from portfolio_cms.api.schemas.about import AboutCreate, AboutUpdate
from portfolio_cms.api.v1.endpoints.crud import build_crud_router
from portfolio_cms.api.v1.serializers.content import serialize_about
from portfolio_cms.application.services.content_service import AboutService

router = build_crud_router(
    prefix="/about",
    name="about_page",
    service=AboutService,
    create_schema=AboutCreate,
    update_schema=AboutUpdate,
    serialize=serialize_about,
)
