"""server/portfolio_cms/api/v1/endpoints/textes.py
~~~~~~~~~~~~~~~~~~~~~~~~
CRUD textes (accès libre).
"""
from portfolio_cms.api.schemas.texte import TexteCreate, TexteUpdate
from portfolio_cms.api.v1.endpoints.crud import build_crud_router
from portfolio_cms.api.v1.serializers.content import serialize_texte
from portfolio_cms.application.services.content_service import TexteService

router = build_crud_router(
    prefix="/textes",
    name="texte",
    service=TexteService,
    create_schema=TexteCreate,
    update_schema=TexteUpdate,
    serialize=serialize_texte,
)
