from __future__ import annotations
"""server/portfolio_cms/api/v1/serializers/content.py
~~~~~~~~~~~~~~~~~~~~~~~~
Sérialisation des contenus éditoriaux (textes, expositions, travaux, à propos).
Les relations sont renvoyées sous forme résumée (id + champ d'affichage).
"""
from typing import Any, Dict

from portfolio_cms.api.v1.serializers.image import serialize_image_list, serialize_optional_image
from portfolio_cms.core.utils.datetime import isoformat_utc
from portfolio_cms.infrastructure.persistence.database.models.about import About
from portfolio_cms.infrastructure.persistence.database.models.exposition import Exposition
from portfolio_cms.infrastructure.persistence.database.models.section_about import SectionAbout
from portfolio_cms.infrastructure.persistence.database.models.section_travaux import SectionTravaux
from portfolio_cms.infrastructure.persistence.database.models.texte import Texte
from portfolio_cms.infrastructure.persistence.database.models.travaux import Travaux
from portfolio_cms.infrastructure.storage.local_storage import LocalImageStorage


def serialize_texte(t: Texte, storage: LocalImageStorage) -> Dict[str, Any]:  # noqa: ARG001
    return {
        "id": str(t.id),
        "title": t.title,
        "subtitle": t.subtitle,
        "content": t.content,
    }


def serialize_exposition(e: Exposition, storage: LocalImageStorage) -> Dict[str, Any]:
    return {
        "id": str(e.id),
        "title": e.title,
        "subtitle": e.subtitle,
        "content": e.content,
        "created_at": isoformat_utc(e.created_at),
        "images": serialize_image_list(e.images, storage),
    }


def serialize_travaux(t: Travaux, storage: LocalImageStorage) -> Dict[str, Any]:  # noqa: ARG001
    return {
        "id": str(t.id),
        "title": t.title,
        "subtitle": t.subtitle,
        "created_at": isoformat_utc(t.created_at),
        "sections": [{"id": str(s.id), "section": s.section} for s in sorted(t.sections, key=lambda s: s.section)],
    }


def serialize_section_travaux(s: SectionTravaux, storage: LocalImageStorage) -> Dict[str, Any]:
    return {
        "id": str(s.id),
        "section": s.section,
        "content": s.content,
        "travaux": {"id": str(s.travaux.id), "title": s.travaux.title} if s.travaux else None,
        "image": serialize_optional_image(s.image, storage),
    }


def serialize_section_about(s: SectionAbout, storage: LocalImageStorage) -> Dict[str, Any]:
    return {
        "id": str(s.id),
        "type": s.type,
        "content": s.content,
        "image": serialize_optional_image(s.image, storage),
    }


def serialize_about(a: About, storage: LocalImageStorage) -> Dict[str, Any]:
    return {
        "id": str(a.id),
        "image": serialize_optional_image(a.image, storage),
        "sections": [serialize_section_about(s, storage) for s in a.sections],
    }
