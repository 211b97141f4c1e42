from __future__ import annotations
"""server/portfolio_cms/application/services/content_service.py
~~~~~~~~~~~~~~~~~~~~~~~~
Services des listes éditoriales : Texte, Exposition, Travaux, SectionTravaux,
About, SectionAbout.
"""
from typing import Any

from portfolio_cms.application.services.item_service import ItemService
from portfolio_cms.application.services.relationships import (
    relate_children,
    relate_image,
    relate_images,
    relate_many,
    relate_one,
)
from portfolio_cms.domain import lists
from portfolio_cms.domain.image_owner import OwnerKind
from portfolio_cms.infrastructure.persistence.database.models.about import About
from portfolio_cms.infrastructure.persistence.database.models.exposition import Exposition
from portfolio_cms.infrastructure.persistence.database.models.section_about import SectionAbout
from portfolio_cms.infrastructure.persistence.database.models.section_travaux import SectionTravaux
from portfolio_cms.infrastructure.persistence.database.models.texte import Texte
from portfolio_cms.infrastructure.persistence.database.models.travaux import Travaux


class TexteService(ItemService[Texte]):
    spec = lists.TEXTE
    model = Texte
    order_by = (Texte.title, Texte.id)

    def _apply_fields(self, obj: Texte, values: dict[str, Any], *, creating: bool) -> None:
        self._set_scalars(obj, values, ("title", "subtitle"))
        self._set_document(obj, values)


class ExpositionService(ItemService[Exposition]):
    spec = lists.EXPOSITION
    model = Exposition
    order_by = (Exposition.created_at.desc(), Exposition.id)

    def _apply_fields(self, obj: Exposition, values: dict[str, Any], *, creating: bool) -> None:
        self._set_scalars(obj, values, ("title", "subtitle"))
        self._set_document(obj, values)

    def _apply_relations(self, obj: Exposition, values: dict[str, Any]) -> None:
        relate_images(self.db, obj, values.get("images"))


class TravauxService(ItemService[Travaux]):
    spec = lists.TRAVAUX
    model = Travaux
    order_by = (Travaux.created_at.desc(), Travaux.id)

    def _apply_fields(self, obj: Travaux, values: dict[str, Any], *, creating: bool) -> None:
        self._set_scalars(obj, values, ("title", "subtitle"))

    def _apply_relations(self, obj: Travaux, values: dict[str, Any]) -> None:
        relate_children(self.db, obj, "sections", SectionTravaux, "travaux", values.get("sections"))


class SectionTravauxService(ItemService[SectionTravaux]):
    spec = lists.SECTION_TRAVAUX
    model = SectionTravaux
    order_by = (SectionTravaux.section, SectionTravaux.id)

    def _apply_fields(self, obj: SectionTravaux, values: dict[str, Any], *, creating: bool) -> None:
        self._set_scalars(obj, values, ("section",))
        self._set_document(obj, values)

    def _apply_relations(self, obj: SectionTravaux, values: dict[str, Any]) -> None:
        relate_one(self.db, obj, "travaux", Travaux, values.get("travaux"))
        relate_image(self.db, obj, OwnerKind.SECTION_TRAVAUX, values.get("image"))


class AboutService(ItemService[About]):
    spec = lists.ABOUT
    model = About
    order_by = (About.id,)

    def _apply_fields(self, obj: About, values: dict[str, Any], *, creating: bool) -> None:
        pass

    def _apply_relations(self, obj: About, values: dict[str, Any]) -> None:
        relate_image(self.db, obj, OwnerKind.ABOUT, values.get("image"))
        relate_many(self.db, obj, "sections", SectionAbout, values.get("sections"))


class SectionAboutService(ItemService[SectionAbout]):
    spec = lists.SECTION_ABOUT
    model = SectionAbout
    order_by = (SectionAbout.type, SectionAbout.id)

    def _apply_fields(self, obj: SectionAbout, values: dict[str, Any], *, creating: bool) -> None:
        self._set_scalars(obj, values, ("type",))
        self._set_document(obj, values)

    def _apply_relations(self, obj: SectionAbout, values: dict[str, Any]) -> None:
        relate_image(self.db, obj, OwnerKind.SECTION_ABOUT, values.get("image"))
