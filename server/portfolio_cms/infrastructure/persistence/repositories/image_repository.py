from __future__ import annotations

"""server/portfolio_cms/infrastructure/persistence/repositories/image_repository.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Repository images.

Toute écriture du propriétaire d'une image passe par `set_owner()` :
- les quatre relations sont remises à None avant d'en positionner une
  (réassigner remplace donc l'ancien propriétaire, quel que soit son type) ;
- pour un parent "une seule image", l'image déjà rattachée est détachée
  (flush intermédiaire, la FK est unique).
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from portfolio_cms.domain.image_owner import SINGLE_IMAGE_OWNERS, OwnerKind
from portfolio_cms.infrastructure.persistence.database.models.about import About
from portfolio_cms.infrastructure.persistence.database.models.exposition import Exposition
from portfolio_cms.infrastructure.persistence.database.models.image import Image
from portfolio_cms.infrastructure.persistence.database.models.section_about import SectionAbout
from portfolio_cms.infrastructure.persistence.database.models.section_travaux import SectionTravaux
from portfolio_cms.infrastructure.persistence.repositories.item_repository import ItemRepository

# type de parent -> (attribut relation sur Image, modèle du parent)
OWNER_TARGETS: dict[OwnerKind, tuple[str, type]] = {
    OwnerKind.EXPOSITION: ("exposition", Exposition),
    OwnerKind.SECTION_TRAVAUX: ("section_travaux", SectionTravaux),
    OwnerKind.SECTION_ABOUT: ("section_about", SectionAbout),
    OwnerKind.ABOUT: ("about", About),
}


class ImageRepository(ItemRepository[Image]):
    def __init__(self, db: Session) -> None:
        super().__init__(db, Image, order_by=(Image.created_at, Image.id))

    def get_parent(self, kind: OwnerKind, parent_id: UUID) -> Optional[Any]:
        _, model = OWNER_TARGETS[kind]
        return self.db.get(model, parent_id)

    def clear_owner(self, image: Image) -> None:
        for attr, _ in OWNER_TARGETS.values():
            setattr(image, attr, None)

    def set_owner(self, image: Image, kind: Optional[OwnerKind] = None, parent: Any = None) -> None:
        """Rattache `image` à `parent` (ou la détache si kind/parent sont None)."""
        if kind is not None and parent is None:
            raise ValueError("parent required when kind is given")

        if kind in SINGLE_IMAGE_OWNERS:
            previous = parent.image
            if previous is not None and previous is not image:
                self.clear_owner(previous)
                self.db.flush()

        self.clear_owner(image)
        if kind is not None:
            attr, _ = OWNER_TARGETS[kind]
            setattr(image, attr, parent)
