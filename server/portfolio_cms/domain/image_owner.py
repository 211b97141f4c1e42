from __future__ import annotations
"""server/portfolio_cms/domain/image_owner.py
~~~~~~~~~~~~~~~~~~~~~~~~
Propriétaire d'une image : variante étiquetée sur
{Exposition, SectionTravaux, SectionAbout, About, aucun}.

En base, quatre clés étrangères nullables (une par type de parent) ;
côté domaine, une seule valeur. `owner_of()` relit la variante depuis ces
colonnes, dont au plus une est non nulle.
"""
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class OwnerKind(str, Enum):
    EXPOSITION = "exposition"
    SECTION_TRAVAUX = "sectionTravaux"
    SECTION_ABOUT = "sectionAbout"
    ABOUT = "about"


OWNER_COLUMNS: dict[OwnerKind, str] = {
    OwnerKind.EXPOSITION: "exposition_id",
    OwnerKind.SECTION_TRAVAUX: "section_travaux_id",
    OwnerKind.SECTION_ABOUT: "section_about_id",
    OwnerKind.ABOUT: "about_id",
}

# Parents qui ne portent qu'une seule image (relation un-à-un)
SINGLE_IMAGE_OWNERS = frozenset({OwnerKind.SECTION_TRAVAUX, OwnerKind.SECTION_ABOUT, OwnerKind.ABOUT})


@dataclass(frozen=True)
class ImageOwner:
    kind: OwnerKind
    id: uuid.UUID

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind.value, "id": str(self.id)}


def owner_of(image: Any) -> Optional[ImageOwner]:
    """Relit la variante depuis les colonnes d'une ligne `images`."""
    found = [
        ImageOwner(kind, getattr(image, col))
        for kind, col in OWNER_COLUMNS.items()
        if getattr(image, col, None) is not None
    ]
    if len(found) > 1:
        # la contrainte CHECK rend ce cas impossible en base
        raise ValueError(f"image {getattr(image, 'id', '?')} has several owners")
    return found[0] if found else None
