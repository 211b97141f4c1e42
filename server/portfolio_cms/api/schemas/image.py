from __future__ import annotations
"""server/portfolio_cms/api/schemas/image.py
~~~~~~~~~~~~~~~~~~~~~~~~
Schemas images.

`owner` est la variante étiquetée (exposition / sectionTravaux / sectionAbout /
about) ou null. Le fichier lui-même passe par un upload multipart.
"""
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from portfolio_cms.domain.image_owner import ImageOwner, OwnerKind


class ImageOwnerIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: OwnerKind
    id: uuid.UUID

    def to_domain(self) -> ImageOwner:
        return ImageOwner(kind=self.kind, id=self.id)


class ImageUpdate(BaseModel):
    """PATCH /images/{id} (JSON). Un champ absent n'est pas modifié ; null efface."""
    model_config = ConfigDict(extra="forbid")

    order: Optional[int] = Field(None, ge=1, description="Ordre d'affichage dans le carrousel (>= 1)")
    owner: Optional[ImageOwnerIn] = None
