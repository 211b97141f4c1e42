from __future__ import annotations
"""server/portfolio_cms/application/services/image_service.py
~~~~~~~~~~~~~~~~~~~~~~~~
Images : métadonnées en base, fichier sur le stockage local.

- create / replace_file : le fichier est validé et écrit avant le commit ;
  s'il y a échec ensuite, le fichier fraîchement écrit est supprimé
- replace_file / delete : l'ancien fichier est supprimé après le commit
- le propriétaire passe toujours par ImageRepository.set_owner
"""
import logging
from typing import Any, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from portfolio_cms.api.schemas.image import ImageOwnerIn
from portfolio_cms.application.services.item_service import ItemService
from portfolio_cms.application.services.relationships import resolve_target
from portfolio_cms.domain import lists
from portfolio_cms.domain.access import SessionData
from portfolio_cms.infrastructure.persistence.database.models.image import Image
from portfolio_cms.infrastructure.persistence.repositories.image_repository import (
    OWNER_TARGETS,
    ImageRepository,
)
from portfolio_cms.infrastructure.storage.local_storage import LocalImageStorage, StoredImage

logger = logging.getLogger(__name__)


class ImageService(ItemService[Image]):
    spec = lists.IMAGE
    model = Image

    repo: ImageRepository

    def __init__(self, db: Session, session: Optional[SessionData], storage: LocalImageStorage) -> None:
        self.storage = storage
        super().__init__(db, session)

    def _make_repo(self) -> ImageRepository:
        return ImageRepository(self.db)

    def _apply_fields(self, obj: Image, values: dict[str, Any], *, creating: bool) -> None:
        if "order" in values:
            obj.order = values["order"]

    def _apply_relations(self, obj: Image, values: dict[str, Any]) -> None:
        if "owner" not in values:
            return
        owner_in: Optional[ImageOwnerIn] = values["owner"]
        if owner_in is None:
            self.repo.set_owner(obj)
            return
        owner = owner_in.to_domain()
        _, model = OWNER_TARGETS[owner.kind]
        parent = resolve_target(self.db, model, owner.id, "owner")
        self.repo.set_owner(obj, owner.kind, parent)

    # --- fichiers ------------------------------------------------------------

    def upload(
        self,
        data: Optional[bytes],
        *,
        order: Optional[int] = None,
        owner: Optional[ImageOwnerIn] = None,
    ) -> Image:
        """POST multipart : fichier facultatif + ordre + propriétaire."""
        self.ensure("create")
        stored = self.storage.save(data) if data else None
        try:
            with self._transaction():
                obj = Image(order=order)
                if stored is not None:
                    _set_file(obj, stored)
                self.db.add(obj)
                self._apply_relations(obj, {"owner": owner})
                self.db.flush()
        except Exception:
            if stored is not None:
                self.storage.delete(stored.id, stored.extension)
            raise
        logger.info("Image created: %s (file=%s)", obj.id, stored.filename if stored else None)
        return obj

    def replace_file(self, item_id: UUID, data: bytes) -> Image:
        self.ensure("update")
        obj = self._load(item_id)
        previous = (obj.file_id, obj.file_extension)
        stored = self.storage.save(data)
        try:
            with self._transaction():
                _set_file(obj, stored)
        except Exception:
            self.storage.delete(stored.id, stored.extension)
            raise
        self.storage.delete(*previous)
        logger.info("Image file replaced: %s -> %s", obj.id, stored.filename)
        return obj

    def delete(self, item_id: UUID) -> Image:
        obj = super().delete(item_id)
        self.storage.delete(obj.file_id, obj.file_extension)
        return obj


def _set_file(obj: Image, stored: StoredImage) -> None:
    obj.file_id = stored.id
    obj.file_extension = stored.extension
    obj.file_filesize = stored.filesize
    obj.file_width = stored.width
    obj.file_height = stored.height
