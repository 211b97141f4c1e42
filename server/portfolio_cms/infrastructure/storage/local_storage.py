from __future__ import annotations
"""server/portfolio_cms/infrastructure/storage/local_storage.py
~~~~~~~~~~~~~~~~~~~~~~~~
LocalImageStorage : stockage des images sur le disque local.

- Les fichiers sont écrits dans IMAGES_STORAGE_PATH sous le nom <uuid>.<ext>
- Le format est détecté par Pillow (pas par le nom du fichier envoyé)
- Les URLs publiques sont construites depuis IMAGES_BASE_URL
  (base absolue en développement local, ex: http://localhost:3000/images)
"""

import logging
import uuid
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Optional

from PIL import Image as PILImage, UnidentifiedImageError

from portfolio_cms.core.config import settings
from portfolio_cms.core.errors import InvalidInputError

logger = logging.getLogger(__name__)

# format Pillow -> extension stockée
SUPPORTED_FORMATS: dict[str, str] = {
    "JPEG": "jpg",
    "PNG": "png",
    "WEBP": "webp",
    "GIF": "gif",
}


@dataclass(frozen=True)
class StoredImage:
    id: str
    extension: str
    filesize: int
    width: int
    height: int

    @property
    def filename(self) -> str:
        return f"{self.id}.{self.extension}"


class LocalImageStorage:
    def __init__(self, storage_path: Optional[str | Path] = None, base_url: Optional[str] = None):
        self.storage_path = Path(storage_path or settings.IMAGES_STORAGE_PATH)
        self.base_url = (base_url or settings.IMAGES_BASE_URL).rstrip("/")

    def save(self, data: bytes) -> StoredImage:
        """Valide le contenu, l'écrit sur disque et retourne ses métadonnées."""
        if not data:
            raise InvalidInputError("Fichier vide", code="invalid_image")
        try:
            with PILImage.open(BytesIO(data)) as img:
                fmt = (img.format or "").upper()
                width, height = img.size
        except (UnidentifiedImageError, OSError) as exc:
            raise InvalidInputError("Le fichier n'est pas une image lisible", code="invalid_image") from exc

        extension = SUPPORTED_FORMATS.get(fmt)
        if extension is None:
            raise InvalidInputError(f"Format d'image non supporté: {fmt or 'inconnu'}", code="invalid_image")

        stored = StoredImage(
            id=uuid.uuid4().hex,
            extension=extension,
            filesize=len(data),
            width=int(width),
            height=int(height),
        )
        self.storage_path.mkdir(parents=True, exist_ok=True)
        (self.storage_path / stored.filename).write_bytes(data)
        logger.info("image stored: %s (%d bytes, %dx%d)", stored.filename, stored.filesize, width, height)
        return stored

    def delete(self, file_id: Optional[str], extension: Optional[str]) -> bool:
        """Supprime le fichier s'il existe. Retourne True si un fichier a été supprimé."""
        if not file_id or not extension:
            return False
        path = self.storage_path / f"{file_id}.{extension}"
        if not path.is_file():
            logger.warning("image file already missing: %s", path)
            return False
        path.unlink()
        logger.info("image file removed: %s", path.name)
        return True

    def url_for(self, file_id: str, extension: str) -> str:
        return f"{self.base_url}/{file_id}.{extension}"


def get_image_storage() -> LocalImageStorage:
    """Dépendance FastAPI (surchargée dans les tests)."""
    return LocalImageStorage()
