from __future__ import annotations
"""server/portfolio_cms/api/v1/serializers/image.py
~~~~~~~~~~~~~~~~~~~~~~~~
Sérialisation images.
"""
from typing import Any, Dict, Iterable, List, Optional

from portfolio_cms.core.utils.datetime import isoformat_utc
from portfolio_cms.domain.image_owner import owner_of
from portfolio_cms.infrastructure.persistence.database.models.image import Image
from portfolio_cms.infrastructure.storage.local_storage import LocalImageStorage


def serialize_image_file(img: Image, storage: LocalImageStorage) -> Optional[Dict[str, Any]]:
    if not img.file_id or not img.file_extension:
        return None
    return {
        "id": img.file_id,
        "extension": img.file_extension,
        "filesize": img.file_filesize,
        "width": img.file_width,
        "height": img.file_height,
        "url": storage.url_for(img.file_id, img.file_extension),
    }


def serialize_image(img: Image, storage: LocalImageStorage) -> Dict[str, Any]:
    owner = owner_of(img)
    return {
        "id": str(img.id),
        "file": serialize_image_file(img, storage),
        "order": img.order,
        "owner": owner.to_dict() if owner else None,
        "created_at": isoformat_utc(img.created_at),
    }


def serialize_optional_image(img: Optional[Image], storage: LocalImageStorage) -> Optional[Dict[str, Any]]:
    return serialize_image(img, storage) if img is not None else None


def serialize_image_list(images: Iterable[Image], storage: LocalImageStorage) -> List[Dict[str, Any]]:
    """Images d'un carrousel : par `order` croissant, sans ordre en dernier."""
    ordered = sorted(images, key=lambda i: (i.order is None, i.order or 0))
    return [serialize_image(i, storage) for i in ordered]
