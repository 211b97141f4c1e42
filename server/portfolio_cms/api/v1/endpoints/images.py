from __future__ import annotations
"""
server/portfolio_cms/api/v1/endpoints/images.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Images.

- POST /images             : multipart (file facultatif, order, owner_kind + owner_id)
- PATCH /images/{id}       : JSON (order, owner)
- PATCH /images/{id}/file  : multipart, remplace le fichier (l'ancien est supprimé)
- DELETE /images/{id}      : supprime la ligne puis le fichier

Le format est détecté par Pillow à l'upload (jpg, png, webp, gif).
"""
import uuid
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from sqlalchemy.orm import Session

from portfolio_cms.api.schemas.image import ImageOwnerIn, ImageUpdate
from portfolio_cms.api.v1.serializers.image import serialize_image
from portfolio_cms.application.services.image_service import ImageService
from portfolio_cms.core.errors import InvalidInputError
from portfolio_cms.domain.access import SessionData
from portfolio_cms.domain.image_owner import OwnerKind
from portfolio_cms.infrastructure.persistence.database.session import get_db
from portfolio_cms.infrastructure.storage.local_storage import LocalImageStorage, get_image_storage
from portfolio_cms.presentation.api.deps import get_session_data

router = APIRouter(prefix="/images", tags=["images"])


def _owner_from_form(kind: Optional[OwnerKind], owner_id: Optional[uuid.UUID]) -> Optional[ImageOwnerIn]:
    if kind is None and owner_id is None:
        return None
    if kind is None or owner_id is None:
        raise InvalidInputError("owner_kind et owner_id vont ensemble", code="invalid_owner")
    return ImageOwnerIn(kind=kind, id=owner_id)


@router.get("")
def list_images(
    skip: int = Query(0, ge=0),
    take: Optional[int] = Query(None, ge=1, le=1000),
    db: Session = Depends(get_db),
    session: Optional[SessionData] = Depends(get_session_data),
    storage: LocalImageStorage = Depends(get_image_storage),
) -> Dict[str, Any]:
    items, total = ImageService(db, session, storage).list(skip=skip, take=take)
    return {"items": [serialize_image(i, storage) for i in items], "total": total}


@router.get("/{item_id}")
def get_image(
    item_id: uuid.UUID,
    db: Session = Depends(get_db),
    session: Optional[SessionData] = Depends(get_session_data),
    storage: LocalImageStorage = Depends(get_image_storage),
) -> Dict[str, Any]:
    return serialize_image(ImageService(db, session, storage).get(item_id), storage)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_image(
    file: Optional[UploadFile] = File(None),
    order: Optional[int] = Form(None, ge=1),
    owner_kind: Optional[OwnerKind] = Form(None),
    owner_id: Optional[uuid.UUID] = Form(None),
    db: Session = Depends(get_db),
    session: Optional[SessionData] = Depends(get_session_data),
    storage: LocalImageStorage = Depends(get_image_storage),
) -> Dict[str, Any]:
    owner = _owner_from_form(owner_kind, owner_id)
    data = await file.read() if file is not None else None
    img = ImageService(db, session, storage).upload(data, order=order, owner=owner)
    return serialize_image(img, storage)


@router.patch("/{item_id}")
def update_image(
    item_id: uuid.UUID,
    payload: ImageUpdate,
    db: Session = Depends(get_db),
    session: Optional[SessionData] = Depends(get_session_data),
    storage: LocalImageStorage = Depends(get_image_storage),
) -> Dict[str, Any]:
    return serialize_image(ImageService(db, session, storage).update(item_id, payload), storage)


@router.patch("/{item_id}/file")
async def replace_image_file(
    item_id: uuid.UUID,
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    session: Optional[SessionData] = Depends(get_session_data),
    storage: LocalImageStorage = Depends(get_image_storage),
) -> Dict[str, Any]:
    data = await file.read()
    img = ImageService(db, session, storage).replace_file(item_id, data)
    return serialize_image(img, storage)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_image(
    item_id: uuid.UUID,
    db: Session = Depends(get_db),
    session: Optional[SessionData] = Depends(get_session_data),
    storage: LocalImageStorage = Depends(get_image_storage),
) -> None:
    ImageService(db, session, storage).delete(item_id)
