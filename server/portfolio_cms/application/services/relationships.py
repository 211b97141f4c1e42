from __future__ import annotations
"""server/portfolio_cms/application/services/relationships.py
~~~~~~~~~~~~~~~~~~~~~~~~
Résolution des entrées relation (connect / disconnect / set).

Les cibles sont chargées par id ; un id inconnu lève
InvalidInputError("relationship_target_not_found"). Rien n'est commité ici.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from portfolio_cms.api.schemas.relationships import RelateToMany, RelateToOne
from portfolio_cms.core.errors import InvalidInputError
from portfolio_cms.domain.image_owner import OwnerKind
from portfolio_cms.infrastructure.persistence.database.models.image import Image
from portfolio_cms.infrastructure.persistence.repositories.image_repository import (
    OWNER_TARGETS,
    ImageRepository,
)
from portfolio_cms.infrastructure.persistence.repositories.item_repository import ItemRepository

logger = logging.getLogger(__name__)


def resolve_targets(db: Session, model: type, ids: Iterable[UUID], field_name: str) -> list[Any]:
    wanted = list(dict.fromkeys(ids))
    found = ItemRepository(db, model).get_many(wanted)
    missing = [str(i) for i in wanted if i not in found]
    if missing:
        raise InvalidInputError(
            f"{field_name}: élément(s) introuvable(s) {', '.join(missing)}",
            code="relationship_target_not_found",
        )
    return [found[i] for i in wanted]


def resolve_target(db: Session, model: type, target_id: UUID, field_name: str) -> Any:
    return resolve_targets(db, model, [target_id], field_name)[0]


@dataclass
class ManyChanges:
    connect: list[Any] = field(default_factory=list)
    disconnect: list[Any] = field(default_factory=list)


def plan_to_many(
    db: Session, model: type, current: Iterable[Any], rel: RelateToMany, field_name: str
) -> ManyChanges:
    """Traduit l'entrée en éléments à connecter / déconnecter (déconnexions d'abord)."""
    current = list(current)
    if rel.set is not None:
        targets = resolve_targets(db, model, rel.set, field_name)
        target_ids = {t.id for t in targets}
        return ManyChanges(
            connect=[t for t in targets if t not in current],
            disconnect=[c for c in current if c.id not in target_ids],
        )
    return ManyChanges(
        connect=resolve_targets(db, model, rel.connect, field_name),
        disconnect=resolve_targets(db, model, rel.disconnect, field_name),
    )


def relate_one(db: Session, obj: Any, attr: str, model: type, rel: Optional[RelateToOne]) -> None:
    """Relation "un" simple portée par `obj` (ex: SectionTravaux.travaux)."""
    if rel is None:
        return
    if rel.disconnect:
        setattr(obj, attr, None)
        return
    setattr(obj, attr, resolve_target(db, model, rel.connect, attr))


def relate_many(db: Session, obj: Any, attr: str, model: type, rel: Optional[RelateToMany]) -> None:
    """Relation "plusieurs" manipulée comme une collection (ex: About.sections)."""
    if rel is None:
        return
    collection = getattr(obj, attr)
    changes = plan_to_many(db, model, collection, rel, attr)
    for item in changes.disconnect:
        if item in collection:
            collection.remove(item)
    for item in changes.connect:
        if item not in collection:
            collection.append(item)


def relate_image(db: Session, parent: Any, kind: OwnerKind, rel: Optional[RelateToOne]) -> None:
    """Image unique d'un parent (SectionTravaux / SectionAbout / About)."""
    if rel is None:
        return
    repo = ImageRepository(db)
    if rel.disconnect:
        if parent.image is not None:
            repo.set_owner(parent.image)
        return
    image = resolve_target(db, Image, rel.connect, "image")
    repo.set_owner(image, kind, parent)
    logger.debug("image %s attached to %s", image.id, kind.value)


def relate_images(db: Session, parent: Any, rel: Optional[RelateToMany]) -> None:
    """Images d'une exposition (côté "plusieurs" du propriétaire)."""
    if rel is None:
        return
    repo = ImageRepository(db)
    attr, _ = OWNER_TARGETS[OwnerKind.EXPOSITION]
    changes = plan_to_many(db, Image, parent.images, rel, "images")
    for image in changes.disconnect:
        if getattr(image, attr) is parent:
            repo.set_owner(image)
    for image in changes.connect:
        repo.set_owner(image, OwnerKind.EXPOSITION, parent)


def relate_children(db: Session, parent: Any, attr: str, model: type, back_attr: str,
                    rel: Optional[RelateToMany]) -> None:
    """Côté "plusieurs" d'une FK simple (ex: Travaux.sections <-> SectionTravaux.travaux)."""
    if rel is None:
        return
    changes = plan_to_many(db, model, getattr(parent, attr), rel, attr)
    for child in changes.disconnect:
        if getattr(child, back_attr) is parent:
            setattr(child, back_attr, None)
    for child in changes.connect:
        setattr(child, back_attr, parent)
