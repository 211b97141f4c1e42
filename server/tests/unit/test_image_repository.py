"""
ImageRepository.set_owner : au plus un propriétaire, réassignation, contraintes DB.
"""
import pytest
from sqlalchemy.exc import IntegrityError

from portfolio_cms.domain.image_owner import OwnerKind, owner_of
from portfolio_cms.infrastructure.persistence.database.models import (
    About,
    Exposition,
    Image,
    SectionTravaux,
)
from portfolio_cms.infrastructure.persistence.repositories.image_repository import ImageRepository

pytestmark = pytest.mark.unit


def test_set_owner_replaces_any_previous_owner(Session):
    with Session() as s:
        expo = Exposition(title="E", subtitle="S", content=[])
        about = About()
        img = Image()
        s.add_all([expo, about, img])
        s.flush()

        repo = ImageRepository(s)
        repo.set_owner(img, OwnerKind.EXPOSITION, expo)
        s.flush()
        assert owner_of(img).kind is OwnerKind.EXPOSITION

        repo.set_owner(img, OwnerKind.ABOUT, repo.get_parent(OwnerKind.ABOUT, about.id))
        s.flush()
        assert img.exposition_id is None
        assert owner_of(img).id == about.id
        assert expo.images == []

        repo.set_owner(img)
        s.flush()
        assert owner_of(img) is None
        s.commit()


def test_set_owner_detaches_image_of_single_image_parent(Session):
    with Session() as s:
        section = SectionTravaux(section="1", content=[])
        a, b = Image(), Image()
        s.add_all([section, a, b])
        s.flush()

        repo = ImageRepository(s)
        repo.set_owner(a, OwnerKind.SECTION_TRAVAUX, section)
        s.flush()
        repo.set_owner(b, OwnerKind.SECTION_TRAVAUX, section)
        s.commit()

        assert a.section_travaux_id is None
        assert b.section_travaux_id == section.id
        assert section.image is b


def test_set_owner_requires_parent():
    with pytest.raises(ValueError):
        ImageRepository(None).set_owner(Image(), OwnerKind.ABOUT, None)


def test_database_refuses_two_owners(Session):
    with Session() as s:
        expo = Exposition(title="E", subtitle="S", content=[])
        about = About()
        s.add_all([expo, about])
        s.flush()

        s.add(Image(exposition_id=expo.id, about_id=about.id))
        with pytest.raises(IntegrityError):
            s.flush()
        s.rollback()


def test_database_refuses_order_below_one(Session):
    with Session() as s:
        s.add(Image(order=0))
        with pytest.raises(IntegrityError):
            s.flush()
        s.rollback()
