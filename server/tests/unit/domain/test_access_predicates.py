import uuid

import pytest

from portfolio_cms.core.errors import AccessDeniedError
from portfolio_cms.domain.access import (
    ALLOW_ALL,
    ListAccess,
    SessionData,
    allow_all,
    is_signed_in,
    is_super_admin,
)
from portfolio_cms.domain.lists import ABOUT, LISTS, USER

pytestmark = pytest.mark.unit


def _session(role: str) -> SessionData:
    return SessionData(user_id=uuid.uuid4(), name="x", email="x@example.com", role=role)


ADMIN = _session("admin")
SUPER = _session("superAdmin")


def test_predicates():
    assert not is_signed_in(None)
    assert is_signed_in(ADMIN)
    assert not is_super_admin(None)
    assert not is_super_admin(ADMIN)
    assert is_super_admin(SUPER)
    assert allow_all(None)


def test_unknown_operation_is_a_programming_error():
    with pytest.raises(ValueError):
        ALLOW_ALL.allows("drop", None)


@pytest.mark.parametrize("operation", ["create", "update", "delete"])
def test_user_mutations_require_super_admin(operation):
    assert not USER.access.allows(operation, None)
    assert not USER.access.allows(operation, ADMIN)
    assert USER.access.allows(operation, SUPER)


def test_user_query_requires_session():
    assert not USER.access.allows("query", None)
    assert USER.access.allows("query", ADMIN)


@pytest.mark.parametrize("key", ["Texte", "Image", "Exposition", "Travaux", "SectionTravaux", "SectionAbout"])
def test_public_lists_are_queryable_anonymously(key):
    assert LISTS[key].access.allows("query", None)


def test_about_rules():
    assert not ABOUT.access.allows("query", None)
    assert ABOUT.access.allows("update", ADMIN)
    assert not ABOUT.access.allows("delete", ADMIN)
    assert not ABOUT.access.allows("create", ADMIN)
    assert ABOUT.access.allows("delete", SUPER)


def test_ensure_maps_to_401_or_403():
    access = ListAccess(query=is_super_admin)

    with pytest.raises(AccessDeniedError) as anon:
        access.ensure("Thing", "query", None)
    assert anon.value.status_code == 401
    assert anon.value.code == "access_denied"

    with pytest.raises(AccessDeniedError) as signed:
        access.ensure("Thing", "query", ADMIN)
    assert signed.value.status_code == 403

    access.ensure("Thing", "query", SUPER)
