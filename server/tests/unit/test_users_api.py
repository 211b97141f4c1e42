"""
Utilisateurs via l'API : lecture pour tout utilisateur connecté, écriture
réservée aux super admins, email unique, mot de passe jamais renvoyé.
"""
import pytest

pytestmark = pytest.mark.unit

URL = "/api/v1/users"


def _payload(**overrides):
    data = {"name": "Paul", "email": "paul@example.com", "password": "password123"}
    data.update(overrides)
    return data


def test_anonymous_cannot_query_users(client):
    r = client.get(URL)
    assert r.status_code == 401
    assert r.json()["detail"] == "access_denied"


def test_signed_in_admin_can_query_users(client, admin_headers):
    r = client.get(URL, headers=admin_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["total"] == 1
    assert "password_hash" not in body["items"][0]
    assert body["items"][0]["password_is_set"] is True


def test_admin_cannot_create_update_or_delete_users(client, admin_headers, make_user):
    other = make_user()

    assert client.post(URL, json=_payload(), headers=admin_headers).status_code == 403
    assert client.patch(f"{URL}/{other.id}", json={"name": "X"}, headers=admin_headers).status_code == 403
    assert client.delete(f"{URL}/{other.id}", headers=admin_headers).status_code == 403


def test_anonymous_create_is_401(client):
    assert client.post(URL, json=_payload()).status_code == 401


def test_super_admin_manages_users(client, super_admin_headers):
    r = client.post(URL, json=_payload(), headers=super_admin_headers)
    assert r.status_code == 201, r.text
    created = r.json()
    assert created["role"] == "admin"
    assert created["email"] == "paul@example.com"
    assert "password" not in created

    r = client.patch(f"{URL}/{created['id']}", json={"role": "superAdmin"}, headers=super_admin_headers)
    assert r.status_code == 200, r.text
    assert r.json()["role"] == "superAdmin"

    r = client.delete(f"{URL}/{created['id']}", headers=super_admin_headers)
    assert r.status_code == 204
    assert client.get(f"{URL}/{created['id']}", headers=super_admin_headers).status_code == 404


@pytest.mark.parametrize("missing", ["email", "password", "name"])
def test_create_requires_fields(client, super_admin_headers, missing):
    data = _payload()
    data.pop(missing)
    assert client.post(URL, json=data, headers=super_admin_headers).status_code == 422


def test_short_password_and_unknown_role_are_rejected(client, super_admin_headers):
    assert client.post(URL, json=_payload(password="short"), headers=super_admin_headers).status_code == 422
    assert client.post(URL, json=_payload(role="owner"), headers=super_admin_headers).status_code == 422


def test_duplicate_email_is_rejected(client, super_admin_headers):
    assert client.post(URL, json=_payload(), headers=super_admin_headers).status_code == 201
    r = client.post(URL, json=_payload(name="Autre"), headers=super_admin_headers)
    assert r.status_code == 409
    assert r.json()["detail"] == "email_already_exists"


def test_update_to_existing_email_is_rejected(client, super_admin_headers, make_user):
    taken = make_user(email="taken@example.com")
    other = make_user()
    r = client.patch(f"{URL}/{other.id}", json={"email": taken.email}, headers=super_admin_headers)
    assert r.status_code == 409


def test_required_field_cannot_be_cleared(client, super_admin_headers, make_user):
    other = make_user()
    r = client.patch(f"{URL}/{other.id}", json={"name": None}, headers=super_admin_headers)
    assert r.status_code == 422
    assert r.json()["detail"] == "required_field"


def test_role_cannot_be_cleared(client, super_admin_headers, make_user):
    other = make_user(role="admin")
    r = client.patch(f"{URL}/{other.id}", json={"role": None}, headers=super_admin_headers)
    assert r.status_code == 422

    r = client.get(f"{URL}/{other.id}", headers=super_admin_headers)
    assert r.json()["role"] == "admin"


def test_service_refuses_null_role(Session, make_user):
    from portfolio_cms.api.schemas.user import UserUpdate
    from portfolio_cms.application.services.user_service import UserService
    from portfolio_cms.core.errors import InvalidInputError
    from portfolio_cms.domain.access import SessionData

    admin = make_user(role="superAdmin")
    other = make_user(role="admin")
    session = SessionData(user_id=admin.id, name=admin.name, email=admin.email, role=admin.role)

    with Session() as s:
        with pytest.raises(InvalidInputError) as exc:
            UserService(s, session).update(other.id, UserUpdate.model_construct(_fields_set={"role"}, role=None))
    assert exc.value.code == "required_field"


def test_only_email_unique_violation_maps_to_email_conflict():
    from sqlalchemy.exc import IntegrityError

    from portfolio_cms.application.services.user_service import UserService, is_email_violation

    unique = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed: users.email"))
    pg_unique = IntegrityError("INSERT", {}, Exception('duplicate key value violates unique constraint "ix_users_email"'))
    not_null = IntegrityError("UPDATE", {}, Exception("NOT NULL constraint failed: users.role"))
    assert is_email_violation(unique)
    assert is_email_violation(pg_unique)
    assert not is_email_violation(not_null)

    service = UserService.__new__(UserService)
    assert service._conflict(unique).code == "email_already_exists"
    assert service._conflict(not_null).code == "integrity_error"


def test_role_change_applies_on_next_request(client, make_user, auth_headers, Session):
    from portfolio_cms.infrastructure.persistence.database.models.user import User

    user = make_user(role="admin")
    headers = auth_headers(user)
    assert client.post(URL, json=_payload(), headers=headers).status_code == 403

    with Session() as s:
        s.get(User, user.id).role = "superAdmin"
        s.commit()

    assert client.post(URL, json=_payload(), headers=headers).status_code == 201


def test_token_of_deleted_user_is_anonymous(client, make_user, auth_headers, Session):
    from portfolio_cms.infrastructure.persistence.database.models.user import User

    user = make_user()
    headers = auth_headers(user)
    with Session() as s:
        s.delete(s.get(User, user.id))
        s.commit()

    assert client.get(URL, headers=headers).status_code == 401
