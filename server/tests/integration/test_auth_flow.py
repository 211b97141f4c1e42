# server/tests/integration/test_auth_flow.py
"""
Tests d'intégration auth (init-first-item → me → logout → login) via TestClient.

- SQLite in-memory partagé (StaticPool), schéma créé par create_all
- override de get_db posé/retiré par fixture
- session portée par le cookie (pas d'en-tête Authorization)
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from portfolio_cms.core.security import SESSION_COOKIE
from portfolio_cms.infrastructure.persistence.database.base import Base
from portfolio_cms.infrastructure.persistence.database.session import get_db
from portfolio_cms.main import app

pytestmark = pytest.mark.integration

CREDS = {"name": "Paul", "email": "paul@example.com", "password": "first-password"}


@pytest.fixture()
def tc():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _fk(dbapi_connection, connection_record):  # noqa: ARG001
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=True, expire_on_commit=False, future=True)

    def _override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)
        engine.dispose()


def test_first_item_me_logout_login_flow(tc: TestClient):
    # premier utilisateur : super admin + session ouverte
    r = tc.post("/api/v1/auth/init-first-item", json=CREDS)
    assert r.status_code == 201, r.text
    assert r.json()["role"] == "superAdmin"
    assert tc.cookies.get(SESSION_COOKIE)

    # une seule fois
    r = tc.post("/api/v1/auth/init-first-item", json={**CREDS, "email": "other@example.com"})
    assert r.status_code == 409
    assert r.json()["detail"] == "already_initialized"

    r = tc.get("/api/v1/auth/me")
    assert r.status_code == 200, r.text
    assert r.json()["email"] == CREDS["email"]

    # la session donne accès aux listes protégées
    assert tc.get("/api/v1/users").status_code == 200

    r = tc.post("/api/v1/auth/logout")
    assert r.status_code == 200
    tc.cookies.clear()
    assert tc.get("/api/v1/auth/me").status_code == 401
    assert tc.get("/api/v1/users").status_code == 401

    r = tc.post("/api/v1/auth/login", json={"email": CREDS["email"], "password": "wrong-password"})
    assert r.status_code == 401
    assert r.json()["detail"] == "invalid_credentials"

    r = tc.post("/api/v1/auth/login", json={"email": CREDS["email"], "password": CREDS["password"]})
    assert r.status_code == 200, r.text
    assert tc.get("/api/v1/auth/me").json()["role"] == "superAdmin"


def test_init_first_item_validates_input(tc: TestClient):
    r = tc.post("/api/v1/auth/init-first-item", json={**CREDS, "password": "short"})
    assert r.status_code == 422
    r = tc.post("/api/v1/auth/init-first-item", json={**CREDS, "email": "not-an-email"})
    assert r.status_code == 422
