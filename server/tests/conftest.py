# server/tests/conftest.py
"""
Conftest *global* pour toute la suite de tests.

Points clés :
- ENV posées *avant* tout import portfolio_cms.* (Settings() lit l'ENV à l'import) :
  DATABASE_URL SQLite in-memory, secret JWT, stockage des images dans un dossier temporaire.
- Pour les tests @unit uniquement :
  - DB SQLite in-memory partagée (StaticPool) + Base.metadata.create_all.
  - Purge de toutes les tables après chaque test.
  - TestClient avec overrides FastAPI (get_db, get_image_storage).
- Fabriques simples : utilisateurs, en-têtes d'authentification, images PNG.
"""

import os
import tempfile
import uuid
from io import BytesIO

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret")
os.environ.setdefault("IMAGES_STORAGE_PATH", tempfile.mkdtemp(prefix="portfolio-images-"))
os.environ.setdefault("IMAGES_BASE_URL", "http://testserver/images")


# ============================================================================
# Helpers
# ============================================================================
def _is_unit(request: pytest.FixtureRequest) -> bool:
    """True si le test courant est marqué @pytest.mark.unit."""
    return request.node.get_closest_marker("unit") is not None


def _image_bytes(width: int = 4, height: int = 3, color: str = "red", fmt: str = "PNG") -> bytes:
    from PIL import Image as PILImage

    buf = BytesIO()
    PILImage.new("RGB", (width, height), color).save(buf, format=fmt)
    return buf.getvalue()


# ============================================================================
# UNIT-ONLY: DB SQLite in-memory partagée + Base.metadata.create_all
# ============================================================================
@pytest.fixture(scope="session")
def _sqlite_engine_unit():
    """
    Engine in-memory **partagé** entre connexions (StaticPool + check_same_thread=False)
    + activation des contraintes FK sur chaque connexion.
    """
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ARG001
        dbapi_connection.execute("PRAGMA foreign_keys=ON")

    from portfolio_cms.infrastructure.persistence.database.base import Base

    Base.metadata.create_all(engine)
    return engine


@pytest.fixture(scope="session")
def _Session_unit(_sqlite_engine_unit):
    """Retourne un sessionmaker lié au moteur SQLite in-memory."""
    return sessionmaker(
        bind=_sqlite_engine_unit,
        future=True,
        autoflush=True,
        expire_on_commit=False,
    )


@pytest.fixture
def Session(request, _Session_unit):
    """
    Fournit un sessionmaker à utiliser comme `with Session() as s:` pour les tests unitaires.
    Sera *skippé* s'il est injecté dans un test non marqué @unit.
    """
    if not _is_unit(request):
        pytest.skip("Session fixture is only available for unit tests")
    return _Session_unit


@pytest.fixture(autouse=True)
def _clear_db_between_unit_tests(request, _Session_unit):
    """
    Après chaque test unitaire, on supprime le contenu de toutes les tables.
    ⚠️ Générateur : doit 'yield' aussi hors unit.
    """
    if not _is_unit(request):
        yield
        return

    yield
    from portfolio_cms.infrastructure.persistence.database.base import Base

    with _Session_unit() as s:
        for table in reversed(Base.metadata.sorted_tables):
            s.execute(table.delete())
        s.commit()


# ============================================================================
# UNIT-ONLY: stockage d'images + TestClient
# ============================================================================
@pytest.fixture
def storage(tmp_path):
    from portfolio_cms.infrastructure.storage.local_storage import LocalImageStorage

    return LocalImageStorage(tmp_path / "images", "http://testserver/images")


@pytest.fixture
def client(Session, storage):
    """
    TestClient branché sur la DB SQLite des tests unitaires
    (une session SQLAlchemy par requête, comme get_db).
    """
    from fastapi.testclient import TestClient

    from portfolio_cms.infrastructure.persistence.database.session import get_db
    from portfolio_cms.infrastructure.storage.local_storage import get_image_storage
    from portfolio_cms.main import app

    def _override_get_db():
        db = Session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_image_storage] = lambda: storage
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.pop(get_db, None)
        app.dependency_overrides.pop(get_image_storage, None)


# ============================================================================
# Fabriques
# ============================================================================
@pytest.fixture
def make_user(Session):
    """
    Crée un utilisateur en base et le retourne.
        user = make_user(role="superAdmin")
    """
    from portfolio_cms.core.security import hash_password
    from portfolio_cms.infrastructure.persistence.database.models.user import User

    def _factory(*, name: str = "Test", email: str | None = None, password: str = "password123",
                 role: str = "admin"):
        with Session() as s:
            user = User(
                name=name,
                email=email or f"user+{uuid.uuid4().hex[:8]}@example.com",
                password_hash=hash_password(password),
                role=role,
            )
            s.add(user)
            s.commit()
            return user

    return _factory


@pytest.fixture
def auth_headers():
    """En-tête `Authorization: Bearer` pour un utilisateur donné."""
    from portfolio_cms.core.security import create_access_token

    def _headers(user) -> dict:
        return {"Authorization": f"Bearer {create_access_token({'sub': str(user.id)})}"}

    return _headers


@pytest.fixture
def admin_headers(make_user, auth_headers) -> dict:
    return auth_headers(make_user(role="admin"))


@pytest.fixture
def super_admin_headers(make_user, auth_headers) -> dict:
    return auth_headers(make_user(role="superAdmin"))


@pytest.fixture
def image_bytes():
    """Génère une vraie image (Pillow) : image_bytes(8, 6, fmt="JPEG")."""
    return _image_bytes
