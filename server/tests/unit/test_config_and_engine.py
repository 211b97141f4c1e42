import pytest
from sqlalchemy import text

from portfolio_cms.core.errors import ConfigurationError
from portfolio_cms.infrastructure.persistence.database import session as session_mod

pytestmark = pytest.mark.unit


@pytest.fixture
def fresh_engine():
    session_mod.reset_engine()
    yield
    session_mod.reset_engine()


def test_settings_defaults():
    from portfolio_cms.core.config import Settings

    s = Settings(_env_file=None, DATABASE_URL="sqlite://")
    assert s.CORS_ORIGIN == "http://localhost:5173"
    assert s.IMAGES_SERVER_ROUTE == "/images"
    assert s.ADMIN_LOGO_PATH == "/images/logo.svg"
    assert s.SESSION_MAX_AGE_DAYS == 30


def test_empty_database_url_fails_fast(monkeypatch, fresh_engine):
    monkeypatch.setattr(session_mod.settings, "DATABASE_URL", "  ")
    with pytest.raises(ConfigurationError) as exc:
        session_mod.init_engine()
    assert exc.value.code == "database_url_missing"


def test_sqlite_engine_enforces_foreign_keys(monkeypatch, fresh_engine):
    monkeypatch.setattr(session_mod.settings, "DATABASE_URL", "sqlite+pysqlite:///:memory:")
    engine = session_mod.init_engine()
    assert session_mod.init_engine() is engine
    with engine.connect() as conn:
        assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1

    with session_mod.get_sync_session() as s:
        assert s.execute(text("SELECT 1")).scalar() == 1
