"""
Provisionnement INI : garde-fous, création du super admin et de la page à propos,
idempotence, secrets générés.
"""
import importlib.util
from pathlib import Path

import pytest
from sqlalchemy import func, select

from portfolio_cms.core.security import verify_password
from portfolio_cms.infrastructure.persistence.database.models import About, SectionAbout, User

pytestmark = pytest.mark.unit

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "provision_from_ini.py"


@pytest.fixture(scope="module")
def prov():
    spec = importlib.util.spec_from_file_location("provision_from_ini", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def ini(tmp_path):
    def _write(body: str) -> Path:
        path = tmp_path / "cms.ini"
        path.write_text(body, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def guards(monkeypatch):
    monkeypatch.setenv("PROVISION_CMS", "true")
    monkeypatch.delenv("APP_ENV", raising=False)
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.delenv("ALLOW_PROD_PROVISIONING", raising=False)
    return monkeypatch


FULL_INI = """
[super_admin]
name = Paul
email = paul@example.com
password = supersecret1

[about]
create = true
sections = bio, process
"""


def test_refuses_without_flag(prov, ini, monkeypatch, _sqlite_engine_unit):
    monkeypatch.delenv("PROVISION_CMS", raising=False)
    with pytest.raises(SystemExit, match="PROVISION_CMS"):
        prov.provision_from_ini(ini(FULL_INI), engine=_sqlite_engine_unit)


def test_refuses_in_prod_unless_allowed(prov, ini, guards, _sqlite_engine_unit):
    guards.setenv("APP_ENV", "production")
    with pytest.raises(SystemExit, match="prod"):
        prov.provision_from_ini(ini(FULL_INI), engine=_sqlite_engine_unit)

    guards.setenv("ALLOW_PROD_PROVISIONING", "true")
    summary = prov.provision_from_ini(ini(FULL_INI), engine=_sqlite_engine_unit)
    assert summary["user_created"] is True


def test_creates_super_admin_and_about(prov, ini, guards, Session, _sqlite_engine_unit):
    summary = prov.provision_from_ini(ini(FULL_INI), engine=_sqlite_engine_unit)
    assert summary == {"user_created": True, "about_created": True, "generated_password": None}

    with Session() as s:
        user = s.scalar(select(User).where(User.email == "paul@example.com"))
        assert user.role == "superAdmin"
        assert verify_password("supersecret1", user.password_hash)

        about = s.scalar(select(About))
        assert sorted(sec.type for sec in about.sections) == ["bio", "process"]


def test_is_idempotent(prov, ini, guards, Session, _sqlite_engine_unit):
    path = ini(FULL_INI)
    prov.provision_from_ini(path, engine=_sqlite_engine_unit)
    summary = prov.provision_from_ini(path, engine=_sqlite_engine_unit)
    assert summary["user_created"] is False
    assert summary["about_created"] is False

    with Session() as s:
        assert s.scalar(select(func.count()).select_from(User)) == 1
        assert s.scalar(select(func.count()).select_from(About)) == 1
        assert s.scalar(select(func.count()).select_from(SectionAbout)) == 2


def test_generates_password_and_secrets_file(prov, ini, guards, Session, _sqlite_engine_unit):
    path = ini("[super_admin]\nname = Paul\nemail = paul@example.com\npassword =\n")
    summary = prov.provision_from_ini(path, engine=_sqlite_engine_unit)

    generated = summary["generated_password"]
    assert generated
    secrets_file = path.with_name("cms.ini.generated.secrets.env")
    content = secrets_file.read_text(encoding="utf-8")
    assert f"ADMIN_PASSWORD={generated}" in content

    with Session() as s:
        user = s.scalar(select(User))
        assert verify_password(generated, user.password_hash)
        assert s.scalar(select(About)) is None


def test_rejects_unknown_section_type(prov, ini, guards, _sqlite_engine_unit):
    path = ini("[super_admin]\nname = P\nemail = p@example.com\n\n[about]\ncreate = true\nsections = bio, cv\n")
    with pytest.raises(SystemExit, match="cv"):
        prov.provision_from_ini(path, engine=_sqlite_engine_unit)


def test_requires_name_and_email(prov, ini, guards, _sqlite_engine_unit):
    with pytest.raises(SystemExit, match="requis"):
        prov.provision_from_ini(ini("[super_admin]\nemail = p@example.com\n"), engine=_sqlite_engine_unit)


@pytest.mark.parametrize("password", ["short", "é" * 40])
def test_rejects_ini_password_outside_bounds(prov, ini, guards, Session, _sqlite_engine_unit, password):
    path = ini(f"[super_admin]\nname = Paul\nemail = paul@example.com\npassword = {password}\n")
    with pytest.raises(SystemExit, match="password"):
        prov.provision_from_ini(path, engine=_sqlite_engine_unit)

    with Session() as s:
        assert s.scalar(select(func.count()).select_from(User)) == 0
