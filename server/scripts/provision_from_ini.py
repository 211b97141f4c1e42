#!/usr/bin/env python3
from __future__ import annotations

"""
provision_from_ini.py

Provisionnement du CMS à partir d'un fichier INI.
Idempotent : relançable sans créer de doublons.

Fonctionnalités
---------------
- [super_admin]  : crée le compte super admin (idempotent sur email)
- [about]        : crée la page à propos et ses sections (si aucune page n'existe)

    [super_admin]
    name = Paul
    email = paul@example.com
    password =              ; vide => généré

    [about]
    create = true
    sections = bio, process, démarcheArtistique

Secrets
-------
- Si le mot de passe est vide => généré (token_urlsafe)
- Les secrets générés sont écrits dans : <ini>.generated.secrets.env

Garde-fous
----------
- PROVISION_CMS=true requis
- En prod (APP_ENV=production/prod) => refus sauf ALLOW_PROD_PROVISIONING=true

Connexion DB
------------
- DATABASE_URL (recommandé) sinon SQLALCHEMY_DATABASE_URI
"""

import configparser
import os
import secrets
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from sqlalchemy import create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from portfolio_cms.api.schemas.user import PASSWORD_MIN_LENGTH, check_password_bytes
from portfolio_cms.core.security import hash_password
from portfolio_cms.domain.choices import SectionAboutType, UserRole
from portfolio_cms.domain.document import empty_document
from portfolio_cms.infrastructure.persistence.database.models import About, SectionAbout, User


# ------------------------------- Guards / env --------------------------------

def _env(name: str, default: Optional[str] = None) -> str:
    v = os.getenv(name)
    if v is None:
        return default or ""
    return v.strip()


def _truthy(v: str) -> bool:
    return v.strip().lower() in {"1", "true", "yes", "y", "on"}


def _is_prod() -> bool:
    env = (_env("APP_ENV") or _env("ENV") or "").lower()
    return env in {"prod", "production"}


def _require_guards() -> None:
    if not _truthy(_env("PROVISION_CMS", "")):
        raise SystemExit(
            "Refus: PROVISION_CMS n'est pas activé. Mets PROVISION_CMS=true pour exécuter."
        )
    if _is_prod() and not _truthy(_env("ALLOW_PROD_PROVISIONING", "")):
        raise SystemExit(
            "Refus: prod détectée (APP_ENV=production). "
            "Pour autoriser explicitement : ALLOW_PROD_PROVISIONING=true."
        )


def _db_url() -> str:
    url = _env("DATABASE_URL") or _env("SQLALCHEMY_DATABASE_URI")
    if not url:
        raise SystemExit("DATABASE_URL (ou SQLALCHEMY_DATABASE_URI) est requis.")
    return url


def _engine() -> Engine:
    return create_engine(_db_url(), pool_pre_ping=True, future=True)


# ------------------------------ INI parsing ----------------------------------

def _read_ini(path: Path) -> configparser.ConfigParser:
    if not path.exists():
        raise SystemExit(f"INI introuvable: {path}")
    cfg = configparser.ConfigParser(inline_comment_prefixes=(";",))
    cfg.read(path, encoding="utf-8")
    return cfg


def _cfg_get(cfg: configparser.ConfigParser, section: str, key: str, default: str = "") -> str:
    if not cfg.has_section(section):
        return default
    return cfg.get(section, key, fallback=default).strip()


def _cfg_get_bool(cfg: configparser.ConfigParser, section: str, key: str, default: bool) -> bool:
    v = _cfg_get(cfg, section, key, str(default)).lower()
    if v in {"1", "true", "yes", "y", "on"}:
        return True
    if v in {"0", "false", "no", "n", "off"}:
        return False
    raise SystemExit(f"Valeur invalide pour [{section}] {key} (bool attendu): {v!r}")


def parse_about_sections(cfg: configparser.ConfigParser) -> List[str]:
    raw = _cfg_get(cfg, "about", "sections", "")
    allowed = {t.value for t in SectionAboutType}
    out: List[str] = []
    for item in (p.strip() for p in raw.split(",")):
        if not item:
            continue
        if item not in allowed:
            raise SystemExit(f"[about] sections: type inconnu {item!r} (attendu: {', '.join(sorted(allowed))})")
        out.append(item)
    return out


def gen_password() -> str:
    return secrets.token_urlsafe(24)


def check_ini_password(password: str) -> None:
    """Mêmes bornes que l'API : au moins PASSWORD_MIN_LENGTH caractères, 72 octets max (bcrypt)."""
    if len(password) < PASSWORD_MIN_LENGTH:
        raise SystemExit(f"[super_admin] password: au moins {PASSWORD_MIN_LENGTH} caractères requis.")
    try:
        check_password_bytes(password)
    except ValueError as exc:
        raise SystemExit(f"[super_admin] password: {exc}") from exc


# ------------------------------ Provision logic ------------------------------

def provision_from_ini(ini_path: Path, engine: Optional[Engine] = None) -> Dict[str, Any]:
    _require_guards()

    cfg = _read_ini(ini_path)

    admin_name = _cfg_get(cfg, "super_admin", "name")
    admin_email = _cfg_get(cfg, "super_admin", "email")
    admin_password = _cfg_get(cfg, "super_admin", "password", "")  # vide => généré
    if not admin_name or not admin_email:
        raise SystemExit("INI invalide: [super_admin] name et email sont requis.")
    if admin_password:
        check_ini_password(admin_password)

    create_about = _cfg_get_bool(cfg, "about", "create", False)
    about_sections = parse_about_sections(cfg)

    secrets_env_path = ini_path.with_suffix(ini_path.suffix + ".generated.secrets.env")
    engine = engine or _engine()

    print(f"== Provision via INI: {ini_path} ==")
    print(f"- super admin: {admin_email}")
    print(f"- about: {'oui' if create_about else 'non'} ({len(about_sections)} section(s))")
    print()

    summary: Dict[str, Any] = {"user_created": False, "about_created": False, "generated_password": None}

    with Session(engine) as s, s.begin():
        # 1) super admin (idempotent sur email)
        user = s.scalar(select(User).where(User.email == admin_email))
        if user is None:
            if not admin_password:
                admin_password = gen_password()
                summary["generated_password"] = admin_password
            s.add(
                User(
                    name=admin_name,
                    email=admin_email,
                    password_hash=hash_password(admin_password),
                    role=UserRole.SUPER_ADMIN.value,
                )
            )
            summary["user_created"] = True
        # NOTE: si le user existe déjà, on ne modifie pas son password/role ici

        # 2) page à propos (une seule)
        if create_about and s.scalar(select(About).limit(1)) is None:
            about = About()
            about.sections = [SectionAbout(type=t, content=empty_document()) for t in about_sections]
            s.add(about)
            summary["about_created"] = True

    if summary["generated_password"]:
        header = (
            f"# Generated secrets for {ini_path.name}\n"
            f"# WARNING: store securely (vault/secret manager). Do not commit.\n"
        )
        lines = [f"ADMIN_EMAIL={admin_email}", f"ADMIN_PASSWORD={summary['generated_password']}"]
        secrets_env_path.write_text(header + "\n".join(lines) + "\n", encoding="utf-8")
        print("✅ Secrets générés écrits dans :")
        print(f"   {secrets_env_path}")
    else:
        print("ℹ️ Aucun secret généré (tout existait déjà ou était fourni dans l'INI).")

    print("\nProvision terminé ✅")
    return summary


def main(argv: List[str]) -> None:
    if len(argv) != 2:
        raise SystemExit(
            "Usage: python server/scripts/provision_from_ini.py <path/to/cms.ini>\n"
            "Ex:    PROVISION_CMS=true APP_ENV=staging DATABASE_URL=... "
            "python server/scripts/provision_from_ini.py server/scripts/provisioning/portfolio.ini"
        )

    ini_path = Path(argv[1]).resolve()
    provision_from_ini(ini_path)


if __name__ == "__main__":
    main(sys.argv)
