from __future__ import annotations
"""server/portfolio_cms/core/config.py
~~~~~~~~~~~~~~~~~~~~~~~~
Paramètres (pydantic-settings).

Lus une seule fois au démarrage (variables d'environnement puis `.env`),
puis exposés via l'objet module `settings`.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Base de données. Vide par défaut : init_engine() refuse de démarrer sans.
    DATABASE_URL: str = ""
    DB_CONNECT_TIMEOUT: int = 5

    # Sessions (cookie signé HS256)
    JWT_SECRET: str = "change-me-to-a-32-characters-secret"
    JWT_ALGORITHM: str = "HS256"
    SESSION_MAX_AGE_DAYS: int = 30
    SESSION_COOKIE: str = "portfolio-session"
    COOKIE_SECURE: bool = False

    # CORS : une seule origine autorisée, avec credentials
    CORS_ORIGIN: str = "http://localhost:5173"

    # Stockage local des images
    IMAGES_STORAGE_PATH: str = "public/images"
    IMAGES_SERVER_ROUTE: str = "/images"
    IMAGES_BASE_URL: str = "http://localhost:3000/images"

    # Admin UI
    ADMIN_LOGO_PATH: str = "/images/logo.svg"
    ADMIN_LOGO_ALT: str = "Paul-Krulic-Logo"

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

settings = Settings()
