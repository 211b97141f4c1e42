from __future__ import annotations
"""server/portfolio_cms/main.py
~~~~~~~~~~~~~~~~~~~~~~~~
Point d'entrée FastAPI.

- API REST sous /api/v1
- stockage des images servi en statique sur IMAGES_SERVER_ROUTE
- CORS : une seule origine (CORS_ORIGIN), cookies autorisés
"""
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from portfolio_cms.api.v1.router import api_router
from portfolio_cms.core.config import settings
from portfolio_cms.core.logging import setup_logging
from portfolio_cms.core.middleware import install_global_middleware

app = FastAPI(title="Portfolio CMS", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CORS_ORIGIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
install_global_middleware(app)

images_dir = Path(settings.IMAGES_STORAGE_PATH)
images_dir.mkdir(parents=True, exist_ok=True)
app.mount(settings.IMAGES_SERVER_ROUTE, StaticFiles(directory=images_dir), name="images")


@app.on_event("startup")
async def startup() -> None:
    setup_logging()


app.include_router(api_router, prefix="/api/v1")
