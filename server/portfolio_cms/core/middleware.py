from __future__ import annotations
"""server/portfolio_cms/core/middleware.py
~~~~~~~~~~~~~~~~~~~~~~~~
Middleware HTTP + handlers d'exceptions globaux.

- CMSError (et sous-classes) -> {"detail": code, "message": texte}, status de l'exception
- journalisation d'une ligne par requête (méthode, chemin, status, durée)
"""
import logging
import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from portfolio_cms.core.errors import CMSError

logger = logging.getLogger("portfolio_cms.http")


def install_global_middleware(app: FastAPI) -> None:
    @app.exception_handler(CMSError)
    async def cms_error_handler(request: Request, exc: CMSError) -> Response:
        if exc.status_code >= 500:
            logger.error("%s %s -> %s (%s)", request.method, request.url.path, exc.code, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.code, "message": exc.message},
        )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
