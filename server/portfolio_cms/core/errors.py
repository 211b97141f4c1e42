from __future__ import annotations
"""server/portfolio_cms/core/errors.py
~~~~~~~~~~~~~~~~~~~~~~~~
Exceptions métier du CMS.

Chaque exception porte un `status_code` HTTP et un `code` court
(ex: "access_denied"), rendus tels quels par le handler installé
dans core/middleware.py :

    {"detail": "<code>", "message": "<texte lisible>"}
"""


class CMSError(Exception):
    status_code: int = 400
    code: str = "cms_error"

    def __init__(self, message: str | None = None, *, code: str | None = None) -> None:
        self.message = message or self.code
        if code:
            self.code = code
        super().__init__(self.message)


class ConfigurationError(CMSError):
    """Configuration incomplète au démarrage (ex: DATABASE_URL vide)."""
    status_code = 500
    code = "configuration_error"


class AccessDeniedError(CMSError):
    """
    Opération refusée par un prédicat d'accès.
    401 sans session, 403 avec une session insuffisante.
    """
    code = "access_denied"

    def __init__(self, list_key: str, operation: str, *, authenticated: bool) -> None:
        self.list_key = list_key
        self.operation = operation
        self.authenticated = authenticated
        self.status_code = 403 if authenticated else 401
        super().__init__(f"{operation} refusé sur {list_key}")


class NotFoundError(CMSError):
    status_code = 404
    code = "not_found"


class ConflictError(CMSError):
    status_code = 409
    code = "conflict"


class InvalidInputError(CMSError):
    status_code = 422
    code = "invalid_input"
