from __future__ import annotations
"""server/portfolio_cms/domain/choices.py
~~~~~~~~~~~~~~~~~~~~~~~~
Ensembles de valeurs des champs `select` (valeur stockée + libellé admin).
"""
from enum import Enum


class UserRole(str, Enum):
    ADMIN = "admin"
    SUPER_ADMIN = "superAdmin"


class SectionNumber(str, Enum):
    FIRST = "1"
    SECOND = "2"
    THIRD = "3"
    FOURTH = "4"


class SectionAboutType(str, Enum):
    BIO = "bio"
    PROCESS = "process"
    DEMARCHE_ARTISTIQUE = "démarcheArtistique"


LABELS: dict[Enum, str] = {
    UserRole.ADMIN: "Admin",
    UserRole.SUPER_ADMIN: "Super Administrateur",
    SectionNumber.FIRST: "Première section",
    SectionNumber.SECOND: "Deuxième section",
    SectionNumber.THIRD: "Troisième section",
    SectionNumber.FOURTH: "Quatrième section",
    SectionAboutType.BIO: "Biographie",
    SectionAboutType.PROCESS: "Processus de création",
    SectionAboutType.DEMARCHE_ARTISTIQUE: "Démarche artistique",
}


def options_of(enum_cls: type[Enum]) -> list[dict[str, str]]:
    """[{label, value}, ...] dans l'ordre de déclaration."""
    return [{"label": LABELS[m], "value": m.value} for m in enum_cls]
