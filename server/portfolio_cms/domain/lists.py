from __future__ import annotations
"""
server/portfolio_cms/domain/lists.py

Déclaration des listes du CMS : champs, accès, métadonnées de l'admin.

C'est la source unique pour :
- le contrôle d'accès par opération (ListAccess)
- la visibilité d'une liste dans l'admin selon la session (ui_hidden)
- la description des champs renvoyée par /admin/config

La validation des entrées est portée par les schémas Pydantic (api/schemas),
dont les contraintes reprennent ces déclarations (requis, options, minimum).
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from portfolio_cms.domain.access import (
    ALLOW_ALL,
    ListAccess,
    SessionData,
    is_signed_in,
    is_super_admin,
)
from portfolio_cms.domain.choices import SectionAboutType, SectionNumber, UserRole, options_of
from portfolio_cms.domain.document import RICH_CONTENT, TEXTE_CONTENT, DocumentConfig

FIELD_KINDS = frozenset(
    {"text", "password", "timestamp", "select", "integer", "image", "relationship", "document"}
)


@dataclass(frozen=True)
class FieldSpec:
    name: str
    kind: str
    label: str
    required: bool = False
    description: str = ""
    default: Any = None
    options: tuple[dict[str, str], ...] = ()
    min: Optional[int] = None
    ref: Optional[str] = None
    many: bool = False
    read_only: bool = False
    document: Optional[DocumentConfig] = None

    def __post_init__(self) -> None:
        if self.kind not in FIELD_KINDS:
            raise ValueError(f"Unknown field kind {self.kind!r} for {self.name!r}")
        if self.kind == "select" and not self.options:
            raise ValueError(f"options required for select field {self.name!r}")
        if self.kind == "relationship" and not self.ref:
            raise ValueError(f"ref required for relationship field {self.name!r}")

    def describe(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "name": self.name,
            "kind": self.kind,
            "label": self.label,
            "required": self.required,
            "read_only": self.read_only,
        }
        if self.description:
            out["description"] = self.description
        if self.default is not None:
            out["default"] = self.default
        if self.options:
            out["options"] = list(self.options)
        if self.min is not None:
            out["min"] = self.min
        if self.ref:
            out["ref"] = self.ref
            out["many"] = self.many
        if self.document is not None:
            out["document"] = self.document.describe()
        return out


UiHidden = Callable[[Optional[SessionData]], bool]


def _never_hidden(session: Optional[SessionData]) -> bool:  # noqa: ARG001
    return False


def _hidden_unless_super_admin(session: Optional[SessionData]) -> bool:
    return not is_super_admin(session)


@dataclass(frozen=True)
class ListSpec:
    key: str
    path: str
    label: str
    plural: str
    fields: tuple[FieldSpec, ...]
    access: ListAccess = ALLOW_ALL
    ui_hidden: UiHidden = _never_hidden
    initial_columns: tuple[str, ...] = field(default_factory=tuple)

    def get_field(self, name: str) -> FieldSpec:
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(f"{self.key} has no field {name!r}")

    def describe(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "path": self.path,
            "label": self.label,
            "plural": self.plural,
            "initial_columns": list(self.initial_columns or [f.name for f in self.fields[:3]]),
            "fields": [f.describe() for f in self.fields],
        }


def _title_fields() -> tuple[FieldSpec, ...]:
    return (
        FieldSpec("title", "text", "Titre", required=True),
        FieldSpec("subtitle", "text", "Sous-titre", required=True),
    )


def _created_at() -> FieldSpec:
    return FieldSpec("created_at", "timestamp", "Créé le", default="now", read_only=True)


USER = ListSpec(
    key="User",
    path="users",
    label="Utilisateurs",
    plural="Utilisateurs",
    access=ListAccess(
        query=is_signed_in,
        create=is_super_admin,
        update=is_super_admin,
        delete=is_super_admin,
    ),
    ui_hidden=_hidden_unless_super_admin,
    initial_columns=("name", "email", "created_at", "role"),
    fields=(
        FieldSpec("name", "text", "Nom", required=True),
        FieldSpec("email", "text", "Email", required=True, description="Identifiant unique de connexion"),
        FieldSpec("password", "password", "Mot de passe", required=True),
        FieldSpec("created_at", "timestamp", "Créé le", default="now"),
        FieldSpec("role", "select", "Rôle", default=UserRole.ADMIN.value, options=tuple(options_of(UserRole))),
    ),
)

TEXTE = ListSpec(
    key="Texte",
    path="textes",
    label="Textes",
    plural="Textes",
    fields=(
        *_title_fields(),
        FieldSpec("content", "document", "Contenu du texte", document=TEXTE_CONTENT),
    ),
)

IMAGE = ListSpec(
    key="Image",
    path="images",
    label="Images",
    plural="Images",
    ui_hidden=_hidden_unless_super_admin,
    initial_columns=("file", "order", "owner"),
    fields=(
        FieldSpec("file", "image", "Fichier"),
        FieldSpec(
            "order",
            "integer",
            "Ordre d'affichage",
            min=1,
            description="Définissez l'ordre d'affichage de l'image dans le carrousel.",
        ),
        # un seul propriétaire parmi les quatre types de parent
        FieldSpec(
            "owner",
            "relationship",
            "Rattachement",
            ref="Exposition.images|SectionTravaux.image|SectionAbout.image|About.image",
            description="Exposition, section de travail, section ou page à propos liée (une seule).",
        ),
    ),
)

EXPOSITION = ListSpec(
    key="Exposition",
    path="expositions",
    label="Expositions",
    plural="Expositions",
    initial_columns=("title", "subtitle", "created_at"),
    fields=(
        *_title_fields(),
        FieldSpec("content", "document", "Contenu de l'exposition", document=RICH_CONTENT),
        _created_at(),
        FieldSpec("images", "relationship", "Images", ref="Image.exposition", many=True),
    ),
)

TRAVAUX = ListSpec(
    key="Travaux",
    path="travaux",
    label="Travail",
    plural="Travaux",
    initial_columns=("title", "subtitle", "created_at"),
    fields=(
        *_title_fields(),
        _created_at(),
        FieldSpec("sections", "relationship", "Sections du travail", ref="SectionTravaux.travaux", many=True),
    ),
)

SECTION_TRAVAUX = ListSpec(
    key="SectionTravaux",
    path="sections-travaux",
    label="Section d'un travail",
    plural="Sections d'un travail",
    initial_columns=("section", "travaux", "image"),
    fields=(
        FieldSpec("content", "document", "Contenu de la section", document=RICH_CONTENT),
        FieldSpec("section", "select", "Section", required=True, options=tuple(options_of(SectionNumber))),
        FieldSpec("travaux", "relationship", "Travail lié", ref="Travaux.sections"),
        FieldSpec("image", "relationship", "Image liée", ref="Image.sectionTravaux"),
    ),
)

ABOUT = ListSpec(
    key="About",
    path="about",
    label="Page à propos",
    plural="Pages à propos",
    access=ListAccess(
        query=is_signed_in,
        create=is_super_admin,
        update=is_signed_in,
        delete=is_super_admin,
    ),
    initial_columns=("image", "sections"),
    fields=(
        FieldSpec(
            "image",
            "relationship",
            "Image de la page à propos",
            ref="Image.about",
            description="Correspond à la première image de la page à propos",
        ),
        FieldSpec(
            "sections",
            "relationship",
            "Sections page à propos",
            ref="SectionAbout",
            many=True,
            description="Correspond aux différentes sections de la page à propos",
        ),
    ),
)

SECTION_ABOUT = ListSpec(
    key="SectionAbout",
    path="sections-about",
    label="Section de la page à propos",
    plural="Sections de la page à propos",
    initial_columns=("type", "image"),
    fields=(
        FieldSpec("type", "select", "Section visée", required=True, options=tuple(options_of(SectionAboutType))),
        FieldSpec(
            "content",
            "document",
            "Contenu de la section",
            document=RICH_CONTENT,
            description="Correspond au contenu de la section ciblé",
        ),
        FieldSpec("image", "relationship", "Image liée", ref="Image.sectionAbout"),
    ),
)

LISTS: dict[str, ListSpec] = {
    spec.key: spec
    for spec in (USER, TEXTE, IMAGE, EXPOSITION, TRAVAUX, SECTION_TRAVAUX, ABOUT, SECTION_ABOUT)
}


def visible_lists(session: Optional[SessionData]) -> list[ListSpec]:
    """Listes affichées dans l'admin pour cette session (ordre de déclaration)."""
    return [spec for spec in LISTS.values() if not spec.ui_hidden(session)]
