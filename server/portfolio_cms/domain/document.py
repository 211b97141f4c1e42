from __future__ import annotations
"""
server/portfolio_cms/domain/document.py

Champ "document" (texte riche, arbre de nœuds façon Slate) stocké en JSON.

Forme attendue :
    [
      {"type": "paragraph", "children": [{"text": "Bonjour "}, {"text": "monde", "bold": true}]},
      {"type": "layout", "layout": [1, 2], "children": [
          {"type": "layout-area", "children": [...]},
          {"type": "layout-area", "children": [...]},
      ]},
    ]

validate_document() vérifie que le document ne contient que les nœuds autorisés
par la configuration du champ (formatting / links / layouts / dividers) et
renvoie une copie normalisée. Toute violation lève InvalidInputError.
"""

from dataclasses import dataclass, field
from typing import Any

from portfolio_cms.core.errors import InvalidInputError

MARKS = frozenset(
    {"bold", "italic", "underline", "strikethrough", "code", "superscript", "subscript", "keyboard"}
)
FORMATTING_BLOCKS = frozenset(
    {"heading", "blockquote", "code", "ordered-list", "unordered-list", "list-item", "list-item-content"}
)
TEXT_ALIGN = frozenset({"center", "end"})


@dataclass(frozen=True)
class DocumentConfig:
    formatting: bool = False
    links: bool = False
    dividers: bool = False
    layouts: tuple[tuple[int, ...], ...] = field(default_factory=tuple)

    def allowed_types(self) -> frozenset[str]:
        allowed = {"paragraph"}
        if self.formatting:
            allowed |= FORMATTING_BLOCKS
        if self.links:
            allowed.add("link")
        if self.layouts:
            allowed |= {"layout", "layout-area"}
        if self.dividers:
            allowed.add("divider")
        return frozenset(allowed)

    def describe(self) -> dict[str, Any]:
        return {
            "formatting": self.formatting,
            "links": self.links,
            "dividers": self.dividers,
            "layouts": [list(layout) for layout in self.layouts],
        }


def empty_document() -> list[dict[str, Any]]:
    return [{"type": "paragraph", "children": [{"text": ""}]}]


def validate_document(value: Any, config: DocumentConfig) -> list[dict[str, Any]]:
    if value is None or value == []:
        return empty_document()
    if not isinstance(value, list):
        raise InvalidInputError("Le document doit être une liste de nœuds", code="invalid_document")

    allowed = config.allowed_types()
    return [_validate_element(node, config, allowed, path=f"[{i}]") for i, node in enumerate(value)]


def _fail(path: str, reason: str) -> InvalidInputError:
    return InvalidInputError(f"document{path}: {reason}", code="invalid_document")


def _validate_element(node: Any, config: DocumentConfig, allowed: frozenset[str], path: str) -> dict[str, Any]:
    if not isinstance(node, dict):
        raise _fail(path, "nœud invalide")
    if "text" in node:
        return _validate_text(node, config, path)

    node_type = node.get("type")
    if not isinstance(node_type, str):
        raise _fail(path, "type manquant")
    if node_type not in allowed:
        raise _fail(path, f"type '{node_type}' non autorisé pour ce champ")

    children = node.get("children")
    if not isinstance(children, list) or not children:
        raise _fail(path, "children doit être une liste non vide")

    if node_type == "heading":
        level = node.get("level")
        if not isinstance(level, int) or isinstance(level, bool) or not 1 <= level <= 6:
            raise _fail(path, "heading.level doit être compris entre 1 et 6")
    elif node_type == "link":
        href = node.get("href")
        if not isinstance(href, str) or not href.strip():
            raise _fail(path, "link.href requis")
    elif node_type == "layout":
        layout = node.get("layout")
        if not isinstance(layout, list) or tuple(layout) not in config.layouts:
            raise _fail(path, f"layout {layout!r} non configuré")
        if len(children) != len(layout):
            raise _fail(path, "le nombre de zones ne correspond pas au layout")
        for i, child in enumerate(children):
            if not isinstance(child, dict) or child.get("type") != "layout-area":
                raise _fail(f"{path}.children[{i}]", "une zone de layout est attendue")

    align = node.get("textAlign")
    if align is not None:
        if not config.formatting or align not in TEXT_ALIGN:
            raise _fail(path, f"textAlign {align!r} non autorisé")

    out = dict(node)
    out["children"] = [
        _validate_element(child, config, allowed, path=f"{path}.children[{i}]")
        for i, child in enumerate(children)
    ]
    return out


def _validate_text(node: dict[str, Any], config: DocumentConfig, path: str) -> dict[str, Any]:
    if not isinstance(node["text"], str):
        raise _fail(path, "text doit être une chaîne")
    for key, val in node.items():
        if key == "text":
            continue
        if key not in MARKS:
            raise _fail(path, f"marque inconnue '{key}'")
        if not config.formatting:
            raise _fail(path, "le formatage n'est pas activé pour ce champ")
        if not isinstance(val, bool):
            raise _fail(path, f"la marque '{key}' doit être un booléen")
    return dict(node)


# Configurations utilisées par les listes
STANDARD_LAYOUTS: tuple[tuple[int, ...], ...] = ((1, 1), (1, 2), (2, 1))

TEXTE_CONTENT = DocumentConfig(formatting=True, links=True, dividers=True, layouts=STANDARD_LAYOUTS)
RICH_CONTENT = DocumentConfig(formatting=True, links=True, layouts=STANDARD_LAYOUTS)
