import pytest

from portfolio_cms.core.errors import InvalidInputError
from portfolio_cms.domain.document import (
    RICH_CONTENT,
    TEXTE_CONTENT,
    DocumentConfig,
    empty_document,
    validate_document,
)

pytestmark = pytest.mark.unit


def _p(*children):
    return {"type": "paragraph", "children": list(children) or [{"text": ""}]}


def test_empty_values_become_an_empty_paragraph():
    assert validate_document(None, RICH_CONTENT) == empty_document()
    assert validate_document([], RICH_CONTENT) == empty_document()


def test_formatted_document_is_accepted():
    doc = [
        {"type": "heading", "level": 2, "children": [{"text": "Titre"}]},
        _p({"text": "Bonjour "}, {"text": "monde", "bold": True, "italic": True}),
        {"type": "paragraph", "textAlign": "center", "children": [
            {"type": "link", "href": "https://example.com", "children": [{"text": "lien"}]},
        ]},
        {"type": "unordered-list", "children": [
            {"type": "list-item", "children": [{"type": "list-item-content", "children": [{"text": "a"}]}]},
        ]},
    ]
    assert validate_document(doc, RICH_CONTENT) == doc


def test_layouts_must_be_configured_and_match_areas():
    area = {"type": "layout-area", "children": [_p()]}
    ok = [{"type": "layout", "layout": [1, 2], "children": [area, area]}]
    assert validate_document(ok, RICH_CONTENT) == ok

    with pytest.raises(InvalidInputError):
        validate_document([{"type": "layout", "layout": [1, 1, 1], "children": [area, area, area]}], RICH_CONTENT)
    with pytest.raises(InvalidInputError):
        validate_document([{"type": "layout", "layout": [2, 1], "children": [area]}], RICH_CONTENT)


def test_divider_only_where_enabled():
    doc = [{"type": "divider", "children": [{"text": ""}]}]
    assert validate_document(doc, TEXTE_CONTENT) == doc
    with pytest.raises(InvalidInputError) as exc:
        validate_document(doc, RICH_CONTENT)
    assert exc.value.code == "invalid_document"


def test_plain_config_rejects_marks_and_links():
    plain = DocumentConfig()
    with pytest.raises(InvalidInputError):
        validate_document([_p({"text": "x", "bold": True})], plain)
    with pytest.raises(InvalidInputError):
        validate_document([_p({"type": "link", "href": "/a", "children": [{"text": "a"}]})], plain)


@pytest.mark.parametrize(
    "doc",
    [
        "not a list",
        [{"children": [{"text": ""}]}],
        [{"type": "paragraph", "children": []}],
        [{"type": "heading", "level": 9, "children": [{"text": "x"}]}],
        [{"type": "paragraph", "children": [{"text": 3}]}],
        [{"type": "paragraph", "children": [{"text": "x", "sparkles": True}]}],
        [{"type": "paragraph", "textAlign": "left", "children": [{"text": "x"}]}],
    ],
)
def test_invalid_documents_are_rejected(doc):
    with pytest.raises(InvalidInputError):
        validate_document(doc, RICH_CONTENT)
