"""Tests for the element model and document tree."""

import pytest

from slide_theme import Document, Element, ElementType
from slide_theme.exceptions import UnknownElementTypeError


def test_element_type_from_name():
    """Test tag lookup by value, member name, and loose spelling."""
    assert ElementType.from_name("HeadLine") is ElementType.HEADLINE
    assert ElementType.from_name("HEADLINE") is ElementType.HEADLINE
    assert ElementType.from_name("title_slide") is ElementType.TITLE_SLIDE
    assert ElementType.from_name("horizontal-rule") is ElementType.HORIZONTAL_RULE
    assert ElementType.from_name(ElementType.SLIDE) is ElementType.SLIDE


def test_element_type_unknown_name():
    """Test that an unknown tag name raises and names the tag."""
    with pytest.raises(UnknownElementTypeError) as exc:
        ElementType.from_name("Footer")
    assert "Footer" in str(exc.value)


def test_classification_includes_ancestors():
    """Test that classification adds ancestor kinds to the element's own."""
    head = Element.of("HeadLine")
    assert head.classification() == {ElementType.HEADLINE}
    assert head.classification([ElementType.DOCUMENT, ElementType.SLIDE]) == {
        ElementType.DOCUMENT, ElementType.SLIDE, ElementType.HEADLINE
    }


def test_prop_set_overwrites():
    """Test that setting a property twice keeps the last value."""
    element = Element.of("Paragraph")
    element.prop_set("align", "left")
    element.prop_set("align", "center")
    assert element.properties == {"align": "center"}
    assert element.prop_get("missing", "none") == "none"


def test_walk_skips_deleted_subtrees():
    """Test that a deleted element hides its children too."""
    body = Element.of("Body", Element.of("Paragraph"), Element.of("Paragraph"))
    slide = Element.of("Slide", Element.of("HeadLine"), body)
    body.delete()
    assert [e.type_tag for e in slide.walk()] == [ElementType.SLIDE, ElementType.HEADLINE]


def test_render_tree_prunes_deleted():
    """Test that deleted elements are left out of the render tree."""
    rule = Element.of("HorizontalRule")
    deck = Document(title="Deck", slides=[
        Element.of("Slide", Element.of("HeadLine", text="Hi"), rule),
    ])
    rule.delete()
    assert deck.render_tree() == {
        'title': 'Deck',
        'slides': [{'type': 'Slide', 'children': [{'type': 'HeadLine', 'text': 'Hi'}]}],
    }


def test_to_dict_keeps_deleted_flag():
    """Test that the full dump keeps deleted elements, flagged."""
    rule = Element.of("HorizontalRule")
    deck = Document(slides=[Element.of("Slide", rule)])
    rule.delete()
    data = deck.to_dict()
    assert data['slides'][0]['children'][0] == {'type': 'HorizontalRule', 'deleted': True}


def test_document_from_dict():
    """Test building a tree from plain data, as loaded from a file."""
    deck = Document.from_dict({
        'title': 'From data',
        'slides': [
            {'type': 'TitleSlide', 'children': [{'type': 'Title', 'text': 'Hello'}]},
            {'type': 'Slide', 'properties': {'font-size': 12}},
        ],
    })
    assert deck.slides[0].children[0].text == 'Hello'
    assert deck.slides[1].properties == {'font-size': '12'}
    assert Document.from_dict(deck.to_dict()).to_dict() == deck.to_dict()


def test_document_from_dict_unknown_type():
    """Test that an unknown element type in data is rejected."""
    with pytest.raises(ValueError):
        Document.from_dict({'slides': [{'type': 'Footer'}]})


def test_numeric_text_becomes_string():
    """Test that a YAML number used as element text loads as text."""
    deck = Document.from_dict({
        'slides': [{'type': 'Slide', 'children': [
            {'type': 'HeadLine', 'text': 2024},
            {'type': 'Paragraph', 'text': 3.14},
        ]}],
    })
    assert [c.text for c in deck.slides[0].children] == ['2024', '3.14']


def test_null_property_value_rejected():
    """Test that a property with no value is refused rather than stored as 'None'."""
    with pytest.raises(ValueError):
        Document.from_dict({'slides': [{'type': 'Slide', 'properties': {'align': None}}]})
