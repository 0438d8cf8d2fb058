"""Tests for the Document node tree"""
import pytest
from markupsafe import Markup

from ui.document import Document, Node


class TestNode:

    def test_render_escapes_text_and_attributes(self):
        node = Node("a", {"href": "/x?a=1&b=2", "title": '"q"'}, text="<tag>")
        assert node.render() == '<a href="/x?a=1&amp;b=2" title="&#34;q&#34;">&lt;tag&gt;</a>'

    def test_raw_markup_passthrough(self):
        assert Node.raw("<em>ok</em>").render() == Markup("<em>ok</em>")

    def test_void_tag(self):
        assert Node("img", {"src": "a.png"}).render() == '<img src="a.png">'

    def test_append_moves_child_between_parents(self):
        first, second, child = Node("div"), Node("div"), Node("span")
        first.append_child(child)
        second.append_child(child)

        assert child.parent is second
        assert first.children == []

    def test_remove_foreign_child_raises(self):
        with pytest.raises(ValueError):
            Node("div").remove_child(Node("span"))

    def test_text_node(self):
        assert Node.text_node("a < b").render() == "a &lt; b"


class TestDocument:

    def test_create_element_maps_keyword_attributes(self):
        node = Document().create_element("div", id="modal-root", class_="layer", aria_label="Dialogs")
        assert node.attrs == {"id": "modal-root", "class": "layer", "aria-label": "Dialogs"}

    def test_get_element_by_id_searches_descendants(self):
        document = Document()
        wrapper = document.body.append_child(Node("div"))
        target = wrapper.append_child(Node("span", {"id": "deep"}))

        assert document.get_element_by_id("deep") is target
        assert document.get_element_by_id("missing") is None
        assert document.contains(target)

    def test_render_body_omits_body_tag(self):
        document = Document()
        document.body.append_child(Node("p", text="hi"))
        assert document.render_body() == "<p>hi</p>"
