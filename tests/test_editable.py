"""Tests for the EditableText leaf."""

from __future__ import annotations

from resumify.templates.editable import EditableText


class TestReadMode:
    def test_plain_value(self):
        html = EditableText("Jane Doe", "Your Name", False).render()
        assert html == '<span class="leaf">Jane Doe</span>'

    def test_escapes_markup(self):
        html = EditableText("<b>bold</b>", "", False).render()
        assert "<b>" not in html
        assert "&lt;b&gt;bold&lt;/b&gt;" in html

    def test_empty_renders_nothing(self):
        assert EditableText("", "Your Name", False).render() == ""
        assert EditableText(None, "Your Name", False).render() == ""

    def test_empty_with_placeholder(self):
        html = EditableText("", "Your Name", False, show_placeholder=True).render()
        assert "leaf--placeholder" in html
        assert "Your Name" in html

    def test_multiline_keeps_lines(self):
        html = EditableText("first\nsecond", "", False, multiline=True).render()
        assert "<div>first</div><div>second</div>" in html

    def test_number_value(self):
        assert "2020" in EditableText(2020, "Year", False).render()

    def test_css_class(self):
        html = EditableText("x", "", False, css_class="r-name").render()
        assert 'class="leaf r-name"' in html


class TestEditMode:
    def test_contenteditable_with_handle(self):
        html = EditableText("Jane", "Your Name", True, lambda v: None).render(handle=3)
        assert 'contenteditable="true"' in html
        assert 'data-placeholder="Your Name"' in html
        assert 'data-leaf="3"' in html
        assert "leaf--empty" not in html

    def test_empty_value_marked(self):
        html = EditableText("", "Company", True, lambda v: None).render()
        assert "leaf--empty" in html
        assert "data-leaf" not in html

    def test_multiline_uses_div(self):
        html = EditableText("text", "", True, lambda v: None, multiline=True).render()
        assert html.startswith("<div")
        assert 'data-multiline="true"' in html

    def test_placeholder_escaped(self):
        html = EditableText("", 'Say "hi"', True, lambda v: None).render()
        assert 'data-placeholder="Say &#34;hi&#34;"' in html


class TestCommit:
    def test_forwards_value(self):
        received = []
        EditableText("", "", True, received.append).commit("Acme")
        assert received == ["Acme"]

    def test_single_line_collapses_breaks(self):
        received = []
        EditableText("", "", True, received.append).commit("Acme\nCorp")
        assert received == ["Acme Corp"]

    def test_multiline_keeps_breaks(self):
        received = []
        EditableText("", "", True, received.append, multiline=True).commit("a\nb")
        assert received == ["a\nb"]

    def test_non_string_passes_through(self):
        received = []
        EditableText("", "", True, received.append).commit(True)
        assert received == [True]

    def test_without_callback_is_noop(self):
        EditableText("x", "", False).commit("y")
