"""Tests for the layout registry and the shared rendering behaviour."""

from __future__ import annotations

import copy
import re

import pytest

from resumify.constants import SECTIONS
from resumify.services.document_controller import DocumentController
from resumify.services.resume_data import empty_document
from resumify.templates import (
    DEFAULT_LAYOUT_ID,
    ResumeTemplate,
    get_template,
    is_registered,
    list_templates,
    template_ids,
)
from resumify.templates.page import render_page

ALL_LAYOUTS = template_ids()


def _leaf_values(node):
    """Every non-empty scalar of a document, as display text."""
    if isinstance(node, dict):
        for value in node.values():
            yield from _leaf_values(value)
    elif isinstance(node, list):
        for value in node:
            yield from _leaf_values(value)
    elif isinstance(node, bool) or node is None or node == "":
        return
    else:
        yield str(node)


def _bound_paths(template: ResumeTemplate, document) -> list[str]:
    """Paths bound by the editable leaves of one render."""
    calls: list[str] = []
    rendered = template.render(document, editable=True, on_change=lambda path, value: calls.append(path))
    for leaf in rendered.leaves:
        leaf.commit("x")
    return calls


class TestRegistry:
    def test_sixteen_layouts(self):
        assert len(ALL_LAYOUTS) == 16
        assert len(set(ALL_LAYOUTS)) == 16

    def test_default_first(self):
        assert ALL_LAYOUTS[0] == DEFAULT_LAYOUT_ID == "korina-villanueva"

    def test_ids_are_kebab_case(self):
        for layout_id in ALL_LAYOUTS:
            assert re.fullmatch(r"[a-z]+(-[a-z]+)*", layout_id), layout_id

    @pytest.mark.parametrize("layout_id", ["", None, "no-such-layout", "KORINA-VILLANUEVA"])
    def test_unknown_falls_back_to_default(self, layout_id):
        assert get_template(layout_id).layout_id == DEFAULT_LAYOUT_ID

    @pytest.mark.parametrize("layout_id", ALL_LAYOUTS)
    def test_lookup_by_id(self, layout_id):
        template = get_template(layout_id)
        assert isinstance(template, ResumeTemplate)
        assert template.layout_id == layout_id
        assert is_registered(layout_id)

    @pytest.mark.parametrize("layout_id", [{"id": "olivia-wilson"}, ["olivia-wilson"], 42, 1.5, True])
    def test_non_string_ids_fall_back_to_default(self, layout_id):
        assert get_template(layout_id).layout_id == DEFAULT_LAYOUT_ID
        assert not is_registered(layout_id)

    def test_is_registered_unknown(self):
        assert not is_registered("no-such-layout")
        assert not is_registered(None)

    def test_metadata(self):
        metadata = list_templates()
        assert [meta["id"] for meta in metadata] == ALL_LAYOUTS
        for meta in metadata:
            assert meta["name"]
            assert meta["description"]

    def test_known_names(self):
        names = {meta["id"]: meta["name"] for meta in list_templates()}
        assert names["olivia-wilson-dark-blue"] == "Olivia Wilson Dark Blue"
        assert names["phylis-flex"] == "Phylis Flex"


@pytest.mark.parametrize("layout_id", ALL_LAYOUTS)
class TestEveryLayout:
    def test_read_mode_shows_every_value(self, layout_id, sample_document):
        html = get_template(layout_id).render(sample_document).html
        missing = [value for value in _leaf_values(sample_document) if value not in html]
        assert missing == []

    def test_edit_mode_shows_every_value(self, layout_id, sample_document):
        html = get_template(layout_id).render(sample_document, editable=True).html
        missing = [value for value in _leaf_values(sample_document) if value not in html]
        assert missing == []

    @pytest.mark.parametrize("editable", [False, True])
    def test_every_section_shows_every_value(self, layout_id, full_document, editable):
        assert all(full_document[key] for key in SECTIONS)
        html = get_template(layout_id).render(full_document, editable=editable).html
        missing = [value for value in _leaf_values(full_document) if value not in html]
        assert missing == []

    def test_unknown_social_link_shown(self, layout_id, sample_document):
        sample_document["socialMedia"]["mastodon"] = "hachyderm.io/@janedoe"
        for editable in (False, True):
            html = get_template(layout_id).render(sample_document, editable=editable).html
            assert "hachyderm.io/@janedoe" in html

    def test_render_is_pure(self, layout_id, sample_document):
        before = copy.deepcopy(sample_document)
        template = get_template(layout_id)
        first = template.render(sample_document, editable=True)
        second = template.render(sample_document, editable=True)
        assert first.html == second.html
        assert len(first.leaves) == len(second.leaves)
        assert sample_document == before

    def test_wraps_in_article(self, layout_id, sample_document):
        rendered = get_template(layout_id).render(sample_document)
        assert rendered.html.startswith(f'<article class="resume resume--{layout_id}">')
        assert rendered.layout_id == layout_id
        assert not rendered.editable
        assert rendered.leaves == ()
        assert f".resume--{layout_id}" in rendered.stylesheet

    def test_read_mode_is_not_editable(self, layout_id, sample_document):
        html = get_template(layout_id).render(sample_document).html
        assert "contenteditable" not in html
        assert "data-leaf" not in html

    def test_handles_match_leaves(self, layout_id, sample_document):
        rendered = get_template(layout_id).render(sample_document, editable=True)
        handles = [int(h) for h in re.findall(r'data-leaf="(\d+)"', rendered.html)]
        assert sorted(handles) == list(range(len(rendered.leaves)))

    def test_current_job_shows_present(self, layout_id):
        controller = DocumentController(layout_id=layout_id)
        controller.on_change("name", "Jane Doe")
        controller.on_change("experience.0.company", "Acme")
        controller.on_change("experience.0.current", True)

        template = get_template(layout_id)
        html = controller.render().html
        assert "Jane Doe" in html
        assert "Acme" in html
        assert template.present_label in html

    def test_empty_sections_bind_first_row(self, layout_id):
        paths = _bound_paths(get_template(layout_id), empty_document())
        for path in ("name", "role", "summary", "experience.0.title", "education.0.degree", "skills.0.name"):
            assert path in paths

    def test_editing_empty_section_autovivifies(self, layout_id):
        handle = _bound_paths(get_template(layout_id), empty_document()).index("experience.0.title")
        controller = DocumentController(layout_id=layout_id)
        controller.render(editable=True)
        assert controller.commit_leaf(handle, "Engineer")
        assert controller.document["experience"] == [{"title": "Engineer"}]

    def test_records_keep_stored_order(self, layout_id):
        document = empty_document()
        document["experience"] = [
            {"title": "Zeta Role", "company": "Zeta Corp"},
            {"title": "Alpha Role", "company": "Alpha Corp"},
        ]
        html = get_template(layout_id).render(document).html
        assert html.index("Zeta Corp") < html.index("Alpha Corp")

    def test_derived_role_not_written_back(self, layout_id):
        document = empty_document()
        document["experience"] = [{"title": "Data Scientist", "company": "Acme"}]
        before = copy.deepcopy(document)

        html = get_template(layout_id).render(document).html
        assert re.search(r'class="leaf r-role[^"]*">Data Scientist<', html)

        edit_html = get_template(layout_id).render(document, editable=True).html
        assert re.search(r'r-role[^"]*leaf--empty" contenteditable="true" data-placeholder="Data Scientist"', edit_html)
        assert document == before


class TestDisplayRules:
    def test_education_year_offsets(self):
        document = empty_document()
        document["education"] = [{"degree": "BSc", "institution": "Kelowna University", "year": 2020}]
        assert "2018 - 2020" in get_template("korina-villanueva").render(document).html
        assert "2016 - 2020" in get_template("adora-montminy").render(document).html
        assert "2017 - 2020" in get_template("olivia-wilson").render(document).html
        assert "2019 - 2020" in get_template("richard-sanchez-new").render(document).html

    def test_preformatted_year_range(self):
        document = empty_document()
        document["education"] = [{"degree": "BSc", "year": "2012 - 2016"}]
        assert "2012 - 2016" in get_template("estelle-darcy").render(document).html

    def test_open_end_date(self):
        document = empty_document()
        document["experience"] = [{"title": "Engineer", "company": "Acme", "startDate": "2019"}]
        assert "2019 - Present" in get_template("korina-villanueva").render(document).html
        olivia = get_template("olivia-wilson").render(document).html
        assert "2019" in olivia
        assert "2019 - Present" not in olivia

    def test_present_label_casing(self):
        document = empty_document()
        document["experience"] = [{"title": "Engineer", "startDate": "2019", "current": True}]
        assert "2019 - PRESENT" in get_template("francisco-andrade").render(document).html
        assert "2019 - present" in get_template("juliana-silva").render(document).html

    def test_examples_in_read_mode(self):
        html = get_template("donna-stroupe").render(empty_document()).html
        assert "Wardiere University" in html
        assert "r-record--example" in html

    def test_examples_never_editable(self):
        html = get_template("donna-stroupe").render(empty_document(), editable=True).html
        assert "Wardiere University" not in html

    def test_empty_sections_render_nothing(self):
        for layout_id in ("korina-villanueva", "catrine-ziv"):
            html = get_template(layout_id).render(empty_document()).html
            assert "r-section--education" not in html
            assert "r-record" not in html

    def test_skill_dots(self):
        document = empty_document()
        document["skills"] = [{"name": "Python", "level": "Advanced"}]
        html = get_template("korina-villanueva").render(document).html
        assert html.count("r-dot r-dot--filled") == 4
        assert html.count('<i class="r-dot">') == 1

    def test_stored_role_wins(self, sample_document):
        html = get_template("jamie-chastain").render(sample_document).html
        assert re.search(r'class="leaf r-role[^"]*">Platform Engineer<', html)

    def test_social_links_offered_in_edit_mode(self):
        paths = _bound_paths(get_template("korina-villanueva"), empty_document())
        assert {"socialMedia.linkedin", "socialMedia.github", "socialMedia.portfolio"} <= set(paths)

    def test_commit_unknown_handle(self, sample_document):
        rendered = get_template("phylis-flex").render(sample_document, editable=True)
        with pytest.raises(IndexError):
            rendered.commit(len(rendered.leaves), "x")


class TestPage:
    def test_read_only_page(self, sample_document):
        rendered = get_template("claudia-alves").render(sample_document)
        page = render_page(rendered, title="Jane Doe")
        assert page.startswith("<!DOCTYPE html>")
        assert "<title>Jane Doe</title>" in page
        assert rendered.stylesheet in page
        assert str(rendered.html) in page
        assert "<script>" not in page

    def test_editable_page_posts_commits(self, sample_document):
        rendered = get_template("claudia-alves").render(sample_document, editable=True)
        page = render_page(rendered, commit_url="/api/documents/abc/leaves/__HANDLE__")
        assert "<script>" in page
        assert "/api/documents/abc/leaves/__HANDLE__" in page

    def test_title_escaped(self, sample_document):
        rendered = get_template("claudia-alves").render(sample_document)
        assert "<title>A &amp; B</title>" in render_page(rendered, title="A & B")
