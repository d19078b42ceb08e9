"""Tests for the dotted-path document mutator."""

from __future__ import annotations

import copy

import pytest

from resumify.services.path_mutator import PathError, get_value, mutate, parse_path


class TestParsePath:
    def test_mixed_segments(self):
        assert parse_path("experience.10.title") == ("experience", 10, "title")

    def test_single_key(self):
        assert parse_path("name") == ("name",)

    def test_negative_index_is_a_key(self):
        assert parse_path("skills.-1") == ("skills", "-1")

    @pytest.mark.parametrize("path", ["", "experience..title", ".name", "name."])
    def test_empty_segments_rejected(self, path):
        with pytest.raises(PathError):
            parse_path(path)


class TestMutate:
    def test_sets_top_level_scalar(self, sample_document):
        updated = mutate(sample_document, "name", "John Roe")
        assert updated["name"] == "John Roe"

    def test_sets_nested_leaf(self, sample_document):
        updated = mutate(sample_document, "experience.1.company", "Initech")
        assert updated["experience"][1]["company"] == "Initech"
        assert updated["experience"][1]["title"] == "Senior Engineer"

    def test_input_document_untouched(self, sample_document):
        before = copy.deepcopy(sample_document)
        mutate(sample_document, "experience.0.title", "Lead")
        assert sample_document == before

    def test_idempotent(self, sample_document):
        once = mutate(sample_document, "skills.1.level", "Advanced")
        twice = mutate(once, "skills.1.level", "Advanced")
        assert once == twice

    def test_locality(self, sample_document):
        updated = mutate(sample_document, "experience.0.title", "Lead")
        for key, value in sample_document.items():
            if key != "experience":
                assert updated[key] == value
        assert updated["experience"][1] == sample_document["experience"][1]
        assert {k: v for k, v in updated["experience"][0].items() if k != "title"} == {
            k: v for k, v in sample_document["experience"][0].items() if k != "title"
        }

    def test_siblings_are_shared(self, sample_document):
        updated = mutate(sample_document, "experience.0.title", "Lead")
        assert updated is not sample_document
        assert updated["experience"] is not sample_document["experience"]
        assert updated["education"] is sample_document["education"]
        assert updated["experience"][1] is sample_document["experience"][1]

    def test_locality_across_two_edits(self, sample_document):
        updated = mutate(mutate(sample_document, "experience.0.title", "Lead"), "skills.1.level", "Advanced")
        assert updated["experience"][0]["title"] == "Lead"
        assert updated["skills"][1] == {"name": "SQL", "level": "Advanced"}
        for key, value in sample_document.items():
            if key not in ("experience", "skills"):
                assert updated[key] == value
        assert updated["experience"][1] == sample_document["experience"][1]
        assert updated["skills"][0] == sample_document["skills"][0]
        assert updated["education"] is sample_document["education"]

    def test_autovivifies_list_rows(self):
        updated = mutate({"projects": []}, "projects.2.name", "Ledger")
        assert updated["projects"] == [{}, {}, {"name": "Ledger"}]

    def test_autovivifies_nested_list_row(self):
        assert mutate({}, "grid.0.0", "x") == {"grid": [["x"]]}
        assert mutate({"grid": [["a"]]}, "grid.2.1", "z") == {"grid": [["a"], {}, [{}, "z"]]}

    def test_appends_next_row(self, sample_document):
        updated = mutate(sample_document, "education.1.degree", "MSc")
        assert len(updated["education"]) == 2
        assert updated["education"][1] == {"degree": "MSc"}

    def test_creates_missing_map(self):
        assert mutate({}, "socialMedia.github", "github.com/jane") == {"socialMedia": {"github": "github.com/jane"}}

    def test_creates_missing_list(self):
        assert mutate({}, "awards.0.name", "Best Paper") == {"awards": [{"name": "Best Paper"}]}

    def test_replaces_none_intermediate(self):
        assert mutate({"socialMedia": None}, "socialMedia.blog", "b.dev") == {"socialMedia": {"blog": "b.dev"}}

    def test_non_string_values(self, sample_document):
        updated = mutate(sample_document, "experience.0.current", True)
        assert updated["experience"][0]["current"] is True
        updated = mutate(updated, "education.0.year", 2021)
        assert updated["education"][0]["year"] == 2021


class TestMutateShapeConflicts:
    def test_index_into_map(self):
        doc = {"socialMedia": {"github": "g"}}
        with pytest.raises(PathError) as excinfo:
            mutate(doc, "socialMedia.0", "x")
        assert excinfo.value.segment == 0
        assert excinfo.value.found == "map"
        assert excinfo.value.path == "socialMedia.0"

    def test_key_into_list(self, sample_document):
        with pytest.raises(PathError) as excinfo:
            mutate(sample_document, "experience.title", "x")
        assert excinfo.value.found == "sequence"

    def test_key_into_empty_list(self):
        with pytest.raises(PathError) as excinfo:
            mutate({"skills": []}, "skills.name", "Go")
        assert excinfo.value.found == "sequence"
        assert excinfo.value.segment == "name"

    def test_descend_into_scalar(self, sample_document):
        with pytest.raises(PathError) as excinfo:
            mutate(sample_document, "name.first", "Jane")
        assert excinfo.value.found == "str"

    def test_negative_index_rejected(self, sample_document):
        with pytest.raises(PathError):
            mutate(sample_document, "skills.-1.name", "Go")

    def test_document_untouched_on_conflict(self, sample_document):
        before = copy.deepcopy(sample_document)
        with pytest.raises(PathError):
            mutate(sample_document, "experience.0.title.x", "y")
        assert sample_document == before

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            mutate({}, "", "x")


class TestGetValue:
    def test_reads_leaf(self, sample_document):
        assert get_value(sample_document, "experience.1.company") == "Globex"

    def test_missing_returns_default(self, sample_document):
        assert get_value(sample_document, "experience.9.company") is None
        assert get_value(sample_document, "awards.0.name", "") == ""
        assert get_value(sample_document, "socialMedia.blog", "n/a") == "n/a"

    def test_conflict_raises(self, sample_document):
        with pytest.raises(PathError):
            get_value(sample_document, "experience.title")
