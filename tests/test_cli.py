"""Tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from resumify.cli import main


@pytest.fixture
def document_file(tmp_path: Path, sample_document: dict) -> Path:
    path = tmp_path / "resume.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


class TestLayouts:
    def test_lists_every_layout(self, capsys):
        assert main(["layouts"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 16
        assert lines[0].startswith("korina-villanueva")


class TestRender:
    def test_writes_page(self, document_file: Path, tmp_path: Path):
        output = tmp_path / "resume.html"
        assert main(["render", str(document_file), "--layout", "estelle-darcy", "-o", str(output)]) == 0
        page = output.read_text(encoding="utf-8")
        assert "<title>Jane Doe</title>" in page
        assert "resume--estelle-darcy" in page

    def test_unknown_layout_warns(self, document_file: Path, capsys):
        assert main(["render", str(document_file), "--layout", "nope"]) == 0
        captured = capsys.readouterr()
        assert "Unknown layout" in captured.err
        assert "resume--korina-villanueva" in captured.out

    def test_editable(self, document_file: Path, capsys):
        assert main(["render", str(document_file), "--editable"]) == 0
        assert 'contenteditable="true"' in capsys.readouterr().out

    def test_missing_file(self, tmp_path: Path, capsys):
        assert main(["render", str(tmp_path / "missing.json")]) == 1
        assert "Error" in capsys.readouterr().err

    def test_not_an_object(self, tmp_path: Path, capsys):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert main(["render", str(path)]) == 1
        assert "JSON object" in capsys.readouterr().err


class TestSet:
    def test_sets_string(self, document_file: Path, tmp_path: Path):
        output = tmp_path / "out.json"
        assert main(["set", str(document_file), "experience.0.company", "Initech", "-o", str(output)]) == 0
        document = json.loads(output.read_text(encoding="utf-8"))
        assert document["experience"][0]["company"] == "Initech"
        assert document["experience"][1]["company"] == "Globex"

    def test_sets_json_value(self, document_file: Path, capsys):
        assert main(["set", str(document_file), "experience.0.current", "true", "--json"]) == 0
        document = json.loads(capsys.readouterr().out)
        assert document["experience"][0]["current"] is True

    def test_conflict(self, document_file: Path, capsys):
        assert main(["set", str(document_file), "name.first", "Jane"]) == 1
        assert "name.first" in capsys.readouterr().err
