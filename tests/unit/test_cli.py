"""Tests for the naval-format CLI."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from naval_correspondence.cli import app
from naval_correspondence.config import BODY_FONT_ENV, LINE_WIDTH_ENV
from naval_correspondence.models.paragraph import Document, DocumentType
from naval_correspondence.storage import DocumentFile
from tests.unit.fakes import p

runner = CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(BODY_FONT_ENV, raising=False)
    monkeypatch.delenv(LINE_WIDTH_ENV, raising=False)


@pytest.fixture
def doc_path(tmp_path: Path, simple_doc: Document) -> Path:
    path = tmp_path / "body.json"
    DocumentFile(path).save(simple_doc)
    return path


def _load(path: Path) -> Document:
    return DocumentFile(path).load()


def test_new_creates_template(tmp_path: Path) -> None:
    path = tmp_path / "paper.json"

    result = runner.invoke(app, ["new", str(path), "--type", "decision_paper"])

    assert result.exit_code == 0, result.output
    assert "4 paragraph(s)" in result.output
    document = _load(path)
    assert document.document_type is DocumentType.DECISION_PAPER
    assert document.paragraphs[0].title == "BLUF"


def test_new_refuses_to_overwrite(doc_path: Path) -> None:
    result = runner.invoke(app, ["new", str(doc_path)])

    assert result.exit_code == 1
    assert "already exists" in result.output
    assert len(_load(doc_path)) == 4


def test_new_dry_run(tmp_path: Path) -> None:
    path = tmp_path / "letter.json"
    result = runner.invoke(app, ["new", str(path), "--dry-run"])

    assert result.exit_code == 0
    assert not path.exists()


def test_show_fixed_font(doc_path: Path) -> None:
    result = runner.invoke(app, ["show", str(doc_path), "--font", "fixed"])

    assert result.exit_code == 0, result.output
    assert "        (1) D" in result.output
    assert "    a.  B" in result.output


def test_show_ids(doc_path: Path) -> None:
    result = runner.invoke(app, ["show", str(doc_path), "--ids"])

    assert result.exit_code == 0
    assert "    (1)    id=4" in result.output


def test_show_json(doc_path: Path) -> None:
    result = runner.invoke(app, ["show", str(doc_path), "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert [d["citation"] for d in data] == ["1.", "a.", "b.", "(1)"]
    assert data[3]["reference"] == "1b(1)"


def test_show_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["show", str(tmp_path / "missing.json")])
    assert result.exit_code == 1


def test_validate_reports_lone_subparagraph(doc_path: Path) -> None:
    result = runner.invoke(app, ["validate", str(doc_path)])

    assert result.exit_code == 0
    assert "Paragraph 1b(1) requires at least one sibling paragraph" in result.stdout


def test_validate_strict_fails(doc_path: Path) -> None:
    result = runner.invoke(app, ["validate", str(doc_path), "--strict"])
    assert result.exit_code == 1


def test_validate_clean_document(tmp_path: Path) -> None:
    path = tmp_path / "clean.json"
    DocumentFile(path).save(Document(paragraphs=(p(1, 1), p(2, 2), p(3, 2))))

    result = runner.invoke(app, ["validate", str(path), "--strict"])

    assert result.exit_code == 0
    assert "No numbering issues found." in result.stdout


def test_add_child_with_text(doc_path: Path) -> None:
    result = runner.invoke(
        app, ["add", str(doc_path), "--after", "4", "--mode", "sibling", "--text", "E"]
    )

    assert result.exit_code == 0, result.output
    assert "Added paragraph 1b(2) (id=5)." in result.stdout
    assert [q.content for q in _load(doc_path)] == ["A", "B", "C", "D", "E"]


def test_add_unknown_anchor(doc_path: Path) -> None:
    result = runner.invoke(app, ["add", str(doc_path), "--after", "42"])

    assert result.exit_code == 1
    assert "No paragraph with id 42" in result.stdout


def test_remove_with_issues_needs_force(doc_path: Path) -> None:
    result = runner.invoke(app, ["remove", str(doc_path), "3"])

    assert result.exit_code == 1
    assert "Nothing removed" in result.stdout
    assert len(_load(doc_path)) == 4

    forced = runner.invoke(app, ["remove", str(doc_path), "3", "--force"])
    assert forced.exit_code == 0
    assert "Removed paragraph 3." in forced.stdout
    assert [q.id for q in _load(doc_path)] == [1, 2, 4]


def test_remove_mandatory_paragraph(tmp_path: Path, mfr_doc: Document) -> None:
    path = tmp_path / "memo.json"
    DocumentFile(path).save(mfr_doc)

    result = runner.invoke(app, ["remove", str(path), "1", "--force"])

    assert result.exit_code == 1
    assert "mandatory" in result.stdout
    assert len(_load(path)) == 3


def test_remove_sole_paragraph_clears_it(tmp_path: Path) -> None:
    path = tmp_path / "one.json"
    DocumentFile(path).save(Document(paragraphs=(p(1, 1, "Only."),)))

    result = runner.invoke(app, ["remove", str(path), "1"])

    assert result.exit_code == 0
    assert "content was cleared" in result.stdout
    assert _load(path).paragraphs[0].content == ""


def test_move_down_and_refused_up(doc_path: Path) -> None:
    moved = runner.invoke(app, ["move", str(doc_path), "2", "down"])
    assert moved.exit_code == 0
    assert "Moved paragraph 2 down." in moved.stdout
    assert [q.id for q in _load(doc_path)] == [1, 3, 2, 4]

    refused = runner.invoke(app, ["move", str(doc_path), "3", "up"])
    assert refused.exit_code == 0
    assert "cannot move up" in refused.stdout


def test_edit_normalizes_text(doc_path: Path) -> None:
    result = runner.invoke(app, ["edit", str(doc_path), "2", "Line one\nline two"])

    assert result.exit_code == 0
    assert _load(doc_path).get(2).content == "Line one line two"


def test_title_set_and_clear(doc_path: Path) -> None:
    runner.invoke(app, ["title", str(doc_path), "1", "Background"])
    assert _load(doc_path).get(1).title == "Background"

    runner.invoke(app, ["title", str(doc_path), "1"])
    assert _load(doc_path).get(1).title is None


@pytest.mark.parametrize("contents", ["[1, 2]", '{"paragraphs": ["a"]}'])
def test_show_wrongly_shaped_file(tmp_path: Path, contents: str) -> None:
    path = tmp_path / "bad.json"
    path.write_text(contents)

    result = runner.invoke(app, ["show", str(path)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_edit_and_title_confirm(doc_path: Path) -> None:
    edited = runner.invoke(app, ["edit", str(doc_path), "2", "New text"])
    assert "Updated paragraph 2." in edited.stdout

    titled = runner.invoke(app, ["title", str(doc_path), "2", "Scope"])
    assert "Set heading of paragraph 2." in titled.stdout

    cleared = runner.invoke(app, ["title", str(doc_path), "2"])
    assert "Cleared heading of paragraph 2." in cleared.stdout
