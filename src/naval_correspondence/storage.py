"""Read and write the working JSON file of a correspondence body."""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from naval_correspondence.models.paragraph import Document, DocumentType, Paragraph


def _parse_paragraph(raw: Any) -> Paragraph:
    if not isinstance(raw, dict):
        msg = f"Paragraph entries must be objects, got {type(raw).__name__}"
        raise ValueError(msg)
    try:
        return Paragraph(
            id=int(raw["id"]),
            level=int(raw.get("level", 1)),
            content=str(raw.get("content", "")),
            title=raw.get("title") or None,
            is_mandatory=bool(raw.get("is_mandatory", False)),
        )
    except TypeError as e:
        msg = f"Malformed paragraph entry {raw!r}: {e}"
        raise ValueError(msg) from e


def parse_document_data(data: Any) -> Document:
    """Build a Document from its JSON form.

    Args:
        data: Dict with ``paragraphs`` and optionally ``next_id`` and ``document_type``.

    Returns:
        The Document. Data of the wrong shape, levels outside 1..8 or duplicate
        ids raise ValueError.
    """
    if not isinstance(data, dict):
        msg = f"Document data must be an object, got {type(data).__name__}"
        raise ValueError(msg)
    raw_paragraphs = data.get("paragraphs")
    if not isinstance(raw_paragraphs, list):
        msg = "Document data must contain a 'paragraphs' list"
        raise ValueError(msg)

    paragraphs = tuple(_parse_paragraph(raw) for raw in raw_paragraphs)
    return Document(
        paragraphs=paragraphs,
        next_id=int(data.get("next_id", 0)),
        document_type=DocumentType(data.get("document_type", DocumentType.LETTER)),
    )


def document_to_data(document: Document) -> dict[str, Any]:
    paragraphs: list[dict[str, Any]] = []
    for p in document.paragraphs:
        raw: dict[str, Any] = {"id": p.id, "level": p.level, "content": p.content}
        if p.title:
            raw["title"] = p.title
        if p.is_mandatory:
            raw["is_mandatory"] = True
        paragraphs.append(raw)
    return {
        "document_type": str(document.document_type),
        "next_id": document.next_id,
        "paragraphs": paragraphs,
    }


class DocumentFile:
    """A document stored as JSON on disk.

    Writes are skipped when the contents did not change, and entirely under
    ``dry_run``.
    """

    def __init__(self, path: str | Path, *, dry_run: bool = False) -> None:
        self.path = Path(path).expanduser()
        self.dry_run = dry_run

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Document:
        if not self.path.is_file():
            msg = f"Document file {str(self.path)!r} not found"
            raise FileNotFoundError(msg)
        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)
        return parse_document_data(data)

    def save(self, document: Document) -> bool:
        """Write the document. Returns True when the file changed."""
        contents = json.dumps(document_to_data(document), sort_keys=True, indent=4) + "\n"
        if self.path.is_file() and self.path.read_text(encoding="utf-8") == contents:
            logger.debug("Unchanged: {}", self.path)
            return False
        if self.dry_run:
            logger.info("Dry run, not writing {}", self.path)
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(contents, encoding="utf-8")
        tmp.replace(self.path)
        logger.debug("Wrote {}", self.path)
        return True
