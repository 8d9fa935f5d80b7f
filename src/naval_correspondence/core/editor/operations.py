"""Structural edits on a Document.

Every operation is pure: it returns a new Document (or a Removal wrapping one)
and leaves its input untouched, so callers can snapshot for undo by keeping
the old value.
"""

import re
from dataclasses import replace

from loguru import logger

from naval_correspondence.core.numbering.validator import find_violations
from naval_correspondence.errors import MandatoryParagraphError, ParagraphNotFoundError
from naval_correspondence.models.paragraph import (
    MAX_LEVEL,
    MIN_LEVEL,
    Direction,
    Document,
    InsertMode,
    Paragraph,
    Removal,
)

# Non-breaking, figure and narrow no-break spaces pasted from word processors.
_SPECIAL_SPACES = str.maketrans({"\u00a0": " ", "\u2007": " ", "\u202f": " "})
_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_content(raw: str) -> str:
    """Flatten pasted text into a single line with single ordinary spaces."""
    # Line breaks and tabs are whitespace too, so they end up as one space.
    return _WHITESPACE_RUN.sub(" ", raw.translate(_SPECIAL_SPACES))


def _require_index(document: Document, paragraph_id: int) -> int:
    index = document.index_of(paragraph_id)
    if index is None:
        raise ParagraphNotFoundError(paragraph_id)
    return index


def level_for_insert(anchor_level: int, mode: InsertMode) -> int:
    """Level of a paragraph inserted after an anchor at ``anchor_level``."""
    if mode is InsertMode.MAIN:
        return MIN_LEVEL
    if mode is InsertMode.SIBLING:
        return anchor_level
    if mode is InsertMode.CHILD:
        return min(anchor_level + 1, MAX_LEVEL)
    if mode is InsertMode.PROMOTE:
        return max(anchor_level - 1, MIN_LEVEL)
    msg = f"Unknown insert mode: {mode!r}"
    raise ValueError(msg)


def insert_after(
    document: Document,
    after_id: int,
    mode: InsertMode,
) -> tuple[Document, Paragraph]:
    """Insert an empty paragraph right after ``after_id``.

    Returns the new document and the inserted paragraph. The new id comes from
    the document's counter, never from the ids currently present.
    """
    index = _require_index(document, after_id)
    anchor = document.paragraphs[index]
    new = Paragraph(id=document.next_id, level=level_for_insert(anchor.level, mode))
    paragraphs = (*document.paragraphs[: index + 1], new, *document.paragraphs[index + 1 :])
    logger.debug(
        "Inserted paragraph {} (level {}) after {} [{}]", new.id, new.level, after_id, mode
    )
    return replace(document, paragraphs=paragraphs, next_id=document.next_id + 1), new


def remove(document: Document, paragraph_id: int) -> Removal:
    """Remove one paragraph.

    Mandatory paragraphs raise MandatoryParagraphError and nothing changes. The
    sole paragraph of a document is emptied rather than deleted, because a body
    always keeps at least one slot. Numbering violations of the result are
    returned so the caller can confirm before keeping it.
    """
    index = _require_index(document, paragraph_id)
    target = document.paragraphs[index]
    if target.is_mandatory:
        logger.warning("Refused to remove mandatory paragraph {}", paragraph_id)
        raise MandatoryParagraphError(paragraph_id)

    if len(document.paragraphs) == 1:
        cleared = replace(document, paragraphs=(replace(target, content=""),))
        logger.debug("Cleared sole paragraph {} instead of removing it", paragraph_id)
        return Removal(document=cleared, violations=(), cleared=True)

    paragraphs = document.paragraphs[:index] + document.paragraphs[index + 1 :]
    result = replace(document, paragraphs=paragraphs)
    violations = tuple(find_violations(result.paragraphs))
    logger.debug(
        "Removed paragraph {}; {} numbering issue(s) in result", paragraph_id, len(violations)
    )
    return Removal(document=result, violations=violations)


def move(
    document: Document,
    paragraph_id: int,
    direction: Direction,
    *,
    guard_down: bool = False,
) -> Document:
    """Swap a paragraph with its neighbor.

    Moving up past a paragraph of a lower level would hand the paragraph to a
    different parent, so that is refused. Moving down has no such check unless
    ``guard_down`` is set. Refusals and moves off either end return the input
    document unchanged.
    """
    index = _require_index(document, paragraph_id)
    current = document.paragraphs[index]
    neighbor_index = index - 1 if direction is Direction.UP else index + 1
    if not 0 <= neighbor_index < len(document.paragraphs):
        return document

    neighbor = document.paragraphs[neighbor_index]
    if neighbor.level < current.level and (direction is Direction.UP or guard_down):
        logger.info(
            "Not moving paragraph {} {}: it would leave its parent paragraph",
            paragraph_id,
            direction,
        )
        return document

    paragraphs = list(document.paragraphs)
    paragraphs[index], paragraphs[neighbor_index] = neighbor, current
    return replace(document, paragraphs=tuple(paragraphs))


def _update(document: Document, paragraph_id: int, **changes: object) -> Document:
    index = _require_index(document, paragraph_id)
    paragraphs = list(document.paragraphs)
    paragraphs[index] = replace(paragraphs[index], **changes)
    return replace(document, paragraphs=tuple(paragraphs))


def set_content(document: Document, paragraph_id: int, raw_text: str) -> Document:
    """Store normalized text as the paragraph's content."""
    return _update(document, paragraph_id, content=normalize_content(raw_text))


def set_title(document: Document, paragraph_id: int, title: str | None) -> Document:
    """Set or clear a paragraph heading. Blank titles clear it."""
    cleaned = normalize_content(title).strip() if title else ""
    return _update(document, paragraph_id, title=cleaned or None)
