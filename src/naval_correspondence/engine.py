"""Formatting engine: the one place renderers get citations and geometry from."""

from collections.abc import Sequence

from naval_correspondence.config import DEFAULT_BODY_FONT, DEFAULT_DOCUMENT_TYPE
from naval_correspondence.core.editor import operations
from naval_correspondence.core.geometry.levels import geometry_for
from naval_correspondence.core.numbering import citation, validator
from naval_correspondence.core.templates import format_title
from naval_correspondence.models.paragraph import (
    BodyFont,
    Citation,
    Direction,
    Document,
    DocumentType,
    InsertMode,
    LevelGeometry,
    Paragraph,
    ParagraphLayout,
    Removal,
    ValidationPolicy,
    ValidationReport,
)


def _paragraphs(body: Document | Sequence[Paragraph]) -> Sequence[Paragraph]:
    return body.paragraphs if isinstance(body, Document) else body


class FormattingEngine:
    """Facade over geometry, numbering, validation and editing.

    The engine is stateless apart from the body-font convention. Citations are
    recomputed from the sequence on every call, so a structural edit can never
    leave a stale number behind.
    """

    def __init__(
        self,
        *,
        body_font: BodyFont = DEFAULT_BODY_FONT,
        document_type: DocumentType = DEFAULT_DOCUMENT_TYPE,
    ) -> None:
        self.body_font = body_font
        self.document_type = document_type

    # --- Queries ---

    def citation_for(self, body: Document | Sequence[Paragraph], index: int) -> Citation:
        return citation.citation_for(_paragraphs(body), index)

    def path_citation(self, body: Document | Sequence[Paragraph], index: int) -> str:
        return citation.path_citation(_paragraphs(body), index)

    def geometry_for(self, level: int) -> LevelGeometry:
        return geometry_for(level, self.body_font)

    def validate(
        self,
        body: Document | Sequence[Paragraph],
        policy: ValidationPolicy = ValidationPolicy.WARN,
    ) -> ValidationReport:
        return validator.validate(_paragraphs(body), policy)

    def layout(
        self,
        body: Document | Sequence[Paragraph],
        *,
        document_type: DocumentType | None = None,
    ) -> tuple[ParagraphLayout, ...]:
        """Prime citation, geometry and heading for every paragraph, in order."""
        paragraphs = _paragraphs(body)
        if document_type is None:
            document_type = (
                body.document_type if isinstance(body, Document) else self.document_type
            )
        return tuple(
            ParagraphLayout(
                paragraph=p,
                index=i,
                citation=c,
                geometry=self.geometry_for(p.level),
                heading=format_title(p.title, document_type),
            )
            for i, (p, c) in enumerate(zip(paragraphs, citation.citations_for(paragraphs)))
        )

    # --- Edits ---

    def insert_after(
        self, document: Document, after_id: int, mode: InsertMode
    ) -> tuple[Document, Paragraph]:
        return operations.insert_after(document, after_id, mode)

    def remove(self, document: Document, paragraph_id: int) -> Removal:
        return operations.remove(document, paragraph_id)

    def move(
        self,
        document: Document,
        paragraph_id: int,
        direction: Direction,
        *,
        guard_down: bool = False,
    ) -> Document:
        return operations.move(document, paragraph_id, direction, guard_down=guard_down)

    def set_content(self, document: Document, paragraph_id: int, raw_text: str) -> Document:
        return operations.set_content(document, paragraph_id, raw_text)

    def set_title(self, document: Document, paragraph_id: int, title: str | None) -> Document:
        return operations.set_title(document, paragraph_id, title)
