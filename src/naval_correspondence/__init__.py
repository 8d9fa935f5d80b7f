"""Naval correspondence paragraph numbering, geometry and validation."""

from naval_correspondence.core.templates import new_document
from naval_correspondence.engine import FormattingEngine
from naval_correspondence.errors import (
    FormattingError,
    InvalidIndexError,
    MandatoryParagraphError,
    ParagraphNotFoundError,
    StaleEditError,
)
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
    ValidationPolicy,
    ValidationReport,
    Violation,
)
from naval_correspondence.protocols import RendererProtocol

__all__ = [
    "BodyFont",
    "Citation",
    "Direction",
    "Document",
    "DocumentType",
    "FormattingEngine",
    "FormattingError",
    "InsertMode",
    "InvalidIndexError",
    "LevelGeometry",
    "MandatoryParagraphError",
    "Paragraph",
    "ParagraphLayout",
    "ParagraphNotFoundError",
    "RendererProtocol",
    "StaleEditError",
    "ValidationPolicy",
    "ValidationReport",
    "Violation",
    "new_document",
]
