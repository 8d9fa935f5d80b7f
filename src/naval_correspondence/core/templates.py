"""Starting bodies and heading case rules per document type."""

from naval_correspondence.models.paragraph import Document, DocumentType, Paragraph

_PAPER_HEADINGS = ("BLUF", "Background", "Discussion", "Recommendation")
_AGREEMENT_HEADINGS = ("Purpose", "Problem", "Scope", "Agreement", "Effective Date")

_UPPERCASE_HEADINGS = {DocumentType.MOA, DocumentType.MOU}


def _titled(headings: tuple[str, ...]) -> tuple[Paragraph, ...]:
    # The first heading of each paper type is required by the manual.
    return tuple(
        Paragraph(id=i, level=1, title=heading, is_mandatory=(i == 1))
        for i, heading in enumerate(headings, start=1)
    )


def template_paragraphs(document_type: DocumentType) -> tuple[Paragraph, ...]:
    if document_type in (DocumentType.DECISION_PAPER, DocumentType.STAFFING_PAPER):
        return _titled(_PAPER_HEADINGS)
    if document_type in (DocumentType.MOA, DocumentType.MOU):
        return _titled(_AGREEMENT_HEADINGS)
    return (Paragraph(id=1, level=1, is_mandatory=True),)


def new_document(document_type: DocumentType = DocumentType.LETTER) -> Document:
    """Blank body for a document type, with its mandatory paragraphs in place."""
    return Document(paragraphs=template_paragraphs(document_type), document_type=document_type)


def format_title(title: str | None, document_type: DocumentType) -> str | None:
    """Apply the document type's heading case rule.

    Agreements print headings in capitals, and an MOU calls its agreement
    paragraph UNDERSTANDING. Everything else keeps the title as entered.
    """
    if not title:
        return None
    if document_type is DocumentType.MOU and title.strip().lower() == "agreement":
        return "UNDERSTANDING"
    if document_type in _UPPERCASE_HEADINGS:
        return title.upper()
    return title
