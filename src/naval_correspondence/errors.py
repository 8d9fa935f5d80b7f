"""Exceptions raised by the formatting engine.

Sibling-pairing problems are not exceptions; they are reported as
``Violation`` records and the caller chooses a policy.
"""


class FormattingError(Exception):
    """Base class for engine errors."""


class InvalidIndexError(FormattingError, IndexError):
    """A paragraph index outside the sequence. Always a programming error."""


class ParagraphNotFoundError(FormattingError, LookupError):
    """No paragraph with the requested id."""

    def __init__(self, paragraph_id: int) -> None:
        self.paragraph_id = paragraph_id
        super().__init__(f"No paragraph with id {paragraph_id}")


class MandatoryParagraphError(FormattingError):
    """Deletion of a paragraph the document type requires."""

    def __init__(self, paragraph_id: int) -> None:
        self.paragraph_id = paragraph_id
        super().__init__(
            f"Paragraph {paragraph_id} is mandatory for this document type and cannot be removed."
        )


class StaleEditError(FormattingError):
    """An edit was based on an outdated document version."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Edit based on version {expected}, document is at version {actual}")
