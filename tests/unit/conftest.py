"""Shared test fixtures."""

import pytest

from naval_correspondence.models.paragraph import Document, DocumentType
from tests.unit.fakes import p


# 1. Situation / a. / b. / 2. Mission / 3. Execution / a. / (1) / (2) / b. / 4. / 5.
SMEAC_OUTLINE = (
    p(1, 1, "Situation."),
    p(2, 2, "Enemy forces."),
    p(3, 2, "Friendly forces."),
    p(4, 1, "Mission."),
    p(5, 1, "Execution."),
    p(6, 2, "Concept of operations."),
    p(7, 3, "Phase one."),
    p(8, 3, "Phase two."),
    p(9, 2, "Tasks."),
    p(10, 1, "Administration and logistics."),
    p(11, 1, "Command and signal."),
)


@pytest.fixture
def smeac() -> Document:
    """A five-paragraph order body with correctly paired subparagraphs."""
    return Document(paragraphs=SMEAC_OUTLINE)


@pytest.fixture
def simple_doc() -> Document:
    """1. A / a. B / b. C / (1) D."""
    return Document(
        paragraphs=(
            p(1, 1, "A"),
            p(2, 2, "B"),
            p(3, 2, "C"),
            p(4, 3, "D"),
        )
    )


@pytest.fixture
def mfr_doc() -> Document:
    """Memorandum body whose first paragraph is mandatory."""
    return Document(
        paragraphs=(
            p(1, 1, "Purpose.", is_mandatory=True),
            p(2, 1, "Attendees."),
            p(3, 1, "Discussion."),
        ),
        document_type=DocumentType.MFR,
    )
