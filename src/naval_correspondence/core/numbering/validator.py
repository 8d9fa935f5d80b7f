"""Sibling-pairing validation: if there is a 1a there must be a 1b.

Results are advisory. A lone subparagraph is a normal drafting state, so it is
reported, never raised; the caller's policy decides whether it blocks anything.
"""

from collections.abc import Sequence

from loguru import logger

from naval_correspondence.core.numbering.citation import citation_for, parent_index, path_citation
from naval_correspondence.models.paragraph import (
    MIN_LEVEL,
    Paragraph,
    ValidationPolicy,
    ValidationReport,
    Violation,
)

# (parent index or -1 at the top, level)
GroupKey = tuple[int, int]


def sibling_groups(paragraphs: Sequence[Paragraph]) -> dict[GroupKey, list[int]]:
    """Partition the sequence into sibling groups, preserving sequence order.

    Two level-2 runs under different level-1 parents get different keys because
    their parents sit at different positions.
    """
    groups: dict[GroupKey, list[int]] = {}
    for i, p in enumerate(paragraphs):
        parent = parent_index(paragraphs, i)
        key = (-1 if parent is None else parent, p.level)
        groups.setdefault(key, []).append(i)
    return groups


def find_violations(paragraphs: Sequence[Paragraph]) -> list[Violation]:
    """One violation per subparagraph group with exactly one content-bearing member."""
    violations: list[Violation] = []
    for (_parent, level), members in sibling_groups(paragraphs).items():
        if level == MIN_LEVEL:
            continue
        bearing = [i for i in members if paragraphs[i].is_content_bearing]
        if len(bearing) != 1:
            continue
        lone = bearing[0]
        reference = path_citation(paragraphs, lone)
        violations.append(
            Violation(
                level=level,
                citation=citation_for(paragraphs, lone).text,
                path_citation=reference,
                paragraph_id=paragraphs[lone].id,
                message=(
                    f"Paragraph {reference} requires at least one sibling paragraph "
                    f"at the same level."
                ),
            )
        )
    violations.sort(key=lambda v: _position(paragraphs, v.paragraph_id))
    return violations


def _position(paragraphs: Sequence[Paragraph], paragraph_id: int) -> int:
    return next(i for i, p in enumerate(paragraphs) if p.id == paragraph_id)


def validate(
    paragraphs: Sequence[Paragraph],
    policy: ValidationPolicy = ValidationPolicy.WARN,
) -> ValidationReport:
    """Check sibling pairing and wrap the result with the caller's policy."""
    report = ValidationReport(violations=tuple(find_violations(paragraphs)), policy=policy)
    for v in report.violations:
        logger.warning("{}", v.message)
    if report.blocking:
        logger.info("{} numbering issue(s) block this action", len(report.violations))
    return report


def find_empty_paragraphs(paragraphs: Sequence[Paragraph]) -> list[int]:
    """Ids of paragraphs with neither content nor a title."""
    return [p.id for p in paragraphs if not p.is_content_bearing]
