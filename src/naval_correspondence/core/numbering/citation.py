"""Citation generation over the flat paragraph sequence.

Ancestry is never stored. A paragraph's sibling group is found by scanning
backward to the nearest paragraph of a lower level; deeper paragraphs in
between are descendants and do not interrupt the group.
"""

from collections.abc import Sequence

from naval_correspondence.core.geometry.levels import render_citation
from naval_correspondence.errors import InvalidIndexError
from naval_correspondence.models.paragraph import Citation, Paragraph


def _check_index(paragraphs: Sequence[Paragraph], index: int) -> None:
    if not 0 <= index < len(paragraphs):
        msg = f"Paragraph index {index} out of range for {len(paragraphs)} paragraphs"
        raise InvalidIndexError(msg)


def sibling_group_start(paragraphs: Sequence[Paragraph], index: int) -> int:
    """Index of the first slot of the sibling group containing ``paragraphs[index]``."""
    _check_index(paragraphs, index)
    level = paragraphs[index].level
    for i in range(index - 1, -1, -1):
        if paragraphs[i].level < level:
            return i + 1
    return 0


def parent_index(paragraphs: Sequence[Paragraph], index: int) -> int | None:
    """Index of the nearest preceding paragraph with a lower level, if any."""
    start = sibling_group_start(paragraphs, index)
    return start - 1 if start > 0 else None


def ancestor_indices(paragraphs: Sequence[Paragraph], index: int) -> tuple[int, ...]:
    """Indices of all strict ancestors, outermost first.

    A document that starts below level 1 simply has fewer ancestors.
    """
    chain: list[int] = []
    current = parent_index(paragraphs, index)
    while current is not None:
        chain.append(current)
        current = parent_index(paragraphs, current)
    return tuple(reversed(chain))


def sibling_count(paragraphs: Sequence[Paragraph], index: int) -> int:
    """Position of ``paragraphs[index]`` among its counted siblings, 1-based.

    Counted siblings are content-bearing paragraphs at the same level. The
    target always counts, so a blank paragraph being drafted still gets a number.
    """
    start = sibling_group_start(paragraphs, index)
    target = paragraphs[index]
    count = sum(
        1
        for p in paragraphs[start : index + 1]
        if p.level == target.level and (p.is_content_bearing or p.id == target.id)
    )
    return max(count, 1)


def citation_for(paragraphs: Sequence[Paragraph], index: int) -> Citation:
    """Citation of the paragraph at ``index``. Recomputed on every call."""
    count = sibling_count(paragraphs, index)
    return render_citation(paragraphs[index].level, count)


def citations_for(paragraphs: Sequence[Paragraph]) -> list[Citation]:
    """Citations for a whole render pass, in sequence order."""
    return [citation_for(paragraphs, i) for i in range(len(paragraphs))]


def path_citation(paragraphs: Sequence[Paragraph], index: int) -> str:
    """Reference to a paragraph through its ancestors, e.g. ``1a(1)(a)``."""
    parts = [citation_for(paragraphs, i).reference for i in ancestor_indices(paragraphs, index)]
    parts.append(citation_for(paragraphs, index).reference)
    return "".join(parts)
