"""Tests for citation generation over the flat sequence."""

import pytest

from naval_correspondence.core.numbering.citation import (
    ancestor_indices,
    citation_for,
    citations_for,
    path_citation,
    sibling_group_start,
)
from naval_correspondence.errors import InvalidIndexError
from naval_correspondence.models.paragraph import Document
from tests.unit.fakes import p


def test_smeac_outline_citations(smeac: Document) -> None:
    texts = [c.text for c in citations_for(smeac.paragraphs)]
    assert texts == ["1.", "a.", "b.", "2.", "3.", "a.", "(1)", "(2)", "b.", "4.", "5."]


def test_counting_restarts_under_a_new_parent() -> None:
    paragraphs = [p(1, 1), p(2, 2), p(3, 2), p(4, 1), p(5, 2)]
    assert citation_for(paragraphs, 4).text == "a."


def test_descendants_do_not_break_sibling_group() -> None:
    paragraphs = [p(1, 1), p(2, 2), p(3, 3), p(4, 3), p(5, 4), p(6, 2)]
    assert sibling_group_start(paragraphs, 5) == 1
    assert citation_for(paragraphs, 5).text == "b."


def test_level_one_ignores_deeper_paragraphs() -> None:
    bare = [p(1, 1), p(2, 1), p(3, 1)]
    nested = [p(1, 1), p(10, 2), p(11, 3), p(2, 1), p(12, 2), p(3, 1)]
    assert [c.text for c in citations_for(bare)] == ["1.", "2.", "3."]
    level_one = [citation_for(nested, i).text for i in (0, 3, 5)]
    assert level_one == ["1.", "2.", "3."]


def test_counts_run_one_to_k_within_each_group() -> None:
    paragraphs = [p(1, 1)] + [p(i, 3 if i % 2 else 2) for i in range(2, 12)]
    level2 = [citation_for(paragraphs, i).count for i, x in enumerate(paragraphs) if x.level == 2]
    assert level2 == list(range(1, len(level2) + 1))


def test_empty_sibling_is_skipped_but_target_counts() -> None:
    paragraphs = [p(1, 1), p(2, 2, ""), p(3, 2, "real")]
    assert citation_for(paragraphs, 2).text == "a."
    # The blank paragraph being drafted still gets a provisional number.
    assert citation_for(paragraphs, 1).text == "a."


def test_titled_paragraph_without_content_counts() -> None:
    paragraphs = [p(1, 1, "", title="BLUF"), p(2, 1, "", title="Background"), p(3, 1, "x")]
    assert [c.text for c in citations_for(paragraphs)] == ["1.", "2.", "3."]


def test_sequence_starting_below_level_one() -> None:
    paragraphs = [p(1, 3), p(2, 3), p(3, 2)]
    assert [c.text for c in citations_for(paragraphs)] == ["(1)", "(2)", "a."]
    assert ancestor_indices(paragraphs, 0) == ()


def test_twenty_seventh_subparagraph_is_aa() -> None:
    paragraphs = [p(1, 1)] + [p(i, 2) for i in range(2, 30)]
    assert citation_for(paragraphs, 27).text == "aa."


@pytest.mark.parametrize("index", [-1, 4, 100])
def test_out_of_range_index_raises(simple_doc: Document, index: int) -> None:
    with pytest.raises(InvalidIndexError):
        citation_for(simple_doc.paragraphs, index)


def test_invalid_index_is_an_index_error(simple_doc: Document) -> None:
    with pytest.raises(IndexError):
        citation_for(simple_doc.paragraphs, 10)


def test_path_citation_joins_ancestors() -> None:
    paragraphs = [p(1, 1), p(2, 1), p(3, 2), p(4, 3), p(5, 4), p(6, 5)]
    assert path_citation(paragraphs, 1) == "2"
    assert path_citation(paragraphs, 2) == "2a"
    assert path_citation(paragraphs, 4) == "2a(1)(a)"
    assert path_citation(paragraphs, 5) == "2a(1)(a)1"
