"""Level geometry: citation shape and indentation for levels 1-8.

Shapes repeat every four levels::

    1 -> 1.    2 -> a.    3 -> (1)    4 -> (a)
    5 -> 1.    6 -> a.    7 -> (1)    8 -> (a)     (5-8: number/letter underlined)

Offsets are abstract. Under the proportional convention one unit is an indent
step (a quarter inch in the manual); under the fixed-width convention one unit
is a character column. Renderers convert to points, twips or spaces.
"""

from dataclasses import dataclass

from naval_correspondence.config import (
    FIXED_INDENT_COLUMNS,
    MAX_LEVEL,
    MIN_LEVEL,
    PROPORTIONAL_INDENT_STEPS,
)
from naval_correspondence.models.paragraph import BodyFont, Citation, Decoration, LevelGeometry

ARABIC = "arabic"
LETTER = "letter"


@dataclass(frozen=True)
class CitationShape:
    """Punctuation and numbering rule for one level."""

    prefix: str
    numbering: str
    suffix: str
    decoration: Decoration


_PERIOD_ARABIC = ("", ARABIC, ".")
_PERIOD_LETTER = ("", LETTER, ".")
_PAREN_ARABIC = ("(", ARABIC, ")")
_PAREN_LETTER = ("(", LETTER, ")")

_BASE_SHAPES = (_PERIOD_ARABIC, _PERIOD_LETTER, _PAREN_ARABIC, _PAREN_LETTER)

SHAPES: dict[int, CitationShape] = {
    level: CitationShape(
        *_BASE_SHAPES[(level - 1) % 4],
        decoration=Decoration.UNDERLINE if level > 4 else Decoration.NONE,
    )
    for level in range(MIN_LEVEL, MAX_LEVEL + 1)
}


def _check_level(level: int) -> None:
    if level not in SHAPES:
        msg = f"Level {level!r} outside {MIN_LEVEL}..{MAX_LEVEL}"
        raise ValueError(msg)


def number_to_letters(n: int) -> str:
    """Convert a 1-based count to bijective base-26 letters.

    1 -> a, 26 -> z, 27 -> aa, 52 -> az, 53 -> ba.
    """
    if n < 1:
        msg = f"Letter numbering starts at 1, got {n}"
        raise ValueError(msg)
    letters: list[str] = []
    while n > 0:
        n, rem = divmod(n - 1, 26)
        letters.append(chr(ord("a") + rem))
    return "".join(reversed(letters))


def citation_shape(level: int) -> CitationShape:
    _check_level(level)
    return SHAPES[level]


def render_citation(level: int, count: int) -> Citation:
    """Build the citation for the ``count``-th member of a level's sibling group."""
    shape = citation_shape(level)
    core = str(count) if shape.numbering == ARABIC else number_to_letters(count)
    return Citation(
        level=level,
        count=count,
        prefix=shape.prefix,
        core=core,
        suffix=shape.suffix,
        decoration=shape.decoration,
    )


def _separator(shape: CitationShape) -> str:
    # Two spaces after a period, one after a closing parenthesis.
    return "  " if shape.suffix == "." else " "


def geometry_for(level: int, body_font: BodyFont = BodyFont.PROPORTIONAL) -> LevelGeometry:
    """Return citation and text offsets for a level under a body-font convention."""
    shape = citation_shape(level)
    if body_font is BodyFont.FIXED:
        citation_offset = FIXED_INDENT_COLUMNS * (level - 1)
        return LevelGeometry(
            level=level,
            body_font=body_font,
            citation_offset=citation_offset,
            text_offset=citation_offset + FIXED_INDENT_COLUMNS,
            decoration=shape.decoration,
            separator=_separator(shape),
        )

    citation_offset = PROPORTIONAL_INDENT_STEPS * (level - 1)
    text_offset = citation_offset + PROPORTIONAL_INDENT_STEPS
    # Level 1 starts at the margin, so only the text needs a stop.
    tab_stops = (text_offset,) if level == MIN_LEVEL else (citation_offset, text_offset)
    return LevelGeometry(
        level=level,
        body_font=body_font,
        citation_offset=citation_offset,
        text_offset=text_offset,
        decoration=shape.decoration,
        tab_stops=tab_stops,
    )


def text_column(citation: Citation, geometry: LevelGeometry) -> int:
    """Actual text offset for a concrete citation.

    Under the fixed-width convention a wide citation such as "10." or "(aa)"
    pushes the text right; tab stops absorb the difference otherwise.
    """
    if geometry.body_font is not BodyFont.FIXED:
        return geometry.text_offset
    used = len(citation.text) + len(geometry.separator)
    return geometry.citation_offset + max(used, geometry.hanging_indent)
