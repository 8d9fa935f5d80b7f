"""Render primed paragraph layouts as a fixed-width text preview."""

import io
import textwrap
from collections.abc import Sequence

from naval_correspondence.config import DEFAULT_LINE_WIDTH
from naval_correspondence.core.geometry.levels import geometry_for, text_column
from naval_correspondence.models.paragraph import (
    BodyFont,
    Citation,
    Decoration,
    LevelGeometry,
    ParagraphLayout,
)

# Columns per indent step when previewing a proportional layout as text.
_COLUMNS_PER_STEP = 4


def _decorated(citation: Citation) -> str:
    if citation.decoration is Decoration.UNDERLINE:
        return f"{citation.prefix}_{citation.core}_{citation.suffix}"
    return citation.text


def _columns(geometry: LevelGeometry) -> LevelGeometry:
    """Express a layout's geometry in character columns."""
    if geometry.body_font is BodyFont.FIXED:
        return geometry
    return geometry_for(geometry.level, BodyFont.FIXED)


class PlainTextRenderer:
    """Text preview of a correspondence body.

    Wrapped lines align under the first word of the paragraph, not under its
    citation. Underlined citation cores are shown as ``_a_``.
    """

    def __init__(self, *, width: int = DEFAULT_LINE_WIDTH, skip_empty: bool = False) -> None:
        self.width = width
        self.skip_empty = skip_empty

    def render_paragraph(self, layout: ParagraphLayout) -> str:
        geometry = _columns(layout.geometry)
        citation = _decorated(layout.citation)
        lead = " " * geometry.citation_offset + citation + geometry.separator
        # Underscores are markup, not columns.
        hang = text_column(layout.citation, geometry)
        lead = lead.ljust(hang + len(citation) - len(layout.citation.text))

        body = layout.paragraph.content.strip()
        if layout.heading:
            body = f"{layout.heading.rstrip('.')}.  {body}".rstrip()

        if not body:
            return lead.rstrip()
        return textwrap.fill(
            body,
            width=self.width,
            initial_indent=lead,
            subsequent_indent=" " * hang,
            break_on_hyphens=False,
        )

    def render(self, layouts: Sequence[ParagraphLayout]) -> str:
        out = io.StringIO()
        for layout in layouts:
            if self.skip_empty and not layout.paragraph.is_content_bearing:
                continue
            out.write(self.render_paragraph(layout))
            out.write("\n\n")
        return out.getvalue().rstrip("\n") + "\n" if out.getvalue() else ""
