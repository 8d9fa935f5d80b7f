"""Configuration constants for naval-correspondence."""

import os

from naval_correspondence.models.paragraph import MAX_LEVEL, MIN_LEVEL, BodyFont, DocumentType

__all__ = [
    "DEFAULT_BODY_FONT",
    "DEFAULT_DOCUMENT_TYPE",
    "DEFAULT_LINE_WIDTH",
    "FIXED_INDENT_COLUMNS",
    "MAX_LEVEL",
    "MIN_LEVEL",
    "PROPORTIONAL_INDENT_STEPS",
    "resolve_body_font",
    "resolve_line_width",
]

# Columns per level under the fixed-width (Courier) convention.
FIXED_INDENT_COLUMNS: int = 4

# Indent steps per level under the proportional (Times) convention.
# One step is the manual's quarter inch; renderers pick the physical unit.
PROPORTIONAL_INDENT_STEPS: int = 1

DEFAULT_BODY_FONT: BodyFont = BodyFont.PROPORTIONAL
DEFAULT_DOCUMENT_TYPE: DocumentType = DocumentType.LETTER

# Line width of the plain-text preview, in characters.
DEFAULT_LINE_WIDTH: int = 72

BODY_FONT_ENV: str = "NAVAL_FORMAT_BODY_FONT"
LINE_WIDTH_ENV: str = "NAVAL_FORMAT_WIDTH"


def resolve_body_font() -> BodyFont:
    """Return the body font convention, honoring the environment override."""
    raw = os.environ.get(BODY_FONT_ENV)
    if not raw:
        return DEFAULT_BODY_FONT
    try:
        return BodyFont(raw.strip().lower())
    except ValueError:
        msg = f"{BODY_FONT_ENV}={raw!r} is not one of {[f.value for f in BodyFont]!r}"
        raise ValueError(msg) from None


def resolve_line_width() -> int:
    """Return the preview line width, honoring the environment override."""
    raw = os.environ.get(LINE_WIDTH_ENV)
    if not raw:
        return DEFAULT_LINE_WIDTH
    width = int(raw)
    if width < 20:
        msg = f"{LINE_WIDTH_ENV} must be at least 20, got {width}"
        raise ValueError(msg)
    return width
