"""Protocols for the collaborators around the formatting engine."""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from naval_correspondence.models.paragraph import ParagraphLayout


@runtime_checkable
class RendererProtocol(Protocol):
    """Protocol for output backends that draw primed paragraph layouts.

    Renderers turn abstract offsets into physical units and apply the
    citation decoration. They never count paragraphs themselves.
    """

    def render(self, layouts: Sequence[ParagraphLayout]) -> str:
        """Render the body and return it as text or an encoded payload."""
        ...
