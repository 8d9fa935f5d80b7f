"""Domain models for correspondence body paragraphs."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

# Outermost and deepest paragraph levels defined by the correspondence manual.
MIN_LEVEL = 1
MAX_LEVEL = 8


class InsertMode(StrEnum):
    """Where a new paragraph lands relative to its anchor."""

    MAIN = "main"
    CHILD = "child"
    SIBLING = "sibling"
    PROMOTE = "promote"


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"


class BodyFont(StrEnum):
    """Body-font convention; decides the indentation geometry."""

    PROPORTIONAL = "proportional"  # Times New Roman, tab stops
    FIXED = "fixed"  # Courier New, character columns


class Decoration(StrEnum):
    NONE = "none"
    UNDERLINE = "underline"


class ValidationPolicy(StrEnum):
    """What a caller does with sibling-pairing violations."""

    WARN = "warn"
    BLOCK = "block"


class DocumentType(StrEnum):
    LETTER = "letter"
    ENDORSEMENT = "endorsement"
    MFR = "mfr"
    DECISION_PAPER = "decision_paper"
    STAFFING_PAPER = "staffing_paper"
    MOA = "moa"
    MOU = "mou"


@dataclass(frozen=True)
class Paragraph:
    """A single body paragraph. Nesting is implied by level and position."""

    id: int
    level: int
    content: str = ""
    title: str | None = None
    is_mandatory: bool = False

    def __post_init__(self) -> None:
        if not MIN_LEVEL <= self.level <= MAX_LEVEL:
            msg = f"Paragraph {self.id}: level {self.level} outside {MIN_LEVEL}..{MAX_LEVEL}"
            raise ValueError(msg)

    @property
    def is_content_bearing(self) -> bool:
        """True when the paragraph has visible text or a heading."""
        return bool(self.content.strip() or self.title)


@dataclass(frozen=True)
class Document:
    """The ordered paragraph sequence plus its id counter.

    ``next_id`` only ever grows, so ids freed by deletion are never handed out again.
    """

    paragraphs: tuple[Paragraph, ...]
    next_id: int = 0
    document_type: DocumentType = DocumentType.LETTER

    def __post_init__(self) -> None:
        ids = [p.id for p in self.paragraphs]
        if len(set(ids)) != len(ids):
            msg = f"Duplicate paragraph ids: {sorted(ids)!r}"
            raise ValueError(msg)
        floor = max(ids, default=0) + 1
        if self.next_id < floor:
            object.__setattr__(self, "next_id", floor)

    def __len__(self) -> int:
        return len(self.paragraphs)

    def __iter__(self) -> Iterator[Paragraph]:
        return iter(self.paragraphs)

    def index_of(self, paragraph_id: int) -> int | None:
        for i, p in enumerate(self.paragraphs):
            if p.id == paragraph_id:
                return i
        return None

    def get(self, paragraph_id: int) -> Paragraph | None:
        i = self.index_of(paragraph_id)
        return None if i is None else self.paragraphs[i]


@dataclass(frozen=True)
class Citation:
    """A paragraph's outline marker, split so renderers can decorate the core.

    ``Citation(level=7, count=1, prefix="(", core="1", suffix=")",
    decoration=Decoration.UNDERLINE)`` renders as "(1)" with only the 1 underlined.
    """

    level: int
    count: int
    prefix: str
    core: str
    suffix: str
    decoration: Decoration = Decoration.NONE

    @property
    def text(self) -> str:
        return f"{self.prefix}{self.core}{self.suffix}"

    @property
    def reference(self) -> str:
        """Form used inside a path reference such as 1a(1)(a)."""
        if self.prefix:
            return self.text
        return self.core

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class LevelGeometry:
    """Indentation of one level, in abstract units.

    Units are indent steps under the proportional convention and character
    columns under the fixed-width convention.
    """

    level: int
    body_font: BodyFont
    citation_offset: int
    text_offset: int
    decoration: Decoration
    separator: str = ""
    tab_stops: tuple[int, ...] = ()

    @property
    def hanging_indent(self) -> int:
        return self.text_offset - self.citation_offset


@dataclass(frozen=True)
class Violation:
    """A sibling group with a single content-bearing member."""

    level: int
    citation: str
    path_citation: str
    paragraph_id: int
    message: str


@dataclass(frozen=True)
class ValidationReport:
    """Violations plus the caller's policy for acting on them."""

    violations: tuple[Violation, ...]
    policy: ValidationPolicy = ValidationPolicy.WARN

    @property
    def blocking(self) -> bool:
        return self.policy is ValidationPolicy.BLOCK and bool(self.violations)

    def messages(self) -> list[str]:
        return [v.message for v in self.violations]


@dataclass(frozen=True)
class ParagraphLayout:
    """Everything a renderer needs to draw one paragraph."""

    paragraph: Paragraph
    index: int
    citation: Citation
    geometry: LevelGeometry
    heading: str | None = None


@dataclass(frozen=True)
class Removal:
    """Outcome of a removal.

    ``violations`` describes the resulting document; the caller shows them and
    either keeps ``document`` or discards it. ``cleared`` is set when the sole
    paragraph was emptied instead of deleted.
    """

    document: Document
    violations: tuple[Violation, ...] = field(default_factory=tuple)
    cleared: bool = False
