"""CLI for editing and previewing correspondence bodies."""

import json
from pathlib import Path
from typing import Annotated

import typer
from loguru import logger

from naval_correspondence.config import resolve_body_font, resolve_line_width
from naval_correspondence.core.numbering.validator import find_empty_paragraphs
from naval_correspondence.core.render.plain_text import PlainTextRenderer
from naval_correspondence.core.templates import new_document
from naval_correspondence.engine import FormattingEngine
from naval_correspondence.errors import MandatoryParagraphError, ParagraphNotFoundError
from naval_correspondence.logging_config import configure_logging
from naval_correspondence.models.paragraph import (
    BodyFont,
    Direction,
    Document,
    DocumentType,
    InsertMode,
    ValidationPolicy,
)
from naval_correspondence.storage import DocumentFile

app = typer.Typer(help="Naval correspondence paragraph formatter.")

DocumentPath = Annotated[Path, typer.Argument(help="Document JSON file")]
DryRun = Annotated[bool, typer.Option("--dry-run", help="Do not write anything")]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log warnings"),
) -> None:
    configure_logging(verbose=verbose, quiet=quiet)


def _load(path: Path) -> Document:
    store = DocumentFile(path)
    if not store.exists():
        logger.error("Document file not found: {}", path)
        raise typer.Exit(1)
    try:
        return store.load()
    except (ValueError, KeyError) as e:
        logger.error("Cannot read {}: {}", path, e)
        raise typer.Exit(1) from e


def _save(path: Path, document: Document, *, dry_run: bool) -> None:
    DocumentFile(path, dry_run=dry_run).save(document)


def _engine(font: BodyFont | None) -> FormattingEngine:
    return FormattingEngine(body_font=font or resolve_body_font())


@app.command()
def new(
    path: DocumentPath,
    document_type: Annotated[
        DocumentType, typer.Option("--type", "-t", help="Document type")
    ] = DocumentType.LETTER,
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
    dry_run: DryRun = False,
) -> None:
    """Create a document file from the template for its type."""
    if path.exists() and not force:
        typer.echo(f"{path} already exists; use --force to overwrite.")
        raise typer.Exit(1)
    document = new_document(document_type)
    _save(path, document, dry_run=dry_run)
    typer.echo(f"Created {document_type} with {len(document)} paragraph(s).")


@app.command()
def show(
    path: DocumentPath,
    font: Annotated[BodyFont | None, typer.Option("--font", help="Body font convention")] = None,
    width: Annotated[int | None, typer.Option("--width", "-w", help="Line width")] = None,
    ids: bool = typer.Option(False, "--ids", help="List citations with paragraph ids"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output layout as JSON"),
) -> None:
    """Preview the body with citations and indentation."""
    document = _load(path)
    engine = _engine(font)
    layouts = engine.layout(document)

    if output_json:
        data = [
            {
                "id": lay.paragraph.id,
                "level": lay.paragraph.level,
                "citation": lay.citation.text,
                "reference": engine.path_citation(document, lay.index),
                "decoration": str(lay.citation.decoration),
                "citation_offset": lay.geometry.citation_offset,
                "text_offset": lay.geometry.text_offset,
                "hanging_indent": lay.geometry.hanging_indent,
                "heading": lay.heading,
                "content": lay.paragraph.content,
            }
            for lay in layouts
        ]
        typer.echo(json.dumps(data, indent=2))
    elif ids:
        for lay in layouts:
            indent = "  " * (lay.paragraph.level - 1)
            typer.echo(f"{indent}{lay.citation.text:<6} id={lay.paragraph.id}")
    else:
        renderer = PlainTextRenderer(width=width or resolve_line_width())
        typer.echo(renderer.render(layouts), nl=False)


@app.command()
def validate(
    path: DocumentPath,
    strict: bool = typer.Option(False, "--strict", help="Fail when numbering issues exist"),
) -> None:
    """Check the sibling-pairing rule and report empty paragraphs."""
    document = _load(path)
    policy = ValidationPolicy.BLOCK if strict else ValidationPolicy.WARN
    report = FormattingEngine().validate(document, policy)

    for message in report.messages():
        typer.echo(message)
    empty = find_empty_paragraphs(document.paragraphs)
    if empty:
        typer.echo(f"{len(empty)} empty paragraph(s): ids {', '.join(map(str, empty))}")
    if not report.violations and not empty:
        typer.echo("No numbering issues found.")
    if report.blocking:
        raise typer.Exit(1)


@app.command()
def add(
    path: DocumentPath,
    after: int = typer.Option(..., "--after", "-a", help="Anchor paragraph id"),
    mode: Annotated[InsertMode, typer.Option("--mode", "-m")] = InsertMode.SIBLING,
    text: Annotated[str | None, typer.Option("--text", help="Content")] = None,
    dry_run: DryRun = False,
) -> None:
    """Insert a paragraph after an existing one."""
    document = _load(path)
    engine = FormattingEngine()
    try:
        document, paragraph = engine.insert_after(document, after, mode)
    except ParagraphNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1) from e
    if text:
        document = engine.set_content(document, paragraph.id, text)
    _save(path, document, dry_run=dry_run)
    index = next(i for i, q in enumerate(document) if q.id == paragraph.id)
    typer.echo(f"Added paragraph {engine.path_citation(document, index)} (id={paragraph.id}).")


@app.command()
def remove(
    path: DocumentPath,
    paragraph_id: int = typer.Argument(..., help="Paragraph id"),
    force: bool = typer.Option(False, "--force", "-f", help="Remove despite numbering issues"),
    dry_run: DryRun = False,
) -> None:
    """Remove a paragraph. Numbering issues must be confirmed with --force."""
    document = _load(path)
    try:
        removal = FormattingEngine().remove(document, paragraph_id)
    except (MandatoryParagraphError, ParagraphNotFoundError) as e:
        typer.echo(str(e))
        raise typer.Exit(1) from e

    if removal.violations and not force:
        typer.echo("Removing this paragraph may create numbering issues:")
        for v in removal.violations:
            typer.echo(f"  {v.message}")
        typer.echo("Nothing removed. Re-run with --force to proceed.")
        raise typer.Exit(1)

    _save(path, removal.document, dry_run=dry_run)
    if removal.cleared:
        typer.echo(f"Paragraph {paragraph_id} is the only paragraph; its content was cleared.")
    else:
        typer.echo(f"Removed paragraph {paragraph_id}.")


@app.command()
def move(
    path: DocumentPath,
    paragraph_id: int = typer.Argument(..., help="Paragraph id"),
    direction: Direction = typer.Argument(..., help="up or down"),
    guard_down: bool = typer.Option(
        False, "--guard-down", help="Refuse moving down out of the parent paragraph"
    ),
    dry_run: DryRun = False,
) -> None:
    """Swap a paragraph with its neighbor."""
    document = _load(path)
    try:
        moved = FormattingEngine().move(document, paragraph_id, direction, guard_down=guard_down)
    except ParagraphNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1) from e
    if moved == document:
        typer.echo(f"Paragraph {paragraph_id} cannot move {direction}.")
        return
    _save(path, moved, dry_run=dry_run)
    typer.echo(f"Moved paragraph {paragraph_id} {direction}.")


@app.command()
def edit(
    path: DocumentPath,
    paragraph_id: int = typer.Argument(..., help="Paragraph id"),
    text: str = typer.Argument(..., help="New content"),
    dry_run: DryRun = False,
) -> None:
    """Replace a paragraph's content."""
    document = _load(path)
    try:
        document = FormattingEngine().set_content(document, paragraph_id, text)
    except ParagraphNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1) from e
    _save(path, document, dry_run=dry_run)
    typer.echo(f"Updated paragraph {paragraph_id}.")


@app.command()
def title(
    path: DocumentPath,
    paragraph_id: int = typer.Argument(..., help="Paragraph id"),
    heading: str = typer.Argument("", help="Heading; empty clears it"),
    dry_run: DryRun = False,
) -> None:
    """Set or clear a paragraph heading."""
    document = _load(path)
    try:
        document = FormattingEngine().set_title(document, paragraph_id, heading)
    except ParagraphNotFoundError as e:
        typer.echo(str(e))
        raise typer.Exit(1) from e
    _save(path, document, dry_run=dry_run)
    action = "Set" if heading.strip() else "Cleared"
    typer.echo(f"{action} heading of paragraph {paragraph_id}.")
