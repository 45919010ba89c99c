#!/usr/bin/env python3
"""
Document Rendering CLI

Runs generated résumé and cover letter text through the document pipeline for
inspection: role classification, resolved style presets and both output
representations.

Commands:
    classify - Show the role assigned to every line
    render   - Render both representations and optionally write them as JSON
    presets  - Show the resolved style preset of every role

Examples:\n

    render_document.py classify draft.txt                          # Résumé roles

    render_document.py classify letter.txt --type coverLetter      # Cover letter roles

    render_document.py render draft.txt --output draft.json        # Write both representations

    render_document.py render draft.txt --config scribe.yaml       # Apply config overrides

    render_document.py presets --type coverLetter                  # Show cover letter presets
"""

import json
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from scribe.contexts.composition import load_pipeline_config, render
from scribe.contexts.composition.logger import setup_composition_logger
from scribe.contexts.structuring import (
    DocumentType,
    EmptyContentError,
    UnsupportedDocumentTypeError,
    classify_text,
    summarize_roles,
)
from scribe.contexts.styling import StylePresetConfigError
from scribe.utils.text_processing import truncate_display
from scribe.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("SCRIBE_LOGS_PATH", "outs/logs"))

app = typer.Typer(
    help="Classify, style and lay out generated résumé and cover letter text",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _parse_type(value: str) -> DocumentType:
    try:
        return DocumentType.parse(value)
    except UnsupportedDocumentTypeError as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _read_text(input_file: Path) -> str:
    if not input_file.exists():
        typer.secho(f"Error: File not found: {input_file}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return input_file.read_text(encoding="utf-8")


@app.command("classify")
def classify_command(
    input_file: Annotated[
        Path,
        typer.Argument(help="Plain text file with the generated document"),
    ],
    doc_type: Annotated[
        str,
        typer.Option("--type", "-t", help="Document type: resume or coverLetter"),
    ] = "resume",
):
    """
    Show the role assigned to every line.

    Examples:\n

        $ render_document.py classify draft.txt

        $ render_document.py classify letter.txt --type coverLetter
    """
    document_type = _parse_type(doc_type)
    classified = classify_text(_read_text(input_file), document_type)

    if not classified:
        typer.secho("No non-blank lines found", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)

    typer.secho(f"\n{input_file.name} ({document_type.value})", fg=typer.colors.BLUE, bold=True)
    for index, line in enumerate(classified):
        typer.echo(f"  {index:>3}  {line.role.value:<15} {truncate_display(line.text, 60)}")

    typer.echo("")
    for role, count in summarize_roles(classified).items():
        typer.echo(f"  {role}: {count}")
    typer.echo("")


@app.command("render")
def render_command(
    input_file: Annotated[
        Path,
        typer.Argument(help="Plain text file with the generated document"),
    ],
    doc_type: Annotated[
        str,
        typer.Option("--type", "-t", help="Document type: resume or coverLetter"),
    ] = "resume",
    config_path: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="YAML pipeline config (defaults to SCRIBE_CONFIG_PATH)",
        ),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Write both representations to this JSON file"),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Log directory (defaults to SCRIBE_LOGS_PATH/render_<timestamp>)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="List every layout issue"),
    ] = False,
):
    """
    Render a document into paragraphs and pages.

    Prints a summary of roles, pages and layout issues. The full output is
    only written when --output is given.

    Examples:\n

        $ render_document.py render draft.txt --output draft.json

        $ render_document.py render letter.txt -t coverLetter -c scribe.yaml
    """
    document_type = _parse_type(doc_type)
    raw_text = _read_text(input_file)

    if log_dir is None:
        log_dir = LOGS_PATH / f"render_{now()}"
    log_file = setup_composition_logger(log_dir, document_type.value, console=verbose)

    try:
        config = load_pipeline_config(config_path)
        result = render(
            raw_text,
            document_type,
            config.page_config,
            resolver=config.resolver,
            thresholds=config.thresholds,
        )
    except (EmptyContentError, StylePresetConfigError, FileNotFoundError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\n✓ Rendered {input_file.name}", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Type: {document_type.value}")
    typer.echo(f"  Paragraphs: {len(result.paragraphs)}")
    typer.echo(f"  Pages: {len(result.pages)}")

    issues = result.diagnostics.get_inherited_issues()
    if issues:
        color = typer.colors.RED if result.diagnostics.has_unexpected_issues else typer.colors.YELLOW
        typer.secho(f"  Layout issues: {len(issues)}", fg=color)
        limit = len(issues) if verbose else 5
        for issue in issues[:limit]:
            typer.echo(f"    - {issue}")
        if len(issues) > limit:
            typer.echo(f"    ... and {len(issues) - limit} more")

    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(json.dumps(result.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
        typer.echo(f"  Output: {output}")

    typer.echo(f"  Log: {log_file}")
    typer.echo("")

    raise typer.Exit(code=1 if result.diagnostics.has_unexpected_issues else 0)


@app.command("presets")
def presets_command(
    doc_type: Annotated[
        str,
        typer.Option("--type", "-t", help="Document type: resume or coverLetter"),
    ] = "resume",
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="YAML pipeline config with style overrides"),
    ] = None,
):
    """
    Show the resolved style preset of every role.

    Examples:\n

        $ render_document.py presets

        $ render_document.py presets --type coverLetter --config scribe.yaml
    """
    document_type = _parse_type(doc_type)

    try:
        config = load_pipeline_config(config_path)
    except (StylePresetConfigError, FileNotFoundError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho(f"\nStyle presets ({document_type.value})", fg=typer.colors.BLUE, bold=True)
    for role, preset in config.resolver.presets_for(document_type).items():
        flags = [
            name
            for name, enabled in (
                ("bold", preset.bold),
                ("underline", preset.underline),
                ("rule", preset.rule_above),
            )
            if enabled
        ]
        typer.echo(
            f"  {role.value:<15} {preset.font_size_pt:>5}pt  #{preset.color.hex}  "
            f"{preset.alignment.value:<6}  indent {preset.indent_pt:g}  "
            f"space {preset.spacing_before_pt:g}/{preset.spacing_after_pt:g}  {' '.join(flags)}"
        )
    typer.echo("")


if __name__ == "__main__":
    app()
