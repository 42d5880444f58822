from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List

import typer
import yaml

from .clarity_metrics import check_clarity_metrics
from .config import EditorConfig, load_config
from .operations import InvalidArgumentError, edit_document, optimize_section
from .structure_analysis import analyze_structure
from .tools import ToolName, call_tool

app = typer.Typer(help="Academic writing editor CLI.", no_args_is_help=True)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Rewrite prose toward academic-writing conventions with tracked changes."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def edit(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    document_type: str = typer.Option(
        "section",
        "--document-type",
        "-t",
        help="One of full_paper, section, paragraph, abstract.",
    ),
    output_format: str = typer.Option(
        "tracked_changes",
        "--output-format",
        "-f",
        help="One of tracked_changes, clean, both.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", help="Directory for saved tracking reports."
    ),
    save_reports: bool | None = typer.Option(
        None,
        "--save-reports/--no-save-reports",
        help="Override config save_reports flag.",
    ),
) -> None:
    """Edit a text file and emit the edited text, metrics and tracking report as JSON."""
    cfg = load_config(config)
    _apply_overrides(cfg, output_dir, save_reports)
    text = input_path.read_text(encoding="utf-8")
    try:
        result = edit_document(text, document_type, output_format, cfg)
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _echo_json(result.to_dict())


@app.command("analyze-structure")
def analyze_structure_command(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    expected_section: List[str] | None = typer.Option(
        None,
        "--expected-section",
        "-s",
        help="Expected section name (repeatable). Defaults to the standard paper layout.",
    ),
) -> None:
    """Check a document's sections and print the structure analysis as JSON."""
    text = input_path.read_text(encoding="utf-8")
    _echo_json(analyze_structure(text, expected_section or None).to_dict())


@app.command("check-clarity")
def check_clarity_command(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
) -> None:
    """Print clarity diagnostics for a text file as JSON."""
    text = input_path.read_text(encoding="utf-8")
    _echo_json(check_clarity_metrics(text).to_dict())


@app.command()
def optimize(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    section_type: str = typer.Option(
        ...,
        "--section-type",
        help="introduction, abstract, overview, conclusion, technical or results.",
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", help="Directory for saved tracking reports."
    ),
) -> None:
    """Optimize a single section and print before/after metrics as JSON."""
    cfg = load_config(config)
    _apply_overrides(cfg, output_dir, None)
    text = input_path.read_text(encoding="utf-8")
    try:
        result = optimize_section(text, section_type, cfg)
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc)) from exc
    _echo_json(result.to_dict())


@app.command()
def call(
    tool: ToolName = typer.Argument(..., help="Operation name."),
    arguments: str = typer.Option(
        ..., "--arguments", "-a", help="JSON object with the operation arguments."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Invoke an operation by name with JSON arguments, as a transport would."""
    try:
        parsed = json.loads(arguments)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON arguments: {exc}") from exc
    result = call_tool(tool.value, parsed, load_config(config))
    typer.echo(result.text, err=result.is_error)
    if result.is_error:
        raise typer.Exit(code=1)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = EditorConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _apply_overrides(
    config: EditorConfig, output_dir: Path | None, save_reports: bool | None
) -> None:
    """Apply CLI overrides to report persistence settings when provided."""
    if output_dir is not None:
        config.output_dir = str(output_dir)
    if save_reports is not None:
        config.save_reports = save_reports


def _echo_json(payload: dict[str, Any]) -> None:
    typer.echo(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
