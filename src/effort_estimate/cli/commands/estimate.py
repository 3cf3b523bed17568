"""Estimate command: single task from flags or a batch from a YAML file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, NoReturn, Optional

import typer

from effort_estimate.adapters.config_loader import (
    TaskFileError,
    load_default_settings,
    load_settings,
    load_task_file,
)
from effort_estimate.cli.commands._pipeline import run_estimate_pipeline
from effort_estimate.core import EstimationRequest, InvalidInput
from effort_estimate.render import EstimationReport, render_json_report, render_markdown_report

logger = logging.getLogger("effort_estimate")


def run(
    name: str = typer.Argument("Task", help="Label for the task in the report."),
    loc: Optional[int] = typer.Option(
        None, "--loc", "-l", help="Estimated lines of code (non-negative integer)."
    ),
    modifier: Optional[List[str]] = typer.Option(
        None,
        "--modifier",
        "-m",
        help=(
            "Risk modifier to apply (repeatable): new_technology, external_dependencies, "
            "unclear_requirements, complex_testing."
        ),
    ),
    task_type: Optional[str] = typer.Option(
        None,
        "--task-type",
        help="Task type for an advisory cross-check, e.g. 'bug fix' or 'api integration'.",
    ),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Path to a YAML task file (batch mode)."
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to a report settings YAML."
    ),
    format: Optional[str] = typer.Option(
        None, "--format", help="Output format: markdown or json."
    ),
    title: Optional[str] = typer.Option(
        None, "--title", "-t", help="Report title."
    ),
) -> None:
    """Size a task and recommend whether to split it."""
    # --- Resolve input source (exactly one) ---
    if loc is None and file is None:
        _error("Provide --loc or --file.", 2)
    if loc is not None and file is not None:
        _error("Provide only one input source: --loc or --file.", 2)
    if file is not None and (modifier or task_type):
        _error("--modifier and --task-type apply to --loc only; set them in the task file.", 2)

    # --- Load settings ---
    try:
        settings = load_settings(config) if config else load_default_settings()
    except FileNotFoundError:
        _error(f"Config file not found: {config}", 2)
    except TaskFileError as exc:
        _error(f"Config validation error: {exc}", 2)

    # --- Build requests ---
    requests: list[tuple[str, EstimationRequest]] = []
    if file is not None:
        try:
            task_file = load_task_file(file)
        except FileNotFoundError:
            _error(f"File not found: {file}", 2)
        except TaskFileError as exc:
            _error(f"Task file error: {exc}", 2)
        logger.debug("Loaded %d tasks from %s", len(task_file.tasks), file)
        if config is None:
            settings = task_file.settings
        requests = [(spec.name, spec.to_request()) for spec in task_file.tasks]
    else:
        try:
            request = EstimationRequest(
                loc_estimate=loc,
                selected_modifiers=frozenset(modifier or ()),
                task_type_hint=task_type,
            )
        except InvalidInput as exc:
            _error(str(exc), 2)
        requests = [(name, request)]

    # --- Run pipeline ---
    try:
        report = run_estimate_pipeline(requests, settings, title=title)
    except InvalidInput as exc:
        _error(str(exc), 2)

    # --- Output ---
    _emit(report, format or settings.output_format)


def _emit(report: EstimationReport, output_format: str) -> None:
    if output_format == "markdown":
        typer.echo(render_markdown_report(report))
    elif output_format == "json":
        typer.echo(render_json_report(report), nl=False)
    else:
        _error(f"Unknown format: {output_format!r}. Use markdown or json.", 2)


def _error(message: str, exit_code: int) -> NoReturn:
    """Print error to stderr and exit."""
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=exit_code)

