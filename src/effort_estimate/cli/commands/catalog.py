"""Catalog command: print the bucket table, modifiers and task-type reference."""

from __future__ import annotations

import json

import typer

from effort_estimate.core import (
    BUCKET_TABLE,
    CATALOG_VERSION,
    DEFAULT_REGISTRY,
    TASK_TYPE_TABLE,
)
from effort_estimate.render import format_duration


def run(
    format: str = typer.Option(
        "markdown", "--format", help="Output format: markdown or json."
    ),
) -> None:
    """Show the size buckets, risk modifiers and task-type reference."""
    if format == "markdown":
        typer.echo(_render_markdown())
    elif format == "json":
        typer.echo(json.dumps(_build_payload(), indent=2, sort_keys=True))
    else:
        typer.echo(f"Error: Unknown format: {format!r}. Use markdown or json.", err=True)
        raise typer.Exit(code=2)


def _loc_range(min_loc: int, max_loc: int | None) -> str:
    if max_loc is None:
        return f"{min_loc}+"
    return f"{min_loc}-{max_loc - 1}"


def _build_payload() -> dict:
    return {
        "catalog_version": CATALOG_VERSION,
        "buckets": [
            {
                "bucket": spec.bucket.value,
                "min_loc": spec.min_loc,
                "max_loc": spec.max_loc,
                "base_duration": (
                    format_duration(spec.base_duration) if spec.base_duration else None
                ),
                "confidence": spec.confidence.value,
            }
            for spec in BUCKET_TABLE
        ],
        "modifiers": [
            {"id": m.id, "name": m.name, "weight": m.weight} for m in DEFAULT_REGISTRY.list()
        ],
        "task_types": {name: rng.label for name, rng in TASK_TYPE_TABLE.items()},
    }


def _render_markdown() -> str:
    lines = [
        f"# Estimation Catalog (v{CATALOG_VERSION})",
        "",
        "## Size Buckets",
        "",
        "| Size | LOC | Base Duration | Confidence |",
        "| --- | --- | --- | --- |",
    ]
    for spec in BUCKET_TABLE:
        base = format_duration(spec.base_duration) if spec.base_duration else "must split"
        lines.append(
            f"| {spec.bucket.value} | {_loc_range(spec.min_loc, spec.max_loc)} | "
            f"{base} | {spec.confidence.value} |"
        )
    lines.extend(["", "## Modifiers", "", "| Id | Name | Weight |", "| --- | --- | --- |"])
    for modifier in DEFAULT_REGISTRY.list():
        lines.append(f"| `{modifier.id}` | {modifier.name} | +{modifier.weight:.0%} |")
    lines.extend(["", "## Task Types (advisory)", "", "| Task Type | Typical Size |", "| --- | --- |"])
    for name, bucket_range in TASK_TYPE_TABLE.items():
        lines.append(f"| {name} | {bucket_range.label} |")
    lines.append("")
    return "\n".join(lines)
