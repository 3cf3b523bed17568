"""YAML-backed loaders for report settings and batch task files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from effort_estimate.core.config_models import ReportSettings, TaskFile

logger = logging.getLogger("effort_estimate")

_ModelT = TypeVar("_ModelT", bound=BaseModel)


class TaskFileError(ValueError):
    """Raised when a settings or task file cannot be read or validated."""


def load_settings(path: str | Path) -> ReportSettings:
    """Load and validate a report settings file."""
    raw_data = _read_mapping(Path(path))
    return _validate(ReportSettings, raw_data, Path(path))


def load_default_settings() -> ReportSettings:
    """Return the built-in report settings."""
    return ReportSettings()


def load_task_file(path: str | Path) -> TaskFile:
    """Load and validate a batch task file.

    Unknown top-level keys are logged and ignored so files can carry notes
    for other tools; everything under ``tasks`` and ``settings`` is strict.
    """
    task_path = Path(path)
    raw_data = _read_mapping(task_path)

    known = set(TaskFile.model_fields)
    for key in sorted(set(raw_data) - known, key=str):
        logger.warning("Task file %s: ignoring unknown key %r", task_path, key)
    filtered = {key: value for key, value in raw_data.items() if key in known}

    return _validate(TaskFile, filtered, task_path)


def _read_mapping(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        raw_data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise TaskFileError(f"File {path} is not valid UTF-8: {exc}") from exc
    except yaml.YAMLError as exc:
        raise TaskFileError(f"Failed to parse YAML at {path}: {exc}") from exc
    except OSError as exc:
        raise OSError(f"Failed to read file {path}: {exc}") from exc

    if raw_data is None:
        raw_data = {}
    if not isinstance(raw_data, dict):
        raise TaskFileError(f"Invalid file at {path}: root must be a YAML mapping")
    return raw_data


def _validate(model: type[_ModelT], raw_data: dict[str, Any], path: Path) -> _ModelT:
    try:
        return model.model_validate(raw_data)
    except ValidationError as exc:
        detail_text = _format_validation_errors(exc)
        raise TaskFileError(f"Invalid file at {path}:\n{detail_text}") from exc


def _format_validation_errors(exc: ValidationError) -> str:
    details: list[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or "<root>"
        details.append(f"{location}: {error['msg']}")
    return "\n".join(f"- {line}" for line in details)
