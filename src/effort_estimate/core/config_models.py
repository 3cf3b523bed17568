"""Pydantic models for report settings and batch task files."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    field_validator,
    model_validator,
)

from effort_estimate.core.errors import InvalidInput
from effort_estimate.core.models import EstimationRequest, coerce_loc
from effort_estimate.core.modifiers import DEFAULT_REGISTRY

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

OutputFormat = Literal["markdown", "json"]


class ReportSettings(BaseModel):
    """Presentation settings for rendered reports."""

    model_config = ConfigDict(extra="forbid")

    title: NonEmptyStr = "Effort Estimate Report"
    output_format: OutputFormat = "markdown"
    show_phase_details: bool = True


class TaskSpec(BaseModel):
    """One task entry in a batch file."""

    model_config = ConfigDict(extra="forbid")

    name: NonEmptyStr
    loc_estimate: int
    modifiers: list[NonEmptyStr] = Field(default_factory=list)
    task_type: NonEmptyStr | None = None

    @field_validator("loc_estimate", mode="before")
    @classmethod
    def _whole_loc(cls, value: object) -> int:
        try:
            return coerce_loc(value)
        except InvalidInput as exc:
            raise ValueError(str(exc)) from exc

    @field_validator("modifiers")
    @classmethod
    def _known_modifiers(cls, value: list[str]) -> list[str]:
        normalized: list[str] = []
        for modifier_id in value:
            try:
                modifier = DEFAULT_REGISTRY.lookup(modifier_id)
            except InvalidInput as exc:
                raise ValueError(str(exc)) from exc
            if modifier.id not in normalized:
                normalized.append(modifier.id)
        return normalized

    def to_request(self) -> EstimationRequest:
        return EstimationRequest(
            loc_estimate=self.loc_estimate,
            selected_modifiers=frozenset(self.modifiers),
            task_type_hint=self.task_type,
        )


class TaskFile(BaseModel):
    """Top-level batch file: tasks plus optional report settings."""

    model_config = ConfigDict(extra="forbid")

    tasks: list[TaskSpec] = Field(min_length=1)
    settings: ReportSettings = Field(default_factory=ReportSettings)

    @model_validator(mode="after")
    def _unique_names(self) -> "TaskFile":
        seen: set[str] = set()
        for task in self.tasks:
            if task.name in seen:
                raise ValueError(f"duplicate task name {task.name!r}")
            seen.add(task.name)
        return self
