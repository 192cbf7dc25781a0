from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExecutorConfigRef(BaseModel):
    model_config = ConfigDict(extra="forbid")

    key: str = Field(min_length=1)


class ProjectConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, min_length=1)
    root: Path = Field(default_factory=Path.cwd)


class TaskConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    executor: ExecutorConfigRef
    project: ProjectConfig = Field(default_factory=ProjectConfig)
    options: dict[str, Any] = Field(default_factory=dict)

    @field_validator("options", mode="before")
    @classmethod
    def _coerce_options_dict(cls, value: Any) -> dict[str, Any]:
        if value is None:
            return {}
        if isinstance(value, dict):
            return value
        raise ValueError("options must be a mapping")
