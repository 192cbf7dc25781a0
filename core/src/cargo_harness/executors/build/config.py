from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BuildExecutorOptions(BaseModel):
    """Options accepted by the `cargo.build` executor, keyed by cargo flag name."""

    model_config = ConfigDict(extra="forbid")

    toolchain: str | None = None
    target: str | None = None
    profile: str | None = None
    release: bool = False
    target_dir: str | None = Field(default=None, alias="target-dir")
    features: list[str] = Field(default_factory=list)
    all_features: bool = Field(default=False, alias="all-features")
    no_default_features: bool = Field(default=False, alias="no-default-features")
    all_targets: bool = Field(default=False, alias="all-targets")
    bin: str | None = None
    jobs: int | None = Field(default=None, ge=1)
    offline: bool = False
    frozen: bool = False
    locked: bool = False
    verbose: bool = False
    args: list[str] = Field(default_factory=list)

    # Not a cargo stable flag; handled by the executor after the build.
    artifact_dir: str | None = Field(default=None, alias="artifact-dir")

    @field_validator("features", mode="before")
    @classmethod
    def _split_features(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("args", mode="before")
    @classmethod
    def _coerce_args(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return value.split()
        return value

    def cargo_options(self) -> dict[str, Any]:
        """Options forwarded to cargo, i.e. everything except `artifact-dir`."""
        return self.model_dump(mode="python", by_alias=True, exclude={"artifact_dir"})


def default_options() -> dict[str, Any]:
    return BuildExecutorOptions().model_dump(mode="python", by_alias=True)


def validate_options(options: Mapping[str, Any] | None) -> BuildExecutorOptions:
    return BuildExecutorOptions.model_validate(dict(options or {}))
