"""Runtime helpers for cargo executors."""

from cargo_harness.runtime.artifacts import (
    artifact_path,
    binary_path,
    copy_artifacts,
    relocate_artifacts,
    resolve_profile,
)
from cargo_harness.runtime.build_command import build_command

__all__ = [
    "artifact_path",
    "binary_path",
    "build_command",
    "copy_artifacts",
    "relocate_artifacts",
    "resolve_profile",
]
