from __future__ import annotations

from functools import partial
from typing import Any

from cargo_harness.contracts import (
    CargoClient,
    Executor,
    ExecutorContext,
    ExecutorInfo,
    ExecutorResult,
)
from cargo_harness.runtime.artifacts import relocate_artifacts
from cargo_harness.runtime.build_command import build_command

from .config import BuildExecutorOptions, default_options, validate_options


class BuildExecutor(Executor):
    @property
    def info(self) -> ExecutorInfo:
        return ExecutorInfo(
            key="cargo.build",
            name="Cargo Build",
            version="0.1.0",
            description="Run `cargo build` and optionally copy the binary to an artifact dir.",
        )

    def default_options(self) -> dict[str, Any]:
        return default_options()

    def validate_options(self, options: Any) -> BuildExecutorOptions:
        if isinstance(options, BuildExecutorOptions):
            return options
        return validate_options(options)

    def run(
        self,
        options: Any,
        *,
        context: ExecutorContext,
        cargo: CargoClient,
    ) -> ExecutorResult:
        build_options = self.validate_options(options)
        command = build_command("build", build_options.cargo_options(), context)
        build_success = cargo.run(command, cwd=context.root)
        outputs: dict[str, Any] = {"command": command}

        if not build_success:
            return ExecutorResult(
                success=False,
                status="build-failed",
                outputs=outputs,
                message="cargo build failed",
            )

        # cargo stable has no --artifact-dir, so the copy happens here
        artifact_dir = build_options.artifact_dir
        if not artifact_dir:
            return ExecutorResult(success=True, status="ok", outputs=outputs)

        if context.project_name is None:
            message = "No 'projectName' property found in the executor context"
            context.logger.error(message)
            return ExecutorResult(
                success=False,
                status="no-project",
                outputs=outputs,
                message=message,
            )

        relocation = relocate_artifacts(
            context.project_name,
            _resolve_against(context, artifact_dir),
            target_dir=(
                _resolve_against(context, build_options.target_dir)
                if build_options.target_dir is not None
                else None
            ),
            release=build_options.release,
            target=build_options.target or "",
            metadata_provider=partial(cargo.metadata, cwd=context.root),
        )
        if relocation.binary_path is not None:
            outputs["binary_path"] = str(relocation.binary_path)
        if relocation.artifact_path is not None:
            outputs["artifact_path"] = str(relocation.artifact_path)

        return ExecutorResult(
            success=relocation.ok,
            status=relocation.status,
            outputs=outputs,
            message=relocation.error,
        )


def _resolve_against(context: ExecutorContext, path: str) -> str:
    # Relative paths in options are relative to the workspace root, like cargo's own cwd.
    if not path:
        return path
    return str(context.root / path)
