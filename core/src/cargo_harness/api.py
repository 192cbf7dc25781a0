from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from cargo_harness.configuration import (
    ConfigError,
    coerce_mapping,
    deep_merge,
    format_validation_error,
    load_task_config,
)
from cargo_harness.contracts import (
    CargoClient,
    ConfigurableExecutor,
    Executor,
    ExecutorContext,
    ExecutorNotFoundError,
    ExecutorRegistry,
    ExecutorResult,
)
from cargo_harness.contracts.executor_contracts.executor import describe_executor
from cargo_harness.toolchain import SubprocessCargoClient


def run_executor(
    executor_key: str,
    options: Mapping[str, Any] | None = None,
    *,
    registry: ExecutorRegistry,
    project_name: str | None = None,
    root: str | Path | None = None,
    cargo: CargoClient | None = None,
) -> ExecutorResult:
    """Resolve an executor, validate its options and run it once."""
    if not executor_key or not executor_key.strip():
        raise ConfigError("executor key must be a non-empty string")

    try:
        executor = registry.get(executor_key)
    except ExecutorNotFoundError:
        return ExecutorResult(
            success=False,
            status="failed",
            outputs={"executor_key": executor_key},
            message=f"Executor not found: {executor_key}",
        )

    validated_options = _validate_options(executor, executor_key, options or {})
    context = ExecutorContext(
        project_name=project_name,
        root=Path(root) if root is not None else Path.cwd(),
        logger=logging.getLogger(f"cargo_harness.task.{project_name or executor_key}"),
    )
    cargo_client = cargo or SubprocessCargoClient()

    try:
        result = executor.run(validated_options, context=context, cargo=cargo_client)
    except Exception as exc:
        context.logger.error("Executor %s raised", executor_key, exc_info=True)
        return ExecutorResult(
            success=False,
            status="failed",
            outputs={"executor": describe_executor(executor)},
            message=f"Executor failed: {exc}",
        )

    outputs = dict(result.outputs)
    outputs.setdefault("executor", describe_executor(executor))
    return ExecutorResult(
        success=result.success,
        status=result.status,
        outputs=outputs,
        message=result.message,
    )


def run_from_yaml(
    task_yaml: str | Path,
    *,
    registry: ExecutorRegistry,
    cargo: CargoClient | None = None,
) -> ExecutorResult:
    task = load_task_config(task_yaml)
    return run_executor(
        task.executor.key,
        task.options,
        registry=registry,
        project_name=task.project.name,
        root=task.project.root,
        cargo=cargo,
    )


def _validate_options(
    executor: Executor,
    executor_key: str,
    options: Mapping[str, Any],
) -> Any:
    if not isinstance(executor, ConfigurableExecutor):
        return dict(options)

    merged = deep_merge(coerce_mapping(executor.default_options()), options)
    try:
        return executor.validate_options(merged)
    except ValidationError as exc:
        raise ConfigError(format_validation_error(executor_key, exc)) from exc
