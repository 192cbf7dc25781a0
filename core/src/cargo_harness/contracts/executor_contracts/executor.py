from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from cargo_harness.contracts.task_contracts.executor_context import ExecutorContext
from cargo_harness.contracts.task_contracts.executor_result import ExecutorResult
from cargo_harness.contracts.toolchain import CargoClient


@dataclass(frozen=True, slots=True)
class ExecutorInfo:
    key: str
    name: str
    version: str = "0.1.0"
    description: str | None = None


@runtime_checkable
class Executor(Protocol):
    """
    Executor interface contract.

    Executors are the concrete task implementations (build, test, run, ...) that
    the orchestration API dispatches to.
    """

    @property
    def info(self) -> ExecutorInfo: ...

    def run(
        self,
        options: Any,
        *,
        context: ExecutorContext,
        cargo: CargoClient,
    ) -> ExecutorResult:
        """
        Execute once and return a single result.

        `options` is whatever `validate_options()` produced for configurable executors,
        otherwise the raw mapping from the task file.
        """
        ...


def describe_executor(executor: Executor) -> Mapping[str, str]:
    info = executor.info
    return {"key": info.key, "name": info.name, "version": info.version}
