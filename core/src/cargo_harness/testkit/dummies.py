from __future__ import annotations

from typing import Any

from cargo_harness.contracts import (
    CargoClient,
    Executor,
    ExecutorContext,
    ExecutorInfo,
    ExecutorResult,
)


class DummyExecutor(Executor):
    @property
    def info(self) -> ExecutorInfo:
        return ExecutorInfo(key="dummy", name="Dummy Executor", version="0.1.0")

    def run(self, options: Any, *, context: ExecutorContext, cargo: CargoClient) -> ExecutorResult:
        return ExecutorResult(
            success=True,
            status="ok",
            outputs={"used_registry": True, "project_name": context.project_name},
            message="Dummy executor executed",
        )


class RaisingExecutor(Executor):
    @property
    def info(self) -> ExecutorInfo:
        return ExecutorInfo(key="raising", name="Raising Executor", version="0.1.0")

    def run(self, options: Any, *, context: ExecutorContext, cargo: CargoClient) -> ExecutorResult:
        raise RuntimeError("boom")
