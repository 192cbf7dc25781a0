from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from cargo_harness.contracts.executor_contracts.executor import Executor, ExecutorInfo


class ExecutorNotFoundError(KeyError):
    """No executor is registered under the key a task file names."""


@runtime_checkable
class ExecutorRegistry(Protocol):
    """Lookup from task executor keys (`cargo.build`) to executors."""

    def get(self, executor_key: str) -> Executor:
        """Return executor for key or raise ExecutorNotFoundError."""
        ...

    def list(self) -> Iterable[ExecutorInfo]:
        """List available executors, ordered by key (CLI help / debugging)."""
        ...
