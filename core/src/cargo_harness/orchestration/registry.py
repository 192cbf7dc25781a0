from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from cargo_harness.contracts import Executor, ExecutorInfo, ExecutorNotFoundError, ExecutorRegistry


@dataclass
class DictExecutorRegistry(ExecutorRegistry):
    """
    Executors keyed by the name task files use (`cargo.build`, ...).

    Each key must match the executor's own `info.key`, so results and logs report
    the same name the task file asked for.
    """

    executors: dict[str, Executor]

    def __post_init__(self) -> None:
        mismatched = sorted(
            key for key, executor in self.executors.items() if executor.info.key != key
        )
        if mismatched:
            raise ValueError(f"Executor keys do not match their info.key: {mismatched}")

    def get(self, executor_key: str) -> Executor:
        try:
            return self.executors[executor_key]
        except KeyError as e:
            raise ExecutorNotFoundError(
                f"{executor_key} (available: {', '.join(sorted(self.executors)) or 'none'})"
            ) from e

    def list(self) -> Iterable[ExecutorInfo]:
        return [self.executors[key].info for key in sorted(self.executors)]
