from .executor_contracts import (
    ConfigurableExecutor,
    Executor,
    ExecutorInfo,
    ExecutorNotFoundError,
    ExecutorRegistry,
)
from .task_contracts import (
    ExecutorConfigRef,
    ExecutorContext,
    ExecutorResult,
    ExecutorStatus,
    ProjectConfig,
    TaskConfig,
)
from .toolchain import CargoClient, CargoMetadata

__all__ = [
    "CargoClient",
    "CargoMetadata",
    "ConfigurableExecutor",
    "Executor",
    "ExecutorConfigRef",
    "ExecutorContext",
    "ExecutorInfo",
    "ExecutorNotFoundError",
    "ExecutorRegistry",
    "ExecutorResult",
    "ExecutorStatus",
    "ProjectConfig",
    "TaskConfig",
]
