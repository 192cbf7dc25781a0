from .executor_context import ExecutorContext
from .executor_result import ExecutorResult, ExecutorStatus
from .task_config import ExecutorConfigRef, ProjectConfig, TaskConfig

__all__ = [
    "ExecutorConfigRef",
    "ExecutorContext",
    "ExecutorResult",
    "ExecutorStatus",
    "ProjectConfig",
    "TaskConfig",
]
