from .configurable_executor import ConfigurableExecutor
from .executor import Executor, ExecutorInfo
from .registry import ExecutorNotFoundError, ExecutorRegistry

__all__ = [
    "ConfigurableExecutor",
    "Executor",
    "ExecutorInfo",
    "ExecutorNotFoundError",
    "ExecutorRegistry",
]
