from __future__ import annotations

from .config import BuildExecutorOptions
from .executor import BuildExecutor

__all__ = ["BuildExecutor", "BuildExecutorOptions"]
