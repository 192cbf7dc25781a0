from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ExecutorContext:
    """
    Orchestrator-provided context for a single executor invocation.

    `project_name` may be missing when the orchestrator runs a target outside of a
    named project; executors that need it must handle `None`.
    """

    project_name: str | None
    root: Path
    logger: logging.Logger
