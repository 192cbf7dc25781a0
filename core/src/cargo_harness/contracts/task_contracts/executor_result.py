from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

ExecutorStatus = Literal["ok", "build-failed", "no-project", "no-output-root", "io-error", "failed"]


@dataclass(frozen=True, slots=True)
class ExecutorResult:
    """
    Public executor outcome contract.

    `success` is the only field the orchestrator acts on. `status` tells callers
    which path produced it and never changes the boolean.
    """

    success: bool
    status: ExecutorStatus

    # Freeform outputs: binary path, artifact path, cargo command, etc.
    outputs: Mapping[str, Any] = field(default_factory=dict)

    message: str | None = None
