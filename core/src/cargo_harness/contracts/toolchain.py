from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class CargoMetadata:
    """Subset of `cargo metadata` output the executors rely on."""

    target_directory: str


@runtime_checkable
class CargoClient(Protocol):
    """
    Facade contract for the cargo toolchain.

    `run` is the build runner; `metadata` is the metadata provider.
    """

    def run(self, args: Sequence[str], *, cwd: Path | None = None) -> bool:
        """Run `cargo <args>` to completion and report whether it exited cleanly."""
        ...

    def metadata(self, *, cwd: Path | None = None) -> CargoMetadata | None:
        """Return workspace metadata, or None when cargo cannot provide it."""
        ...
