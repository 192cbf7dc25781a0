from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from cargo_harness.contracts.toolchain import CargoMetadata


@dataclass(frozen=True, slots=True)
class CargoCall:
    """Record of a cargo call for assertions in tests."""

    name: str
    args: tuple[str, ...]
    kwargs: dict[str, Any]


class FakeCargoClient:
    """
    In-memory CargoClient for unit tests.
    """

    def __init__(
        self,
        *,
        build_success: bool = True,
        metadata: CargoMetadata | None = None,
        on_build: Callable[[Sequence[str]], None] | None = None,
    ) -> None:
        self._build_success = build_success
        self._metadata = metadata
        self._on_build = on_build
        self._calls: list[CargoCall] = []

    @property
    def calls(self) -> list[CargoCall]:
        """Return the recorded calls in order."""
        return list(self._calls)

    @property
    def commands(self) -> list[list[str]]:
        """Return the argument lists passed to run(), in order."""
        return [list(call.args) for call in self._calls if call.name == "run"]

    def run(self, args: Sequence[str], *, cwd: Path | None = None) -> bool:
        """Record the command and report the configured build outcome."""
        self._calls.append(CargoCall(name="run", args=tuple(args), kwargs={"cwd": cwd}))
        if self._build_success and self._on_build is not None:
            self._on_build(args)
        return self._build_success

    def metadata(self, *, cwd: Path | None = None) -> CargoMetadata | None:
        """Return the configured metadata."""
        self._calls.append(CargoCall(name="metadata", args=(), kwargs={"cwd": cwd}))
        return self._metadata
