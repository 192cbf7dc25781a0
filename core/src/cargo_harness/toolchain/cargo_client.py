from __future__ import annotations

import json
import logging
import os
import shlex
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from cargo_harness.contracts.toolchain import CargoMetadata

_ENV_CARGO = "CARGO"
_DEFAULT_CARGO = "cargo"

_logger = logging.getLogger("cargo_harness.cargo")


def resolve_cargo_executable() -> str:
    return os.environ.get(_ENV_CARGO) or _DEFAULT_CARGO


class SubprocessCargoClient:
    """
    CargoClient backed by the `cargo` executable.

    Build output is not captured: cargo writes straight to the inherited stdout/stderr.
    """

    def __init__(
        self,
        *,
        cargo: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Create a client for the given cargo executable and extra environment."""
        self._cargo = cargo or resolve_cargo_executable()
        self._env = dict(env) if env is not None else None

    @property
    def executable(self) -> str:
        return self._cargo

    def run(self, args: Sequence[str], *, cwd: Path | None = None) -> bool:
        """Run `cargo <args>` and return True on a zero exit code."""
        cmd = [self._cargo, *args]
        _logger.info("> %s", shlex.join(cmd))
        try:
            proc = subprocess.run(cmd, cwd=cwd, env=self._child_env(), check=False)
        except OSError as exc:
            _logger.error("Failed to run %s: %s", self._cargo, exc)
            return False
        return proc.returncode == 0

    def metadata(self, *, cwd: Path | None = None) -> CargoMetadata | None:
        """Return parsed `cargo metadata`, or None when it cannot be obtained."""
        cmd = [self._cargo, "metadata", "--format-version=1", "--no-deps"]
        try:
            proc = subprocess.run(
                cmd,
                cwd=cwd,
                env=self._child_env(),
                check=False,
                capture_output=True,
                text=True,
            )
        except OSError as exc:
            _logger.warning("Failed to run %s metadata: %s", self._cargo, exc)
            return None

        if proc.returncode != 0:
            _logger.warning("cargo metadata failed: %s", (proc.stderr or "").strip())
            return None

        try:
            payload = json.loads(proc.stdout or "")
        except json.JSONDecodeError:
            _logger.warning("cargo metadata returned invalid JSON", exc_info=True)
            return None
        return parse_metadata(payload)

    def _child_env(self) -> dict[str, str] | None:
        if self._env is None:
            return None
        return {**os.environ, **self._env}


def parse_metadata(payload: Any) -> CargoMetadata | None:
    if not isinstance(payload, Mapping):
        return None
    target_directory = payload.get("target_directory")
    if not isinstance(target_directory, str) or not target_directory:
        return None
    return CargoMetadata(target_directory=target_directory)
