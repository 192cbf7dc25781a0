from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from cargo_harness.contracts.toolchain import CargoMetadata

Profile = Literal["debug", "release"]
RelocationStatus = Literal["ok", "no-output-root", "io-error"]
MetadataProvider = Callable[[], CargoMetadata | None]

_logger = logging.getLogger("cargo_harness.artifacts")


@dataclass(frozen=True, slots=True)
class Relocation:
    """Outcome of a single artifact relocation attempt."""

    status: RelocationStatus
    binary_path: Path | None = None
    artifact_path: Path | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


def resolve_profile(release: bool | None) -> Profile:
    return "release" if release else "debug"


def resolve_target_directory(
    target_dir: str | os.PathLike[str] | None,
    metadata_provider: MetadataProvider | None,
) -> str | None:
    """Return the explicit target dir, else the one cargo reports, else None."""
    if target_dir is not None:
        return os.fspath(target_dir) or None
    if metadata_provider is None:
        return None
    metadata = metadata_provider()
    if metadata is None or not metadata.target_directory:
        return None
    return metadata.target_directory


def binary_path(
    target_directory: str | os.PathLike[str],
    project_name: str,
    *,
    release: bool | None = False,
    target: str | None = "",
) -> Path:
    """
    Where cargo places the binary: `<target-dir>/<target>/<profile>/<name>`.

    An empty target leaves a doubled separator that normalization collapses, which
    yields the host layout `<target-dir>/<profile>/<name>`.
    """
    root = os.fspath(target_directory)
    profile = resolve_profile(release)
    return Path(os.path.normpath(f"{root}/{target or ''}/{profile}/{project_name}"))


def artifact_path(artifact_dir: str | os.PathLike[str], project_name: str) -> Path:
    return Path(os.path.normpath(f"{os.fspath(artifact_dir)}/{project_name}"))


def relocate_artifacts(
    project_name: str,
    artifact_dir: str | os.PathLike[str],
    *,
    target_dir: str | os.PathLike[str] | None = None,
    release: bool | None = False,
    target: str | None = "",
    metadata_provider: MetadataProvider | None = None,
) -> Relocation:
    """
    Copy the binary cargo just built from its target directory to `artifact_dir`.

    This emulates the `--artifact-dir` option that only cargo nightly supports
    (https://github.com/rust-lang/cargo/issues/6790).

    Known limitations:
    - The platform executable suffix is not appended, so on Windows the `.exe`
      binary is not found and the copy fails.
    - Binaries whose name differs from the project name are not handled.

    Args:
        project_name: Name of the project, which is also the binary name.
        artifact_dir: Directory to copy the binary into. Created when missing.
        target_dir: Explicit cargo target directory. When omitted, the directory
            reported by `metadata_provider` is used.
        release: Release build flag. Selects the `release` or `debug` profile dir.
        target: Target triple of the build. Empty means the host layout.
        metadata_provider: Callable returning cargo metadata, queried only when
            `target_dir` is not given.
    """
    root = resolve_target_directory(target_dir, metadata_provider)
    if not root:
        return Relocation(status="no-output-root")

    source = binary_path(root, project_name, release=release, target=target)
    destination = artifact_path(artifact_dir, project_name)

    try:
        Path(artifact_dir).mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, destination)
    except OSError as exc:
        _logger.error("Failed to handle the '--artifact-dir' option correctly: %s", exc)
        return Relocation(
            status="io-error",
            binary_path=source,
            artifact_path=destination,
            error=str(exc),
        )

    try:
        shutil.copymode(source, destination)
    except OSError as exc:
        # The binary is in place; some filesystems refuse chmod.
        _logger.warning("Copied %s but could not copy its permissions: %s", destination, exc)

    _logger.debug("Copied %s to %s", source, destination)
    return Relocation(status="ok", binary_path=source, artifact_path=destination)


def copy_artifacts(
    project_name: str,
    artifact_dir: str | os.PathLike[str],
    target_dir: str | os.PathLike[str] | None = None,
    release: bool | None = False,
    target: str | None = "",
    *,
    metadata_provider: MetadataProvider | None = None,
) -> bool:
    """Boolean form of `relocate_artifacts`: True only when the binary was copied."""
    return relocate_artifacts(
        project_name,
        artifact_dir,
        target_dir=target_dir,
        release=release,
        target=target,
        metadata_provider=metadata_provider,
    ).ok
