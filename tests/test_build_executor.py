from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import pytest

from cargo_harness.api import run_executor
from cargo_harness.contracts import CargoMetadata, ExecutorContext
from cargo_harness.orchestration.registry import DictExecutorRegistry
from cargo_harness.toolchain.fakes import FakeCargoClient
from cargo_harness.executors.build import BuildExecutor, BuildExecutorOptions


def _context(root: Path, project_name: str | None = "mycrate") -> ExecutorContext:
    return ExecutorContext(
        project_name=project_name,
        root=root,
        logger=logging.getLogger("test.build_executor"),
    )


def _options(**payload: object) -> BuildExecutorOptions:
    return BuildExecutorOptions.model_validate(payload)


def _builds_into(path: Path, content: bytes = b"binary"):
    def on_build(args: Sequence[str]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)

    return on_build


def test_build_failure_short_circuits_relocation(tmp_path):
    cargo = FakeCargoClient(build_success=False)

    result = BuildExecutor().run(
        _options(**{"artifact-dir": str(tmp_path / "dist")}),
        context=_context(tmp_path),
        cargo=cargo,
    )

    assert result.success is False
    assert result.status == "build-failed"
    assert [call.name for call in cargo.calls] == ["run"]
    assert not (tmp_path / "dist").exists()


@pytest.mark.parametrize("build_success", [True, False])
def test_without_artifact_dir_result_mirrors_build(tmp_path, build_success):
    cargo = FakeCargoClient(build_success=build_success)

    result = BuildExecutor().run(_options(), context=_context(tmp_path), cargo=cargo)

    assert result.success is build_success
    assert [call.name for call in cargo.calls] == ["run"]


def test_artifact_dir_is_not_forwarded_to_cargo(tmp_path):
    cargo = FakeCargoClient()

    BuildExecutor().run(
        _options(**{"artifact-dir": "dist", "release": True, "target-dir": "out"}),
        context=_context(tmp_path),
        cargo=cargo,
    )

    assert cargo.commands[0] == ["build", "-p", "mycrate", "--release", "--target-dir", "out"]
    assert cargo.calls[0].kwargs == {"cwd": tmp_path}


def test_successful_build_copies_binary_to_artifact_dir(tmp_path):
    out = tmp_path / "out"
    cargo = FakeCargoClient(on_build=_builds_into(out / "debug" / "mycrate", b"built"))

    result = BuildExecutor().run(
        _options(**{"artifact-dir": str(tmp_path / "dist"), "target-dir": str(out)}),
        context=_context(tmp_path),
        cargo=cargo,
    )

    assert result.success is True
    assert result.status == "ok"
    assert result.outputs["binary_path"] == str(out / "debug" / "mycrate")
    assert result.outputs["artifact_path"] == str(tmp_path / "dist" / "mycrate")
    assert (tmp_path / "dist" / "mycrate").read_bytes() == b"built"


def test_release_target_layout_uses_metadata_target_directory(tmp_path):
    target_dir = tmp_path / "target"
    binary = target_dir / "aarch64-apple-darwin" / "release" / "mycrate"
    cargo = FakeCargoClient(
        metadata=CargoMetadata(target_directory=str(target_dir)),
        on_build=_builds_into(binary, b"cross"),
    )

    result = BuildExecutor().run(
        _options(**{"artifact-dir": "dist", "release": True, "target": "aarch64-apple-darwin"}),
        context=_context(tmp_path),
        cargo=cargo,
    )

    assert result.success is True
    assert (tmp_path / "dist" / "mycrate").read_bytes() == b"cross"
    assert [call.name for call in cargo.calls] == ["run", "metadata"]
    assert cargo.calls[1].kwargs == {"cwd": tmp_path}


def test_missing_binary_fails_but_creates_artifact_dir(tmp_path, caplog):
    cargo = FakeCargoClient()

    with caplog.at_level(logging.ERROR):
        result = BuildExecutor().run(
            _options(**{"artifact-dir": "dist", "target-dir": "out"}),
            context=_context(tmp_path),
            cargo=cargo,
        )

    assert result.success is False
    assert result.status == "io-error"
    assert result.message
    assert (tmp_path / "dist").is_dir()
    assert "Failed to handle the '--artifact-dir' option correctly" in caplog.text


def test_missing_metadata_fails_without_diagnostic(tmp_path, caplog):
    cargo = FakeCargoClient(metadata=None)

    with caplog.at_level(logging.DEBUG):
        result = BuildExecutor().run(
            _options(**{"artifact-dir": "dist"}),
            context=_context(tmp_path),
            cargo=cargo,
        )

    assert result.success is False
    assert result.status == "no-output-root"
    assert caplog.records == []
    assert not (tmp_path / "dist").exists()


def test_missing_project_name_fails_before_relocation(tmp_path, caplog):
    cargo = FakeCargoClient(metadata=CargoMetadata(target_directory=str(tmp_path / "target")))

    with caplog.at_level(logging.ERROR):
        result = BuildExecutor().run(
            _options(**{"artifact-dir": "dist"}),
            context=_context(tmp_path, project_name=None),
            cargo=cargo,
        )

    assert result.success is False
    assert result.status == "no-project"
    assert "No 'projectName' property found in the executor context" in caplog.text
    assert [call.name for call in cargo.calls] == ["run"]
    assert not (tmp_path / "dist").exists()


def test_relocation_is_repeatable(tmp_path):
    out = tmp_path / "out"
    cargo = FakeCargoClient(on_build=_builds_into(out / "debug" / "mycrate", b"same"))
    options = _options(**{"artifact-dir": "dist", "target-dir": "out"})

    first = BuildExecutor().run(options, context=_context(tmp_path), cargo=cargo)
    second = BuildExecutor().run(options, context=_context(tmp_path), cargo=cargo)

    assert first.success is True
    assert second.success is True
    assert (tmp_path / "dist" / "mycrate").read_bytes() == b"same"


def test_absolute_artifact_dir_is_used_as_is(tmp_path):
    out = tmp_path / "out"
    dist = tmp_path / "elsewhere" / "dist"
    cargo = FakeCargoClient(on_build=_builds_into(out / "debug" / "mycrate"))

    result = BuildExecutor().run(
        _options(**{"artifact-dir": str(dist), "target-dir": str(out)}),
        context=_context(tmp_path / "workspace"),
        cargo=cargo,
    )

    assert result.success is True
    assert (dist / "mycrate").exists()


def test_run_executor_dispatches_to_build_executor(tmp_path):
    out = tmp_path / "out"
    cargo = FakeCargoClient(on_build=_builds_into(out / "debug" / "mycrate"))
    registry = DictExecutorRegistry(executors={"cargo.build": BuildExecutor()})

    result = run_executor(
        "cargo.build",
        {"artifact-dir": "dist", "target-dir": "out"},
        registry=registry,
        project_name="mycrate",
        root=tmp_path,
        cargo=cargo,
    )

    assert result.success is True
    assert result.outputs["executor"]["key"] == "cargo.build"
    assert (tmp_path / "dist" / "mycrate").exists()
