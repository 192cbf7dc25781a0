from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from cargo_harness.api import run_executor, run_from_yaml
from cargo_harness.configuration import ConfigError
from cargo_harness.orchestration.registry import DictExecutorRegistry
from cargo_harness.toolchain import SubprocessCargoClient
from cargo_harness.executors.build import BuildExecutor

_ENV_LOG_LEVEL = "CARGO_HARNESS_LOG_LEVEL"


def _resolve_log_level() -> str:
    return os.environ.get(_ENV_LOG_LEVEL, "INFO").upper()


def build_registry() -> DictExecutorRegistry:
    executors = {
        "cargo.build": BuildExecutor(),
    }
    return DictExecutorRegistry(executors=executors)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run cargo tasks with artifact relocation.")
    parser.add_argument(
        "--log-level",
        default=_resolve_log_level(),
        help=f"Logging level (default: ${_ENV_LOG_LEVEL} or INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    task = subparsers.add_parser("task", help="Run a task from a YAML file")
    task.add_argument("task_yaml", type=Path, help="Path to task YAML")

    build = subparsers.add_parser("build", help="Run cargo build directly")
    build.add_argument("--project", default=None, help="Project (crate) name")
    build.add_argument("--root", type=Path, default=None, help="Workspace root")
    build.add_argument("--artifact-dir", dest="artifact_dir", default=None)
    build.add_argument("--target-dir", dest="target_dir", default=None)
    build.add_argument("--target", default=None, help="Target triple")
    build.add_argument("--release", action="store_true")
    build.add_argument("cargo_args", nargs=argparse.REMAINDER, help="Extra args after --")
    return parser.parse_args(argv)


def _build_options(args: argparse.Namespace) -> dict[str, object]:
    options: dict[str, object] = {"release": args.release}
    if args.artifact_dir is not None:
        options["artifact-dir"] = args.artifact_dir
    if args.target_dir is not None:
        options["target-dir"] = args.target_dir
    if args.target is not None:
        options["target"] = args.target
    extra = list(args.cargo_args)
    if extra and extra[0] == "--":
        extra = extra[1:]
    if extra:
        options["args"] = extra
    return options


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    registry = build_registry()
    cargo = SubprocessCargoClient()

    try:
        if args.command == "task":
            result = run_from_yaml(args.task_yaml, registry=registry, cargo=cargo)
        else:
            result = run_executor(
                "cargo.build",
                _build_options(args),
                registry=registry,
                project_name=args.project,
                root=args.root,
                cargo=cargo,
            )
    except ConfigError as exc:
        logging.getLogger("cargo_harness.cli").error("%s", exc)
        return 2

    print(result)
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
