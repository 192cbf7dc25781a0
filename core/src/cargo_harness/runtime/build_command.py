from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from cargo_harness.contracts.task_contracts.executor_context import ExecutorContext

# Options consumed here or by the executor, never rendered as `--flag value`.
_RESERVED_OPTIONS = frozenset({"toolchain", "args", "artifact-dir"})
_DEFAULT_TOOLCHAIN = "stable"


def build_command(
    base_command: str,
    options: BaseModel | Mapping[str, Any],
    context: ExecutorContext,
) -> list[str]:
    """
    Translate executor options into a cargo argument list.

    Keys are the kebab-case cargo flag names. `artifact-dir` is always dropped since
    cargo stable rejects it.
    """
    payload = _options_payload(options)
    args: list[str] = []

    toolchain = payload.get("toolchain")
    if toolchain and toolchain != _DEFAULT_TOOLCHAIN:
        args.append(f"+{toolchain}")

    args.append(base_command)

    if context.project_name:
        args.extend(["-p", context.project_name])

    for key, value in payload.items():
        if key in _RESERVED_OPTIONS:
            continue
        args.extend(_render_option(key, value))

    args.extend(str(item) for item in payload.get("args") or [])
    return args


def _options_payload(options: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
    if isinstance(options, BaseModel):
        return options.model_dump(mode="python", by_alias=True)
    return dict(options)


def _render_option(key: str, value: Any) -> list[str]:
    flag = f"--{key}"
    if value is None or value is False:
        return []
    if value is True:
        return [flag]
    if key == "features" and isinstance(value, list | tuple):
        return [flag, ",".join(str(item) for item in value)] if value else []
    if isinstance(value, list | tuple):
        rendered: list[str] = []
        for item in value:
            rendered.extend([flag, str(item)])
        return rendered
    text = str(value)
    if not text:
        return []
    return [flag, text]
