from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConfigurableExecutor(Protocol):
    """
    Optional executor extension for option defaults + validation.

    `run_executor` deep-merges the task file's `options` over `default_options()` and
    passes the merge to `validate_options()` before cargo is invoked, so bad options
    fail as a ConfigError instead of as a cargo error.
    """

    def default_options(self) -> Mapping[str, Any]:
        """Return defaults keyed by cargo flag name (`target-dir`, not `target_dir`)."""
        ...

    def validate_options(self, options: Mapping[str, Any]) -> Any:
        """
        Validate the merged options and return the object handed to `run()`.

        Raise pydantic's ValidationError on bad input.
        """
        ...
