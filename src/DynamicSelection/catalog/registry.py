"""Runner registry for catalog and execution adapters."""
from __future__ import annotations

from typing import Any

from DynamicSelection.catalog.playwright import PlaywrightRunner
from DynamicSelection.catalog.ports import TestRunner
from DynamicSelection.catalog.robot import RobotRunner


class RunnerRegistry:
    """Registry mapping runner names to their implementation classes."""

    def __init__(self) -> None:
        self._runners: dict[str, type] = {}

    def register(self, runner_class: type) -> None:
        """Register a runner class by its name attribute."""
        self._runners[runner_class.name] = runner_class

    def get(self, name: str, **kwargs: Any) -> TestRunner:
        """Instantiate and return a runner by name."""
        if name not in self._runners:
            available = ", ".join(sorted(self._runners))
            msg = f"Unknown runner {name!r}. Available: {available}"
            raise KeyError(msg)
        return self._runners[name](**kwargs)

    def available(self) -> list[str]:
        return sorted(self._runners)


def _build_default_registry() -> RunnerRegistry:
    registry = RunnerRegistry()
    registry.register(PlaywrightRunner)
    registry.register(RobotRunner)
    return registry


default_registry = _build_default_registry()
