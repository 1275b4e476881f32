"""Test runner protocol -- the port for catalog and execution adapters."""
from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class TestRunner(Protocol):
    """Protocol for test runners.

    Decouples selection from the framework that discovers and runs the
    tests. ``list_tests`` returns one candidate line per discoverable test;
    ``execute`` runs the tests named in a written test list and returns the
    runner's exit status.
    """

    @property
    def name(self) -> str: ...

    def list_tests(self, extra_args: Sequence[str] = ()) -> list[str]: ...

    def execute(self, test_list: Path, extra_args: Sequence[str] = ()) -> int: ...
