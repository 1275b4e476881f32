from __future__ import annotations

from pathlib import Path

from robot.api import SuiteVisitor

from DynamicSelection.catalog.robot import render_robot_line, suite_root
from DynamicSelection.pipeline.artifacts import read_test_list


class TestListPreRunModifier(SuiteVisitor):
    """PreRunModifier that keeps only the tests named in a test list file.

    Usage CLI::

        robot --prerunmodifier module.TestListPreRunModifier:file tests/

    Usage programmatic:
        suite.visit(TestListPreRunModifier('.tmp/dynamic-test-list.txt'))
    """

    def __init__(self, test_list_file: str) -> None:
        self._selected: set[str] = set(read_test_list(Path(test_list_file)))
        self._stats = {"kept": 0, "removed": 0}
        self._root: Path | None = None

    def start_suite(self, suite) -> None:  # type: ignore[override]
        source = suite.source or suite.name
        if self._root is None:
            # first suite visited is the root one
            self._root = suite_root(suite.source or ".")
        original = len(suite.tests)
        suite.tests = [
            t
            for t in suite.tests
            if render_robot_line(source, t.name, t.tags, self._root)
            in self._selected
        ]
        self._stats["kept"] += len(suite.tests)
        self._stats["removed"] += original - len(suite.tests)

    def end_suite(self, suite) -> None:  # type: ignore[override]
        suite.suites = [s for s in suite.suites if s.test_count > 0]

    def visit_test(self, test) -> None:  # type: ignore[override]
        pass  # skip internals for performance

    @property
    def stats(self) -> dict[str, int]:
        return dict(self._stats)
