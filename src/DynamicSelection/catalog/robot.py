"""Robot Framework adapter: suite model enumeration and run_cli execution."""
from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from DynamicSelection.pipeline.errors import CatalogError

logger = logging.getLogger(__name__)

SEPARATOR = "›"
MODIFIER = "DynamicSelection.execution.prerun_modifier.TestListPreRunModifier"


def render_tag(tag: str) -> str:
    tag = str(tag)
    return tag if tag.startswith("@") else f"@{tag}"


def suite_root(source: Any) -> Path:
    """Directory that rendered locations are relative to."""
    path = Path(str(source)).resolve()
    return path if path.is_dir() else path.parent


def render_robot_line(
    source: Any, test_name: str, tags: Iterable[str], root: Any = None
) -> str:
    """Render one Robot test as a candidate line.

    ``checkout/login.robot › Valid Login @smoke @auth``

    The location is the suite file relative to ``root`` when given, so
    equally named files in different directories stay distinct.
    """
    location = ""
    if source:
        path = Path(str(source))
        location = path.name
        base = Path(str(root)).resolve() if root is not None else None
        if base is not None and path.resolve().is_relative_to(base):
            location = path.resolve().relative_to(base).as_posix()
    line = f"{location} {SEPARATOR} {test_name}"
    rendered = [render_tag(t) for t in tags]
    if rendered:
        line += " " + " ".join(rendered)
    return line


class RobotRunner:
    """Lists and runs Robot Framework tests of a suite file or directory."""

    name = "robot"

    def __init__(
        self,
        project_dir: str | Path = ".",
        output_dir: str | Path = "./results",
    ) -> None:
        self._suite_path = Path(project_dir)
        self._output_dir = Path(output_dir)

    def _collect(self, suite: Any, root: Path) -> list[str]:
        lines = [
            render_robot_line(
                suite.source or suite.name, test.name, test.tags, root
            )
            for test in suite.tests
        ]
        for child in suite.suites:
            lines.extend(self._collect(child, root))
        return lines

    def list_tests(self, extra_args: Sequence[str] = ()) -> list[str]:
        from robot.api import TestSuite as RobotTestSuite

        if extra_args:
            logger.debug(
                "[DYNAMIC-SELECT] stage=catalog framework=robot "
                "event=extra_args_ignored args=%s",
                " ".join(extra_args),
            )
        try:
            suite = RobotTestSuite.from_file_system(str(self._suite_path))
        except Exception as exc:
            raise CatalogError(
                f"Could not parse Robot Framework suite {self._suite_path}: {exc}"
            ) from exc
        return self._collect(suite, suite_root(suite.source or self._suite_path))

    def build_robot_args(
        self, test_list: Path, extra_args: Sequence[str] = ()
    ) -> list[str]:
        return [
            "--outputdir",
            str(self._output_dir),
            "--prerunmodifier",
            f"{MODIFIER}:{Path(test_list).resolve()}",
            *extra_args,
            str(self._suite_path),
        ]

    def execute(self, test_list: Path, extra_args: Sequence[str] = ()) -> int:
        import robot

        args = self.build_robot_args(test_list, extra_args)
        logger.info(
            "[DYNAMIC-SELECT] stage=execute framework=robot args=%s",
            " ".join(args),
        )
        return robot.run_cli(args, exit=False)  # type: ignore[attr-defined]
