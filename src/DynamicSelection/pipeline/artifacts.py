"""Selection artifacts: the runner test list and the run summary."""
from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

HEADER = (
    "# Auto-generated by dynamic-select",
    "# Source: git diff + suites.yaml + mapping.yaml",
    "",
)


def write_test_list(path: Path, selection: Sequence[str]) -> bool:
    """Write one candidate per line after a header, replacing any old file.

    Returns False without touching the filesystem when the selection is
    empty, meaning there is nothing to run.
    """
    if not selection:
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    content = "\n".join([*HEADER, *selection, ""])
    path.write_text(content, encoding="utf-8")
    logger.debug(
        "[DYNAMIC-SELECT] stage=write event=test_list path=%s lines=%d",
        path,
        len(selection),
    )
    return True


def read_test_list(path: Path) -> tuple[str, ...]:
    """Read a written test list back, skipping comments and blank lines."""
    lines = path.read_text(encoding="utf-8").splitlines()
    return tuple(
        line.strip()
        for line in lines
        if line.strip() and not line.lstrip().startswith("#")
    )


@dataclass(frozen=True)
class SelectionSummary:
    """What a run selected and why."""

    repository: str
    changed_files: tuple[str, ...]
    suite: str
    suite_tags: tuple[str, ...]
    mapped_tests: tuple[str, ...]
    test_list: str
    candidate_count: int
    selected_count: int

    def lines(self) -> list[str]:
        out = [
            "┌─── Dynamic Test Selection ───",
            f"│ Repository:   {self.repository}",
            "│ Changed files:",
        ]
        if self.changed_files:
            out.extend(f"│   {f}" for f in self.changed_files)
        else:
            out.append("│   (none)")
        out.extend([
            f"│ Suite:        {self.suite}",
            f"│ Suite tags:   {' '.join(self.suite_tags) or '(none)'}",
            f"│ Mapped tests: {' '.join(self.mapped_tests) or '(none)'}",
            f"│ Test list:    {self.test_list}",
            f"│ Selected:     {self.selected_count} of "
            f"{self.candidate_count} tests",
            "└──────────────────────────────",
        ])
        return out

    def log(self) -> None:
        for line in self.lines():
            logger.info(line)

    def to_json(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        data = asdict(self)
        for key in ("changed_files", "suite_tags", "mapped_tests"):
            data[key] = list(data[key])
        path.write_text(json.dumps(data, indent=2))

    @classmethod
    def from_json(cls, path: Path) -> SelectionSummary:
        data = json.loads(path.read_text())
        return cls(
            repository=data["repository"],
            changed_files=tuple(data.get("changed_files", [])),
            suite=data["suite"],
            suite_tags=tuple(data.get("suite_tags", [])),
            mapped_tests=tuple(data.get("mapped_tests", [])),
            test_list=data.get("test_list", ""),
            candidate_count=data.get("candidate_count", 0),
            selected_count=data.get("selected_count", 0),
        )
