"""Changed-file collection from git, best effort."""
from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

from DynamicSelection.shared.types import ChangeSet, SourceResult

logger = logging.getLogger(__name__)

CommandRunner = Callable[[Sequence[str]], str]


def run_git(args: Sequence[str]) -> str:
    """Run a git command and return its stdout. Raises on non-zero exit."""
    completed = subprocess.run(
        list(args),
        capture_output=True,
        text=True,
        check=True,
    )
    return completed.stdout


class GitChangeCollector:
    """Collects changed file paths of a repository.

    With an explicit diff range, returns the files differing across it.
    Without one, unions unstaged changes, staged changes, and the last
    commit against its parent. A failing source contributes nothing.
    """

    def __init__(self, repo_path: str | Path, run: CommandRunner = run_git) -> None:
        self._repo_path = str(repo_path)
        self._run = run

    def _git(self, *args: str) -> list[str]:
        return ["git", "-C", self._repo_path, *args]

    def _source(self, name: str, *args: str) -> SourceResult:
        try:
            output = self._run(self._git(*args))
        except (subprocess.CalledProcessError, OSError) as exc:
            logger.warning(
                "[DYNAMIC-SELECT] stage=changes event=source_failed "
                "source=%s error=%s",
                name,
                exc,
            )
            return SourceResult.empty(name, str(exc))
        paths = [line.strip() for line in output.splitlines() if line.strip()]
        return SourceResult.success(name, paths)

    def _has_parent_commit(self) -> bool:
        try:
            self._run(self._git("rev-parse", "--verify", "--quiet", "HEAD~1"))
        except (subprocess.CalledProcessError, OSError):
            return False
        return True

    def sources(self, diff_range: str = "") -> list[SourceResult]:
        """Return the per-source results that make up the change set."""
        if diff_range.strip():
            try:
                revisions = shlex.split(diff_range)
            except ValueError as exc:
                logger.warning(
                    "[DYNAMIC-SELECT] stage=changes event=source_failed "
                    "source=range error=%s",
                    exc,
                )
                return [SourceResult.empty("range", str(exc))]
            return [self._source("range", "diff", "--name-only", *revisions)]

        results = [
            self._source("unstaged", "diff", "--name-only"),
            self._source("staged", "diff", "--name-only", "--cached"),
        ]
        if self._has_parent_commit():
            results.append(
                self._source("last_commit", "diff", "--name-only", "HEAD~1", "HEAD")
            )
        else:
            results.append(SourceResult.empty("last_commit", "no parent commit"))
        return results

    def collect(self, diff_range: str = "") -> ChangeSet:
        results = self.sources(diff_range)
        change_set = ChangeSet.from_paths(
            path for result in results for path in result.paths
        )
        logger.info(
            "[DYNAMIC-SELECT] stage=changes event=collected repo=%s "
            "sources=%s files=%d",
            self._repo_path,
            ",".join(r.name for r in results if r.ok),
            len(change_set),
        )
        return change_set
