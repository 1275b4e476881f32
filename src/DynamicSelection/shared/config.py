from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class RunConfig:
    """Configuration for a complete selection run."""

    repo_path: Path = Path("..")
    diff_range: str = ""
    suite: str = ""
    dry_run: bool = False
    test_list_file: Path = Path(".tmp/dynamic-test-list.txt")
    config_dir: Path = Path("config")
    runner: str = "playwright"
    project_dir: Path = Path(".")
    report_file: Path | None = None

    @property
    def suites_path(self) -> Path:
        return self.config_dir / "suites.yaml"

    @property
    def mapping_path(self) -> Path:
        return self.config_dir / "mapping.yaml"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RunConfig:
        """Build a RunConfig from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()
        report = env.get("SELECTION_REPORT_FILE", "")
        return cls(
            repo_path=Path(env.get("TARGET_REPO_PATH") or defaults.repo_path),
            diff_range=env.get("DIFF_RANGE", "").strip(),
            suite=env.get("SUITE", "").strip(),
            dry_run=env.get("DRY_RUN", "").strip().lower() in _TRUTHY,
            test_list_file=Path(
                env.get("TEST_LIST_FILE") or defaults.test_list_file
            ),
            config_dir=Path(env.get("SELECTION_CONFIG_DIR") or defaults.config_dir),
            runner=env.get("SELECTION_RUNNER") or defaults.runner,
            project_dir=Path(
                env.get("SELECTION_PROJECT_DIR") or defaults.project_dir
            ),
            report_file=Path(report) if report else None,
        )
