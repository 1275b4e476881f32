"""Playwright adapter: ``--list`` enumeration and ``--test-list`` execution."""
from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from DynamicSelection.catalog.listing import parse_list_output
from DynamicSelection.pipeline.errors import CatalogError

logger = logging.getLogger(__name__)


class PlaywrightRunner:
    """Runs ``npx playwright test`` in the end-to-end project directory."""

    name = "playwright"

    def __init__(
        self,
        project_dir: str | Path = ".",
        command: Sequence[str] = ("npx", "playwright", "test"),
    ) -> None:
        self._project_dir = Path(project_dir)
        self._command = list(command)

    def build_list_args(self, extra_args: Sequence[str] = ()) -> list[str]:
        return [*self._command, "--list", *extra_args]

    def build_execute_args(
        self, test_list: Path, extra_args: Sequence[str] = ()
    ) -> list[str]:
        return [*self._command, "--test-list", str(Path(test_list).resolve()), *extra_args]

    def list_tests(self, extra_args: Sequence[str] = ()) -> list[str]:
        args = self.build_list_args(extra_args)
        logger.info(
            "[DYNAMIC-SELECT] stage=catalog framework=playwright args=%s",
            " ".join(args),
        )
        try:
            completed = subprocess.run(
                args,
                cwd=self._project_dir,
                capture_output=True,
                text=True,
                check=True,
            )
        except subprocess.CalledProcessError as exc:
            raise CatalogError(
                f"Test listing failed (exit {exc.returncode}): "
                f"{(exc.stderr or '').strip()}"
            ) from exc
        except OSError as exc:
            raise CatalogError(f"Could not start test listing: {exc}") from exc
        return parse_list_output(completed.stdout)

    def execute(self, test_list: Path, extra_args: Sequence[str] = ()) -> int:
        args = self.build_execute_args(test_list, extra_args)
        logger.info(
            "[DYNAMIC-SELECT] stage=execute framework=playwright args=%s",
            " ".join(args),
        )
        return subprocess.run(args, cwd=self._project_dir).returncode
