from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from DynamicSelection.catalog import playwright
from DynamicSelection.catalog.playwright import PlaywrightRunner
from DynamicSelection.pipeline.errors import CatalogError

LISTING = (
    "Listing tests:\n"
    "  [chromium] › example.spec.ts:10:1 › flow TC_USERS_CREATE @smoke\n"
    "Total: 1 test in 1 file\n"
)


class _FakeRun:
    def __init__(self, stdout: str = "", returncode: int = 0, error=None) -> None:
        self.calls: list[tuple[list[str], dict]] = []
        self._stdout = stdout
        self._returncode = returncode
        self._error = error

    def __call__(self, args, **kwargs):
        self.calls.append((list(args), kwargs))
        if self._error is not None:
            raise self._error
        return subprocess.CompletedProcess(args, self._returncode, self._stdout, "")


class TestPlaywrightRunner:
    def test_list_args_forward_extra_args(self) -> None:
        runner = PlaywrightRunner()
        assert runner.build_list_args(["--project", "chromium"]) == [
            "npx", "playwright", "test", "--list", "--project", "chromium",
        ]

    def test_execute_args_point_at_absolute_test_list(self, tmp_path: Path) -> None:
        runner = PlaywrightRunner(project_dir=tmp_path)
        test_list = tmp_path / "list.txt"
        args = runner.build_execute_args(test_list, ["--workers=2"])
        assert args[:4] == ["npx", "playwright", "test", "--test-list"]
        assert args[4] == str(test_list.resolve())
        assert args[5:] == ["--workers=2"]

    def test_list_tests_parses_stdout(self, tmp_path: Path, monkeypatch) -> None:
        fake = _FakeRun(stdout=LISTING)
        monkeypatch.setattr(playwright.subprocess, "run", fake)

        lines = PlaywrightRunner(project_dir=tmp_path).list_tests()

        assert lines == ["example.spec.ts › flow TC_USERS_CREATE @smoke"]
        args, kwargs = fake.calls[0]
        assert args == ["npx", "playwright", "test", "--list"]
        assert kwargs["cwd"] == tmp_path
        assert kwargs["check"] is True

    def test_list_failure_raises_catalog_error(self, monkeypatch) -> None:
        error = subprocess.CalledProcessError(1, ["npx"], stderr="boom")
        monkeypatch.setattr(playwright.subprocess, "run", _FakeRun(error=error))

        with pytest.raises(CatalogError, match="boom"):
            PlaywrightRunner().list_tests()

    def test_missing_executable_raises_catalog_error(self, monkeypatch) -> None:
        monkeypatch.setattr(
            playwright.subprocess, "run", _FakeRun(error=FileNotFoundError("npx")),
        )
        with pytest.raises(CatalogError):
            PlaywrightRunner().list_tests()

    def test_execute_propagates_exit_code(self, tmp_path: Path, monkeypatch) -> None:
        fake = _FakeRun(returncode=3)
        monkeypatch.setattr(playwright.subprocess, "run", fake)

        code = PlaywrightRunner().execute(tmp_path / "list.txt", ["--headed"])

        assert code == 3
        assert fake.calls[0][0][-1] == "--headed"
