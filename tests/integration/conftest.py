from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

ROBOT_SUITE = Path(__file__).resolve().parent.parent / "fixtures" / "robot_suite"


def _git(repo: Path, *args: str) -> None:
    subprocess.run(
        ["git", "-C", str(repo), "-c", "user.name=ci", "-c", "user.email=ci@example.com",
         "-c", "commit.gpgsign=false", *args],
        check=True,
        capture_output=True,
    )


@pytest.fixture
def robot_suite_path() -> Path:
    return ROBOT_SUITE


@pytest.fixture
def frontend_repo(tmp_path: Path) -> Path:
    """A two-commit git repository whose last commit touches ProductsPage."""
    if shutil.which("git") is None:
        pytest.skip("git not installed")

    repo = tmp_path / "frontend"
    (repo / "src" / "pages").mkdir(parents=True)
    _git(repo, "init", "-q")
    (repo / "src" / "pages" / "UsersPage.jsx").write_text("export default 1\n")
    (repo / "src" / "pages" / "ProductsPage.jsx").write_text("export default 1\n")
    _git(repo, "add", ".")
    _git(repo, "commit", "-q", "-m", "initial")
    (repo / "src" / "pages" / "ProductsPage.jsx").write_text("export default 2\n")
    _git(repo, "commit", "-q", "-am", "change products page")
    return repo


@pytest.fixture
def selection_config(tmp_path: Path) -> Path:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "suites.yaml").write_text(
        "defaultSuite: smoke\n"
        "suites:\n"
        "  smoke:\n"
        "    tags: ['@smoke']\n"
        "  changes-only:\n"
        "    tags: []\n"
    )
    (config_dir / "mapping.yaml").write_text(
        "rules:\n"
        "  - pattern: 'src/pages/UsersPage\\.'\n"
        "    tests: [TC_LOGIN_VALID]\n"
        "  - pattern: 'src/pages/ProductsPage\\.'\n"
        "    tests: [TC_PRODUCTS_ORDER]\n"
    )
    return config_dir
