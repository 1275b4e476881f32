from __future__ import annotations

from pathlib import Path

from DynamicSelection.shared.config import RunConfig


class TestRunConfigFromEnv:
    def test_defaults(self) -> None:
        config = RunConfig.from_env({})
        assert config.repo_path == Path("..")
        assert config.diff_range == ""
        assert config.suite == ""
        assert config.dry_run is False
        assert config.test_list_file == Path(".tmp/dynamic-test-list.txt")
        assert config.runner == "playwright"
        assert config.report_file is None
        assert config.suites_path == Path("config/suites.yaml")
        assert config.mapping_path == Path("config/mapping.yaml")

    def test_reads_environment(self) -> None:
        config = RunConfig.from_env({
            "TARGET_REPO_PATH": "/work/frontend",
            "DIFF_RANGE": " origin/main...HEAD ",
            "SUITE": "regression",
            "DRY_RUN": "true",
            "TEST_LIST_FILE": "/tmp/list.txt",
            "SELECTION_CONFIG_DIR": "/etc/selection",
            "SELECTION_RUNNER": "robot",
            "SELECTION_PROJECT_DIR": "e2e",
            "SELECTION_REPORT_FILE": "out/summary.json",
        })
        assert config.repo_path == Path("/work/frontend")
        assert config.diff_range == "origin/main...HEAD"
        assert config.suite == "regression"
        assert config.dry_run is True
        assert config.test_list_file == Path("/tmp/list.txt")
        assert config.suites_path == Path("/etc/selection/suites.yaml")
        assert config.runner == "robot"
        assert config.project_dir == Path("e2e")
        assert config.report_file == Path("out/summary.json")

    def test_dry_run_only_for_truthy_values(self) -> None:
        assert RunConfig.from_env({"DRY_RUN": "false"}).dry_run is False
        assert RunConfig.from_env({"DRY_RUN": "1"}).dry_run is True
        assert RunConfig.from_env({"DRY_RUN": "YES"}).dry_run is True

    def test_empty_values_fall_back_to_defaults(self) -> None:
        config = RunConfig.from_env({"TARGET_REPO_PATH": "", "SELECTION_RUNNER": ""})
        assert config.repo_path == Path("..")
        assert config.runner == "playwright"
