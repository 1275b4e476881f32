"""Pipeline orchestrator: changes -> mapping + suite -> catalog -> selection -> run."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from DynamicSelection.catalog.ports import TestRunner
from DynamicSelection.catalog.registry import default_registry
from DynamicSelection.changes.collector import GitChangeCollector
from DynamicSelection.pipeline.artifacts import SelectionSummary, write_test_list
from DynamicSelection.pipeline.errors import ConfigurationError
from DynamicSelection.selection.engine import resolve_selected_tests
from DynamicSelection.selection.mapping import compile_rules, resolve_mapped_tests
from DynamicSelection.selection.suites import resolve_suite_name, resolve_suite_tags
from DynamicSelection.shared.config import RunConfig
from DynamicSelection.shared.loader import load_mapping_table, load_suite_catalog

logger = logging.getLogger(__name__)


def build_runner(config: RunConfig) -> TestRunner:
    try:
        return default_registry.get(config.runner, project_dir=config.project_dir)
    except KeyError as exc:
        raise ConfigurationError(str(exc.args[0])) from exc


def run_pipeline(
    config: RunConfig,
    extra_args: Sequence[str] = (),
    runner: TestRunner | None = None,
    collector: GitChangeCollector | None = None,
) -> int:
    """Run one selection and, unless dry-run, execute it.

    Returns 0 when nothing is selected or on a dry run, otherwise the
    runner's exit status. Configuration problems raise ConfigurationError.
    """
    suite_catalog = load_suite_catalog(config.suites_path)
    mapping_table = load_mapping_table(config.mapping_path)
    suite_name = resolve_suite_name(suite_catalog, config.suite)
    suite_tags = resolve_suite_tags(suite_catalog, suite_name)
    compile_rules(mapping_table)

    collector = collector or GitChangeCollector(config.repo_path)
    changed_files = collector.collect(config.diff_range)

    mapped_tests = resolve_mapped_tests(mapping_table, changed_files)

    logger.info(
        "[DYNAMIC-SELECT] stage=resolve event=complete suite=%s tags=%d "
        "mapped=%d",
        suite_name,
        len(suite_tags),
        len(mapped_tests),
    )

    runner = runner or build_runner(config)
    candidates = runner.list_tests(extra_args)
    selected = resolve_selected_tests(candidates, suite_tags, mapped_tests)

    if not write_test_list(config.test_list_file, selected):
        logger.info("No tests selected. Exiting.")
        return 0

    summary = SelectionSummary(
        repository=str(config.repo_path),
        changed_files=changed_files.paths,
        suite=suite_name,
        suite_tags=tuple(sorted(suite_tags)),
        mapped_tests=tuple(sorted(mapped_tests)),
        test_list=str(config.test_list_file),
        candidate_count=len(candidates),
        selected_count=len(selected),
    )
    summary.log()
    if config.report_file is not None:
        summary.to_json(config.report_file)

    if config.dry_run:
        logger.info("DRY_RUN=true -> skipping %s execution", runner.name)
        return 0

    return_code = runner.execute(config.test_list_file, extra_args)
    logger.info(
        "[DYNAMIC-SELECT] stage=execute event=complete return_code=%d",
        return_code,
    )
    return return_code
