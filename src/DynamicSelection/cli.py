"""CLI entry points for the dynamic test selection pipeline."""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from DynamicSelection.pipeline.errors import DynamicSelectionError
from DynamicSelection.shared.config import RunConfig

logger = logging.getLogger("DynamicSelection")


def _setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
    )


def _split_passthrough(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split argv at the first ``--`` into our args and runner args."""
    if "--" not in argv:
        return list(argv), []
    idx = argv.index("--")
    return argv[:idx], argv[idx + 1:]


def _add_common_options(p: argparse.ArgumentParser) -> None:
    p.add_argument("--repo", type=Path, help="Target repository (TARGET_REPO_PATH)")
    p.add_argument("--diff-range", help="Explicit git diff range (DIFF_RANGE)")
    p.add_argument(
        "--config-dir", type=Path,
        help="Directory holding suites.yaml and mapping.yaml",
    )


def _add_run_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "run", help="Select tests for the current change and run them",
    )
    _add_common_options(p)
    p.add_argument("--suite", help="Suite name overriding defaultSuite (SUITE)")
    p.add_argument(
        "--dry-run", action="store_true", default=None,
        help="Write the selection but skip execution (DRY_RUN)",
    )
    p.add_argument("--test-list", type=Path, help="Output test list (TEST_LIST_FILE)")
    p.add_argument("--runner", help="Test runner: playwright or robot")
    p.add_argument("--project-dir", type=Path, help="End-to-end project directory")
    p.add_argument("--report", type=Path, help="Write the selection summary as JSON")
    p.set_defaults(func=_cmd_run)


def _add_changes_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("changes", help="Print the changed files")
    _add_common_options(p)
    p.set_defaults(func=_cmd_changes)


def _add_suites_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser("suites", help="Print the configured suites")
    _add_common_options(p)
    p.set_defaults(func=_cmd_suites)


def _resolve_config(args: argparse.Namespace) -> RunConfig:
    """Environment values, overridden by any flag given on the command line."""
    overrides = {
        "repo_path": getattr(args, "repo", None),
        "diff_range": getattr(args, "diff_range", None),
        "config_dir": getattr(args, "config_dir", None),
        "suite": getattr(args, "suite", None),
        "dry_run": getattr(args, "dry_run", None),
        "test_list_file": getattr(args, "test_list", None),
        "runner": getattr(args, "runner", None),
        "project_dir": getattr(args, "project_dir", None),
        "report_file": getattr(args, "report", None),
    }
    return dataclasses.replace(
        RunConfig.from_env(),
        **{k: v for k, v in overrides.items() if v is not None},
    )


def _cmd_run(args: argparse.Namespace) -> int:
    from DynamicSelection.pipeline.run import run_pipeline

    config = _resolve_config(args)
    try:
        return run_pipeline(config, extra_args=args.passthrough)
    except DynamicSelectionError as exc:
        logger.error("[DYNAMIC-SELECT] Selection failed: %s", exc)
        return 2


def _cmd_changes(args: argparse.Namespace) -> int:
    from DynamicSelection.changes.collector import GitChangeCollector

    config = _resolve_config(args)
    change_set = GitChangeCollector(config.repo_path).collect(config.diff_range)
    for path in change_set:
        print(path)
    return 0


def _cmd_suites(args: argparse.Namespace) -> int:
    from DynamicSelection.shared.loader import load_suite_catalog

    config = _resolve_config(args)
    try:
        catalog = load_suite_catalog(config.suites_path)
    except DynamicSelectionError as exc:
        logger.error("[DYNAMIC-SELECT] Could not load suites: %s", exc)
        return 2
    for name in catalog.names():
        marker = "*" if name == catalog.default_suite else " "
        tags = " ".join(sorted(catalog.suites[name].tags))
        print(f"{marker} {name}: {tags}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="dynamic-select",
        description="Change- and suite-driven end-to-end test selection",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    _add_run_parser(subparsers)
    _add_changes_parser(subparsers)
    _add_suites_parser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    raw = sys.argv[1:] if argv is None else argv
    ours, passthrough = _split_passthrough(raw)
    parser = build_parser()
    args = parser.parse_args(ours)
    args.passthrough = passthrough
    _setup_logging(getattr(args, "verbose", False))

    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
