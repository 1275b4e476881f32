"""Change-driven mapping of file paths to test identifiers."""
from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from DynamicSelection.pipeline.errors import InvalidPatternError
from DynamicSelection.shared.types import MappingRule, MappingTable

logger = logging.getLogger(__name__)


def compile_rules(
    table: MappingTable,
) -> list[tuple[MappingRule, re.Pattern[str]]]:
    """Compile every rule pattern, failing on the first invalid one."""
    compiled = []
    for rule in table.rules:
        try:
            compiled.append((rule, re.compile(rule.pattern)))
        except re.error as exc:
            raise InvalidPatternError(rule.pattern, str(exc)) from exc
    return compiled


def resolve_mapped_tests(
    table: MappingTable,
    changed_files: Iterable[str],
) -> frozenset[str]:
    """Return the union of test ids of every rule matching any changed file.

    Patterns are searched anywhere in the path (not anchored).
    """
    compiled = compile_rules(table)
    files = list(changed_files)
    tests: set[str] = set()

    for rule, pattern in compiled:
        for path in files:
            if pattern.search(path):
                logger.debug(
                    "[DYNAMIC-SELECT] stage=mapping event=rule_match "
                    "rule=%s file=%s tests=%s",
                    rule.pattern,
                    path,
                    ",".join(rule.tests),
                )
                tests.update(rule.tests)

    return frozenset(tests)
