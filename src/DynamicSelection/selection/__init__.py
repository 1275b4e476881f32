"""Selection bounded context: mapping, suite and catalog line resolution."""

from DynamicSelection.selection.engine import (
    escape_identifier,
    identifier_pattern,
    resolve_selected_tests,
)
from DynamicSelection.selection.mapping import compile_rules, resolve_mapped_tests
from DynamicSelection.selection.suites import resolve_suite_name, resolve_suite_tags

__all__ = [
    "compile_rules",
    "escape_identifier",
    "identifier_pattern",
    "resolve_mapped_tests",
    "resolve_selected_tests",
    "resolve_suite_name",
    "resolve_suite_tags",
]
