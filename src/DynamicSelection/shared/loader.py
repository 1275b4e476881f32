"""YAML loading for suite and mapping configuration documents."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from DynamicSelection.pipeline.errors import ConfigurationError
from DynamicSelection.shared.types import (
    MappingRule,
    MappingTable,
    SuiteCatalog,
    SuiteDefinition,
)


def _load_yaml(path: Path) -> Any:
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc


def _string_list(value: Any, where: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(f"{where} must be a list of strings")
    return tuple(value)


def parse_suite_catalog(raw: Any, source: str = "suites.yaml") -> SuiteCatalog:
    """Build a SuiteCatalog from an already-deserialized document."""
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{source}: expected a mapping at top level")
    default_suite = raw.get("defaultSuite")
    suites = raw.get("suites")
    if not isinstance(default_suite, str) or not default_suite:
        raise ConfigurationError(f"{source}: 'defaultSuite' must be a non-empty string")
    if not isinstance(suites, dict):
        raise ConfigurationError(f"{source}: 'suites' must be a mapping")

    definitions: dict[str, SuiteDefinition] = {}
    for name, body in suites.items():
        if not isinstance(body, dict):
            raise ConfigurationError(f"{source}: suite {name!r} must be a mapping")
        tags = _string_list(body.get("tags"), f"{source}: suite {name!r} tags")
        definitions[str(name)] = SuiteDefinition(name=str(name), tags=frozenset(tags))
    return SuiteCatalog(default_suite=default_suite, suites=definitions)


def parse_mapping_table(raw: Any, source: str = "mapping.yaml") -> MappingTable:
    """Build a MappingTable from an already-deserialized document."""
    if not isinstance(raw, dict):
        raise ConfigurationError(f"{source}: expected a mapping at top level")
    rules = raw.get("rules")
    if rules is None:
        rules = []
    if not isinstance(rules, list):
        raise ConfigurationError(f"{source}: 'rules' must be a list")

    parsed: list[MappingRule] = []
    for i, rule in enumerate(rules):
        if not isinstance(rule, dict) or not isinstance(rule.get("pattern"), str):
            raise ConfigurationError(
                f"{source}: rule #{i} must have a string 'pattern'"
            )
        tests = _string_list(rule.get("tests"), f"{source}: rule #{i} tests")
        parsed.append(MappingRule(pattern=rule["pattern"], tests=tests))
    return MappingTable(rules=tuple(parsed))


def load_suite_catalog(path: Path) -> SuiteCatalog:
    return parse_suite_catalog(_load_yaml(path), source=str(path))


def load_mapping_table(path: Path) -> MappingTable:
    return parse_mapping_table(_load_yaml(path), source=str(path))
