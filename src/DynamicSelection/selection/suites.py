"""Suite name to required tag set resolution."""
from __future__ import annotations

from DynamicSelection.pipeline.errors import UnknownSuiteError
from DynamicSelection.shared.types import SuiteCatalog


def resolve_suite_name(catalog: SuiteCatalog, requested: str | None = None) -> str:
    """Return the requested suite name if given, otherwise the default one."""
    name = (requested or "").strip() or catalog.default_suite
    if name not in catalog.suites:
        raise UnknownSuiteError(name, catalog.names())
    return name


def resolve_suite_tags(
    catalog: SuiteCatalog, requested: str | None = None
) -> frozenset[str]:
    """Return the tag set of the resolved suite, without blank tags."""
    suite = catalog.suites[resolve_suite_name(catalog, requested)]
    return frozenset(t for t in suite.tags if t.strip())
