from __future__ import annotations

import pytest

from DynamicSelection.pipeline.errors import UnknownSuiteError
from DynamicSelection.selection.suites import resolve_suite_name, resolve_suite_tags
from DynamicSelection.shared.types import SuiteCatalog, SuiteDefinition

CATALOG = SuiteCatalog(
    default_suite="smoke",
    suites={
        "smoke": SuiteDefinition(name="smoke", tags=frozenset({"@smoke"})),
        "regression": SuiteDefinition(
            name="regression", tags=frozenset({"@smoke", "@regression"}),
        ),
        "none": SuiteDefinition(name="none", tags=frozenset({"", "  "})),
    },
)


class TestResolveSuite:
    def test_default_suite_used_without_override(self) -> None:
        assert resolve_suite_tags(CATALOG) == frozenset({"@smoke"})

    def test_empty_override_falls_back_to_default(self) -> None:
        assert resolve_suite_name(CATALOG, "") == "smoke"
        assert resolve_suite_name(CATALOG, None) == "smoke"

    def test_override_wins(self) -> None:
        assert resolve_suite_tags(CATALOG, "regression") == frozenset(
            {"@smoke", "@regression"}
        )

    def test_blank_tags_dropped(self) -> None:
        assert resolve_suite_tags(CATALOG, "none") == frozenset()

    def test_unknown_suite_lists_valid_names(self) -> None:
        with pytest.raises(UnknownSuiteError) as exc_info:
            resolve_suite_tags(CATALOG, "nightly")
        err = exc_info.value
        assert err.name == "nightly"
        assert err.available == ["none", "regression", "smoke"]
        assert "nightly" in str(err)
        assert "regression" in str(err)

    def test_missing_default_suite_is_fatal(self) -> None:
        catalog = SuiteCatalog(default_suite="ghost", suites=dict(CATALOG.suites))
        with pytest.raises(UnknownSuiteError, match="ghost"):
            resolve_suite_tags(catalog)
