from __future__ import annotations

import pytest

from specwalk.diagnostics import (
    CANONICAL_DIAGNOSTIC_CATALOG,
    DiagnosticCode,
    Severity,
    ViolationKind,
    build_diagnostic,
)
from specwalk.diagnostics.catalog import DiagnosticCatalogEntry, _build_catalog

pytestmark = pytest.mark.unit


def test_every_code_is_cataloged_once() -> None:
    assert sorted(CANONICAL_DIAGNOSTIC_CATALOG) == sorted(code.value for code in DiagnosticCode)


def test_code_prefix_matches_level() -> None:
    for code, entry in CANONICAL_DIAGNOSTIC_CATALOG.items():
        expected = Severity.ERROR if code.startswith("E_") else Severity.WARNING
        assert entry.level is expected, code


def test_taxonomy_covers_every_violation_kind() -> None:
    violations = {entry.violation for entry in CANONICAL_DIAGNOSTIC_CATALOG.values()}

    assert violations == set(ViolationKind)


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        CANONICAL_DIAGNOSTIC_CATALOG["E_NEW"] = CANONICAL_DIAGNOSTIC_CATALOG[  # type: ignore[index]
            "E_SPEC_RANGE_INVERTED"
        ]


def test_duplicate_codes_are_rejected() -> None:
    entry = CANONICAL_DIAGNOSTIC_CATALOG["E_SPEC_RANGE_INVERTED"]

    with pytest.raises(ValueError, match="duplicate diagnostic catalog code"):
        _build_catalog((entry, entry))


def test_entries_require_a_suggested_action() -> None:
    with pytest.raises(ValueError, match="suggested_action"):
        DiagnosticCatalogEntry(
            code="E_X",
            level=Severity.ERROR,
            violation=ViolationKind.RANGE,
            suggested_action="",
        )


def test_build_diagnostic_resolves_level_and_action_from_catalog() -> None:
    diagnostic = build_diagnostic(
        code=DiagnosticCode.W_SPEC_REF_SIBLING,
        path=["paths", "/a", "schema", "description"],
        message="sibling values alongside $refs are ignored",
    )

    entry = CANONICAL_DIAGNOSTIC_CATALOG["W_SPEC_REF_SIBLING"]
    assert diagnostic.code == "W_SPEC_REF_SIBLING"
    assert diagnostic.level is Severity.WARNING
    assert diagnostic.suggested_action == entry.suggested_action
    assert diagnostic.path == ("paths", "/a", "schema", "description")


def test_build_diagnostic_rejects_unknown_codes() -> None:
    with pytest.raises(ValueError, match="not cataloged"):
        build_diagnostic(code="E_UNKNOWN", path=(), message="nope")
