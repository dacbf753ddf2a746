from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

from .models import Diagnostic, Severity, ViolationKind


class DiagnosticCode(StrEnum):
    E_SPEC_TYPE_NOT_STRING = "E_SPEC_TYPE_NOT_STRING"
    W_SPEC_TYPE_NAME_UNKNOWN = "W_SPEC_TYPE_NAME_UNKNOWN"
    E_SPEC_RANGE_INVERTED = "E_SPEC_RANGE_INVERTED"
    E_SPEC_REF_POSITION = "E_SPEC_REF_POSITION"
    W_SPEC_REF_SIBLING = "W_SPEC_REF_SIBLING"
    W_SPEC_MODEL_NAME_RESERVED = "W_SPEC_MODEL_NAME_RESERVED"


@dataclass(frozen=True, slots=True)
class DiagnosticCatalogEntry:
    code: str
    level: Severity
    violation: ViolationKind
    suggested_action: str

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("diagnostic catalog code must be non-empty")
        if not self.suggested_action:
            raise ValueError(
                f"diagnostic catalog entry '{self.code}' suggested_action must be non-empty"
            )


def _entry(
    code: DiagnosticCode,
    level: Severity,
    violation: ViolationKind,
    suggested_action: str,
) -> DiagnosticCatalogEntry:
    return DiagnosticCatalogEntry(
        code=code.value,
        level=level,
        violation=violation,
        suggested_action=suggested_action,
    )


def _build_catalog(
    entries: tuple[DiagnosticCatalogEntry, ...],
) -> Mapping[str, DiagnosticCatalogEntry]:
    catalog: dict[str, DiagnosticCatalogEntry] = {}
    for entry in entries:
        if entry.code in catalog:
            raise ValueError(f"duplicate diagnostic catalog code: {entry.code}")
        catalog[entry.code] = entry
    return MappingProxyType(catalog)


_CATALOG_ENTRIES: tuple[DiagnosticCatalogEntry, ...] = (
    _entry(
        DiagnosticCode.E_SPEC_TYPE_NOT_STRING,
        Severity.ERROR,
        ViolationKind.TYPE_KEY,
        "declare a single type name as a string",
    ),
    _entry(
        DiagnosticCode.W_SPEC_TYPE_NAME_UNKNOWN,
        Severity.WARNING,
        ViolationKind.TYPE_KEY,
        "use one of: string,number,integer,boolean,array,object,file",
    ),
    _entry(
        DiagnosticCode.E_SPEC_RANGE_INVERTED,
        Severity.ERROR,
        ViolationKind.RANGE,
        "lower the minimum bound or raise the maximum bound",
    ),
    _entry(
        DiagnosticCode.E_SPEC_REF_POSITION,
        Severity.ERROR,
        ViolationKind.REF_POSITION,
        "point the $ref at the document section allowed in this position",
    ),
    _entry(
        DiagnosticCode.W_SPEC_REF_SIBLING,
        Severity.WARNING,
        ViolationKind.REF_SIBLING,
        "move sibling fields into the referenced object; they are ignored next to $ref",
    ),
    _entry(
        DiagnosticCode.W_SPEC_MODEL_NAME_RESERVED,
        Severity.WARNING,
        ViolationKind.RESERVED_MODEL_NAME,
        "rename the model so it does not collide with a schema keyword",
    ),
)

CANONICAL_DIAGNOSTIC_CATALOG: Mapping[str, DiagnosticCatalogEntry] = _build_catalog(
    _CATALOG_ENTRIES
)


def build_diagnostic(
    *,
    code: DiagnosticCode | str,
    path: Sequence[str | int],
    message: str,
    witness: object | None = None,
) -> Diagnostic:
    entry = CANONICAL_DIAGNOSTIC_CATALOG.get(str(code))
    if entry is None:
        raise ValueError(f"diagnostic code is not cataloged: {code}")
    return Diagnostic(
        code=entry.code,
        level=entry.level,
        path=tuple(path),
        message=message,
        suggested_action=entry.suggested_action,
        witness=witness,
    )
