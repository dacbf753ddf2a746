from .catalog import (
    CANONICAL_DIAGNOSTIC_CATALOG,
    DiagnosticCatalogEntry,
    DiagnosticCode,
    build_diagnostic,
)
from .collector import DiagnosticCollector
from .models import Diagnostic, DocumentPath, PathComponent, Severity, ViolationKind

__all__ = [
    "CANONICAL_DIAGNOSTIC_CATALOG",
    "Diagnostic",
    "DiagnosticCatalogEntry",
    "DiagnosticCode",
    "DiagnosticCollector",
    "DocumentPath",
    "PathComponent",
    "Severity",
    "ViolationKind",
    "build_diagnostic",
]
