from __future__ import annotations

from collections.abc import Iterable

from .models import Diagnostic, Severity


class DiagnosticCollector:
    """Ordered, append-only sink for the diagnostics of one validation call.

    Diagnostics keep the order in which they were added. Nothing is sorted or
    deduplicated: the same message at two paths is two diagnostics.
    """

    __slots__ = ("_diagnostics",)

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []

    def __len__(self) -> int:
        return len(self._diagnostics)

    def add(self, diagnostic: Diagnostic) -> None:
        self._diagnostics.append(diagnostic)

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        self._diagnostics.extend(diagnostics)

    def all(self) -> tuple[Diagnostic, ...]:
        return tuple(self._diagnostics)

    def filter(self, level: Severity | str) -> tuple[Diagnostic, ...]:
        wanted = Severity(level)
        return tuple(event for event in self._diagnostics if event.level == wanted)

    def errors(self) -> tuple[Diagnostic, ...]:
        return self.filter(Severity.ERROR)

    def warnings(self) -> tuple[Diagnostic, ...]:
        return self.filter(Severity.WARNING)

    def has_errors(self) -> bool:
        return any(event.level == Severity.ERROR for event in self._diagnostics)
