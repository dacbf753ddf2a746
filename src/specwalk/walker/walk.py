from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from specwalk.diagnostics.collector import DiagnosticCollector
from specwalk.diagnostics.models import Diagnostic, DocumentPath

from .config import DEFAULT_CONFIG, ValidatorConfig
from .kinds import StructuralKind, child_kind
from .paths import child_path, path_component
from .registry import rules_for
from .rules import RuleContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Visit:
    value: object
    path: DocumentPath
    kind: StructuralKind
    context: RuleContext


@dataclass(frozen=True, slots=True)
class _Leave:
    container_id: int


def _is_sequence(value: object) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str | bytes | bytearray)


def _is_container(value: object) -> bool:
    return isinstance(value, Mapping) or _is_sequence(value)


def _children(value: object) -> list[tuple[object, object]]:
    if isinstance(value, Mapping):
        return list(value.items())
    if _is_sequence(value):
        return list(enumerate(value))  # type: ignore[arg-type]
    return []


def _apply_rules(
    visit: _Visit,
    config: ValidatorConfig,
    collector: DiagnosticCollector,
) -> None:
    if not isinstance(visit.value, Mapping):
        return
    for rule in rules_for(visit.kind):
        diagnostics = rule(visit.value, visit.path, visit.kind, visit.context)
        collector.extend(event for event in diagnostics if config.is_enabled(event.code))


def walk(document: object, config: ValidatorConfig | None = None) -> DiagnosticCollector:
    """Walk ``document`` depth-first and collect diagnostics in pre-order.

    Mapping children are visited in their declared order, sequence elements
    by index. The document is never modified. A container that is already on
    the current descent path is not entered again.
    """
    resolved_config = DEFAULT_CONFIG if config is None else config
    collector = DiagnosticCollector()
    on_path: set[int] = set()
    root_context = RuleContext(config=resolved_config, ancestors=())
    stack: list[_Visit | _Leave] = [_Visit(document, (), StructuralKind.ROOT, root_context)]
    visited_nodes = 0

    while stack:
        item = stack.pop()
        if isinstance(item, _Leave):
            on_path.discard(item.container_id)
            continue

        visited_nodes += 1
        _apply_rules(item, resolved_config, collector)

        children = _children(item.value)
        if not children:
            continue

        container_id = id(item.value)
        on_path.add(container_id)
        stack.append(_Leave(container_id))
        # One context is shared by all children of this container.
        context = RuleContext(
            config=resolved_config, ancestors=(*item.context.ancestors, item.kind)
        )
        for key, child in reversed(children):
            path = child_path(item.path, key)
            if _is_container(child) and id(child) in on_path:
                logger.debug("skipping cyclic reference at %s", list(path))
                continue
            stack.append(
                _Visit(child, path, child_kind(item.kind, path_component(key)), context)
            )

    logger.debug(
        "walked %d nodes, collected %d diagnostics", visited_nodes, len(collector)
    )
    return collector


def validate(document: object, config: ValidatorConfig | None = None) -> tuple[Diagnostic, ...]:
    return walk(document, config).all()
