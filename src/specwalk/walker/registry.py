from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from .kinds import SCHEMA_LIKE_KINDS, StructuralKind
from .rules import (
    Rule,
    range_rule,
    ref_position_rule,
    ref_sibling_rule,
    reserved_model_name_rule,
    type_key_rule,
)

_REF_CHECKED_KINDS: Final[frozenset[StructuralKind]] = SCHEMA_LIKE_KINDS | {
    StructuralKind.RESPONSE,
    StructuralKind.PARAMETER,
}


@dataclass(frozen=True, slots=True)
class RuleBinding:
    name: str
    rule: Rule
    kinds: frozenset[StructuralKind]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("rule binding name must be non-empty")
        if not self.kinds:
            raise ValueError(f"rule binding '{self.name}' must name at least one kind")


RULE_BINDINGS: Final[tuple[RuleBinding, ...]] = (
    RuleBinding(
        "reserved_model_name",
        reserved_model_name_rule,
        frozenset({StructuralKind.DEFINITION_MODEL}),
    ),
    RuleBinding("type_key", type_key_rule, SCHEMA_LIKE_KINDS),
    RuleBinding("range", range_rule, SCHEMA_LIKE_KINDS),
    RuleBinding("ref_position", ref_position_rule, _REF_CHECKED_KINDS),
    RuleBinding("ref_sibling", ref_sibling_rule, _REF_CHECKED_KINDS),
)


def build_registry(
    bindings: tuple[RuleBinding, ...],
) -> Mapping[StructuralKind, tuple[Rule, ...]]:
    """Invert rule bindings into a table with one entry for every structural kind.

    Rules keep their binding order within a kind.
    """
    seen_names: set[str] = set()
    table: dict[StructuralKind, list[Rule]] = {kind: [] for kind in StructuralKind}
    for binding in bindings:
        if binding.name in seen_names:
            raise ValueError(f"duplicate rule binding name: {binding.name}")
        seen_names.add(binding.name)
        for kind in binding.kinds:
            if kind not in table:
                raise ValueError(f"rule binding '{binding.name}' names unknown kind: {kind!r}")
            table[kind].append(binding.rule)
    return MappingProxyType({kind: tuple(rules) for kind, rules in table.items()})


RULE_REGISTRY: Final[Mapping[StructuralKind, tuple[Rule, ...]]] = build_registry(RULE_BINDINGS)


def rules_for(kind: StructuralKind) -> tuple[Rule, ...]:
    return RULE_REGISTRY[kind]
