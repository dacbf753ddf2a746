from .config import (
    DEFAULT_CONFIG,
    ValidatorConfig,
    ValidatorConfigError,
    load_validator_config,
    load_validator_config_from_text,
)
from .kinds import StructuralKind, child_kind, is_schema_like, is_type_declarator
from .numbers import coerce_number
from .ref_namespaces import REF_NAMESPACE_TABLE, allowed_namespaces, is_ref_allowed, ref_namespace
from .registry import RULE_REGISTRY, RuleBinding, rules_for
from .rules import Rule, RuleContext
from .walk import validate, walk

__all__ = [
    "DEFAULT_CONFIG",
    "REF_NAMESPACE_TABLE",
    "RULE_REGISTRY",
    "Rule",
    "RuleBinding",
    "RuleContext",
    "StructuralKind",
    "ValidatorConfig",
    "ValidatorConfigError",
    "allowed_namespaces",
    "child_kind",
    "coerce_number",
    "is_ref_allowed",
    "is_schema_like",
    "is_type_declarator",
    "load_validator_config",
    "load_validator_config_from_text",
    "ref_namespace",
    "rules_for",
    "validate",
    "walk",
]
