from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final, Protocol

from specwalk.diagnostics.catalog import DiagnosticCode, build_diagnostic
from specwalk.diagnostics.models import Diagnostic, DocumentPath

from .config import DEFAULT_CONFIG, ValidatorConfig
from .kinds import StructuralKind, is_type_declarator
from .numbers import coerce_number
from .paths import child_path
from .ref_namespaces import (
    KNOWN_NAMESPACES,
    allowed_namespaces,
    is_ref_allowed,
    ref_namespace,
)

KNOWN_TYPE_NAMES: Final[frozenset[str]] = frozenset(
    {"string", "number", "integer", "boolean", "array", "object", "file"}
)

BOUND_PAIRS: Final[tuple[tuple[str, str], ...]] = (
    ("minimum", "maximum"),
    ("minProperties", "maxProperties"),
    ("minLength", "maxLength"),
)

RESERVED_MODEL_NAMES: Final[frozenset[str]] = frozenset(
    {"type", "properties", "items", "allOf", "$ref"}
)

_REF_KEY: Final[str] = "$ref"
_EXTENSION_PREFIX: Final[str] = "x-"


@dataclass(frozen=True, slots=True)
class RuleContext:
    config: ValidatorConfig = DEFAULT_CONFIG
    ancestors: tuple[StructuralKind, ...] = ()


class Rule(Protocol):
    def __call__(
        self,
        node: Mapping[object, object],
        path: DocumentPath,
        kind: StructuralKind,
        context: RuleContext,
    ) -> tuple[Diagnostic, ...]: ...


def _json_kind(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int | float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list | tuple):
        return "array"
    return type(value).__name__


def type_key_rule(
    node: Mapping[object, object],
    path: DocumentPath,
    kind: StructuralKind,
    context: RuleContext,
) -> tuple[Diagnostic, ...]:
    """Check the ``type`` declarator of a schema-like node."""
    if "type" not in node or not is_type_declarator(kind, "type"):
        return ()
    value = node["type"]
    type_path = child_path(path, "type")

    if not isinstance(value, str):
        return (
            build_diagnostic(
                code=DiagnosticCode.E_SPEC_TYPE_NOT_STRING,
                path=type_path,
                message=f'"type" should be a string, got {_json_kind(value)}',
                witness={"value_kind": _json_kind(value)},
            ),
        )
    if context.config.check_type_names and value not in KNOWN_TYPE_NAMES:
        return (
            build_diagnostic(
                code=DiagnosticCode.W_SPEC_TYPE_NAME_UNKNOWN,
                path=type_path,
                message=f'"type" value "{value}" is not a recognized type name',
                witness={"known": sorted(KNOWN_TYPE_NAMES), "value": value},
            ),
        )
    return ()


def range_rule(
    node: Mapping[object, object],
    path: DocumentPath,
    kind: StructuralKind,
    context: RuleContext,
) -> tuple[Diagnostic, ...]:
    """Flag every bound pair whose minimum exceeds its maximum."""
    del kind, context
    diagnostics: list[Diagnostic] = []
    for min_key, max_key in BOUND_PAIRS:
        if min_key not in node or max_key not in node:
            continue
        lower = coerce_number(node[min_key])
        upper = coerce_number(node[max_key])
        if lower is None or upper is None or lower <= upper:
            continue
        diagnostics.append(
            build_diagnostic(
                code=DiagnosticCode.E_SPEC_RANGE_INVERTED,
                path=child_path(path, min_key),
                message=f'"{min_key}" should be lower than or equal to "{max_key}"',
                witness={min_key: node[min_key], max_key: node[max_key]},
            )
        )
    return tuple(diagnostics)


def ref_position_rule(
    node: Mapping[object, object],
    path: DocumentPath,
    kind: StructuralKind,
    context: RuleContext,
) -> tuple[Diagnostic, ...]:
    """Check that a ``$ref`` targets the namespace allowed at this position."""
    ref = node.get(_REF_KEY)
    if not isinstance(ref, str):
        return ()
    namespace = ref_namespace(ref)
    allowed = allowed_namespaces(kind)
    if namespace is None or allowed is None or is_ref_allowed(kind, namespace):
        return ()
    if not context.config.strict_ref_namespaces and namespace not in KNOWN_NAMESPACES:
        return ()

    expected = ", ".join(f"#/{name}" for name in sorted(allowed))
    return (
        build_diagnostic(
            code=DiagnosticCode.E_SPEC_REF_POSITION,
            path=child_path(path, _REF_KEY),
            message=(
                f'"$ref" at a {kind.value} position must point into {expected}, '
                f'not "#/{namespace}"'
            ),
            witness={
                "allowed": sorted(allowed),
                "namespace": namespace,
                "position": kind.value,
                "ref": ref,
            },
        ),
    )


def ref_sibling_rule(
    node: Mapping[object, object],
    path: DocumentPath,
    kind: StructuralKind,
    context: RuleContext,
) -> tuple[Diagnostic, ...]:
    """Warn about fields placed next to a ``$ref``; they are ignored by resolvers."""
    del kind
    if not context.config.warn_ref_siblings or not isinstance(node.get(_REF_KEY), str):
        return ()
    diagnostics: list[Diagnostic] = []
    for key in node:
        if key == _REF_KEY or (isinstance(key, str) and key.startswith(_EXTENSION_PREFIX)):
            continue
        diagnostics.append(
            build_diagnostic(
                code=DiagnosticCode.W_SPEC_REF_SIBLING,
                path=child_path(path, key),
                message="sibling values alongside $refs are ignored",
                witness={"ref": node[_REF_KEY]},
            )
        )
    return tuple(diagnostics)


def reserved_model_name_rule(
    node: Mapping[object, object],
    path: DocumentPath,
    kind: StructuralKind,
    context: RuleContext,
) -> tuple[Diagnostic, ...]:
    del node, kind
    if not context.config.warn_reserved_model_names or not path:
        return ()
    name = path[-1]
    if name not in RESERVED_MODEL_NAMES:
        return ()
    return (
        build_diagnostic(
            code=DiagnosticCode.W_SPEC_MODEL_NAME_RESERVED,
            path=path,
            message=f'model name "{name}" is also a schema keyword',
            witness={"name": name},
        ),
    )
