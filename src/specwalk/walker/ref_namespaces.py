from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from .kinds import StructuralKind

_LOCAL_POINTER_PREFIX: Final[str] = "#/"


def _build_table(
    entries: tuple[tuple[StructuralKind, frozenset[str]], ...],
) -> Mapping[StructuralKind, frozenset[str]]:
    table: dict[StructuralKind, frozenset[str]] = {}
    for kind, namespaces in entries:
        if kind in table:
            raise ValueError(f"duplicate ref namespace entry for kind: {kind}")
        if not namespaces:
            raise ValueError(f"ref namespace entry for kind '{kind}' must allow a namespace")
        table[kind] = namespaces
    return MappingProxyType(table)


REF_NAMESPACE_TABLE: Final[Mapping[StructuralKind, frozenset[str]]] = _build_table(
    (
        (StructuralKind.RESPONSE, frozenset({"responses"})),
        (StructuralKind.SCHEMA, frozenset({"definitions"})),
        (StructuralKind.PROPERTY_SCHEMA, frozenset({"definitions"})),
        (StructuralKind.PARAMETER, frozenset({"parameters"})),
        (StructuralKind.DEFINITION_MODEL, frozenset({"definitions"})),
    )
)

KNOWN_NAMESPACES: Final[frozenset[str]] = frozenset().union(*REF_NAMESPACE_TABLE.values())


def allowed_namespaces(kind: StructuralKind) -> frozenset[str] | None:
    """Namespaces a ``$ref`` may target at ``kind``, or None when refs are unchecked there."""
    return REF_NAMESPACE_TABLE.get(kind)


def ref_namespace(ref: str) -> str | None:
    """Return the first pointer segment of a local ref (``#/definitions/Pet`` -> ``definitions``).

    Remote refs and refs that are not JSON pointers have no namespace.
    """
    if not ref.startswith(_LOCAL_POINTER_PREFIX):
        return None
    namespace, _, _ = ref[len(_LOCAL_POINTER_PREFIX) :].partition("/")
    if not namespace:
        return None
    return namespace


def is_ref_allowed(kind: StructuralKind, namespace: str) -> bool:
    allowed = allowed_namespaces(kind)
    if allowed is None:
        return True
    return namespace in allowed
