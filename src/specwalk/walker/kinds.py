from __future__ import annotations

from enum import StrEnum
from typing import Final


class StructuralKind(StrEnum):
    ROOT = "root"
    PATHS = "paths"
    PATH_ITEM = "path_item"
    OPERATION = "operation"
    RESPONSES = "responses"
    RESPONSE = "response"
    SCHEMA = "schema"
    PROPERTIES_MAP = "properties_map"
    PROPERTY_SCHEMA = "property_schema"
    DEFINITIONS = "definitions"
    DEFINITION_MODEL = "definition_model"
    PARAMETERS = "parameters"
    PARAMETER = "parameter"
    OTHER = "other"


SCHEMA_LIKE_KINDS: Final[frozenset[StructuralKind]] = frozenset(
    {
        StructuralKind.SCHEMA,
        StructuralKind.PROPERTY_SCHEMA,
        StructuralKind.DEFINITION_MODEL,
    }
)

HTTP_METHODS: Final[frozenset[str]] = frozenset(
    {"get", "put", "post", "delete", "options", "head", "patch", "trace"}
)

_SUBSCHEMA_KEYS: Final[frozenset[str]] = frozenset(
    {"items", "additionalProperties", "not", "allOf", "anyOf", "oneOf"}
)

# Keyed transitions. Kinds missing here fall through to the rules in child_kind.
_KEYED_TRANSITIONS: Final[dict[StructuralKind, dict[str, StructuralKind]]] = {
    StructuralKind.ROOT: {
        "paths": StructuralKind.PATHS,
        "definitions": StructuralKind.DEFINITIONS,
        "parameters": StructuralKind.PARAMETERS,
        "responses": StructuralKind.RESPONSES,
    },
    StructuralKind.PATH_ITEM: {
        "parameters": StructuralKind.PARAMETERS,
        "responses": StructuralKind.RESPONSES,
        "schema": StructuralKind.SCHEMA,
    },
    StructuralKind.OPERATION: {
        "responses": StructuralKind.RESPONSES,
        "parameters": StructuralKind.PARAMETERS,
    },
    StructuralKind.RESPONSE: {
        "schema": StructuralKind.SCHEMA,
    },
    StructuralKind.PARAMETER: {
        "schema": StructuralKind.SCHEMA,
    },
}

# Containers whose every child plays the same role, whatever its key.
_WILDCARD_TRANSITIONS: Final[dict[StructuralKind, StructuralKind]] = {
    StructuralKind.PATHS: StructuralKind.PATH_ITEM,
    StructuralKind.RESPONSES: StructuralKind.RESPONSE,
    StructuralKind.PROPERTIES_MAP: StructuralKind.PROPERTY_SCHEMA,
    StructuralKind.DEFINITIONS: StructuralKind.DEFINITION_MODEL,
    StructuralKind.PARAMETERS: StructuralKind.PARAMETER,
}


def is_schema_like(kind: StructuralKind) -> bool:
    return kind in SCHEMA_LIKE_KINDS


def child_kind(parent: StructuralKind, key: str | int) -> StructuralKind:
    """Return the kind of the node reached from a ``parent`` node through ``key``.

    The answer depends only on the parent kind and the key, never on the
    values involved. This keeps a property or a model that happens to be
    named ``type`` or ``properties`` from being read as a schema keyword:
    inside a properties map or the definitions section every key is a name.
    """
    wildcard = _WILDCARD_TRANSITIONS.get(parent)
    if wildcard is not None:
        return wildcard
    if isinstance(key, int):
        # Elements of a schema list (allOf, anyOf, oneOf, tuple items).
        if parent is StructuralKind.SCHEMA:
            return StructuralKind.SCHEMA
        return StructuralKind.OTHER
    if parent is StructuralKind.PATH_ITEM and key in HTTP_METHODS:
        return StructuralKind.OPERATION
    if is_schema_like(parent):
        if key == "properties":
            return StructuralKind.PROPERTIES_MAP
        if key in _SUBSCHEMA_KEYS:
            return StructuralKind.SCHEMA
        return StructuralKind.OTHER
    return _KEYED_TRANSITIONS.get(parent, {}).get(key, StructuralKind.OTHER)


def is_type_declarator(parent: StructuralKind, key: str | int) -> bool:
    """Whether ``key`` under a ``parent`` node declares the node's data type."""
    return key == "type" and is_schema_like(parent)
