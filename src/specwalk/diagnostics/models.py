from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import cast

from pydantic import BaseModel, ConfigDict, Field, field_validator

type PathComponent = str | int
type DocumentPath = tuple[PathComponent, ...]


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"


class ViolationKind(StrEnum):
    TYPE_KEY = "TypeKeyViolation"
    RANGE = "RangeViolation"
    REF_POSITION = "RefPositionViolation"
    REF_SIBLING = "RefSiblingViolation"
    RESERVED_MODEL_NAME = "ReservedModelName"


def _normalize_json(value: object) -> object:
    if value is None or isinstance(value, bool | int | float | str):
        return value
    if isinstance(value, list | tuple):
        return [_normalize_json(item) for item in value]
    if isinstance(value, dict):
        raw_dict = cast(dict[object, object], value)
        string_keys: list[str] = []
        for key in raw_dict:
            if not isinstance(key, str):
                raise ValueError("witness object keys must be strings")
            string_keys.append(key)
        normalized: dict[str, object] = {}
        for key in sorted(string_keys):
            normalized[key] = _normalize_json(raw_dict[key])
        return normalized
    raise ValueError("witness must be JSON-serializable")


class Diagnostic(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    code: str = Field(min_length=1)
    level: Severity
    path: tuple[str | int, ...]
    message: str = Field(min_length=1)
    suggested_action: str = Field(min_length=1)

    witness: object | None = None

    @field_validator("path", mode="before")
    @classmethod
    def _validate_path(cls, path: object) -> object:
        if isinstance(path, str | bytes) or not isinstance(path, Sequence):
            raise ValueError("path must be a sequence of str or int components")
        for component in path:
            if isinstance(component, bool) or not isinstance(component, str | int):
                raise ValueError("path components must be str or int")
        return tuple(path)

    @field_validator("witness", mode="before")
    @classmethod
    def _validate_and_normalize_witness(cls, witness: object) -> object:
        if witness is None:
            return None
        return _normalize_json(witness)
