from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Final

import yaml  # type: ignore[import-untyped]

from specwalk.diagnostics.catalog import CANONICAL_DIAGNOSTIC_CATALOG

logger = logging.getLogger(__name__)

CONFIG_INVALID: Final[str] = "E_CONFIG_INVALID"
CONFIG_MISSING: Final[str] = "E_CONFIG_MISSING"


class ValidatorConfigError(ValueError):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    strict_ref_namespaces: bool = True
    check_type_names: bool = True
    warn_reserved_model_names: bool = True
    warn_ref_siblings: bool = False
    disabled_codes: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        unknown = sorted(
            code for code in self.disabled_codes if code not in CANONICAL_DIAGNOSTIC_CATALOG
        )
        if unknown:
            raise ValidatorConfigError(
                CONFIG_INVALID,
                f"disabled_codes contains unknown diagnostic codes: {', '.join(unknown)}",
            )
        object.__setattr__(self, "disabled_codes", tuple(sorted(set(self.disabled_codes))))

    def is_enabled(self, code: str) -> bool:
        return code not in self.disabled_codes


DEFAULT_CONFIG: Final[ValidatorConfig] = ValidatorConfig()

_BOOL_FIELDS: Final[frozenset[str]] = frozenset(
    field.name for field in fields(ValidatorConfig) if field.name != "disabled_codes"
)


def config_from_mapping(*, source: str, payload: dict[object, object]) -> ValidatorConfig:
    known_keys = _BOOL_FIELDS | {"disabled_codes"}
    unknown_keys = sorted(str(key) for key in payload if key not in known_keys)
    if unknown_keys:
        raise ValidatorConfigError(
            CONFIG_INVALID,
            f"{source}: unknown configuration keys: {', '.join(unknown_keys)}",
        )

    values: dict[str, object] = {}
    for name in sorted(_BOOL_FIELDS):
        if name not in payload:
            continue
        value = payload[name]
        if not isinstance(value, bool):
            raise ValidatorConfigError(CONFIG_INVALID, f"{source}: {name} must be a boolean")
        values[name] = value

    if "disabled_codes" in payload:
        codes = payload["disabled_codes"]
        if codes is None:
            codes = []
        if not isinstance(codes, list) or not all(isinstance(code, str) for code in codes):
            raise ValidatorConfigError(
                CONFIG_INVALID, f"{source}: disabled_codes must be a list of strings"
            )
        values["disabled_codes"] = tuple(codes)

    return ValidatorConfig(**values)  # type: ignore[arg-type]


def load_validator_config_from_text(*, source: str, payload_text: str) -> ValidatorConfig:
    try:
        payload = yaml.safe_load(payload_text)
    except yaml.YAMLError as exc:
        raise ValidatorConfigError(
            CONFIG_INVALID, f"invalid JSON/YAML payload: {source}: {exc}"
        ) from exc
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ValidatorConfigError(CONFIG_INVALID, f"configuration must be a mapping: {source}")
    config = config_from_mapping(source=source, payload=payload)
    logger.debug("loaded validator configuration from %s", source)
    return config


def load_validator_config(path: Path) -> ValidatorConfig:
    try:
        payload_text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ValidatorConfigError(
            CONFIG_MISSING, f"configuration file is missing: {path.as_posix()}"
        ) from exc
    return load_validator_config_from_text(source=path.as_posix(), payload_text=payload_text)
