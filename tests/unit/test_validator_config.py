from __future__ import annotations

from pathlib import Path

import pytest

from specwalk.walker.config import (
    CONFIG_INVALID,
    CONFIG_MISSING,
    DEFAULT_CONFIG,
    ValidatorConfig,
    ValidatorConfigError,
    load_validator_config,
    load_validator_config_from_text,
)

pytestmark = pytest.mark.unit


def test_defaults() -> None:
    assert DEFAULT_CONFIG == ValidatorConfig(
        strict_ref_namespaces=True,
        check_type_names=True,
        warn_reserved_model_names=True,
        warn_ref_siblings=False,
        disabled_codes=(),
    )


def test_disabled_codes_are_canonicalized_and_checked() -> None:
    config = ValidatorConfig(
        disabled_codes=("W_SPEC_TYPE_NAME_UNKNOWN", "E_SPEC_REF_POSITION", "E_SPEC_REF_POSITION")
    )

    assert config.disabled_codes == ("E_SPEC_REF_POSITION", "W_SPEC_TYPE_NAME_UNKNOWN")
    assert not config.is_enabled("E_SPEC_REF_POSITION")
    assert config.is_enabled("E_SPEC_RANGE_INVERTED")

    with pytest.raises(ValidatorConfigError) as exc_info:
        ValidatorConfig(disabled_codes=("E_NOPE",))
    assert exc_info.value.code == CONFIG_INVALID
    assert "E_NOPE" in exc_info.value.message


def test_config_is_immutable() -> None:
    with pytest.raises(AttributeError):
        DEFAULT_CONFIG.warn_ref_siblings = True  # type: ignore[misc]


def test_load_from_yaml_text() -> None:
    config = load_validator_config_from_text(
        source="inline",
        payload_text=(
            "warn_ref_siblings: true\n"
            "strict_ref_namespaces: false\n"
            "disabled_codes:\n"
            "  - W_SPEC_MODEL_NAME_RESERVED\n"
        ),
    )

    assert config.warn_ref_siblings is True
    assert config.strict_ref_namespaces is False
    assert config.check_type_names is True
    assert config.disabled_codes == ("W_SPEC_MODEL_NAME_RESERVED",)


def test_load_from_json_text() -> None:
    config = load_validator_config_from_text(
        source="inline.json", payload_text='{"check_type_names": false}'
    )

    assert config == ValidatorConfig(check_type_names=False)


def test_empty_text_gives_defaults() -> None:
    assert load_validator_config_from_text(source="empty", payload_text="") == DEFAULT_CONFIG


@pytest.mark.parametrize(
    ("payload_text", "fragment"),
    [
        ("- a\n- b\n", "must be a mapping"),
        ("unknown_flag: true\n", "unknown configuration keys: unknown_flag"),
        ("warn_ref_siblings: 'yes please'\n", "warn_ref_siblings must be a boolean"),
        ("disabled_codes: E_SPEC_REF_POSITION\n", "disabled_codes must be a list"),
        ("disabled_codes: [1, 2]\n", "disabled_codes must be a list"),
        ("disabled_codes: [E_NOPE]\n", "unknown diagnostic codes: E_NOPE"),
        ("warn_ref_siblings: [\n", "invalid JSON/YAML payload"),
    ],
)
def test_invalid_payloads_raise_config_errors(payload_text: str, fragment: str) -> None:
    with pytest.raises(ValidatorConfigError) as exc_info:
        load_validator_config_from_text(source="inline", payload_text=payload_text)

    assert exc_info.value.code == CONFIG_INVALID
    assert fragment in str(exc_info.value)


def test_load_from_file(tmp_path: Path) -> None:
    path = tmp_path / "specwalk.yaml"
    path.write_text("warn_reserved_model_names: false\n", encoding="utf-8")

    assert load_validator_config(path) == ValidatorConfig(warn_reserved_model_names=False)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ValidatorConfigError) as exc_info:
        load_validator_config(tmp_path / "absent.yaml")

    assert exc_info.value.code == CONFIG_MISSING
