"""Unit tests for YAML/environment configuration loader behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from webtext.config import ConfigLoader, WebTextConfig


def test_config_defaults() -> None:
    """Config defaults should match the library function defaults."""

    config = WebTextConfig()

    assert config.br_tag == "<br>"
    assert config.truncate_limit == 320
    assert config.ellipsis == "..."
    assert config.slug_lowercase is True
    assert config.query_exhaustive is True
    assert config.typecast_kinds == ("boolean", "null", "integer", "float")
    assert config.obfuscate_at is False


def test_config_loader_from_yaml_loads_and_normalizes_values(tmp_path: Path) -> None:
    """YAML loader should parse valid payloads and normalize typed values."""

    config_path = tmp_path / "webtext.yml"
    config_path.write_text(
        """
br_tag: "<br/>"
truncate_limit: " 120 "
ellipsis: ""
slug_lowercase: " no "
query_exhaustive: false
typecast_kinds:
  - bool
  - " int "
obfuscate_at: "yes"
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.br_tag == "<br/>"
    assert config.truncate_limit == 120
    assert config.ellipsis == ""
    assert config.slug_lowercase is False
    assert config.query_exhaustive is False
    assert config.typecast_kinds == ("bool", "int")
    assert config.obfuscate_at is True


def test_config_loader_from_yaml_accepts_empty_file(tmp_path: Path) -> None:
    """An empty YAML file should yield the default config."""

    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path) == WebTextConfig()


def test_config_loader_from_yaml_rejects_unknown_keys_and_bad_roots(tmp_path: Path) -> None:
    """YAML loader should fail clearly on unknown fields and non-mapping roots."""

    unknown_path = tmp_path / "unknown.yml"
    unknown_path.write_text("unknown_field: x\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"unsupported key\(s\): unknown_field"):
        ConfigLoader.from_yaml(unknown_path)

    list_path = tmp_path / "list.yml"
    list_path.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ValueError, match="must contain a top-level mapping"):
        ConfigLoader.from_yaml(list_path)


def test_config_loader_from_yaml_rejects_invalid_typed_values(tmp_path: Path) -> None:
    """YAML loader should reject invalid typed tokens with actionable errors."""

    invalid_bool_path = tmp_path / "invalid-bool.yml"
    invalid_bool_path.write_text("slug_lowercase: maybe\n", encoding="utf-8")

    with pytest.raises(ValueError, match="`slug_lowercase` must be a boolean"):
        ConfigLoader.from_yaml(invalid_bool_path)

    invalid_int_path = tmp_path / "invalid-int.yml"
    invalid_int_path.write_text("truncate_limit: 0\n", encoding="utf-8")

    with pytest.raises(ValueError, match="`truncate_limit` must be a positive integer"):
        ConfigLoader.from_yaml(invalid_int_path)

    invalid_kind_path = tmp_path / "invalid-kind.yml"
    invalid_kind_path.write_text("typecast_kinds: [bool, date]\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"unsupported kind\(s\): date"):
        ConfigLoader.from_yaml(invalid_kind_path)


def test_config_loader_from_env_reads_prefixed_variables() -> None:
    """Environment loader should read `WEBTEXT_*` keys and ignore unrelated ones."""

    env = {
        "WEBTEXT_BR_TAG": "<br />",
        "WEBTEXT_TRUNCATE_LIMIT": "80",
        "WEBTEXT_QUERY_EXHAUSTIVE": "off",
        "WEBTEXT_TYPECAST_KINDS": "bool, nil",
        "HOME": "/root",
    }

    config = ConfigLoader.from_env(env)

    assert config.br_tag == "<br />"
    assert config.truncate_limit == 80
    assert config.query_exhaustive is False
    assert config.typecast_kinds == ("bool", "nil")
    assert config.ellipsis == "..."


def test_config_loader_from_env_rejects_invalid_values() -> None:
    """Environment loader should validate values like the YAML loader."""

    with pytest.raises(ValueError, match="`truncate_limit` must be a positive integer"):
        ConfigLoader.from_env({"WEBTEXT_TRUNCATE_LIMIT": "many"})
