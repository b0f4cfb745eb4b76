"""Configuration model and loaders for the webtext CLI.

Responsibilities:
- Define command defaults as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `WebTextConfig`: normalized defaults shared by CLI commands.
- `ConfigLoader`: static construction helpers for `WebTextConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_permissive_boolean
from .typecast import CastKind, normalize_kinds

_DEFAULT_TYPECAST_KINDS = tuple(kind.value for kind in CastKind)


@dataclass(slots=True)
class WebTextConfig:
    """Default options applied by CLI commands.

    Attributes:
        br_tag: Markup inserted by `linkify` for each line break.
        truncate_limit: Character budget used by `truncate`.
        ellipsis: Suffix appended by `truncate` when content is dropped.
        slug_lowercase: Whether `slugify` folds slugs to lowercase.
        query_exhaustive: Whether `query` requires every word to match.
        typecast_kinds: Kinds recognized by `typecast`.
        obfuscate_at: Whether `linkify` replaces `@` with an HTML entity.
    """

    br_tag: str = "<br>"
    truncate_limit: int = 320
    ellipsis: str = "..."
    slug_lowercase: bool = True
    query_exhaustive: bool = True
    typecast_kinds: tuple[str, ...] = _DEFAULT_TYPECAST_KINDS
    obfuscate_at: bool = False

    def validate(self) -> None:
        """Validate config values before a command uses them."""

        if self.truncate_limit <= 0:
            raise ValueError("`truncate_limit` must be a positive integer.")
        unknown = sorted(kind for kind in self.typecast_kinds if not normalize_kinds([kind]))
        if unknown:
            raise ValueError(
                f"`typecast_kinds` includes unsupported kind(s): {', '.join(unknown)}."
            )


class ConfigLoader:
    """Factory helpers for loading `WebTextConfig` from files or environment."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "br_tag",
            "truncate_limit",
            "ellipsis",
            "slug_lowercase",
            "query_exhaustive",
            "typecast_kinds",
            "obfuscate_at",
        }
    )
    _ENV_PREFIX = "WEBTEXT_"

    @staticmethod
    def from_yaml(path: Path) -> WebTextConfig:
        """Create a validated config from a YAML file."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> WebTextConfig:
        """Create a validated config from `WEBTEXT_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        payload = {
            key: env_map[f"{ConfigLoader._ENV_PREFIX}{key.upper()}"]
            for key in ConfigLoader._SUPPORTED_YAML_KEYS
            if f"{ConfigLoader._ENV_PREFIX}{key.upper()}" in env_map
        }
        return ConfigLoader._build_config_from_mapping(payload, source_label="Environment")

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> WebTextConfig:
        """Build a validated config from a raw mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        defaults = WebTextConfig()
        config = WebTextConfig(
            br_tag=ConfigLoader._optional_markup(payload, "br_tag", defaults.br_tag),
            truncate_limit=ConfigLoader._optional_positive_int(
                payload, "truncate_limit", source_label, default=defaults.truncate_limit
            ),
            ellipsis=ConfigLoader._optional_markup(payload, "ellipsis", defaults.ellipsis),
            slug_lowercase=ConfigLoader._optional_boolean(
                payload, "slug_lowercase", source_label, default=defaults.slug_lowercase
            ),
            query_exhaustive=ConfigLoader._optional_boolean(
                payload, "query_exhaustive", source_label, default=defaults.query_exhaustive
            ),
            typecast_kinds=ConfigLoader._optional_kind_list(
                payload, "typecast_kinds", source_label, default=defaults.typecast_kinds
            ),
            obfuscate_at=ConfigLoader._optional_boolean(
                payload, "obfuscate_at", source_label, default=defaults.obfuscate_at
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _optional_markup(payload: Mapping[str, Any], key: str, default: str) -> str:
        """Read a string field verbatim, keeping empty strings."""

        if key not in payload or payload[key] is None:
            return default
        return str(payload[key])

    @staticmethod
    def _optional_positive_int(
        payload: Mapping[str, Any], key: str, source_label: str, default: int
    ) -> int:
        """Read and validate a positive integer payload field."""

        if key not in payload:
            return default

        raw_value = payload[key]
        if isinstance(raw_value, bool):
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        if isinstance(raw_value, int):
            parsed = raw_value
        else:
            normalized = normalize_optional_string(raw_value)
            if normalized is None:
                return default
            try:
                parsed = int(normalized)
            except ValueError as exc:
                raise ValueError(
                    f"{source_label} field `{key}` must be a positive integer."
                ) from exc

        if parsed <= 0:
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.")
        return parsed

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_kind_list(
        payload: Mapping[str, Any], key: str, source_label: str, default: tuple[str, ...]
    ) -> tuple[str, ...]:
        """Read typecast kinds from a YAML list or a comma-separated string."""

        if key not in payload or payload[key] is None:
            return default

        raw = payload[key]
        if isinstance(raw, str):
            items = raw.split(",")
        elif isinstance(raw, (list, tuple)):
            items = list(raw)
        else:
            raise ValueError(f"{source_label} field `{key}` must be a list of kind names.")

        kinds = tuple(
            normalized
            for normalized in (normalize_optional_string(item) for item in items)
            if normalized is not None
        )
        return kinds
