"""Parser configuration models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from syndox.core.exceptions import ConfigError

_KNOWN_OPTIONS = {"feature_version", "type_comments", "locations"}


@dataclass(frozen=True)
class ParseOptions:
    """Dialect settings taken from the ``parse.options`` config value."""

    feature_version: tuple[int, int] | None = None
    type_comments: bool = False
    locations: bool = False

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any] | None) -> ParseOptions:
        """Validate a raw ``parse.options`` mapping.

        ``feature_version`` accepts ``"3.8"`` or ``[3, 8]``.
        """
        if payload is None:
            return cls()
        if not isinstance(payload, Mapping):
            raise ConfigError("Config value 'parse.options' must be a table.")

        unknown = sorted(set(payload) - _KNOWN_OPTIONS)
        if unknown:
            raise ConfigError(f"Unknown parse options: {', '.join(unknown)}")

        return cls(
            feature_version=_feature_version(payload.get("feature_version")),
            type_comments=_flag(payload, "type_comments"),
            locations=_flag(payload, "locations"),
        )


def _flag(payload: Mapping[str, Any], name: str) -> bool:
    value = payload.get(name, False)
    if not isinstance(value, bool):
        raise ConfigError(f"Config field 'parse.options.{name}' must be a boolean.")
    return value


def _feature_version(value: object) -> tuple[int, int] | None:
    if value is None:
        return None
    parts: list[Any] = []
    if isinstance(value, str):
        parts = value.split(".")
    elif isinstance(value, list | tuple):
        parts = list(value)

    try:
        if len(parts) != 2 or any(isinstance(p, bool) for p in parts):
            raise ValueError
        major, minor = int(parts[0]), int(parts[1])
    except (TypeError, ValueError):
        raise ConfigError(
            "Config field 'parse.options.feature_version' must look like \"3.8\"."
        ) from None
    if major != 3:
        raise ConfigError("Config field 'parse.options.feature_version' must be a 3.x version.")
    return (major, minor)
