"""Configuration discovery, loading and dotted-path lookup."""

from __future__ import annotations

import copy
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from syndox.core.exceptions import ConfigError

TOOL_NAME = "syndox"

CONFIG_FILE_NAMES = ("syndox.toml", ".syndox.toml")

DEFAULT_OUT_DIR = ".syndox"

DEFAULT_CONFIG: dict[str, Any] = {
    "out": DEFAULT_OUT_DIR,
    "parse": {"options": {}},
}

_MISSING = object()


@dataclass(slots=True, frozen=True)
class SyndoxConfig:
    """Merged configuration and where it came from."""

    values: dict[str, Any]
    root: Path
    source: Path | None = None

    @property
    def out_dir(self) -> Path:
        """Output directory, relative paths taken from the config file's directory."""
        out = Path(str(self.get("out", DEFAULT_OUT_DIR)))
        return out if out.is_absolute() else self.root / out

    def get(self, key: str, default: Any = None) -> Any:
        return get_config_value(self.values, key, default)


def get_config_value(config: dict[str, Any], key: str, default: Any = None) -> Any:
    """Look up a dotted path such as ``parse.options``."""
    current: Any = config
    for part in key.split("."):
        if not isinstance(current, dict):
            return default
        current = current.get(part, _MISSING)
        if current is _MISSING:
            return default
    return current


def find_config_file(start: Path) -> tuple[Path, dict[str, Any]] | None:
    """Search ``start`` and its parents for the first config source.

    In each directory ``syndox.toml`` and ``.syndox.toml`` are tried before a
    ``pyproject.toml`` holding a ``[tool.syndox]`` table.
    """
    for directory in (start, *start.parents):
        for name in CONFIG_FILE_NAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate, _read_toml(candidate)

        pyproject = directory / "pyproject.toml"
        if pyproject.is_file():
            tool = _read_toml(pyproject).get("tool", {})
            if isinstance(tool, dict) and TOOL_NAME in tool:
                section = tool[TOOL_NAME]
                if not isinstance(section, dict):
                    raise ConfigError(f"[tool.{TOOL_NAME}] in {pyproject} must be a table.")
                return pyproject, section
    return None


def load_config(start: Path) -> SyndoxConfig:
    """Merge the discovered config file over the defaults."""
    start = start.resolve()
    found = find_config_file(start)
    if found is None:
        return SyndoxConfig(values=copy.deepcopy(DEFAULT_CONFIG), root=start)

    source, payload = found
    values = merge_config(DEFAULT_CONFIG, payload)
    _validate(values, source)
    return SyndoxConfig(values=values, root=source.parent, source=source)


def merge_config(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge ``override`` into a copy of ``base``; tables merge, values replace."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e


def _validate(values: dict[str, Any], source: Path) -> None:
    if not isinstance(values.get("out"), str) or not values["out"]:
        raise ConfigError(f"Config field 'out' in {source} must be a non-empty string.")
    if not isinstance(values.get("parse"), dict):
        raise ConfigError(f"Config section 'parse' in {source} must be a table.")
    if not isinstance(get_config_value(values, "parse.options"), dict):
        raise ConfigError(f"Config section 'parse.options' in {source} must be a table.")
