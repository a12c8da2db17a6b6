"""Configuration helpers for the ranking engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from .errors import ConfigError


@dataclass(frozen=True)
class EngineConfig:
    """Typed wrapper around the engine configuration dictionary."""

    raw: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str, default: Any = None) -> Any:
        return self.raw.get(key, default)

    @property
    def emphasis_tags(self) -> frozenset[str]:
        return frozenset(str(tag).lower() for tag in self.raw.get("emphasis_tags", []))

    @property
    def display_suffixes(self) -> List[str]:
        return [str(suffix).lower() for suffix in self.raw.get("display_suffixes", [])]

    @property
    def max_iterations(self) -> int:
        return int(self.raw.get("max_iterations", DEFAULTS["max_iterations"]))


DEFAULTS: Dict[str, Any] = {
    "epsilon_scale": 0.01,
    "max_iterations": 1000,
    "link_base_score": 1.0,
    "link_bonus_score": 1.0,
    "emphasis_tags": ["h1", "h2", "h3", "h4", "em", "b"],
    "html_parser": "lxml",
    "encoding": "utf-8",
    "display_suffixes": [".html", ".htm", ".xhtml"],
    "score_width": 10,
    "score_precision": 4,
}


def load_config(path: str | Path | None = None) -> EngineConfig:
    """Load configuration from YAML, merging with defaults.

    Raises :class:`ConfigError` when the file is not valid YAML, is not a
    mapping, or sets one of the numeric options out of range.
    """

    data: Dict[str, Any] = DEFAULTS.copy()
    data["emphasis_tags"] = list(DEFAULTS["emphasis_tags"])
    data["display_suffixes"] = list(DEFAULTS["display_suffixes"])

    if path is not None and Path(path).exists():
        with Path(path).open("r", encoding="utf-8") as stream:
            try:
                user = yaml.safe_load(stream) or {}
            except yaml.YAMLError as exc:
                raise ConfigError(f"Config file {path} is not valid YAML: {exc}") from exc
        if not isinstance(user, dict):
            raise ConfigError(
                f"Config file {path} must hold a mapping of options, got {type(user).__name__}."
            )
        merge_into(data, user)

    validate_config(data)
    return EngineConfig(data)


# option -> (type, smallest allowed value, whether the bound is exclusive)
_NUMERIC_OPTIONS = {
    "max_iterations": (int, 1, False),
    "epsilon_scale": (float, 0, True),
    "score_width": (int, 1, False),
    "score_precision": (int, 0, False),
}


def validate_config(data: Dict[str, Any]) -> None:
    """Reject numeric options the solver or formatter cannot work with."""

    for key, (kind, lowest, exclusive) in _NUMERIC_OPTIONS.items():
        value = data.get(key)
        allowed = (int, float) if kind is float else (int,)
        if isinstance(value, bool) or not isinstance(value, allowed):
            expected = "a number" if kind is float else "an integer"
            raise ConfigError(f"Config option {key} must be {expected}, got {value!r}.")
        if value < lowest or (exclusive and value == lowest):
            bound = "greater than" if exclusive else "at least"
            raise ConfigError(f"Config option {key} must be {bound} {lowest}, got {value!r}.")


def merge_into(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Recursively merge override into base dict."""

    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            merge_into(base[key], value)
        else:
            base[key] = value
