"""Configuration helpers for the source-code macro."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

import yaml

_DEFAULT_CONFIG_PATH = Path("config/snippets.yaml")
_DEFAULT_ENCODING = "utf-8"
_DEFAULT_CONTAINER_CLASS = "source"
_DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(slots=True)
class MacroConfig:
    encoding: str = _DEFAULT_ENCODING
    newline: str = os.linesep
    container_class: str = _DEFAULT_CONTAINER_CLASS
    fallback_search: bool = True
    timeout_seconds: float = _DEFAULT_TIMEOUT_SECONDS
    brush_aliases: dict[str, str] = field(default_factory=dict)

    @classmethod
    def default(cls) -> "MacroConfig":
        return cls()

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "MacroConfig":
        encoding = str(payload.get("encoding") or _DEFAULT_ENCODING)
        newline = payload.get("newline")
        if newline is None:
            newline = os.linesep
        elif not isinstance(newline, str):
            raise ValueError("newline must be a string")

        container_class = str(payload.get("container_class") or _DEFAULT_CONTAINER_CLASS)
        fallback_search = bool(payload.get("fallback_search", True))

        timeout_value = payload.get("timeout_seconds", _DEFAULT_TIMEOUT_SECONDS)
        try:
            timeout_seconds = float(timeout_value)
        except (TypeError, ValueError) as exc:
            raise ValueError("timeout_seconds must be a number") from exc
        if timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")

        return cls(
            encoding=encoding,
            newline=newline,
            container_class=container_class,
            fallback_search=fallback_search,
            timeout_seconds=timeout_seconds,
            brush_aliases=_normalize_aliases(payload.get("brush_aliases")),
        )


def load_macro_config(config_path: Path | None) -> MacroConfig:
    """Load macro configuration from YAML or fallback to defaults."""

    if config_path is not None:
        resolved = Path(config_path).expanduser()
        if not resolved.exists():
            raise FileNotFoundError(f"Snippet config '{resolved}' does not exist")
        return _load_from_path(resolved)

    if _DEFAULT_CONFIG_PATH.exists():
        return _load_from_path(_DEFAULT_CONFIG_PATH)

    return MacroConfig.default()


def _load_from_path(path: Path) -> MacroConfig:
    raw = path.read_text(encoding="utf-8")
    data = yaml.safe_load(raw) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Snippet config must be a mapping")
    return MacroConfig.from_dict(data)


def _normalize_aliases(value: Any) -> dict[str, str]:
    if not value:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError("brush_aliases must be a mapping")
    aliases: dict[str, str] = {}
    for key, target in value.items():
        token = str(key).strip()
        if token and target:
            aliases[token] = str(target).strip()
    return aliases
