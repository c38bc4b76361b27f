from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class InteractiveTextConfig:
    """Configuration options for tokenizing and annotating texts."""

    from_language: str = "en"
    target_language: str = "es"
    tokenize_cache_size: int = 128
    include_whitespace: bool = False
    unique_words: bool = False
    json_indent: int = 2

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(InteractiveTextConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> InteractiveTextConfig:
    """Build an InteractiveTextConfig from a dictionary-like input."""
    if data is None:
        return InteractiveTextConfig()
    return InteractiveTextConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> InteractiveTextConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> InteractiveTextConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return InteractiveTextConfig()
    return config_from_yaml(path)
