from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class EditorConfig:
    """Configuration options for the writing editor."""

    output_dir: str = "./edits"
    save_reports: bool = True
    long_sentence_words: int = 25

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(EditorConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> EditorConfig:
    """Build an EditorConfig from a dictionary-like input."""
    if data is None:
        return EditorConfig()
    return EditorConfig(**_build_kwargs(data))


def config_from_yaml(path: str | Path) -> EditorConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> EditorConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return EditorConfig()
    return config_from_yaml(path)
