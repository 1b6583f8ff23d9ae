from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, List, Mapping, MutableMapping

import yaml

from .readability import READABILITY_LABELS

OUTPUT_FORMATS = ("json", "text")


def _default_extensions() -> List[str]:
    return [".html", ".htm", ".xhtml", ".txt"]


@dataclass(slots=True)
class MetricsConfig:
    """Configuration options for the metrics CLI."""

    input_extensions: List[str] = field(default_factory=_default_extensions)
    label_language: str = "en"
    output_format: str = "json"
    json_indent: int = 2

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))

    def validate(self) -> None:
        """Raise ValueError when a field holds an unsupported value."""
        if self.label_language not in READABILITY_LABELS:
            raise ValueError(
                f"label_language must be one of {sorted(READABILITY_LABELS)}, "
                f"got '{self.label_language}'."
            )
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {list(OUTPUT_FORMATS)}, "
                f"got '{self.output_format}'."
            )


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {f.name for f in fields(MetricsConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "input_extensions" in kwargs:
        extensions = kwargs["input_extensions"]
        if isinstance(extensions, str):
            extensions = [extensions]
        elif not isinstance(extensions, (list, tuple)):
            raise ValueError("input_extensions must be a list of file extensions.")
        kwargs["input_extensions"] = [_normalize_extension(ext) for ext in extensions]
    return kwargs


def _normalize_extension(value: object) -> str:
    ext = str(value).strip().lower()
    return ext if ext.startswith(".") else f".{ext}"


def config_from_dict(data: Mapping[str, Any] | None) -> MetricsConfig:
    """Build a MetricsConfig from a dictionary-like input."""
    if data is None:
        return MetricsConfig()
    config = MetricsConfig(**_build_kwargs(data))
    config.validate()
    return config


def config_from_yaml(path: str | Path) -> MetricsConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> MetricsConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return MetricsConfig()
    return config_from_yaml(path)
