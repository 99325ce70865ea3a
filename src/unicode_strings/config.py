from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping

import yaml

TOGGLE_FIELDS = (
    "letters",
    "numbers",
    "space",
    "punctuation",
    "emit_offsets",
    "flush_trailing",
)


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Options controlling which runs are extracted and how they are printed."""

    min_length: int = 5
    letters: bool = True
    numbers: bool = True
    space: bool = True
    punctuation: bool = True
    emit_offsets: bool = False
    flush_trailing: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.min_length, bool) or not isinstance(self.min_length, int):
            raise ValueError(
                f"min_length must be an integer, got {self.min_length!r}."
            )
        if self.min_length < 1:
            raise ValueError(f"min_length must be at least 1, got {self.min_length}.")
        for name in TOGGLE_FIELDS:
            value = getattr(self, name)
            # Quoted YAML values such as "true" arrive as strings.
            if not isinstance(value, bool):
                raise ValueError(f"{name} must be true or false, got {value!r}.")

    @property
    def any_category_enabled(self) -> bool:
        return self.letters or self.numbers or self.space or self.punctuation

    def to_dict(self) -> dict[str, Any]:
        """Return a dictionary keyed by field name, as written by print-config."""
        return asdict(self)


def config_from_dict(data: Mapping[str, Any] | None) -> ScanConfig:
    """Build a ScanConfig from a mapping.

    Keys may use the command-line spelling (``min-length``) or the field name
    (``min_length``). Unknown keys are ignored.
    """
    if not data:
        return ScanConfig()
    allowed = {field.name for field in fields(ScanConfig)}
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        name = str(key).replace("-", "_")
        if name in allowed:
            kwargs[name] = value
    return ScanConfig(**kwargs)


def config_from_yaml(path: str | Path) -> ScanConfig:
    """Load configuration from a YAML file; an empty file yields the defaults."""
    parsed = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if parsed is not None and not isinstance(parsed, Mapping):
        raise ValueError(f"{path}: configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ScanConfig:
    if path is None:
        return ScanConfig()
    return config_from_yaml(path)
