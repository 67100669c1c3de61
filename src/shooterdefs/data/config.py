"""Validation threshold configuration."""
from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from pathlib import Path

from . import paths
from .errors import DataValidationError
from .json_loader import load_json

THRESHOLDS_FILENAME = "validation.json"


@dataclass(frozen=True, slots=True)
class ValidationThresholds:
    """Tunable limits for content validation.

    ``None`` leaves a limit unchecked.
    """

    max_animation_timestamp: float | None = None
    max_table_size: int | None = None
    warn_on_inverted_range: bool = True

    @classmethod
    def from_mapping(cls, raw: object) -> "ValidationThresholds":
        if not isinstance(raw, dict):
            raise DataValidationError("Validation config must be an object/dict.")
        max_timestamp = raw.get("max_animation_timestamp")
        if max_timestamp is not None and (
            not isinstance(max_timestamp, Real) or isinstance(max_timestamp, bool)
        ):
            raise DataValidationError("max_animation_timestamp must be a number or null.")
        max_table_size = raw.get("max_table_size")
        if max_table_size is not None and (
            not isinstance(max_table_size, int) or isinstance(max_table_size, bool)
        ):
            raise DataValidationError("max_table_size must be an integer or null.")
        warn_on_inverted_range = raw.get("warn_on_inverted_range", True)
        if not isinstance(warn_on_inverted_range, bool):
            raise DataValidationError("warn_on_inverted_range must be a boolean.")
        return cls(
            max_animation_timestamp=float(max_timestamp) if max_timestamp is not None else None,
            max_table_size=max_table_size,
            warn_on_inverted_range=warn_on_inverted_range,
        )


def get_default_thresholds_path(base_path: Path | str | None = None) -> Path:
    return paths.get_definitions_path(base_path) / THRESHOLDS_FILENAME


def load_thresholds(path: Path | None = None) -> ValidationThresholds:
    """Load thresholds from disk or return defaults when no file exists."""
    config_path = path or get_default_thresholds_path()
    if not config_path.exists():
        return ValidationThresholds()
    return ValidationThresholds.from_mapping(load_json(config_path))
