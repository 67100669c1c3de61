"""Low-level JSON helpers feeding raw definition tables to the registry."""
from __future__ import annotations

import json
from pathlib import Path

from .errors import DataLoadError, DataValidationError


class _Pairs(list):
    """Marker for objects decoded with their key/value pairs preserved."""


def load_json(path: Path) -> object:
    """Load JSON from disk and raise DataLoadError on failure."""
    text = _read_text(path)
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Invalid JSON in {path}: {exc}") from exc


def load_json_entries(path: Path) -> list[tuple[str, object]]:
    """Load a top-level JSON object as ordered ``(key, value)`` pairs.

    Duplicate top-level keys are kept so the registry can reject them.
    Nested objects decode to plain dicts.
    """
    text = _read_text(path)
    try:
        raw = json.loads(text, object_pairs_hook=_Pairs)
    except json.JSONDecodeError as exc:
        raise DataLoadError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(raw, _Pairs):
        raise DataValidationError(f"Expected top-level object in {path}")
    return [(key, _to_tree(value)) for key, value in raw]


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise DataLoadError(f"Definition file not found: {path}") from exc
    except OSError as exc:
        raise DataLoadError(f"Unable to read definition file: {path}") from exc


def _to_tree(value: object) -> object:
    if isinstance(value, _Pairs):
        return {key: _to_tree(item) for key, item in value}
    if isinstance(value, list):
        return [_to_tree(item) for item in value]
    return value
