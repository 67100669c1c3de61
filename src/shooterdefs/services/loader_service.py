"""Loads definition tables from disk and builds registry snapshots."""
from __future__ import annotations

import logging
from pathlib import Path

from shooterdefs.data import paths
from shooterdefs.data.config import ValidationThresholds, get_default_thresholds_path, load_thresholds
from shooterdefs.data.errors import InvalidRegistryError
from shooterdefs.data.json_loader import load_json_entries

from .diagnostics import Diagnostic, format_diagnostic
from .registry import DefinitionRegistry, build_registry
from .registry_handle import RegistryHandle

log = logging.getLogger(__name__)

WEAPONS_FILENAME = "weapons.json"
BOTS_FILENAME = "bots.json"


def load_entries(
    base_path: Path | str | None = None,
) -> tuple[list[tuple[str, object]], list[tuple[str, object]]]:
    """Return raw ``(identifier, record)`` pairs for the weapon and bot tables."""
    definitions_dir = paths.get_definitions_path(base_path)
    weapons = load_json_entries(definitions_dir / WEAPONS_FILENAME)
    bots = load_json_entries(definitions_dir / BOTS_FILENAME)
    return weapons, bots


def load_registry(
    base_path: Path | str | None = None,
    *,
    thresholds: ValidationThresholds | None = None,
) -> tuple[DefinitionRegistry, list[Diagnostic]]:
    """Build a registry from the definitions directory, logging every diagnostic."""
    if thresholds is None:
        thresholds = load_thresholds(get_default_thresholds_path(base_path))
    weapon_entries, bot_entries = load_entries(base_path)
    try:
        registry, warnings = build_registry(weapon_entries, bot_entries, thresholds=thresholds)
    except InvalidRegistryError as exc:
        for diagnostic in exc.diagnostics:
            level = logging.ERROR if diagnostic.is_fatal else logging.WARNING
            log.log(level, format_diagnostic(diagnostic))
        log.error("Definitions rejected: %s", exc)
        raise
    for diagnostic in warnings:
        log.warning(format_diagnostic(diagnostic))
    return registry, warnings


def reload_from_disk(
    handle: RegistryHandle,
    base_path: Path | str | None = None,
    *,
    thresholds: ValidationThresholds | None = None,
) -> list[Diagnostic]:
    """Rebuild from disk and publish; the old snapshot stays live on failure."""
    registry, warnings = load_registry(base_path, thresholds=thresholds)
    handle.publish(registry)
    return warnings
