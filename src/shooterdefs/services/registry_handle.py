"""Shared handle publishing registry snapshots to concurrent readers."""
from __future__ import annotations

import logging
import threading

from shooterdefs.data.config import ValidationThresholds

from .diagnostics import Diagnostic
from .registry import DefinitionRegistry, RawEntries, build_registry

log = logging.getLogger(__name__)


class RegistryHandle:
    """Holds the current registry snapshot.

    Snapshots are never mutated. Publishing swaps the reference; readers
    that captured an older snapshot keep seeing it unchanged.
    """

    def __init__(self, registry: DefinitionRegistry) -> None:
        self._registry = registry
        self._version = 1
        self._publish_lock = threading.Lock()

    def current(self) -> DefinitionRegistry:
        """Return the snapshot published most recently."""
        return self._registry

    @property
    def version(self) -> int:
        return self._version

    def publish(self, registry: DefinitionRegistry) -> int:
        """Replace the current snapshot and return the new version number."""
        with self._publish_lock:
            self._registry = registry
            self._version += 1
            version = self._version
        log.info("Published definition registry version %d.", version)
        return version

    def reload(
        self,
        weapon_entries: RawEntries,
        bot_entries: RawEntries,
        *,
        thresholds: ValidationThresholds | None = None,
    ) -> list[Diagnostic]:
        """Build a fresh registry and publish it only if construction succeeds.

        Construction errors propagate and leave the current snapshot in place.
        """
        registry, warnings = build_registry(weapon_entries, bot_entries, thresholds=thresholds)
        self.publish(registry)
        return warnings
