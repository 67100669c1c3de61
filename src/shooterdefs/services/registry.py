"""Sealed, read-only registry of weapon and bot definitions."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Sequence, Tuple, TypeVar, Union

from shooterdefs.core.types import Identifier, TableName
from shooterdefs.data.config import ValidationThresholds
from shooterdefs.data.decoders import BotDecoder, WeaponDecoder
from shooterdefs.data.decoders.base import DecoderBase
from shooterdefs.data.errors import (
    DataValidationError,
    DecodeError,
    DuplicateIdentifierError,
    InvalidRegistryError,
)
from shooterdefs.domain.defs import BotDef, WeaponDef

from .definition_validator import validate_definitions
from .diagnostics import Diagnostic, fatal, split_by_severity

log = logging.getLogger(__name__)

T = TypeVar("T")

RawEntries = Union[Mapping[str, object], Sequence[Tuple[object, object]]]


@dataclass(frozen=True, slots=True, eq=False)
class DefinitionRegistry:
    """Immutable snapshot of validated definitions.

    Tables keep input order. Build instances with :func:`build_registry`.
    """

    weapon_table: Mapping[Identifier, WeaponDef]
    bot_table: Mapping[Identifier, BotDef]

    def lookup_weapon(self, weapon_id: Identifier) -> WeaponDef | None:
        return self.weapon_table.get(weapon_id)

    def lookup_bot(self, bot_id: Identifier) -> BotDef | None:
        return self.bot_table.get(bot_id)

    def weapons(self) -> Iterator[WeaponDef]:
        """Iterate weapon definitions in insertion order."""
        return iter(self.weapon_table.values())

    def bots(self) -> Iterator[BotDef]:
        """Iterate bot definitions in insertion order."""
        return iter(self.bot_table.values())

    def weapon_ids(self) -> tuple[Identifier, ...]:
        return tuple(self.weapon_table)

    def bot_ids(self) -> tuple[Identifier, ...]:
        return tuple(self.bot_table)


def build_registry(
    weapon_entries: RawEntries,
    bot_entries: RawEntries,
    *,
    thresholds: ValidationThresholds | None = None,
) -> tuple[DefinitionRegistry, list[Diagnostic]]:
    """Decode, validate and seal both tables.

    Returns the registry together with its warning diagnostics. Raises
    DuplicateIdentifierError when a table repeats an identifier, and
    InvalidRegistryError carrying every diagnostic when any is fatal.
    """
    weapon_pairs = _coerce_entries(weapon_entries, "weapons")
    bot_pairs = _coerce_entries(bot_entries, "bots")
    _reject_duplicates("weapons", weapon_pairs)
    _reject_duplicates("bots", bot_pairs)

    diagnostics: list[Diagnostic] = []
    weapons = _decode_table("weapons", weapon_pairs, WeaponDecoder(), diagnostics)
    bots = _decode_table("bots", bot_pairs, BotDecoder(), diagnostics)
    diagnostics.extend(validate_definitions(weapons, bots, thresholds=thresholds))

    fatal_items, warnings = split_by_severity(diagnostics)
    if fatal_items:
        log.debug(
            "Registry rejected: %d fatal and %d warning diagnostic(s).",
            len(fatal_items),
            len(warnings),
        )
        raise InvalidRegistryError(diagnostics)

    registry = DefinitionRegistry(
        weapon_table=MappingProxyType(weapons),
        bot_table=MappingProxyType(bots),
    )
    log.debug(
        "Registry sealed with %d weapon(s), %d bot(s) and %d warning(s).",
        len(weapons),
        len(bots),
        len(warnings),
    )
    return registry, warnings


def _coerce_entries(entries: RawEntries, table: TableName) -> list[tuple[object, object]]:
    if isinstance(entries, Mapping):
        return list(entries.items())
    pairs: list[tuple[object, object]] = []
    for entry in entries:
        if not isinstance(entry, (tuple, list)) or len(entry) != 2:
            raise DataValidationError(f"{table} entries must be (identifier, record) pairs.")
        pairs.append((entry[0], entry[1]))
    return pairs


def _reject_duplicates(table: TableName, pairs: Sequence[tuple[object, object]]) -> None:
    seen: set[str] = set()
    for record_id, _ in pairs:
        if not isinstance(record_id, str):
            continue
        if record_id in seen:
            raise DuplicateIdentifierError(table, record_id)
        seen.add(record_id)


def _decode_table(
    table: TableName,
    pairs: Sequence[tuple[object, object]],
    decoder: DecoderBase[T],
    diagnostics: list[Diagnostic],
) -> Dict[Identifier, T]:
    decoded: Dict[Identifier, T] = {}
    for record_id, raw in pairs:
        if not isinstance(record_id, str) or not record_id:
            diagnostics.append(
                fatal(
                    "INVALID_IDENTIFIER",
                    "Identifier must be a non-empty string.",
                    table,
                    repr(record_id),
                )
            )
            continue
        try:
            decoded[record_id] = decoder.decode(record_id, raw)
        except DecodeError as exc:
            diagnostics.append(fatal("DECODE_ERROR", str(exc), table, record_id, exc.field_path))
    return decoded
