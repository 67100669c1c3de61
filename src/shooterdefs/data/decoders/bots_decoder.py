"""Bot record decoder."""
from __future__ import annotations

from typing import Mapping

from shooterdefs.data.errors import MissingFieldError
from shooterdefs.domain.defs import AttackAnimationDef, BotDef

from .base import DecoderBase, require_mapping
from .variants import decode_damage

_REQUIRED_STRINGS = (
    "model",
    "scream_animation",
    "idle_animation",
    "walk_animation",
    "dying_animation",
    "weapon_hand_name",
    "left_leg_name",
    "right_leg_name",
    "hips",
)
_REQUIRED_FLOATS = (
    "walk_speed",
    "scale",
    "weapon_scale",
    "health",
    "v_aim_angle_hack",
    "close_combat_distance",
)
_SOUND_LISTS = ("pain_sounds", "scream_sounds", "idle_sounds")


class BotDecoder(DecoderBase[BotDef]):
    """Decodes bot records.

    ``aim_animation`` and ``spine`` are optional; every other field is required.
    """

    def _build(self, record_id: str, data: Mapping[str, object]) -> BotDef:
        strings = {
            name: self._require_str(self._field(data, record_id, name), record_id, name)
            for name in _REQUIRED_STRINGS
        }
        floats = {
            name: self._require_float(self._field(data, record_id, name), record_id, name)
            for name in _REQUIRED_FLOATS
        }
        sounds = {
            name: self._require_str_list(self._field(data, record_id, name), record_id, name)
            for name in _SOUND_LISTS
        }
        return BotDef(
            id=record_id,
            attack_animations=self._parse_attacks(
                self._field(data, record_id, "attack_animations"), record_id
            ),
            aim_animation=self._optional_str(data.get("aim_animation"), record_id, "aim_animation"),
            spine=self._optional_str(data.get("spine"), record_id, "spine"),
            can_use_weapons=self._require_bool(
                self._field(data, record_id, "can_use_weapons"), record_id, "can_use_weapons"
            ),
            **strings,
            **floats,
            **sounds,
        )

    def _parse_attacks(self, raw_attacks: object, record_id: str) -> tuple[AttackAnimationDef, ...]:
        attacks: list[AttackAnimationDef] = []
        for index, entry in enumerate(self._require_list(raw_attacks, record_id, "attack_animations")):
            attack_ctx = f"attack_animations[{index}]"
            attack_data = require_mapping(entry, record_id, attack_ctx)
            attacks.append(
                AttackAnimationDef(
                    path=self._require_str(
                        self._attack_field(attack_data, record_id, attack_ctx, "path"),
                        record_id,
                        f"{attack_ctx}.path",
                    ),
                    timestamp=self._require_float(
                        self._attack_field(attack_data, record_id, attack_ctx, "timestamp"),
                        record_id,
                        f"{attack_ctx}.timestamp",
                    ),
                    damage=decode_damage(
                        self._attack_field(attack_data, record_id, attack_ctx, "damage"),
                        record_id=record_id,
                        path=f"{attack_ctx}.damage",
                    ),
                    speed=self._require_float(
                        self._attack_field(attack_data, record_id, attack_ctx, "speed"),
                        record_id,
                        f"{attack_ctx}.speed",
                    ),
                )
            )
        return tuple(attacks)

    @staticmethod
    def _attack_field(data: Mapping[str, object], record_id: str, attack_ctx: str, name: str) -> object:
        if name not in data:
            raise MissingFieldError(record_id, f"{attack_ctx}.{name}")
        return data[name]
