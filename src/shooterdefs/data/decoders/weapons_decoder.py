"""Weapon record decoder."""
from __future__ import annotations

from typing import Mapping

from shooterdefs.domain.defs import WeaponDef

from .base import DecoderBase
from .variants import decode_projectile


class WeaponDecoder(DecoderBase[WeaponDef]):
    """Decodes weapon records; numeric fields keep their units (seconds, degrees)."""

    def _build(self, record_id: str, data: Mapping[str, object]) -> WeaponDef:
        def field(name: str) -> object:
            return self._field(data, record_id, name)

        return WeaponDef(
            id=record_id,
            model=self._require_str(field("model"), record_id, "model"),
            shot_sounds=self._require_str_list(field("shot_sounds"), record_id, "shot_sounds"),
            projectile=decode_projectile(field("projectile"), record_id=record_id, path="projectile"),
            shoot_interval=self._require_float(field("shoot_interval"), record_id, "shoot_interval"),
            yaw_correction=self._require_float(field("yaw_correction"), record_id, "yaw_correction"),
            pitch_correction=self._require_float(field("pitch_correction"), record_id, "pitch_correction"),
            ammo_indicator_offset=self._require_vector3(
                field("ammo_indicator_offset"), record_id, "ammo_indicator_offset"
            ),
            ammo_consumption_per_shot=self._require_int(
                field("ammo_consumption_per_shot"), record_id, "ammo_consumption_per_shot"
            ),
            v_recoil=self._require_range2(field("v_recoil"), record_id, "v_recoil"),
            h_recoil=self._require_range2(field("h_recoil"), record_id, "h_recoil"),
        )
