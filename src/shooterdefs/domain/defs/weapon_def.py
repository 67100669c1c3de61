"""Weapon definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from .projectile_def import ProjectileModel
from .vectors import Range2, Vector3


@dataclass(frozen=True, slots=True)
class WeaponDef:
    """Weapon definition as consumed by combat, rendering and audio."""

    id: str
    model: str
    shot_sounds: tuple[str, ...]
    projectile: ProjectileModel
    shoot_interval: float
    yaw_correction: float
    pitch_correction: float
    ammo_indicator_offset: Vector3
    ammo_consumption_per_shot: int
    v_recoil: Range2
    h_recoil: Range2
