"""Bot definition structures."""
from __future__ import annotations

from dataclasses import dataclass

from .damage_def import Damage


@dataclass(frozen=True, slots=True)
class AttackAnimationDef:
    """Attack animation; damage is dealt at ``timestamp`` seconds into the clip."""

    path: str
    timestamp: float
    damage: Damage
    speed: float


@dataclass(frozen=True, slots=True)
class BotDef:
    """Fully parsed bot definition.

    ``aim_animation`` and ``spine`` are ``None`` when the bot cannot use
    weapons.
    """

    id: str
    model: str
    attack_animations: tuple[AttackAnimationDef, ...]
    scream_animation: str
    idle_animation: str
    walk_animation: str
    dying_animation: str
    aim_animation: str | None
    weapon_hand_name: str
    left_leg_name: str
    right_leg_name: str
    hips: str
    spine: str | None
    walk_speed: float
    scale: float
    weapon_scale: float
    health: float
    v_aim_angle_hack: float
    can_use_weapons: bool
    close_combat_distance: float
    pain_sounds: tuple[str, ...]
    scream_sounds: tuple[str, ...]
    idle_sounds: tuple[str, ...]
