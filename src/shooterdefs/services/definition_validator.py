"""Cross-field validation of decoded weapon and bot tables."""
from __future__ import annotations

import math
from typing import Mapping

from shooterdefs.core.types import TableName
from shooterdefs.data.config import ValidationThresholds
from shooterdefs.domain.defs import (
    BotDef,
    Damage,
    PointDamage,
    Projectile,
    Range2,
    Ray,
    SplashDamage,
    WeaponDef,
)

from .diagnostics import Diagnostic, fatal, warning

_BOT_POSITIVE_FIELDS = ("walk_speed", "scale", "weapon_scale", "health", "close_combat_distance")
_BOT_ANIMATION_FIELDS = ("scream_animation", "idle_animation", "walk_animation", "dying_animation")
_BOT_BONE_FIELDS = ("weapon_hand_name", "left_leg_name", "right_leg_name", "hips")
_BOT_SOUND_FIELDS = ("pain_sounds", "scream_sounds", "idle_sounds")


def validate_definitions(
    weapons: Mapping[str, WeaponDef],
    bots: Mapping[str, BotDef],
    *,
    thresholds: ValidationThresholds | None = None,
) -> list[Diagnostic]:
    """Return every finding over both tables, in a deterministic order.

    Nothing is mutated and nothing is raised; callers decide what a fatal
    diagnostic means.
    """
    limits = thresholds or ValidationThresholds()
    diagnostics: list[Diagnostic] = []
    _validate_table_size("weapons", len(weapons), limits, diagnostics)
    _validate_table_size("bots", len(bots), limits, diagnostics)
    for weapon in weapons.values():
        _validate_weapon(weapon, limits, diagnostics)
    for bot in bots.values():
        _validate_bot(bot, limits, diagnostics)
    return diagnostics


def is_capability_coherent(bot: BotDef) -> bool:
    """Weapon users need both an aim animation and a spine bone; others need neither."""
    if bot.can_use_weapons:
        return bot.aim_animation is not None and bot.spine is not None
    return bot.aim_animation is None and bot.spine is None


def _validate_table_size(
    table: TableName, size: int, limits: ValidationThresholds, diagnostics: list[Diagnostic]
) -> None:
    if limits.max_table_size is not None and size > limits.max_table_size:
        diagnostics.append(
            fatal(
                "TABLE_TOO_LARGE",
                f"Table holds {size} records; the limit is {limits.max_table_size}.",
                table,
                None,
            )
        )


def _validate_weapon(weapon: WeaponDef, limits: ValidationThresholds, diagnostics: list[Diagnostic]) -> None:
    _check_positive("weapons", weapon.id, "shoot_interval", weapon.shoot_interval, diagnostics)
    _check_non_negative(
        "weapons", weapon.id, "ammo_consumption_per_shot", weapon.ammo_consumption_per_shot, diagnostics
    )
    projectile = weapon.projectile
    if isinstance(projectile, Ray):
        _check_damage("weapons", weapon.id, "projectile.Ray.damage", projectile.damage, diagnostics)
    elif not isinstance(projectile, Projectile):
        raise TypeError(f"Unhandled projectile variant: {type(projectile).__name__}")
    _check_finite("weapons", weapon.id, "yaw_correction", (weapon.yaw_correction,), diagnostics)
    _check_finite("weapons", weapon.id, "pitch_correction", (weapon.pitch_correction,), diagnostics)
    offset = weapon.ammo_indicator_offset
    _check_finite("weapons", weapon.id, "ammo_indicator_offset", (offset.x, offset.y, offset.z), diagnostics)
    for name in ("v_recoil", "h_recoil"):
        recoil: Range2 = getattr(weapon, name)
        _check_finite("weapons", weapon.id, name, (recoil.min, recoil.max), diagnostics)
    _check_not_empty("weapons", weapon.id, "model", weapon.model, diagnostics)
    _check_path_entries("weapons", weapon.id, "shot_sounds", weapon.shot_sounds, diagnostics)
    if not weapon.shot_sounds:
        diagnostics.append(
            warning(
                "EMPTY_SHOT_SOUNDS",
                "Weapon has no shot sounds and will fire silently.",
                "weapons",
                weapon.id,
                "shot_sounds",
            )
        )
    if limits.warn_on_inverted_range:
        for name in ("v_recoil", "h_recoil"):
            recoil = getattr(weapon, name)
            if not recoil.is_ordered():
                diagnostics.append(
                    warning(
                        "INVERTED_RANGE",
                        f"Range minimum {recoil.min:g} is greater than maximum {recoil.max:g}.",
                        "weapons",
                        weapon.id,
                        name,
                    )
                )


def _validate_bot(bot: BotDef, limits: ValidationThresholds, diagnostics: list[Diagnostic]) -> None:
    for name in _BOT_POSITIVE_FIELDS:
        _check_positive("bots", bot.id, name, getattr(bot, name), diagnostics)
    _check_finite("bots", bot.id, "v_aim_angle_hack", (bot.v_aim_angle_hack,), diagnostics)
    _check_not_empty("bots", bot.id, "model", bot.model, diagnostics)
    for name in _BOT_ANIMATION_FIELDS:
        _check_not_empty("bots", bot.id, name, getattr(bot, name), diagnostics)
    for name in _BOT_SOUND_FIELDS:
        _check_path_entries("bots", bot.id, name, getattr(bot, name), diagnostics)

    for index, attack in enumerate(bot.attack_animations):
        attack_ctx = f"attack_animations[{index}]"
        _check_not_empty("bots", bot.id, f"{attack_ctx}.path", attack.path, diagnostics)
        _check_non_negative("bots", bot.id, f"{attack_ctx}.timestamp", attack.timestamp, diagnostics)
        _check_damage("bots", bot.id, f"{attack_ctx}.damage", attack.damage, diagnostics)
        _check_positive("bots", bot.id, f"{attack_ctx}.speed", attack.speed, diagnostics)
        limit = limits.max_animation_timestamp
        if limit is not None and attack.timestamp > limit:
            diagnostics.append(
                warning(
                    "TIMESTAMP_ABOVE_LIMIT",
                    f"Attack timestamp {attack.timestamp:g}s exceeds the configured limit of {limit:g}s.",
                    "bots",
                    bot.id,
                    f"{attack_ctx}.timestamp",
                )
            )
    if not bot.attack_animations:
        diagnostics.append(
            warning(
                "NO_ATTACK_ANIMATIONS",
                "Bot has no attack animations and can never deal damage.",
                "bots",
                bot.id,
                "attack_animations",
            )
        )

    if not is_capability_coherent(bot):
        diagnostics.append(
            fatal(
                "CAPABILITY_INCOHERENT",
                _describe_incoherence(bot),
                "bots",
                bot.id,
                "can_use_weapons",
            )
        )

    for name in _BOT_BONE_FIELDS:
        if not getattr(bot, name):
            diagnostics.append(
                warning(
                    "EMPTY_BONE_NAME",
                    "Bone name is empty; the bone will not be bound.",
                    "bots",
                    bot.id,
                    name,
                )
            )


def _describe_incoherence(bot: BotDef) -> str:
    if bot.can_use_weapons:
        missing = [name for name in ("aim_animation", "spine") if getattr(bot, name) is None]
        return f"Bot can use weapons but has no {' or '.join(missing)}."
    present = [name for name in ("aim_animation", "spine") if getattr(bot, name) is not None]
    return f"Bot cannot use weapons but sets {' and '.join(present)}."


def _check_damage(
    table: TableName, record_id: str, path: str, damage: Damage, diagnostics: list[Diagnostic]
) -> None:
    if isinstance(damage, PointDamage):
        _check_non_negative(table, record_id, f"{path}.amount", damage.amount, diagnostics)
    elif isinstance(damage, SplashDamage):
        _check_non_negative(table, record_id, f"{path}.amount", damage.amount, diagnostics)
        _check_positive(table, record_id, f"{path}.radius", damage.radius, diagnostics)
    else:
        raise TypeError(f"Unhandled damage variant: {type(damage).__name__}")


def _check_positive(
    table: TableName, record_id: str, path: str, value: float, diagnostics: list[Diagnostic]
) -> None:
    if not value > 0:
        diagnostics.append(
            fatal("NON_POSITIVE", f"Value must be greater than zero (found {value:g}).", table, record_id, path)
        )


def _check_non_negative(
    table: TableName, record_id: str, path: str, value: float, diagnostics: list[Diagnostic]
) -> None:
    if not value >= 0:
        diagnostics.append(
            fatal("NEGATIVE_VALUE", f"Value must not be negative (found {value:g}).", table, record_id, path)
        )


def _check_finite(
    table: TableName,
    record_id: str,
    path: str,
    values: tuple[float, ...],
    diagnostics: list[Diagnostic],
) -> None:
    if not all(math.isfinite(value) for value in values):
        diagnostics.append(fatal("NON_FINITE", "Value must be a finite number.", table, record_id, path))


def _check_not_empty(
    table: TableName, record_id: str, path: str, value: str, diagnostics: list[Diagnostic]
) -> None:
    if not value.strip():
        diagnostics.append(
            fatal("EMPTY_REQUIRED_STRING", "Required path must not be empty.", table, record_id, path)
        )


def _check_path_entries(
    table: TableName,
    record_id: str,
    path: str,
    values: tuple[str, ...],
    diagnostics: list[Diagnostic],
) -> None:
    for index, value in enumerate(values):
        _check_not_empty(table, record_id, f"{path}[{index}]", value, diagnostics)
