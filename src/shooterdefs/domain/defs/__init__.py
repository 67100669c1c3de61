"""Domain definition exports."""

from .bot_def import AttackAnimationDef, BotDef
from .damage_def import Damage, PointDamage, SplashDamage, damage_amount
from .projectile_def import (
    Projectile,
    ProjectileKind,
    ProjectileModel,
    Ray,
    describe_projectile,
)
from .vectors import Range2, Vector3
from .weapon_def import WeaponDef

__all__ = [
    "AttackAnimationDef",
    "BotDef",
    "Damage",
    "PointDamage",
    "Projectile",
    "ProjectileKind",
    "ProjectileModel",
    "Range2",
    "Ray",
    "SplashDamage",
    "Vector3",
    "WeaponDef",
    "damage_amount",
    "describe_projectile",
]
