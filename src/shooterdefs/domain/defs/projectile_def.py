"""Projectile models: instant hit-scan rays or simulated projectiles."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from .damage_def import Damage, PointDamage, SplashDamage


class ProjectileKind(str, Enum):
    """Physical projectiles whose flight and damage live in the simulation."""

    PLASMA = "Plasma"
    GRENADE = "Grenade"
    ROCKET = "Rocket"


@dataclass(frozen=True, slots=True)
class Ray:
    """Hit-scan shot; damage is applied once with no travel time."""

    TAG: ClassVar[str] = "Ray"

    damage: Damage


@dataclass(frozen=True, slots=True)
class Projectile:
    """Simulated projectile; the core only records which kind is fired."""

    TAG: ClassVar[str] = "Projectile"

    kind: ProjectileKind


ProjectileModel = Union[Ray, Projectile]


def describe_projectile(model: ProjectileModel) -> str:
    """Return a short human-readable label, e.g. ``Ray(Point 10)``."""
    if isinstance(model, Ray):
        damage = model.damage
        if isinstance(damage, PointDamage):
            return f"Ray(Point {damage.amount:g})"
        if isinstance(damage, SplashDamage):
            return f"Ray(Splash {damage.amount:g} r={damage.radius:g})"
        raise TypeError(f"Unhandled damage variant: {type(damage).__name__}")
    if isinstance(model, Projectile):
        return f"Projectile({model.kind.value})"
    raise TypeError(f"Unhandled projectile variant: {type(model).__name__}")
