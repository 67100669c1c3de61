"""Damage variants carried by ray weapons and bot attacks."""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True, slots=True)
class PointDamage:
    """Single-target damage with no falloff."""

    TAG: ClassVar[str] = "Point"

    amount: float


@dataclass(frozen=True, slots=True)
class SplashDamage:
    """Area damage applied to everything within ``radius``."""

    TAG: ClassVar[str] = "Splash"

    amount: float
    radius: float


Damage = Union[PointDamage, SplashDamage]


def damage_amount(damage: Damage) -> float:
    """Return the raw damage quantity of any damage variant."""
    if isinstance(damage, PointDamage):
        return damage.amount
    if isinstance(damage, SplashDamage):
        return damage.amount
    raise TypeError(f"Unhandled damage variant: {type(damage).__name__}")
