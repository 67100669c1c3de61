"""Small value types shared by weapon and bot definitions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector3:
    x: float
    y: float
    z: float


@dataclass(frozen=True, slots=True)
class Range2:
    """Randomization interval, e.g. recoil bounds."""

    min: float
    max: float

    def is_ordered(self) -> bool:
        return self.min <= self.max
