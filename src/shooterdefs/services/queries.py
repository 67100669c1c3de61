"""Read-only accessors handed to gameplay systems."""
from __future__ import annotations

from enum import Enum

from shooterdefs.core.types import Identifier
from shooterdefs.data.errors import UnknownDefinitionError
from shooterdefs.domain.defs import (
    AttackAnimationDef,
    BotDef,
    ProjectileModel,
    WeaponDef,
)

from .registry import DefinitionRegistry


class SoundEvent(str, Enum):
    PAIN = "pain"
    SCREAM = "scream"
    IDLE = "idle"


class DefinitionQueries:
    """Thin façade over one registry snapshot.

    Optional paths come back as ``None``, never as an empty string, so callers
    can skip the corresponding animation or bone binding.
    """

    def __init__(self, registry: DefinitionRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> DefinitionRegistry:
        return self._registry

    def weapon(self, weapon_id: Identifier) -> WeaponDef:
        definition = self._registry.lookup_weapon(weapon_id)
        if definition is None:
            raise UnknownDefinitionError("weapons", weapon_id)
        return definition

    def bot(self, bot_id: Identifier) -> BotDef:
        definition = self._registry.lookup_bot(bot_id)
        if definition is None:
            raise UnknownDefinitionError("bots", bot_id)
        return definition

    def projectile(self, weapon_id: Identifier) -> ProjectileModel:
        return self.weapon(weapon_id).projectile

    def shot_sounds(self, weapon_id: Identifier) -> tuple[str, ...]:
        return self.weapon(weapon_id).shot_sounds

    def attack_animations(self, bot_id: Identifier) -> tuple[AttackAnimationDef, ...]:
        return self.bot(bot_id).attack_animations

    def aim_animation(self, bot_id: Identifier) -> str | None:
        return self.bot(bot_id).aim_animation

    def spine_bone(self, bot_id: Identifier) -> str | None:
        return self.bot(bot_id).spine

    def uses_weapon_logic(self, bot_id: Identifier) -> bool:
        """Whether the AI should route this bot through weapon aiming."""
        return self.bot(bot_id).can_use_weapons

    def bot_sounds(self, bot_id: Identifier, event: SoundEvent) -> tuple[str, ...]:
        bot = self.bot(bot_id)
        if event is SoundEvent.PAIN:
            return bot.pain_sounds
        if event is SoundEvent.SCREAM:
            return bot.scream_sounds
        if event is SoundEvent.IDLE:
            return bot.idle_sounds
        raise ValueError(f"Unknown sound event: {event!r}")
