"""Decoder exports."""

from .bots_decoder import BotDecoder
from .variants import decode_damage, decode_projectile
from .weapons_decoder import WeaponDecoder

__all__ = ["BotDecoder", "WeaponDecoder", "decode_damage", "decode_projectile"]
