"""Weapon and bot definition registry."""

__version__ = "0.1.0"
