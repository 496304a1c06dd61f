"""Ambient services shared by the client and applications built on it.

This package must NEVER import from ``telegrambot/``.
"""

from core.logger import BotLogger, parse_level

__all__ = [
    "BotLogger",
    "parse_level",
]
