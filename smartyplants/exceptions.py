"""Smartyplants exception hierarchy.

Centralised base classes so callers can catch game failures without
resorting to bare ``except Exception`` blocks.
"""


class SmartyplantsError(Exception):
    """Root of all Smartyplants domain exceptions."""


class GeneticsError(SmartyplantsError):
    """Gene table lookup or gene construction failure."""


class GameError(SmartyplantsError):
    """Errors raised while driving a game session."""


class InvalidMoveError(GameError, ValueError):
    """A rejected player move was unwrapped as if it had succeeded."""


class GameOverError(GameError):
    """The game has already been won or lost; only a restart is accepted."""


class ConfigurationError(SmartyplantsError):
    """Invalid or missing configuration."""
