"""
Exception hierarchy for the Ludo rules engine.

Caller-input errors derive from ``LudoError`` and are recoverable: the turn
driver re-prompts on them. Broken internal invariants raise
``InvariantViolation``, which is intentionally outside that hierarchy so an
``except LudoError`` never hides it.
"""


class LudoError(Exception):
    """Base exception for recoverable rule errors."""


class IllegalMoveError(LudoError):
    """The requested distance/path is not a legal move."""


class TokenNotFoundError(LudoError):
    """No token of the given team stands on the claimed coordinate."""


class NoLockedTokenError(LudoError):
    """Unlock requested but every pen of the team is empty."""


class InvariantViolation(RuntimeError):
    """Board state or geometry is inconsistent; the game cannot continue."""
