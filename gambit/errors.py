class GambitError(Exception):
    """Base class for every error raised by gambit."""


class RulesEngineInvariantViolation(GambitError):
    """
    The rules engine offered a move as legal that it then refuses to play.

    The search trusts the move generator completely, so this aborts the
    current search instead of continuing on a corrupted position.
    """


class InvalidDifficulty(GambitError, ValueError):
    """Unknown difficulty name or level."""


class IllegalMove(GambitError):
    """A player tried a move that is not legal in the current position."""
