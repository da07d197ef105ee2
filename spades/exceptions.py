"""Exceptions raised by the game engine."""


class SpadesError(Exception):
    """Base class for game engine errors."""


class InvalidMoveError(SpadesError):
    """A bid or card that the rules do not allow (bad user input)."""


class GameStateError(SpadesError):
    """An action attempted in the wrong phase or out of turn."""


class InvariantViolationError(SpadesError):
    """Internal rule invariant broken; indicates a bug, not bad input."""
