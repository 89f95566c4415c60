from __future__ import annotations


class GameError(Exception):
    """Base for recoverable rule and input errors.

    Instances are returned as values by Board and Player operations, so the
    turn loop can inspect them without try/except.
    """
    kind = 'game_error'

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class StackDoesNotExist(GameError):
    """The referenced stack index is out of range."""
    kind = 'stack_does_not_exist'


class NotEnoughMatches(GameError):
    """The stack holds fewer matches than requested."""
    kind = 'not_enough_matches'


class InvalidMoveAmount(GameError):
    """A removal of zero (or fewer) matches."""
    kind = 'invalid_move_amount'


class ParseError(GameError):
    """Input could not be read as a non-negative integer."""
    kind = 'parse_error'
