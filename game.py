from __future__ import annotations

# Facade module that re-exports matchsticks core functionality.
# The Flask app and tests import from here; single-responsibility
# modules live under matchsticks_core/*.

from matchsticks_core.board import Board, TurnInfo
from matchsticks_core.errors import (
    GameError,
    StackDoesNotExist,
    NotEnoughMatches,
    InvalidMoveAmount,
    ParseError,
)
from matchsticks_core.strategy import (
    nim_sum,
    legal_moves,
    winning_moves,
    is_win_turn,
    choose_move,
)
from matchsticks_core.player import (
    InputProvider,
    QueuedInput,
    HumanPlayer,
    AutomatedPlayer,
    Player,
    GameType,
    make_players,
    parse_non_negative,
)
from matchsticks_core.engine import (
    Game,
    Playing,
    Finished,
    Notifier,
    NullNotifier,
    RecordingNotifier,
    turn_prompt,
    win_message,
)
from matchsticks_core.console import ConsoleInput, ConsoleNotifier

__all__ = [
    'Board', 'TurnInfo',
    'GameError', 'StackDoesNotExist', 'NotEnoughMatches', 'InvalidMoveAmount', 'ParseError',
    'nim_sum', 'legal_moves', 'winning_moves', 'is_win_turn', 'choose_move',
    'InputProvider', 'QueuedInput', 'HumanPlayer', 'AutomatedPlayer', 'Player',
    'GameType', 'make_players', 'parse_non_negative',
    'Game', 'Playing', 'Finished', 'Notifier', 'NullNotifier', 'RecordingNotifier',
    'turn_prompt', 'win_message',
    'ConsoleInput', 'ConsoleNotifier',
    'main',
]


def main() -> None:
    # CLI driver delegated to matchsticks_core.cli
    from matchsticks_core.cli import main as _main
    raise SystemExit(_main())


if __name__ == '__main__':
    main()
