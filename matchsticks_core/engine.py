from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol, Sequence, Tuple, Union

from .board import Board, TurnInfo
from .config import trace
from .errors import GameError
from .player import AutomatedPlayer, Player


class Notifier(Protocol):
    def show_board(self, board: Board) -> None: ...

    def show_message(self, text: str) -> None: ...


class NullNotifier:
    def show_board(self, board: Board) -> None:
        pass

    def show_message(self, text: str) -> None:
        pass


class RecordingNotifier:
    """Keeps every board snapshot and message, in order."""

    def __init__(self) -> None:
        self.boards: List[Tuple[int, ...]] = []
        self.messages: List[str] = []

    def show_board(self, board: Board) -> None:
        self.boards.append(board.stacks)

    def show_message(self, text: str) -> None:
        self.messages.append(text)


@dataclass(frozen=True)
class Playing:
    player: int


@dataclass(frozen=True)
class Finished:
    winner: int


GameStatus = Union[Playing, Finished]


def turn_prompt(player: int) -> str:
    return (
        f"It's player {player + 1}'s turn. Please enter from which stack "
        "to take how many matches."
    )


def win_message(player: int) -> str:
    return f"Player {player + 1} won the game."


class Game:
    """
    Runs the turn loop for two players over one board.

    Rule and input errors are reported to the notifier and the same player
    is asked again; nothing is mutated and no turn is consumed. The player
    who removes the last match wins.
    """

    def __init__(
        self,
        board: Board,
        players: Sequence[Player],
        notifier: Optional[Notifier] = None,
        first_player: int = 0,
    ) -> None:
        if len(players) != 2:
            raise ValueError(f"a game needs exactly two players, got {len(players)}")
        if first_player not in (0, 1):
            raise ValueError(f"first_player must be 0 or 1, got {first_player}")
        self._board = board.clone()
        self._players: Tuple[Player, Player] = (players[0], players[1])
        self._notifier: Notifier = notifier or NullNotifier()
        self._status: GameStatus = Playing(first_player)
        self._announced = False
        self.last_move: Optional[TurnInfo] = None
        self.last_error: Optional[GameError] = None
        self.history: List[Tuple[int, TurnInfo]] = []
        if not self._board.exists_match():
            # Nobody can move on an empty board; the player who would have
            # moved second is credited with the win.
            self._status = Finished(1 - first_player)

    @property
    def board(self) -> Board:
        """A copy of the live board."""
        return self._board.clone()

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def finished(self) -> bool:
        return isinstance(self._status, Finished)

    @property
    def winner(self) -> Optional[int]:
        return self._status.winner if isinstance(self._status, Finished) else None

    @property
    def current_player(self) -> Optional[int]:
        return self._status.player if isinstance(self._status, Playing) else None

    def start(self) -> None:
        """Shows the initial board and the first prompt (or the result)."""
        self._notifier.show_board(self._board.clone())
        self._announce()

    def _announce(self) -> None:
        if isinstance(self._status, Finished):
            self._notifier.show_message(win_message(self._status.winner))
        else:
            self._notifier.show_message(turn_prompt(self._status.player))
        self._announced = True

    def step(self) -> GameStatus:
        """Lets the current player make one attempt and returns the new status."""
        if not isinstance(self._status, Playing):
            raise RuntimeError('The game is already finished')
        if not self._announced:
            self._announce()
        p = self._status.player
        player = self._players[p]

        result = player.do_turn(self._board.clone())
        if isinstance(result, GameError):
            trace('game', f"player {p + 1} input error: {result.message}")
            self.last_error = result
            self._notifier.show_message(result.message)
            return self._status

        err = self._board.remove_matches(result.stack, result.count)
        if err is not None:
            if isinstance(player, AutomatedPlayer):
                raise AssertionError(
                    f"automated player chose illegal move {tuple(result)} on {self._board.stacks}: {err.message}"
                )
            trace('game', f"player {p + 1} rejected move {tuple(result)}: {err.message}")
            self.last_error = err
            self._notifier.show_message(err.message)
            return self._status

        self.last_error = None
        self.last_move = result
        self.history.append((p, result))
        trace('game', f"player {p + 1} took {result.count} from stack {result.stack + 1} -> {self._board.stacks}")
        self._notifier.show_board(self._board.clone())

        if not self._board.exists_match():
            self._status = Finished(p)
        else:
            self._status = Playing(1 - p)
        self._announce()
        return self._status

    def play(self) -> int:
        """Runs turns until the board is empty and returns the winner's index."""
        if not self._announced:
            self.start()
        while isinstance(self._status, Playing):
            self.step()
        return self._status.winner
