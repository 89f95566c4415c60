from __future__ import annotations

import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable, Optional, Protocol, Tuple, Union

from .board import Board, TurnInfo
from .errors import ParseError
from .strategy import choose_move


class InputProvider(Protocol):
    def begin_turn(self, reads: int) -> None:
        """Called before the first read of a request for `reads` numbers."""
        ...

    def read_positive_integer(self) -> int:
        """Returns the next integer the user entered; raises ParseError."""
        ...


def parse_non_negative(text: str) -> int:
    """Parses one user-entered integer, raising ParseError if it is not one."""
    try:
        value = int(text.strip())
    except (TypeError, ValueError):
        raise ParseError("Please enter two positive integers.") from None
    if value < 0:
        raise ParseError("Please enter two positive integers.")
    return value


class QueuedInput:
    """Input provider fed with pre-supplied values (HTTP requests, tests).

    Values may be ints or strings; strings go through the same parsing as
    terminal input.
    """

    def __init__(self, values: Iterable[Union[int, str]] = ()) -> None:
        self._values = deque(values)

    def push(self, *values: Union[int, str]) -> None:
        self._values.extend(values)

    def begin_turn(self, reads: int) -> None:
        # values are supplied up front, nothing to reset
        pass

    def read_positive_integer(self) -> int:
        if not self._values:
            raise ParseError("No more input available.")
        value = self._values.popleft()
        if isinstance(value, int):
            if value < 0:
                raise ParseError("Please enter two positive integers.")
            return value
        return parse_non_negative(value)


TurnResult = Union[TurnInfo, ParseError]


@dataclass
class HumanPlayer:
    """Asks its input provider for a 1-based stack number and a match count."""
    input: InputProvider
    name: str = 'Human'

    def do_turn(self, board: Board) -> TurnResult:
        try:
            self.input.begin_turn(2)
            stack = self.input.read_positive_integer()
            count = self.input.read_positive_integer()
        except ParseError as e:
            return e
        # Stack 0 maps to -1 here and is rejected by the board as missing.
        return TurnInfo(stack - 1, count)


def _no_delay() -> None:
    return None


@dataclass
class AutomatedPlayer:
    """Perfect player: always takes a winning move when one exists."""
    rng: random.Random = field(default_factory=random.Random)
    delay: Callable[[], None] = _no_delay
    name: str = 'Computer'

    def do_turn(self, board: Board) -> TurnInfo:
        self.delay()
        return choose_move(board.clone(), self.rng)


Player = Union[HumanPlayer, AutomatedPlayer]


class GameType(Enum):
    HUMAN_VS_HUMAN = 'hvh'
    HUMAN_VS_AI = 'hva'
    AI_VS_AI = 'ava'


def make_players(
    game_type: GameType,
    input_provider: Optional[InputProvider] = None,
    rng: Optional[random.Random] = None,
    delay: Optional[Callable[[], None]] = None,
) -> Tuple[Player, Player]:
    """Builds the player pair for a game type. Human seats share one input."""
    rng = rng or random.Random()
    delay = delay or _no_delay

    def human() -> HumanPlayer:
        if input_provider is None:
            raise ValueError(f"{game_type.name} needs an input provider")
        return HumanPlayer(input=input_provider)

    def ai() -> AutomatedPlayer:
        return AutomatedPlayer(rng=rng, delay=delay)

    if game_type is GameType.HUMAN_VS_HUMAN:
        return human(), human()
    if game_type is GameType.HUMAN_VS_AI:
        return human(), ai()
    return ai(), ai()
