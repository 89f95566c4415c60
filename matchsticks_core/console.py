from __future__ import annotations

from typing import Callable, List, Optional

from .board import Board
from .errors import ParseError
from .player import parse_non_negative


class ConsoleInput:
    """Reads integers from the terminal, one per call.

    A line may hold every number still needed for the current request
    ("2 3" for a move); a line with more numbers than that is rejected.
    Leftover tokens never carry over into the next request.
    """

    def __init__(self, prompt: str = '> ', input_fn: Callable[[str], str] = input) -> None:
        self.prompt = prompt
        self._input = input_fn
        self._pending: List[str] = []
        self._expected = 2

    def begin_turn(self, reads: int) -> None:
        """Starts a request for `reads` numbers and drops anything left over."""
        self._pending.clear()
        self._expected = max(1, reads)

    def read_positive_integer(self) -> int:
        if not self._pending:
            # EOFError propagates; the CLI treats a closed stdin as quit.
            line = self._input(self.prompt)
            tokens = line.replace(',', ' ').split()
            if not tokens or len(tokens) > self._expected:
                raise ParseError("Please enter two positive integers.")
            self._pending = tokens
        token = self._pending.pop(0)
        self._expected = max(1, self._expected - 1)
        try:
            return parse_non_negative(token)
        except ParseError:
            self._pending.clear()
            raise


class ConsoleNotifier:
    def __init__(self, print_fn: Optional[Callable[[str], None]] = None) -> None:
        self._print = print_fn or print

    def show_board(self, board: Board) -> None:
        self._print('')
        self._print(board.pretty() if len(board) else '(no stacks)')
        self._print('')

    def show_message(self, text: str) -> None:
        self._print(text)
