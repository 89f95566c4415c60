from __future__ import annotations

from typing import Iterable, Iterator, List, NamedTuple, Optional, Tuple

from .errors import GameError, InvalidMoveAmount, NotEnoughMatches, StackDoesNotExist


class TurnInfo(NamedTuple):
    """A declared move: remove `count` matches from stack `stack` (0-based)."""
    stack: int
    count: int


class Board:
    """The shared row of stacks. Counts only ever go down.

    Board has value semantics: use clone() before any speculative removal,
    two owners never share the underlying list.
    """

    __slots__ = ('_stacks',)

    def __init__(self, number_of_stacks: int = 0) -> None:
        if number_of_stacks < 0:
            raise ValueError(f"number of stacks must be >= 0, got {number_of_stacks}")
        self._stacks: List[int] = [2 * i + 1 for i in range(number_of_stacks)]

    @classmethod
    def new(cls, number_of_stacks: int) -> 'Board':
        """Stack i starts with 2*i + 1 matches."""
        return cls(number_of_stacks)

    @classmethod
    def from_stacks(cls, counts: Iterable[int]) -> 'Board':
        """Rebuilds a board from a snapshot of stack counts."""
        board = cls(0)
        stacks = [int(c) for c in counts]
        if any(c < 0 for c in stacks):
            raise ValueError(f"stack counts must be non-negative: {stacks}")
        board._stacks = stacks
        return board

    def clone(self) -> 'Board':
        board = Board(0)
        board._stacks = list(self._stacks)
        return board

    @property
    def stacks(self) -> Tuple[int, ...]:
        return tuple(self._stacks)

    def length(self) -> int:
        return len(self._stacks)

    def __len__(self) -> int:
        return len(self._stacks)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        """Yields (index, count) pairs in stack order."""
        return iter(list(enumerate(self._stacks)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._stacks == other._stacks

    def __repr__(self) -> str:
        return f"Board({self._stacks!r})"

    def _missing_stack(self, stack: int, action: str) -> StackDoesNotExist:
        return StackDoesNotExist(
            f"There are only {len(self._stacks)} stacks, so it is not "
            f"possible to {action} stack {stack + 1}."
        )

    def check_removal(self, stack: int, amount: int) -> Optional[GameError]:
        """Returns the error a removal would produce, or None when it is legal."""
        if stack < 0 or stack >= len(self._stacks):
            return self._missing_stack(stack, 'remove matches from')
        if amount <= 0:
            return InvalidMoveAmount("You have to take at least one match.")
        if self._stacks[stack] < amount:
            return NotEnoughMatches("You can't take more matches from a stack than it contains.")
        return None

    def remove_matches(self, stack: int, amount: int) -> Optional[GameError]:
        """Removes `amount` matches from `stack`.

        Returns None on success. On failure returns the error and leaves the
        board untouched.
        """
        err = self.check_removal(stack, amount)
        if err is None:
            self._stacks[stack] -= amount
        return err

    def exists_match(self) -> bool:
        return self.total_matches() > 0

    def total_matches(self) -> int:
        return sum(self._stacks)

    def number_of_matches_in_stack(self, stack: int) -> int:
        """Raises StackDoesNotExist for an out-of-range index."""
        if stack < 0 or stack >= len(self._stacks):
            raise self._missing_stack(stack, 'get the number of matches in')
        return self._stacks[stack]

    def pretty(self) -> str:
        """Human-readable rows like '2: |||' with 1-based stack labels."""
        width = len(str(len(self._stacks)))
        return "\n".join(
            f"{i + 1:>{width}}: {'|' * count}" for i, count in enumerate(self._stacks)
        )
