from __future__ import annotations

import random
from functools import reduce
from typing import List, Optional

from .board import Board, TurnInfo
from .config import trace


def nim_sum(board: Board) -> int:
    """XOR of every stack count. Zero means the player to move is lost."""
    return reduce(lambda a, b: a ^ b, (count for _, count in board), 0)


def legal_moves(board: Board) -> List[TurnInfo]:
    """Every (stack, count) with 0 < count <= stacks[stack], in stack order."""
    return [
        TurnInfo(stack, n)
        for stack, count in board
        for n in range(1, count + 1)
    ]


def is_win_turn(board: Board, turn: TurnInfo) -> bool:
    """True if the turn leaves a zero nim-sum. Runs on a clone of `board`."""
    scratch = board.clone()
    if scratch.remove_matches(turn.stack, turn.count) is not None:
        return False
    return nim_sum(scratch) == 0


def winning_moves(board: Board) -> List[TurnInfo]:
    """
    All moves that drive the nim-sum to zero.
    For each stack c, the target c ^ nim_sum is reachable only when it is
    below c, so there is at most one winning move per stack.
    """
    total = nim_sum(board)
    if total == 0:
        return []
    wins: List[TurnInfo] = []
    for stack, count in board:
        target = count ^ total
        if target < count:
            turn = TurnInfo(stack, count - target)
            if is_win_turn(board, turn):
                wins.append(turn)
    return wins


def choose_move(board: Board, rng: Optional[random.Random] = None) -> TurnInfo:
    """Picks a winning move uniformly at random, or any legal move when none wins."""
    rng = rng or random.Random()
    wins = winning_moves(board)
    if wins:
        turn = rng.choice(wins)
        trace('ai', f"nim-sum {nim_sum(board)}, {len(wins)} winning move(s), chose {tuple(turn)}")
        return turn
    moves = legal_moves(board)
    if not moves:
        raise ValueError('No legal moves available')
    turn = rng.choice(moves)
    trace('ai', f"losing position {board.stacks}, chose {tuple(turn)} from {len(moves)} moves")
    return turn
