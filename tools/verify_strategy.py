#!/usr/bin/env python3
"""
Cross-check the nim-sum strategy against brute-force game search.

- Enumerates every board with up to K stacks of up to M matches each.
- Checks:
  * nim-sum == 0 exactly when brute force says the mover loses
  * winning_moves() is non-empty exactly on winning boards
  * every winning move is legal and leaves a zero nim-sum
  * on zero nim-sum boards every legal move leaves a non-zero nim-sum
- Prints a JSON summary; exits 1 on any mismatch.

Usage:
  python tools/verify_strategy.py          # K=3, M=7
  python tools/verify_strategy.py 4 5      # K=4, M=5
"""
from __future__ import annotations

import itertools
import json
import os
import sys
from functools import lru_cache
from typing import List, Tuple

HERE = os.path.dirname(__file__)
ROOT = os.path.abspath(os.path.join(HERE, '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from game import Board, legal_moves, nim_sum, winning_moves  # noqa: E402


@lru_cache(maxsize=None)
def mover_wins(stacks: Tuple[int, ...]) -> bool:
    """Brute force: the player to move wins if some move leaves a losing board."""
    for i, c in enumerate(stacks):
        for n in range(1, c + 1):
            nxt = tuple(sorted(stacks[:i] + (c - n,) + stacks[i + 1:]))
            if not mover_wins(nxt):
                return True
    return False


def verify(max_stacks: int, max_matches: int) -> dict:
    checked = 0
    mismatches: List[dict] = []
    for k in range(1, max_stacks + 1):
        for stacks in itertools.product(range(max_matches + 1), repeat=k):
            board = Board.from_stacks(stacks)
            checked += 1
            total = nim_sum(board)
            brute = mover_wins(tuple(sorted(stacks)))
            wins = winning_moves(board)
            problems: List[str] = []
            if (total != 0) != brute:
                problems.append('nim-sum disagrees with search')
            if bool(wins) != brute:
                problems.append('winning move set disagrees with search')
            for m in wins:
                scratch = board.clone()
                if scratch.remove_matches(m.stack, m.count) is not None or nim_sum(scratch) != 0:
                    problems.append(f'bad winning move {tuple(m)}')
            if total == 0:
                for m in legal_moves(board):
                    scratch = board.clone()
                    scratch.remove_matches(m.stack, m.count)
                    if nim_sum(scratch) == 0:
                        problems.append(f'move {tuple(m)} keeps zero nim-sum')
            if problems:
                mismatches.append({'stacks': list(stacks), 'problems': problems})
    return {
        'maxStacks': max_stacks,
        'maxMatches': max_matches,
        'checked': checked,
        'mismatches': len(mismatches),
        'sample': mismatches[:5],
    }


def main(argv: List[str]) -> int:
    k = int(argv[1]) if len(argv) > 1 else 3
    m = int(argv[2]) if len(argv) > 2 else 7
    summary = verify(k, m)
    print(json.dumps(summary, indent=2))
    return 1 if summary['mismatches'] else 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
