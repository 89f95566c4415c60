from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Callable, List, Optional

from .board import Board
from .config import ai_delay_ms, max_stacks
from .console import ConsoleInput, ConsoleNotifier
from .engine import Game
from .errors import ParseError
from .player import GameType, make_players


def prompt_number_of_stacks(inp: ConsoleInput, out: Callable[[str], None], limit: int) -> int:
    """Asks until the user enters a usable stack count."""
    out("Please enter the number of stacks for this game.")
    while True:
        inp.begin_turn(1)
        try:
            n = inp.read_positive_integer()
        except ParseError:
            out("Please enter a positive integer.")
            continue
        if n > limit:
            out(f"Please enter at most {limit} stacks.")
            continue
        return n


def _sleeper(delay_ms: int) -> Optional[Callable[[], None]]:
    if delay_ms <= 0:
        return None
    return lambda: time.sleep(delay_ms / 1000.0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Matchstick Nim against a friend or a perfect computer player')
    parser.add_argument('--stacks', type=int, default=None, help='Number of stacks (prompted when omitted)')
    parser.add_argument('--mode', choices=[t.value for t in GameType], default=GameType.HUMAN_VS_AI.value,
                        help='hvh: human vs human, hva: human vs computer, ava: computer vs computer')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the computer player')
    parser.add_argument('--delay-ms', type=int, default=None,
                        help='Computer thinking pause in ms (default: MATCHSTICKS_AI_DELAY_MS or 500)')
    return parser


def main(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input,
         print_fn: Callable[[str], None] = print) -> int:
    args = build_parser().parse_args(argv)
    try:
        limit = max_stacks()
        delay_ms = ai_delay_ms() if args.delay_ms is None else args.delay_ms
    except ValueError as e:
        print_fn(f"error: {e}")
        return 2
    inp = ConsoleInput(input_fn=input_fn)
    notifier = ConsoleNotifier(print_fn)

    try:
        if args.stacks is None:
            n = prompt_number_of_stacks(inp, print_fn, limit)
        else:
            n = args.stacks
            if n < 0 or n > limit:
                print_fn(f"error: --stacks must be between 0 and {limit}")
                return 2

        players = make_players(
            GameType(args.mode),
            input_provider=inp,
            rng=random.Random(args.seed),
            delay=_sleeper(delay_ms),
        )
        game = Game(Board.new(n), players, notifier=notifier)
        game.play()
    except (EOFError, KeyboardInterrupt):
        print_fn('')
        print_fn('Bye.')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
