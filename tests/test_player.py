import random
import unittest

from game import (
    Board,
    TurnInfo,
    ParseError,
    QueuedInput,
    ConsoleInput,
    HumanPlayer,
    AutomatedPlayer,
    GameType,
    make_players,
    nim_sum,
)


class TestHumanPlayer(unittest.TestCase):
    def test_given_one_based_stack_when_turn_requested_then_converted_to_zero_based(self):
        player = HumanPlayer(input=QueuedInput([3, 2]))
        self.assertEqual(player.do_turn(Board.new(3)), TurnInfo(2, 2))

    def test_given_unparsable_input_when_turn_requested_then_parse_error_returned(self):
        player = HumanPlayer(input=QueuedInput(["two", "1"]))
        result = player.do_turn(Board.new(3))
        self.assertIsInstance(result, ParseError)
        self.assertEqual(result.message, "Please enter two positive integers.")

    def test_given_out_of_range_values_when_turn_requested_then_returned_unvalidated(self):
        player = HumanPlayer(input=QueuedInput(["9", "40"]))
        self.assertEqual(player.do_turn(Board.new(1)), TurnInfo(8, 40))

    def test_given_negative_number_when_reading_then_parse_error(self):
        with self.assertRaises(ParseError):
            QueuedInput([-1]).read_positive_integer()
        with self.assertRaises(ParseError):
            QueuedInput(["-4"]).read_positive_integer()

    def test_given_exhausted_queue_when_reading_then_parse_error(self):
        inp = QueuedInput([1])
        self.assertEqual(inp.read_positive_integer(), 1)
        with self.assertRaises(ParseError):
            inp.read_positive_integer()


class TestConsoleInput(unittest.TestCase):
    def _feed(self, lines):
        it = iter(lines)
        return ConsoleInput(input_fn=lambda _prompt: next(it))

    def test_given_both_numbers_on_one_line_when_reading_twice_then_both_returned(self):
        inp = self._feed(["2 3"])
        self.assertEqual(inp.read_positive_integer(), 2)
        self.assertEqual(inp.read_positive_integer(), 3)

    def test_given_numbers_on_separate_lines_when_reading_then_each_line_used(self):
        inp = self._feed(["2", " 5 "])
        self.assertEqual(inp.read_positive_integer(), 2)
        self.assertEqual(inp.read_positive_integer(), 5)

    def test_given_garbage_then_valid_line_when_reading_then_error_then_value(self):
        inp = self._feed(["x 3", "4"])
        with self.assertRaises(ParseError):
            inp.read_positive_integer()
        # the rest of the bad line is discarded
        self.assertEqual(inp.read_positive_integer(), 4)

    def test_given_leftover_token_when_next_turn_begins_then_it_is_dropped(self):
        inp = self._feed(["2 3", "4 1"])
        inp.begin_turn(2)
        self.assertEqual(inp.read_positive_integer(), 2)
        inp.begin_turn(2)
        self.assertEqual(inp.read_positive_integer(), 4)

    def test_given_more_numbers_than_requested_when_reading_then_parse_error(self):
        inp = self._feed(["2 5", "3"])
        inp.begin_turn(1)
        with self.assertRaises(ParseError):
            inp.read_positive_integer()
        inp.begin_turn(1)
        self.assertEqual(inp.read_positive_integer(), 3)

    def test_given_three_numbers_on_a_move_line_when_human_moves_then_rejected_and_next_turn_clean(self):
        player = HumanPlayer(input=self._feed(["2 1 1", "1 1"]))
        self.assertIsInstance(player.do_turn(Board.new(2)), ParseError)
        self.assertEqual(player.do_turn(Board.new(2)), TurnInfo(0, 1))

    def test_given_move_split_over_two_lines_when_human_moves_then_both_lines_used(self):
        player = HumanPlayer(input=self._feed(["2", "3"]))
        self.assertEqual(player.do_turn(Board.new(2)), TurnInfo(1, 3))

    def test_given_closed_stdin_when_reading_then_eof_propagates(self):
        def _eof(_prompt):
            raise EOFError
        with self.assertRaises(EOFError):
            ConsoleInput(input_fn=_eof).read_positive_integer()


class TestAutomatedPlayer(unittest.TestCase):
    def test_given_zero_sum_board_when_turn_requested_then_board_untouched_and_move_legal(self):
        board = Board.new(4)
        player = AutomatedPlayer(rng=random.Random(5))
        move = player.do_turn(board)
        self.assertEqual(board.stacks, (1, 3, 5, 7))
        # 1^3^5^7 == 0: any legal move is acceptable here
        self.assertEqual(nim_sum(board), 0)
        self.assertTrue(0 < move.count <= board.number_of_matches_in_stack(move.stack))

    def test_given_delay_hook_when_turn_requested_then_called_once(self):
        calls = []
        player = AutomatedPlayer(rng=random.Random(0), delay=lambda: calls.append(1))
        player.do_turn(Board.new(3))
        self.assertEqual(calls, [1])


class TestMakePlayers(unittest.TestCase):
    def test_given_game_types_when_building_then_expected_variants(self):
        inp = QueuedInput()
        hh = make_players(GameType.HUMAN_VS_HUMAN, inp)
        self.assertTrue(all(isinstance(p, HumanPlayer) for p in hh))
        ha = make_players(GameType.HUMAN_VS_AI, inp)
        self.assertIsInstance(ha[0], HumanPlayer)
        self.assertIsInstance(ha[1], AutomatedPlayer)
        aa = make_players(GameType.AI_VS_AI)
        self.assertTrue(all(isinstance(p, AutomatedPlayer) for p in aa))

    def test_given_human_seat_without_input_when_building_then_value_error(self):
        with self.assertRaises(ValueError):
            make_players(GameType.HUMAN_VS_AI)


if __name__ == "__main__":
    unittest.main(verbosity=2)
