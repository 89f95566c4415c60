import unittest

from matchsticks_core.cli import main


def _run(argv, lines):
    out = []
    it = iter(lines)

    def _input(_prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    code = main(argv, input_fn=_input, print_fn=out.append)
    return code, out


class TestCli(unittest.TestCase):
    def test_given_two_humans_on_one_stack_when_player_one_takes_it_then_announces_winner(self):
        code, out = _run(["--stacks", "1", "--mode", "hvh"], ["1 1"])
        self.assertEqual(code, 0)
        self.assertIn("1: |", out)
        self.assertEqual(out[-1], "Player 1 won the game.")

    def test_given_no_stack_flag_when_started_then_prompts_until_valid_number(self):
        code, out = _run(["--mode", "hvh"], ["abc", "1", "1 1"])
        self.assertEqual(code, 0)
        self.assertIn("Please enter the number of stacks for this game.", out)
        self.assertIn("Please enter a positive integer.", out)
        self.assertEqual(out[-1], "Player 1 won the game.")

    def test_given_bad_move_when_entered_then_error_shown_and_same_player_asked_again(self):
        code, out = _run(["--stacks", "2", "--mode", "hvh"], ["3 1", "2 3", "1 1"])
        self.assertEqual(code, 0)
        self.assertTrue(any("There are only 2 stacks" in line for line in out))
        self.assertEqual(out[-1], "Player 2 won the game.")

    def test_given_two_numbers_at_stack_prompt_when_started_then_rejected_not_used_as_move(self):
        code, out = _run(["--mode", "hvh"], ["2 5", "2", "2 3", "1 1"])
        self.assertEqual(code, 0)
        self.assertIn("Please enter a positive integer.", out)
        self.assertFalse(any("There are only" in line for line in out))
        self.assertEqual(out[-1], "Player 2 won the game.")

    def test_given_extra_number_on_move_line_when_entered_then_not_carried_to_next_player(self):
        code, out = _run(["--stacks", "2", "--mode", "hvh"], ["2 1 1", "2 3", "1 1"])
        self.assertEqual(code, 0)
        self.assertIn("Please enter two positive integers.", out)
        self.assertFalse(any("can't take more" in line for line in out))
        self.assertEqual(out[-1], "Player 2 won the game.")

    def test_given_computer_vs_computer_when_run_then_first_player_wins(self):
        code, out = _run(["--stacks", "3", "--mode", "ava", "--seed", "4", "--delay-ms", "0"], [])
        self.assertEqual(code, 0)
        self.assertEqual(out[-1], "Player 1 won the game.")

    def test_given_closed_input_when_waiting_for_move_then_exits_cleanly(self):
        code, out = _run(["--stacks", "2", "--mode", "hvh"], [])
        self.assertEqual(code, 1)
        self.assertEqual(out[-1], "Bye.")

    def test_given_too_many_stacks_when_started_then_usage_error(self):
        code, out = _run(["--stacks", "100000", "--mode", "ava"], [])
        self.assertEqual(code, 2)
        self.assertIn("--stacks", out[-1])


if __name__ == "__main__":
    unittest.main(verbosity=2)
