import unittest

from game import (
    InvalidCoordinate,
    InvalidSize,
    TicTacToe,
    WinCondition,
)


def play_all(game, moves):
    """Places (symbol, row, column) triples in order and returns the boolean results."""
    return [game.place_marker(sym, r, c) for sym, r, c in moves]


class TestConnectKBasics(unittest.TestCase):
    def test_given_board_size_below_three_when_constructing_then_invalid_size(self):
        for size in (-1, 0, 1, 2):
            with self.assertRaises(InvalidSize):
                TicTacToe(size)
        game = TicTacToe(3)
        self.assertEqual(game.board_size, 3)
        self.assertEqual(game.win_length, 3)
        self.assertEqual(game.get_win_conditions(), [])

    def test_given_non_positive_win_length_when_constructing_then_value_error(self):
        with self.assertRaises(ValueError):
            TicTacToe(3, win_length=0)

    def test_given_markers_when_querying_symbols_then_placed_symbols_returned(self):
        game = TicTacToe(3)
        self.assertTrue(game.place_marker('x', 0, 0))
        self.assertTrue(game.place_marker('o', 1, 2))

        self.assertEqual(game.get_symbol((0, 0)), 'x')
        self.assertEqual(game.get_symbol((1, 2)), 'o')
        self.assertIsNone(game.get_symbol((2, 2)))
        self.assertIsNone(game.get_symbol((0, 1)))

    def test_given_out_of_range_point_when_querying_symbol_then_absent_not_error(self):
        game = TicTacToe(3)
        self.assertIsNone(game.get_symbol((-1, 0)))
        self.assertIsNone(game.get_symbol((3, 3)))
        self.assertIsNone(game.get_symbol((0, 100)))

    def test_given_occupied_cell_when_placing_again_then_false_and_unchanged(self):
        game = TicTacToe(3)
        self.assertTrue(game.place_marker('x', 0, 0))
        self.assertTrue(game.place_marker('o', 1, 1))

        self.assertFalse(game.place_marker('o', 0, 0))
        self.assertFalse(game.place_marker('x', 1, 1))
        self.assertFalse(game.place_marker('x', 1, 1))

        self.assertEqual(game.get_symbol((0, 0)), 'x')
        self.assertEqual(game.get_symbol((1, 1)), 'o')
        self.assertEqual(game.marker_count, 2)
        self.assertEqual(game.get_win_conditions(), [])

    def test_given_invalid_point_when_placing_then_invalid_coordinate(self):
        game = TicTacToe(3)
        self.assertTrue(game.place_marker('x', 0, 0))
        for r, c in [(-1, 0), (0, -1), (3, 2), (2, 3), (3, 3)]:
            with self.assertRaises(InvalidCoordinate):
                game.place_marker('x', r, c)
        self.assertEqual(game.marker_count, 1)

    def test_given_invalid_coordinate_when_caught_then_is_value_error_with_details(self):
        game = TicTacToe(4)
        with self.assertRaises(ValueError) as ctx:
            game.place_marker('o', 4, 0)
        err = ctx.exception
        self.assertIsInstance(err, InvalidCoordinate)
        self.assertEqual((err.row, err.column, err.board_size), (4, 0, 4))

    def test_given_non_integer_coordinates_when_placing_then_invalid_coordinate(self):
        game = TicTacToe(3)
        for r, c in [(1.5, 0), (0, 2.0), ('1', 0), (None, 0), (True, 0), (0, False)]:
            with self.assertRaises(InvalidCoordinate):
                game.place_marker('x', r, c)
        self.assertEqual(game.marker_count, 0)
        self.assertIsNone(game.get_symbol((1.5, 0)))
        self.assertFalse(game.is_board_filled())
        self.assertTrue(game.place_marker('x', 1, 0))

    def test_given_unknown_symbol_when_placing_then_value_error_and_cell_free(self):
        game = TicTacToe(3)
        for sym in (None, '', 'X', 'z', 1):
            with self.assertRaises(ValueError):
                game.place_marker(sym, 0, 0)
        self.assertEqual(game.marker_count, 0)
        self.assertTrue(game.place_marker('o', 0, 0))
        self.assertEqual(game.get_symbol((0, 0)), 'o')


class TestConnectKWinConditions(unittest.TestCase):
    def test_given_row_completed_by_o_when_game_played_then_single_win_and_frozen(self):
        game = TicTacToe(3)
        play_all(game, [
            ('x', 0, 0),
            ('o', 1, 1),
            ('x', 2, 0),
            ('o', 1, 0),
            ('x', 0, 1),
            ('o', 1, 2),
        ])
        expected = WinCondition(
            symbol='o',
            initiated_point=(1, 2),
            first_segment=((1, 1), (1, 0)),
            second_segment=(),
        )
        self.assertEqual(game.get_win_conditions(), [expected])
        self.assertTrue(game.has_winner)
        self.assertEqual(game.winner, 'o')
        self.assertFalse(game.place_marker('x', 2, 1))

    def test_given_win_when_placing_anywhere_then_false_and_board_unchanged(self):
        game = TicTacToe(4)
        play_all(game, [('x', 0, 0), ('o', 3, 3), ('x', 0, 1), ('o', 3, 2), ('x', 0, 2)])
        self.assertEqual(len(game.get_win_conditions()), 1)
        before = {(r, c): game.get_symbol((r, c)) for r in range(4) for c in range(4)}
        wins_before = game.get_win_conditions()

        for r in range(4):
            for c in range(4):
                self.assertFalse(game.place_marker('o', r, c))
                self.assertFalse(game.place_marker('x', r, c))

        after = {(r, c): game.get_symbol((r, c)) for r in range(4) for c in range(4)}
        self.assertEqual(before, after)
        self.assertEqual(game.get_win_conditions(), wins_before)
        self.assertEqual(game.marker_count, 5)

    def test_given_move_finishing_row_and_diagonal_then_two_conditions_in_axis_order(self):
        game = TicTacToe(3)
        results = play_all(game, [
            ('x', 0, 0),
            ('o', 1, 0),
            ('x', 0, 1),
            ('o', 2, 1),
            ('x', 1, 1),
            ('o', 1, 2),
            ('x', 2, 0),
            ('o', 2, 2),
        ])
        self.assertTrue(all(results))
        self.assertEqual(game.get_win_conditions(), [])

        self.assertTrue(game.place_marker('x', 0, 2))
        self.assertEqual(game.get_win_conditions(), [
            WinCondition('x', (0, 2), ((0, 1), (0, 0)), ()),
            WinCondition('x', (0, 2), ((1, 1), (2, 0)), ()),
        ])

    def test_given_move_finishing_column_and_row_then_vertical_reported_first(self):
        game = TicTacToe(5)
        play_all(game, [
            ('x', 0, 2), ('o', 4, 4),
            ('x', 1, 2), ('o', 4, 3),
            ('x', 2, 0), ('o', 3, 4),
            ('x', 2, 1), ('o', 4, 0),
        ])
        self.assertEqual(game.get_win_conditions(), [])
        self.assertTrue(game.place_marker('x', 2, 2))
        wins = game.get_win_conditions()
        self.assertEqual(len(wins), 2)
        self.assertEqual(wins[0].first_segment, ((1, 2), (0, 2)))
        self.assertEqual(wins[0].second_segment, ())
        self.assertEqual(wins[1].first_segment, ((2, 1), (2, 0)))
        self.assertEqual(wins[1].second_segment, ())

    def test_given_gap_filled_in_middle_then_both_segments_populated(self):
        game = TicTacToe(3)
        play_all(game, [('x', 2, 0), ('o', 0, 0), ('x', 2, 2), ('o', 0, 2)])
        self.assertTrue(game.place_marker('x', 2, 1))
        self.assertEqual(game.get_win_conditions(), [
            WinCondition('x', (2, 1), ((2, 0),), ((2, 2),)),
        ])

    def test_given_longer_win_length_when_three_in_row_then_no_win(self):
        game = TicTacToe(6, win_length=4)
        play_all(game, [('x', 0, 0), ('o', 5, 5), ('x', 1, 1), ('o', 5, 4), ('x', 2, 2), ('o', 5, 0)])
        self.assertEqual(game.get_win_conditions(), [])
        self.assertTrue(game.place_marker('x', 3, 3))
        wins = game.get_win_conditions()
        self.assertEqual(len(wins), 1)
        self.assertEqual(wins[0].first_segment, ((2, 2), (1, 1), (0, 0)))
        self.assertEqual(wins[0].length(), 4)

    def test_given_filled_board_without_line_then_no_win_and_filled(self):
        game = TicTacToe(3)
        self.assertFalse(game.is_board_filled())
        play_all(game, [
            ('x', 0, 0),
            ('o', 2, 2),
            ('x', 1, 1),
            ('o', 2, 0),
            ('x', 2, 1),
            ('o', 0, 1),
            ('x', 1, 0),
            ('o', 1, 2),
        ])
        self.assertFalse(game.is_board_filled())

        self.assertTrue(game.place_marker('x', 0, 2))
        self.assertTrue(game.is_board_filled())
        self.assertEqual(game.get_win_conditions(), [])

    def test_given_win_conditions_when_mutating_returned_list_then_engine_unaffected(self):
        game = TicTacToe(3)
        play_all(game, [('x', 0, 0), ('o', 1, 0), ('x', 0, 1), ('o', 1, 1), ('x', 0, 2)])
        wins = game.get_win_conditions()
        wins.clear()
        self.assertEqual(len(game.get_win_conditions()), 1)


class TestConnectKLargeBoards(unittest.TestCase):
    def test_given_million_cell_side_when_placing_then_sparse_and_fast(self):
        game = TicTacToe(1_000_000)

        self.assertTrue(game.place_marker('x', 0, 0))
        self.assertTrue(game.place_marker('o', 0, 1))
        self.assertTrue(game.place_marker('x', 500_000, 500_000))
        self.assertFalse(game.place_marker('o', 500_000, 500_000))

        self.assertEqual(game.get_symbol((500_000, 500_000)), 'x')
        self.assertEqual(game.marker_count, 3)
        self.assertFalse(game.is_board_filled())

    def test_given_long_run_on_huge_board_when_scanning_then_no_recursion_limit(self):
        game = TicTacToe(1_000_000, win_length=1200)
        # Alternate so o never builds a line of its own.
        for c in range(1199):
            self.assertTrue(game.place_marker('x', 10, c))
            self.assertTrue(game.place_marker('o', 20 + (c % 2), c * 3))
        self.assertEqual(game.get_win_conditions(), [])
        self.assertTrue(game.place_marker('x', 10, 1199))
        wins = game.get_win_conditions()
        self.assertEqual(len(wins), 1)
        self.assertEqual(len(wins[0].first_segment), 1199)


if __name__ == '__main__':
    unittest.main(verbosity=2)
