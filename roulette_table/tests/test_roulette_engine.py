import unittest
from unittest.mock import MagicMock, patch

from roulette_table.exceptions import (
    BetErrorKind, BetValidationException, GameLogicException
)
from roulette_table.error_codes import ErrorCodes
from roulette_table.utils.bet_types import Bet, BetCategory, BetType, Color
from roulette_table.utils.roulette_engine import RouletteTable, system_draw


def fixed_draw(number):
    return MagicMock(return_value=number)


class TestRouletteTableSpin(unittest.TestCase):

    def test_winning_spin(self):
        draw = fixed_draw(1)
        table = RouletteTable(draw=draw)
        bets = [Bet(BetType.straight(1), 10), Bet(BetType.straight(2), 10)]

        outcome = table.spin(bets)

        draw.assert_called_once_with(0, 36)
        self.assertEqual(outcome.winning_number, 1)
        self.assertEqual(outcome.winning_color, Color.RED)
        self.assertEqual([r.payout for r in outcome.results], [360, 0])
        self.assertEqual([r.bet for r in outcome.results], bets)
        self.assertEqual(outcome.total_payout, 360)
        self.assertEqual(outcome.total_wager, 20)
        self.assertEqual(table.history, (1,))
        self.assertEqual(table.last_number, 1)

    def test_zero_is_green(self):
        table = RouletteTable(draw=fixed_draw(0))
        outcome = table.spin([Bet(BetType.red_black(0), 10), Bet(BetType.split(0, 1), 10)])
        self.assertEqual(outcome.winning_color, Color.GREEN)
        self.assertEqual([r.payout for r in outcome.results], [0, 180])

    def test_history_appends_in_order(self):
        numbers = iter([5, 36, 0])
        table = RouletteTable(draw=lambda low, high: next(numbers))
        bets = [Bet(BetType.dozens(1), 1)]
        for _ in range(3):
            table.spin(bets)
        self.assertEqual(table.history, (5, 36, 0))

    def test_history_is_read_only_view(self):
        table = RouletteTable(draw=fixed_draw(7))
        table.spin([Bet(BetType.straight(7), 1)])
        history = table.history
        self.assertIsInstance(history, tuple)
        table.spin([Bet(BetType.straight(7), 1)])
        self.assertEqual(history, (7,))
        self.assertEqual(table.history, (7, 7))

    def test_empty_round_still_spins(self):
        table = RouletteTable(draw=fixed_draw(3))
        outcome = table.spin([])
        self.assertEqual(outcome.results, ())
        self.assertEqual(table.history, (3,))

    def test_draw_outside_wheel_is_a_game_logic_error(self):
        table = RouletteTable(draw=fixed_draw(37))
        with self.assertRaises(GameLogicException) as ctx:
            table.spin([Bet(BetType.straight(1), 10)])
        self.assertEqual(ctx.exception.error_code, ErrorCodes.GAME_LOGIC_ERROR)
        self.assertEqual(table.history, ())

    def test_boolean_draw_is_a_game_logic_error(self):
        table = RouletteTable(draw=fixed_draw(True))
        with self.assertRaises(GameLogicException):
            table.spin([Bet(BetType.straight(1), 10)])
        self.assertEqual(table.history, ())

    def test_spin_logs_game_event(self):
        table = RouletteTable(draw=fixed_draw(12), table_id='table-a')
        with self.assertLogs('roulette_table', level='INFO') as logs:
            table.spin([Bet(BetType.dozens(1), 10)])
        self.assertTrue(any('GAME_EVENT' in line and '"winning_number": 12' in line for line in logs.output))
        self.assertTrue(any('"total_payout": 30' in line for line in logs.output))

    def test_spin_records_carry_table_id(self):
        table = RouletteTable(draw=fixed_draw(12), table_id='table-a')
        with self.assertLogs('roulette_table', level='DEBUG') as logs:
            table.spin([Bet(BetType.dozens(1), 10)])
        self.assertTrue(logs.records)
        self.assertEqual({record.table_id for record in logs.records}, {'table-a'})

    def test_rejected_round_record_carries_table_id(self):
        table = RouletteTable(table_id='table-c')
        with self.assertLogs('roulette_table', level='WARNING') as logs:
            with self.assertRaises(BetValidationException):
                table.spin([Bet(BetType.split(33, 36), 10)])
        self.assertEqual([record.table_id for record in logs.records], ['table-c'])


class TestRouletteTableValidation(unittest.TestCase):

    def test_batch_with_one_illegal_bet(self):
        draw = fixed_draw(1)
        table = RouletteTable(draw=draw)
        table.spin([Bet(BetType.straight(1), 10)])
        history_before = table.history

        good = Bet(BetType.straight(1), 10)
        bad = Bet(BetType.corner(3, 4, 6, 7), 10)
        with self.assertRaises(BetValidationException) as ctx:
            table.spin([good, bad])

        errors = ctx.exception.errors
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].kind, BetErrorKind.INVALID_GEOMETRY)
        self.assertIs(errors[0].bet, bad)
        self.assertEqual(draw.call_count, 1)
        self.assertEqual(table.history, history_before)

    def test_all_errors_are_collected_in_bet_order(self):
        table = RouletteTable(min_bet=5, max_bet=100, draw=fixed_draw(1))
        bets = [
            Bet(BetType.street(2, 3, 4), 10),
            Bet(BetType.straight(17), 1),
            Bet(BetType.dozens(2), 10),
            Bet(BetType.red_black(1), 500),
            Bet(BetType.even_odd(2), 1),
        ]
        with self.assertRaises(BetValidationException) as ctx:
            table.spin(bets)

        errors = ctx.exception.errors
        self.assertEqual(
            [e.kind for e in errors],
            [BetErrorKind.INVALID_GEOMETRY, BetErrorKind.BELOW_MINIMUM,
             BetErrorKind.ABOVE_MAXIMUM, BetErrorKind.INVALID_GEOMETRY]
        )
        self.assertEqual([e.bet for e in errors], [bets[0], bets[1], bets[3], bets[4]])
        self.assertEqual(errors[1].limit, 5)
        self.assertEqual(errors[2].limit, 100)
        self.assertIsNone(errors[0].limit)
        self.assertEqual(table.history, ())
        self.assertEqual(len(ctx.exception.details['errors']), 4)

    def test_per_category_minimum(self):
        table = RouletteTable(min_bet=2, min_bet_multipliers={BetCategory.STRAIGHT: 5}, draw=fixed_draw(1))
        self.assertEqual(table.min_bet_for(BetCategory.STRAIGHT), 10)
        self.assertEqual(table.min_bet_for(BetCategory.RED_BLACK), 2)

        errors = table.validate_bets([Bet(BetType.straight(1), 9), Bet(BetType.red_black(0), 2)])
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].kind, BetErrorKind.BELOW_MINIMUM)
        self.assertEqual(errors[0].limit, 10)

    def test_default_minimum_multipliers_are_uniform(self):
        table = RouletteTable()
        for category in BetCategory:
            self.assertEqual(table.min_bet_for(category), 1)

    def test_non_positive_or_non_integer_wagers(self):
        table = RouletteTable(draw=fixed_draw(1))
        errors = table.validate_bets([
            Bet(BetType.straight(1), 0),
            Bet(BetType.straight(1), -5),
            Bet(BetType.straight(1), 2.5),
        ])
        self.assertEqual([e.kind for e in errors], [BetErrorKind.BELOW_MINIMUM] * 3)

    def test_illegal_geometry_is_not_also_checked_for_wager(self):
        table = RouletteTable(min_bet=10)
        errors = table.validate_bets([Bet(BetType.basket(0, 1, 3), 1)])
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].kind, BetErrorKind.INVALID_GEOMETRY)

    def test_rejected_round_is_logged(self):
        table = RouletteTable(table_id='table-b')
        with self.assertLogs('roulette_table', level='WARNING') as logs:
            with self.assertRaises(BetValidationException):
                table.spin([Bet(BetType.topline(1, 2, 3, 4), 10)])
        self.assertTrue(any('bets_rejected' in line for line in logs.output))

    def test_invalid_limits(self):
        with self.assertRaises(ValueError):
            RouletteTable(min_bet=0)
        with self.assertRaises(ValueError):
            RouletteTable(min_bet=10, max_bet=5)


class TestIndependentTables(unittest.TestCase):

    def test_tables_do_not_share_history(self):
        first = RouletteTable(draw=fixed_draw(4))
        second = RouletteTable(draw=fixed_draw(9))
        first.spin([Bet(BetType.straight(4), 1)])
        self.assertEqual(first.history, (4,))
        self.assertEqual(second.history, ())
        self.assertNotEqual(first.table_id, second.table_id)


class TestSystemDraw(unittest.TestCase):

    def test_draws_stay_on_the_wheel(self):
        draws = {system_draw() for _ in range(2000)}
        self.assertTrue(draws.issubset(set(range(37))))
        # 2000 draws over 37 pockets reach both ends with overwhelming probability
        self.assertIn(0, draws)
        self.assertIn(36, draws)

    @patch('roulette_table.utils.roulette_engine.secrets.SystemRandom')
    def test_inclusive_range_requested(self, system_random):
        system_random.return_value.randint.return_value = 36
        self.assertEqual(system_draw(), 36)
        system_random.return_value.randint.assert_called_once_with(0, 36)

    def test_default_table_uses_system_draw(self):
        table = RouletteTable()
        outcome = table.spin([Bet(BetType.red_black(0), 1)])
        self.assertIn(outcome.winning_number, range(37))
        self.assertEqual(len(table.history), 1)


if __name__ == '__main__':
    unittest.main()
