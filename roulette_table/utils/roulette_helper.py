# roulette_table/utils/roulette_helper.py
"""Wheel constants and payout evaluation for a single-zero wheel."""
from .bet_types import BetCategory, BetResult, Color

# European Roulette: numbers 0-36
ROULETTE_NUMBERS = list(range(37)) # 0 to 36

# Colors on the felt; 0 is green and has no color for betting purposes
RED_NUMBERS = {1, 3, 5, 7, 9, 12, 14, 16, 18, 19, 21, 23, 25, 27, 30, 32, 34, 36}
BLACK_NUMBERS = {2, 4, 6, 8, 10, 11, 13, 15, 17, 20, 22, 24, 26, 28, 29, 31, 33, 35}
GREEN_NUMBER = {0}


def get_number_color(number: int) -> Color:
    """Returns the color of a winning number (GREEN for zero)."""
    if number not in ROULETTE_NUMBERS:
        raise ValueError(f"Invalid roulette number: {number}")
    if number in RED_NUMBERS:
        return Color.RED
    if number in BLACK_NUMBERS:
        return Color.BLACK
    return Color.GREEN


# --- Win predicates, one per category ---
# Each takes the bet type's raw values, the winning number and its color.

def _covers_number(values, winning_number, winning_color):
    return winning_number in values


def _wins_dozen(values, winning_number, winning_color):
    # Dozen 1: 1-12, dozen 2: 13-24, dozen 3: 25-36
    start = (values[0] - 1) * 12 + 1
    return start <= winning_number <= start + 11


def _wins_column(values, winning_number, winning_color):
    # Column c holds c, c+3, c+6, ... up to 36. 0 is not in any column.
    column = values[0]
    return (
        1 <= winning_number <= 36 and
        winning_number >= column and
        (winning_number - column) % 3 == 0
    )


def _wins_even_odd(values, winning_number, winning_color):
    # 0 is neither even nor odd for payout purposes
    return winning_number != 0 and winning_number % 2 == values[0]


def _wins_high_low(values, winning_number, winning_color):
    selector = values[0]
    return (
        (selector == 0 and 1 <= winning_number <= 18) or
        (selector == 1 and 19 <= winning_number <= 36)
    )


def _wins_red_black(values, winning_number, winning_color):
    # GREEN carries no selector value, so zero never matches
    return winning_color is not Color.GREEN and winning_color.value == values[0]


WIN_CONDITIONS = {
    BetCategory.STRAIGHT: _covers_number,
    BetCategory.SPLIT: _covers_number,
    BetCategory.STREET: _covers_number,
    BetCategory.BASKET: _covers_number,
    BetCategory.TOPLINE: _covers_number,
    BetCategory.CORNER: _covers_number,
    BetCategory.DOUBLE_LINE: _covers_number,
    BetCategory.DOZENS: _wins_dozen,
    BetCategory.COLUMNS: _wins_column,
    BetCategory.EVEN_ODD: _wins_even_odd,
    BetCategory.HIGH_LOW: _wins_high_low,
    BetCategory.RED_BLACK: _wins_red_black,
}


def is_winning_bet(bet, winning_number: int, winning_color: Color) -> bool:
    """True if ``bet`` wins on ``winning_number``."""
    condition = WIN_CONDITIONS[bet.category]
    return condition(bet.bet_type.values, winning_number, winning_color)


def evaluate(winning_number: int, winning_color: Color, bets):
    """
    Evaluates every bet against the winning number.

    Returns one BetResult per bet, in the same order. A winning bet pays
    its wager times the category multiplier; a losing bet pays 0.
    Assumes the bets have already passed geometry validation.
    """
    results = []
    for bet in bets:
        if is_winning_bet(bet, winning_number, winning_color):
            payout = bet.win_value()
        else:
            payout = 0
        results.append(BetResult(bet=bet, payout=payout))
    return results


def calculate_winnings(results) -> int:
    """Total amount paid out across a list of BetResults."""
    return sum(result.payout for result in results)


def calculate_total_wager(bets) -> int:
    """Total amount staked across a list of bets."""
    return sum(bet.wager for bet in bets)
