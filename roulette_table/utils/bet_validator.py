# roulette_table/utils/bet_validator.py
"""
Table geometry checks for roulette bets.

The layout is a 3 x 12 grid of the numbers 1-36, read row by row:
1-2-3 is the first street and 34-35-36 the last, so numbers in the same
column differ by a multiple of 3 and n % 3 gives the column (1, 2, 0 for the
right-hand column). Zero sits above the first street, touching 1, 2 and 3.

Every predicate below is plain arithmetic on the raw numbers; no layout table
is consulted. Numbers for multi-number bets are expected in ascending order.
"""
from .bet_types import BetCategory, NUMBER_COUNTS, SELECTOR_CATEGORIES

MAX_NUMBER = 36


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _legal_straight(v):
    return 0 <= v[0] <= MAX_NUMBER


def _legal_split(v):
    low, high = v
    if not (0 <= low < high <= MAX_NUMBER):
        return False
    # Zero splits: 0-1, 0-2, 0-3
    if low == 0:
        return high in (1, 2, 3)
    # Side by side in one street; the right-hand column has no neighbour
    # to its right. Covers the bottom pairs 34-35 and 35-36.
    if high - low == 1:
        return low % 3 != 0
    # Stacked in one column. 33-36 is not offered.
    if high - low == 3:
        return low <= 32
    return False


def _legal_street(v):
    first = v[0]
    return (
        1 <= first <= 34 and
        (first - 1) % 3 == 0 and
        v[1] - v[0] == 1 and
        v[2] - v[1] == 1
    )


def _legal_basket(v):
    return v in ((0, 1, 2), (0, 2, 3))


def _legal_topline(v):
    return v == (0, 1, 2, 3)


def _legal_corner(v):
    first = v[0]
    return (
        first >= 1 and
        first % 3 != 0 and
        v[3] <= MAX_NUMBER and
        v[1] - v[0] == 1 and
        v[2] - v[0] == 3 and
        v[3] - v[2] == 1
    )


def _legal_double_line(v):
    first, second = v[:3], v[3:]
    return (
        _legal_street(first) and
        _legal_street(second) and
        second[0] - first[0] == 3
    )


def _legal_group(v):
    return v[0] in (1, 2, 3)


def _legal_binary(v):
    return v[0] in (0, 1)


_PREDICATES = {
    BetCategory.STRAIGHT: _legal_straight,
    BetCategory.SPLIT: _legal_split,
    BetCategory.STREET: _legal_street,
    BetCategory.BASKET: _legal_basket,
    BetCategory.TOPLINE: _legal_topline,
    BetCategory.CORNER: _legal_corner,
    BetCategory.DOUBLE_LINE: _legal_double_line,
    BetCategory.DOZENS: _legal_group,
    BetCategory.COLUMNS: _legal_group,
    BetCategory.EVEN_ODD: _legal_binary,
    BetCategory.HIGH_LOW: _legal_binary,
    BetCategory.RED_BLACK: _legal_binary,
}


def expected_value_count(category):
    """Number of raw values a bet type of this category must carry."""
    if category in SELECTOR_CATEGORIES:
        return 1
    return NUMBER_COUNTS[category]


def is_legal(bet_type):
    """
    Returns True if ``bet_type`` is a placement that exists on the table.

    Never raises: wrong value counts, non-integer values and unknown
    categories are simply illegal. Wagers are not looked at here.
    """
    predicate = _PREDICATES.get(bet_type.category)
    if predicate is None:
        return False

    values = bet_type.values
    if len(values) != expected_value_count(bet_type.category):
        return False
    if not all(_is_int(v) for v in values):
        return False

    return predicate(values)
