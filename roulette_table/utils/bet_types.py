# roulette_table/utils/bet_types.py
"""
Value types for roulette table bets.

A BetType names a category and the raw integers placed on the layout (the
covered numbers for inside bets, a single selector for outside bets). A Bet
pairs a BetType with a wager. Neither checks legality at construction time so
that a malformed attempt can still be represented and reported.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class BetCategory(Enum):
    """Every placeable bet on a single-zero table."""
    STRAIGHT = "straight"
    SPLIT = "split"
    STREET = "street"
    BASKET = "basket"
    TOPLINE = "topline"
    CORNER = "corner"
    DOUBLE_LINE = "double_line"
    DOZENS = "dozens"
    COLUMNS = "columns"
    EVEN_ODD = "even_odd"
    HIGH_LOW = "high_low"
    RED_BLACK = "red_black"


class Color(Enum):
    RED = 0
    BLACK = 1
    GREEN = None


# Payout multipliers (stake included), keyed by category only
PAYOUT_MULTIPLIERS = {
    BetCategory.STRAIGHT: 36,
    BetCategory.SPLIT: 18,
    BetCategory.STREET: 12,
    BetCategory.BASKET: 12,
    BetCategory.TOPLINE: 9,
    BetCategory.CORNER: 9,
    BetCategory.DOUBLE_LINE: 6,
    BetCategory.DOZENS: 3,
    BetCategory.COLUMNS: 3,
    BetCategory.EVEN_ODD: 2,
    BetCategory.HIGH_LOW: 2,
    BetCategory.RED_BLACK: 2,
}

# How many numbers an inside bet covers
NUMBER_COUNTS = {
    BetCategory.STRAIGHT: 1,
    BetCategory.SPLIT: 2,
    BetCategory.STREET: 3,
    BetCategory.BASKET: 3,
    BetCategory.TOPLINE: 4,
    BetCategory.CORNER: 4,
    BetCategory.DOUBLE_LINE: 6,
}

SELECTOR_CATEGORIES = frozenset({
    BetCategory.DOZENS,
    BetCategory.COLUMNS,
    BetCategory.EVEN_ODD,
    BetCategory.HIGH_LOW,
    BetCategory.RED_BLACK,
})

# Display names for the 0/1 selectors, as shown on the felt
SELECTOR_LABELS = {
    BetCategory.EVEN_ODD: {0: "even", 1: "odd"},
    BetCategory.HIGH_LOW: {0: "1-18", 1: "19-36"},
    BetCategory.RED_BLACK: {0: "red", 1: "black"},
}

_DISPLAY_NAMES = {
    BetCategory.STRAIGHT: "Straight",
    BetCategory.SPLIT: "Split",
    BetCategory.STREET: "Street",
    BetCategory.BASKET: "Basket",
    BetCategory.TOPLINE: "Topline",
    BetCategory.CORNER: "Corner",
    BetCategory.DOUBLE_LINE: "DoubleLine",
    BetCategory.DOZENS: "Dozens",
    BetCategory.COLUMNS: "Columns",
    BetCategory.EVEN_ODD: "EvenOdd",
    BetCategory.HIGH_LOW: "HighLow",
    BetCategory.RED_BLACK: "RedBlack",
}


@dataclass(frozen=True)
class BetType:
    """
    A bet category together with its raw parameters.

    For inside bets (straight up to double line) ``values`` holds the covered
    numbers, expected in ascending order. For outside bets it holds exactly
    one selector.
    """
    category: BetCategory
    values: Tuple[int, ...]

    def __post_init__(self):
        # Lists from callers are frozen so the bet type stays hashable
        object.__setattr__(self, 'values', tuple(self.values))

    @property
    def multiplier(self) -> int:
        return PAYOUT_MULTIPLIERS[self.category]

    @property
    def is_outside(self) -> bool:
        return self.category in SELECTOR_CATEGORIES

    @property
    def numbers(self) -> Tuple[int, ...]:
        """Covered numbers of an inside bet, empty for outside bets."""
        if self.is_outside:
            return ()
        return self.values

    @property
    def selector(self) -> Optional[int]:
        """The single selector of an outside bet, None for inside bets."""
        if self.is_outside and len(self.values) == 1:
            return self.values[0]
        return None

    # --- Factories, one per category ---
    @classmethod
    def straight(cls, number):
        return cls(BetCategory.STRAIGHT, (number,))

    @classmethod
    def split(cls, first, second):
        return cls(BetCategory.SPLIT, (first, second))

    @classmethod
    def street(cls, *numbers):
        return cls(BetCategory.STREET, numbers)

    @classmethod
    def basket(cls, *numbers):
        return cls(BetCategory.BASKET, numbers)

    @classmethod
    def topline(cls, *numbers):
        return cls(BetCategory.TOPLINE, numbers)

    @classmethod
    def corner(cls, *numbers):
        return cls(BetCategory.CORNER, numbers)

    @classmethod
    def double_line(cls, *numbers):
        return cls(BetCategory.DOUBLE_LINE, numbers)

    @classmethod
    def dozens(cls, group):
        return cls(BetCategory.DOZENS, (group,))

    @classmethod
    def columns(cls, column):
        return cls(BetCategory.COLUMNS, (column,))

    @classmethod
    def even_odd(cls, selector):
        return cls(BetCategory.EVEN_ODD, (selector,))

    @classmethod
    def high_low(cls, selector):
        return cls(BetCategory.HIGH_LOW, (selector,))

    @classmethod
    def red_black(cls, selector):
        return cls(BetCategory.RED_BLACK, (selector,))

    def __str__(self):
        name = _DISPLAY_NAMES[self.category]
        labels = SELECTOR_LABELS.get(self.category)
        if labels is not None:
            label = labels.get(self.selector, "INVALID")
            return f"{name}({label})"
        return f"{name}({', '.join(str(v) for v in self.values)})"


@dataclass(frozen=True)
class Bet:
    """A bet type with its wager, in the smallest currency unit."""
    bet_type: BetType
    wager: int

    @property
    def category(self) -> BetCategory:
        return self.bet_type.category

    @property
    def multiplier(self) -> int:
        return self.bet_type.multiplier

    def win_value(self) -> int:
        """Amount returned to the player if this bet wins (stake included)."""
        return self.wager * self.multiplier

    def __str__(self):
        return f"type: {self.bet_type}, wager: {self.wager}"


@dataclass(frozen=True)
class BetResult:
    bet: Bet
    payout: int

    @property
    def won(self) -> bool:
        return self.payout > 0
