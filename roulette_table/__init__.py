"""Single-zero roulette table: bet geometry, payouts and rounds."""
from roulette_table.utils.bet_types import (
    Bet, BetCategory, BetResult, BetType, Color, PAYOUT_MULTIPLIERS
)
from roulette_table.utils.bet_validator import is_legal
from roulette_table.utils.roulette_helper import evaluate, get_number_color
from roulette_table.utils.roulette_engine import RouletteTable, SpinOutcome
from roulette_table.exceptions import BetErrorKind, BetPlacementError, BetValidationException

__all__ = [
    "Bet",
    "BetCategory",
    "BetResult",
    "BetType",
    "Color",
    "PAYOUT_MULTIPLIERS",
    "is_legal",
    "evaluate",
    "get_number_color",
    "RouletteTable",
    "SpinOutcome",
    "BetErrorKind",
    "BetPlacementError",
    "BetValidationException",
]
