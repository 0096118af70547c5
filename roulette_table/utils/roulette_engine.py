# roulette_table/utils/roulette_engine.py
"""
One roulette table: validates a round of bets, spins the wheel and pays out.

Each RouletteTable owns its own history and number source. Tables share no
mutable state, so independent tables can run side by side; a single table is
not meant to be spun from several threads at once.
"""
import logging
import secrets
import time
import uuid
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from roulette_table.exceptions import (
    BetPlacementError, BetValidationException, GameLogicException
)
from .bet_types import BetCategory, BetResult, Color
from .bet_validator import is_legal
from . import roulette_helper
from .game_logger import GameEventLogger

logger = logging.getLogger(__name__)

LOWEST_NUMBER = 0
HIGHEST_NUMBER = 36

# Per-category factor applied to the table minimum. Uniform today.
DEFAULT_MIN_BET_MULTIPLIERS = {category: 1 for category in BetCategory}


def system_draw(low: int = LOWEST_NUMBER, high: int = HIGHEST_NUMBER) -> int:
    """Uniform integer in [low, high], both ends included."""
    return secrets.SystemRandom().randint(low, high)


@dataclass(frozen=True)
class SpinOutcome:
    winning_number: int
    winning_color: Color
    results: Tuple[BetResult, ...]

    @property
    def total_payout(self) -> int:
        return roulette_helper.calculate_winnings(self.results)

    @property
    def total_wager(self) -> int:
        return roulette_helper.calculate_total_wager(result.bet for result in self.results)


class RouletteTable:
    """A single-zero roulette table with a minimum (and optional maximum) wager."""

    def __init__(self, min_bet: int = 1, max_bet: Optional[int] = None,
                 min_bet_multipliers: Optional[Dict[BetCategory, int]] = None,
                 draw: Optional[Callable[[int, int], int]] = None,
                 table_id: Optional[str] = None):
        if min_bet < 1:
            raise ValueError("min_bet must be a positive integer.")
        if max_bet is not None and max_bet < min_bet:
            raise ValueError("max_bet cannot be lower than min_bet.")

        self.min_bet = min_bet
        self.max_bet = max_bet
        self.min_bet_multipliers = dict(DEFAULT_MIN_BET_MULTIPLIERS)
        if min_bet_multipliers:
            self.min_bet_multipliers.update(min_bet_multipliers)
        self._draw = draw or system_draw
        self.table_id = table_id or f"roulette-{uuid.uuid4().hex[:8]}"
        self._history: List[int] = []

    @property
    def history(self) -> Tuple[int, ...]:
        """Winning numbers of every completed spin, oldest first."""
        return tuple(self._history)

    @property
    def last_number(self) -> Optional[int]:
        return self._history[-1] if self._history else None

    def min_bet_for(self, category: BetCategory) -> int:
        """Effective minimum wager for a category."""
        return self.min_bet * self.min_bet_multipliers[category]

    def validate_bets(self, bets) -> List[BetPlacementError]:
        """
        Checks every bet and returns all problems found, in bet order.

        A bet with illegal geometry is reported once as INVALID_GEOMETRY and
        its wager is not examined further.
        """
        errors = []
        for bet in bets:
            if not is_legal(bet.bet_type):
                errors.append(BetPlacementError.invalid_geometry(bet))
                continue

            minimum = self.min_bet_for(bet.category)
            wager = bet.wager
            if not isinstance(wager, int) or isinstance(wager, bool) or wager < minimum:
                errors.append(BetPlacementError.below_minimum(bet, minimum))
            elif self.max_bet is not None and wager > self.max_bet:
                errors.append(BetPlacementError.above_maximum(bet, self.max_bet))
        return errors

    def spin(self, bets) -> SpinOutcome:
        """
        Plays one round.

        Raises BetValidationException with every rejected bet if any bet is
        invalid; in that case nothing is drawn and the history is untouched.
        """
        bets = list(bets)
        errors = self.validate_bets(bets)
        if errors:
            GameEventLogger.log_rejected_bets(self.table_id, errors, len(bets))
            raise BetValidationException(errors)

        started = time.perf_counter()
        winning_number = self._draw(LOWEST_NUMBER, HIGHEST_NUMBER)
        if (not isinstance(winning_number, int) or isinstance(winning_number, bool)
                or not LOWEST_NUMBER <= winning_number <= HIGHEST_NUMBER):
            raise GameLogicException(
                status_message=f"Number source returned {winning_number!r}, outside {LOWEST_NUMBER}-{HIGHEST_NUMBER}.",
                details={'table_id': self.table_id}
            )
        self._history.append(winning_number)

        winning_color = roulette_helper.get_number_color(winning_number)
        results = roulette_helper.evaluate(winning_number, winning_color, bets)
        outcome = SpinOutcome(winning_number, winning_color, tuple(results))

        logger.debug(f"Table {self.table_id} spin took {(time.perf_counter() - started) * 1e9:.0f}ns",
                     extra={'table_id': self.table_id})
        GameEventLogger.log_spin_event(
            self.table_id,
            winning_number,
            winning_color.name,
            outcome.total_wager,
            outcome.total_payout,
            len(bets),
        )
        return outcome
