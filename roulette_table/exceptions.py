from dataclasses import dataclass
from enum import Enum
from typing import Optional

from roulette_table.error_codes import ErrorCodes
from roulette_table.utils.bet_types import Bet

class AppException(Exception):
    def __init__(self, error_code, status_message, details=None):
        super().__init__(status_message)
        self.error_code = error_code
        self.status_message = status_message
        self.details = details if details is not None else {}

class ValidationException(AppException):
    def __init__(self, status_message="Validation failed", details=None):
        super().__init__(
            error_code=ErrorCodes.VALIDATION_ERROR,
            status_message=status_message,
            details=details
        )

class InsufficientFundsException(AppException):
    def __init__(self, status_message="Insufficient funds", details=None):
        super().__init__(
            error_code=ErrorCodes.INSUFFICIENT_FUNDS,
            status_message=status_message,
            details=details
        )

class GameLogicException(AppException):
    def __init__(self, status_message="Game logic error", details=None):
        super().__init__(
            error_code=ErrorCodes.GAME_LOGIC_ERROR,
            status_message=status_message,
            details=details
        )


# --- Bet placement errors ---

class BetErrorKind(Enum):
    INVALID_GEOMETRY = ErrorCodes.INVALID_BET_GEOMETRY
    BELOW_MINIMUM = ErrorCodes.BET_BELOW_MINIMUM
    ABOVE_MAXIMUM = ErrorCodes.BET_ABOVE_MAXIMUM


@dataclass(frozen=True)
class BetPlacementError:
    """
    One rejected bet. ``limit`` is the effective minimum or maximum wager for
    BELOW_MINIMUM / ABOVE_MAXIMUM and None for INVALID_GEOMETRY.
    """
    kind: BetErrorKind
    bet: Bet
    limit: Optional[int] = None

    @classmethod
    def invalid_geometry(cls, bet):
        return cls(BetErrorKind.INVALID_GEOMETRY, bet)

    @classmethod
    def below_minimum(cls, bet, minimum):
        return cls(BetErrorKind.BELOW_MINIMUM, bet, minimum)

    @classmethod
    def above_maximum(cls, bet, maximum):
        return cls(BetErrorKind.ABOVE_MAXIMUM, bet, maximum)

    @property
    def error_code(self):
        return self.kind.value

    @property
    def message(self):
        if self.kind is BetErrorKind.INVALID_GEOMETRY:
            return f"Invalid Bet Option: {self.bet}"
        if self.kind is BetErrorKind.BELOW_MINIMUM:
            return f"Minimum ({self.limit}) not met for option {self.bet}"
        return f"Max bet of {self.limit} reached on option {self.bet}"

    def to_dict(self):
        return {
            'error_code': self.error_code,
            'kind': self.kind.name,
            'bet': str(self.bet),
            'limit': self.limit,
            'message': self.message,
        }

    def __str__(self):
        return self.message


class BetValidationException(ValidationException):
    """Raised when one or more bets of a round are rejected. Carries all of them."""
    def __init__(self, errors, status_message=None):
        self.errors = list(errors)
        if status_message is None:
            status_message = f"{len(self.errors)} bet(s) rejected"
        super().__init__(
            status_message=status_message,
            details={'errors': [error.to_dict() for error in self.errors]}
        )
