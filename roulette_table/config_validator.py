"""
Configuration validation for the roulette table.

This module implements fail-fast validation of the environment variables that
tune the table, so that a misconfigured limit is reported at startup instead
of surfacing as odd bet rejections mid-game.
"""

import os
import warnings
from typing import Dict, List, Optional, Tuple

from roulette_table.utils.bet_types import BetCategory


class ConfigValidationError(Exception):
    """Raised when table configuration is missing or invalid."""
    pass


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
LOG_FORMATS = ('json', 'text')


class ConfigValidator:
    """Validates table configuration read from the environment."""

    def __init__(self, environ: Optional[dict] = None):
        """
        Initialize the configuration validator.

        Args:
            environ: Mapping to read variables from. Defaults to os.environ.
        """
        self.environ = os.environ if environ is None else environ
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def _get(self, var_name: str, default: Optional[str] = None) -> Optional[str]:
        value = self.environ.get(var_name)
        if value is None or value.strip() == '':
            return default
        return value.strip()

    def validate_positive_int(self, var_name: str, default: Optional[int]) -> Optional[int]:
        """
        Validate that an environment variable, if set, is a positive integer.

        Returns:
            The parsed value, or ``default`` when the variable is unset or invalid
        """
        raw = self._get(var_name)
        if raw is None:
            return default
        try:
            value = int(raw)
        except ValueError:
            self.errors.append(f"{var_name} must be an integer, got '{raw}'")
            return default
        if value < 1:
            self.errors.append(f"{var_name} must be at least 1, got {value}")
            return default
        return value

    def validate_bet_limits(self) -> Tuple[int, Optional[int]]:
        """Validate the table minimum and the optional maximum wager."""
        min_bet = self.validate_positive_int('ROULETTE_MIN_BET', 1)
        max_bet = self.validate_positive_int('ROULETTE_MAX_BET', None)

        if max_bet is not None and max_bet < min_bet:
            self.errors.append(
                f"ROULETTE_MAX_BET ({max_bet}) cannot be lower than ROULETTE_MIN_BET ({min_bet})"
            )
            max_bet = None

        return min_bet, max_bet

    def validate_min_bet_multipliers(self) -> Dict[BetCategory, int]:
        """
        Parse ROULETTE_MIN_BET_MULTIPLIERS, e.g. ``straight=2,red_black=5``.

        Categories not listed keep a factor of 1.
        """
        multipliers = {category: 1 for category in BetCategory}
        raw = self._get('ROULETTE_MIN_BET_MULTIPLIERS')
        if raw is None:
            return multipliers

        for entry in raw.split(','):
            entry = entry.strip()
            if not entry:
                continue
            name, sep, factor = entry.partition('=')
            name = name.strip().lower()
            if not sep:
                self.errors.append(f"ROULETTE_MIN_BET_MULTIPLIERS entry '{entry}' must look like 'category=factor'")
                continue
            try:
                category = BetCategory(name)
            except ValueError:
                valid = ', '.join(c.value for c in BetCategory)
                self.errors.append(f"Unknown bet category '{name}' in ROULETTE_MIN_BET_MULTIPLIERS. Valid categories are: {valid}")
                continue
            try:
                value = int(factor.strip())
            except ValueError:
                self.errors.append(f"Minimum bet factor for '{name}' must be an integer, got '{factor.strip()}'")
                continue
            if value < 1:
                self.errors.append(f"Minimum bet factor for '{name}' must be at least 1, got {value}")
                continue
            multipliers[category] = value

        return multipliers

    def check_playable_categories(self, min_bet: int, max_bet: Optional[int],
                                  multipliers: Dict[BetCategory, int]) -> None:
        """Warn about categories whose effective minimum exceeds the maximum wager."""
        if max_bet is None:
            return
        for category, factor in multipliers.items():
            if min_bet * factor > max_bet:
                self.warnings.append(
                    f"Minimum wager for '{category.value}' ({min_bet * factor}) is above "
                    f"ROULETTE_MAX_BET ({max_bet}); that bet can never be placed"
                )

    def validate_logging_config(self) -> Tuple[str, str]:
        """Validate logging configuration."""
        level = self._get('LOG_LEVEL', 'INFO').upper()
        if level not in LOG_LEVELS:
            self.errors.append(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{level}'")
            level = 'INFO'

        fmt = self._get('LOG_FORMAT', 'json').lower()
        if fmt not in LOG_FORMATS:
            self.errors.append(f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}, got '{fmt}'")
            fmt = 'json'

        return level, fmt

    def validate_all(self) -> dict:
        """
        Validate all configuration settings.

        Returns:
            Dictionary containing validated configuration values

        Raises:
            ConfigValidationError: If any setting is invalid
        """
        config = {}

        config['MIN_BET'], config['MAX_BET'] = self.validate_bet_limits()
        config['MIN_BET_MULTIPLIERS'] = self.validate_min_bet_multipliers()
        self.check_playable_categories(config['MIN_BET'], config['MAX_BET'], config['MIN_BET_MULTIPLIERS'])
        config['STARTING_BALANCE'] = self.validate_positive_int('ROULETTE_STARTING_BALANCE', 10000)
        config['LOG_LEVEL'], config['LOG_FORMAT'] = self.validate_logging_config()

        if self.errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {error}" for error in self.errors)
            if self.warnings:
                error_msg += "\n\nWarnings:\n" + "\n".join(f"  - {warning}" for warning in self.warnings)
            raise ConfigValidationError(error_msg)

        for warning in self.warnings:
            warnings.warn(warning, UserWarning)

        return config


def validate_game_config(environ: Optional[dict] = None) -> dict:
    """
    Validate table configuration with fail-fast behavior.

    Returns:
        Dictionary of validated configuration values

    Raises:
        ConfigValidationError: If any setting is invalid
    """
    validator = ConfigValidator(environ)
    return validator.validate_all()
