"""
Table configuration module with fail-fast validation.

Values are read from the environment (and a local .env file, if present) and
validated once at import time.
"""
from dotenv import load_dotenv

from roulette_table.config_validator import validate_game_config
from roulette_table.utils.bet_types import BetCategory

# Load environment variables from .env file
load_dotenv()


class Config:
    """Roulette table configuration."""

    # Validate configuration and get checked values
    _validated_config = validate_game_config()

    # Bet limits, in the smallest currency unit
    MIN_BET = _validated_config['MIN_BET']
    MAX_BET = _validated_config['MAX_BET']
    MIN_BET_MULTIPLIERS = _validated_config['MIN_BET_MULTIPLIERS']

    # Console game loop
    STARTING_BALANCE = _validated_config['STARTING_BALANCE']

    # Logging
    LOG_LEVEL = _validated_config['LOG_LEVEL']
    LOG_FORMAT = _validated_config['LOG_FORMAT']

    @classmethod
    def table_kwargs(cls) -> dict:
        """Keyword arguments for RouletteTable built from this config."""
        return {
            'min_bet': cls.MIN_BET,
            'max_bet': cls.MAX_BET,
            'min_bet_multipliers': dict(cls.MIN_BET_MULTIPLIERS),
        }


class TestingConfig(Config):
    TESTING = True
    MIN_BET = 1
    MAX_BET = None
    MIN_BET_MULTIPLIERS = {category: 1 for category in BetCategory}
    STARTING_BALANCE = 10000
    LOG_LEVEL = 'DEBUG'
    LOG_FORMAT = 'text'
