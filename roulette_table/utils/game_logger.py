"""
Game Event Logging
Structured logging setup and round-level audit events for the roulette table
"""

import json
import logging
from datetime import datetime, timezone

from pythonjsonlogger import jsonlogger

logger = logging.getLogger('roulette_table')

LOG_FORMAT = '%(asctime)s %(levelname)s %(table_id)s %(module)s %(funcName)s %(lineno)d %(message)s'


class TableIdFilter(logging.Filter):
    """Stamps every record with the id of the table that produced it."""

    def __init__(self, table_id: str = 'N/A'):
        super().__init__()
        self.table_id = table_id

    def filter(self, record):
        if not hasattr(record, 'table_id'):
            record.table_id = self.table_id
        return True


def configure_logging(level: str = 'INFO', fmt: str = 'json', table_id: str = 'N/A'):
    """
    Configure the package logger.

    ``fmt='json'`` emits one JSON object per record via python-json-logger;
    anything else falls back to a plain text line.
    """
    handler = logging.StreamHandler()
    if fmt == 'json':
        formatter = jsonlogger.JsonFormatter(LOG_FORMAT)
    else:
        formatter = logging.Formatter('%(asctime)s %(levelname)s [%(table_id)s] %(name)s: %(message)s')
    handler.setFormatter(formatter)
    handler.addFilter(TableIdFilter(table_id))

    if logger.hasHandlers():
        logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    logger.propagate = False
    return logger


class GameEventLogger:
    """Centralized round event logging"""

    @staticmethod
    def log_spin_event(table_id: str, winning_number: int, winning_color: str,
                       total_wager: int, total_payout: int, bet_count: int,
                       details: dict = None):
        """Log a completed spin"""
        event_data = {
            'event_type': 'game',
            'sub_type': 'spin',
            'table_id': table_id,
            'winning_number': winning_number,
            'winning_color': winning_color,
            'bet_count': bet_count,
            'total_wager': total_wager,
            'total_payout': total_payout,
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'details': details or {}
        }

        logger.info(f"GAME_EVENT: {json.dumps(event_data)}", extra={'table_id': table_id})

    @staticmethod
    def log_rejected_bets(table_id: str, errors: list, bet_count: int):
        """Log a round refused during bet validation"""
        event_data = {
            'event_type': 'game',
            'sub_type': 'bets_rejected',
            'table_id': table_id,
            'bet_count': bet_count,
            'error_count': len(errors),
            'errors': [error.to_dict() for error in errors],
            'timestamp': datetime.now(timezone.utc).isoformat(),
        }

        logger.warning(f"GAME_EVENT: {json.dumps(event_data)}", extra={'table_id': table_id})
