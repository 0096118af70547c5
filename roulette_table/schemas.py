from marshmallow import Schema, fields, ValidationError, post_load, validates_schema
from marshmallow.validate import OneOf, Range, Length

from .utils.bet_types import Bet, BetCategory, BetType, SELECTOR_CATEGORIES

BET_TYPE_NAMES = [category.value for category in BetCategory]


# --- Bet slip loading ---
class BetRequestSchema(Schema):
    """
    One bet as supplied by a player, e.g.
    {"bet_type": "split", "numbers": [1, 2], "wager": 10} or
    {"bet_type": "dozens", "selector": 1, "wager": 10}.

    Only the shape is checked here; whether the numbers form a real table
    position is decided by the table when the round is played.
    """
    bet_type = fields.Str(required=True, validate=OneOf(BET_TYPE_NAMES))
    numbers = fields.List(fields.Int(strict=True), validate=Length(min=1, max=6))
    selector = fields.Int(strict=True)
    wager = fields.Int(
        required=True,
        strict=True,
        validate=Range(min=1, error="Wager must be a positive whole amount.")
    )

    @validates_schema
    def validate_parameters(self, data, **kwargs):
        bet_type = data.get('bet_type')
        if bet_type not in BET_TYPE_NAMES:
            return

        category = BetCategory(bet_type)
        has_numbers = data.get('numbers') is not None
        has_selector = data.get('selector') is not None

        if category in SELECTOR_CATEGORIES:
            if not has_selector:
                raise ValidationError(f"'{bet_type}' bets require a selector.", 'selector')
            if has_numbers:
                raise ValidationError(f"'{bet_type}' bets take a selector, not numbers.", 'numbers')
        else:
            if not has_numbers:
                raise ValidationError(f"'{bet_type}' bets require a list of numbers.", 'numbers')
            if has_selector:
                raise ValidationError(f"'{bet_type}' bets take numbers, not a selector.", 'selector')

    @post_load
    def make_bet(self, data, **kwargs):
        category = BetCategory(data['bet_type'])
        if category in SELECTOR_CATEGORIES:
            values = (data['selector'],)
        else:
            values = tuple(data['numbers'])
        return Bet(bet_type=BetType(category, values), wager=data['wager'])


class BetSlipSchema(Schema):
    bets = fields.List(fields.Nested(BetRequestSchema), required=True, validate=Length(min=1))

    @post_load
    def unwrap(self, data, **kwargs):
        return data['bets']


def load_bet_slip(payload):
    """
    Load a bet slip (``{"bets": [...]}`` or a bare list of bets) into Bets.

    Raises marshmallow.ValidationError on malformed input.
    """
    if isinstance(payload, list):
        payload = {'bets': payload}
    return BetSlipSchema().load(payload)


# --- Round results ---
class BetResultSchema(Schema):
    bet = fields.Function(lambda result: str(result.bet.bet_type))
    category = fields.Function(lambda result: result.bet.category.value)
    wager = fields.Function(lambda result: result.bet.wager)
    payout = fields.Int()
    won = fields.Bool()


class SpinOutcomeSchema(Schema):
    winning_number = fields.Int(validate=Range(min=0, max=36))
    winning_color = fields.Function(lambda outcome: outcome.winning_color.name.lower())
    total_wager = fields.Int()
    total_payout = fields.Int()
    results = fields.List(fields.Nested(BetResultSchema))
