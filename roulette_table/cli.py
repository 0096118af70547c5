#!/usr/bin/env python3
"""
Roulette Table CLI

A console front end for the roulette table:
- play repeated rounds of a bet slip against a bankroll
- check a bet slip for rejected bets without spinning
- print the payout table

Usage:
    roulette-table --help
    roulette-table play --balance 10000 --rounds 50
    roulette-table play --slip my_bets.json --seed 42
    roulette-table check --slip my_bets.json
    roulette-table payouts
"""

import json
import random
import sys

import click
from marshmallow import ValidationError

from roulette_table.config import Config
from roulette_table.exceptions import BetValidationException, InsufficientFundsException
from roulette_table.schemas import load_bet_slip
from roulette_table.utils.bet_types import Bet, BetCategory, BetType, PAYOUT_MULTIPLIERS
from roulette_table.utils.game_logger import configure_logging
from roulette_table.utils.roulette_engine import RouletteTable
from roulette_table.utils.roulette_helper import calculate_total_wager

# Bet slip played when no --slip file is given
DEMO_BETS = [
    Bet(BetType.straight(11), 100),
    Bet(BetType.split(10, 11), 100),
    Bet(BetType.corner(7, 8, 10, 11), 100),
    Bet(BetType.corner(8, 9, 11, 12), 100),
    Bet(BetType.corner(10, 11, 13, 14), 100),
    Bet(BetType.corner(11, 12, 14, 15), 100),
    Bet(BetType.columns(2), 300),
    Bet(BetType.basket(0, 1, 2), 100),
    Bet(BetType.dozens(1), 100),
    Bet(BetType.even_odd(0), 100),
    Bet(BetType.high_low(1), 100),
    Bet(BetType.red_black(1), 100),
    Bet(BetType.double_line(25, 26, 27, 28, 29, 30), 100),
]


def read_bet_slip(slip_file):
    """Load bets from an open JSON file, or the demo slip when no file is given."""
    if slip_file is None:
        return list(DEMO_BETS)
    try:
        payload = json.load(slip_file)
    except json.JSONDecodeError as e:
        raise click.ClickException(f"Bet slip is not valid JSON: {e}")
    try:
        return load_bet_slip(payload)
    except ValidationError as e:
        raise click.ClickException(f"Bet slip is malformed: {json.dumps(e.messages)}")


def build_table(seed=None):
    draw = None
    if seed is not None:
        draw = random.Random(seed).randint
    return RouletteTable(draw=draw, **Config.table_kwargs())


def place_bets(balance, bets):
    """Debit the stake for a round; returns the new balance."""
    total_bet = calculate_total_wager(bets)
    if total_bet > balance:
        raise InsufficientFundsException(
            status_message=f"Not enough balance to place the bet(s)! (balance: {balance}, bets: {total_bet})",
            details={'balance': balance, 'total_bet': total_bet}
        )
    return balance - total_bet


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, verbose):
    """Roulette Table CLI - play and check single-zero roulette bets."""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    configure_logging('DEBUG' if verbose else Config.LOG_LEVEL, Config.LOG_FORMAT)


@cli.command()
@click.option('--slip', 'slip_file', type=click.File('r'), default=None, help='JSON bet slip to play every round')
@click.option('--balance', type=int, default=None, help='Starting balance (default from ROULETTE_STARTING_BALANCE)')
@click.option('--rounds', type=click.IntRange(min=1), default=100, show_default=True, help='Maximum number of rounds')
@click.option('--seed', type=int, default=None, help='Seed the wheel for a reproducible session')
def play(slip_file, balance, rounds, seed):
    """Play the same bet slip round after round until the balance runs out."""
    bets = read_bet_slip(slip_file)
    table = build_table(seed)
    balance = Config.STARTING_BALANCE if balance is None else balance
    highest_balance = balance

    for game in range(1, rounds + 1):
        click.echo(f"\nGame {game}")
        try:
            balance = place_bets(balance, bets)
        except InsufficientFundsException as e:
            click.echo(e.status_message)
            break
        click.echo(f"Bets placed. Balance = {balance}")

        try:
            outcome = table.spin(bets)
        except BetValidationException as e:
            # Stake is returned; the same slip would be refused every round
            balance += calculate_total_wager(bets)
            click.echo("Errors found:")
            for error in e.errors:
                click.echo(f"- {error}")
            break

        click.echo(f"Ball dropped on {outcome.winning_number} ({outcome.winning_color.name.lower()})")
        for ndx, result in enumerate(outcome.results):
            click.echo(f"Bet {ndx}: {result.bet} wins {result.payout}")
        balance += outcome.total_payout

        highest_balance = max(highest_balance, balance)

    click.echo(f"\nFinal balance = {balance}")
    click.echo(f"Highest balance achieved = {highest_balance}")


@cli.command()
@click.option('--slip', 'slip_file', type=click.File('r'), default=None, help='JSON bet slip to check')
def check(slip_file):
    """Report every bet in a slip the table would refuse."""
    bets = read_bet_slip(slip_file)
    table = build_table()
    errors = table.validate_bets(bets)
    if not errors:
        click.echo(f"All {len(bets)} bet(s) accepted.")
        return

    click.echo("Errors found:", err=True)
    for error in errors:
        click.echo(f"- {error}", err=True)
    sys.exit(1)


@cli.command()
def payouts():
    """Print the payout multiplier and minimum wager of every bet category."""
    table = build_table()
    click.echo(f"{'Category':<12} {'Pays':>5} {'Min bet':>8}")
    for category in BetCategory:
        click.echo(f"{category.value:<12} {PAYOUT_MULTIPLIERS[category]:>4}x {table.min_bet_for(category):>8}")
    if table.max_bet is not None:
        click.echo(f"Maximum wager per bet: {table.max_bet}")


if __name__ == '__main__':
    cli()
