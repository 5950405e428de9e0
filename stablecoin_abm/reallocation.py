"""Portfolio reallocation between bank deposits and stablecoin.

A sampled household scores the coin rail from three signals:

    coin_score = (U * propensity + peer_pressure * social_influence) * panic

where ``panic`` is ``fear_factor`` while the home bank's reserve ratio is
below the confidence threshold and 1 otherwise. The bank rail scores the
constant ``bank_attractiveness``. The household then moves a fixed share
of the losing rail's balance onto the chosen one, keeping its home bank's
reserves in step with the bank-rail side of the move.
"""

from dataclasses import dataclass

import numpy as np

from .agents import Bank, Household, Rail
from .sampling import sample_without_replacement


@dataclass
class Reallocation:
    household_id: int
    target: Rail
    amount: float


def bank_health_ratio(bank: Bank | None) -> float:
    if bank is None:
        return 1.0
    return bank.health_ratio


def panic_modifier(health_ratio: float, confidence_threshold: float,
                   fear_factor: float) -> float:
    return fear_factor if health_ratio < confidence_threshold else 1.0


def peer_pressure(household: Household, adoption_threshold: float = 0.3) -> float:
    """Share of peers holding more than ``adoption_threshold`` in coin."""
    if not household.peers:
        return 0.0
    adopters = sum(1 for peer in household.peers
                   if peer.coin_fraction > adoption_threshold)
    return adopters / len(household.peers)


def coin_score(household: Household, params) -> float:
    health = bank_health_ratio(household.home_bank)
    panic = panic_modifier(health, params['bank_confidence_threshold'],
                           params['fear_factor'])
    pressure = peer_pressure(household, params['peer_adoption_threshold'])
    return (household.perceived_coin_utility * household.adoption_propensity
            + pressure * params['social_influence']) * panic


def move_funds(household: Household, target: Rail,
               fraction: float) -> float:
    """Shift ``fraction`` of the source rail's balance onto ``target``.

    The home bank's reserves fall when funds leave the bank rail and rise
    when they return. Nothing moves if the source balance is not positive.
    Returns the amount moved.
    """
    source = Rail.BANK if target == Rail.COIN else Rail.COIN
    balance = household.balance_on(source)
    if balance <= 0:
        return 0.0

    amount = balance * fraction
    household.adjust_balance(source, -amount)
    household.adjust_balance(target, amount)

    bank = household.home_bank
    if bank is not None:
        bank.reserves += -amount if target == Rail.COIN else amount
    return amount


def reallocate(household: Household, params,
               rng: np.random.Generator) -> Reallocation | None:
    """Let one household reconsider its split between the two rails."""
    coin = coin_score(household, params)
    total = coin + params['bank_attractiveness']
    if total <= 0:
        return None

    target = Rail.COIN if rng.random() < coin / total else Rail.BANK
    amount = move_funds(household, target, params['reallocation_fraction'])
    if amount == 0.0:
        return None
    return Reallocation(household_id=household.id, target=target, amount=amount)


def reallocation_round(households: list[Household], params,
                       rng: np.random.Generator) -> list[Reallocation]:
    """Reallocate a random sample of households (all of them if fewer)."""
    sample = sample_without_replacement(
        households, params['reallocation_sample_size'], rng)
    moves = []
    for household in sample:
        move = reallocate(household, params, rng)
        if move is not None:
            moves.append(move)
    return moves
