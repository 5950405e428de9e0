"""Pairwise payments between households over the bank or coin rail."""

from dataclasses import dataclass

import numpy as np

from .agents import Household, Rail
from .learning import update_perceived_utility
from .sampling import choose_other, sample_without_replacement


@dataclass
class Transfer:
    sender_id: int
    recipient_id: int
    rail: Rail
    amount: float
    fee: float


def coin_choice_probability(perceived_coin_utility: float,
                            bank_attractiveness: float) -> float:
    """U / (U + A), or 0.0 when the denominator is not positive."""
    denom = perceived_coin_utility + bank_attractiveness
    if denom <= 0:
        return 0.0
    return perceived_coin_utility / denom


def choose_rail(sender: Household, amount: float, bank_attractiveness: float,
                rng: np.random.Generator) -> Rail | None:
    """Pick the rail a sender pays with, or None if neither can cover it.

    Eligibility needs a balance strictly greater than ``amount`` (the fee
    is not part of the check). With both rails eligible the coin rail wins
    with probability U / (U + A).
    """
    bank_ok = sender.bank_balance > amount
    coin_ok = sender.coin_balance > amount

    if bank_ok and coin_ok:
        p_coin = coin_choice_probability(sender.perceived_coin_utility,
                                         bank_attractiveness)
        return Rail.COIN if rng.random() < p_coin else Rail.BANK
    if coin_ok:
        return Rail.COIN
    if bank_ok:
        return Rail.BANK
    return None


def execute_transfer(sender: Household, recipient: Household, rail: Rail,
                     amount: float, fee_rate: float) -> Transfer:
    """Move ``amount`` on ``rail`` from sender to recipient.

    The sender pays ``amount * (1 + fee_rate)``; the fee is burned. No
    floor is applied, so a sender holding between ``amount`` and
    ``amount + fee`` ends slightly negative.
    """
    fee = amount * fee_rate
    sender.adjust_balance(rail, -(amount + fee))
    recipient.adjust_balance(rail, amount)
    return Transfer(sender_id=sender.id, recipient_id=recipient.id,
                    rail=rail, amount=amount, fee=fee)


def transaction_round(households: list[Household], n_transactions: int,
                      params, rng: np.random.Generator) -> list[Transfer]:
    """Run one tick of payments.

    ``n_transactions`` distinct senders each pay a uniformly random other
    household. Senders lacking funds on both rails skip. Every completed
    transfer updates the sender's perceived coin utility.
    """
    amount = params['transaction_amount']
    fee_rates = {Rail.BANK: params['bank_fee_rate'],
                 Rail.COIN: params['coin_fee_rate']}

    transfers = []
    for sender in sample_without_replacement(households, n_transactions, rng):
        recipient = choose_other(households, sender, rng)
        if recipient is None:
            continue
        rail = choose_rail(sender, amount, params['bank_attractiveness'], rng)
        if rail is None:
            continue
        transfers.append(
            execute_transfer(sender, recipient, rail, amount, fee_rates[rail]))
        update_perceived_utility(sender, rng,
                                 growth=params['utility_growth'],
                                 noise_sigma=params['utility_noise_sigma'])
    return transfers
