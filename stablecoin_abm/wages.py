"""Daily wage accrual on the bank rail."""

import math

import numpy as np

from .agents import Household
from .sampling import sample_without_replacement


def employed_count(n_households: int, unemployment_rate: float) -> int:
    """round(N * (1 - u)), rounding halves up."""
    return int(math.floor(n_households * (1.0 - unemployment_rate) + 0.5))


def daily_wage_factor(yearly_salary: float, days_per_year: int = 365) -> float:
    """Spread the annual growth factor evenly over ``days_per_year`` ticks."""
    return 1.0 + (yearly_salary - 1.0) / days_per_year


def accrue_wages(households: list[Household], unemployment_rate: float,
                 yearly_salary: float, rng: np.random.Generator,
                 days_per_year: int = 365) -> list[Household]:
    """Grow the bank balance of a random employed subset.

    Coin balances are untouched; wages only arrive through the bank rail.
    Returns the households that were paid.
    """
    employed = sample_without_replacement(
        households, employed_count(len(households), unemployment_rate), rng)
    factor = daily_wage_factor(yearly_salary, days_per_year)
    for household in employed:
        household.bank_balance *= factor
    return employed
