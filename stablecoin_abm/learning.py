"""Perceived stablecoin utility learned from transaction experience."""

import numpy as np

from .agents import Household


def update_perceived_utility(household: Household, rng: np.random.Generator,
                             growth: float = 1.01,
                             noise_sigma: float = 0.1) -> float:
    """Reinforce the household's coin utility after a completed transfer.

    U(t+1) = U(t) * growth + eps,  eps ~ N(0, noise_sigma)

    Applied after every completed transfer on either rail: the signal is
    the experience of transacting at all, not of using the coin rail.
    """
    noise = rng.normal(0.0, noise_sigma) if noise_sigma > 0 else 0.0
    household.perceived_coin_utility = (
        household.perceived_coin_utility * growth + noise)
    return household.perceived_coin_utility
