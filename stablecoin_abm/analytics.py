"""Agent snapshots and adoption statistics for recorded runs."""

import numpy as np
import pandas as pd
from scipy.stats import linregress


def household_snapshot(households) -> pd.DataFrame:
    """One row per household with its balances, utility and links."""
    rows = [{
        'id': h.id,
        'bank_balance': h.bank_balance,
        'coin_balance': h.coin_balance,
        'coin_fraction': h.coin_fraction,
        'perceived_coin_utility': h.perceived_coin_utility,
        'adoption_propensity': h.adoption_propensity,
        'risk_profile': h.risk_profile.name,
        'home_bank': h.home_bank.id if h.home_bank is not None else None,
        'n_peers': len(h.peers),
    } for h in households]
    return pd.DataFrame(rows, columns=[
        'id', 'bank_balance', 'coin_balance', 'coin_fraction',
        'perceived_coin_utility', 'adoption_propensity', 'risk_profile',
        'home_bank', 'n_peers',
    ]).set_index('id')


def bank_snapshot(banks) -> pd.DataFrame:
    rows = [{
        'id': b.id,
        'reserves': b.reserves,
        'initial_reserves': b.initial_reserves,
        'health_ratio': b.health_ratio,
        'display_size': b.display_size,
    } for b in banks]
    return pd.DataFrame(rows, columns=[
        'id', 'reserves', 'initial_reserves', 'health_ratio', 'display_size',
    ]).set_index('id')


def crossover_tick(data: pd.DataFrame) -> int | None:
    """First tick at which the coin balance exceeds total deposits."""
    crossed = data.index[data['total_coin_balance'] > data['total_deposits']]
    if len(crossed) == 0:
        return None
    return int(crossed[0])


def adoption_summary(data: pd.DataFrame) -> dict:
    """Summarize a recorded run (the model's variables DataFrame).

    Returns final and peak coin share, the crossover tick and the
    least-squares trend of coin share per tick.
    """
    share = data['coin_share'].to_numpy(dtype=float)
    ticks = data.index.to_numpy(dtype=float)

    if len(share) >= 2 and np.ptp(ticks) > 0:
        fit = linregress(ticks, share)
        slope, r_value = float(fit.slope), float(fit.rvalue)
    else:
        slope, r_value = 0.0, 0.0

    return {
        'final_coin_share': float(share[-1]) if len(share) else 0.0,
        'peak_coin_share': float(share.max()) if len(share) else 0.0,
        'crossover_tick': crossover_tick(data),
        'coin_share_trend': slope,
        'trend_r': r_value if np.isfinite(r_value) else 0.0,
        'n_ticks': len(share),
    }
