"""Reusable matplotlib plotting functions for model outputs."""

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns


def plot_totals(data: pd.DataFrame, ax: plt.Axes | None = None,
                **kwargs) -> plt.Axes:
    """Plot total deposits and total coin balance per tick."""
    if ax is None:
        _, ax = plt.subplots(figsize=(12, 4))
    ax.plot(data.index, data['total_deposits'], label='Total Deposits',
            color='#2196F3', linewidth=1.0)
    ax.plot(data.index, data['total_coin_balance'], label='Total Stablecoin',
            color='#F44336', linewidth=1.0)
    ax.set_xlabel('Tick')
    ax.set_ylabel('Balance')
    ax.set_title('Deposits vs Stablecoin')
    ax.legend()
    return ax


def plot_adoption(data: pd.DataFrame, ax: plt.Axes | None = None,
                  **kwargs) -> plt.Axes:
    """Plot coin share of money and share of adopting households."""
    if ax is None:
        _, ax = plt.subplots(figsize=(12, 4))
    ax.plot(data.index, data['coin_share'], label='Coin share of money')
    ax.plot(data.index, data['adoption_rate'], label='Adopting households',
            linestyle='--')
    ax.set_xlabel('Tick')
    ax.set_ylabel('Fraction')
    ax.set_ylim(0, 1)
    ax.set_title('Stablecoin Adoption')
    ax.legend(loc='upper left')
    return ax


def plot_coin_fraction_distribution(snapshot: pd.DataFrame,
                                    ax: plt.Axes | None = None,
                                    **kwargs) -> plt.Axes:
    """Histogram of household coin fractions, split by risk profile."""
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 4))
    sns.histplot(data=snapshot, x='coin_fraction', hue='risk_profile',
                 bins=kwargs.get('bins', 20), ax=ax)
    ax.set_xlabel('Coin fraction')
    ax.set_title('Household Portfolios')
    return ax
