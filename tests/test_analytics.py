"""Tests for analytics module."""

import numpy as np
import pandas as pd
import pytest

from stablecoin_abm.analytics import (
    adoption_summary,
    bank_snapshot,
    crossover_tick,
    household_snapshot,
)
from stablecoin_abm.model import AdoptionModel


def _series(deposits, coin):
    deposits = np.asarray(deposits, dtype=float)
    coin = np.asarray(coin, dtype=float)
    data = pd.DataFrame({
        'total_deposits': deposits,
        'total_coin_balance': coin,
        'coin_share': coin / (deposits + coin),
    })
    data.index.name = 't'
    return data


class TestSnapshots:
    def test_household_snapshot(self):
        model = AdoptionModel({'n_households': 25, 'n_banks': 2, 'seed': 3})
        model.setup()
        snap = household_snapshot(model.households)
        assert len(snap) == 25
        assert {'bank_balance', 'coin_balance', 'coin_fraction',
                'perceived_coin_utility', 'risk_profile', 'home_bank',
                'n_peers'}.issubset(snap.columns)
        assert set(snap['risk_profile']) == {'HIGH', 'LOW'}
        assert (snap['n_peers'] <= 3).all()

    def test_bank_snapshot(self):
        model = AdoptionModel({'n_households': 25, 'n_banks': 2, 'seed': 3})
        model.setup()
        snap = bank_snapshot(model.banks)
        assert len(snap) == 2
        assert (snap['health_ratio'] == 1.0).all()

    def test_empty_snapshot_has_columns(self):
        snap = household_snapshot([])
        assert len(snap) == 0
        assert 'coin_fraction' in snap.columns


class TestCrossoverTick:
    def test_first_crossing(self):
        data = _series([100, 80, 40, 30], [0, 20, 60, 70])
        assert crossover_tick(data) == 2

    def test_no_crossing(self):
        data = _series([100, 90], [0, 10])
        assert crossover_tick(data) is None


class TestAdoptionSummary:
    def test_rising_share(self):
        data = _series([100, 90, 80, 70], [0, 10, 20, 30])
        summary = adoption_summary(data)
        assert summary['final_coin_share'] == pytest.approx(0.3)
        assert summary['peak_coin_share'] == pytest.approx(0.3)
        assert summary['coin_share_trend'] == pytest.approx(0.1)
        assert summary['trend_r'] == pytest.approx(1.0)
        assert summary['n_ticks'] == 4

    def test_single_tick(self):
        data = _series([100], [0])
        summary = adoption_summary(data)
        assert summary['coin_share_trend'] == 0.0
        assert summary['crossover_tick'] is None

    def test_recorded_run(self):
        model = AdoptionModel({'steps': 30, 'seed': 5})
        results = model.run(display=False)
        summary = adoption_summary(results.variables.AdoptionModel)
        assert 0.0 <= summary['final_coin_share'] <= 1.0
        assert summary['n_ticks'] == 31
