"""Tests for wage accrual."""

import numpy as np
import pytest

import agentpy as ap

from stablecoin_abm.agents import Household
from stablecoin_abm.config import DEFAULT_PARAMS
from stablecoin_abm.wages import accrue_wages, daily_wage_factor, employed_count


def _make_households(n, bank_balance=100.0, coin_balance=0.0):
    model = ap.Model(dict(DEFAULT_PARAMS))
    model.setup()
    households = [Household(model) for _ in range(n)]
    for h in households:
        h.setup()
        h.bank_balance = bank_balance
        h.coin_balance = coin_balance
    return households


class TestEmployedCount:
    def test_full_employment(self):
        assert employed_count(100, 0.0) == 100

    def test_rounds_half_up(self):
        assert employed_count(10, 0.05) == 10   # 9.5 -> 10
        assert employed_count(2, 0.25) == 2     # 1.5 -> 2

    def test_rounds_down(self):
        assert employed_count(7, 0.1) == 6      # 6.3 -> 6


class TestDailyWageFactor:
    def test_flat_salary_is_noop(self):
        assert daily_wage_factor(1.0) == 1.0

    def test_spreads_growth_over_year(self):
        assert daily_wage_factor(1.0365) == pytest.approx(1.0001)


class TestAccrueWages:
    def test_salary_one_leaves_balances(self):
        households = _make_households(5)
        accrue_wages(households, 0.0, 1.0, np.random.default_rng(42))
        assert all(h.bank_balance == 100.0 for h in households)

    def test_pays_employed_subset_only(self):
        households = _make_households(20)
        paid = accrue_wages(households, 0.1, 1.365, np.random.default_rng(42))
        assert len(paid) == 18
        factor = 1.0 + 0.365 / 365
        for h in households:
            expected = 100.0 * factor if h in paid else 100.0
            assert h.bank_balance == pytest.approx(expected)

    def test_coin_balance_untouched(self):
        households = _make_households(10, coin_balance=40.0)
        accrue_wages(households, 0.0, 1.05, np.random.default_rng(42))
        assert all(h.coin_balance == 40.0 for h in households)
