"""Tests for Household and Bank agents."""

import pytest

import agentpy as ap

from stablecoin_abm.agents import Bank, Household, Rail, RiskProfile
from stablecoin_abm.config import DEFAULT_PARAMS


def _make_model(**params):
    model = ap.Model({**DEFAULT_PARAMS, **params})
    model.setup()
    return model


def _make_household(**params):
    household = Household(_make_model(**params))
    household.setup()
    return household


def _make_bank(**params):
    bank = Bank(_make_model(**params))
    bank.setup()
    return bank


class TestHouseholdSetup:
    def test_initial_state(self):
        h = _make_household(initial_deposits=250.0, initial_coin_utility=0.4)
        assert h.bank_balance == 250.0
        assert h.coin_balance == 0.0
        assert h.perceived_coin_utility == 0.4
        assert h.risk_profile == RiskProfile.LOW
        assert h.home_bank is None
        assert h.peers == []


class TestHouseholdBalances:
    def test_coin_fraction(self):
        h = _make_household()
        h.bank_balance = 75.0
        h.coin_balance = 25.0
        assert h.coin_fraction == pytest.approx(0.25)
        assert h.total_balance == pytest.approx(100.0)

    def test_coin_fraction_empty_portfolio(self):
        h = _make_household()
        h.bank_balance = 0.0
        h.coin_balance = 0.0
        assert h.coin_fraction == 0.0

    def test_balance_on_and_adjust(self):
        h = _make_household()
        h.bank_balance = 100.0
        h.coin_balance = 10.0
        h.adjust_balance(Rail.COIN, 5.0)
        h.adjust_balance(Rail.BANK, -20.0)
        assert h.balance_on(Rail.COIN) == pytest.approx(15.0)
        assert h.balance_on(Rail.BANK) == pytest.approx(80.0)


class TestBank:
    def test_initial_state(self):
        bank = _make_bank(bank_initial_size=3.0)
        assert bank.reserves == 0.0
        assert bank.initial_reserves == 0.0
        assert bank.display_size == 3.0

    def test_health_ratio_defaults_to_one_without_baseline(self):
        bank = _make_bank()
        bank.reserves = 50.0
        assert bank.health_ratio == 1.0

    def test_health_ratio_after_snapshot(self):
        bank = _make_bank()
        bank.reserves = 200.0
        bank.snapshot_reserves()
        bank.reserves = 150.0
        assert bank.initial_reserves == 200.0
        assert bank.health_ratio == pytest.approx(0.75)
