"""AdoptionModel — orchestrator for the deposit vs stablecoin adoption ABM."""

import logging
from enum import Enum, auto

import agentpy as ap
import numpy as np

from .agents import Bank, Household, RiskProfile
from .bank_state import BankStateTracker
from .config import DEFAULT_PARAMS, validate_params
from .network import build_peer_network
from .reallocation import reallocation_round
from .sampling import sample_without_replacement
from .transactions import transaction_round
from .wages import accrue_wages

logger = logging.getLogger(__name__)


class DriverState(Enum):
    IDLE = auto()
    RUNNING = auto()
    STOPPED = auto()


class AdoptionModel(ap.Model):
    """Households choosing between bank deposits and a stablecoin.

    Simulation loop per tick:
      1. Wage accrual on the bank rail
      2. Transaction round (with learning for each paying sender)
      3. Portfolio reallocation for a sample of households
      4. Bank state recompute (totals, display sizes)
      5. Record observables; stop once deposits + coin exceed the ceiling
    """

    def __init__(self, parameters=None, **kwargs):
        super().__init__({**DEFAULT_PARAMS, **(parameters or {})}, **kwargs)

    def setup(self):
        validate_params(self.p)

        # Random generator; unseeded unless the caller passes 'seed'
        # (agentpy then draws and reports its own seed)
        self.rng = np.random.default_rng(self.p.get('seed', None))

        self.banks = ap.AgentList(self, int(self.p['n_banks']), Bank)
        self.households = ap.AgentList(self, int(self.p['n_households']), Household)
        self._initialize_households()
        self._open_bank_accounts()

        self.network = build_peer_network(
            list(self.households), int(self.p['network_degree']), self.rng)

        self.bank_state = BankStateTracker()
        self.bank_state.recompute(list(self.households), list(self.banks))

        self.transfers = []
        self.reallocations = []
        self.ceiling_reached = False

        logger.info("Set up %d households, %d banks, %d network links",
                    len(self.households), len(self.banks),
                    self.network.number_of_edges())

    def _initialize_households(self):
        """Draw initial balances, home banks and the 50/50 risk split."""
        p = self.p
        mean = p['initial_deposits']
        sigma = abs(mean) * p['deposit_sigma_ratio']

        for household in self.households:
            household.bank_balance = float(self.rng.normal(mean, sigma))
            household.coin_balance = 0.0
            household.perceived_coin_utility = p['initial_coin_utility']
            if self.banks:
                household.home_bank = self.banks[int(self.rng.integers(len(self.banks)))]

        n_high = len(self.households) // 2
        high_risk = {h.id for h in sample_without_replacement(
            self.households, n_high, self.rng)}
        for household in self.households:
            if household.id in high_risk:
                household.risk_profile = RiskProfile.HIGH
                lo, hi = p['high_risk_propensity']
            else:
                household.risk_profile = RiskProfile.LOW
                lo, hi = p['low_risk_propensity']
            household.adoption_propensity = float(self.rng.uniform(lo, hi))

    def _open_bank_accounts(self):
        """Seed each bank's reserves with its households' deposits."""
        for bank in self.banks:
            bank.reserves = sum(h.bank_balance for h in self.households
                                if h.home_bank is bank)
            bank.snapshot_reserves()

    def step(self):
        """Execute one tick."""
        p = self.p
        households = list(self.households)

        # 1. Wages
        accrue_wages(households, p['unemployment_rate'], p['yearly_salary'],
                     self.rng, days_per_year=p['days_per_year'])

        # 2. Payments (learning happens per completed transfer)
        self.transfers = transaction_round(
            households, int(p['transactions_per_tick']), p, self.rng)

        # 3. Reallocation sees post-transaction balances
        self.reallocations = reallocation_round(households, p, self.rng)

        # 4. Totals
        self.bank_state.recompute(households, list(self.banks))

        logger.debug("t=%d transfers=%d reallocations=%d deposits=%.2f coin=%.2f",
                     self.t, len(self.transfers), len(self.reallocations),
                     self.bank_state.total_deposits,
                     self.bank_state.total_coin_balance)

    def update(self):
        """Record observables and apply the ceiling stop."""
        n = len(self.households)
        threshold = self.p['peer_adoption_threshold']
        adopters = sum(1 for h in self.households if h.coin_fraction > threshold)

        self.record('total_deposits', self.bank_state.total_deposits)
        self.record('total_coin_balance', self.bank_state.total_coin_balance)
        self.record('coin_share', self.bank_state.coin_share)
        self.record('adoption_rate', adopters / n if n else 0.0)
        self.record('mean_coin_utility',
                    float(np.mean([h.perceived_coin_utility for h in self.households]))
                    if n else 0.0)
        self.record('transactions', len(self.transfers))
        self.record('fees_burned', sum(t.fee for t in self.transfers))
        self.record('reallocations', len(self.reallocations))

        if self.bank_state.combined_total > self.p['stop_ceiling']:
            self.ceiling_reached = True
            logger.info("Stopping at t=%d: total money %.2f exceeds ceiling %.2f",
                        self.t, self.bank_state.combined_total,
                        self.p['stop_ceiling'])
            self.stop()

    def end(self):
        """Report final aggregates."""
        self.report('final_total_deposits', self.bank_state.total_deposits)
        self.report('final_total_coin_balance', self.bank_state.total_coin_balance)
        self.report('final_coin_share', self.bank_state.coin_share)
        self.report('ticks', self.t)
        self.report('ceiling_reached', self.ceiling_reached)

    @property
    def total_deposits(self) -> float:
        return self.bank_state.total_deposits

    @property
    def total_coin_balance(self) -> float:
        return self.bank_state.total_coin_balance

    @property
    def state(self) -> DriverState:
        if 'bank_state' not in self.__dict__:
            return DriverState.IDLE
        if getattr(self, 'running', False):
            return DriverState.RUNNING
        return DriverState.STOPPED
