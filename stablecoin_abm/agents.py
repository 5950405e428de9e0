"""Household and bank agents."""

from enum import Enum, auto

import agentpy as ap


class Rail(Enum):
    """Payment medium a transfer or reallocation runs through."""
    BANK = auto()
    COIN = auto()


class RiskProfile(Enum):
    LOW = auto()
    HIGH = auto()


class Bank(ap.Agent):
    """Institution holding the deposits of its linked households as reserves."""

    def setup(self):
        p = self.model.p
        self.reserves: float = 0.0
        self.initial_reserves: float = 0.0
        self.initial_size: float = p.get('bank_initial_size', 2.0)
        self.display_size: float = self.initial_size

    def snapshot_reserves(self) -> None:
        """Freeze the current reserves as the health baseline."""
        self.initial_reserves = self.reserves

    @property
    def health_ratio(self) -> float:
        """Current over initial reserves, 1.0 when there is no baseline."""
        if self.initial_reserves == 0:
            return 1.0
        return self.reserves / self.initial_reserves


class Household(ap.Agent):
    """Consumer holding a bank balance and a stablecoin balance."""

    def setup(self):
        p = self.model.p
        self.bank_balance: float = p.get('initial_deposits', 100.0)
        self.coin_balance: float = 0.0
        self.perceived_coin_utility: float = p.get('initial_coin_utility', 0.2)
        self.adoption_propensity: float = 0.5
        self.risk_profile: RiskProfile = RiskProfile.LOW
        self.home_bank: Bank | None = None
        self.peers: list['Household'] = []

    @property
    def total_balance(self) -> float:
        return self.bank_balance + self.coin_balance

    @property
    def coin_fraction(self) -> float:
        """Share of holdings on the coin rail (0.0 for an empty portfolio)."""
        total = self.total_balance
        if total == 0:
            return 0.0
        return self.coin_balance / total

    def balance_on(self, rail: Rail) -> float:
        return self.bank_balance if rail == Rail.BANK else self.coin_balance

    def adjust_balance(self, rail: Rail, delta: float) -> None:
        if rail == Rail.BANK:
            self.bank_balance += delta
        else:
            self.coin_balance += delta
