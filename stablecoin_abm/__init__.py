"""Bank Deposit vs Stablecoin Adoption ABM."""

__version__ = "0.1.0"

from .agents import Bank, Household, Rail, RiskProfile
from .bank_state import BankStateTracker
from .config import DEFAULT_PARAMS, SLIDER_RANGES, validate_params
from .learning import update_perceived_utility
from .model import AdoptionModel, DriverState
from .network import build_peer_network
from .reallocation import (
    coin_score,
    move_funds,
    peer_pressure,
    reallocate,
    reallocation_round,
)
from .transactions import choose_rail, execute_transfer, transaction_round
from .wages import accrue_wages

__all__ = [
    "AdoptionModel",
    "Bank",
    "BankStateTracker",
    "DEFAULT_PARAMS",
    "DriverState",
    "Household",
    "Rail",
    "RiskProfile",
    "SLIDER_RANGES",
    "accrue_wages",
    "build_peer_network",
    "choose_rail",
    "coin_score",
    "execute_transfer",
    "move_funds",
    "peer_pressure",
    "reallocate",
    "reallocation_round",
    "transaction_round",
    "update_perceived_utility",
    "validate_params",
]
