"""Aggregate deposit / coin totals and bank display sizes."""

from .agents import Bank, Household


class BankStateTracker:
    """Owns the system-wide totals, recomputed from scratch every tick.

    Totals are exact sums over all households rather than incrementally
    maintained, so they never drift from household state.
    """

    def __init__(self):
        self.total_deposits: float = 0.0
        self.total_coin_balance: float = 0.0

    def recompute(self, households: list[Household],
                  banks: list[Bank]) -> tuple[float, float]:
        """Resum both totals and rescale every bank's display size.

        Deposits are floored at zero. Each bank's size scales with the
        system-wide deposits over that bank's own initial reserves.
        """
        deposits = sum(h.bank_balance for h in households)
        self.total_deposits = max(0.0, deposits)
        self.total_coin_balance = sum(h.coin_balance for h in households)

        for bank in banks:
            if bank.initial_reserves != 0:
                bank.display_size = (bank.initial_size * self.total_deposits
                                     / bank.initial_reserves)
        return self.total_deposits, self.total_coin_balance

    @property
    def combined_total(self) -> float:
        return self.total_deposits + self.total_coin_balance

    @property
    def coin_share(self) -> float:
        """Coin balance as a share of all money, 0.0 when there is none."""
        total = self.combined_total
        if total <= 0:
            return 0.0
        return self.total_coin_balance / total
