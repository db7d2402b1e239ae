"""
Vault State - The contract state of the vault model.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from ...core.symbolics import SymToken

WALLETS = ["w1", "w2", "w3"]


@dataclass
class LockEntry:
    """Funds held by the vault until release_slot."""
    wallet: str
    token: SymToken
    amount: int
    release_slot: int


@dataclass
class VaultState:
    """
    What the vault knows about wallet holdings and locks.

    holdings only counts funds in wallets; locked funds live in locks.
    """
    holdings: dict[str, dict[SymToken, int]] = field(default_factory=dict)
    locks: list[LockEntry] = field(default_factory=list)

    def holding(self, wallet: str, token: SymToken) -> int:
        return self.holdings.get(wallet, {}).get(token, 0)

    def credit(self, wallet: str, token: SymToken, amount: int) -> None:
        wallet_holdings = self.holdings.setdefault(wallet, {})
        wallet_holdings[token] = wallet_holdings.get(token, 0) + amount

    def debit(self, wallet: str, token: SymToken, amount: int) -> None:
        self.credit(wallet, token, -amount)

    def funded(self) -> list[tuple[str, SymToken, int]]:
        """Every (wallet, token, amount) with a positive holding, in stable order."""
        return [
            (wallet, token, amount)
            for wallet in sorted(self.holdings)
            for token, amount in sorted(self.holdings[wallet].items())
            if amount > 0
        ]
