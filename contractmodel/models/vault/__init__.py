"""
Vault - Example contract model.

A vault contract where wallets mint their own tokens, pass them
around, burn them, and lock them for a number of slots.
Key mechanics:
- Minting creates a fresh symbolic token per step
- Transfers, locks and burns may only mention tokens minted earlier
- Locking takes one slot; locked funds come back when the lock expires

This module contains:
- Vault contract state
- Vault action types
- The vault ContractModel
"""

from .state import VaultState, LockEntry, WALLETS
from .actions import Mint, Transfer, Lock, Burn
from .model import VaultModel

__all__ = [
    "VaultState",
    "LockEntry",
    "WALLETS",
    "Mint",
    "Transfer",
    "Lock",
    "Burn",
    "VaultModel",
]
