"""
Vault Actions - What a test may ask the vault to do.

Payloads are plain frozen dataclasses. Tokens appear as SymToken
fields, so the default structural scan finds them.
"""

from __future__ import annotations
from dataclasses import dataclass

from ...core.symbolics import SymToken


@dataclass(frozen=True)
class Mint:
    """Mint `amount` of a brand-new token into `wallet`."""
    wallet: str
    amount: int


@dataclass(frozen=True)
class Transfer:
    source: str
    target: str
    token: SymToken
    amount: int


@dataclass(frozen=True)
class Lock:
    """Lock funds in the vault for `duration` slots."""
    wallet: str
    token: SymToken
    amount: int
    duration: int


@dataclass(frozen=True)
class Burn:
    wallet: str
    token: SymToken
    amount: int
