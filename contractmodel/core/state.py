"""
Model State - The record threaded through generation, preconditions and shrinking.

Design principles:
- One instance per candidate run, created by ModelState.initial()
- Immutable-friendly: evaluation works on a clone, never the input
- Model-agnostic: the contract's own state is an opaque field
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from typing import Any
from copy import deepcopy

from .symbolics import SymToken, Value

INITIAL_SLOT = 1


@dataclass
class ModelState:
    """
    Complete model state at one point of a run.

    current_slot never decreases. sym_tokens only grows during a
    forward pass. Once assertions_ok is False it stays False until a
    new run starts from initial().
    """
    current_slot: int = INITIAL_SLOT

    # Ledger effects predicted by the model
    balance_changes: dict[str, Value] = field(default_factory=dict)  # wallet -> delta
    minted: Value = field(default_factory=dict)

    # Assertions recorded during evaluation
    assertions: list[tuple[str, bool]] = field(default_factory=list)
    assertions_ok: bool = True

    # Tokens known to exist so far
    sym_tokens: frozenset[SymToken] = field(default_factory=frozenset)

    # The user's domain state
    contract_state: Any = None

    @classmethod
    def initial(cls, contract_state: Any) -> ModelState:
        """Fresh state for the start of a run."""
        return cls(contract_state=contract_state)

    def balance_change(self, wallet: str) -> Value:
        """Accumulated balance delta of a wallet (empty if untouched)."""
        return self.balance_changes.get(wallet, {})

    @property
    def failed_assertions(self) -> list[str]:
        return [message for message, ok in self.assertions if not ok]

    def _copy_with(self, **kwargs) -> ModelState:
        """Create a shallow copy with some fields replaced."""
        return replace(self, **kwargs)

    def clone(self) -> ModelState:
        """Deep copy the state."""
        return deepcopy(self)
