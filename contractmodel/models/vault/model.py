"""
Vault Model - ContractModel implementation for the vault contract.
"""

from __future__ import annotations
import random
from typing import TYPE_CHECKING, Any

from ...core.action_generator import frequency
from ...core.model import ContractModel
from ...core.shrinker import shrink_integral
from ...core.state import ModelState
from ...core.symbolics import value_of
from .actions import Mint, Transfer, Lock, Burn
from .state import VaultState, LockEntry, WALLETS

if TYPE_CHECKING:
    from ...core.spec import Spec

MAX_MINT = 100
MAX_LOCK_DURATION = 20
LOCK_COST_SLOTS = 1


class VaultModel(ContractModel):
    """
    Model of the vault contract.

    Minting is always possible. Transfers and locks need a wallet that
    holds enough of an existing token; an over-sized burn is admitted
    but fails its assertion.
    """

    def initial_contract_state(self) -> VaultState:
        return VaultState()

    # Generation

    def arbitrary_action(self, state: ModelState, rng: random.Random) -> Any:
        vault: VaultState = state.contract_state
        funded = vault.funded()

        def gen_mint():
            return Mint(rng.choice(WALLETS), rng.randint(1, MAX_MINT))

        if not funded:
            return gen_mint()

        def gen_transfer():
            wallet, token, amount = rng.choice(funded)
            target = rng.choice([w for w in WALLETS if w != wallet])
            return Transfer(wallet, target, token, rng.randint(1, amount))

        def gen_lock():
            wallet, token, amount = rng.choice(funded)
            return Lock(wallet, token, rng.randint(1, amount), rng.randint(1, MAX_LOCK_DURATION))

        def gen_burn():
            wallet, token, amount = rng.choice(funded)
            return Burn(wallet, token, rng.randint(1, amount))

        return frequency(
            [(2, gen_mint), (4, gen_transfer), (2, gen_lock), (1, gen_burn)],
            rng,
        )

    # Validity

    def precondition(self, state: ModelState, action: Any) -> bool:
        vault: VaultState = state.contract_state
        if isinstance(action, Mint):
            return action.wallet in WALLETS and action.amount > 0
        if isinstance(action, Transfer):
            return (
                action.source != action.target
                and action.target in WALLETS
                and 0 < action.amount <= vault.holding(action.source, action.token)
            )
        if isinstance(action, Lock):
            return (
                action.duration >= 1
                and 0 < action.amount <= vault.holding(action.wallet, action.token)
            )
        if isinstance(action, Burn):
            return action.amount > 0
        return False

    # Effects

    def next_state(self, spec: Spec, action: Any) -> None:
        vault: VaultState = spec.contract_state

        if isinstance(action, Mint):
            token = spec.create_token("coin")
            value = value_of(token, action.amount)
            spec.mint(value)
            spec.deposit(action.wallet, value)
            vault.credit(action.wallet, token, action.amount)

        elif isinstance(action, Transfer):
            spec.transfer(action.source, action.target, value_of(action.token, action.amount))
            vault.debit(action.source, action.token, action.amount)
            vault.credit(action.target, action.token, action.amount)

        elif isinstance(action, Lock):
            spec.withdraw(action.wallet, value_of(action.token, action.amount))
            vault.debit(action.wallet, action.token, action.amount)
            vault.locks.append(
                LockEntry(
                    wallet=action.wallet,
                    token=action.token,
                    amount=action.amount,
                    release_slot=spec.current_slot + action.duration,
                )
            )
            spec.wait(LOCK_COST_SLOTS)

        elif isinstance(action, Burn):
            # The contract refuses to burn more than the wallet holds
            covered = action.amount <= vault.holding(action.wallet, action.token)
            spec.assert_spec("burn never exceeds the wallet holding", covered)
            if covered:
                value = value_of(action.token, action.amount)
                spec.burn(value)
                spec.withdraw(action.wallet, value)
                vault.debit(action.wallet, action.token, action.amount)

    def next_reactive_state(self, spec: Spec, slot: int) -> None:
        """Release every lock that has expired by `slot`."""
        vault: VaultState = spec.contract_state
        remaining = []
        for entry in vault.locks:
            if entry.release_slot <= slot:
                spec.deposit(entry.wallet, value_of(entry.token, entry.amount))
                vault.credit(entry.wallet, entry.token, entry.amount)
            else:
                remaining.append(entry)
        vault.locks = remaining

    # Shrinking

    def shrink_action(self, state: ModelState, action: Any) -> list[Any]:
        amounts = [n for n in shrink_integral(action.amount) if n > 0]

        if isinstance(action, Mint):
            shrunk = [Mint(action.wallet, n) for n in amounts]
            if action.wallet != WALLETS[0]:
                shrunk.insert(0, Mint(WALLETS[0], action.amount))
            return shrunk
        if isinstance(action, Transfer):
            return [Transfer(action.source, action.target, action.token, n) for n in amounts]
        if isinstance(action, Lock):
            durations = [d for d in shrink_integral(action.duration) if d >= 1]
            return (
                [Lock(action.wallet, action.token, action.amount, d) for d in durations]
                + [Lock(action.wallet, action.token, n, action.duration) for n in amounts]
            )
        if isinstance(action, Burn):
            return [Burn(action.wallet, action.token, n) for n in amounts]
        return []
