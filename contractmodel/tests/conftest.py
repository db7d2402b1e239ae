"""
Pytest fixtures for contractmodel tests.
"""

from __future__ import annotations
import random
from dataclasses import dataclass, field

import pytest

from ..core.model import ContractModel
from ..core.shrinker import shrink_integral
from ..core.symbolics import SymToken, value_of
from ..models.vault import VaultModel


@dataclass(frozen=True)
class Create:
    name: str = "coin"


@dataclass(frozen=True)
class Use:
    token: SymToken


@dataclass(frozen=True)
class Sleep:
    slots: int


@dataclass(frozen=True)
class Fail:
    pass


@dataclass(frozen=True)
class Noop:
    pass


@dataclass
class ToyState:
    reactive_slots: list[int] = field(default_factory=list)
    created: list[SymToken] = field(default_factory=list)


class ToyModel(ContractModel):
    """
    Small model with fully controllable behaviour.

    allow is what the model precondition returns for every action.
    """

    def __init__(self, allow: bool = True, settings=None):
        super().__init__(settings)
        self.allow = allow
        self.precondition_calls = 0

    def initial_contract_state(self) -> ToyState:
        return ToyState()

    def arbitrary_action(self, state, rng):
        created = state.contract_state.created
        options = [Create(), Noop(), Sleep(rng.randint(1, 5))]
        if created:
            options.append(Use(rng.choice(created)))
        return rng.choice(options)

    def precondition(self, state, action):
        self.precondition_calls += 1
        return self.allow

    def next_state(self, spec, action):
        toy = spec.contract_state
        if isinstance(action, Create):
            token = spec.create_token(action.name)
            spec.mint(value_of(token, 1))
            toy.created.append(token)
        elif isinstance(action, Sleep):
            spec.wait(action.slots)
        elif isinstance(action, Fail):
            spec.assert_spec("always fails", False)
        elif isinstance(action, Use):
            spec.assert_spec("token is known", action.token in toy.created)

    def next_reactive_state(self, spec, slot):
        spec.contract_state.reactive_slots.append(slot)

    def shrink_action(self, state, action):
        if isinstance(action, Sleep):
            return [Sleep(n) for n in shrink_integral(action.slots) if n >= 0]
        if isinstance(action, Create):
            return [Noop()]
        return []


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture
def toy_model() -> ToyModel:
    return ToyModel()


@pytest.fixture
def vault_model() -> VaultModel:
    return VaultModel()
