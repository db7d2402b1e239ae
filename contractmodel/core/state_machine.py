"""
State machine facade - What the engine sees of a contract model.

Wraps a ContractModel and exposes the operations the engine drives
a sequence with, all in terms of ModelState and the action algebra.
"""

from __future__ import annotations
import random
from dataclasses import dataclass

from ..state_model import Var
from .action import ContractAction, WaitUntil, ModelAction
from .action_generator import generate
from .model import ContractModel
from .precondition import admissible
from .shrinker import shrink
from .spec import next_model_state
from .state import ModelState
from .symbolics import SymToken


@dataclass
class ContractStateModel:
    """The engine-facing state machine of one contract model."""
    model: ContractModel

    def initial_state(self) -> ModelState:
        return self.model.initial_state()

    def arbitrary_action(self, state: ModelState, rng: random.Random) -> ModelAction:
        return generate(self.model, state, rng)

    def precondition(self, state: ModelState, action: ModelAction) -> bool:
        return admissible(self.model, state, action)

    def next_state(
        self, state: ModelState, action: ModelAction, var: Var
    ) -> tuple[ModelState, frozenset[SymToken]]:
        return next_model_state(self.model, state, action, var)

    def shrink_action(self, state: ModelState, action: ModelAction) -> list[ModelAction]:
        return shrink(self.model, state, action)

    def action_name(self, action: ModelAction) -> str:
        if isinstance(action, ContractAction):
            return self.model.action_name(action.action)
        if isinstance(action, WaitUntil):
            return "WaitUntil"
        return type(action).__name__
