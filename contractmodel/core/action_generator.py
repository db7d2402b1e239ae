"""
Action Generator - Random construction of the next action.

The action generator is used by:
1. The engine, to grow random sequences one step at a time
2. generate_actions(), the in-process sequence builder

Design: generation does not check admissibility. Callers re-check
every candidate and regenerate on failure.
"""

from __future__ import annotations
import math
import random
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, TypeVar

from .action import ContractAction, WaitUntil, ModelAction
from .spec import creates_tokens
from .state import ModelState

if TYPE_CHECKING:
    from .model import ContractModel

T = TypeVar("T")


def frequency(choices: Sequence[tuple[int, Callable[[], T]]], rng: random.Random) -> T:
    """
    Pick one of `choices` with probability proportional to its weight and run it.

    Only the chosen thunk is called.
    """
    total = sum(weight for weight, _ in choices if weight > 0)
    if total <= 0:
        raise ValueError("frequency: no choice has a positive weight")

    pick = rng.randrange(total)
    for weight, thunk in choices:
        if weight <= 0:
            continue
        if pick < weight:
            return thunk()
        pick -= weight
    raise AssertionError("unreachable")


def contract_action(model: ContractModel, state: ModelState, action) -> ContractAction:
    """Package a model action with its freshly computed creates_tokens flag."""
    return ContractAction(creates_tokens(model, state, action), action)


def generate(model: ContractModel, state: ModelState, rng: random.Random) -> ModelAction:
    """Generate a random next action: usually a contract action, sometimes a wait."""
    p = model.wait_probability(state)

    def gen_contract() -> ModelAction:
        return contract_action(model, state, model.arbitrary_action(state, rng))

    def gen_wait() -> ModelAction:
        return WaitUntil(state.current_slot + model.arbitrary_wait_interval(state, rng))

    return frequency(
        [
            (math.floor(100.0 * (1.0 - p)), gen_contract),
            (math.floor(100.0 * p), gen_wait),
        ],
        rng,
    )
