"""
Shrinker - Simpler alternatives to a single action.

Candidates are not guaranteed to be admissible; the caller re-checks
each one. Two families exist:
- WaitUntil candidates, always strictly after the current slot
- the model's own shrinks, re-tagged with a recomputed creates_tokens
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .action import ContractAction, WaitUntil, ModelAction
from .action_generator import contract_action
from .spec import slot_after
from .state import ModelState

if TYPE_CHECKING:
    from .model import ContractModel


def shrink_integral(n: int) -> list[int]:
    """
    Integer shrink candidates, simplest first.

    Negative numbers first try their absolute value; then 0, and
    values halving the distance to n, all strictly smaller than n in
    magnitude.
    """
    candidates: list[int] = []
    if n < 0:
        candidates.append(-n)

    step = n
    towards = [0]
    while True:
        step = abs(step) // 2 * (1 if step > 0 else -1)
        if step == 0:
            break
        towards.append(n - step)

    for candidate in towards:
        if abs(candidate) < abs(n) and candidate not in candidates:
            candidates.append(candidate)
    return candidates


def _waits_after(state: ModelState, slots: list[int]) -> list[ModelAction]:
    return [WaitUntil(slot) for slot in slots if slot > state.current_slot]


def shrink(model: ContractModel, state: ModelState, action: ModelAction) -> list[ModelAction]:
    """Shrink candidates for `action` in `state`."""
    if isinstance(action, ContractAction):
        # Drop the action but keep the time it would have taken
        target = slot_after(model, state, action.action)
        waits = _waits_after(state, [target] + shrink_integral(target))
        shrunk = [
            contract_action(model, state, smaller)
            for smaller in model.shrink_action(state, action.action)
        ]
        return waits + shrunk

    if isinstance(action, WaitUntil):
        return _waits_after(state, shrink_integral(action.slot))

    return []
