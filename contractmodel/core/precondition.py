"""
Token-safety precondition - Decides whether an action may follow a state.

A contract action is admissible when:
1. no assertion has failed so far in the run
2. the model's own precondition holds
3. every symbolic token it references already exists

The checks run in that order. The token check comes last so a model
precondition is never preceded by it; model authors may write their
preconditions relying on that sequencing.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from .action import ContractAction, WaitUntil, ModelAction
from .state import ModelState

if TYPE_CHECKING:
    from .model import ContractModel


class PreconditionViolation(Exception):
    """Raised when an explicitly constructed sequence contains an inadmissible step."""

    def __init__(self, index: int, action: ModelAction, state: ModelState):
        self.index = index
        self.action = action
        self.slot = state.current_slot
        super().__init__(
            f"Step {index} ({action}) violates its precondition at slot {state.current_slot}"
        )


def admissible(model: ContractModel, state: ModelState, action: ModelAction) -> bool:
    """Check whether `action` may be taken in `state`."""
    if isinstance(action, ContractAction):
        return (
            state.assertions_ok
            and model.precondition(state, action.action)
            and model.get_all_symtokens(action.action) <= state.sym_tokens
        )
    if isinstance(action, WaitUntil):
        return action.slot > state.current_slot
    return False


def unknown_symtokens(model: ContractModel, state: ModelState, action: ContractAction):
    """Tokens referenced by `action` that do not exist yet in `state`."""
    return model.get_all_symtokens(action.action) - state.sym_tokens
