"""
Action System - The closed set of step kinds.

Actions are either:
1. Contract actions: a user-supplied payload from the model
2. Wait actions: the built-in advance of logical time to a target slot

Every contract action records whether evaluating it introduces new
symbolic tokens. The flag is computed by dry-running the model,
never inferred from the payload.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


class ActionKind(Enum):
    """Kinds of steps in a sequence."""
    CONTRACT = "contract"
    WAIT_UNTIL = "wait_until"


@dataclass(frozen=True)
class ContractAction:
    """A model action, tagged with whether it creates tokens."""
    creates_tokens: bool
    action: Any

    kind = ActionKind.CONTRACT

    def __str__(self) -> str:
        return repr(self.action)


@dataclass(frozen=True)
class WaitUntil:
    """Advance logical time to `slot`."""
    slot: int

    kind = ActionKind.WAIT_UNTIL

    def __str__(self) -> str:
        return f"WaitUntil {self.slot}"


ModelAction = Union[ContractAction, WaitUntil]
