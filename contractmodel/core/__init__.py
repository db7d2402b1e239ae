"""
Core - Model state, action algebra and the test-generation primitives.

The core is the part of the test generator that:
1. Threads ModelState through a run
2. Evaluates model actions with the Spec evaluator
3. Decides admissibility of actions
4. Generates and shrinks actions
5. Translates sequences to and from the engine's representation
"""

from .symbolics import SymToken, Value, collect_symtokens, value_add, value_negate, value_of
from .state import ModelState
from .action import ActionKind, ContractAction, WaitUntil, ModelAction
from .spec import Spec, run_spec, next_model_state, creates_tokens
from .model import ContractModel
from .precondition import PreconditionViolation, admissible
from .action_generator import generate, frequency
from .shrinker import shrink, shrink_integral
from .state_machine import ContractStateModel
from .sequence import (
    Act,
    Actions,
    ActWaitUntil,
    Bind,
    NoBind,
    from_external,
    generate_actions,
    shrink_actions,
    to_external,
    validate_actions,
)

__all__ = [
    "SymToken",
    "Value",
    "collect_symtokens",
    "value_add",
    "value_negate",
    "value_of",
    "ModelState",
    "ActionKind",
    "ContractAction",
    "WaitUntil",
    "ModelAction",
    "Spec",
    "run_spec",
    "next_model_state",
    "creates_tokens",
    "ContractModel",
    "PreconditionViolation",
    "admissible",
    "generate",
    "frequency",
    "shrink",
    "shrink_integral",
    "ContractStateModel",
    "Act",
    "Actions",
    "ActWaitUntil",
    "Bind",
    "NoBind",
    "from_external",
    "generate_actions",
    "shrink_actions",
    "to_external",
    "validate_actions",
]
