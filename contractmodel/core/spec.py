"""
Spec Evaluator - Runs model code against a private copy of the state.

The evaluator is the single point of model state mutation.
Model authors describe the effect of an action by calling methods on
a Spec object; run_spec() turns that description into:
- the next ModelState
- the set of symbolic tokens the description introduced

Design principles:
- Pure function: (body, var, state) -> (new_state, new_tokens)
- Never touches a real ledger
- The input state is never mutated
"""

from __future__ import annotations
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from ..state_model import Var
from .action import ContractAction, WaitUntil, ModelAction
from .state import ModelState
from .symbolics import SymToken, Value, value_add, value_negate

if TYPE_CHECKING:
    from .model import ContractModel

DRY_RUN_VAR = Var(0)


class Spec:
    """
    Handle passed to ContractModel.next_state and next_reactive_state.

    Reads see the state as modified so far by the current run.
    """

    def __init__(self, model: ContractModel, var: Var, state: ModelState):
        self.model = model
        self.var = var
        self.state = state
        self.new_tokens: list[SymToken] = []

    # Reading

    @property
    def current_slot(self) -> int:
        return self.state.current_slot

    @property
    def contract_state(self) -> Any:
        return self.state.contract_state

    # Contract state

    def set_contract_state(self, contract_state: Any) -> None:
        self.state.contract_state = contract_state

    def modify_contract_state(self, fn: Callable[[Any], Any]) -> None:
        """Replace the contract state with fn(contract_state)."""
        self.state.contract_state = fn(self.state.contract_state)

    # Tokens

    def create_token(self, name: str) -> SymToken:
        """
        Introduce a symbolic token owned by the current step.

        The token becomes referenceable by later actions once the
        step has been evaluated.
        """
        token = SymToken(self.var, name)
        self.new_tokens.append(token)
        return token

    # Ledger effects

    def mint(self, value: Value) -> None:
        self.state.minted = value_add(self.state.minted, value)

    def burn(self, value: Value) -> None:
        self.mint(value_negate(value))

    def deposit(self, wallet: str, value: Value) -> None:
        """Credit `value` to a wallet."""
        changes = self.state.balance_changes
        changes[wallet] = value_add(changes.get(wallet, {}), value)

    def withdraw(self, wallet: str, value: Value) -> None:
        """Debit `value` from a wallet."""
        self.deposit(wallet, value_negate(value))

    def transfer(self, source: str, target: str, value: Value) -> None:
        self.withdraw(source, value)
        self.deposit(target, value)

    # Assertions

    def assert_spec(self, message: str, ok: bool) -> None:
        """Record an assertion; a failure poisons the rest of the run."""
        self.state.assertions.append((message, bool(ok)))
        if not ok:
            self.state.assertions_ok = False

    # Time

    def wait(self, slots: int) -> None:
        """
        Advance time by `slots`.

        The reactive hook runs once for the target slot before the
        clock moves.
        """
        if slots < 0:
            raise ValueError(f"Cannot wait a negative number of slots: {slots}")
        if slots == 0:
            return
        target = self.state.current_slot + slots
        self.model.next_reactive_state(self, target)
        self.state.current_slot = target

    def wait_until(self, slot: int) -> None:
        """Wait until `slot`. No effect if that slot has already been reached."""
        now = self.state.current_slot
        if now < slot:
            self.wait(slot - now)


def run_spec(
    model: ContractModel,
    body: Callable[[Spec], Any],
    var: Var,
    state: ModelState,
) -> tuple[ModelState, frozenset[SymToken]]:
    """
    Evaluate `body` against a copy of `state`.

    Returns the next state, with the new tokens added to sym_tokens,
    and the new tokens themselves.
    """
    spec = Spec(model, var, state.clone())
    body(spec)
    new_tokens = frozenset(spec.new_tokens)
    next_state = spec.state._copy_with(sym_tokens=spec.state.sym_tokens | new_tokens)
    return next_state, new_tokens


def next_model_state(
    model: ContractModel,
    state: ModelState,
    action: ModelAction,
    var: Var,
) -> tuple[ModelState, frozenset[SymToken]]:
    """Evaluate one step of a sequence."""
    if isinstance(action, ContractAction):
        return run_spec(model, lambda spec: model.next_state(spec, action.action), var, state)
    if isinstance(action, WaitUntil):
        return run_spec(model, lambda spec: spec.wait_until(action.slot), var, state)
    raise TypeError(f"Not a model action: {action!r}")


def creates_tokens(model: ContractModel, state: ModelState, action: Any) -> bool:
    """Check if a contract action introduces new symbolic tokens in `state`."""
    _, new_tokens = run_spec(
        model, lambda spec: model.next_state(spec, action), DRY_RUN_VAR, state
    )
    return bool(new_tokens)


def slot_after(model: ContractModel, state: ModelState, action: Any) -> int:
    """The slot a contract action would advance time to."""
    next_state, _ = run_spec(
        model, lambda spec: model.next_state(spec, action), DRY_RUN_VAR, state
    )
    return next_state.current_slot
