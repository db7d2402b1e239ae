"""
Action sequences - The model-side view of a test case.

Provides:
- Act variants (Bind, NoBind, ActWaitUntil) and the Actions container
- Translation to and from the engine's StateModelActions
- An in-process builder, validator and shrinker for whole sequences

Bind and NoBind carry the same action. Bind only means that later
steps may refer to the tokens this step creates, and it is rendered
with its variable.
"""

from __future__ import annotations
import random
from dataclasses import dataclass, field
from typing import Any, Union

from loguru import logger

from ..state_model import Var, Step, StateModelActions
from .action import ActionKind, ContractAction, WaitUntil, ModelAction
from .model import ContractModel
from .precondition import PreconditionViolation, unknown_symtokens
from .state import ModelState
from .state_machine import ContractStateModel


@dataclass(frozen=True)
class Bind:
    """A contract action whose result later steps may reference."""
    var: Var
    action: Any

    def to_model_action(self) -> ModelAction:
        return ContractAction(True, self.action)

    def __str__(self) -> str:
        return f"tok{self.var.index} := {self.action!r}"


@dataclass(frozen=True)
class NoBind:
    """A contract action nothing later refers to."""
    var: Var
    action: Any

    def to_model_action(self) -> ModelAction:
        return ContractAction(False, self.action)

    def __str__(self) -> str:
        return repr(self.action)


@dataclass(frozen=True)
class ActWaitUntil:
    var: Var
    slot: int

    def to_model_action(self) -> ModelAction:
        return WaitUntil(self.slot)

    def __str__(self) -> str:
        return f"WaitUntil {self.slot}"


Act = Union[Bind, NoBind, ActWaitUntil]


@dataclass
class Actions:
    """
    A test case: ordered acts plus generation diagnostics.

    rejected lists the names of actions discarded during generation,
    size is the engine's size-control value.
    """
    acts: list[Act] = field(default_factory=list)
    rejected: list[str] = field(default_factory=list)
    size: int = 0

    def __len__(self) -> int:
        return len(self.acts)

    def __iter__(self):
        return iter(self.acts)

    def __str__(self) -> str:
        if not self.acts:
            return "Actions []"
        return "Actions \n [" + ",\n  ".join(str(act) for act in self.acts) + "]"


def to_act(var: Var, action: ModelAction) -> Act | None:
    """Classify one engine step by its kind; None when the kind is not ours."""
    kind = getattr(action, "kind", None)
    if kind is ActionKind.CONTRACT:
        return Bind(var, action.action) if action.creates_tokens else NoBind(var, action.action)
    if kind is ActionKind.WAIT_UNTIL:
        return ActWaitUntil(var, action.slot)
    return None


def to_external(actions: Actions) -> StateModelActions:
    """Engine representation of `actions`. The rejected names are not carried."""
    steps = [Step(act.var, act.to_model_action()) for act in actions.acts]
    return StateModelActions(steps=steps, rejected=[], size=actions.size)


def from_external(external: StateModelActions) -> Actions:
    """Model representation of an engine sequence. Unrecognized steps are dropped."""
    acts = []
    for step in external.steps:
        act = to_act(step.var, step.action)
        if act is None:
            logger.debug("Dropping unrecognized step {}", step)
            continue
        acts.append(act)
    return Actions(acts=acts, rejected=list(external.rejected), size=external.size)


def generate_actions(
    model: ContractModel,
    rng: random.Random,
    size: int | None = None,
) -> Actions:
    """
    Build a random admissible sequence of up to `size` steps.

    Inadmissible candidates are discarded and their names recorded.
    Generation stops early after settings.max_discards consecutive
    discards.
    """
    machine = ContractStateModel(model)
    if size is None:
        size = model.settings.default_size

    state = machine.initial_state()
    steps: list[Step] = []
    rejected: list[str] = []
    discards = 0

    while len(steps) < size:
        action = machine.arbitrary_action(state, rng)
        if not machine.precondition(state, action):
            rejected.append(machine.action_name(action))
            discards += 1
            if discards >= model.settings.max_discards:
                logger.warning(
                    "Stopping generation after {} consecutive discards at step {}",
                    discards, len(steps),
                )
                break
            continue

        discards = 0
        var = Var(len(steps) + 1)
        state, _ = machine.next_state(state, action, var)
        steps.append(Step(var, action))

    logger.debug("Generated {} steps, {} rejected", len(steps), len(rejected))
    return from_external(StateModelActions(steps=steps, rejected=rejected, size=size))


def validate_actions(model: ContractModel, actions: Actions) -> ModelState:
    """
    Replay an explicitly constructed sequence from the initial state.

    Returns the final state. Raises PreconditionViolation at the first
    inadmissible step.
    """
    machine = ContractStateModel(model)
    state = machine.initial_state()
    for index, act in enumerate(actions.acts):
        action = act.to_model_action()
        if not machine.precondition(state, action):
            if isinstance(action, ContractAction):
                logger.warning(
                    "Step {} ({}) is inadmissible, unknown tokens: {}",
                    index, action, sorted(unknown_symtokens(model, state, action)),
                )
            raise PreconditionViolation(index, action, state)
        state, _ = machine.next_state(state, action, act.var)
    return state


def is_well_formed(model: ContractModel, actions: Actions) -> bool:
    """Whether every step of `actions` is admissible when replayed in order."""
    machine = ContractStateModel(model)
    state = machine.initial_state()
    for act in actions.acts:
        action = act.to_model_action()
        if not machine.precondition(state, action):
            return False
        state, _ = machine.next_state(state, action, act.var)
    return True


def shrink_actions(model: ContractModel, actions: Actions) -> list[Actions]:
    """
    Well-formed simplifications of a sequence, simplest first.

    First every single-step removal, then every single-step
    replacement by a shrink candidate of that step.
    """
    machine = ContractStateModel(model)
    external = to_external(actions)
    steps = external.steps
    candidates: list[list[Step]] = []

    for index in range(len(steps)):
        candidates.append(steps[:index] + steps[index + 1:])

    state = machine.initial_state()
    for index, step in enumerate(steps):
        for smaller in machine.shrink_action(state, step.action):
            candidates.append(steps[:index] + [Step(step.var, smaller)] + steps[index + 1:])
        state, _ = machine.next_state(state, step.action, step.var)

    shrunk = []
    for candidate_steps in candidates:
        candidate = from_external(
            StateModelActions(steps=candidate_steps, rejected=[], size=external.size)
        )
        if is_well_formed(model, candidate):
            shrunk.append(candidate)
    logger.debug("{} of {} shrink candidates are well formed", len(shrunk), len(candidates))
    return shrunk
