"""
Tests for action sequences.

Tests:
- Translation to and from the engine representation
- Rendering
- Generation, validation and shrinking of whole sequences
"""

import random

import pytest

from ..config import GeneratorSettings
from ..state_model import Var, Step, StateModelActions
from ..core.action import ContractAction, WaitUntil
from ..core.precondition import PreconditionViolation
from ..core.sequence import (
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
from ..core.spec import next_model_state
from ..core.state_machine import ContractStateModel
from ..core.symbolics import SymToken
from .conftest import Create, Noop, ToyModel, Use


TOKEN = SymToken(Var(1), "coin")


@pytest.fixture
def sample_actions() -> Actions:
    return Actions(
        acts=[
            Bind(Var(1), Create()),
            ActWaitUntil(Var(2), 4),
            NoBind(Var(3), Use(TOKEN)),
        ],
        rejected=["Noop"],
        size=7,
    )


class TestExternal:
    """Tests for to_external / from_external."""

    def test_round_trip(self, sample_actions):
        restored = from_external(to_external(sample_actions))
        assert restored.acts == sample_actions.acts
        assert restored.size == sample_actions.size

    def test_forward_drops_rejected(self, sample_actions):
        external = to_external(sample_actions)
        assert external.rejected == []
        assert external.size == 7

    def test_forward_steps(self, sample_actions):
        external = to_external(sample_actions)
        assert external.steps == [
            Step(Var(1), ContractAction(True, Create())),
            Step(Var(2), WaitUntil(4)),
            Step(Var(3), ContractAction(False, Use(TOKEN))),
        ]

    def test_reverse_keeps_rejected(self):
        external = StateModelActions(steps=[], rejected=["Create", "Use"], size=3)
        assert from_external(external).rejected == ["Create", "Use"]

    def test_unrecognized_step_dropped(self):
        external = StateModelActions(
            steps=[
                Step(Var(1), ContractAction(False, Noop())),
                Step(Var(2), "not an action"),
                Step(Var(3), WaitUntil(9)),
            ],
        )
        actions = from_external(external)
        assert actions.acts == [NoBind(Var(1), Noop()), ActWaitUntil(Var(3), 9)]


class TestRendering:
    """Tests for str(Actions)."""

    def test_empty(self):
        assert str(Actions()) == "Actions []"

    def test_one_per_line(self, sample_actions):
        assert str(sample_actions) == (
            "Actions \n"
            " [tok1 := Create(name='coin'),\n"
            "  WaitUntil 4,\n"
            "  Use(token=tok1.coin)]"
        )


class TestGenerateActions:
    """Tests for generate_actions()."""

    def test_reaches_size(self, toy_model, rng):
        actions = generate_actions(toy_model, rng, 15)
        assert len(actions) == 15
        assert actions.size == 15

    def test_generated_sequence_is_valid(self, toy_model, rng):
        actions = generate_actions(toy_model, rng, 25)
        validate_actions(toy_model, actions)

    def test_time_and_tokens_monotone(self, toy_model, rng):
        actions = generate_actions(toy_model, rng, 30)
        state = toy_model.initial_state()

        for act in actions:
            previous = state
            state, _ = next_model_state(toy_model, state, act.to_model_action(), act.var)
            assert state.current_slot >= previous.current_slot
            assert state.sym_tokens >= previous.sym_tokens

    def test_bind_marks_token_creators(self, toy_model, rng):
        actions = generate_actions(toy_model, rng, 30)
        for act in actions:
            if isinstance(act, (Bind, NoBind)):
                assert isinstance(act, Bind) == isinstance(act.action, Create)

    def test_stops_after_discards(self, rng):
        model = ToyModel(
            allow=False,
            settings=GeneratorSettings(wait_probability=0.0, max_discards=5),
        )
        actions = generate_actions(model, rng, 10)

        assert len(actions) == 0
        assert len(actions.rejected) == 5
        assert set(actions.rejected) <= {"Create", "Noop", "Sleep"}

    def test_default_size(self, rng):
        model = ToyModel(settings=GeneratorSettings(default_size=4))
        assert len(generate_actions(model, rng)) == 4


class TestValidateActions:
    """Tests for validate_actions()."""

    def test_returns_final_state(self, toy_model, sample_actions):
        state = validate_actions(toy_model, sample_actions)
        assert state.current_slot == 4
        assert state.sym_tokens == frozenset({TOKEN})

    def test_unknown_token_is_violation(self, toy_model):
        actions = Actions(acts=[NoBind(Var(1), Use(SymToken(Var(9), "coin")))])
        with pytest.raises(PreconditionViolation) as info:
            validate_actions(toy_model, actions)
        assert info.value.index == 0

    def test_backwards_wait_is_violation(self, toy_model):
        actions = Actions(acts=[ActWaitUntil(Var(1), 5), ActWaitUntil(Var(2), 3)])
        with pytest.raises(PreconditionViolation) as info:
            validate_actions(toy_model, actions)
        assert info.value.index == 1
        assert info.value.slot == 5


class TestShrinkActions:
    """Tests for shrink_actions()."""

    def test_only_well_formed_candidates(self, toy_model):
        actions = Actions(acts=[Bind(Var(1), Create()), NoBind(Var(2), Use(TOKEN))])
        assert shrink_actions(toy_model, actions) == [
            Actions(acts=[Bind(Var(1), Create())]),
        ]

    def test_wait_is_shrunk(self, toy_model):
        actions = Actions(acts=[ActWaitUntil(Var(1), 10)], size=3)
        candidates = shrink_actions(toy_model, actions)

        assert candidates[0] == Actions(acts=[], size=3)
        assert [c.acts for c in candidates[1:]] == [
            [ActWaitUntil(Var(1), 5)],
            [ActWaitUntil(Var(1), 8)],
            [ActWaitUntil(Var(1), 9)],
        ]

    def test_every_candidate_validates(self, toy_model):
        actions = generate_actions(toy_model, random.Random(3), 12)
        for candidate in shrink_actions(toy_model, actions):
            validate_actions(toy_model, candidate)


class TestStateMachine:
    """Tests for the engine-facing facade."""

    def test_action_names(self, toy_model):
        machine = ContractStateModel(toy_model)
        assert machine.action_name(ContractAction(True, Create())) == "Create"
        assert machine.action_name(WaitUntil(3)) == "WaitUntil"

    def test_precondition_delegates(self, toy_model):
        machine = ContractStateModel(toy_model)
        state = machine.initial_state()
        assert not machine.precondition(state, WaitUntil(1))
        assert machine.precondition(state, WaitUntil(2))
