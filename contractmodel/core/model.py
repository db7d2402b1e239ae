"""
Contract Model - Interface a model author implements.

A ContractModel captures everything needed to generate tests of a
contract:
- what actions exist (any value with a useful repr and equality)
- when they are valid (precondition)
- how to generate random actions (arbitrary_action)
- how actions affect the model state (next_state)
- how to simplify failing actions (shrink_action)
"""

from __future__ import annotations
import random
import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ..config import GeneratorSettings, DEFAULT_SETTINGS
from .state import ModelState
from .symbolics import SymToken, collect_symtokens

if TYPE_CHECKING:
    from .spec import Spec

_FIRST_WORD = re.compile(r"[^\s(]+")


class ContractModel(ABC):
    """
    Abstract base class for contract models.

    Subclasses must provide initial_contract_state, arbitrary_action
    and next_state. Everything else has a usable default.
    """

    settings: GeneratorSettings = DEFAULT_SETTINGS

    def __init__(self, settings: GeneratorSettings | None = None):
        if settings is not None:
            self.settings = settings

    @abstractmethod
    def initial_contract_state(self) -> Any:
        """The contract state before any action has been performed."""
        pass

    @abstractmethod
    def arbitrary_action(self, state: ModelState, rng: random.Random) -> Any:
        """
        Produce a random next action for `state`.

        Generated actions should usually satisfy the precondition; the
        ones that don't are discarded and another one is generated.
        """
        pass

    @abstractmethod
    def next_state(self, spec: Spec, action: Any) -> None:
        """
        Describe the effect of `action` on the model state.

        Called with a Spec handle; all effects go through it.
        """
        pass

    def initial_state(self) -> ModelState:
        return ModelState.initial(self.initial_contract_state())

    def precondition(self, state: ModelState, action: Any) -> bool:
        """
        Decide whether `action` is valid in `state`.

        Runs before the symbolic token check, so it may assume nothing
        about which tokens the action references.
        """
        return True

    def next_reactive_state(self, spec: Spec, slot: int) -> None:
        """Run every time the model waits; models passive state changes at `slot`."""
        return None

    def shrink_action(self, state: ModelState, action: Any) -> list[Any]:
        """Simpler alternatives to `action`. None by default."""
        return []

    def action_name(self, action: Any) -> str:
        """Name used for statistics and rejection lists: the first word of its repr."""
        match = _FIRST_WORD.match(repr(action))
        return match.group(0) if match else type(action).__name__

    def wait_probability(self, state: ModelState) -> float:
        """Probability of generating a WaitUntil in `state`."""
        return self.settings.wait_probability

    def arbitrary_wait_interval(self, state: ModelState, rng: random.Random) -> int:
        """
        How long a generated WaitUntil waits.

        Uniform in [1, max(min_wait_window, 5 * (k - 1))] where k is the
        smallest integer with 2**k > current_slot.
        """
        k = state.current_slot.bit_length()
        return rng.randint(1, max(self.settings.min_wait_window, 5 * (k - 1)))

    def get_all_symtokens(self, action: Any) -> frozenset[SymToken]:
        """
        Every symbolic token referenced by `action`.

        Override when tokens are hidden in places a structural walk
        over the payload cannot see.
        """
        return collect_symtokens(action)

    def get_name(self) -> str:
        return self.__class__.__name__
