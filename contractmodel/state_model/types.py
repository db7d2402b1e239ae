"""
Engine-side step representation.

The engine allocates one Var per step at construction time and
treats the bound action as opaque.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, order=True)
class Var:
    """A fresh-variable placeholder, unique within one sequence."""
    index: int

    def __repr__(self) -> str:
        return f"Var({self.index})"


@dataclass(frozen=True)
class Step:
    """`var := action` in the engine's sequence."""
    var: Var
    action: Any

    def __str__(self) -> str:
        return f"var{self.var.index} := {self.action!r}"


@dataclass
class StateModelActions:
    """
    The engine's generic step container.

    rejected holds the names of actions discarded during generation,
    size is the engine's size-control value used by its shrinker.
    """
    steps: list[Step] = field(default_factory=list)
    rejected: list[str] = field(default_factory=list)
    size: int = 0

    def __len__(self) -> int:
        return len(self.steps)
