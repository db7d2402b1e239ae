"""
State Model - Types shared with the external test engine.

The engine owns sequence construction, list shrinking and replay.
This package only describes what crosses the boundary:
- Var: fresh-variable placeholders issued per step
- Step: a variable bound to one action
- StateModelActions: the engine's step container
"""

from .types import Var, Step, StateModelActions

__all__ = [
    "Var",
    "Step",
    "StateModelActions",
]
