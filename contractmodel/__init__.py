"""
Contract Model - Model-based test generation for blockchain contracts.

Given an abstract model of a contract, the package provides:
- Model state tracking, including symbolic tokens
- Weighted random generation of actions and time advances
- Admissibility checks that keep sequences well formed
- Shrinking of failing sequences to minimal counterexamples
"""

from loguru import logger

logger.disable("contractmodel")

__version__ = "0.1.0"
