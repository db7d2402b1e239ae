"""
Models module - Contract models built on the core.

Each model has its own subpackage with:
- Contract state
- Action types
- The ContractModel subclass (generation, preconditions, effects, shrinking)
"""
