"""
Symbolics - Symbolic tokens and values.

A symbolic token stands for an asset that only exists once the
sequence is run against a real ledger. The model tracks tokens by
the step variable that created them plus a per-step name.

Values are plain dicts from asset key (SymToken or a concrete asset
id string) to quantity. Zero quantities are never stored.
"""

from __future__ import annotations
import inspect
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from ..state_model import Var


@dataclass(frozen=True, order=True)
class SymToken:
    """The token `name` created by the step bound to `var`."""
    var: Var
    name: str

    def __repr__(self) -> str:
        return f"tok{self.var.index}.{self.name}"


AssetKey = Union[SymToken, str]
Value = dict[AssetKey, int]


def value_of(asset: AssetKey, amount: int) -> Value:
    """A value holding `amount` of a single asset."""
    return {asset: amount} if amount else {}


def value_add(left: Mapping[AssetKey, int], right: Mapping[AssetKey, int]) -> Value:
    """Pointwise sum, dropping assets that cancel out."""
    total = dict(left)
    for asset, amount in right.items():
        new_amount = total.get(asset, 0) + amount
        if new_amount:
            total[asset] = new_amount
        else:
            total.pop(asset, None)
    return total


def value_negate(value: Mapping[AssetKey, int]) -> Value:
    return {asset: -amount for asset, amount in value.items()}


_ATOMS = (str, bytes, bytearray, int, float, complex, bool, type(None), Enum)


def _slot_values(item: Any) -> list[Any]:
    """Values of every filled slot, including slots declared by base classes."""
    values = []
    for cls in type(item).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{cls.__name__.lstrip('_')}{name}"
            if hasattr(item, name):
                values.append(getattr(item, name))
    return values


def collect_symtokens(obj: Any) -> frozenset[SymToken]:
    """
    Find every SymToken reachable from obj.

    Walks mappings (keys and values), any other re-iterable collection,
    and the attributes of every object: its __dict__ plus the slots of
    each class in its MRO. Functions, classes and one-shot iterators
    are not entered. Payloads that hide tokens elsewhere need a
    model-specific override of ContractModel.get_all_symtokens.
    """
    found: set[SymToken] = set()
    seen: set[int] = set()
    stack = [obj]

    while stack:
        item = stack.pop()
        if isinstance(item, SymToken):
            found.add(item)
            continue
        if isinstance(item, _ATOMS) or isinstance(item, type) or inspect.isroutine(item):
            continue
        if id(item) in seen:
            continue
        seen.add(id(item))

        if isinstance(item, Mapping):
            stack.extend(item.keys())
            stack.extend(item.values())
        elif isinstance(item, Iterable) and not isinstance(item, Iterator):
            stack.extend(item)

        if hasattr(item, "__dict__"):
            stack.extend(vars(item).values())
        stack.extend(_slot_values(item))

    return frozenset(found)
