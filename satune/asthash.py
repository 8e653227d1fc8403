"""Structural hashing and comparison of AST nodes, used to share equal nodes.

Hashes are 32-bit unsigned values. Leaf variables and other objects that
have no structure of their own hash by identity.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from satune.nodes import (
    Boolean,
    BooleanLogic,
    BooleanOrder,
    BooleanPredicate,
    Element,
    ElementConst,
    ElementFunction,
)
from satune.ops import ASTNodeType

_MASK32 = 0xFFFFFFFF


def _mix(state: int, value: int) -> int:
    state = (state + (value & _MASK32)) & _MASK32
    state = (state + (state << 10)) & _MASK32
    return state ^ (state >> 6)


def _finish(state: int) -> int:
    state = (state + (state << 3)) & _MASK32
    state ^= state >> 11
    return (state + (state << 15)) & _MASK32


def _raw(obj: Any) -> int:
    """A 32-bit value standing for an object, or 0 for None."""
    return 0 if obj is None else hash(obj) & _MASK32


def hash_sequence(items: Iterable[Any]) -> int:
    """Combine the hashes of items, in order, into one 32-bit hash."""
    state = 0
    for item in items:
        state = _mix(state, _raw(item))
    return _finish(state)


def hash_boolean(boolean: Boolean) -> int:
    """A structural 32-bit hash of a boolean node."""
    kind = boolean.type
    if kind == ASTNodeType.ORDERCONST:
        assert isinstance(boolean, BooleanOrder)
        state = _mix(0, boolean.first)
        state = _mix(state, boolean.second)
        state = _mix(state, _raw(boolean.order) & 0xFFFF)
        return _finish(state)
    if kind == ASTNodeType.BOOLEANVAR:
        return _raw(boolean)
    if kind == ASTNodeType.LOGICOP:
        assert isinstance(boolean, BooleanLogic)
        return (int(boolean.op) + 43 * hash_sequence(boolean.inputs)) & _MASK32
    if kind == ASTNodeType.PREDICATEOP:
        assert isinstance(boolean, BooleanPredicate)
        state = _mix(0, hash_sequence(boolean.inputs))
        state = _mix(state, _raw(boolean.predicate))
        state = _mix(state, _raw(boolean.undef_status))
        return _finish(state)
    raise ValueError(f"cannot hash boolean node {kind.name}")


def _same_elements(first: list[Element], second: list[Element]) -> bool:
    return len(first) == len(second) and all(a is b for a, b in zip(first, second))


def compare_boolean(first: Boolean, second: Boolean) -> bool:
    """Whether two boolean nodes are structurally the same."""
    if first.type != second.type:
        return False
    kind = first.type
    if kind == ASTNodeType.ORDERCONST:
        return (
            first.order is second.order
            and first.first == second.first
            and first.second == second.second
        )
    if kind == ASTNodeType.BOOLEANVAR:
        return first is second
    if kind == ASTNodeType.LOGICOP:
        return first.op == second.op and list(first.inputs) == list(second.inputs)
    if kind == ASTNodeType.PREDICATEOP:
        return (
            first.predicate is second.predicate
            and first.undef_status == second.undef_status
            and _same_elements(first.inputs, second.inputs)
        )
    raise ValueError(f"cannot compare boolean node {kind.name}")


def hash_element(element: Element) -> int:
    """A structural 32-bit hash of an element node."""
    kind = element.type
    if kind == ASTNodeType.ELEMSET:
        return _raw(element)
    if kind == ASTNodeType.ELEMFUNCRETURN:
        assert isinstance(element, ElementFunction)
        state = _mix(0, hash_sequence(element.inputs))
        state = _mix(state, _raw(element.function))
        state = _mix(state, _raw(element.overflow_status))
        return _finish(state)
    if kind == ASTNodeType.ELEMCONST:
        assert isinstance(element, ElementConst)
        return element.value & _MASK32
    raise ValueError(f"cannot hash element node {kind.name}")


def compare_element(first: Element, second: Element) -> bool:
    """Whether two element nodes are structurally the same."""
    if first.type != second.type:
        return False
    kind = first.type
    if kind == ASTNodeType.ELEMSET:
        return first is second
    if kind == ASTNodeType.ELEMFUNCRETURN:
        return (
            first.function is second.function
            and first.overflow_status == second.overflow_status
            and _same_elements(first.inputs, second.inputs)
        )
    if kind == ASTNodeType.ELEMCONST:
        return first.value == second.value
    raise ValueError(f"cannot compare element node {kind.name}")