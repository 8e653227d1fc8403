"""Traversals over the booleans and elements reachable from constraints.

Each node is produced once, after all of its children (post-order).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from satune.nodes import (
    Boolean,
    BooleanEdge,
    BooleanLogic,
    BooleanPredicate,
    Element,
    ElementFunction,
)
from satune.ops import ASTNodeType

_BOOLEAN_LEAVES = (
    ASTNodeType.ORDERCONST,
    ASTNodeType.BOOLEANVAR,
    ASTNodeType.PREDICATEOP,
    ASTNodeType.BOOLCONST,
)
_ELEMENT_LEAVES = (ASTNodeType.ELEMSET, ASTNodeType.ELEMCONST)


def _boolean_children(boolean: Boolean) -> Iterator[Boolean]:
    if boolean.type in _BOOLEAN_LEAVES:
        return iter(())
    if boolean.type == ASTNodeType.LOGICOP:
        assert isinstance(boolean, BooleanLogic)
        return (edge.boolean for edge in boolean.inputs)
    raise ValueError(f"unexpected boolean node {boolean.type.name}")


def _element_children(element: Element) -> Iterator[Element]:
    if element.type in _ELEMENT_LEAVES:
        return iter(())
    if element.type == ASTNodeType.ELEMFUNCRETURN:
        assert isinstance(element, ElementFunction)
        return iter(element.inputs)
    raise ValueError(f"unexpected element node {element.type.name}")


def _post_order(root, children, discovered: set) -> Iterator:
    if root in discovered:
        return
    discovered.add(root)
    stack = [(root, children(root))]
    while stack:
        node, pending = stack[-1]
        for child in pending:
            if child not in discovered:
                discovered.add(child)
                stack.append((child, children(child)))
                break
        else:
            stack.pop()
            yield node


def iter_booleans(constraints: Iterable[BooleanEdge]) -> Iterator[Boolean]:
    """Every boolean reachable from the constraints, once each, children first."""
    discovered: set[Boolean] = set()
    for edge in constraints:
        yield from _post_order(edge.boolean, _boolean_children, discovered)


def iter_elements(constraints: Iterable[BooleanEdge]) -> Iterator[Element]:
    """Every element under a reachable predicate, once each, children first."""
    discovered: set[Element] = set()
    for boolean in iter_booleans(constraints):
        if boolean.type != ASTNodeType.PREDICATEOP:
            continue
        assert isinstance(boolean, BooleanPredicate)
        for element in list(boolean.inputs):
            yield from _post_order(element, _element_children, discovered)