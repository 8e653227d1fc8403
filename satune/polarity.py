"""Polarity and known-value propagation over the constraint AST."""

from __future__ import annotations

from collections.abc import Iterable

from satune.nodes import (
    Boolean,
    BooleanEdge,
    BooleanLogic,
    BooleanPredicate,
    Element,
    ElementFunction,
)
from satune.ops import ASTNodeType, BooleanValue, LogicOp, Polarity, negate_polarity


def compute_polarities(constraints: Iterable[BooleanEdge]) -> None:
    """Propagate polarities from every top-level constraint."""
    for edge in constraints:
        compute_polarity(edge.boolean, Polarity.FALSE if edge.negated else Polarity.TRUE)


def update_polarity(boolean: Boolean, polarity: int) -> bool:
    """Merge polarity into boolean's; True if it changed."""
    old = boolean.polarity
    boolean.polarity = Polarity(old | polarity)
    return boolean.polarity != old


def update_edge_polarity(dst: BooleanEdge, src: BooleanEdge | Polarity) -> None:
    """Give dst the polarity of src, an edge or a polarity, through the edges' signs."""
    if isinstance(src, BooleanEdge):
        negated = dst.negated ^ src.negated
        polarity = src.boolean.polarity
    else:
        negated = dst.negated
        polarity = Polarity(src)
    update_polarity(dst.boolean, negate_polarity(polarity) if negated else polarity)


def update_must_value(boolean: Boolean, value: int) -> None:
    """Merge a known value into boolean's."""
    boolean.bool_val = BooleanValue(boolean.bool_val | value)


def compute_polarity(boolean: Boolean, polarity: int) -> None:
    """Merge polarity into boolean and push any change to its children."""
    if not update_polarity(boolean, polarity):
        return
    if boolean.type in (ASTNodeType.BOOLEANVAR, ASTNodeType.ORDERCONST, ASTNodeType.BOOLCONST):
        return
    if boolean.type == ASTNodeType.PREDICATEOP:
        compute_predicate_polarity(boolean)
    elif boolean.type == ASTNodeType.LOGICOP:
        compute_logic_op_polarity(boolean)
    else:
        raise ValueError(f"unexpected boolean node {boolean.type.name}")


def compute_predicate_polarity(predicate: BooleanPredicate) -> None:
    """Mark the undefined-status flag both ways and visit the inputs."""
    if predicate.undef_status is not None:
        compute_polarity(predicate.undef_status.boolean, Polarity.BOTHTRUEFALSE)
    for element in predicate.inputs:
        compute_element(element)


def compute_element(element: Element) -> None:
    """Mark overflow flags of function elements both ways, recursively."""
    if not isinstance(element, ElementFunction):
        return
    if element.overflow_status is not None:
        compute_polarity(element.overflow_status.boolean, Polarity.BOTHTRUEFALSE)
    for child in element.inputs:
        compute_element(child)


def compute_logic_op_polarity(logic: BooleanLogic) -> None:
    """Push the connective's child polarity to each input."""
    child = logic_op_children_polarity(logic)
    for edge in logic.inputs:
        compute_polarity(edge.boolean, negate_polarity(child) if edge.negated else child)


def logic_op_children_polarity(logic: BooleanLogic) -> Polarity:
    """The polarity inputs of a connective inherit; only AND and IFF are allowed."""
    if logic.op is LogicOp.AND:
        return Polarity(logic.polarity)
    if logic.op is LogicOp.IFF:
        return Polarity.BOTHTRUEFALSE
    raise ValueError(f"connective {logic.op.name} is not supported")