"""Boolean and element nodes of the constraint AST."""

from __future__ import annotations

import itertools
from abc import abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from satune.functions import Function
from satune.ops import ASTNodeType, BooleanValue, LogicOp, Polarity
from satune.order import Order
from satune.predicates import Predicate
from satune.sets import Set


class ASTNode:
    """Any node of the AST, tagged with its kind."""

    def __init__(self, node_type: ASTNodeType) -> None:
        self.type = ASTNodeType(node_type)


@dataclass(frozen=True)
class BooleanEdge:
    """A reference to a boolean node, possibly negated."""

    boolean: "Boolean"
    negated: bool = False

    def negate(self) -> "BooleanEdge":
        """The same boolean with the opposite sign."""
        return BooleanEdge(self.boolean, not self.negated)

    def __invert__(self) -> "BooleanEdge":
        return self.negate()


class Boolean(ASTNode):
    """Base of all boolean nodes."""

    _counter = itertools.count()

    def __init__(self, node_type: ASTNodeType) -> None:
        super().__init__(node_type)
        self.polarity = Polarity.UNDEFINED
        self.bool_val = BooleanValue.UNDEFINED
        self.parents: list[ASTNode] = []
        self.id = next(Boolean._counter)

    def is_true(self) -> bool:
        """Whether the boolean is known to be true."""
        return self.bool_val == BooleanValue.MUSTBETRUE

    def is_false(self) -> bool:
        """Whether the boolean is known to be false."""
        return self.bool_val == BooleanValue.MUSTBEFALSE

    def update_parents(self) -> None:
        """Register this node with the nodes it refers to."""

    @property
    def edge(self) -> BooleanEdge:
        """A positive edge to this boolean."""
        return BooleanEdge(self)

    def __invert__(self) -> BooleanEdge:
        return BooleanEdge(self, True)


class BooleanConst(Boolean):
    """The constant true or false."""

    def __init__(self, value: bool) -> None:
        super().__init__(ASTNodeType.BOOLCONST)
        self.value = bool(value)

    def is_true(self) -> bool:
        return self.value

    def is_false(self) -> bool:
        return not self.value


class BooleanVar(Boolean):
    """A free boolean variable."""

    def __init__(self, var_type: int) -> None:
        super().__init__(ASTNodeType.BOOLEANVAR)
        self.vtype = var_type
        self.var: Any = None


class BooleanOrder(Boolean):
    """The constraint first < second in an order."""

    def __init__(self, order: Order, first: int, second: int) -> None:
        super().__init__(ASTNodeType.ORDERCONST)
        self.order = order
        self.first = first
        self.second = second

    def update_parents(self) -> None:
        self.order.add_order_constraint(self)


class BooleanPredicate(Boolean):
    """A predicate applied to elements."""

    def __init__(
        self,
        predicate: Predicate,
        inputs: Iterable["Element"],
        undef_status: BooleanEdge | None = None,
    ) -> None:
        super().__init__(ASTNodeType.PREDICATEOP)
        self.predicate = predicate
        self.inputs: list[Element] = list(inputs)
        self.undef_status = undef_status

    def update_parents(self) -> None:
        for element in self.inputs:
            element.parents.append(self)
        if self.undef_status is not None:
            self.undef_status.boolean.parents.append(self)


class BooleanLogic(Boolean):
    """A logical connective applied to boolean edges."""

    def __init__(self, op: LogicOp, inputs: Iterable[BooleanEdge]) -> None:
        super().__init__(ASTNodeType.LOGICOP)
        self.op = LogicOp(op)
        self.replaced = False
        self.inputs: list[BooleanEdge] = list(inputs)

    def update_parents(self) -> None:
        for edge in self.inputs:
            edge.boolean.parents.append(self)


class Element(ASTNode):
    """Base of all element nodes: terms that take a value from a set."""

    def __init__(self, node_type: ASTNodeType) -> None:
        super().__init__(node_type)
        self.parents: list[ASTNode] = []
        self.any_value = False
        self.frozen = False

    def freeze(self) -> None:
        """Mark the element as frozen."""
        self.frozen = True

    def update_parents(self) -> None:
        """Register this node with the nodes it refers to."""

    @property
    @abstractmethod
    def range(self) -> Set:
        """The set of values the element may take."""


class ElementSet(Element):
    """A variable ranging over a set."""

    def __init__(self, set_: Set, node_type: ASTNodeType = ASTNodeType.ELEMSET) -> None:
        super().__init__(node_type)
        self.set = set_

    @property
    def range(self) -> Set:
        return self.set


class ElementConst(ElementSet):
    """A constant value."""

    def __init__(self, value: int, set_: Set) -> None:
        super().__init__(set_, ASTNodeType.ELEMCONST)
        self.value = value


class ElementFunction(Element):
    """The result of applying a function to elements."""

    def __init__(
        self,
        function: Function,
        inputs: Iterable[Element],
        overflow_status: BooleanEdge | None = None,
    ) -> None:
        super().__init__(ASTNodeType.ELEMFUNCRETURN)
        self.function = function
        self.inputs: list[Element] = list(inputs)
        self.overflow_status = overflow_status

    @property
    def range(self) -> Set:
        return self.function.range_set

    def update_parents(self) -> None:
        for element in self.inputs:
            element.parents.append(self)
        if self.overflow_status is not None:
            self.overflow_status.boolean.parents.append(self)


def describe(node: ASTNode) -> str:
    """A readable, recursive description of an AST node."""
    if isinstance(node, BooleanConst):
        return f"BooleanConst<{node.id}>:{'TRUE' if node.value else 'FALSE'}\n"
    if isinstance(node, BooleanVar):
        return f"BooleanVar<{node.id}>\n"
    if isinstance(node, BooleanOrder):
        return (
            f"{{BooleanOrder<{node.id}>: First= {node.first}, Second = {node.second}"
            " on Order:\n" + node.order.describe() + "}\n"
        )
    if isinstance(node, BooleanPredicate):
        return (
            f"{{BooleanPredicate<{node.id}>:\n"
            + node.predicate.describe()
            + "elements:\n"
            + "".join(describe(element) for element in node.inputs)
            + "}\n"
        )
    if isinstance(node, BooleanLogic):
        return (
            f"{{BooleanLogic<{node.id}>: {node.op.name}\n"
            + "".join(
                ("!" if edge.negated else "") + describe(edge.boolean)
                for edge in node.inputs
            )
            + "}\n"
        )
    if isinstance(node, ElementConst):
        return f"{{ElementConst: {node.value}}}\n"
    if isinstance(node, ElementSet):
        return "{ElementSet:" + node.set.describe() + "}"
    if isinstance(node, ElementFunction):
        parts = ["{ElementFunction:\n", node.function.describe(), "OverFlow Boolean Flag:\n"]
        if node.overflow_status is not None:
            parts.append(describe(node.overflow_status.boolean))
        parts.append("Range:\n")
        parts.append(node.range.describe())
        parts.append("Elements:\n")
        parts.extend(describe(element) for element in node.inputs)
        parts.append("}\n")
        return "".join(parts)
    raise TypeError(f"cannot describe {type(node).__name__}")