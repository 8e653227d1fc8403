"""Order relations over a set of values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from satune.ops import OrderType
from satune.sets import Set

if TYPE_CHECKING:
    from satune.nodes import BooleanOrder


class Order:
    """A partial or total order over the values of a set.

    The order collects the order constraints built on it and the items
    those constraints mention.
    """

    def __init__(self, order_type: OrderType, set_: Set) -> None:
        self.type = OrderType(order_type)
        self.set = set_
        self.graph: Any = None
        self._constraints: list[BooleanOrder] = []
        self._used_items: set[int] = set()

    @property
    def constraints(self) -> list[BooleanOrder]:
        """The order constraints built on this order, in insertion order."""
        return self._constraints

    @property
    def num_used(self) -> int:
        """Number of constraints built on this order."""
        return len(self._constraints)

    def add_order_constraint(self, constraint: BooleanOrder) -> None:
        """Record a constraint and the two items it relates."""
        self._constraints.append(constraint)
        self._used_items.add(constraint.first)
        self._used_items.add(constraint.second)

    def used_items(self) -> frozenset[int]:
        """The items mentioned by any constraint on this order."""
        return frozenset(self._used_items)

    def describe(self) -> str:
        """A readable description."""
        return "{Order on Set:\n" + self.set.describe() + "}\n"

    def __repr__(self) -> str:
        return f"Order({self.type.name}, {self.set!r})"