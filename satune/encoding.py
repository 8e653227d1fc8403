"""Nodes and edges of the graph used to choose element encodings."""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING

from satune.ops import ElementEncodingType
from satune.sets import Set

if TYPE_CHECKING:
    from satune.nodes import Element


class EdgeEncodingType(IntEnum):
    """Decision taken for an edge between two encoding nodes."""

    UNASSIGNED = 0
    BREAK = 1
    MATCH = 2


def convert_size(cost: int) -> int:
    """The smallest power of two that is at least cost (1 for cost <= 1)."""
    if cost <= 1:
        return 1
    return 1 << (cost - 1).bit_length()


class EncodingNode:
    """A set of values shared by the elements that range over it."""

    def __init__(self, set_: Set) -> None:
        self.set = set_
        self.elements: dict[Element, None] = {}
        self.edges: dict[EncodingEdge, None] = {}
        self.encoding = ElementEncodingType.UNASSIGNED

    def add_element(self, element: Element) -> None:
        """Record an element that ranges over this node's set."""
        self.elements[element] = None

    def __len__(self) -> int:
        return len(self.set)

    @property
    def var_type(self) -> int:
        """The type of the node's set."""
        return self.set.var_type

    def value_at(self, index: int) -> int:
        """The value at position index of the node's set."""
        return self.set.element_at(index)

    def measure_similarity(self, other: "EncodingNode") -> float:
        """Share of common values, summed over both nodes.

        The sets are walked together in ascending order; a value of this
        node below the other node's current value is skipped, and any other
        pair is counted as common.
        """
        mine = list(self.set)
        theirs = list(other.set)
        common = 0
        i = j = 0
        while i < len(mine) and j < len(theirs):
            if mine[i] < theirs[j]:
                i += 1
            else:
                i += 1
                j += 1
                common += 1
        return common / len(self) + common / len(other)

    def could_be_binary_index(self) -> bool:
        """Whether the node may still be given a binary index encoding."""
        return self.encoding in (
            ElementEncodingType.BINARYINDEX,
            ElementEncodingType.UNASSIGNED,
        )

    def __repr__(self) -> str:
        return f"EncodingNode({self.set!r})"


class EncodingEdge:
    """Operations relating two nodes, with an optional result node.

    Edges compare equal when they join the same left, right and result nodes.
    """

    def __init__(
        self,
        left: EncodingNode | None,
        right: EncodingNode | None,
        dst: EncodingNode | None = None,
    ) -> None:
        self.left = left
        self.right = right
        self.dst = dst
        self.encoding = EdgeEncodingType.UNASSIGNED
        self.num_arith_ops = 0
        self.num_equals = 0
        self.num_comparisons = 0

    @property
    def key(self) -> tuple[int, int, int]:
        return (id(self.left), id(self.right), id(self.dst))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EncodingEdge):
            return NotImplemented
        return (
            self.left is other.left
            and self.right is other.right
            and self.dst is other.dst
        )

    def __hash__(self) -> int:
        return hash(self.key)

    def value(self) -> int:
        """Weight of the edge: equalities by the smaller size, comparisons by both."""
        left_size = len(self.left) if self.left is not None else 1
        right_size = len(self.right) if self.right is not None else 1
        smaller = min(left_size, right_size)
        return self.num_equals * smaller + self.num_comparisons * left_size * right_size

    def __repr__(self) -> str:
        return f"EncodingEdge({self.left!r}, {self.right!r}, {self.dst!r})"