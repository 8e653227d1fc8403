"""Graphs over the items of an order, built from its order constraints."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

from satune.ops import BooleanValue, OrderType, Polarity
from satune.order import Order

if TYPE_CHECKING:
    from satune.nodes import BooleanOrder


class NodeStatus(IntEnum):
    """Traversal state of an order node."""

    NOTVISITED = 0
    VISITED = 1
    FINISHED = 2
    ADDEDTOSET = 3


@dataclass(eq=False)
class OrderEdge:
    """A directed edge source -> sink, meaning source comes before sink."""

    source: "OrderNode"
    sink: "OrderNode"
    pol_pos: bool = False
    pol_neg: bool = False
    must_pos: bool = False
    must_neg: bool = False
    pseudo_pos: bool = False

    def __repr__(self) -> str:
        return f"OrderEdge({self.source.id}->{self.sink.id})"


@dataclass(eq=False)
class OrderNode:
    """An item of the order with its incoming and outgoing edges."""

    id: int
    status: NodeStatus = NodeStatus.NOTVISITED
    removed: bool = False
    scc_num: int = 0
    in_edges: dict[OrderEdge, None] = field(default_factory=dict)
    out_edges: dict[OrderEdge, None] = field(default_factory=dict)

    def add_incoming_edge(self, edge: OrderEdge) -> None:
        """Record an edge that ends at this node."""
        self.in_edges[edge] = None

    def add_outgoing_edge(self, edge: OrderEdge) -> None:
        """Record an edge that starts at this node."""
        self.out_edges[edge] = None

    def __repr__(self) -> str:
        return f"OrderNode({self.id})"


class OrderGraph:
    """Nodes and edges derived from the constraints of one order."""

    def __init__(self, order: Order) -> None:
        self.order = order
        self._nodes: dict[int, OrderNode] = {}
        self._edges: dict[tuple[int, int], OrderEdge] = {}

    @property
    def nodes(self) -> Iterable[OrderNode]:
        """All nodes, in creation order."""
        return self._nodes.values()

    @property
    def edges(self) -> Iterable[OrderEdge]:
        """All edges, in creation order."""
        return self._edges.values()

    def get_node(self, node_id: int) -> OrderNode:
        """The node for node_id, created if missing."""
        node = self._nodes.get(node_id)
        if node is None:
            node = self._nodes[node_id] = OrderNode(node_id)
        return node

    def lookup_node(self, node_id: int) -> OrderNode | None:
        """The node for node_id, or None."""
        return self._nodes.get(node_id)

    def get_edge(self, begin: OrderNode, end: OrderNode) -> OrderEdge:
        """The edge begin -> end, created if missing."""
        key = (begin.id, end.id)
        edge = self._edges.get(key)
        if edge is None:
            edge = self._edges[key] = OrderEdge(begin, end)
        return edge

    def lookup_edge(self, begin: OrderNode, end: OrderNode) -> OrderEdge | None:
        """The edge begin -> end, or None."""
        return self._edges.get((begin.id, end.id))

    def inverse_edge(self, edge: OrderEdge) -> OrderEdge | None:
        """The edge running the other way, or None."""
        return self._edges.get((edge.sink.id, edge.source.id))

    def _link(self, begin: OrderNode, end: OrderNode) -> OrderEdge:
        edge = self.get_edge(begin, end)
        begin.add_outgoing_edge(edge)
        end.add_incoming_edge(edge)
        return edge

    def add_order_constraint(self, constraint: BooleanOrder) -> None:
        """Add the edges implied by a constraint's polarity."""
        self.add_order_edge(
            self.get_node(constraint.first), self.get_node(constraint.second), constraint
        )

    def add_must_order_constraint(self, constraint: BooleanOrder) -> None:
        """Add the edges implied by a constraint's known value."""
        self.add_must_order_edge(
            self.get_node(constraint.first), self.get_node(constraint.second), constraint
        )

    def add_order_edge(
        self, node1: OrderNode, node2: OrderNode, constraint: BooleanOrder
    ) -> None:
        """Add edges for node1 < node2 according to where the constraint occurs."""
        polarity = constraint.polarity
        must = constraint.bool_val
        if polarity in (Polarity.TRUE, Polarity.BOTHTRUEFALSE):
            edge = self._link(node1, node2)
            if must in (BooleanValue.MUSTBETRUE, BooleanValue.UNSAT):
                edge.must_pos = True
            edge.pol_pos = True
        if polarity in (Polarity.FALSE, Polarity.BOTHTRUEFALSE):
            must_false = must in (BooleanValue.MUSTBEFALSE, BooleanValue.UNSAT)
            if self.order.type == OrderType.TOTAL:
                edge = self._link(node2, node1)
                if must_false:
                    edge.must_pos = True
                edge.pol_pos = True
            else:
                edge = self._link(node1, node2)
                if must_false:
                    edge.must_neg = True
                edge.pol_neg = True

    def add_must_order_edge(
        self, node1: OrderNode, node2: OrderNode, constraint: BooleanOrder
    ) -> None:
        """Add edges for node1 < node2 only where the constraint's value is known."""
        must = constraint.bool_val
        if must in (BooleanValue.MUSTBETRUE, BooleanValue.UNSAT):
            edge = self._link(node1, node2)
            edge.must_pos = True
            edge.pol_pos = True
        if must in (BooleanValue.MUSTBEFALSE, BooleanValue.UNSAT):
            if self.order.type == OrderType.TOTAL:
                edge = self._link(node2, node1)
                edge.must_pos = True
                edge.pol_pos = True
            else:
                edge = self._link(node1, node2)
                edge.must_neg = True
                edge.pol_neg = True

    def add_edge(self, first: int, second: int) -> OrderEdge:
        """Add a must-be-true edge first -> second."""
        edge = self._link(self.get_node(first), self.get_node(second))
        edge.pol_pos = True
        edge.must_pos = True
        return edge

    def is_there_path(self, source: OrderNode, destination: OrderNode) -> bool:
        """Whether destination is reachable from source over positive edges."""
        visited = {source}
        stack: list[OrderNode] = []
        for edge in source.out_edges:
            if not edge.pol_pos or edge.sink in visited:
                continue
            if edge.sink is destination:
                return True
            visited.add(edge.sink)
            stack.append(edge.sink)
        while stack:
            current = stack.pop()
            for edge in current.out_edges:
                if not edge.pol_pos:
                    continue
                if edge.sink is destination:
                    return True
                if edge.sink not in visited:
                    visited.add(edge.sink)
                    stack.append(edge.sink)
        return False

    def _visit(
        self,
        root: OrderNode,
        finish: list[OrderNode] | None,
        reverse: bool,
        must: bool,
        scc_num: int,
    ) -> None:
        def edges_of(node: OrderNode) -> Iterator[OrderEdge]:
            return iter(list(node.in_edges if reverse else node.out_edges))

        stack = [(root, edges_of(root))]
        while stack:
            node, edges = stack[-1]
            for edge in edges:
                if must:
                    if not edge.must_pos:
                        continue
                elif not edge.pol_pos and not edge.pseudo_pos:
                    continue
                child = edge.source if reverse else edge.sink
                if child.status == NodeStatus.NOTVISITED:
                    child.status = NodeStatus.VISITED
                    stack.append((child, edges_of(child)))
                    break
            else:
                stack.pop()
                if node is not root:
                    node.status = NodeStatus.FINISHED
                    if finish is not None:
                        finish.append(node)
                    if reverse:
                        node.scc_num = scc_num

    def _dfs(self, must: bool) -> list[OrderNode]:
        finish: list[OrderNode] = []
        for node in list(self._nodes.values()):
            if node.status == NodeStatus.NOTVISITED and not node.removed:
                node.status = NodeStatus.VISITED
                self._visit(node, finish, False, must, 0)
                node.status = NodeStatus.FINISHED
                finish.append(node)
        return finish

    def dfs(self) -> list[OrderNode]:
        """Nodes in DFS finishing order over positive and pseudo-positive edges."""
        return self._dfs(False)

    def dfs_must(self) -> list[OrderNode]:
        """Nodes in DFS finishing order over must-be-true edges."""
        return self._dfs(True)

    def _dfs_reverse(self, finish: list[OrderNode]) -> None:
        scc_num = 1
        for node in reversed(finish):
            if node.status == NodeStatus.NOTVISITED:
                node.status = NodeStatus.VISITED
                self._visit(node, None, True, False, scc_num)
                node.scc_num = scc_num
                node.status = NodeStatus.FINISHED
                scc_num += 1

    def reset_node_status(self) -> None:
        """Mark every node as not visited."""
        for node in self._nodes.values():
            node.status = NodeStatus.NOTVISITED

    def compute_strongly_connected_components(self) -> None:
        """Number every node with its strongly connected component, from 1."""
        finish = self.dfs()
        self.reset_node_status()
        self._dfs_reverse(finish)
        self.reset_node_status()

    def complete_partial_order_graph(self) -> None:
        """Add pseudo-positive edges that negative edges imply.

        Each node gets a source set of the nodes that reach it over positive
        edges; a negative edge from a node in that set, in another component,
        yields a pseudo-positive edge back to that node.
        """
        finish = self.dfs()
        self.reset_node_status()
        table: dict[OrderNode, set[OrderNode]] = {}
        scc_nodes: list[OrderNode] = []
        scc_num = 1
        for node in reversed(finish):
            sources: set[OrderNode] = set()
            table[node] = sources
            if node.status != NodeStatus.NOTVISITED:
                continue
            node.status = NodeStatus.VISITED
            self._visit(node, scc_nodes, True, False, scc_num)
            node.status = NodeStatus.FINISHED
            node.scc_num = scc_num
            scc_num += 1
            scc_nodes.append(node)

            for member in scc_nodes:
                for edge in list(member.in_edges):
                    if edge.pol_pos:
                        sources.add(edge.source)
                        sources.update(table.get(edge.source, ()))
            for position, member in enumerate(scc_nodes):
                table[member] = sources if position == 0 else set(sources)
                for edge in list(node.in_edges):
                    parent = edge.source
                    assert parent is not member, "self edge inside a component"
                    if (
                        edge.pol_neg
                        and parent.scc_num != member.scc_num
                        and parent in sources
                    ):
                        self.get_edge(member, parent).pseudo_pos = True
            scc_nodes.clear()
        self.reset_node_status()


def build_order_graph(order: Order) -> OrderGraph:
    """A graph with edges for every constraint of order, by polarity."""
    if order.graph is not None:
        raise ValueError("order already has a graph")
    graph = OrderGraph(order)
    for constraint in order.constraints:
        graph.add_order_constraint(constraint)
    return graph


def build_must_order_graph(order: Order) -> OrderGraph:
    """A graph with edges only for constraints whose value is known."""
    if order.graph is not None:
        raise ValueError("order already has a graph")
    graph = OrderGraph(order)
    for constraint in order.constraints:
        graph.add_must_order_constraint(constraint)
    return graph