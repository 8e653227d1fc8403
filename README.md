# satune

`satune` holds the data model and several of the analyses of a constraint
solver that works over finite sets, orders, functions and predicates. It
has no dependencies outside the Python standard library and supports
Python 3.10 and later.

## Modules

- `satune.ops`: enumerations shared by the rest of the package:
  `LogicOp`, `ArithOp`, `CompOp`, `OrderType`, `OverFlowBehavior`,
  `UndefinedBehavior`, `InterpreterType`, `FunctionType`, `PredicateType`,
  `ASTNodeType`, `Polarity`, `BooleanValue`, `ElementEncodingType`,
  `BooleanVarOrdering` and `AMOOneHot`, with `negate_polarity` and
  `negate_boolean_value`.
- `satune.sets`: `Set`, either a sorted list of values or an inclusive range
  (`exists`, `len`, iteration, `element_at`, `union_size`,
  `new_unique_item`, `describe`), and `MutableSet`, which grows through
  `add_element` and is sorted again by `finalize`.
- `satune.table`: `Table`, a partial map from input tuples to outputs
  (`add_entry`, `get_entry`), and its rows, `TableEntry`. A table without a
  range accepts only the results 0 and 1; a repeated input tuple raises
  `ValueError`.
- `satune.functions`: `FunctionOperator` (addition or subtraction of two
  values with 64-bit wraparound, `in_range`) and `FunctionTable`.
- `satune.predicates`: `PredicateOperator` (the comparisons of `CompOp`,
  through `evaluate`) and `PredicateTable`.
- `satune.order`: `Order`, a partial or total order over a set, which
  records its order constraints and the items they mention (`used_items`).
- `satune.nodes`: the AST nodes `BooleanConst`, `BooleanVar`,
  `BooleanOrder`, `BooleanPredicate`, `BooleanLogic`, `ElementSet`,
  `ElementConst` and `ElementFunction`; `BooleanEdge`, a possibly negated
  reference to a boolean (`~edge` negates it); and `describe(node)`, a
  readable rendering of a node and its children.
- `satune.ordergraph`: `OrderGraph` with `OrderNode` and `OrderEdge`, built
  from an order's constraints by `build_order_graph` (by polarity) or
  `build_must_order_graph` (by known value). It offers path queries
  (`is_there_path`), depth-first finishing orders (`dfs`, `dfs_must`),
  strongly connected component numbering
  (`compute_strongly_connected_components`) and
  `complete_partial_order_graph`, which adds pseudo-positive edges.
- `satune.polarity`: propagation of polarities from top-level constraints
  down through AND and IFF connectives, predicates and function elements
  (`compute_polarities`, `compute_polarity`, `update_edge_polarity`,
  `update_must_value`, ...). Other connectives raise `ValueError`.
- `satune.encoding`: `EncodingNode` and `EncodingEdge`, the parts of the
  graph that relates sets of values through equalities, comparisons and
  arithmetic, with `measure_similarity`, the edge weight `value()` and
  `convert_size` (the next power of two).
- `satune.asthash`: 32-bit structural hashes and structural equality for
  boolean and element nodes (`hash_boolean`, `compare_boolean`,
  `hash_element`, `compare_element`, `hash_sequence`).
- `satune.iterators`: `iter_booleans` and `iter_elements`, which yield every
  node reachable from a list of constraints once, children before parents.

## Example

```python
from satune.nodes import BooleanOrder
from satune.order import Order
from satune.ops import CompOp, OrderType, Polarity
from satune.ordergraph import build_order_graph
from satune.polarity import compute_polarities
from satune.predicates import PredicateOperator
from satune.sets import Set

s = Set(1, elements=[5, 1, 3])
assert s.exists(3) and not s.exists(4)
assert list(s) == [1, 3, 5]

r = Set(1, low=0, high=9)
assert len(r) == 10
assert s.union_size(r) == 10

lt = PredicateOperator(CompOp.LT)
assert lt.evaluate([1, 2])

order = Order(OrderType.TOTAL, Set(1, low=0, high=3))
before = BooleanOrder(order, 0, 1)
before.update_parents()          # registers the constraint with its order
compute_polarities([before.edge])
assert before.polarity is Polarity.TRUE

graph = build_order_graph(order)
edge = graph.lookup_edge(graph.get_node(0), graph.get_node(1))
assert edge.pol_pos
```

## What the package does not do

`satune` models constraints and analyses them; it does not solve them. There
is no solver object that builds and shares nodes, no translation into SAT
clauses, no SAT back end and no command-line program. The must-reach
analyses over order graphs and the assignment of binary-index encodings to
groups of encoding nodes are not included, so `satune.encoding` provides
the nodes and edges of the encoding graph but nothing that builds the graph
or chooses encodings from it.

## Tests

```
pip install ".[test]"
pytest
```