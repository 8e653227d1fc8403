import pytest

from satune.encoding import (
    EdgeEncodingType,
    EncodingEdge,
    EncodingNode,
    convert_size,
)
from satune.ops import ElementEncodingType
from satune.sets import Set


def node(*values, var_type=1):
    return EncodingNode(Set(var_type, list(values)))


@pytest.mark.parametrize("cost", [2, 3, 5, 7, 8, 9, 100, 1024, 1025])
def test_convert_size_is_next_power_of_two(cost):
    size = convert_size(cost)
    assert size >= cost
    assert size & (size - 1) == 0
    assert size < 2 * cost


def test_convert_size_keeps_powers_of_two():
    assert convert_size(16) == 16
    assert convert_size(1) == 1


def test_node_length_and_values():
    n = node(7, 3, 5)
    assert len(n) == 3
    assert [n.value_at(i) for i in range(len(n))] == [3, 5, 7]


def test_node_value_at_out_of_range():
    n = node(1, 2)
    with pytest.raises(IndexError):
        n.value_at(2)


def test_node_var_type():
    n = EncodingNode(Set(4, low=0, high=3))
    assert n.var_type == 4
    assert len(n) == 4


def test_node_add_element_deduplicates():
    n = node(1)
    marker = object()
    n.add_element(marker)
    n.add_element(marker)
    assert list(n.elements) == [marker]


def test_similarity_of_identical_sets():
    a = node(1, 2, 3)
    b = node(1, 2, 3)
    assert a.measure_similarity(b) == pytest.approx(2.0)


def test_similarity_of_disjoint_lower_sets():
    a = node(1, 2)
    b = node(10, 11)
    assert a.measure_similarity(b) == 0.0


def test_similarity_with_subset():
    a = node(1, 2, 3, 4)
    b = node(3, 4)
    assert a.measure_similarity(b) == pytest.approx(2 / len(a) + 2 / len(b))


def test_could_be_binary_index():
    n = node(1)
    assert n.could_be_binary_index() is True
    n.encoding = ElementEncodingType.BINARYINDEX
    assert n.could_be_binary_index() is True
    n.encoding = ElementEncodingType.ONEHOT
    assert n.could_be_binary_index() is False
    n.encoding = ElementEncodingType.UNARY
    assert n.could_be_binary_index() is False


def test_new_edge_defaults():
    edge = EncodingEdge(node(1), node(2))
    assert edge.encoding is EdgeEncodingType.UNASSIGNED
    assert (edge.num_arith_ops, edge.num_equals, edge.num_comparisons) == (0, 0, 0)
    assert edge.dst is None
    assert edge.value() == 0


def test_edge_value_for_equalities_uses_smaller_size():
    small, large = node(1, 2, 3), node(1, 2, 3, 4, 5)
    edge = EncodingEdge(large, small)
    edge.num_equals = 2
    assert edge.value() == 2 * len(small)


def test_edge_value_for_comparisons_uses_product():
    left, right = node(1, 2), node(4, 5, 6)
    edge = EncodingEdge(left, right)
    edge.num_comparisons = 1
    assert edge.value() == len(left) * len(right)


def test_edge_value_with_missing_node_counts_as_one():
    right = node(1, 2, 3)
    edge = EncodingEdge(None, right)
    edge.num_comparisons = 1
    edge.num_equals = 1
    assert edge.value() == len(right) + 1


def test_edges_compare_by_nodes():
    a, b, c = node(1), node(2), node(3)
    first = EncodingEdge(a, b, c)
    second = EncodingEdge(a, b, c)
    assert first == second
    assert hash(first) == hash(second)
    assert {first: 1}[second] == 1


def test_edges_with_other_nodes_differ():
    a, b, c = node(1), node(2), node(3)
    assert EncodingEdge(a, b) != EncodingEdge(a, b, c)
    assert EncodingEdge(a, b) != EncodingEdge(b, a)


def test_edge_counters_do_not_affect_equality():
    a, b = node(1), node(2)
    first = EncodingEdge(a, b)
    first.num_equals = 3
    first.encoding = EdgeEncodingType.MATCH
    assert first == EncodingEdge(a, b)


def test_sorting_edges_by_value_descending():
    a, b = node(1, 2), node(1, 2, 3)
    light = EncodingEdge(a, b)
    light.num_equals = 1
    heavy = EncodingEdge(b, a)
    heavy.num_comparisons = 1
    ordered = sorted([light, heavy], key=EncodingEdge.value, reverse=True)
    assert ordered[0] is heavy
    assert ordered[0].value() >= ordered[1].value()