import pytest

from satune.functions import FunctionOperator
from satune.nodes import (
    BooleanConst,
    BooleanEdge,
    BooleanLogic,
    BooleanOrder,
    BooleanPredicate,
    BooleanVar,
    ElementConst,
    ElementFunction,
    ElementSet,
    describe,
)
from satune.ops import (
    ArithOp,
    ASTNodeType,
    BooleanValue,
    CompOp,
    LogicOp,
    OrderType,
    OverFlowBehavior,
    Polarity,
)
from satune.order import Order
from satune.predicates import PredicateOperator
from satune.sets import Set


def test_edge_negation_round_trip():
    var = BooleanVar(0)
    edge = BooleanEdge(var)
    assert edge.negate().negate() == edge
    assert ~edge == edge.negate()
    assert (~edge).negated is True
    assert (~edge).boolean is var


def test_edges_compare_by_node_identity():
    a, b = BooleanVar(0), BooleanVar(0)
    assert BooleanEdge(a) == BooleanEdge(a)
    assert BooleanEdge(a) != BooleanEdge(b)
    assert BooleanEdge(a) != BooleanEdge(a, True)
    assert len({BooleanEdge(a), BooleanEdge(a), ~BooleanEdge(a)}) == 2


def test_boolean_invert_gives_negated_edge():
    var = BooleanVar(0)
    assert ~var == ~var.edge
    assert var.edge == BooleanEdge(var, False)


def test_boolean_defaults_and_ids():
    first, second = BooleanVar(3), BooleanVar(3)
    assert second.id > first.id
    assert first.polarity is Polarity.UNDEFINED
    assert first.bool_val is BooleanValue.UNDEFINED
    assert first.type is ASTNodeType.BOOLEANVAR
    assert first.parents == []


def test_must_value_drives_truth():
    var = BooleanVar(0)
    assert not var.is_true() and not var.is_false()
    var.bool_val = BooleanValue.MUSTBETRUE
    assert var.is_true() and not var.is_false()
    var.bool_val = BooleanValue.UNSAT
    assert not var.is_true() and not var.is_false()


def test_constant_truth():
    assert BooleanConst(True).is_true()
    assert BooleanConst(False).is_false()
    assert not BooleanConst(False).is_true()


def test_logic_update_parents():
    a, b = BooleanVar(0), BooleanVar(0)
    logic = BooleanLogic(LogicOp.AND, [a.edge, ~b])
    logic.update_parents()
    assert a.parents == [logic]
    assert b.parents == [logic]
    assert logic.replaced is False


def test_predicate_update_parents_includes_undef_status():
    set_ = Set(0, [1, 2])
    left, right = ElementSet(set_), ElementConst(1, set_)
    flag = BooleanVar(0)
    pred = BooleanPredicate(PredicateOperator(CompOp.EQUALS), [left, right], ~flag)
    pred.update_parents()
    assert left.parents == [pred]
    assert right.parents == [pred]
    assert flag.parents == [pred]


def test_order_constraint_update_parents():
    order = Order(OrderType.TOTAL, Set(0, [5, 6]))
    constraint = BooleanOrder(order, 5, 6)
    constraint.update_parents()
    assert order.constraints == [constraint]


def test_element_kinds_and_ranges():
    set_ = Set(0, low=0, high=7)
    var = ElementSet(set_)
    const = ElementConst(4, set_)
    assert var.type is ASTNodeType.ELEMSET
    assert const.type is ASTNodeType.ELEMCONST
    assert var.range is set_
    assert const.range is set_


def test_element_freeze():
    element = ElementSet(Set(0, [1]))
    assert element.frozen is False
    element.freeze()
    assert element.frozen is True


def test_element_function_range_and_parents():
    range_set = Set(0, low=0, high=10)
    function = FunctionOperator(ArithOp.ADD, range_set, OverFlowBehavior.IGNORE)
    a, b = ElementSet(range_set), ElementSet(range_set)
    flag = BooleanVar(0)
    result = ElementFunction(function, [a, b], flag.edge)
    result.update_parents()
    assert result.range is range_set
    assert a.parents == [result] and b.parents == [result]
    assert flag.parents == [result]


def test_describe_constant():
    const = BooleanConst(True)
    assert describe(const).endswith(":TRUE\n")
    assert describe(BooleanConst(False)).endswith(":FALSE\n")


def test_describe_logic_marks_negation():
    a, b = BooleanVar(0), BooleanVar(0)
    logic = BooleanLogic(LogicOp.IFF, [a.edge, ~b])
    text = describe(logic)
    assert "IFF" in text
    assert "!" + describe(b) in text
    assert "!" + describe(a) not in text


def test_describe_predicate_includes_inputs():
    set_ = Set(0, [1, 2])
    pred = BooleanPredicate(
        PredicateOperator(CompOp.LT), [ElementSet(set_), ElementConst(2, set_)]
    )
    text = describe(pred)
    assert "PredicateOperator: <" in text
    assert set_.describe() in text


def test_describe_rejects_unknown():
    with pytest.raises(TypeError):
        describe(object())