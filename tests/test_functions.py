import pytest

from satune.functions import FunctionOperator, FunctionTable
from satune.ops import ArithOp, FunctionType, OverFlowBehavior, UndefinedBehavior
from satune.sets import Set
from satune.table import Table


def make_op(op, range_set=None):
    return FunctionOperator(op, range_set or Set(0, low=0, high=10), OverFlowBehavior.IGNORE)


def test_add():
    assert make_op(ArithOp.ADD).apply([2, 3]) == 5


def test_sub_wraps_around_64_bits():
    assert make_op(ArithOp.SUB).apply((0, 1)) == (1 << 64) - 1


def test_add_wraps_around_64_bits():
    top = (1 << 64) - 1
    assert make_op(ArithOp.ADD).apply([top, 1]) == 0


def test_add_then_sub_round_trip():
    add, sub = make_op(ArithOp.ADD), make_op(ArithOp.SUB)
    assert sub.apply([add.apply([17, 25]), 25]) == 17


@pytest.mark.parametrize("values", [[1], [1, 2, 3]])
def test_apply_requires_two_values(values):
    with pytest.raises(ValueError):
        make_op(ArithOp.ADD).apply(values)


def test_in_range_uses_range_set():
    op = make_op(ArithOp.ADD, Set(0, [2, 4, 6]))
    assert op.in_range(4)
    assert not op.in_range(5)


def test_operator_fields():
    op = make_op(ArithOp.SUB)
    assert op.type is FunctionType.OPERATORFUNC
    assert op.overflow_behavior is OverFlowBehavior.IGNORE


def test_operator_describe():
    assert make_op(ArithOp.ADD).describe() == "{FunctionOperator: ADD}\n"
    assert make_op(ArithOp.SUB).describe() == "{FunctionOperator: SUB}\n"


def test_function_table_range_is_table_range():
    range_set = Set(0, [1, 2])
    table = Table(range_set)
    function = FunctionTable(table, UndefinedBehavior.FLAGIFFUNDEFINED)
    assert function.range_set is range_set
    assert function.type is FunctionType.TABLEFUNC
    assert function.undef_behavior is UndefinedBehavior.FLAGIFFUNDEFINED


def test_function_table_describe_wraps_table():
    table = Table(Set(0, [1, 2]))
    table.add_entry([0], 1)
    text = FunctionTable(table, UndefinedBehavior.IGNOREBEHAVIOR).describe()
    assert text.startswith("{FunctionTable:\n")
    assert table.describe() in text