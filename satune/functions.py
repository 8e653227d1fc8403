"""Functions over elements: arithmetic operators and tables."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from satune.ops import ArithOp, FunctionType, OverFlowBehavior, UndefinedBehavior
from satune.sets import Set
from satune.table import Table

_MASK64 = (1 << 64) - 1


class Function(ABC):
    """Base of all functions."""

    def __init__(self, function_type: FunctionType) -> None:
        self.type = function_type

    @abstractmethod
    def describe(self) -> str:
        """A readable description."""


class FunctionOperator(Function):
    """A binary arithmetic operator with a result range."""

    def __init__(
        self, op: ArithOp, range_set: Set, overflow_behavior: OverFlowBehavior
    ) -> None:
        super().__init__(FunctionType.OPERATORFUNC)
        self.op = ArithOp(op)
        self.range_set = range_set
        self.overflow_behavior = OverFlowBehavior(overflow_behavior)

    def apply(self, values: Iterable[int]) -> int:
        """Apply the operator to two values with 64-bit wraparound."""
        operands = tuple(values)
        if len(operands) != 2:
            raise ValueError(f"operator takes two values, got {len(operands)}")
        first, second = operands
        if self.op is ArithOp.ADD:
            return (first + second) & _MASK64
        return (first - second) & _MASK64

    def in_range(self, value: int) -> bool:
        """Whether value lies in the operator's range."""
        return self.range_set.exists(value)

    def describe(self) -> str:
        return f"{{FunctionOperator: {'ADD' if self.op is ArithOp.ADD else 'SUB'}}}\n"


class FunctionTable(Function):
    """A function given by a table."""

    def __init__(self, table: Table, undef_behavior: UndefinedBehavior) -> None:
        super().__init__(FunctionType.TABLEFUNC)
        self.table = table
        self.undef_behavior = UndefinedBehavior(undef_behavior)

    @property
    def range_set(self) -> Set | None:
        return self.table.range_set

    def describe(self) -> str:
        return "{FunctionTable:\n" + self.table.describe() + "}\n"