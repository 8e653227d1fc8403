"""Predicates over elements: comparison operators and tables."""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from collections.abc import Sequence

from satune.ops import CompOp, PredicateType, UndefinedBehavior
from satune.table import Table

_COMPARE = {
    CompOp.EQUALS: operator.eq,
    CompOp.LT: operator.lt,
    CompOp.GT: operator.gt,
    CompOp.LTE: operator.le,
    CompOp.GTE: operator.ge,
}

_SYMBOLS = {
    CompOp.EQUALS: "==",
    CompOp.LT: "<",
    CompOp.GT: ">",
    CompOp.LTE: "<=",
    CompOp.GTE: ">=",
}


class Predicate(ABC):
    """Base of all predicates."""

    def __init__(self, predicate_type: PredicateType) -> None:
        self.type = predicate_type

    @abstractmethod
    def describe(self) -> str:
        """A readable description."""


class PredicateOperator(Predicate):
    """A binary comparison."""

    def __init__(self, op: CompOp) -> None:
        super().__init__(PredicateType.OPERATORPRED)
        self._op = CompOp(op)

    @property
    def op(self) -> CompOp:
        return self._op

    def evaluate(self, inputs: Sequence[int]) -> bool:
        """Compare two values."""
        first, second = inputs
        return _COMPARE[self._op](first, second)

    def describe(self) -> str:
        return f"PredicateOperator: {_SYMBOLS[self._op]}\n"


class PredicateTable(Predicate):
    """A predicate given by a table of boolean outputs."""

    def __init__(self, table: Table, undefined_behavior: UndefinedBehavior) -> None:
        super().__init__(PredicateType.TABLEPRED)
        self.table = table
        self.undefined_behavior = UndefinedBehavior(undefined_behavior)

    def describe(self) -> str:
        return "{PredicateTable:\n" + self.table.describe() + "}\n"