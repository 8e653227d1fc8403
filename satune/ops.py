"""Operator, node-kind and analysis enumerations shared by the constraint AST."""

from __future__ import annotations

from enum import IntEnum


class LogicOp(IntEnum):
    """Boolean connectives."""

    AND = 0
    OR = 1
    NOT = 2
    XOR = 3
    IFF = 4
    IMPLIES = 5


class ArithOp(IntEnum):
    """Arithmetic operators over element values."""

    ADD = 0
    SUB = 1


class CompOp(IntEnum):
    """Comparison operators over element values."""

    EQUALS = 0
    LT = 1
    GT = 2
    LTE = 3
    GTE = 4


class OrderType(IntEnum):
    """Kind of order relation."""

    PARTIAL = 0
    TOTAL = 1


class OverFlowBehavior(IntEnum):
    """What happens when an arithmetic result falls outside its range.

    FLAGFORCESOVERFLOW forces overflow when the flag is true; OVERFLOWSETSFLAG
    sets the flag on overflow; FLAGIFFOVERFLOW sets the flag exactly on overflow;
    IGNORE leaves unrepresentable results unconstrained; WRAPAROUND wraps like
    integer arithmetic; NOOVERFLOW promises that overflow cannot happen.
    """

    IGNORE = 0
    WRAPAROUND = 1
    FLAGFORCESOVERFLOW = 2
    OVERFLOWSETSFLAG = 3
    FLAGIFFOVERFLOW = 4
    NOOVERFLOW = 5


class UndefinedBehavior(IntEnum):
    """What happens when a table has no entry for some inputs."""

    IGNOREBEHAVIOR = 0
    FLAGFORCEUNDEFINED = 1
    UNDEFINEDSETSFLAG = 2
    FLAGIFFUNDEFINED = 3


class InterpreterType(IntEnum):
    """Back ends a problem can be handed to."""

    SATUNE = 0
    ALLOY = 1
    Z3 = 2
    MATHSAT = 3
    SMTRAT = 4


class FunctionType(IntEnum):
    """Kind of function."""

    TABLEFUNC = 0
    OPERATORFUNC = 1


class PredicateType(IntEnum):
    """Kind of predicate."""

    TABLEPRED = 0
    OPERATORPRED = 1


class ASTNodeType(IntEnum):
    """Kind of node in the constraint AST."""

    ORDERCONST = 0
    BOOLEANVAR = 1
    LOGICOP = 2
    PREDICATEOP = 3
    BOOLCONST = 4
    ELEMSET = 5
    ELEMFUNCRETURN = 6
    ELEMCONST = 7
    BOOLEANEDGE = 8
    ORDERTYPE = 9
    SETTYPE = 10
    PREDTABLETYPE = 11
    PREDOPERTYPE = 12
    TABLETYPE = 13
    FUNCTABLETYPE = 14
    FUNCOPTYPE = 15


class Polarity(IntEnum):
    """Polarities a boolean occurs with; BOTHTRUEFALSE is TRUE | FALSE."""

    UNDEFINED = 0
    TRUE = 1
    FALSE = 2
    BOTHTRUEFALSE = 3


class BooleanValue(IntEnum):
    """Values a boolean is known to take; UNSAT is MUSTBETRUE | MUSTBEFALSE."""

    UNDEFINED = 0
    MUSTBETRUE = 1
    MUSTBEFALSE = 2
    UNSAT = 3


class ElementEncodingType(IntEnum):
    """How an element's value is encoded into SAT variables."""

    UNASSIGNED = 0
    ONEHOT = 1
    UNARY = 2
    BINARYINDEX = 3
    BINARYVAL = 4


class BooleanVarOrdering(IntEnum):
    """Order in which boolean variables are created."""

    CONSTRAINTORDERING = 0
    ELEMENTORDERING = 1
    REVERSEORDERING = 2


class AMOOneHot(IntEnum):
    """At-most-one encodings for one-hot elements."""

    BINOMIAL = 0
    COMMANDER = 1
    SEQ_COUNTER = 2


def negate_polarity(polarity: int) -> Polarity:
    """Swap TRUE and FALSE; UNDEFINED and BOTHTRUEFALSE are unchanged."""
    polarity = Polarity(polarity)
    if polarity is Polarity.TRUE:
        return Polarity.FALSE
    if polarity is Polarity.FALSE:
        return Polarity.TRUE
    return polarity


def negate_boolean_value(value: int) -> BooleanValue:
    """Swap MUSTBETRUE and MUSTBEFALSE; UNDEFINED and UNSAT are unchanged."""
    value = BooleanValue(value)
    if value is BooleanValue.MUSTBETRUE:
        return BooleanValue.MUSTBEFALSE
    if value is BooleanValue.MUSTBEFALSE:
        return BooleanValue.MUSTBETRUE
    return value