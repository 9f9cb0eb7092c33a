"""The syntax tree produced by the parser."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Union


@dataclass
class BoolLiteral:
    value: bool


@dataclass
class IntLiteral:
    value: int


@dataclass
class Ident:
    name: str


@dataclass
class UnitLiteral:
    """The ``unit`` value."""


class PrefixOperator(enum.Enum):
    NOT = "!"
    NEGATIVE = "-"


@dataclass
class PrefixExpr:
    operator: PrefixOperator
    expr: Expression


class InfixOperator(enum.Enum):
    PLUS = "+"
    MINUS = "-"
    DIVIDE = "/"
    MULTIPLY = "*"
    EXPONENT = "^"
    EQUAL = "=="
    NOT_EQUAL = "!="
    LESS_THAN = "<"
    GREATER_THAN = ">"
    LESS_THAN_OR_EQUAL = "<="
    GREATER_THAN_OR_EQUAL = ">="


@dataclass
class InfixExpr:
    left: Expression
    operator: InfixOperator
    right: Expression


@dataclass
class TypeName:
    """A type written as a name."""

    name: str


@dataclass
class VariableDecl:
    name: str
    value: Expression
    mutable: bool
    type_: TypeName | None = None


@dataclass
class LabeledParam:
    """A parameter named at the call site, by its label or else its name."""

    name: str
    type_: TypeName
    label: str | None = None


@dataclass
class UnlabeledParam:
    """A parameter passed by position at the call site."""

    name: str
    type_: TypeName


@dataclass
class Function:
    params: list[Param] = field(default_factory=list)
    return_type: TypeName | None = None
    body: list[ExpressionStatement] = field(default_factory=list)


@dataclass
class Argument:
    value: Expression
    label: str | None = None


@dataclass
class FunctionCall:
    name: str
    args: list[Argument] = field(default_factory=list)


Param = Union[LabeledParam, UnlabeledParam]

Expression = Union[
    BoolLiteral,
    IntLiteral,
    Ident,
    UnitLiteral,
    PrefixExpr,
    InfixExpr,
    VariableDecl,
    Function,
    FunctionCall,
]


@dataclass
class ExpressionStatement:
    """An expression, discarded when a semicolon follows it."""

    expr: Expression
    discarded: bool


@dataclass
class Program:
    statements: list[ExpressionStatement] = field(default_factory=list)


class Precedence(enum.IntEnum):
    """Binding strength of operators, weakest first."""

    LOWEST = 0
    SUM = 1
    PRODUCT = 2
    GROUP = 3