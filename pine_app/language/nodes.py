"""
Program representation produced by the statement classifier.

Expressions and statements are immutable tagged variants. A Program keeps
declarations in source order, which is also evaluation order.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from .catalog import ValueType


# Expressions

@dataclass(frozen=True)
class Literal:
    """Constant value. A SERIES-typed literal is a name resolved at evaluation."""
    value: Any
    value_type: ValueType


@dataclass(frozen=True)
class VariableRef:
    """Reference to a built-in or declared variable."""
    name: str


@dataclass(frozen=True)
class FunctionCall:
    """Call of a named function with positional arguments."""
    name: str
    args: tuple["Expression", ...] = ()


@dataclass(frozen=True)
class Operator:
    """Operator application; two operands, or one for ``not``."""
    token: str
    operands: tuple["Expression", ...]


Expression = Union[Literal, VariableRef, FunctionCall, Operator]


# Statements

@dataclass(frozen=True)
class VersionPragma:
    text: str


@dataclass(frozen=True)
class IndicatorDecl:
    name: str
    overlay: bool


@dataclass(frozen=True)
class InputDecl:
    name: str
    value_type: ValueType
    default: Any
    options: Optional[tuple[Any, ...]] = None


@dataclass(frozen=True)
class VarDecl:
    name: str
    value_type: ValueType
    value: Expression


@dataclass(frozen=True)
class FunctionParam:
    name: str
    type: ValueType


@dataclass(frozen=True)
class ExpressionStatement:
    """Single expression used as a function body."""
    expression: Expression


@dataclass(frozen=True)
class FuncDecl:
    name: str
    params: tuple[FunctionParam, ...]
    return_type: ValueType
    body: tuple[ExpressionStatement, ...]


@dataclass(frozen=True)
class PlotStatement:
    expression: Expression
    color: str
    title: str


Statement = Union[
    VersionPragma, IndicatorDecl, InputDecl, VarDecl, FuncDecl, PlotStatement
]


@dataclass
class Program:
    """Structured script: declarations by kind plus ordered main statements."""
    version: str = ""
    # None until the first declaration of that kind is seen
    inputs: Optional[list[InputDecl]] = None
    variables: Optional[list[VarDecl]] = None
    functions: Optional[list[FuncDecl]] = None
    main: list[Statement] = field(default_factory=list)

    def add(self, statement: Statement) -> None:
        """Route a classified statement into the matching list."""
        if isinstance(statement, VersionPragma):
            self.version = statement.text
        elif isinstance(statement, InputDecl):
            if self.inputs is None:
                self.inputs = []
            self.inputs.append(statement)
        elif isinstance(statement, VarDecl):
            if self.variables is None:
                self.variables = []
            self.variables.append(statement)
        elif isinstance(statement, FuncDecl):
            if self.functions is None:
                self.functions = []
            self.functions.append(statement)
        else:
            self.main.append(statement)

    @property
    def plots(self) -> list[PlotStatement]:
        return [s for s in self.main if isinstance(s, PlotStatement)]

    @property
    def indicator(self) -> Optional[IndicatorDecl]:
        """First indicator declaration, if any."""
        for statement in self.main:
            if isinstance(statement, IndicatorDecl):
                return statement
        return None
