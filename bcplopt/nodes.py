"""Abstract syntax tree node types for BCPL programs."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional

from .tokens import TokenType


class Node:
    """Base of every syntax tree node."""


class Expression(Node):
    """Base of nodes that yield a value."""


class Statement(Node):
    """Base of nodes that are executed for their effect."""


class Declaration(Node):
    """Base of top-level and block declarations."""


@dataclass
class Program(Node):
    """A whole compilation unit."""

    declarations: List[Declaration] = field(default_factory=list)


# --- Expressions ---


@dataclass
class NumberLiteral(Expression):
    value: int


@dataclass
class FloatLiteral(Expression):
    value: float


@dataclass
class StringLiteral(Expression):
    value: str


@dataclass
class CharLiteral(Expression):
    value: int


@dataclass
class VariableAccess(Expression):
    name: str


@dataclass
class UnaryOp(Expression):
    op: TokenType
    rhs: Expression


@dataclass
class BinaryOp(Expression):
    op: TokenType
    left: Expression
    right: Expression


@dataclass
class FunctionCall(Expression):
    function: Expression
    arguments: List[Expression] = field(default_factory=list)


@dataclass
class ConditionalExpression(Expression):
    condition: Expression
    true_expr: Expression
    false_expr: Expression


@dataclass
class Valof(Expression):
    body: Statement


@dataclass
class VectorConstructor(Expression):
    size: Expression


@dataclass
class VectorAccess(Expression):
    vector: Expression
    index: Expression


# --- Statements ---


@dataclass
class Assignment(Statement):
    lhs: List[Expression] = field(default_factory=list)
    rhs: List[Expression] = field(default_factory=list)


@dataclass
class RoutineCall(Statement):
    call_expression: Expression


@dataclass
class CompoundStatement(Statement):
    statements: List[Statement] = field(default_factory=list)


@dataclass
class IfStatement(Statement):
    condition: Expression
    then_statement: Statement


@dataclass
class TestStatement(Statement):
    condition: Expression
    then_statement: Statement
    else_statement: Optional[Statement] = None


@dataclass
class WhileStatement(Statement):
    condition: Expression
    body: Statement


@dataclass
class ForStatement(Statement):
    var_name: str
    from_expr: Expression
    to_expr: Expression
    by_expr: Optional[Expression]
    body: Statement


@dataclass
class GotoStatement(Statement):
    label: Expression


@dataclass
class LabeledStatement(Statement):
    name: str
    statement: Statement


@dataclass
class ReturnStatement(Statement):
    pass


@dataclass
class FinishStatement(Statement):
    pass


@dataclass
class ResultisStatement(Statement):
    value: Expression


class LoopType(enum.Enum):
    """Form of a REPEAT loop."""

    REPEAT = "REPEAT"
    REPEAT_WHILE = "REPEATWHILE"
    REPEAT_UNTIL = "REPEATUNTIL"


@dataclass
class RepeatStatement(Statement):
    body: Statement
    condition: Optional[Expression] = None
    loop_type: LoopType = LoopType.REPEAT


@dataclass
class SwitchCase:
    """One CASE arm of a SWITCHON statement."""

    value: int
    label: str
    statement: Statement


@dataclass
class SwitchonStatement(Statement):
    expression: Expression
    cases: List[SwitchCase] = field(default_factory=list)
    default_case: Optional[Statement] = None


@dataclass
class EndcaseStatement(Statement):
    pass


@dataclass
class DeclarationStatement(Statement):
    """A declaration appearing where a statement is expected."""

    declaration: Declaration


# --- Declarations ---


@dataclass
class VarInit:
    """One name introduced by LET, with its optional initial value."""

    name: str
    init: Optional[Expression] = None


@dataclass
class LetDeclaration(Declaration):
    initializers: List[VarInit] = field(default_factory=list)


@dataclass
class FunctionDeclaration(Declaration):
    """A function (body_expr) or routine (body_stmt) definition."""

    name: str
    params: List[str] = field(default_factory=list)
    body_expr: Optional[Expression] = None
    body_stmt: Optional[Statement] = None


@dataclass
class GlobalEntry:
    name: str
    index: Optional[int] = None


@dataclass
class GlobalDeclaration(Declaration):
    globals: List[GlobalEntry] = field(default_factory=list)


@dataclass
class ManifestEntry:
    name: str
    value: int


@dataclass
class ManifestDeclaration(Declaration):
    manifests: List[ManifestEntry] = field(default_factory=list)


@dataclass
class GetDirective(Declaration):
    filename: str