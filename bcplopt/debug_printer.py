"""Human-readable, indented dumps of BCPL syntax trees."""

from __future__ import annotations

import sys
from typing import Callable, Dict, Iterator, Optional, TextIO, Type

from .nodes import (
    Assignment,
    BinaryOp,
    CharLiteral,
    CompoundStatement,
    ConditionalExpression,
    DeclarationStatement,
    EndcaseStatement,
    FinishStatement,
    FloatLiteral,
    ForStatement,
    FunctionCall,
    FunctionDeclaration,
    GotoStatement,
    IfStatement,
    LabeledStatement,
    LetDeclaration,
    Node,
    NumberLiteral,
    Program,
    ResultisStatement,
    ReturnStatement,
    RoutineCall,
    StringLiteral,
    SwitchonStatement,
    TestStatement,
    UnaryOp,
    Valof,
    VariableAccess,
    VectorAccess,
    VectorConstructor,
    WhileStatement,
)
from .tokens import token_type_to_string

_INDENT = "|  "
_HEADER = "\n--- ABSTRACT SYNTAX TREE ---\n"
_FOOTER = "---------------------------\n\n"
_UNKNOWN = "Unknown AST Node"

_Lines = Iterator[str]


class DebugPrinter:
    """Renders a syntax tree as an indented outline, one node per line."""

    def __init__(self) -> None:
        self._handlers: Dict[Type[Node], Callable[[Node, int], _Lines]] = {
            Program: self._program,
            FunctionDeclaration: self._function,
            LetDeclaration: self._let,
            NumberLiteral: lambda n, i: self._line(i, f"IntLiteral: {n.value}"),
            FloatLiteral: lambda n, i: self._line(i, f"FloatLiteral: {format(n.value, 'g')}"),
            StringLiteral: lambda n, i: self._line(i, f'StringLiteral: "{n.value}"'),
            CharLiteral: lambda n, i: self._line(i, f"CharLiteral: '{chr(n.value & 0xFF)}'"),
            VariableAccess: lambda n, i: self._line(i, f"Variable: {n.name}"),
            UnaryOp: self._unary,
            BinaryOp: self._binary,
            FunctionCall: self._call,
            ConditionalExpression: self._conditional,
            Valof: lambda n, i: self._labelled(i, "Valof", ("Body:", n.body)),
            Assignment: self._assignment,
            RoutineCall: self._routine_call,
            CompoundStatement: self._compound,
            IfStatement: lambda n, i: self._labelled(
                i, "IfStatement", ("Condition:", n.condition), ("Then:", n.then_statement)
            ),
            TestStatement: self._test,
            WhileStatement: lambda n, i: self._labelled(
                i, "WhileStatement", ("Condition:", n.condition), ("Body:", n.body)
            ),
            ForStatement: self._for,
            GotoStatement: lambda n, i: self._labelled(i, "GotoStatement", ("Label:", n.label)),
            LabeledStatement: self._labeled_statement,
            ReturnStatement: lambda n, i: self._line(i, "ReturnStatement"),
            FinishStatement: lambda n, i: self._line(i, "FinishStatement"),
            ResultisStatement: lambda n, i: self._labelled(
                i, "ResultisStatement", ("Value:", n.value)
            ),
            SwitchonStatement: self._switchon,
            EndcaseStatement: lambda n, i: self._line(i, "EndcaseStatement"),
            VectorConstructor: lambda n, i: self._labelled(
                i, "VectorConstructor", ("Size:", n.size)
            ),
            VectorAccess: lambda n, i: self._labelled(
                i, "VectorAccess", ("Vector:", n.vector), ("Index:", n.index)
            ),
            DeclarationStatement: lambda n, i: self._walk(n.declaration, i),
        }

    def format_ast(self, program: Program) -> str:
        """Return the outline of ``program``, each line ending in a newline."""
        return "".join(f"{line}\n" for line in self._walk(program, 0))

    def print_ast(self, program: Program, file: Optional[TextIO] = None) -> None:
        """Write the outline of ``program``, framed by a header and footer."""
        out = sys.stdout if file is None else file
        out.write(_HEADER)
        out.write(self.format_ast(program))
        out.write(_FOOTER)

    # --- traversal ---

    def _walk(self, node: Optional[Node], level: int) -> _Lines:
        if node is None:
            return
        for cls in type(node).__mro__:
            handler = self._handlers.get(cls)
            if handler is not None:
                yield from handler(node, level)
                return
        yield _UNKNOWN

    @staticmethod
    def _line(level: int, text: str) -> _Lines:
        yield _INDENT * level + text

    def _labelled(self, level: int, title: str, *parts) -> _Lines:
        yield from self._line(level, title)
        for label, child in parts:
            yield from self._line(level + 1, label)
            yield from self._walk(child, level + 2)

    # --- specific nodes ---

    def _program(self, node: Program, level: int) -> _Lines:
        yield from self._line(level, "Program")
        for declaration in node.declarations:
            yield from self._walk(declaration, level + 1)

    def _function(self, node: FunctionDeclaration, level: int) -> _Lines:
        kind = "FunctionDecl" if node.body_expr is not None else "RoutineDecl"
        yield from self._line(level, f"{kind} {node.name}({', '.join(node.params)})")
        yield from self._walk(node.body_expr, level + 1)
        yield from self._walk(node.body_stmt, level + 1)

    def _let(self, node: LetDeclaration, level: int) -> _Lines:
        yield from self._line(level, "LetDecl")
        for var in node.initializers:
            yield from self._line(level + 1, f"Var {var.name}")
            yield from self._walk(var.init, level + 2)

    def _compound(self, node: CompoundStatement, level: int) -> _Lines:
        yield from self._line(level, "CompoundStatement")
        for statement in node.statements:
            yield from self._walk(statement, level + 1)

    def _assignment(self, node: Assignment, level: int) -> _Lines:
        yield from self._line(level, "Assignment")
        yield from self._line(level + 1, "LHS:")
        for target in node.lhs:
            yield from self._walk(target, level + 2)
        yield from self._line(level + 1, "RHS:")
        for value in node.rhs:
            yield from self._walk(value, level + 2)

    def _routine_call(self, node: RoutineCall, level: int) -> _Lines:
        yield from self._line(level, "RoutineCall")
        yield from self._walk(node.call_expression, level + 1)

    def _test(self, node: TestStatement, level: int) -> _Lines:
        parts = [("Condition:", node.condition), ("Then:", node.then_statement)]
        if node.else_statement is not None:
            parts.append(("Else:", node.else_statement))
        yield from self._labelled(level, "TestStatement", *parts)

    def _for(self, node: ForStatement, level: int) -> _Lines:
        parts = [("From:", node.from_expr), ("To:", node.to_expr)]
        if node.by_expr is not None:
            parts.append(("By:", node.by_expr))
        parts.append(("Body:", node.body))
        yield from self._labelled(level, f"ForStatement (Var: {node.var_name})", *parts)

    def _labeled_statement(self, node: LabeledStatement, level: int) -> _Lines:
        yield from self._line(level, f"Label: {node.name}")
        yield from self._walk(node.statement, level)

    def _conditional(self, node: ConditionalExpression, level: int) -> _Lines:
        yield from self._labelled(
            level,
            "ConditionalExpression",
            ("Condition:", node.condition),
            ("True-Expr:", node.true_expr),
            ("False-Expr:", node.false_expr),
        )

    def _binary(self, node: BinaryOp, level: int) -> _Lines:
        yield from self._line(level, f"BinaryOp: {token_type_to_string(node.op)}")
        yield from self._walk(node.left, level + 1)
        yield from self._walk(node.right, level + 1)

    def _unary(self, node: UnaryOp, level: int) -> _Lines:
        yield from self._line(level, f"UnaryOp: {token_type_to_string(node.op)}")
        yield from self._walk(node.rhs, level + 1)

    def _call(self, node: FunctionCall, level: int) -> _Lines:
        yield from self._labelled(level, "FunctionCall", ("Function:", node.function))
        if node.arguments:
            yield from self._line(level + 1, "Arguments:")
            for argument in node.arguments:
                yield from self._walk(argument, level + 2)

    def _switchon(self, node: SwitchonStatement, level: int) -> _Lines:
        yield from self._labelled(level, "SwitchonStatement", ("Expression:", node.expression))
        if node.cases:
            yield from self._line(level + 1, "Cases:")
            for case in node.cases:
                yield from self._line(level + 2, f"CASE {case.value}:")
                yield from self._walk(case.statement, level + 3)
        if node.default_case is not None:
            yield from self._line(level + 1, "Default:")
            yield from self._walk(node.default_case, level + 2)