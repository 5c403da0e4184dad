"""Constant folding and simple algebraic simplification of BCPL syntax trees."""

from __future__ import annotations

from typing import Callable, Dict, Mapping, Optional, Type

from .nodes import (
    Assignment,
    BinaryOp,
    CharLiteral,
    CompoundStatement,
    ConditionalExpression,
    Declaration,
    DeclarationStatement,
    EndcaseStatement,
    Expression,
    FinishStatement,
    FloatLiteral,
    ForStatement,
    FunctionCall,
    FunctionDeclaration,
    GetDirective,
    GlobalDeclaration,
    GotoStatement,
    IfStatement,
    LabeledStatement,
    LetDeclaration,
    ManifestDeclaration,
    Node,
    NumberLiteral,
    Program,
    RepeatStatement,
    ResultisStatement,
    ReturnStatement,
    RoutineCall,
    Statement,
    StringLiteral,
    SwitchCase,
    SwitchonStatement,
    TestStatement,
    UnaryOp,
    Valof,
    VarInit,
    VariableAccess,
    VectorAccess,
    VectorConstructor,
    WhileStatement,
)
from .tokens import TokenType

_WORD = 1 << 64
_SIGN = 1 << 63
_TRUE = -1
_FALSE = 0


def _wrap(value: int) -> int:
    """Reduce an integer to a signed 64-bit machine word."""
    value &= _WORD - 1
    return value - _WORD if value >= _SIGN else value


def _truncating_div(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _truth(flag: bool) -> int:
    return _TRUE if flag else _FALSE


_INT_FOLDS: Dict[TokenType, Callable[[int, int], Optional[int]]] = {
    TokenType.OP_PLUS: lambda l, r: _wrap(l + r),
    TokenType.OP_MINUS: lambda l, r: _wrap(l - r),
    TokenType.OP_MULTIPLY: lambda l, r: _wrap(l * r),
    TokenType.OP_DIVIDE: lambda l, r: _wrap(_truncating_div(l, r)) if r != 0 else None,
    TokenType.OP_EQ: lambda l, r: _truth(l == r),
    TokenType.OP_NE: lambda l, r: _truth(l != r),
    TokenType.OP_LT: lambda l, r: _truth(l < r),
    TokenType.OP_LE: lambda l, r: _truth(l <= r),
    TokenType.OP_GT: lambda l, r: _truth(l > r),
    TokenType.OP_GE: lambda l, r: _truth(l >= r),
}

_FLOAT_FOLDS: Dict[TokenType, Callable[[float, float], Optional[float]]] = {
    TokenType.OP_FLOAT_PLUS: lambda l, r: l + r,
    TokenType.OP_FLOAT_MINUS: lambda l, r: l - r,
    TokenType.OP_FLOAT_MULTIPLY: lambda l, r: l * r,
    TokenType.OP_FLOAT_DIVIDE: lambda l, r: l / r if r != 0.0 else None,
}


def _dispatch(handlers: Mapping[Type[Node], Callable], node: Node, kind: str):
    for cls in type(node).__mro__:
        handler = handlers.get(cls)
        if handler is not None:
            return handler(node)
    raise TypeError(f"ConstantFoldingPass: Unsupported {kind} node.")


class ConstantFoldingPass:
    """Evaluates constant expressions at compile time and simplifies the tree.

    The pass builds a new tree and leaves its input untouched. Manifest
    constants are looked up in the mapping given at construction time.
    """

    def __init__(self, manifests: Mapping[str, int]) -> None:
        self._manifests = manifests
        self._expressions: Dict[Type[Node], Callable[[Node], Expression]] = {
            NumberLiteral: lambda n: NumberLiteral(n.value),
            FloatLiteral: lambda n: FloatLiteral(n.value),
            StringLiteral: lambda n: StringLiteral(n.value),
            CharLiteral: lambda n: CharLiteral(n.value),
            VariableAccess: self._variable,
            UnaryOp: lambda n: UnaryOp(n.op, self._expr(n.rhs)),
            BinaryOp: self._binary,
            FunctionCall: lambda n: FunctionCall(
                self._expr(n.function), [self._expr(a) for a in n.arguments]
            ),
            ConditionalExpression: self._conditional,
            Valof: lambda n: Valof(self._stmt(n.body)),
            VectorConstructor: lambda n: VectorConstructor(self._expr(n.size)),
            VectorAccess: lambda n: VectorAccess(self._expr(n.vector), self._expr(n.index)),
        }
        self._statements: Dict[Type[Node], Callable[[Node], Optional[Statement]]] = {
            Assignment: lambda n: Assignment(
                [self._expr(e) for e in n.lhs], [self._expr(e) for e in n.rhs]
            ),
            RoutineCall: lambda n: RoutineCall(self._expr(n.call_expression)),
            CompoundStatement: self._compound,
            IfStatement: self._if,
            TestStatement: self._test,
            WhileStatement: lambda n: WhileStatement(self._expr(n.condition), self._stmt(n.body)),
            ForStatement: self._for,
            GotoStatement: lambda n: GotoStatement(self._expr(n.label)),
            LabeledStatement: lambda n: LabeledStatement(n.name, self._stmt(n.statement)),
            ReturnStatement: lambda n: ReturnStatement(),
            FinishStatement: lambda n: FinishStatement(),
            ResultisStatement: lambda n: ResultisStatement(self._expr(n.value)),
            RepeatStatement: lambda n: RepeatStatement(
                self._stmt(n.body), self._expr(n.condition), n.loop_type
            ),
            SwitchonStatement: self._switchon,
            EndcaseStatement: lambda n: EndcaseStatement(),
            DeclarationStatement: self._declaration_statement,
        }
        self._declarations: Dict[Type[Node], Callable[[Node], Optional[Declaration]]] = {
            LetDeclaration: lambda n: LetDeclaration(
                [VarInit(i.name, self._expr(i.init)) for i in n.initializers]
            ),
            FunctionDeclaration: lambda n: FunctionDeclaration(
                n.name, list(n.params), self._expr(n.body_expr), self._stmt(n.body_stmt)
            ),
            GlobalDeclaration: lambda n: None,
            ManifestDeclaration: lambda n: None,
            GetDirective: lambda n: None,
        }

    def name(self) -> str:
        """Human-readable name of the pass."""
        return "Constant Folding Pass"

    def apply(self, program: Program) -> Program:
        """Return an optimised copy of ``program``."""
        declarations = (self._decl(d) for d in program.declarations)
        return Program([d for d in declarations if d is not None])

    # --- dispatch ---

    def _expr(self, node: Optional[Expression]) -> Optional[Expression]:
        if node is None:
            return None
        return _dispatch(self._expressions, node, "Expression")

    def _stmt(self, node: Optional[Statement]) -> Optional[Statement]:
        if node is None:
            return None
        return _dispatch(self._statements, node, "Statement")

    def _decl(self, node: Optional[Declaration]) -> Optional[Declaration]:
        if node is None:
            return None
        return _dispatch(self._declarations, node, "Declaration")

    # --- expressions ---

    def _variable(self, node: VariableAccess) -> Expression:
        if node.name in self._manifests:
            return NumberLiteral(self._manifests[node.name])
        return VariableAccess(node.name)

    def _binary(self, node: BinaryOp) -> Expression:
        left = self._expr(node.left)
        right = self._expr(node.right)
        op = node.op

        if isinstance(left, NumberLiteral) and isinstance(right, NumberLiteral):
            fold = _INT_FOLDS.get(op)
            if fold is not None:
                result = fold(left.value, right.value)
                if result is not None:
                    return NumberLiteral(result)

        if isinstance(left, FloatLiteral) and isinstance(right, FloatLiteral):
            fold = _FLOAT_FOLDS.get(op)
            if fold is not None:
                result = fold(left.value, right.value)
                if result is not None:
                    return FloatLiteral(result)

        if isinstance(right, NumberLiteral):
            if right.value == 2:
                if op is TokenType.OP_MULTIPLY:
                    return BinaryOp(TokenType.OP_LSHIFT, left, NumberLiteral(1))
                if op is TokenType.OP_DIVIDE:
                    return BinaryOp(TokenType.OP_RSHIFT, left, NumberLiteral(1))
            if right.value == 0 and op in (TokenType.OP_PLUS, TokenType.OP_MINUS):
                return left
            if right.value == 1 and op in (TokenType.OP_MULTIPLY, TokenType.OP_DIVIDE):
                return left
            if right.value == 0 and op is TokenType.OP_MULTIPLY:
                return NumberLiteral(0)

        if isinstance(left, NumberLiteral):
            if op is TokenType.OP_PLUS and left.value == 0:
                return right
            if op is TokenType.OP_MULTIPLY and left.value == 1:
                return right

        return BinaryOp(op, left, right)

    def _conditional(self, node: ConditionalExpression) -> Expression:
        condition = self._expr(node.condition)
        if isinstance(condition, NumberLiteral):
            chosen = node.true_expr if condition.value != 0 else node.false_expr
            return self._expr(chosen)
        return ConditionalExpression(
            condition, self._expr(node.true_expr), self._expr(node.false_expr)
        )

    # --- statements ---

    def _compound(self, node: CompoundStatement) -> Statement:
        statements = (self._stmt(s) for s in node.statements)
        return CompoundStatement([s for s in statements if s is not None])

    def _if(self, node: IfStatement) -> Optional[Statement]:
        condition = self._expr(node.condition)
        if isinstance(condition, NumberLiteral):
            if condition.value != 0:
                return self._stmt(node.then_statement)
            return CompoundStatement([])
        return IfStatement(condition, self._stmt(node.then_statement))

    def _test(self, node: TestStatement) -> Optional[Statement]:
        condition = self._expr(node.condition)
        if isinstance(condition, NumberLiteral):
            if condition.value != 0:
                return self._stmt(node.then_statement)
            if node.else_statement is not None:
                return self._stmt(node.else_statement)
            return CompoundStatement([])
        return TestStatement(
            condition, self._stmt(node.then_statement), self._stmt(node.else_statement)
        )

    def _for(self, node: ForStatement) -> Statement:
        return ForStatement(
            node.var_name,
            self._expr(node.from_expr),
            self._expr(node.to_expr),
            self._expr(node.by_expr),
            self._stmt(node.body),
        )

    def _switchon(self, node: SwitchonStatement) -> Statement:
        cases = [SwitchCase(c.value, c.label, self._stmt(c.statement)) for c in node.cases]
        return SwitchonStatement(self._expr(node.expression), cases, self._stmt(node.default_case))

    def _declaration_statement(self, node: DeclarationStatement) -> Optional[Statement]:
        declaration = self._decl(node.declaration)
        if declaration is None:
            return None
        return DeclarationStatement(declaration)