"""Removal of assignments to variables that are not live afterwards."""

from __future__ import annotations

import copy
import logging
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple, Type

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
    GotoStatement,
    IfStatement,
    LabeledStatement,
    LetDeclaration,
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

_log = logging.getLogger(__name__)


class LivenessInfo:
    """Live-out variable sets of statements, as computed by a liveness analysis.

    Statements are identified by object identity, so the sets must be
    recorded against the very nodes of the tree that is later optimised.
    """

    def __init__(self, entries: Iterable[Tuple[Statement, Iterable[str]]] = ()) -> None:
        self._sets: Dict[int, Tuple[Statement, frozenset]] = {}
        for statement, names in entries:
            self._sets[id(statement)] = (statement, frozenset(names))

    def live_out(self, statement: Statement) -> frozenset:
        """Names live after ``statement``; empty if nothing was recorded."""
        entry = self._sets.get(id(statement))
        if entry is None or entry[0] is not statement:
            return frozenset()
        return entry[1]


def _dispatch(handlers: Mapping[Type[Node], Callable], node: Node, kind: str):
    for cls in type(node).__mro__:
        handler = handlers.get(cls)
        if handler is not None:
            return handler(node)
    raise TypeError(f"DCE Pass: Unsupported {kind} node.")


class DeadCodeEliminationPass:
    """Replaces assignments to dead variables with empty blocks.

    The pass builds a new tree and leaves its input untouched. LET
    declarations are always kept; only a LET with no names is dropped.
    """

    def __init__(self, liveness: LivenessInfo) -> None:
        self._liveness = liveness
        self._expressions: Dict[Type[Node], Callable[[Node], Expression]] = {
            NumberLiteral: copy.deepcopy,
            FloatLiteral: copy.deepcopy,
            StringLiteral: copy.deepcopy,
            CharLiteral: copy.deepcopy,
            VariableAccess: copy.deepcopy,
            UnaryOp: lambda n: UnaryOp(n.op, self._expr(n.rhs)),
            BinaryOp: lambda n: BinaryOp(n.op, self._expr(n.left), self._expr(n.right)),
            FunctionCall: lambda n: FunctionCall(
                self._expr(n.function), [self._expr(a) for a in n.arguments]
            ),
            ConditionalExpression: lambda n: ConditionalExpression(
                self._expr(n.condition), self._expr(n.true_expr), self._expr(n.false_expr)
            ),
            Valof: lambda n: Valof(self._stmt(n.body)),
            VectorConstructor: lambda n: VectorConstructor(self._expr(n.size)),
            VectorAccess: lambda n: VectorAccess(self._expr(n.vector), self._expr(n.index)),
        }
        self._statements: Dict[Type[Node], Callable[[Node], Optional[Statement]]] = {
            Assignment: self._assignment,
            RoutineCall: lambda n: RoutineCall(self._expr(n.call_expression)),
            CompoundStatement: self._compound,
            IfStatement: lambda n: IfStatement(
                self._expr(n.condition), self._stmt(n.then_statement)
            ),
            TestStatement: lambda n: TestStatement(
                self._expr(n.condition),
                self._stmt(n.then_statement),
                self._stmt(n.else_statement),
            ),
            WhileStatement: lambda n: WhileStatement(self._expr(n.condition), self._stmt(n.body)),
            ForStatement: lambda n: ForStatement(
                n.var_name,
                self._expr(n.from_expr),
                self._expr(n.to_expr),
                self._expr(n.by_expr),
                self._stmt(n.body),
            ),
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

    def name(self) -> str:
        """Human-readable name of the pass."""
        return "Dead Code Elimination Pass"

    def apply(self, program: Program) -> Program:
        """Return a copy of ``program`` with dead assignments removed."""
        _log.debug("Dead Code Elimination Pass: starting")
        declarations = (self._decl(d) for d in program.declarations)
        result = Program([d for d in declarations if d is not None])
        _log.debug("Dead Code Elimination Pass: finished")
        return result

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
        if isinstance(node, FunctionDeclaration):
            return FunctionDeclaration(
                node.name, list(node.params), self._expr(node.body_expr), self._stmt(node.body_stmt)
            )
        if isinstance(node, LetDeclaration):
            return self._let(node)
        return copy.deepcopy(node)

    # --- key transformations ---

    def _let(self, node: LetDeclaration) -> Optional[Declaration]:
        inits = []
        for init in node.initializers:
            _log.debug("DCE: keeping LET declaration for %s", init.name)
            inits.append(VarInit(init.name, self._expr(init.init)))
        if not inits:
            _log.debug("DCE: removing empty LET declaration")
            return None
        return LetDeclaration(inits)

    def _assignment(self, node: Assignment) -> Statement:
        lhs = [self._expr(e) for e in node.lhs]
        rhs = [self._expr(e) for e in node.rhs]
        if len(node.lhs) == 1 and isinstance(node.lhs[0], VariableAccess):
            target = node.lhs[0].name
            live = self._liveness.live_out(node)
            _log.debug("DCE: live-out of assignment to %s: %s", target, sorted(live))
            if target not in live:
                _log.debug("DCE: %s is not live; eliminating assignment", target)
                return CompoundStatement([])
        return Assignment(lhs, rhs)

    # --- other statements ---

    def _compound(self, node: CompoundStatement) -> Statement:
        statements = (self._stmt(s) for s in node.statements)
        return CompoundStatement([s for s in statements if s is not None])

    def _switchon(self, node: SwitchonStatement) -> Statement:
        cases = [SwitchCase(c.value, c.label, self._stmt(c.statement)) for c in node.cases]
        return SwitchonStatement(self._expr(node.expression), cases, self._stmt(node.default_case))

    def _declaration_statement(self, node: DeclarationStatement) -> Optional[Statement]:
        declaration = self._decl(node.declaration)
        if declaration is None:
            return None
        return DeclarationStatement(declaration)