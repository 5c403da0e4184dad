import copy

import pytest

from bcplopt.dead_code import DeadCodeEliminationPass, LivenessInfo
from bcplopt.nodes import (
    Assignment,
    BinaryOp,
    CompoundStatement,
    DeclarationStatement,
    Expression,
    FunctionDeclaration,
    GlobalDeclaration,
    GlobalEntry,
    LetDeclaration,
    LoopType,
    NumberLiteral,
    Program,
    RepeatStatement,
    ResultisStatement,
    Valof,
    VarInit,
    VariableAccess,
    VectorAccess,
    WhileStatement,
)
from bcplopt.tokens import TokenType


def _assign(name, value):
    return Assignment([VariableAccess(name)], [NumberLiteral(value)])


def _function(*statements):
    return FunctionDeclaration("START", [], None, CompoundStatement(list(statements)))


def test_name():
    assert DeadCodeEliminationPass(LivenessInfo()).name() == "Dead Code Elimination Pass"


def test_live_out_lookup_by_identity():
    stmt = _assign("X", 1)
    twin = _assign("X", 1)
    info = LivenessInfo([(stmt, ["X", "Y"])])
    assert info.live_out(stmt) == frozenset({"X", "Y"})
    assert info.live_out(twin) == frozenset()


def test_dead_assignment_becomes_empty_block():
    stmt = _assign("X", 1)
    program = Program([_function(stmt)])
    result = DeadCodeEliminationPass(LivenessInfo([(stmt, [])])).apply(program)
    assert result.declarations[0].body_stmt == CompoundStatement([CompoundStatement([])])


def test_live_assignment_is_kept():
    stmt = _assign("X", 1)
    program = Program([_function(stmt)])
    result = DeadCodeEliminationPass(LivenessInfo([(stmt, ["X"])])).apply(program)
    assert result.declarations[0].body_stmt.statements == [_assign("X", 1)]


def test_other_live_names_do_not_save_assignment():
    stmt = _assign("X", 1)
    program = Program([_function(stmt)])
    result = DeadCodeEliminationPass(LivenessInfo([(stmt, ["Y"])])).apply(program)
    assert result.declarations[0].body_stmt.statements == [CompoundStatement([])]


def test_multiple_targets_are_kept():
    stmt = Assignment(
        [VariableAccess("A"), VariableAccess("B")], [NumberLiteral(1), NumberLiteral(2)]
    )
    program = Program([_function(stmt)])
    result = DeadCodeEliminationPass(LivenessInfo()).apply(program)
    assert result.declarations[0].body_stmt.statements == [copy.deepcopy(stmt)]


def test_vector_target_is_kept():
    stmt = Assignment(
        [VectorAccess(VariableAccess("V"), NumberLiteral(0))], [NumberLiteral(5)]
    )
    program = Program([_function(stmt)])
    result = DeadCodeEliminationPass(LivenessInfo()).apply(program)
    assert result.declarations[0].body_stmt.statements == [copy.deepcopy(stmt)]


def test_nested_dead_assignment_in_loop():
    dead = _assign("T", 3)
    live = _assign("I", 4)
    loop = WhileStatement(
        BinaryOp(TokenType.OP_LT, VariableAccess("I"), NumberLiteral(9)),
        CompoundStatement([dead, live]),
    )
    program = Program([_function(loop)])
    info = LivenessInfo([(dead, ["I"]), (live, ["I"])])
    result = DeadCodeEliminationPass(info).apply(program)
    body = result.declarations[0].body_stmt.statements[0].body
    assert body.statements == [CompoundStatement([]), _assign("I", 4)]


def test_input_is_not_modified():
    stmt = _assign("X", 1)
    program = Program([_function(stmt)])
    before = copy.deepcopy(program)
    DeadCodeEliminationPass(LivenessInfo()).apply(program)
    assert program == before


def test_let_declarations_are_kept():
    let = LetDeclaration([VarInit("A", NumberLiteral(1)), VarInit("B")])
    program = Program([let])
    result = DeadCodeEliminationPass(LivenessInfo()).apply(program)
    assert result == Program([LetDeclaration([VarInit("A", NumberLiteral(1)), VarInit("B")])])
    assert result.declarations[0] is not let


def test_empty_let_is_removed():
    program = Program([LetDeclaration([])])
    assert DeadCodeEliminationPass(LivenessInfo()).apply(program) == Program([])


def test_empty_let_statement_is_removed_from_block():
    program = Program([_function(DeclarationStatement(LetDeclaration([])), ResultisStatement(NumberLiteral(0)))])
    result = DeadCodeEliminationPass(LivenessInfo()).apply(program)
    assert result.declarations[0].body_stmt.statements == [ResultisStatement(NumberLiteral(0))]


def test_other_declarations_are_copied():
    glob = GlobalDeclaration([GlobalEntry("G", 0)])
    result = DeadCodeEliminationPass(LivenessInfo()).apply(Program([glob]))
    assert result.declarations == [GlobalDeclaration([GlobalEntry("G", 0)])]
    assert result.declarations[0] is not glob


def test_repeat_keeps_loop_type_and_missing_condition():
    stmt = RepeatStatement(CompoundStatement([]), None, LoopType.REPEAT_UNTIL)
    result = DeadCodeEliminationPass(LivenessInfo()).apply(Program([_function(stmt)]))
    out = result.declarations[0].body_stmt.statements[0]
    assert out == RepeatStatement(CompoundStatement([]), None, LoopType.REPEAT_UNTIL)


def test_valof_body_is_processed():
    dead = _assign("X", 1)
    func = FunctionDeclaration("F", ["N"], Valof(CompoundStatement([dead])), None)
    result = DeadCodeEliminationPass(LivenessInfo()).apply(Program([func]))
    assert result.declarations[0].body_expr == Valof(CompoundStatement([CompoundStatement([])]))
    assert result.declarations[0].params == ["N"]


class _Strange(Expression):
    pass


def test_unsupported_expression_raises():
    stmt = ResultisStatement(_Strange())
    with pytest.raises(TypeError, match="Unsupported Expression"):
        DeadCodeEliminationPass(LivenessInfo()).apply(Program([_function(stmt)]))