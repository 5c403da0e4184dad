import io

from bcplopt.debug_printer import DebugPrinter
from bcplopt.nodes import (
    Assignment,
    BinaryOp,
    CharLiteral,
    CompoundStatement,
    ConditionalExpression,
    DeclarationStatement,
    EndcaseStatement,
    FloatLiteral,
    ForStatement,
    FunctionCall,
    FunctionDeclaration,
    GlobalDeclaration,
    GlobalEntry,
    LabeledStatement,
    LetDeclaration,
    NumberLiteral,
    Program,
    ResultisStatement,
    ReturnStatement,
    RoutineCall,
    StringLiteral,
    SwitchCase,
    SwitchonStatement,
    TestStatement,
    Valof,
    VarInit,
    VariableAccess,
    VectorAccess,
)
from bcplopt.tokens import TokenType


def lines_of(program):
    return DebugPrinter().format_ast(program).splitlines()


def test_empty_program():
    assert DebugPrinter().format_ast(Program([])) == "Program\n"


def test_function_declaration_with_binary_op():
    program = Program(
        [
            FunctionDeclaration(
                "F",
                ["A", "B"],
                body_expr=BinaryOp(TokenType.OP_PLUS, VariableAccess("A"), NumberLiteral(5)),
            )
        ]
    )
    assert lines_of(program) == [
        "Program",
        "|  FunctionDecl F(A, B)",
        "|  |  BinaryOp: Op '+'",
        "|  |  |  Variable: A",
        "|  |  |  IntLiteral: 5",
    ]


def test_routine_with_no_params():
    program = Program(
        [FunctionDeclaration("START", [], body_stmt=CompoundStatement([ReturnStatement()]))]
    )
    assert lines_of(program) == [
        "Program",
        "|  RoutineDecl START()",
        "|  |  CompoundStatement",
        "|  |  |  ReturnStatement",
    ]


def test_let_declaration_inside_statement():
    let = LetDeclaration([VarInit("X", NumberLiteral(1)), VarInit("Y")])
    program = Program(
        [FunctionDeclaration("G", [], body_stmt=CompoundStatement([DeclarationStatement(let)]))]
    )
    assert lines_of(program)[3:] == [
        "|  |  |  LetDecl",
        "|  |  |  |  Var X",
        "|  |  |  |  |  IntLiteral: 1",
        "|  |  |  |  Var Y",
    ]


def test_assignment_sections():
    stmt = Assignment([VariableAccess("X")], [StringLiteral("hi")])
    program = Program([FunctionDeclaration("H", [], body_stmt=stmt)])
    assert lines_of(program)[2:] == [
        "|  |  Assignment",
        "|  |  |  LHS:",
        "|  |  |  |  Variable: X",
        "|  |  |  RHS:",
        '|  |  |  |  StringLiteral: "hi"',
    ]


def test_test_statement_else_is_optional():
    with_else = TestStatement(NumberLiteral(1), ReturnStatement(), ReturnStatement())
    without_else = TestStatement(NumberLiteral(1), ReturnStatement())
    a = lines_of(Program([FunctionDeclaration("T", [], body_stmt=with_else)]))
    b = lines_of(Program([FunctionDeclaration("T", [], body_stmt=without_else)]))
    assert "|  |  |  Else:" in a
    assert "|  |  |  Else:" not in b
    assert len(a) == len(b) + 2


def test_for_statement_by_is_optional():
    loop = ForStatement("I", NumberLiteral(1), NumberLiteral(10), None, ReturnStatement())
    lines = lines_of(Program([FunctionDeclaration("L", [], body_stmt=loop)]))
    assert lines[2] == "|  |  ForStatement (Var: I)"
    assert "|  |  |  By:" not in lines
    loop.by_expr = NumberLiteral(2)
    assert "|  |  |  By:" in lines_of(Program([FunctionDeclaration("L", [], body_stmt=loop)]))


def test_labeled_statement_keeps_level():
    stmt = LabeledStatement("L1", ReturnStatement())
    lines = lines_of(Program([FunctionDeclaration("M", [], body_stmt=stmt)]))
    assert lines[2:] == ["|  |  Label: L1", "|  |  ReturnStatement"]


def test_function_call_arguments_only_when_present():
    call = FunctionCall(VariableAccess("WRITEN"), [NumberLiteral(7)])
    lines = lines_of(Program([FunctionDeclaration("C", [], body_stmt=RoutineCall(call))]))
    assert lines[2:] == [
        "|  |  RoutineCall",
        "|  |  |  FunctionCall",
        "|  |  |  |  Function:",
        "|  |  |  |  |  Variable: WRITEN",
        "|  |  |  |  Arguments:",
        "|  |  |  |  |  IntLiteral: 7",
    ]
    bare = FunctionCall(VariableAccess("NEWLINE"), [])
    bare_lines = lines_of(Program([FunctionDeclaration("C", [], body_stmt=RoutineCall(bare))]))
    assert not any("Arguments:" in line for line in bare_lines)


def test_switchon_layout():
    switch = SwitchonStatement(
        VariableAccess("N"),
        [SwitchCase(3, "case_3", EndcaseStatement())],
        ReturnStatement(),
    )
    lines = lines_of(Program([FunctionDeclaration("S", [], body_stmt=switch)]))
    assert lines[2:] == [
        "|  |  SwitchonStatement",
        "|  |  |  Expression:",
        "|  |  |  |  Variable: N",
        "|  |  |  Cases:",
        "|  |  |  |  CASE 3:",
        "|  |  |  |  |  EndcaseStatement",
        "|  |  |  Default:",
        "|  |  |  |  ReturnStatement",
    ]


def test_valof_conditional_and_literals():
    cond = ConditionalExpression(NumberLiteral(0), CharLiteral(ord("A")), FloatLiteral(2.5))
    body = Valof(ResultisStatement(cond))
    lines = lines_of(Program([FunctionDeclaration("V", [], body_expr=body)]))
    assert "|  |  Valof" in lines
    assert "|  |  |  |  ResultisStatement" in lines
    assert any(line.endswith("CharLiteral: 'A'") for line in lines)
    assert any(line.endswith("FloatLiteral: 2.5") for line in lines)
    assert any(line.endswith("True-Expr:") for line in lines)


def test_vector_access():
    expr = VectorAccess(VariableAccess("V"), NumberLiteral(4))
    lines = lines_of(Program([FunctionDeclaration("A", [], body_expr=expr)]))
    assert lines[2:] == [
        "|  |  VectorAccess",
        "|  |  |  Vector:",
        "|  |  |  |  Variable: V",
        "|  |  |  Index:",
        "|  |  |  |  IntLiteral: 4",
    ]


def test_unhandled_node_reports_unknown_without_indent():
    program = Program([GlobalDeclaration([GlobalEntry("G", 0)])])
    assert lines_of(program) == ["Program", "Unknown AST Node"]


def test_print_ast_frames_output():
    program = Program([])
    out = io.StringIO()
    printer = DebugPrinter()
    printer.print_ast(program, out)
    text = out.getvalue()
    assert text.startswith("\n--- ABSTRACT SYNTAX TREE ---\n")
    assert text.endswith("---------------------------\n\n")
    assert printer.format_ast(program) in text