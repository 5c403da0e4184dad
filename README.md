# bcplopt

`bcplopt` holds a syntax tree for BCPL programs, two passes that rewrite
that tree, and a printer that shows a tree as an indented outline. It has
no dependencies outside the standard library.

## Modules

### `bcplopt.tokens`

- `TokenType` is an enumeration of BCPL token kinds. Examples are
  `TokenType.KW_LET`, `TokenType.OP_PLUS` and `TokenType.OP_FLOAT_DIVIDE`.
- `token_type_to_string(token_type)` returns the display name of a token
  kind, such as `"LET"`, `"Op '+'"` or `"LSection '$('"`. For anything that
  is not a `TokenType` it returns `"UnknownToken"`.

### `bcplopt.nodes`

The tree nodes are dataclasses. They derive from `Node`, and through it
from one of `Expression`, `Statement` or `Declaration`.

- **Expressions:** `NumberLiteral`, `FloatLiteral`, `StringLiteral`,
  `CharLiteral`, `VariableAccess`, `UnaryOp`, `BinaryOp`, `FunctionCall`,
  `ConditionalExpression`, `Valof`, `VectorConstructor`, `VectorAccess`.
- **Statements:** `Assignment`, `RoutineCall`, `CompoundStatement`,
  `IfStatement`, `TestStatement`, `WhileStatement`, `ForStatement`,
  `GotoStatement`, `LabeledStatement`, `ReturnStatement`,
  `FinishStatement`, `ResultisStatement`, `RepeatStatement`,
  `SwitchonStatement`, `EndcaseStatement`, `DeclarationStatement`.
  - `RepeatStatement` has a `LoopType`.
  - A `SwitchonStatement` holds a list of `SwitchCase`.
- **Declarations:** `LetDeclaration`, `FunctionDeclaration`,
  `GlobalDeclaration`, `ManifestDeclaration`, `GetDirective`.
  - A `LetDeclaration` holds a list of `VarInit`.
  - A `GlobalDeclaration` holds a list of `GlobalEntry`.
  - A `ManifestDeclaration` holds a list of `ManifestEntry`.
- **Root:** a `Program` holds a list of declarations.

### `bcplopt.constant_folding`

`ConstantFoldingPass(manifests)` takes a mapping from manifest names to
integers. Its `apply(program)` method returns a new `Program`; the input
tree is left unchanged. `name()` returns `"Constant Folding Pass"`.

The pass makes these changes:

- A `VariableAccess` whose name is in `manifests` becomes a
  `NumberLiteral` with that value.
- Integer literals are folded for `+`, `-`, `*`, `/` and the six
  comparisons.
  - Arithmetic wraps to a signed 64-bit word.
  - Division truncates toward zero.
  - Division by zero is not folded.
  - A true comparison gives `-1` and a false one gives `0`.
- Float literals are folded for `+.`, `-.`, `*.` and `/.`. Division by
  `0.0` is not folded.
- `x * 2` becomes `x << 1` and `x / 2` becomes `x >> 1`.
- These forms are simplified: `x + 0`, `x - 0`, `x * 1` and `x / 1` become
  `x`; `x * 0` becomes `0`; `0 + x` and `1 * x` become `x`.
- When the condition is a constant, the pass keeps only the chosen branch
  of an `IfStatement`, a `TestStatement` or a `ConditionalExpression`. A
  branch that falls away with nothing in its place leaves an empty
  `CompoundStatement`.
- `GlobalDeclaration`, `ManifestDeclaration` and `GetDirective` nodes are
  dropped from the result.

A node type that the pass does not handle raises `TypeError`.

### `bcplopt.dead_code`

- `LivenessInfo(entries)` records live-out variable sets. `entries` is an
  iterable of `(statement, names)` pairs. Statements are matched by object
  identity, so record the sets against the nodes of the tree that you
  will optimise. `live_out(statement)` returns a `frozenset`, and an empty
  one for a statement that has no entry.
- `DeadCodeEliminationPass(liveness)` has an `apply(program)` method that
  returns a new `Program`. In it, every `Assignment` to a single
  `VariableAccess` whose variable is not in the assignment's live-out set
  is replaced by an empty `CompoundStatement`. An assignment with no
  recorded set is therefore removed.
  - `LET` declarations are always kept. Only a `LET` that introduces no
    names is dropped.
  - Other declarations are copied unchanged.
  - `name()` returns `"Dead Code Elimination Pass"`.
  - The pass logs its progress at debug level through `logging`.
  - A node type that the pass does not handle raises `TypeError`.

### `bcplopt.debug_printer`

`DebugPrinter()` renders a tree as an outline, one node per line, indented
with `"|  "` per level.

- `format_ast(program)` returns the outline as a string.
- `print_ast(program, file=None)` writes the outline to `file`, or to
  standard output when `file` is `None`. The outline is framed by a
  `--- ABSTRACT SYNTAX TREE ---` header and a dashed footer.
- A node type that the printer does not know is shown as
  `Unknown AST Node`.

## Example

```python
from bcplopt.nodes import (
    Program, FunctionDeclaration, ResultisStatement, Valof,
    BinaryOp, NumberLiteral, VariableAccess,
)
from bcplopt.tokens import TokenType
from bcplopt.constant_folding import ConstantFoldingPass
from bcplopt.debug_printer import DebugPrinter

program = Program([
    FunctionDeclaration(
        "F", ["X"],
        body_expr=Valof(ResultisStatement(
            BinaryOp(TokenType.OP_PLUS,
                     BinaryOp(TokenType.OP_MULTIPLY, VariableAccess("X"), NumberLiteral(1)),
                     VariableAccess("LIMIT")),
        )),
    ),
])

folded = ConstantFoldingPass({"LIMIT": 10}).apply(program)
print(DebugPrinter().format_ast(folded), end="")
```

This prints:

```
Program
|  FunctionDecl F(X)
|  |  Valof
|  |  |  Body:
|  |  |  |  ResultisStatement
|  |  |  |  |  Value:
|  |  |  |  |  |  BinaryOp: Op '+'
|  |  |  |  |  |  |  Variable: X
|  |  |  |  |  |  |  IntLiteral: 10
```

## What the package does not do

The package starts from a tree that you build. It does not cover these
steps:

- It has no lexer or parser, so it cannot read BCPL source text and cannot
  print a token stream.
- It does not compute liveness. `DeadCodeEliminationPass` uses only the
  sets you give it in a `LivenessInfo`.
- It does not generate or run machine code.
- It has no command-line program.

## Tests

```
pip install -e .[test]
pytest
```