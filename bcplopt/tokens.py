"""Token kinds of the BCPL language and their printable names."""

from __future__ import annotations

import enum


class TokenType(enum.Enum):
    """Kinds of token produced when scanning BCPL source."""

    EOF = enum.auto()
    IDENTIFIER = enum.auto()
    INTEGER_LITERAL = enum.auto()
    FLOAT_LITERAL = enum.auto()
    STRING_LITERAL = enum.auto()
    CHAR_LITERAL = enum.auto()

    KW_LET = enum.auto()
    KW_AND = enum.auto()
    KW_BE = enum.auto()
    KW_VEC = enum.auto()
    KW_IF = enum.auto()
    KW_THEN = enum.auto()
    KW_UNLESS = enum.auto()
    KW_TEST = enum.auto()
    KW_OR = enum.auto()
    KW_WHILE = enum.auto()
    KW_DO = enum.auto()
    KW_UNTIL = enum.auto()
    KW_REPEAT = enum.auto()
    KW_REPEAT_WHILE = enum.auto()
    KW_REPEAT_UNTIL = enum.auto()
    KW_FOR = enum.auto()
    KW_TO = enum.auto()
    KW_BY = enum.auto()
    KW_SWITCHON = enum.auto()
    KW_INTO = enum.auto()
    KW_CASE = enum.auto()
    KW_DEFAULT = enum.auto()
    KW_ENDCASE = enum.auto()
    KW_GOTO = enum.auto()
    KW_RETURN = enum.auto()
    KW_RESULTIS = enum.auto()
    KW_BREAK = enum.auto()
    KW_LOOP = enum.auto()
    KW_VALOF = enum.auto()
    KW_MANIFEST = enum.auto()
    KW_STATIC = enum.auto()
    KW_GLOBAL = enum.auto()
    KW_TRUE = enum.auto()
    KW_FALSE = enum.auto()
    KW_FINISH = enum.auto()

    OP_ASSIGN = enum.auto()
    OP_PLUS = enum.auto()
    OP_MINUS = enum.auto()
    OP_MULTIPLY = enum.auto()
    OP_DIVIDE = enum.auto()
    OP_REMAINDER = enum.auto()
    OP_EQ = enum.auto()
    OP_NE = enum.auto()
    OP_LT = enum.auto()
    OP_GT = enum.auto()
    OP_LE = enum.auto()
    OP_GE = enum.auto()
    OP_LOG_AND = enum.auto()
    OP_LOG_OR = enum.auto()
    OP_LOG_NOT = enum.auto()
    OP_LOG_EQV = enum.auto()
    OP_LOG_NEQV = enum.auto()
    OP_LSHIFT = enum.auto()
    OP_RSHIFT = enum.auto()
    OP_AT = enum.auto()
    OP_BANG = enum.auto()
    OP_CONDITIONAL = enum.auto()
    OP_FLOAT_PLUS = enum.auto()
    OP_FLOAT_MINUS = enum.auto()
    OP_FLOAT_MULTIPLY = enum.auto()
    OP_FLOAT_DIVIDE = enum.auto()
    OP_FLOAT_EQ = enum.auto()
    OP_FLOAT_NE = enum.auto()
    OP_FLOAT_LT = enum.auto()
    OP_FLOAT_GT = enum.auto()
    OP_FLOAT_LE = enum.auto()
    OP_FLOAT_GE = enum.auto()
    OP_FLOAT_VEC_SUB = enum.auto()
    OP_CHAR_SUB = enum.auto()

    LPAREN = enum.auto()
    RPAREN = enum.auto()
    LBRACE = enum.auto()
    RBRACE = enum.auto()
    LSECTION = enum.auto()
    RSECTION = enum.auto()
    COMMA = enum.auto()
    COLON = enum.auto()
    SEMICOLON = enum.auto()
    ILLEGAL = enum.auto()


_NAMES: dict[TokenType, str] = {
    TokenType.EOF: "EOF",
    TokenType.IDENTIFIER: "Identifier",
    TokenType.INTEGER_LITERAL: "IntLiteral",
    TokenType.FLOAT_LITERAL: "FloatLiteral",
    TokenType.STRING_LITERAL: "StringLiteral",
    TokenType.CHAR_LITERAL: "CharLiteral",
    TokenType.KW_LET: "LET",
    TokenType.KW_AND: "AND",
    TokenType.KW_BE: "BE",
    TokenType.KW_VEC: "VEC",
    TokenType.KW_IF: "IF",
    TokenType.KW_THEN: "THEN",
    TokenType.KW_UNLESS: "UNLESS",
    TokenType.KW_TEST: "TEST",
    TokenType.KW_OR: "OR",
    TokenType.KW_WHILE: "WHILE",
    TokenType.KW_DO: "DO",
    TokenType.KW_UNTIL: "UNTIL",
    TokenType.KW_REPEAT: "REPEAT",
    TokenType.KW_REPEAT_WHILE: "REPEATWHILE",
    TokenType.KW_REPEAT_UNTIL: "REPEATUNTIL",
    TokenType.KW_FOR: "FOR",
    TokenType.KW_TO: "TO",
    TokenType.KW_BY: "BY",
    TokenType.KW_SWITCHON: "SWITCHON",
    TokenType.KW_INTO: "INTO",
    TokenType.KW_CASE: "CASE",
    TokenType.KW_DEFAULT: "DEFAULT",
    TokenType.KW_ENDCASE: "ENDCASE",
    TokenType.KW_GOTO: "GOTO",
    TokenType.KW_RETURN: "RETURN",
    TokenType.KW_RESULTIS: "RESULTIS",
    TokenType.KW_BREAK: "BREAK",
    TokenType.KW_LOOP: "LOOP",
    TokenType.KW_VALOF: "VALOF",
    TokenType.KW_MANIFEST: "MANIFEST",
    TokenType.KW_STATIC: "STATIC",
    TokenType.KW_GLOBAL: "GLOBAL",
    TokenType.KW_TRUE: "TRUE",
    TokenType.KW_FALSE: "FALSE",
    TokenType.KW_FINISH: "FINISH",
    TokenType.OP_ASSIGN: "Op ':='",
    TokenType.OP_PLUS: "Op '+'",
    TokenType.OP_MINUS: "Op '-'",
    TokenType.OP_MULTIPLY: "Op '*'",
    TokenType.OP_DIVIDE: "Op '/'",
    TokenType.OP_REMAINDER: "Op 'REM'",
    TokenType.OP_EQ: "Op '='",
    TokenType.OP_NE: "Op '~='",
    TokenType.OP_LT: "Op '<'",
    TokenType.OP_GT: "Op '>'",
    TokenType.OP_LE: "Op '<='",
    TokenType.OP_GE: "Op '>='",
    TokenType.OP_LOG_AND: "Op '&'",
    TokenType.OP_LOG_OR: "Op '|'",
    TokenType.OP_LOG_NOT: "Op '~'",
    TokenType.OP_LOG_EQV: "Op 'EQV'",
    TokenType.OP_LOG_NEQV: "Op 'NEQV'",
    TokenType.OP_LSHIFT: "Op '<<'",
    TokenType.OP_RSHIFT: "Op '>>'",
    TokenType.OP_AT: "Op '@'",
    TokenType.OP_BANG: "Op '!'",
    TokenType.OP_CONDITIONAL: "Op '->'",
    TokenType.OP_FLOAT_PLUS: "Op '+.'",
    TokenType.OP_FLOAT_MINUS: "Op '-.'",
    TokenType.OP_FLOAT_MULTIPLY: "Op '*.'",
    TokenType.OP_FLOAT_DIVIDE: "Op '/.'",
    TokenType.OP_FLOAT_EQ: "Op '=.'",
    TokenType.OP_FLOAT_NE: "Op '~=.'",
    TokenType.OP_FLOAT_LT: "Op '<.'",
    TokenType.OP_FLOAT_GT: "Op '>.'",
    TokenType.OP_FLOAT_LE: "Op '<=.'",
    TokenType.OP_FLOAT_GE: "Op '>=.'",
    TokenType.OP_FLOAT_VEC_SUB: "Op '.%'",
    TokenType.OP_CHAR_SUB: "Op '%'",
    TokenType.LPAREN: "LParen '('",
    TokenType.RPAREN: "RParen ')'",
    TokenType.LBRACE: "LBrace '{'",
    TokenType.RBRACE: "RBrace '}'",
    TokenType.LSECTION: "LSection '$('",
    TokenType.RSECTION: "RSection '$)'",
    TokenType.COMMA: "Comma ','",
    TokenType.COLON: "Colon ':'",
    TokenType.SEMICOLON: "Semicolon ';'",
    TokenType.ILLEGAL: "Illegal",
}


def token_type_to_string(token_type: object) -> str:
    """Return the display name of a token kind, or "UnknownToken"."""
    if not isinstance(token_type, TokenType):
        return "UnknownToken"
    return _NAMES.get(token_type, "UnknownToken")