# =============================================================================
# Xlang Programming Language Compiler
#
# Made with ❤️
#
# This project is genuinely built on love, dedication, and care.
# Xlang exists not only as a compiler, but as a labor of passion —
# created for a lover, inspired by curiosity, perseverance, and belief
# in building something meaningful from the ground up.
#
# “What is made with love is never made in vain.”
# “Love is the reason this code exists; logic is how it survives.”
#
# -----------------------------------------------------------------------------
# Author: M1778
# Profile: https://github.com/M1778M/
#
# Socials:
#   Telegram: https://t.me/your_username_here
#   Instagram: https://instagram.com/your_username_here
#   X (Twitter): https://x.com/your_username_here
#
# -----------------------------------------------------------------------------
# Copyright (C) 2025 M1778
#
# This file is part of the Xlang Programming Language Compiler.
#
# Xlang is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# Xlang is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with Xlang.  If not, see <https://www.gnu.org/licenses/>.
#
# -----------------------------------------------------------------------------
# “Code fades. Love leaves a signature.”
# =============================================================================
from ply import yacc

from ..lexer import tokens, keywords, find_column  # noqa: F401  (tokens is read by ply)
from ..ast2.nodes import *
from ..compiletime.errors import ParseError, InvalidTypeAnnotation, Colors, check_typo
from ..semantics.types import Infer, VoidKind, kind_from_str

start = "program"

TOKEN_MAP = {
    "LPAREN": "'('", "RPAREN": "')'",
    "LBRACE": "'{'", "RBRACE": "'}'",
    "SEMICOLON": "';'", "COLON": "':'", "COMMA": "','",
    "PLUS": "'+'", "MINUS": "'-'", "MULT": "'*'", "DIV": "'/'",
    "EQUAL": "'='", "ARROW": "'->'",
    "IDENTIFIER": "identifier", "NUMBER": "number",
}


def attach_loc(node, p, index=1):
    """Attaches lineno/col_offset of symbol `index` of the production to `node`."""
    lineno = p.lineno(index)
    lexpos = p.lexpos(index)
    if not lineno:
        lineno = p.lineno(0)
        lexpos = p.lexpos(0)

    node.lineno = lineno or 0
    node.col_offset = find_column(p.lexer.lexdata, lexpos) if lexpos is not None else 0
    return node


def _kind_at(p, index, allow_void=False):
    """Resolves the type name at p[index]; errors point at the type token."""
    try:
        return kind_from_str(p[index], allow_void)
    except InvalidTypeAnnotation as e:
        e.lineno = p.lineno(index)
        e.col_offset = find_column(p.lexer.lexdata, p.lexpos(index))
        raise


# ==============================================================================
#                                 PROGRAM
# ==============================================================================

def p_program(p):
    "program : statements"
    p[0] = Program(p[1])
    p[0].lineno, p[0].col_offset = 1, 1


def p_statements(p):
    """statements : statements statement
                  | empty"""
    if len(p) == 3: p[0] = p[1] + [p[2]]
    else: p[0] = []


def p_statement(p):
    """statement : function_declaration
    | variable_declaration
    | block
    | return_statement
    | if_statement
    | loop_statement
    | break_statement
    | continue_statement
    | expression_statement"""
    p[0] = p[1]


def p_block(p):
    "block : LBRACE statements RBRACE"
    p[0] = attach_loc(BlockStatement(p[2]), p, 1)


def p_empty(p):
    "empty :"
    p[0] = None

# ==============================================================================
#                                 FUNCTIONS
# ==============================================================================

def p_function_declaration(p):
    "function_declaration : FN IDENTIFIER LPAREN params RPAREN return_type block"
    fn_id = attach_loc(Identifier(p[2]), p, 2)
    return_kind = VoidKind
    if p[6] is not None:
        return_kind = kind_from_str(p[6][0], allow_void=True, node=p[6][1])
    p[0] = attach_loc(FunctionDeclaration(fn_id, p[4], p[7], return_kind), p, 1)


def p_params(p):
    """params : param_list
              | empty"""
    p[0] = p[1] if p[1] else []


def p_param_list(p):
    """param_list : param
                  | param_list COMMA param"""
    if len(p) == 2: p[0] = [p[1]]
    else: p[0] = p[1] + [p[3]]


def p_param(p):
    "param : IDENTIFIER COLON IDENTIFIER"
    p[0] = attach_loc(Identifier(p[1], _kind_at(p, 3)), p, 1)


def p_return_type(p):
    """return_type : ARROW IDENTIFIER
                   | empty"""
    if len(p) == 3:
        # Keep the location of the type token for error reporting
        loc = attach_loc(Identifier(p[2]), p, 2)
        p[0] = (p[2], loc)
    else:
        p[0] = None

# ==============================================================================
#                                 VARIABLES
# ==============================================================================

def p_variable_declaration(p):
    """variable_declaration : VAR IDENTIFIER COLON IDENTIFIER EQUAL expression SEMICOLON
                            | VAR IDENTIFIER EQUAL expression SEMICOLON"""
    if len(p) == 8:
        var_id = attach_loc(Identifier(p[2], _kind_at(p, 4)), p, 2)
        init = p[6]
    else:
        var_id = attach_loc(Identifier(p[2], Infer), p, 2)
        init = p[4]
    p[0] = attach_loc(VariableDeclaration(var_id, init), p, 1)

# ==============================================================================
#                                 CONTROL FLOW
# ==============================================================================

def p_return_statement(p):
    """return_statement : RETURN expression SEMICOLON
                        | RETURN SEMICOLON"""
    if len(p) == 4: p[0] = attach_loc(ReturnStatement(p[2]), p, 1)
    else: p[0] = attach_loc(ReturnStatement(None), p, 1)


def p_if_statement(p):
    "if_statement : IF LPAREN expression RPAREN block else_clause_opt"
    p[0] = attach_loc(IfStatement(p[3], p[5], p[6]), p, 1)


def p_else_clause_opt(p):
    """else_clause_opt : ELSE block
                       | ELSE if_statement
                       | empty"""
    if len(p) == 2:
        p[0] = None
    elif isinstance(p[2], IfStatement):
        # else if (...) {...} is an else block holding a single if
        p[0] = attach_loc(BlockStatement([p[2]]), p, 1)
    else:
        p[0] = p[2]


def p_loop_statement(p):
    """loop_statement : LOOP LPAREN expression RPAREN block
                      | IDENTIFIER COLON LOOP LPAREN expression RPAREN block"""
    if len(p) == 6:
        p[0] = attach_loc(LoopStatement(p[3], p[5]), p, 1)
    else:
        label = attach_loc(Identifier(p[1]), p, 1)
        p[0] = attach_loc(LoopStatement(p[5], p[7], label), p, 1)


def p_break_statement(p):
    """break_statement : BREAK SEMICOLON
                       | BREAK IDENTIFIER SEMICOLON"""
    label = attach_loc(Identifier(p[2]), p, 2) if len(p) == 4 else None
    p[0] = attach_loc(BreakStatement(label), p, 1)


def p_continue_statement(p):
    """continue_statement : CONTINUE SEMICOLON
                          | CONTINUE IDENTIFIER SEMICOLON"""
    label = attach_loc(Identifier(p[2]), p, 2) if len(p) == 4 else None
    p[0] = attach_loc(ContinueStatement(label), p, 1)

# ==============================================================================
#                                 EXPRESSIONS
# ==============================================================================

def p_expression_statement(p):
    "expression_statement : expression SEMICOLON"
    stmt = ExpressionStatement(p[1])
    stmt.lineno, stmt.col_offset = p[1].lineno, p[1].col_offset
    p[0] = stmt


def p_expression(p):
    """expression : IDENTIFIER EQUAL expression
                  | additive"""
    if len(p) == 2:
        p[0] = p[1]
    else:
        target = attach_loc(Identifier(p[1]), p, 1)
        p[0] = attach_loc(AssignmentExpression(target, p[3], p[2]), p, 1)


def p_additive(p):
    """additive : multiplicative
    | additive PLUS multiplicative
    | additive MINUS multiplicative"""
    if len(p) == 2: p[0] = p[1]
    else: p[0] = attach_loc(BinaryExpression(p[1], p[3], p[2]), p, 2)


def p_multiplicative(p):
    """multiplicative : primary
    | multiplicative MULT primary
    | multiplicative DIV primary"""
    if len(p) == 2: p[0] = p[1]
    else: p[0] = attach_loc(BinaryExpression(p[1], p[3], p[2]), p, 2)


def p_primary_number(p):
    "primary : NUMBER"
    p[0] = attach_loc(NumberLiteral(p[1]), p, 1)


def p_primary_boolean(p):
    """primary : TRUE
               | FALSE"""
    p[0] = attach_loc(BooleanLiteral(p.slice[1].type == "TRUE"), p, 1)


def p_primary_identifier(p):
    "primary : IDENTIFIER"
    p[0] = attach_loc(Identifier(p[1]), p, 1)


def p_primary_call(p):
    "primary : IDENTIFIER LPAREN args RPAREN"
    callee = attach_loc(Identifier(p[1]), p, 1)
    p[0] = attach_loc(CallExpression(callee, p[3]), p, 1)


def p_primary_group(p):
    "primary : LPAREN expression RPAREN"
    p[0] = p[2]


def p_args(p):
    """args : arg_list
            | empty"""
    p[0] = p[1] if p[1] else []


def p_arg_list(p):
    """arg_list : expression
                | arg_list COMMA expression"""
    if len(p) == 2: p[0] = [p[1]]
    else: p[0] = p[1] + [p[3]]

# ==============================================================================
#                                 ERRORS
# ==============================================================================

def _expected_tokens():
    state = getattr(parser, "state", None)
    actions = parser.action.get(state, {}) if state is not None else {}
    return [TOKEN_MAP.get(k, f"'{k.lower()}'") for k in actions.keys() if k != "$end"]


def p_error(p):
    if p is None:
        raise ParseError(
            "Unexpected end of file",
            hint="Check for missing closing delimiters '}' or ')'.",
        )

    col = find_column(p.lexer.lexdata, p.lexpos)
    expected = _expected_tokens()
    prev = getattr(p, "prev", None)
    hint = None

    if prev is not None and prev.type == "IDENTIFIER" and check_typo(prev.value):
        ghost_typo = check_typo(prev.value)
        msg = f"Unexpected identifier '{prev.value}'"
        hint = f"The previous word '{prev.value}' looks like a typo. Did you mean '{Colors.BOLD}{ghost_typo}{Colors.RESET}'?"
        raise ParseError(msg, hint=hint, lineno=prev.lineno, col_offset=find_column(p.lexer.lexdata, prev.lexpos))

    if p.type in keywords.values() and "';'" in expected:
        msg = f"Unexpected token '{p.value}'"
        hint = "Check the previous line. You might be missing a semicolon ';'."
    else:
        msg = f"Unexpected token '{p.value}'"
        if expected:
            hint = f"Expected one of: {', '.join(expected[:5])}"

    raise ParseError(msg, hint=hint, lineno=p.lineno, col_offset=col)


parser = yacc.yacc(debug=False, write_tables=False, errorlog=yacc.NullLogger())
