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
from ply import lex

from .compiletime.errors import ParseError

keywords = {
    "fn": "FN",
    "var": "VAR",
    "return": "RETURN",
    "true": "TRUE",
    "false": "FALSE",
    "if": "IF",
    "else": "ELSE",
    "loop": "LOOP",
    "break": "BREAK",
    "continue": "CONTINUE",
}

tokens = [
    "IDENTIFIER",
    "NUMBER",
    "EQUAL",
    "PLUS",
    "MINUS",
    "MULT",
    "DIV",
    "LPAREN",
    "RPAREN",
    "LBRACE",
    "RBRACE",
    "COMMA",
    "SEMICOLON",
    "COLON",
    "ARROW",
] + list(keywords.values())

t_EQUAL = r"="
t_PLUS = r"\+"
t_MULT = r"\*"
t_DIV = r"/"
t_LPAREN = r"\("
t_RPAREN = r"\)"
t_LBRACE = r"\{"
t_RBRACE = r"\}"
t_COMMA = r","
t_SEMICOLON = r";"
t_COLON = r":"

t_ignore = " \t\r"


def t_COMMENT(t):
    r"//[^\n]*"
    pass


# ARROW must win over MINUS
def t_ARROW(t):
    r"->"
    return t


def t_MINUS(t):
    r"-"
    return t


def t_NUMBER(t):
    r"\d+(\.\d+)?"
    t.value = float(t.value)
    return t


def t_IDENTIFIER(t):
    r"[A-Za-z_][A-Za-z0-9_]*"
    t.type = keywords.get(t.value, "IDENTIFIER")
    return t


def t_newline(t):
    r"\n+"
    t.lexer.lineno += len(t.value)


def find_column(input_data, lexpos):
    line_start = input_data.rfind("\n", 0, lexpos) + 1
    return (lexpos - line_start) + 1


def t_error(t):
    col = find_column(t.lexer.lexdata, t.lexpos)
    raise ParseError(
        f"Illegal character '{t.value[0]}'",
        lineno=t.lexer.lineno,
        col_offset=col,
    )


def build_lexer():
    """Returns a fresh lexer so concurrent parses never share line state."""
    return lexer.clone()


lexer = lex.lex()
