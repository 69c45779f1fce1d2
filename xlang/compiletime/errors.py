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
import difflib


class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    RED = "\033[38;5;196m"
    ORANGE = "\033[38;5;208m"
    YELLOW = "\033[38;5;226m"
    BLUE = "\033[38;5;39m"
    GRAY = "\033[38;5;240m"
    CYAN = "\033[38;5;51m"
    GREEN = "\033[38;5;46m"


KEYWORDS = ["fn", "var", "return", "true", "false", "if", "else", "loop", "break", "continue"]
TYPO_CUTOFF = 0.6


class CompilerException(Exception):
    """
    Base class of every compile-time failure.
    Carries the offending AST node (or token position) and an optional hint
    so the driver can point at the source.
    """
    def __init__(self, message, node=None, hint=None, lineno=None, col_offset=None):
        super().__init__(message)
        self.message = message
        self.node = node
        self.hint = hint
        self.lineno = lineno if lineno is not None else getattr(node, "lineno", 0)
        self.col_offset = col_offset if col_offset is not None else getattr(node, "col_offset", 0)

    def __str__(self):
        if self.lineno:
            return f"{self.message} (line {self.lineno}, column {self.col_offset})"
        return self.message


class DuplicateSymbol(CompilerException):
    """A name is declared twice in the same frame."""


class UnknownSymbol(CompilerException):
    """A referenced identifier or function is not visible."""


class InvalidTypeAnnotation(CompilerException):
    """A type name outside num/bool/void, or 'void' where it is not allowed."""


class VoidValue(CompilerException):
    """Something without storage or without a value was used as a value."""


class UnsupportedOperator(CompilerException):
    """An operator the code generator cannot lower."""


class MalformedNode(CompilerException):
    """An AST node in a position its shape does not support."""


class KindMismatch(CompilerException):
    """A value (or argument count) that does not fit where it is used."""


class ParseError(CompilerException):
    """Syntax error reported by the parser."""


def check_typo(value, candidates=KEYWORDS, cutoff=TYPO_CUTOFF):
    if value in candidates: return None
    matches = difflib.get_close_matches(value, list(candidates), n=1, cutoff=cutoff)
    return matches[0] if matches else None


class ErrorHandler:
    """Raises typed compile errors and renders them against the source text."""
    def __init__(self, source_code="", filename="<stdin>"):
        self.source_code = source_code or ""
        self.filename = filename

    def error(self, node, message, hint=None, kind=CompilerException):
        raise kind(message, node=node, hint=hint)

    def get_line_content(self, lineno):
        lines = self.source_code.splitlines()
        if 0 <= lineno - 1 < len(lines):
            return lines[lineno - 1]
        return ""

    def render(self, exc: CompilerException, use_color=True) -> str:
        c = Colors if use_color else _NoColors
        kind = type(exc).__name__
        out = [f"{c.RED}{c.BOLD}error[{kind}]:{c.RESET} {exc.message}"]

        lineno = getattr(exc, "lineno", 0) or 0
        if not lineno:
            out.append(f"{c.BLUE}   -->{c.RESET} {self.filename}")
            if exc.hint: out.append(f"{c.CYAN}   = help:{c.RESET} {exc.hint}")
            return "\n".join(out)

        col = max(1, getattr(exc, "col_offset", 1) or 1)
        line_content = self.get_line_content(lineno)
        line_str = str(lineno)
        padding = " " * len(line_str)

        out.append(f"{c.BLUE}   -->{c.RESET} {self.filename}:{lineno}:{col}")
        out.append(f"{c.BLUE} {padding} |{c.RESET}")
        out.append(f"{c.BLUE} {line_str} |{c.RESET} {line_content.replace(chr(9), ' ')}")
        pointer_pad = " " * (col - 1)
        out.append(f"{c.BLUE} {padding} |{c.RESET} {pointer_pad}{c.RED}{c.BOLD}^ here{c.RESET}")
        if exc.hint:
            out.append(f"{c.CYAN}   = help:{c.RESET} {exc.hint}")
        return "\n".join(out)

    def report(self, exc: CompilerException, use_color=True):
        c = Colors if use_color else _NoColors
        print("\n" + self.render(exc, use_color))
        print(f"\n{c.RED}{c.BOLD}Build failed.{c.RESET} 1 error(s) found.")


class _NoColors:
    RESET = BOLD = RED = ORANGE = YELLOW = BLUE = GRAY = CYAN = GREEN = ""
