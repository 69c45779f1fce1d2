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
from ..semantics.types import Kind, Infer, VoidKind


class Node:
    """Base class for all AST nodes. The parser attaches lineno/col_offset."""
    lineno = 0
    col_offset = 0

    # Field names in source order. Drives children() and to_dict().
    _fields = ()

    def children(self):
        for field in self._fields:
            value = getattr(self, field)
            if isinstance(value, list):
                for item in value:
                    if isinstance(item, Node): yield item
            elif isinstance(value, Node):
                yield value

    def to_dict(self):
        out = {"type": type(self).__name__}
        for field in self._fields:
            out[field] = _to_json(getattr(self, field))
        if self.lineno:
            out["loc"] = {"line": self.lineno, "column": self.col_offset}
        return out

    def __repr__(self):
        args = ", ".join(f"{f}={getattr(self, f)!r}" for f in self._fields)
        return f"{type(self).__name__}({args})"


def _to_json(value):
    if isinstance(value, Node): return value.to_dict()
    if isinstance(value, list): return [_to_json(v) for v in value]
    if isinstance(value, Kind): return repr(value)
    return value


class Program(Node):
    _fields = ("body",)
    def __init__(self, body):
        self.body = body


# --- Statements ---

class FunctionDeclaration(Node):
    _fields = ("id", "arguments", "body", "return_kind")
    def __init__(self, id, arguments, body, return_kind: Kind = VoidKind):
        self.id = id                  # Identifier
        self.arguments = arguments    # [Identifier] with exact kinds
        self.body = body              # BlockStatement
        self.return_kind = return_kind


class VariableDeclaration(Node):
    _fields = ("id", "init")
    def __init__(self, id, init):
        self.id = id      # Identifier; kind is the annotation or Infer
        self.init = init


class BlockStatement(Node):
    _fields = ("body",)
    def __init__(self, body):
        self.body = body


class ReturnStatement(Node):
    _fields = ("argument",)
    def __init__(self, argument=None):
        self.argument = argument


class ExpressionStatement(Node):
    _fields = ("expression",)
    def __init__(self, expression):
        self.expression = expression


class IfStatement(Node):
    _fields = ("condition", "consequent", "alternate")
    def __init__(self, condition, consequent, alternate=None):
        self.condition = condition
        self.consequent = consequent
        self.alternate = alternate


class LoopStatement(Node):
    _fields = ("condition", "body", "label")
    def __init__(self, condition, body, label=None):
        self.condition = condition
        self.body = body
        self.label = label   # Optional Identifier naming the loop


class BreakStatement(Node):
    _fields = ("label",)
    def __init__(self, label=None):
        self.label = label


class ContinueStatement(Node):
    _fields = ("label",)
    def __init__(self, label=None):
        self.label = label


# --- Expressions ---

class CallExpression(Node):
    _fields = ("callee", "arguments")
    def __init__(self, callee, arguments):
        self.callee = callee
        self.arguments = arguments


class BinaryExpression(Node):
    _fields = ("left", "right", "operator")
    def __init__(self, left, right, operator):
        self.left = left
        self.right = right
        self.operator = operator


class AssignmentExpression(Node):
    _fields = ("left", "right", "operator")
    def __init__(self, left, right, operator="="):
        self.left = left
        self.right = right
        self.operator = operator


class Identifier(Node):
    _fields = ("name", "kind")
    def __init__(self, name, kind: Kind = Infer):
        self.name = name
        self.kind = kind


class NumberLiteral(Node):
    _fields = ("value",)
    def __init__(self, value):
        self.value = float(value)


class BooleanLiteral(Node):
    _fields = ("value",)
    def __init__(self, value):
        self.value = bool(value)
