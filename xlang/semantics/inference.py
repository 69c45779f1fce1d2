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
from ..ast2.nodes import (
    AssignmentExpression, BinaryExpression, BooleanLiteral, CallExpression,
    Identifier, Node, NumberLiteral,
)
from ..ast2.visitor import Visitor
from .scope import FunctionBinding, ScopeManager, VariableBinding
from .types import BooleanKind, ExactKind, Kind, NoKind, NumberKind


class TypeInference:
    """
    Resolves the kind of an expression by a read-only pre-order walk.
    Never declares symbols and never emits IR, so it can be called any number
    of times on the same expression.

    Binary and assignment expressions take the kind of their left side:
    operands of an arithmetic expression are assumed to share one kind.
    """
    def __init__(self, scopes: ScopeManager):
        self.scopes = scopes

    def infer(self, expr: Node) -> Kind:
        result = NoKind

        def visit(node, visitor):
            nonlocal result
            if isinstance(node, CallExpression):
                if isinstance(node.callee, Identifier):
                    binding = self.scopes.lookup(node.callee.name)
                    if isinstance(binding, FunctionBinding):
                        result = binding.return_kind
                        visitor.stop()

            elif isinstance(node, (BinaryExpression, AssignmentExpression)):
                result = self.infer(node.left)
                visitor.stop()

            elif isinstance(node, Identifier):
                if node.kind.is_exact():
                    result = node.kind
                    visitor.stop()
                else:
                    binding = self.scopes.lookup(node.name)
                    if isinstance(binding, VariableBinding):
                        result = ExactKind(binding.kind)
                        visitor.stop()

            elif isinstance(node, NumberLiteral):
                result = NumberKind
                visitor.stop()

            elif isinstance(node, BooleanLiteral):
                result = BooleanKind
                visitor.stop()

        Visitor.walk(expr, visit)
        return result
