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
from .essentials import *

NUMBER_TYPE = ir.DoubleType()
BOOLEAN_TYPE = ir.IntType(1)
VOID_TYPE = ir.VoidType()


# ---------------------------------------------------------------------------
# <Method name=convert_kind args=[<KindName>]>
# <Description>
# Maps a KindName onto its LLVM type: num -> double, bool -> i1, void -> void.
# </Description>
def convert_kind(kind_name: KindName) -> ir.Type:
    if kind_name is KindName.NUMBER:
        return NUMBER_TYPE
    if kind_name is KindName.BOOLEAN:
        return BOOLEAN_TYPE
    if kind_name is KindName.VOID:
        return VOID_TYPE
    raise InvalidTypeAnnotation(f"Kind '{kind_name}' has no LLVM representation")


def kind_of_type(llvm_type: ir.Type) -> Optional[KindName]:
    """Inverse of convert_kind, None for anything else."""
    if llvm_type == NUMBER_TYPE: return KindName.NUMBER
    if llvm_type == BOOLEAN_TYPE: return KindName.BOOLEAN
    if isinstance(llvm_type, ir.VoidType): return KindName.VOID
    return None


def zero_value(kind_name: KindName) -> ir.Constant:
    if kind_name is KindName.BOOLEAN:
        return ir.Constant(BOOLEAN_TYPE, 0)
    return ir.Constant(NUMBER_TYPE, 0.0)


def build_number(value: float) -> ir.Constant:
    return ir.Constant(NUMBER_TYPE, float(value))


def build_boolean(value: bool) -> ir.Constant:
    return ir.Constant(BOOLEAN_TYPE, 1 if value else 0)


ARITHMETIC_OPS = {
    "+": ("fadd", "add"),
    "-": ("fsub", "sub"),
    "*": ("fmul", "mul"),
    "/": ("fdiv", "div"),
}


# ---------------------------------------------------------------------------
# <Method name=compile_binary_operation args=[<Compiler>, <ir.Value>, <ir.Value>, <str>, <Node>]>
# <Description>
# Lowers + - * / over two num operands to the matching floating point instruction.
# Operands are not checked against each other beyond being numbers.
# </Description>
def compile_binary_operation(compiler: "Compiler", left: ir.Value, right: ir.Value, operator: str, node: Node = None) -> ir.Value:
    if operator not in ARITHMETIC_OPS:
        compiler.errors.error(node, f"Unsupported binary operator '{operator}'", kind=UnsupportedOperator)

    for operand in (left, right):
        if operand.type != NUMBER_TYPE:
            found = kind_of_type(operand.type)
            compiler.errors.error(
                node,
                f"Operator '{operator}' is only defined for num operands, got {found}",
                kind=UnsupportedOperator,
            )

    method, name = ARITHMETIC_OPS[operator]
    return getattr(compiler.builder, method)(left, right, name=name)
