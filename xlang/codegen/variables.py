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
from .utils import convert_kind, kind_of_type


# ---------------------------------------------------------------------------
# <Method name=create_storage args=[<Compiler>, <KindName>, <str>]>
# <Description>
# Allocates a stack slot for a value of the given kind.
# Slots live at the top of the current function's entry block so a
# declaration inside a loop body does not grow the stack on every iteration.
# </Description>
def create_storage(compiler: "Compiler", kind_name: KindName, name: str) -> ir.AllocaInstr:
    entry_block = compiler.function.blocks[0]
    alloca_builder = ir.IRBuilder(entry_block)
    alloca_builder.position_at_start(entry_block)
    storage = alloca_builder.alloca(convert_kind(kind_name), name=name)
    # The main builder indexes into the block; re-anchor it after the insert
    if compiler.builder.block is entry_block:
        compiler.builder.position_at_end(entry_block)
    return storage


# ---------------------------------------------------------------------------
# <Method name=declare_variable args=[<Compiler>, <str>, <KindName>, <Optional[ir.Value]>, <Node>, <bool>]>
# <Description>
# Declares a variable (or parameter) in the current frame.
# 1. Rejects a second declaration of the same name in this frame.
# 2. Allocates storage unless the kind is void.
# 3. Stores the initial value.
# 4. Registers the binding.
# </Description>
def declare_variable(
    compiler: "Compiler",
    name: str,
    kind_name: KindName,
    initial_value: Optional[ir.Value],
    node: Node = None,
    is_arg: bool = False,
) -> VariableBinding:
    if compiler.scopes.current.has(name):
        compiler.errors.error(
            node,
            f"Symbol '{name}' already defined in this scope.",
            hint="Shadowing is not allowed in the same block.",
            kind=DuplicateSymbol,
        )

    storage = None
    if kind_name is not KindName.VOID:
        mem_name = f"argument.{name}" if is_arg else name
        storage = create_storage(compiler, kind_name, mem_name)
        if initial_value is not None:
            _check_value_kind(compiler, name, kind_name, initial_value, node)
            compiler.builder.store(initial_value, storage)

    binding = VariableBinding(kind_name, storage)
    compiler.scopes.declare(name, binding, node)
    return binding


def _check_value_kind(compiler, name, kind_name, value, node):
    if value.type != convert_kind(kind_name):
        compiler.errors.error(
            node,
            f"Cannot store a {kind_of_type(value.type)} value in '{name}' of type {kind_name}",
            kind=KindMismatch,
        )


# ---------------------------------------------------------------------------
# <Method name=resolve_storage args=[<Compiler>, <str>, <Node>]>
# <Description>
# Finds the storage slot of a variable visible from the current frame.
# Functions and void variables have no storage. Locals of another function
# are never reachable: there are no closures.
# </Description>
def resolve_storage(compiler: "Compiler", name: str, node: Node = None):
    binding = compiler.scopes.lookup(name)

    if binding is None:
        hint = None
        suggestion = check_typo(name, compiler.scopes.visible_names())
        if suggestion:
            hint = f"Did you mean '{suggestion}'?"
        compiler.errors.error(node, f"Unknown symbol '{name}'", hint=hint, kind=UnknownSymbol)

    if isinstance(binding, FunctionBinding):
        compiler.errors.error(
            node,
            f"'{name}' is a function and cannot be used as a value",
            hint=f"Call it instead: {name}(...)",
            kind=VoidValue,
        )

    if binding.storage is None:
        compiler.errors.error(node, f"'{name}' has type void and holds no value", kind=VoidValue)

    owner = binding.storage.parent.parent  # alloca -> block -> function
    if owner is not compiler.function:
        compiler.errors.error(
            node,
            f"'{name}' belongs to function '{owner.name}' and is not visible here",
            hint="Pass it to this function as a parameter.",
            kind=UnknownSymbol,
        )

    return binding, binding.storage


# ---------------------------------------------------------------------------
# <Method name=get_variable args=[<Compiler>, <Identifier>]>
# <Description>
# Loads the current value of a variable.
# </Description>
def get_variable(compiler: "Compiler", ast: Identifier) -> ir.Value:
    _, storage = resolve_storage(compiler, ast.name, ast)
    return compiler.builder.load(storage, name=ast.name)


# ---------------------------------------------------------------------------
# <Method name=set_variable args=[<Compiler>, <AssignmentExpression>]>
# <Description>
# Compiles `name = expr`. The stored value is also the value of the expression.
# </Description>
def set_variable(compiler: "Compiler", ast: AssignmentExpression) -> ir.Value:
    if ast.operator != "=":
        compiler.errors.error(ast, f"Unsupported assignment operator '{ast.operator}'", kind=UnsupportedOperator)
    if not isinstance(ast.left, Identifier):
        compiler.errors.error(ast.left, "Assignment target must be an identifier", kind=MalformedNode)

    name = ast.left.name
    binding, storage = resolve_storage(compiler, name, ast.left)
    value = compiler.compile_value(ast.right)
    _check_value_kind(compiler, name, binding.kind, value, ast)
    compiler.builder.store(value, storage)
    return value


# ---------------------------------------------------------------------------
# <Method name=compile_variable_declaration args=[<Compiler>, <VariableDeclaration>]>
# <Description>
# Compiles `var name[: type] = init;`.
# The kind comes from the annotation, otherwise it is inferred from the
# initializer before any instruction is emitted for it.
# </Description>
def compile_variable_declaration(compiler: "Compiler", ast: VariableDeclaration):
    if not isinstance(ast.id, Identifier):
        compiler.errors.error(ast, "Variable declaration needs an identifier", kind=MalformedNode)

    name = ast.id.name
    kind = ast.id.kind
    if not kind.is_exact():
        kind = compiler.inference.infer(ast.init)
        compiler.debug(f"inferred '{name}' as {kind!r}")

    if kind == VoidKind:
        # Evaluated for its side effects only; void variables get no storage
        compiler.compile_expression(ast.init)
        return declare_variable(compiler, name, KindName.VOID, None, ast)

    init_value = compiler.compile_value(ast.init)

    if not kind.is_exact():
        compiler.errors.error(
            ast,
            f"Cannot infer a type for '{name}'",
            hint=f"Add a type annotation, e.g. 'var {name}: num = ...;'",
            kind=InvalidTypeAnnotation,
        )

    return declare_variable(compiler, name, kind.kind_name, init_value, ast)
