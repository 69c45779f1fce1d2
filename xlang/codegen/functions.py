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
from .utils import convert_kind, kind_of_type, zero_value
from .variables import declare_variable


# ---------------------------------------------------------------------------
# <Method name=compile_function_declaration args=[<Compiler>, <FunctionDeclaration>]>
# <Description>
# Compiles `fn name(args) -> kind { body }` into a module level LLVM function.
# </Description>
def compile_function_declaration(compiler: "Compiler", ast: FunctionDeclaration) -> ir.Function:
    if not isinstance(ast.id, Identifier):
        compiler.errors.error(ast, "Function declaration needs an identifier", kind=MalformedNode)
    if not isinstance(ast.body, BlockStatement):
        compiler.errors.error(ast, "Function body must be a block", kind=MalformedNode)

    return compile_function(compiler, ast.id.name, ast.arguments, ast.body, ast.return_kind, ast)


# ---------------------------------------------------------------------------
# <Method name=compile_function args=[<Compiler>, <str>, <List[Identifier]>, <BlockStatement>, <Kind>, <Node>, <bool>]>
# <Description>
# Shared path of user functions and the synthesized program entry.
# 1. Builds the signature from the parameter kinds (void parameters are rejected).
# 2. Creates the function and declares it in the enclosing frame, so the body can recurse.
# 3. Pushes the function frame and spills every parameter into its own slot.
# 4. Compiles the body as the function level block and closes the last block.
# </Description>
def compile_function(
    compiler: "Compiler",
    name: str,
    arguments: List[Identifier],
    body: BlockStatement,
    return_kind: Kind,
    node: Node = None,
    declare: bool = True,
) -> ir.Function:
    arg_kinds = []
    for arg in arguments:
        if not isinstance(arg, Identifier):
            compiler.errors.error(arg, "Function parameter must be an identifier", kind=MalformedNode)
        kind_name = arg.kind.kind_name
        if kind_name is None or kind_name is KindName.VOID:
            compiler.errors.error(
                arg,
                f"Parameter '{arg.name}' must be typed num or bool, got {arg.kind!r}",
                kind=InvalidTypeAnnotation,
            )
        arg_kinds.append(kind_name)

    if not return_kind.is_exact():
        compiler.errors.error(node, f"Function '{name}' has no return type", kind=InvalidTypeAnnotation)

    if declare and compiler.scopes.current.has(name):
        compiler.errors.error(
            node,
            f"Symbol '{name}' already defined in this scope.",
            kind=DuplicateSymbol,
        )

    fn_type = ir.FunctionType(convert_kind(return_kind.kind_name), [convert_kind(k) for k in arg_kinds])
    fn_value = ir.Function(compiler.module, fn_type, name=compiler.module.get_unique_name(name))
    for arg_value, arg in zip(fn_value.args, arguments):
        arg_value.name = arg.name
    compiler.debug(f"function '{fn_value.name}' : {fn_type}")

    if declare:
        compiler.scopes.declare(name, FunctionBinding(fn_value, return_kind, arg_kinds), node)

    entry_block = fn_value.append_basic_block("entry")
    with compiler.scopes.scope(
        entry_block,
        function=fn_value,
        is_function_scope=True,
        return_kind=return_kind,
    ):
        for arg_value, arg, kind_name in zip(fn_value.args, arguments, arg_kinds):
            declare_variable(compiler, arg.name, kind_name, arg_value, arg, is_arg=True)

        compiler.compile_block_statement(body, is_fn_block=True)
        _close_function(compiler, return_kind)

    return fn_value


def _close_function(compiler, return_kind: Kind):
    """Terminates the block the body finished in, if the body did not."""
    if compiler.builder.block.is_terminated:
        return
    if return_kind == VoidKind:
        compiler.builder.ret_void()
    else:
        compiler.builder.ret(zero_value(return_kind.kind_name))


# ---------------------------------------------------------------------------
# <Method name=compile_return args=[<Compiler>, <ReturnStatement>]>
# <Description>
# Emits `ret` for the enclosing function, checking the value against its return kind.
# </Description>
def compile_return(compiler: "Compiler", ast: ReturnStatement):
    fn_scope = compiler.scopes.current.find_function_scope()
    expected = fn_scope.return_kind

    if ast.argument is None:
        if expected != VoidKind:
            compiler.errors.error(
                ast, f"Function '{fn_scope.function.name}' must return a {expected!r} value", kind=KindMismatch
            )
        compiler.builder.ret_void()
        return

    if expected == VoidKind:
        value = compiler.compile_expression(ast.argument)
        if value is not None:
            compiler.errors.error(
                ast,
                f"Function '{fn_scope.function.name}' returns void but a {kind_of_type(value.type)} value is returned",
                kind=KindMismatch,
            )
        compiler.builder.ret_void()
        return

    value = compiler.compile_value(ast.argument)
    if value.type != convert_kind(expected.kind_name):
        compiler.errors.error(
            ast,
            f"Function '{fn_scope.function.name}' returns {expected!r} but a {kind_of_type(value.type)} value is returned",
            kind=KindMismatch,
        )
    compiler.builder.ret(value)


# ---------------------------------------------------------------------------
# <Method name=compile_function_call args=[<Compiler>, <CallExpression>]>
# <Description>
# Compiles `name(args...)`. Arguments are evaluated left to right.
# Returns the call value, or None when the callee returns void.
# </Description>
def compile_function_call(compiler: "Compiler", ast: CallExpression) -> Optional[ir.Value]:
    if not isinstance(ast.callee, Identifier):
        compiler.errors.error(ast, "Callee must be an identifier", kind=MalformedNode)

    name = ast.callee.name
    binding = compiler.scopes.lookup(name)
    if binding is None:
        hint = None
        suggestion = check_typo(name, compiler.scopes.visible_names())
        if suggestion:
            hint = f"Did you mean '{suggestion}'?"
        compiler.errors.error(ast.callee, f"Unknown function '{name}'", hint=hint, kind=UnknownSymbol)
    if not isinstance(binding, FunctionBinding):
        compiler.errors.error(ast.callee, f"'{name}' is a variable, not a function", kind=UnknownSymbol)

    if len(ast.arguments) != len(binding.arg_kinds):
        compiler.errors.error(
            ast,
            f"Function '{name}' expects {len(binding.arg_kinds)} argument(s), got {len(ast.arguments)}",
            kind=KindMismatch,
        )

    arg_values = []
    for i, (arg, kind_name) in enumerate(zip(ast.arguments, binding.arg_kinds)):
        value = compiler.compile_value(arg)
        if value.type != convert_kind(kind_name):
            compiler.errors.error(
                arg,
                f"Argument {i + 1} of '{name}' must be {kind_name}, got {kind_of_type(value.type)}",
                kind=KindMismatch,
            )
        arg_values.append(value)

    if binding.return_kind == VoidKind:
        compiler.builder.call(binding.handle, arg_values)
        return None
    return compiler.builder.call(binding.handle, arg_values, name=f"call_{name}")
