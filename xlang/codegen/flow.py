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
from .utils import NUMBER_TYPE, BOOLEAN_TYPE, build_number, kind_of_type


# ---------------------------------------------------------------------------
# <Method name=create_block args=[<Compiler>, <str>]>
# <Description>
# Appends a new basic block to the current function. Does NOT move the builder.
# </Description>
def create_block(compiler: "Compiler", name: str) -> ir.Block:
    if compiler.function is None:
        raise CompilerException("Cannot create block: No function is currently being compiled.")
    return compiler.function.append_basic_block(name)


def next_suffix(compiler: "Compiler") -> str:
    suffix = f".{compiler.block_count}"
    compiler.block_count += 1
    return suffix


# ---------------------------------------------------------------------------
# <Method name=compile_statements args=[<Compiler>, <List[Node]>]>
# <Description>
# Compiles statements in order into the current frame. Anything that follows
# a terminator (return, break, continue) lands in a fresh unreachable block.
# </Description>
def compile_statements(compiler: "Compiler", statements: List[Node]):
    for stmt in statements:
        if compiler.builder.block.is_terminated:
            compiler.scopes.move_to(create_block(compiler, "unreachable"))
        compiler.compile_statement(stmt)


# ---------------------------------------------------------------------------
# <Method name=compile_block_statement args=[<Compiler>, <BlockStatement>, <bool>]>
# <Description>
# A function body reuses the function's frame. Any other block gets its own
# frame in the same function: it sees and mutates the enclosing locals, and
# its own declarations disappear when it ends.
# </Description>
def compile_block_statement(compiler: "Compiler", ast: BlockStatement, is_fn_block: bool = False):
    if not isinstance(ast, BlockStatement):
        compiler.errors.error(ast, f"Expected a block, got {type(ast).__name__}", kind=MalformedNode)

    if is_fn_block:
        compile_statements(compiler, ast.body)
        return

    with compiler.scopes.scope(compiler.builder.block):
        compile_statements(compiler, ast.body)


# ---------------------------------------------------------------------------
# <Method name=compile_condition args=[<Compiler>, <Node>]>
# <Description>
# Compiles a condition to an i1. bool is used as is, num is true when != 0.
# </Description>
def compile_condition(compiler: "Compiler", ast: Node) -> ir.Value:
    value = compiler.compile_value(ast)
    if value.type == BOOLEAN_TYPE:
        return value
    if value.type == NUMBER_TYPE:
        return compiler.builder.fcmp_ordered("!=", value, build_number(0.0), name="cond")
    compiler.errors.error(ast, f"Condition must be bool or num, got {kind_of_type(value.type)}", kind=KindMismatch)


# ---------------------------------------------------------------------------
# <Method name=compile_if args=[<Compiler>, <IfStatement>]>
# <Description>
# Compiles if/else. Each arm is a nested block; arms that fall through
# branch to the merge block, where emission resumes.
# </Description>
def compile_if(compiler: "Compiler", ast: IfStatement):
    suffix = next_suffix(compiler)
    cond_val = compile_condition(compiler, ast.condition)

    then_bb = create_block(compiler, f"if_then{suffix}")
    else_bb = create_block(compiler, f"if_else{suffix}") if ast.alternate is not None else None
    merge_bb = create_block(compiler, f"if_merge{suffix}")

    compiler.builder.cbranch(cond_val, then_bb, else_bb if else_bb is not None else merge_bb)

    compiler.scopes.move_to(then_bb)
    _compile_arm(compiler, ast.consequent)
    if not compiler.builder.block.is_terminated:
        compiler.builder.branch(merge_bb)

    if else_bb is not None:
        compiler.scopes.move_to(else_bb)
        _compile_arm(compiler, ast.alternate)
        if not compiler.builder.block.is_terminated:
            compiler.builder.branch(merge_bb)

    compiler.scopes.move_to(merge_bb)


def _compile_arm(compiler, arm):
    if isinstance(arm, IfStatement):
        # else if: the nested if still gets a frame of its own
        with compiler.scopes.scope(compiler.builder.block):
            compile_if(compiler, arm)
        return
    compile_block_statement(compiler, arm)


# ---------------------------------------------------------------------------
# <Method name=compile_loop args=[<Compiler>, <LoopStatement>]>
# <Description>
# Compiles `[label:] loop (cond) { body }`:
#   cond -> body -> cond ... -> end
# The body frame is a loop frame so break/continue can find their targets.
# </Description>
def compile_loop(compiler: "Compiler", ast: LoopStatement):
    if not isinstance(ast.body, BlockStatement):
        compiler.errors.error(ast, "Loop body must be a block", kind=MalformedNode)

    suffix = next_suffix(compiler)
    cond_bb = create_block(compiler, f"loop_cond{suffix}")
    body_bb = create_block(compiler, f"loop_body{suffix}")
    end_bb = create_block(compiler, f"loop_end{suffix}")

    compiler.builder.branch(cond_bb)

    compiler.scopes.move_to(cond_bb)
    cond_val = compile_condition(compiler, ast.condition)
    compiler.builder.cbranch(cond_val, body_bb, end_bb)

    label = ast.label.name if isinstance(ast.label, Identifier) else None
    with compiler.scopes.scope(
        body_bb,
        is_loop_scope=True,
        loop_cond_block=cond_bb,
        loop_end_block=end_bb,
        loop_label=label,
    ):
        compile_statements(compiler, ast.body.body)
        if not compiler.builder.block.is_terminated:
            compiler.builder.branch(cond_bb)

    compiler.scopes.move_to(end_bb)


# ---------------------------------------------------------------------------
# <Method name=compile_control_statement args=[<Compiler>, <BreakStatement|ContinueStatement>]>
# <Description>
# break jumps to the loop's end block, continue to its condition block.
# </Description>
def compile_control_statement(compiler: "Compiler", ast: Node):
    control_type = "break" if isinstance(ast, BreakStatement) else "continue"
    label = ast.label.name if isinstance(ast.label, Identifier) else None

    active_loop_scope = compiler.scopes.current.find_loop_scope(label)
    if active_loop_scope is None:
        if label is None:
            msg = f"'{control_type}' statement found outside of any loop construct."
        else:
            msg = f"'{control_type} {label}' does not match any enclosing loop."
        compiler.errors.error(ast, msg, kind=MalformedNode)

    if control_type == "break":
        compiler.builder.branch(active_loop_scope.loop_end_block)
    else:
        compiler.builder.branch(active_loop_scope.loop_cond_block)
