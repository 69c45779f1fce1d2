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
from contextlib import contextmanager

from llvmlite import ir

from ..compiletime.errors import DuplicateSymbol
from .types import Kind, KindName


class VariableBinding:
    """A declared variable. `storage` is the alloca holding its value, None iff void."""
    __slots__ = ("kind", "storage")

    def __init__(self, kind: KindName, storage=None):
        self.kind = kind
        self.storage = storage

    def is_fn(self): return False

    def __repr__(self): return f"VariableBinding({self.kind}, {getattr(self.storage, 'name', None)})"


class FunctionBinding:
    """A declared function: its LLVM handle and signature."""
    __slots__ = ("handle", "return_kind", "arg_kinds")

    def __init__(self, handle: ir.Function, return_kind: Kind, arg_kinds):
        self.handle = handle
        self.return_kind = return_kind
        self.arg_kinds = list(arg_kinds)

    def is_fn(self): return True

    def __repr__(self): return f"FunctionBinding({self.handle.name}, {self.return_kind})"


class Scope:
    """
    One lexical frame: a name -> binding table tied to the block it emits into.
    Function frames additionally record the function and its return kind;
    loop frames record their continue/break targets.
    """
    def __init__(
        self,
        block,
        parent=None,
        function=None,
        is_function_scope=False,
        return_kind=None,
        is_loop_scope=False,
        loop_cond_block=None,
        loop_end_block=None,
        loop_label=None,
    ):
        self.parent = parent
        self.block = block
        self.symbols = {}  # Maps name -> VariableBinding | FunctionBinding

        self.is_function_scope = is_function_scope
        self.function = function if function is not None else (parent.function if parent else None)
        self.return_kind = return_kind

        self.is_loop_scope = is_loop_scope
        self.loop_cond_block = loop_cond_block
        self.loop_end_block = loop_end_block
        self.loop_label = loop_label

    def has(self, name):
        return name in self.symbols

    def define(self, name, binding, node=None):
        if name in self.symbols:
            raise DuplicateSymbol(
                f"Symbol '{name}' already defined in this scope.",
                node=node,
                hint="Shadowing is not allowed in the same block.",
            )
        self.symbols[name] = binding

    def resolve(self, name):
        if name in self.symbols: return self.symbols[name]
        if self.parent: return self.parent.resolve(name)
        return None

    def find_function_scope(self):
        if self.is_function_scope: return self
        if self.parent: return self.parent.find_function_scope()
        return None

    def find_loop_scope(self, label=None):
        """Nearest enclosing loop (optionally with the given label) inside the current function."""
        if self.is_loop_scope and (label is None or self.loop_label == label): return self
        if self.is_function_scope: return None
        if self.parent: return self.parent.find_loop_scope(label)
        return None


class ScopeManager:
    """
    Stack of frames. Pushing a frame moves emission to the end of its block;
    popping moves it back to the parent's block.
    """
    def __init__(self, builder: ir.IRBuilder, on_debug=None):
        self.builder = builder
        self.current = None
        self.on_debug = on_debug

    @property
    def depth(self):
        depth = 0
        s = self.current
        while s:
            depth += 1
            s = s.parent
        return depth

    def _debug(self, msg):
        if self.on_debug: self.on_debug(msg)

    def push(self, block, **frame_options) -> Scope:
        self.current = Scope(block, parent=self.current, **frame_options)
        self.builder.position_at_end(block)
        self._debug(f"push scope #{self.depth} -> block '{block.name}'")
        return self.current

    def pop(self):
        frame = self.current
        if frame is None:
            raise RuntimeError("pop() called on an empty scope stack")
        self.current = frame.parent
        self._debug(f"pop scope #{self.depth + 1}")
        if self.current is None:
            return
        if not frame.is_function_scope:
            # A nested block continues in the same function: resume where it finished
            self.current.block = frame.block
        self.builder.position_at_end(self.current.block)

    @contextmanager
    def scope(self, block, **frame_options):
        """push/pop pair that also releases the frame on error paths."""
        frame = self.push(block, **frame_options)
        try:
            yield frame
        finally:
            self.pop()

    def move_to(self, block):
        """Repositions emission inside the current frame (new basic block, same scope)."""
        self.current.block = block
        self.builder.position_at_end(block)

    def declare(self, name, binding, node=None):
        self.current.define(name, binding, node)
        self._debug(f"declare '{name}' = {binding!r}")

    def lookup(self, name):
        if self.current is None:
            return None
        return self.current.resolve(name)

    def visible_names(self):
        names = set()
        s = self.current
        while s:
            names.update(s.symbols)
            s = s.parent
        return names
