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
import ctypes

from llvmlite import binding

from .essentials import *
from .utils import (
    build_number, build_boolean, compile_binary_operation, kind_of_type,
)
from .variables import compile_variable_declaration, get_variable, set_variable
from .functions import compile_function, compile_function_declaration, compile_function_call, compile_return
from .flow import compile_block_statement, compile_if, compile_loop, compile_control_statement
from ..compiletime.errors import ErrorHandler, Colors
from ..semantics.scope import ScopeManager
from ..semantics.inference import TypeInference
from ..utils.config import DEFAULT_CONFIG, merge_config


CTYPES_OF_KIND = {
    KindName.NUMBER: ctypes.c_double,
    KindName.BOOLEAN: ctypes.c_bool,
    KindName.VOID: None,
}


class Compiler:
    """
    Lowers an xlang Program into an LLVM module.

    The program body becomes a void function named after `project.entry`;
    every `fn` becomes a module level function. One Compiler compiles one program.
    """
    errors: ErrorHandler

    def __init__(self, source_code: str = "", filename: str = "<stdin>", config=None, debug=False):
        self.errors = ErrorHandler(source_code, filename)
        self.config = merge_config(DEFAULT_CONFIG, config)
        self.debug_enabled = debug or bool(self.config["build"]["debug"])

        # Initialize binding
        binding.initialize_native_target()
        binding.initialize_native_asmprinter()

        # ------------------ Declare module ---------------------
        self.module = ir.Module(name="xlang_module")

        try:
            self.target_triple = binding.get_default_triple()
            self.target = binding.Target.from_triple(self.target_triple)
            self.target_machine = self.target.create_target_machine(
                reloc="static",
                codemodel=self.config["build"]["codemodel"] or "default",
                opt=int(self.config["build"]["opt"] or 0),
            )
            self.module.triple = self.target_triple
            self.module.data_layout = str(self.target_machine.target_data)
        except RuntimeError as e:
            print(f"{Colors.RED}Fatal Error:{Colors.RESET} Failed to initialize LLVM target information: {e}")
            raise

        # The builder follows the scope stack: every push/pop/move repositions it
        self.builder = ir.IRBuilder()
        self.block_count = 0
        self.scopes = ScopeManager(self.builder, on_debug=self.debug)
        self.inference = TypeInference(self.scopes)

        self.entry_function = None
        self._engine = None

    # ------------------------------------------------------------------
    @property
    def function(self) -> Optional[ir.Function]:
        """The LLVM function currently being emitted into."""
        return self.scopes.current.function if self.scopes.current else None

    @property
    def current_scope(self):
        return self.scopes.current

    def debug(self, msg):
        if self.debug_enabled:
            print(f"{Colors.GRAY}[DEBUG]{Colors.RESET} {msg}")

    # ------------------------------------------------------------------
    def compile(self, ast: Program) -> ir.Module:
        if not isinstance(ast, Program):
            self.errors.error(
                ast, f"Expected a Program at the top level, got {type(ast).__name__}", kind=MalformedNode
            )

        entry_body = BlockStatement(ast.body)
        entry_body.lineno, entry_body.col_offset = ast.lineno, ast.col_offset
        self.entry_function = self.compile_function(
            self.config["project"]["entry"], [], entry_body, VoidKind, node=ast, declare=False
        )
        return self.module

    def compile_statement(self, ast: Node):
        if isinstance(ast, FunctionDeclaration):
            self.compile_function_declaration(ast)
        elif isinstance(ast, VariableDeclaration):
            self.compile_variable_declaration(ast)
        elif isinstance(ast, BlockStatement):
            self.compile_block_statement(ast)
        elif isinstance(ast, ReturnStatement):
            self.compile_return(ast)
        elif isinstance(ast, IfStatement):
            self.compile_if(ast)
        elif isinstance(ast, LoopStatement):
            self.compile_loop(ast)
        elif isinstance(ast, (BreakStatement, ContinueStatement)):
            self.compile_control_statement(ast)
        elif isinstance(ast, ExpressionStatement):
            # Result discarded; void calls are fine here
            self.compile_expression(ast.expression)
        else:
            self.errors.error(ast, f"Unsupported statement: {type(ast).__name__}", kind=MalformedNode)

    def compile_expression(self, ast: Node) -> Optional[ir.Value]:
        """Compiles an expression. Returns None for a call to a void function."""
        if isinstance(ast, NumberLiteral):
            return build_number(ast.value)
        if isinstance(ast, BooleanLiteral):
            return build_boolean(ast.value)
        if isinstance(ast, Identifier):
            return self.get_variable(ast)
        if isinstance(ast, AssignmentExpression):
            return self.set_variable(ast)
        if isinstance(ast, CallExpression):
            return self.compile_function_call(ast)
        if isinstance(ast, BinaryExpression):
            left = self.compile_value(ast.left)
            right = self.compile_value(ast.right)
            return compile_binary_operation(self, left, right, ast.operator, ast)
        self.errors.error(ast, f"Unsupported expression: {type(ast).__name__}", kind=MalformedNode)

    def compile_value(self, ast: Node) -> ir.Value:
        """Like compile_expression, but the expression must produce a value."""
        value = self.compile_expression(ast)
        if value is None:
            self.errors.error(
                ast,
                "This expression has type void and cannot be used as a value",
                kind=VoidValue,
            )
        return value

    # Code generators live in sibling modules and take the compiler as `self`
    compile_function = compile_function
    compile_function_declaration = compile_function_declaration
    compile_function_call = compile_function_call
    compile_return = compile_return
    compile_variable_declaration = compile_variable_declaration
    get_variable = get_variable
    set_variable = set_variable
    compile_block_statement = compile_block_statement
    compile_if = compile_if
    compile_loop = compile_loop
    compile_control_statement = compile_control_statement

    # ------------------------------------------------------------------
    def generate_ir(self) -> str:
        return str(self.module)

    def verify(self):
        """Parses the textual IR back with LLVM and runs its verifier."""
        llvm_module = binding.parse_assembly(self.generate_ir())
        llvm_module.verify()
        return llvm_module

    def generate_object_code(self, output_filename="output.o"):
        """Compiles the module to a platform specific object file."""
        llvm_module = self.verify()
        with open(output_filename, "wb") as f:
            f.write(self.target_machine.emit_object(llvm_module))
        return output_filename

    def runwithjit(self, entry_function_name=None, *args):
        """
        JIT compiles the module and calls one of its functions.
        num arguments/results travel as c_double, bool as c_bool; void returns None.
        """
        if entry_function_name is None:
            if self.entry_function is None:
                raise CompilerException("Nothing to run: compile a program first.")
            entry_function_name = self.entry_function.name

        fn = self.module.globals.get(entry_function_name)
        if not isinstance(fn, ir.Function):
            hint = None
            names = [g.name for g in self.module.functions]
            suggestion = check_typo(entry_function_name, names)
            if suggestion:
                hint = f"Did you mean '{suggestion}'?"
            raise UnknownSymbol(f"No function named '{entry_function_name}' to run", hint=hint)

        fn_type = fn.ftype
        if len(args) != len(fn_type.args):
            raise KindMismatch(
                f"Function '{entry_function_name}' expects {len(fn_type.args)} argument(s), got {len(args)}"
            )

        arg_ctypes = [CTYPES_OF_KIND[kind_of_type(t)] for t in fn_type.args]
        ret_ctype = CTYPES_OF_KIND[kind_of_type(fn_type.return_type)]

        llvm_module = self.verify()
        target_machine = binding.Target.from_default_triple().create_target_machine()
        # The engine owns the machine code; keep it alive as long as the compiler
        self._engine = binding.create_mcjit_compiler(llvm_module, target_machine)
        self._engine.finalize_object()
        self._engine.run_static_constructors()

        func_ptr = self._engine.get_function_address(fn.name)
        cfunc = ctypes.CFUNCTYPE(ret_ctype, *arg_ctypes)(func_ptr)
        converted = [ctype(arg) for ctype, arg in zip(arg_ctypes, args)]
        return cfunc(*converted)

    def shutdown(self):
        self._engine = None
