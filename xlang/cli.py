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
import argparse
import json
import os
import sys

from .codegen.compiler import Compiler
from .compiletime.errors import CompilerException, ErrorHandler, Colors
from .utils.config import load_config
from .utils.helpers import parse_code


def build_arg_parser():
    prs = argparse.ArgumentParser(prog="xlang", description="Xlang Compiler")
    prs.add_argument("input", type=str, help="Input xlang source file")

    prs.add_argument(
        "--ir", "-i", action="store_true", help="Generate and print LLVM IR code"
    )
    prs.add_argument(
        "-r", "--run",
        nargs="?", const="", default=None, metavar="FN",
        help="Run the program using JIT (optionally a named zero-argument function)",
    )
    prs.add_argument(
        "--obj", type=str, metavar="OUT", help="Generate object code into OUT"
    )
    prs.add_argument(
        "--ast", type=str, metavar="PATH", help="Write the AST as JSON to PATH"
    )
    prs.add_argument(
        "-O", "--optimization-level", help="LLVM Optimization level", type=int
    )
    prs.add_argument(
        "--debug", action="store_true", help="Print compiler debug output"
    )
    prs.add_argument(
        "--quiet", "-q", action="store_true", help="Only print requested output and errors"
    )
    return prs


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    def log(msg):
        if not args.quiet:
            print(msg)

    input_file_path = os.path.abspath(args.input)
    if not os.path.isfile(input_file_path):
        print(f"{Colors.RED}Error:{Colors.RESET} File '{args.input}' not found.", file=sys.stderr)
        return 2

    config = load_config(os.path.dirname(input_file_path))
    if args.optimization_level is not None:
        config["build"]["opt"] = args.optimization_level
    if args.debug:
        config["build"]["debug"] = True
    if args.ast:
        config["build"]["ast_dump"] = args.ast

    with open(input_file_path, "r") as f:
        code = f.read()

    errors = ErrorHandler(code, input_file_path)
    use_color = sys.stdout.isatty()
    compiler = None
    try:
        log("Parsing code...")
        ast = parse_code(code, filename=input_file_path)
        log("Parsing successful.")

        if config["build"]["ast_dump"]:
            with open(config["build"]["ast_dump"], "w") as f:
                json.dump(ast.to_dict(), f, indent=2)
            log(f"AST written to {config['build']['ast_dump']}")

        log("Compiling AST to LLVM IR...")
        compiler = Compiler(code, input_file_path, config=config)
        compiler.compile(ast)

        if args.ir:
            log("--- Generated LLVM IR ---")
            print(compiler.generate_ir())
            log("-------------------------")

        if args.obj:
            compiler.generate_object_code(args.obj)
            log(f"Object file '{args.obj}' generated successfully.")

        if args.run is not None:
            log("Running with JIT...")
            result = compiler.runwithjit(args.run or None)
            if result is not None:
                print(result)
    except CompilerException as e:
        errors.report(e, use_color)
        return 1
    except RuntimeError as e:
        # LLVM verification / JIT failures
        print(f"{Colors.RED}Error:{Colors.RESET} {e}", file=sys.stderr)
        return 1
    finally:
        if compiler is not None:
            compiler.shutdown()

    log("Compilation process finished.")
    return 0
