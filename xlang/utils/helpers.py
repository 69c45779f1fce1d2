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
from ..lexer import build_lexer
from ..parser.parser import parser


def track_tokens(lx):
    """Links every token to the one before it so syntax errors can look back for typos."""
    original_token = lx.token
    last_token = None

    def tracked_token():
        nonlocal last_token
        tok = original_token()
        if tok:
            tok.prev = last_token
            last_token = tok
        return tok

    lx.token = tracked_token
    return lx


def parse_code(code, filename="<stdin>"):
    lx = track_tokens(build_lexer())
    lx.lineno = 1
    # Kept on the lexer so diagnostics can name the file
    lx.filename = filename
    return parser.parse(code, lexer=lx, tracking=True)


def parse_file(path):
    with open(path, "r") as f:
        code = f.read()
    return parse_code(code, filename=path)
