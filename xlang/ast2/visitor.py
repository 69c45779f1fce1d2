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
class Visitor:
    """
    Pre-order walker. The callback receives (node, visitor) and may call
    visitor.stop() to end the walk once it has committed to an answer.
    """
    def __init__(self):
        self.stopped = False

    def stop(self):
        self.stopped = True

    @classmethod
    def walk(cls, root, callback):
        visitor = cls()
        visitor._visit(root, callback)
        return visitor

    def _visit(self, node, callback):
        if node is None or self.stopped:
            return
        callback(node, self)
        if self.stopped:
            return
        for child in node.children():
            self._visit(child, callback)
            if self.stopped:
                return
