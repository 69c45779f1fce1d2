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
from enum import Enum

from ..compiletime.errors import InvalidTypeAnnotation


class KindName(Enum):
    """The closed set of concrete value types."""
    NUMBER = "num"
    BOOLEAN = "bool"
    VOID = "void"

    def __str__(self): return self.value

    @classmethod
    def parse(cls, kind_str: str, allow_void: bool = False, node=None) -> "KindName":
        """
        Maps a type annotation onto a KindName.
        'void' is only accepted where the caller explicitly allows it (function returns).
        """
        for member in cls:
            if member.value == kind_str:
                if member is cls.VOID and not allow_void:
                    raise InvalidTypeAnnotation(
                        "'void' is not allowed here",
                        node=node,
                        hint="'void' may only be used as a function return type.",
                    )
                return member
        raise InvalidTypeAnnotation(
            f"Unknown type '{kind_str}'",
            node=node,
            hint="Valid types are: num, bool, void.",
        )


class Kind:
    """Base class for the resolved or pending type of a value."""
    def __repr__(self): return self.__class__.__name__

    def is_exact(self) -> bool: return False

    @property
    def kind_name(self):
        return None


class ExactKind(Kind):
    """A fully resolved kind: num, bool or void."""
    def __init__(self, name: KindName):
        self.name = name

    def __repr__(self): return str(self.name)

    def __eq__(self, other):
        return isinstance(other, ExactKind) and self.name is other.name

    def __hash__(self):
        return hash(self.name)

    def is_exact(self): return True

    @property
    def kind_name(self):
        return self.name


class InferKind(Kind):
    """Marker for a declaration whose type must be inferred from its initializer."""
    def __repr__(self): return "infer"
    def __eq__(self, other): return isinstance(other, InferKind)
    def __hash__(self): return hash("infer")


class NoneKind(Kind):
    """No value: unresolved-but-harmless."""
    def __repr__(self): return "none"
    def __eq__(self, other): return isinstance(other, NoneKind)
    def __hash__(self): return hash("none")


def kind_from_str(kind_str: str, allow_void: bool = False, node=None) -> ExactKind:
    return ExactKind(KindName.parse(kind_str, allow_void, node))


# Standard Instances
NumberKind = ExactKind(KindName.NUMBER)
BooleanKind = ExactKind(KindName.BOOLEAN)
VoidKind = ExactKind(KindName.VOID)
Infer = InferKind()
NoKind = NoneKind()
