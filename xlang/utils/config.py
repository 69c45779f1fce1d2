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
import copy
import os

import toml

CONFIG_FILENAME = "xlang.toml"

DEFAULT_CONFIG = {
    "project": {
        "entry": "entry",
    },
    "build": {
        "opt": 0,
        "codemodel": "default",
        "debug": False,
        "ast_dump": "",
    },
}


def find_config(start_dir):
    """
    Searches up from start_dir for an 'xlang.toml' file.
    Returns its path, or None when the filesystem root is reached.
    """
    current_dir = os.path.abspath(start_dir)
    while True:
        path = os.path.join(current_dir, CONFIG_FILENAME)
        if os.path.exists(path):
            return path

        parent = os.path.dirname(current_dir)
        if parent == current_dir:  # Reached filesystem root
            return None
        current_dir = parent


def merge_config(base, overrides):
    """Returns a copy of base with the known sections of overrides applied. Unknown keys are dropped."""
    merged = copy.deepcopy(base)
    for section, values in (overrides or {}).items():
        if section not in merged or not isinstance(values, dict):
            continue
        for key, value in values.items():
            if key in merged[section]:
                merged[section][key] = value
    return merged


def load_config(start_dir=None):
    if start_dir is None:
        start_dir = os.getcwd()
    path = find_config(start_dir)
    if path is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    return merge_config(DEFAULT_CONFIG, toml.load(path))
