"""
Identifier text synthesis: splitting, keyword replacement and comment text.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from .splitter import split, join_words
from .replacements import (
    Replacement, ReplacementManager, ReplacementMode, ReplacementScope, Replacer,
    load_replacements, loads_replacements, store_replacements, dumps_replacements
)
from .comment import CaseMode, create_comment, first_to_lower, first_to_upper

__all__ = [
    "split",
    "join_words",
    "Replacement",
    "ReplacementManager",
    "ReplacementMode",
    "ReplacementScope",
    "Replacer",
    "load_replacements",
    "loads_replacements",
    "store_replacements",
    "dumps_replacements",
    "CaseMode",
    "create_comment",
    "first_to_lower",
    "first_to_upper",
]
