"""
Comment text synthesis from identifiers.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import re
from enum import Enum
from typing import List, Optional

from .replacements import ReplacementManager, ReplacementScope
from .splitter import split

CONSTANT_PATTERN = re.compile(r"[0-9A-Z_]+")
UPPER_CASE_PATTERN = re.compile(r"[A-Z]+")


class CaseMode(Enum):
    """Case adjustment of the first character of a comment."""
    NONE = "none"
    FIRST_TO_LOWER = "first_to_lower"
    FIRST_TO_UPPER = "first_to_upper"


def first_to_lower(text: Optional[str]) -> str:
    """Convert the first character to lower case."""
    if not text:
        return ""
    return text[0].lower() + text[1:]


def first_to_upper(text: Optional[str]) -> str:
    """Convert the first character to upper case."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def is_constant(text: str) -> bool:
    """Check if text looks like a constant name, e.g. MAX_VALUE."""
    return CONSTANT_PATTERN.fullmatch(text) is not None


def is_upper_case(text: str) -> bool:
    return UPPER_CASE_PATTERN.fullmatch(text) is not None


def all_to_lower(words: List[str], constant: bool) -> List[str]:
    """
    Lower-case split words.

    The first word is kept unless the identifier is a constant. Acronyms
    (all upper case words) are kept unless the identifier is a constant.
    """
    start = 0 if constant else 1
    result = list(words)
    for index in range(start, len(result)):
        if constant or not is_upper_case(result[index]):
            result[index] = result[index].lower()
    return result


def apply_case_mode(text: str, mode: CaseMode) -> str:
    if mode is CaseMode.FIRST_TO_LOWER:
        # keep leading acronyms such as "ID"
        if len(text) < 2 or not text[1].isupper():
            return first_to_lower(text)
    elif mode is CaseMode.FIRST_TO_UPPER:
        return first_to_upper(text)
    return text


def create_comment(
    text: str,
    split_words: bool = True,
    replace: bool = False,
    replacer: Optional[ReplacementManager] = None,
    scope: Optional[ReplacementScope] = None,
    mode: CaseMode = CaseMode.NONE
) -> str:
    """
    Create comment text from an identifier.

    Args:
        text: The identifier or captured text
        split_words: Split into lower-cased words
        replace: Apply shortcut replacements
        replacer: Replacements to apply, required when replace is set
        scope: Replacement scope; None disables replacements
        mode: Case adjustment of the first character

    Returns:
        The comment text
    """
    if not split_words and not replace:
        return apply_case_mode(text, mode)

    has_spaces = " " in text
    constant = is_constant(text)

    words = text.split("_") if constant else split(text)

    if replace and replacer is not None and scope is not None:
        words = replacer.apply(words, scope)

    if split_words:
        words = all_to_lower(words, constant)

    separator = " " if (split_words or has_spaces) else ""
    return apply_case_mode(separator.join(words), mode)


__all__ = [
    "CaseMode",
    "first_to_lower",
    "first_to_upper",
    "is_constant",
    "is_upper_case",
    "all_to_lower",
    "apply_case_mode",
    "create_comment",
]
