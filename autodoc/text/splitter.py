"""
Identifier splitting.

Splits identifiers where characters change from lower to upper case, on
digit boundaries and on underscores. Runs of upper case letters are kept
together as acronyms:

    getIDFromProdukt  => get ID From Produkt
    update4Invoice    => update 4 Invoice

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from enum import Enum
from typing import List, Optional


class SplitState(Enum):
    """States of the splitting state machine."""
    EMPTY = "empty"
    LOWER = "lower"
    UPPER = "upper"
    DIGIT = "digit"


def _is_digit(ch: str) -> bool:
    return ch.isdecimal()


def _is_upper(ch: str) -> bool:
    return ch.isupper()


class _WordBuffer:
    """Collects characters of the current word and flushes finished words."""

    def __init__(self):
        self.words: List[str] = []
        self._current: List[str] = []

    def flush(self) -> None:
        if self._current:
            self.words.append("".join(self._current))
            self._current = []

    def add(self, ch: str) -> None:
        # whitespace only separates words
        if ch.isspace():
            self.flush()
        else:
            self._current.append(ch)


def initial_state(identifier: Optional[str]) -> SplitState:
    """Determine the start state from the first character."""
    if not identifier:
        return SplitState.EMPTY
    ch = identifier[0]
    if _is_digit(ch):
        return SplitState.DIGIT
    return SplitState.UPPER if _is_upper(ch) else SplitState.LOWER


def split(identifier: Optional[str]) -> List[str]:
    """
    Split an identifier into its word fragments.

    Args:
        identifier: Identifier to split, may be empty or None

    Returns:
        List of word fragments in original casing
    """
    state = initial_state(identifier)
    if state is SplitState.EMPTY:
        return []

    text = identifier.replace("_", " ")
    buffer = _WordBuffer()
    last = len(text) - 1

    for index, ch in enumerate(text):
        if state is SplitState.LOWER:
            if not _is_digit(ch) and not _is_upper(ch):
                buffer.add(ch)
            else:
                buffer.flush()
                buffer.add(ch)
                state = SplitState.DIGIT if _is_digit(ch) else SplitState.UPPER

        elif state is SplitState.UPPER:
            if _is_upper(ch):
                if index == last or _is_digit(text[index + 1]) or _is_upper(text[index + 1]):
                    buffer.add(ch)
                else:
                    buffer.flush()
                    buffer.add(ch)
                    state = SplitState.LOWER
            else:
                if _is_digit(ch):
                    buffer.flush()
                buffer.add(ch)
                state = SplitState.DIGIT if _is_digit(ch) else SplitState.LOWER

        elif state is SplitState.DIGIT:
            if _is_digit(ch):
                buffer.add(ch)
            else:
                buffer.flush()
                buffer.add(ch)
                state = SplitState.UPPER if _is_upper(ch) else SplitState.LOWER

    buffer.flush()
    return buffer.words


def join_words(words: List[str]) -> str:
    """Join word fragments with single spaces."""
    return " ".join(words)


__all__ = ["SplitState", "initial_state", "split", "join_words"]
