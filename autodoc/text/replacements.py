"""
Keyword replacement for split identifier words.

A replacement maps a recognized word (a shortcut such as ``get``) to a
substitute text (such as ``Gets the``). Replacements are scoped to fields,
methods or both, and either apply only to the first word or to every word.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..errors import TemplateFormatError

logger = logging.getLogger(__name__)


class ReplacementScope(Enum):
    """Declarations a replacement applies to."""
    METHOD = "method"
    FIELD = "field"
    BOTH = "both"

    @property
    def includes_field(self) -> bool:
        return self in (ReplacementScope.FIELD, ReplacementScope.BOTH)

    @property
    def includes_method(self) -> bool:
        return self in (ReplacementScope.METHOD, ReplacementScope.BOTH)

    @classmethod
    def parse(cls, value: Any) -> 'ReplacementScope':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise TemplateFormatError(f"Invalid replacement scope: {value!r}") from None


class ReplacementMode(Enum):
    """Word positions a replacement applies to."""
    PREFIX = "prefix"
    ALL = "all"

    @classmethod
    def parse(cls, value: Any) -> 'ReplacementMode':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise TemplateFormatError(f"Invalid replacement mode: {value!r}") from None


@dataclass(eq=False)
class Replacement:
    """A single shortcut replacement."""
    shortcut: str
    replacement: str
    scope: ReplacementScope = ReplacementScope.METHOD
    mode: ReplacementMode = ReplacementMode.PREFIX

    @property
    def key(self) -> Tuple[ReplacementScope, str]:
        """Identity of a replacement: scope and case insensitive shortcut."""
        return (self.scope, self.shortcut.lower())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Replacement):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.shortcut.lower())

    def sort_key(self) -> Tuple[str, str]:
        return (self.shortcut, self.scope.value)

    def __str__(self) -> str:
        return f"{self.shortcut} -> {self.replacement} ({self.scope.value}, {self.mode.value})"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Replacement':
        """Create Replacement from dictionary."""
        if 'shortcut' not in data:
            raise TemplateFormatError(f"Replacement without shortcut: {data!r}")
        return cls(
            shortcut=str(data['shortcut']),
            replacement=str(data.get('replacement', '')),
            scope=ReplacementScope.parse(data.get('scope', ReplacementScope.METHOD.value)),
            mode=ReplacementMode.parse(data.get('mode', ReplacementMode.PREFIX.value)),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            'shortcut': self.shortcut,
            'replacement': self.replacement,
            'scope': self.scope.value,
            'mode': self.mode.value,
        }


class ReplacementManager:
    """Applies shortcut replacements to split identifier words."""

    def __init__(self, replacements: Iterable[Replacement] = ()):
        self._replacements: List[Replacement] = []
        self._field_replacements: Dict[str, Replacement] = {}
        self._method_replacements: Dict[str, Replacement] = {}
        for replacement in replacements:
            self.add(replacement)

    def add(self, replacement: Replacement) -> None:
        """Add a replacement; a later shortcut overrides an earlier one in its map."""
        self._replacements.append(replacement)
        shortcut = replacement.shortcut.lower()
        if replacement.scope.includes_field:
            self._field_replacements[shortcut] = replacement
        if replacement.scope.includes_method:
            self._method_replacements[shortcut] = replacement

    @property
    def replacements(self) -> List[Replacement]:
        """All replacements in insertion order."""
        return list(self._replacements)

    def copy(self) -> 'ReplacementManager':
        return ReplacementManager(self._replacements)

    def lookup(self, word: str, scope: ReplacementScope) -> Optional[Replacement]:
        """Find the replacement for a word, ignoring case."""
        return self._map_for(scope).get(word.lower())

    def apply(self, words: List[str], scope: ReplacementScope) -> List[str]:
        """
        Replace shortcuts in a list of words.

        Args:
            words: Split identifier words
            scope: FIELD or METHOD; anything else uses the method replacements

        Returns:
            New list of words, empty replacements drop the word
        """
        replacements = self._map_for(scope)
        result = []
        for index, word in enumerate(words):
            replacement = replacements.get(word.lower())
            if replacement is not None and (index == 0 or replacement.mode is ReplacementMode.ALL):
                if replacement.replacement:
                    result.append(replacement.replacement)
            else:
                result.append(word)
        return result

    def _map_for(self, scope: ReplacementScope) -> Dict[str, Replacement]:
        if scope is ReplacementScope.FIELD:
            return self._field_replacements
        return self._method_replacements

    def __len__(self) -> int:
        return len(self._replacements)


# Short alias used by callers that think of this as "the replacer"
Replacer = ReplacementManager


def loads_replacements(text: str) -> List[Replacement]:
    """Parse replacements from a JSON string."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TemplateFormatError(f"Invalid replacement JSON: {e}") from e

    entries = data.get('replacements') if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise TemplateFormatError("Replacement file must contain a 'replacements' list")
    return [Replacement.from_dict(entry) for entry in entries]


def dumps_replacements(replacements: Iterable[Replacement], indent: Optional[int] = 2) -> str:
    """Serialize replacements to a JSON string."""
    return json.dumps(
        {'replacements': [r.to_dict() for r in replacements]},
        indent=indent,
        ensure_ascii=False
    )


def load_replacements(path: Path) -> List[Replacement]:
    """
    Load replacements from a JSON file.

    The format is:
    {
      "replacements": [
        {"shortcut": "get", "replacement": "Gets the", "scope": "method", "mode": "prefix"}
      ]
    }
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            replacements = loads_replacements(f.read())
        logger.info(f"Loaded {len(replacements)} replacements from {path}")
        return replacements
    except Exception as e:
        logger.error(f"Failed to load replacements from {path}: {e}")
        raise


def store_replacements(replacements: Iterable[Replacement], path: Path) -> None:
    """Store replacements to a JSON file."""
    replacements = list(replacements)
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(dumps_replacements(replacements))
        logger.info(f"Stored {len(replacements)} replacements to {path}")
    except Exception as e:
        logger.error(f"Failed to store replacements to {path}: {e}")
        raise


__all__ = [
    "ReplacementScope",
    "ReplacementMode",
    "Replacement",
    "ReplacementManager",
    "Replacer",
    "loads_replacements",
    "dumps_replacements",
    "load_replacements",
    "store_replacements",
]
