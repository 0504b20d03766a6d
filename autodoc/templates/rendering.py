"""
Template rendering.

Templates reference the matched element and its capture groups with
``${...}`` expressions, optionally followed by text operators:

    ${e.g(1).rsfu}       group 1, replaced, split, first to upper
    ${e.p.g(0)}          whole match of the enclosing element
    ${p.author}          a configured property
    \\$                  a literal dollar sign

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from ..text.comment import CaseMode, apply_case_mode, create_comment, first_to_upper
from ..text.replacements import ReplacementManager, ReplacementScope
from .types import DeclarationKind, RenderError

logger = logging.getLogger(__name__)


def replacement_scope_for(kind: Optional[DeclarationKind]) -> Optional[ReplacementScope]:
    """Map a declaration kind to the replacement scope used for its text."""
    if kind in (DeclarationKind.FIELD, DeclarationKind.PARAMETER):
        return ReplacementScope.FIELD
    if kind is DeclarationKind.METHOD:
        return ReplacementScope.METHOD
    return None


class TextOperators:
    """Text operators available to template authors on captured text."""

    def __init__(
        self,
        text: Optional[str],
        kind: Optional[DeclarationKind] = None,
        replacer: Optional[ReplacementManager] = None
    ):
        self.text = text if text is not None else ""
        self.kind = kind
        self.replacer = replacer

    def _derive(self, text: str) -> 'TextOperators':
        return TextOperators(text, self.kind, self.replacer)

    def _comment(self, split_words: bool, replace: bool, mode: CaseMode = CaseMode.NONE) -> 'TextOperators':
        return self._derive(create_comment(
            self.text,
            split_words=split_words,
            replace=replace,
            replacer=self.replacer,
            scope=replacement_scope_for(self.kind),
            mode=mode
        ))

    def first_to_lower(self) -> 'TextOperators':
        return self._derive(apply_case_mode(self.text, CaseMode.FIRST_TO_LOWER))

    def first_to_upper(self) -> 'TextOperators':
        return self._derive(first_to_upper(self.text))

    def to_upper(self) -> 'TextOperators':
        return self._derive(self.text.upper())

    def to_lower(self) -> 'TextOperators':
        return self._derive(self.text.lower())

    def split(self) -> 'TextOperators':
        """Split into words, lower case except the first word and acronyms."""
        return self._comment(True, False)

    def replace(self) -> 'TextOperators':
        """Replace shortcuts without splitting."""
        return self._comment(False, True)

    def sfu(self) -> 'TextOperators':
        return self._comment(True, False, CaseMode.FIRST_TO_UPPER)

    def sfl(self) -> 'TextOperators':
        return self._comment(True, False, CaseMode.FIRST_TO_LOWER)

    def rs(self) -> 'TextOperators':
        return self._comment(True, True)

    def rsfu(self) -> 'TextOperators':
        return self._comment(True, True, CaseMode.FIRST_TO_UPPER)

    def rsfl(self) -> 'TextOperators':
        return self._comment(True, True, CaseMode.FIRST_TO_LOWER)

    # shortcuts
    fl = first_to_lower
    fu = first_to_upper
    u = to_upper
    l = to_lower  # noqa: E741
    s = split
    r = replace

    def char_at(self, index: int) -> str:
        try:
            return self.text[index]
        except IndexError:
            logger.warning(f"Index {index} out of range for {self.text!r}")
            return " "

    def __len__(self) -> int:
        return len(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"TextOperators({self.text!r})"

    def __eq__(self, other: object) -> bool:
        return self.text == str(other)

    def __hash__(self) -> int:
        return hash(self.text)


OPERATORS = frozenset({
    "fl", "fu", "u", "l", "s", "r", "sfu", "sfl", "rs", "rsfu", "rsfl",
    "first_to_lower", "first_to_upper", "to_upper", "to_lower", "split", "replace",
})

_PARENT_TOKENS = ("p", "parent")
_GROUP_TOKEN = re.compile(r"(?:g|group)\((\d+)\)")
_REFERENCE = re.compile(r"\\\$|\$\{([^}]*)\}|\$\{")


class TemplateRenderer:
    """Renders template bodies for matching elements."""

    def __init__(
        self,
        replacer: Optional[ReplacementManager] = None,
        properties: Optional[Dict[str, str]] = None
    ):
        self.replacer = replacer
        self.properties: Dict[str, str] = dict(properties or {})

    def render(self, element: Any, body: Optional[str] = None) -> str:
        """
        Render the body of the element's template (or the given body).

        Args:
            element: MatchingElement to render for
            body: Optional template text overriding the template body

        Returns:
            The rendered text
        """
        if body is None:
            body = element.entry.body
        return self._expand(body, element)

    def validate(self, body: str) -> None:
        """
        Check all references of a template body without evaluating them.

        Raises:
            RenderError: On the first invalid reference
        """
        self._expand(body, None)

    def _expand(self, body: str, element: Any) -> str:
        parts: List[str] = []
        position = 0
        for match in _REFERENCE.finditer(body):
            parts.append(body[position:match.start()])
            position = match.end()

            token = match.group(0)
            if token == "\\$":
                parts.append("$")
                continue

            line, column = _line_column(body, match.start())
            reference = match.group(1)
            if reference is None:
                raise RenderError("Unterminated reference", line, column)
            parts.append(self._evaluate(reference.strip(), element, line, column))

        parts.append(body[position:])
        return "".join(parts)

    def _evaluate(self, reference: str, element: Any, line: int, column: int) -> str:
        tokens = reference.split(".")
        head, rest = tokens[0], tokens[1:]

        if head == "p" and rest:
            key = ".".join(rest)
            if key not in self.properties:
                raise RenderError(f"Unknown property '{key}'", line, column)
            return self.properties[key]

        if head != "e":
            raise RenderError(f"Unknown reference '{reference}'", line, column)

        current = element
        value: Optional[TextOperators] = None
        for token in rest:
            if value is None and token in _PARENT_TOKENS:
                if element is not None:
                    current = current.parent if current is not None else None
                    if current is None:
                        raise RenderError(f"No parent element in '{reference}'", line, column)
                continue

            group = _GROUP_TOKEN.fullmatch(token)
            if value is None and group:
                value = self._group(current, int(group.group(1)), reference, line, column)
                continue

            if token in OPERATORS:
                if value is None:
                    value = self._group(current, 0, reference, line, column)
                value = getattr(value, token)()
                continue

            raise RenderError(f"Unknown operator '{token}' in '{reference}'", line, column)

        if value is None:
            value = self._group(current, 0, reference, line, column)
        return str(value)

    def _group(self, element: Any, index: int, reference: str, line: int, column: int) -> TextOperators:
        # validation only checks syntax
        if element is None:
            return TextOperators("", None, self.replacer)
        value = element.group(index, self.replacer)
        if value is None:
            raise RenderError(f"No group {index} in '{reference}'", line, column)
        return value


def _line_column(text: str, offset: int) -> Tuple[int, int]:
    line = text.count("\n", 0, offset)
    column = offset - (text.rfind("\n", 0, offset) + 1)
    return line, column


__all__ = [
    "replacement_scope_for",
    "TextOperators",
    "TemplateRenderer",
    "OPERATORS",
]
