"""
Template resolution.

Finds the template matching a declaration. Templates nested below the
template of the enclosing type (or method) are tried before the global
templates. The matches of the last enclosing type and method are cached,
so resolving many members of the same declaration in document order only
matches the enclosing declaration once.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import logging
import re
from typing import List, Optional

from ..text.replacements import ReplacementManager
from .model import TemplateEntry, TemplateSet
from .rendering import TextOperators
from .types import (
    Declaration, DeclarationKind, InvalidKindError,
    METHOD_SCOPED_KINDS, TYPE_SCOPED_KINDS
)

logger = logging.getLogger(__name__)

_GENERIC_PART = re.compile(r"<.*>")


class MatchingElement:
    """
    Result of a successful match: the declaration, the matching template,
    the regex match and the match of the enclosing scope.
    """

    def __init__(
        self,
        declaration: Optional[Declaration],
        entry: TemplateEntry,
        match: re.Match,
        parent: Optional['MatchingElement'] = None
    ):
        self.declaration = declaration
        self.entry = entry
        self.match = match
        self.parent = parent

    @property
    def rule(self) -> TemplateEntry:
        return self.entry

    @property
    def captures(self) -> re.Match:
        return self.match

    @property
    def kind(self) -> DeclarationKind:
        return self.entry.kind

    @property
    def text(self) -> str:
        """The whole matched text."""
        return self.match.group(0)

    @property
    def child_templates(self) -> TemplateSet:
        return self.entry.children

    def group(self, index: int, replacer: Optional[ReplacementManager] = None) -> Optional[TextOperators]:
        """
        Get a capture group with generic type arguments removed.

        Args:
            index: Group number, 0 is the whole match
            replacer: Replacements used by the text operators

        Returns:
            Text operators over the group, None if the index is out of range
        """
        if 0 <= index <= (self.match.re.groups):
            text = self.match.group(index)
            text = _GENERIC_PART.sub("", text) if text is not None else ""
            return TextOperators(text, self.entry.kind, replacer)
        return None

    # shortcuts
    g = group

    @property
    def p(self) -> Optional['MatchingElement']:
        return self.parent

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"MatchingElement({self.entry.name!r}, {self.text!r})"


class TemplateResolver:
    """
    Resolves declarations to templates.

    Declarations must be resolved in document order, enclosing declarations
    before the declarations they contain. A resolver holds scope state of a
    single traversal and must not be shared between traversals.
    """

    def __init__(self, templates: TemplateSet):
        self.templates = templates
        self.cached_type_scope: Optional[MatchingElement] = None
        self.cached_method_scope: Optional[MatchingElement] = None

    def reset(self) -> None:
        """Drop the cached type and method scopes."""
        self.cached_type_scope = None
        self.cached_method_scope = None

    def resolve(self, declaration: Declaration) -> Optional[MatchingElement]:
        """
        Find the template matching a declaration.

        Args:
            declaration: The declaration to resolve

        Returns:
            MatchingElement of the first matching template, None if none matches

        Raises:
            PatternError: If a tried template has an invalid pattern
            InvalidKindError: If the declaration reports an unknown kind
        """
        kind = declaration.kind
        if not isinstance(kind, DeclarationKind):
            raise InvalidKindError(kind)

        self._refresh_scope(declaration, kind)

        scope = self._scope_for(kind)
        candidates = self._candidates(kind, scope)

        element = None
        for entry in candidates:
            text = declaration.signature if entry.use_signature else declaration.name
            match = entry.match(text)
            if match is not None:
                element = MatchingElement(declaration, entry, match, scope)
                logger.debug(f"{kind.value} '{declaration.name}' matched template '{entry.name}'")
                break
        else:
            logger.debug(f"No template for {kind.value} '{declaration.name}'")

        if kind is DeclarationKind.TYPE:
            self.cached_type_scope = element
        elif kind is DeclarationKind.METHOD:
            self.cached_method_scope = element

        return element

    def _refresh_scope(self, declaration: Declaration, kind: DeclarationKind) -> None:
        enclosing = declaration.enclosing

        if kind in TYPE_SCOPED_KINDS:
            if enclosing is None:
                self.cached_type_scope = None
            elif enclosing.kind is DeclarationKind.TYPE and not self._is_cached(self.cached_type_scope, enclosing):
                logger.debug(f"Refreshing type scope for '{declaration.name}'")
                self.resolve(enclosing)
                self.cached_method_scope = None

        elif kind in METHOD_SCOPED_KINDS:
            if enclosing is None:
                self.cached_method_scope = None
            elif enclosing.kind is DeclarationKind.METHOD and not self._is_cached(self.cached_method_scope, enclosing):
                logger.debug(f"Refreshing method scope for '{declaration.name}'")
                self.resolve(enclosing)

    @staticmethod
    def _is_cached(scope: Optional[MatchingElement], enclosing: Declaration) -> bool:
        return (
            scope is not None
            and scope.declaration is not None
            and scope.declaration.same_as(enclosing)
        )

    def _scope_for(self, kind: DeclarationKind) -> Optional[MatchingElement]:
        if kind in METHOD_SCOPED_KINDS:
            return self.cached_method_scope
        return self.cached_type_scope

    def _candidates(self, kind: DeclarationKind, scope: Optional[MatchingElement]) -> List[TemplateEntry]:
        global_templates = self.templates.rules(kind)
        if scope is None:
            return global_templates
        return scope.entry.children.rules(kind) + global_templates

    def match_example(
        self,
        entry: TemplateEntry,
        text: str,
        parent_text: Optional[str] = None
    ) -> Optional[MatchingElement]:
        """
        Match example text against a template without a declaration.

        Used to try out a template. The parent element is built from
        parent_text matched by the template's parent, if both exist.

        Returns:
            MatchingElement without declaration, None if text does not match
        """
        match = entry.match(text)
        if match is None:
            return None

        parent = None
        parent_entry = entry.parent
        if parent_text is not None and parent_entry is not None:
            parent_match = parent_entry.match(parent_text)
            if parent_match is not None:
                parent = MatchingElement(None, parent_entry, parent_match)

        return MatchingElement(None, entry, match, parent)


__all__ = ["MatchingElement", "TemplateResolver"]
