"""
Template model: single templates and kind partitioned template sets.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import logging
import re
import weakref
from typing import Dict, Iterator, List, Optional

from .types import DeclarationKind, InvalidKindError, PatternError

logger = logging.getLogger(__name__)


class TemplateSet:
    """
    Templates partitioned by declaration kind.

    Each kind keeps its templates in insertion order, which is the order
    they are tried in. Templates are never deduplicated.
    """

    def __init__(self):
        self._templates: Dict[DeclarationKind, List['TemplateEntry']] = {
            kind: [] for kind in DeclarationKind
        }

    def rules(self, kind: DeclarationKind) -> List['TemplateEntry']:
        """Get the (live) list of templates for a kind."""
        if not isinstance(kind, DeclarationKind):
            raise InvalidKindError(kind)
        return self._templates[kind]

    def add(self, entry: 'TemplateEntry') -> None:
        """Append a template to the list of its kind."""
        self.rules(entry.kind).append(entry)

    def add_rule(self, kind: DeclarationKind, entry: 'TemplateEntry') -> None:
        """Append a template to the list of the given kind."""
        if entry.kind is not kind:
            raise InvalidKindError(f"{entry.kind} template added as {kind}")
        self.rules(kind).append(entry)

    def child_rules_of(self, entry: 'TemplateEntry', kind: DeclarationKind) -> List['TemplateEntry']:
        """Get the child templates of an entry for a kind."""
        return entry.children.rules(kind)

    @property
    def type_templates(self) -> List['TemplateEntry']:
        return self._templates[DeclarationKind.TYPE]

    @property
    def field_templates(self) -> List['TemplateEntry']:
        return self._templates[DeclarationKind.FIELD]

    @property
    def method_templates(self) -> List['TemplateEntry']:
        return self._templates[DeclarationKind.METHOD]

    @property
    def parameter_templates(self) -> List['TemplateEntry']:
        return self._templates[DeclarationKind.PARAMETER]

    @property
    def exception_templates(self) -> List['TemplateEntry']:
        return self._templates[DeclarationKind.EXCEPTION]

    def is_empty(self) -> bool:
        return all(not templates for templates in self._templates.values())

    def find(self, name: str) -> Optional['TemplateEntry']:
        """Find a template by name, searching children depth first."""
        for entry in self:
            if entry.name == name:
                return entry
            found = entry.children.find(name)
            if found is not None:
                return found
        return None

    def __iter__(self) -> Iterator['TemplateEntry']:
        """Iterate over top level templates: types, fields, methods, parameters, exceptions."""
        for kind in DeclarationKind:
            yield from self._templates[kind]

    def __len__(self) -> int:
        return sum(len(templates) for templates in self._templates.values())

    def __repr__(self) -> str:
        counts = ", ".join(f"{kind.value}={len(self._templates[kind])}" for kind in DeclarationKind)
        return f"TemplateSet({counts})"


class TemplateEntry:
    """
    A single template: a pattern tried against declaration names or
    signatures, the body rendered on a match and nested child templates
    that apply to declarations enclosed by a matching declaration.
    """

    def __init__(
        self,
        kind: DeclarationKind,
        name: str,
        pattern: str,
        body: str = "",
        use_signature: bool = False,
        is_default: bool = False,
        example: str = "",
        parent: Optional['TemplateEntry'] = None
    ):
        if not isinstance(kind, DeclarationKind):
            raise InvalidKindError(kind)
        self.kind = kind
        self.name = name
        self.body = body
        self.use_signature = use_signature
        self.is_default = is_default
        self.example = example
        self.children = TemplateSet()
        self._pattern = pattern
        self._compiled: Optional[re.Pattern] = None
        self._parent: Optional[weakref.ReferenceType] = None
        self.parent = parent

    @property
    def pattern(self) -> str:
        """The regular expression source."""
        return self._pattern

    @pattern.setter
    def pattern(self, pattern: str) -> None:
        self._pattern = pattern
        self._compiled = None

    @property
    def compiled(self) -> re.Pattern:
        """
        The compiled pattern, compiled on first use.

        Raises:
            PatternError: If the pattern does not compile
        """
        if self._compiled is None:
            try:
                self._compiled = re.compile(self._pattern)
            except (re.error, TypeError) as e:
                cause = e if isinstance(e, re.error) else re.error(str(e))
                raise PatternError(self.name, self._pattern, cause) from e
            logger.debug(f"Compiled pattern {self._pattern!r} of template '{self.name}'")
        return self._compiled

    @property
    def parent(self) -> Optional['TemplateEntry']:
        """The enclosing template of a child template (not owned)."""
        return self._parent() if self._parent is not None else None

    @parent.setter
    def parent(self, parent: Optional['TemplateEntry']) -> None:
        self._parent = weakref.ref(parent) if parent is not None else None

    @property
    def description(self) -> str:
        return self.kind.description

    def add_child(self, entry: 'TemplateEntry') -> 'TemplateEntry':
        """Add a child template and make this entry its parent."""
        entry.parent = self
        self.children.add(entry)
        return entry

    def child_templates(self, kind: DeclarationKind) -> List['TemplateEntry']:
        return self.children.rules(kind)

    def match(self, text: str) -> Optional[re.Match]:
        """Match the whole text against the pattern."""
        return self.compiled.fullmatch(text)

    def __repr__(self) -> str:
        return f"TemplateEntry({self.kind.value}, {self.name!r}, {self._pattern!r})"


__all__ = ["TemplateEntry", "TemplateSet"]
