"""
Source elements: a concrete declaration tree for the template resolver.

A tree is usually built from a JSON description:

    {
      "kind": "type", "name": "UserService",
      "members": [
        {"kind": "method", "name": "saveUser", "signature": "void saveUser(User user)",
         "members": [{"kind": "parameter", "name": "user"}]}
      ]
    }

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from .templates.types import Declaration, DeclarationKind, TemplateFormatError

logger = logging.getLogger(__name__)


class SourceElement(Declaration):
    """A declaration with a kind, name, signature and nested members."""

    def __init__(
        self,
        kind: DeclarationKind,
        name: str,
        signature: Optional[str] = None,
        enclosing: Optional['SourceElement'] = None
    ):
        self._kind = DeclarationKind.parse(kind)
        self._name = name
        self._signature = signature
        self._enclosing = enclosing
        self.members: List['SourceElement'] = []
        if enclosing is not None:
            enclosing.members.append(self)

    @property
    def kind(self) -> DeclarationKind:
        return self._kind

    @property
    def name(self) -> str:
        return self._name

    @property
    def signature(self) -> str:
        """The signature, falling back to the name."""
        return self._signature if self._signature is not None else self._name

    @property
    def enclosing(self) -> Optional['SourceElement']:
        return self._enclosing

    def add(self, kind: DeclarationKind, name: str, signature: Optional[str] = None) -> 'SourceElement':
        """Create a member of this element."""
        return SourceElement(kind, name, signature, self)

    def walk(self) -> Iterator['SourceElement']:
        """Yield this element and all members in document order."""
        yield self
        for member in self.members:
            yield from member.walk()

    @property
    def depth(self) -> int:
        depth = 0
        current = self._enclosing
        while current is not None:
            depth += 1
            current = current.enclosing
        return depth

    def __repr__(self) -> str:
        return f"SourceElement({self._kind.value}, {self._name!r})"

    @classmethod
    def from_dict(cls, data: Dict[str, Any], enclosing: Optional['SourceElement'] = None) -> 'SourceElement':
        """Create an element tree from a dictionary."""
        if not isinstance(data, dict) or 'kind' not in data or 'name' not in data:
            raise TemplateFormatError(f"Declaration needs 'kind' and 'name': {data!r}")

        element = cls(
            kind=DeclarationKind.parse(data['kind']),
            name=str(data['name']),
            signature=data.get('signature'),
            enclosing=enclosing
        )
        for member in data.get('members', []):
            cls.from_dict(member, element)
        return element


def load_declarations(path: Path) -> List[SourceElement]:
    """
    Load declaration trees from a JSON file.

    The file holds either a single declaration or a list of top level
    declarations.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except Exception as e:
        logger.error(f"Failed to load declarations from {path}: {e}")
        raise

    roots = data if isinstance(data, list) else [data]
    elements = [SourceElement.from_dict(root) for root in roots]
    logger.debug(f"Loaded {len(elements)} top level declarations from {path}")
    return elements


def walk_all(roots: List[SourceElement]) -> Iterator[SourceElement]:
    """Yield all elements of several trees in document order."""
    for root in roots:
        yield from root.walk()


__all__ = ["SourceElement", "load_declarations", "walk_all"]
