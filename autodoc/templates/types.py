"""
Shared types for template resolution.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Optional

from ..errors import (
    InvalidKindError, PatternError, RenderError, TemplateError, TemplateFormatError
)


class DeclarationKind(Enum):
    """Kinds of documentable declarations. Rule sets are partitioned by kind."""
    TYPE = "type"
    FIELD = "field"
    METHOD = "method"
    PARAMETER = "parameter"
    EXCEPTION = "exception"

    @property
    def description(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: Any) -> 'DeclarationKind':
        """Convert a persisted or user supplied value to a kind."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise InvalidKindError(value)


# Kinds resolved in the scope of the enclosing type
TYPE_SCOPED_KINDS = (DeclarationKind.TYPE, DeclarationKind.FIELD, DeclarationKind.METHOD)
# Kinds resolved in the scope of the enclosing method
METHOD_SCOPED_KINDS = (DeclarationKind.PARAMETER, DeclarationKind.EXCEPTION)


class Declaration(ABC):
    """
    Facade of a source declaration as seen by the resolver.

    Implementations must return the identical object from ``enclosing``
    for the same underlying element, since scope caching compares
    enclosing declarations by identity.
    """

    @property
    @abstractmethod
    def kind(self) -> DeclarationKind:
        """The kind of this declaration."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The bare name of this declaration."""

    @property
    @abstractmethod
    def signature(self) -> str:
        """The rendered signature of this declaration."""

    @property
    @abstractmethod
    def enclosing(self) -> Optional['Declaration']:
        """The immediately enclosing declaration, if any."""

    def same_as(self, other: Optional['Declaration']) -> bool:
        """Identity comparison with another declaration."""
        return self is other


__all__ = [
    "DeclarationKind",
    "TYPE_SCOPED_KINDS",
    "METHOD_SCOPED_KINDS",
    "Declaration",
    "TemplateError",
    "PatternError",
    "InvalidKindError",
    "TemplateFormatError",
    "RenderError",
]
