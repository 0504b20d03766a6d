"""
Error types shared by the text and template packages.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import re
from typing import Any, Optional


class TemplateError(Exception):
    """Base class for template errors."""
    pass


class PatternError(TemplateError):
    """Raised when the regular expression of a template does not compile."""

    def __init__(self, entry_name: Optional[str], pattern: Optional[str], cause: re.error):
        super().__init__(f"Invalid pattern {pattern!r} in template '{entry_name}': {cause}")
        self.entry_name = entry_name
        self.pattern = pattern
        self.cause = cause


class InvalidKindError(TemplateError, ValueError):
    """Raised for a declaration kind outside of DeclarationKind."""

    def __init__(self, kind: Any):
        super().__init__(f"Invalid declaration kind: {kind!r}")
        self.kind = kind


class TemplateFormatError(TemplateError):
    """Raised when a persisted template or replacement file is malformed."""
    pass


class RenderError(TemplateError):
    """Raised when a template body cannot be rendered."""

    def __init__(self, message: str, line: int = -1, column: int = -1):
        if line >= 0:
            message = f"{message} (line {line + 1}, column {column + 1})"
        super().__init__(message)
        self.line = line
        self.column = column


__all__ = [
    "TemplateError",
    "PatternError",
    "InvalidKindError",
    "TemplateFormatError",
    "RenderError",
]
