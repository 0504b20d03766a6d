"""
Template model, resolution, persistence and rendering.

Usage:
    from autodoc.templates import TemplateResolver, load_templates

    resolver = TemplateResolver(load_templates(path))
    for declaration in declarations:  # document order
        element = resolver.resolve(declaration)

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from .types import (
    Declaration, DeclarationKind, TemplateError, PatternError,
    InvalidKindError, TemplateFormatError, RenderError
)
from .model import TemplateEntry, TemplateSet
from .rendering import TemplateRenderer, TextOperators, replacement_scope_for
from .resolver import MatchingElement, TemplateResolver
from .serializer import load_templates, loads_templates, store_templates, dumps_templates
from .defaults import default_templates, default_replacements

__all__ = [
    "Declaration",
    "DeclarationKind",
    "TemplateError",
    "PatternError",
    "InvalidKindError",
    "TemplateFormatError",
    "RenderError",
    "TemplateEntry",
    "TemplateSet",
    "TemplateRenderer",
    "TextOperators",
    "replacement_scope_for",
    "MatchingElement",
    "TemplateResolver",
    "load_templates",
    "loads_templates",
    "store_templates",
    "dumps_templates",
    "default_templates",
    "default_replacements",
]
