"""
Built-in templates and replacements used when no files are configured.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from typing import Any, Dict, List

from ..text.replacements import Replacement, ReplacementMode, ReplacementScope
from .model import TemplateSet
from .serializer import templates_from_list

DEFAULT_TEMPLATES: List[Dict[str, Any]] = [
    {
        'kind': 'type', 'name': 'type.exception', 'regex': r"\w+Exception",
        'default': True, 'example': "NoSuchElementException",
        'text': "The Class ${e.g(0)}.",
    },
    {
        'kind': 'type', 'name': 'type.default', 'regex': r"\w+",
        'default': True, 'example': "UserService",
        'text': "The Class ${e.g(0).sfu}.",
    },
    {
        'kind': 'field', 'name': 'field.constant', 'regex': r"[0-9A-Z_]+",
        'default': True, 'example': "MAX_VALUE",
        'text': "The Constant ${e.g(0).rsfu}.",
    },
    {
        'kind': 'field', 'name': 'field.default', 'regex': r"\w+",
        'default': True, 'example': "userName",
        'text': "The ${e.g(0).rs}.",
    },
    {
        'kind': 'method', 'name': 'method.getter', 'regex': r"get(\w+)",
        'default': True, 'example': "getUserName",
        'text': "Gets the ${e.g(1).rsfl}.",
    },
    {
        'kind': 'method', 'name': 'method.setter', 'regex': r"set(\w+)",
        'default': True, 'example': "setUserName",
        'text': "Sets the ${e.g(1).rsfl}.",
    },
    {
        'kind': 'method', 'name': 'method.predicate', 'regex': r"(?:is|has)(\w+)",
        'default': True, 'example': "isEnabled",
        'text': "Checks if ${e.g(1).rsfl}.",
    },
    {
        'kind': 'method', 'name': 'method.default', 'regex': r"\w+",
        'default': True, 'example': "saveUser",
        'text': "${e.g(0).rsfu}.",
    },
    {
        'kind': 'parameter', 'name': 'parameter.default', 'regex': r"\w+",
        'default': True, 'example': "userName",
        'text': "the ${e.g(0).rs}",
    },
    {
        'kind': 'exception', 'name': 'exception.default', 'regex': r"\w+",
        'default': True, 'example': "IOException",
        'text': "the ${e.g(0).s}",
    },
]

DEFAULT_REPLACEMENTS: List[Replacement] = [
    Replacement("get", "Gets the"),
    Replacement("set", "Sets the"),
    Replacement("is", "Checks if is"),
    Replacement("has", "Checks for"),
    Replacement("add", "Adds the"),
    Replacement("remove", "Removes the"),
    Replacement("create", "Creates the"),
    Replacement("init", "Inits the"),
    Replacement("update", "Updates the"),
    Replacement("delete", "Deletes the"),
    Replacement("find", "Find"),
    Replacement("to", "To"),
    Replacement("m", "", ReplacementScope.FIELD),
    Replacement("id", "identifier", ReplacementScope.BOTH, ReplacementMode.ALL),
]


def default_templates() -> TemplateSet:
    """Build a fresh copy of the built-in template set."""
    return templates_from_list(DEFAULT_TEMPLATES)


def default_replacements() -> List[Replacement]:
    return [
        Replacement(r.shortcut, r.replacement, r.scope, r.mode)
        for r in DEFAULT_REPLACEMENTS
    ]


__all__ = [
    "DEFAULT_TEMPLATES",
    "DEFAULT_REPLACEMENTS",
    "default_templates",
    "default_replacements",
]
