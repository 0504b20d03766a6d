"""
Command line operations for autodoc.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import logging
from pathlib import Path
from typing import List, Optional

from . import internal_error
from .config import Config
from .elements import load_declarations, walk_all
from .templates.model import TemplateEntry, TemplateSet
from .templates.rendering import TemplateRenderer, replacement_scope_for
from .templates.resolver import TemplateResolver
from .templates.types import DeclarationKind, TemplateError
from .text.comment import CaseMode, create_comment
from .text.splitter import split


logger = logging.getLogger(__name__)


def run_split(identifier: str, replace: bool = False, kind: Optional[str] = None,
              config: Optional[Config] = None) -> int:
    """
    Split an identifier and print one word per line.

    Args:
        identifier: The identifier to split
        replace: Whether to apply replacements to the words
        kind: Declaration kind selecting the replacement scope
        config: Optional configuration to use

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        words = split(identifier)
        if replace:
            config = config or Config()
            scope = replacement_scope_for(DeclarationKind.parse(kind or "method"))
            if scope is None:
                logger.warning(f"No replacements apply to {kind} declarations")
            else:
                words = config.load_replacements().apply(words, scope)

        for word in words:
            print(word)
        return 0

    except Exception as e:
        logger.error(f"Failed to split {identifier!r}: {e}")
        return 1


def run_comment(identifier: str, kind: str, split_words: bool = True, replace: bool = True,
                mode: CaseMode = CaseMode.NONE, config: Optional[Config] = None) -> int:
    """
    Print the comment text synthesized from an identifier.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        config = config or Config()
        text = create_comment(
            identifier,
            split_words=split_words,
            replace=replace,
            replacer=config.load_replacements() if replace else None,
            scope=replacement_scope_for(DeclarationKind.parse(kind)),
            mode=mode
        )
        print(text)
        return 0

    except Exception as e:
        logger.error(f"Failed to create comment for {identifier!r}: {e}")
        return 1


def run_resolve(declarations_path: Path, render: bool = False, config: Optional[Config] = None) -> int:
    """
    Resolve every declaration of a declaration file in document order.

    Prints one line per declaration with the name of the matching template,
    or '-' if no template matches. With render set, the rendered template
    body is printed below each matched declaration.

    Args:
        declarations_path: JSON file with declaration trees
        render: Whether to print rendered template bodies
        config: Optional configuration to use

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    logger.debug(f"Resolving declarations of {declarations_path}")

    try:
        config = config or Config()
        templates = config.load_templates()
        resolver = TemplateResolver(templates)
        renderer = TemplateRenderer(config.load_replacements(), config.properties) if render else None

        roots = load_declarations(declarations_path)
        unmatched = 0
        for declaration in walk_all(roots):
            element = resolver.resolve(declaration)
            indent = "  " * declaration.depth
            if element is None:
                unmatched += 1
                print(f"{indent}{declaration.kind.value} {declaration.name}: -")
                continue

            print(f"{indent}{declaration.kind.value} {declaration.name}: {element.rule.name}")
            if renderer is not None:
                for line in renderer.render(element).splitlines():
                    print(f"{indent}  {line}")

        logger.info(f"Resolved declarations of {declarations_path}, {unmatched} without template")
        return 0

    except TemplateError as e:
        logger.error(f"Template error: {e}")
        return 1
    except Exception as e:
        internal_error("Resolving failed: {}", e)
        logger.debug("Resolving traceback", exc_info=True)
        return 1


def _print_entries(entries: List[TemplateEntry], depth: int) -> None:
    for entry in entries:
        marker = " [signature]" if entry.use_signature else ""
        print(f"{'  ' * depth}{entry.kind.value} {entry.name}: {entry.pattern}{marker}")
        _print_entries(list(entry.children), depth + 1)


def list_templates(templates: TemplateSet) -> None:
    """Print a template set, nested templates indented below their parent."""
    _print_entries(list(templates), 0)


def run_templates(config: Optional[Config] = None, validate: bool = False) -> int:
    """
    List the configured templates.

    With validate set, every pattern is compiled and every body is checked,
    and the exit code reports whether all templates are valid.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        config = config or Config()
        templates = config.load_templates()
        list_templates(templates)

        if not validate:
            return 0

        renderer = TemplateRenderer(properties=config.properties)
        invalid = 0
        validated = 0
        pending = list(templates)
        while pending:
            entry = pending.pop(0)
            pending.extend(entry.children)
            validated += 1
            try:
                entry.compiled
                renderer.validate(entry.body)
            except TemplateError as e:
                print(f"{entry.name}: error: {e}")
                invalid += 1

        if invalid:
            print(f"\nSummary: {invalid} invalid templates")
            return 1
        print(f"\nAll {validated} templates are valid")
        return 0

    except Exception as e:
        internal_error("Failed to list templates: {}", e)
        return 1


__all__ = [
    "run_split",
    "run_comment",
    "run_resolve",
    "run_templates",
    "list_templates",
]
