"""
Loading and storing template sets as JSON.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .model import TemplateEntry, TemplateSet
from .types import DeclarationKind, InvalidKindError, TemplateFormatError

logger = logging.getLogger(__name__)


def entry_from_dict(data: Dict[str, Any], parent: Optional[TemplateEntry] = None) -> TemplateEntry:
    """Create a TemplateEntry (and its children) from a dictionary."""
    if not isinstance(data, dict):
        raise TemplateFormatError(f"Template must be an object, got {type(data).__name__}")

    missing = [key for key in ('kind', 'name', 'regex') if key not in data]
    if missing:
        raise TemplateFormatError(f"Template {data.get('name', '?')!r} is missing {', '.join(missing)}")

    try:
        kind = DeclarationKind.parse(data['kind'])
    except InvalidKindError as e:
        raise TemplateFormatError(f"Template {data['name']!r}: {e}") from e

    entry = TemplateEntry(
        kind=kind,
        name=str(data['name']),
        pattern=str(data['regex']),
        body=str(data.get('text', '')),
        use_signature=bool(data.get('signature', False)),
        is_default=bool(data.get('default', False)),
        example=str(data.get('example', '')),
        parent=parent
    )
    for child in data.get('children', []):
        entry.add_child(entry_from_dict(child, entry))
    return entry


def entry_to_dict(entry: TemplateEntry) -> Dict[str, Any]:
    """Convert a TemplateEntry (and its children) to a dictionary."""
    data: Dict[str, Any] = {
        'kind': entry.kind.value,
        'name': entry.name,
        'signature': entry.use_signature,
        'default': entry.is_default,
        'regex': entry.pattern,
        'example': entry.example,
        'text': entry.body,
    }
    if not entry.children.is_empty():
        data['children'] = [entry_to_dict(child) for child in entry.children]
    return data


def templates_from_list(entries: List[Dict[str, Any]]) -> TemplateSet:
    templates = TemplateSet()
    for data in entries:
        templates.add(entry_from_dict(data))
    return templates


def loads_templates(text: str) -> TemplateSet:
    """Parse a template set from a JSON string."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TemplateFormatError(f"Invalid template JSON: {e}") from e

    entries = data.get('templates') if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise TemplateFormatError("Template file must contain a 'templates' list")
    return templates_from_list(entries)


def dumps_templates(templates: TemplateSet, indent: Optional[int] = 2) -> str:
    """Serialize a template set to a JSON string."""
    return json.dumps(
        {'templates': [entry_to_dict(entry) for entry in templates]},
        indent=indent,
        ensure_ascii=False
    )


def load_templates(path: Path) -> TemplateSet:
    """
    Load a template set from a JSON file.

    The format is:
    {
      "templates": [
        {
          "kind": "type|field|method|parameter|exception",
          "name": "<unique template name>",
          "regex": "<pattern matched against the whole name or signature>",
          "signature": false,
          "default": false,
          "example": "<sample text>",
          "text": "<template body>",
          "children": [<templates of the same shape>]
        }
      ]
    }

    Args:
        path: Path to the template JSON file
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            templates = loads_templates(f.read())
        logger.info(f"Loaded {len(templates)} templates from {path}")
        return templates
    except Exception as e:
        logger.error(f"Failed to load templates from {path}: {e}")
        raise


def store_templates(templates: TemplateSet, path: Path) -> None:
    """Store a template set to a JSON file."""
    try:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(dumps_templates(templates))
        logger.info(f"Stored {len(templates)} templates to {path}")
    except Exception as e:
        logger.error(f"Failed to store templates to {path}: {e}")
        raise


__all__ = [
    "entry_from_dict",
    "entry_to_dict",
    "templates_from_list",
    "loads_templates",
    "dumps_templates",
    "load_templates",
    "store_templates",
]
