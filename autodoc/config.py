"""
Configuration management for autodoc.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, field
from enum import Enum

from .templates.defaults import default_replacements, default_templates
from .templates.model import TemplateSet
from .templates.serializer import load_templates
from .text.replacements import Replacement, ReplacementManager, load_replacements

logger = logging.getLogger(__name__)


class LogLevel(Enum):
    """Log levels supported by autodoc."""
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"


@dataclass
class InitializationOptions:
    """Options read from the config file."""
    templates_file: Optional[Path] = None
    replacements_file: Optional[Path] = None
    properties: Dict[str, str] = field(default_factory=dict)
    log_level: LogLevel = LogLevel.INFO

    @classmethod
    def from_dict(cls, data: Dict[str, Any], base_dir: Optional[Path] = None) -> 'InitializationOptions':
        """Create InitializationOptions from dictionary."""
        log_level = LogLevel.INFO
        if 'log_level' in data:
            try:
                log_level = LogLevel(data['log_level'])
            except ValueError:
                logger.warning(f"Invalid log level: {data['log_level']}")

        def _path(key: str) -> Optional[Path]:
            if not data.get(key):
                return None
            path = Path(data[key])
            if base_dir is not None and not path.is_absolute():
                path = base_dir / path
            return path

        return cls(
            templates_file=_path('templates'),
            replacements_file=_path('replacements'),
            properties={str(k): str(v) for k, v in data.get('properties', {}).items()},
            log_level=log_level
        )


class Config:
    """Main configuration class for autodoc."""

    def __init__(self):
        self._initialization_options: Optional[InitializationOptions] = None
        self._config_file: Optional[Path] = None
        self._extra_replacements: List[Replacement] = []

    @property
    def config_file(self) -> Optional[Path]:
        """Get the loaded config file."""
        return self._config_file

    @property
    def initialization_options(self) -> Optional[InitializationOptions]:
        """Get initialization options."""
        return self._initialization_options

    def set_initialization_options(self, options: Dict[str, Any], base_dir: Optional[Path] = None) -> None:
        """Set initialization options from a config dictionary."""
        self._initialization_options = InitializationOptions.from_dict(options, base_dir)
        logger.info(f"Initialization options set: {self._initialization_options}")

        # Apply log level
        log_level_map = {
            LogLevel.ERROR: logging.ERROR,
            LogLevel.WARN: logging.WARNING,
            LogLevel.INFO: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.TRACE: logging.DEBUG  # Python doesn't have TRACE, use DEBUG
        }
        logging.getLogger().setLevel(log_level_map[self._initialization_options.log_level])

    def load_config(self, path: Path) -> None:
        """
        Load configuration from a JSON file.

        The format is:
        {
          "templates": "<template file, relative to the config file>",
          "replacements": "<replacement file, relative to the config file>",
          "properties": {"<name>": "<value usable as ${p.name}>"},
          "log_level": "info"
        }

        Args:
            path: Path to the config JSON file
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)

            self._config_file = Path(path).resolve()
            self.set_initialization_options(data, self._config_file.parent)
            logger.info(f"Loaded config from {path}")

        except Exception as e:
            logger.error(f"Failed to load config from {path}: {e}")
            raise

    @property
    def properties(self) -> Dict[str, str]:
        """Get template properties."""
        if self._initialization_options:
            return dict(self._initialization_options.properties)
        return {}

    def set_property(self, name: str, value: str) -> None:
        """Set a template property."""
        if self._initialization_options is None:
            self._initialization_options = InitializationOptions()
        self._initialization_options.properties[name] = value
        logger.debug(f"Set property {name}={value!r}")

    def add_replacement(self, replacement: Replacement) -> None:
        """Add a replacement on top of the configured ones."""
        self._extra_replacements.append(replacement)
        logger.debug(f"Added replacement: {replacement}")

    def load_templates(self) -> TemplateSet:
        """Load the configured template set, or the built-in one."""
        options = self._initialization_options
        if options and options.templates_file:
            return load_templates(options.templates_file)
        logger.debug("Using built-in templates")
        return default_templates()

    def load_replacements(self) -> ReplacementManager:
        """Load the configured replacements, or the built-in ones."""
        options = self._initialization_options
        if options and options.replacements_file:
            replacements = load_replacements(options.replacements_file)
        else:
            logger.debug("Using built-in replacements")
            replacements = default_replacements()
        return ReplacementManager(replacements + self._extra_replacements)

    def clear(self) -> None:
        """Clear all configuration."""
        self._initialization_options = None
        self._config_file = None
        self._extra_replacements.clear()
        logger.debug("Configuration cleared")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary for serialization."""
        options = self._initialization_options
        return {
            'config_file': str(self._config_file) if self._config_file else None,
            'templates': str(options.templates_file) if options and options.templates_file else None,
            'replacements': str(options.replacements_file) if options and options.replacements_file else None,
            'properties': self.properties,
            'extra_replacements': [r.to_dict() for r in self._extra_replacements],
            'log_level': options.log_level.value if options else LogLevel.INFO.value,
        }
