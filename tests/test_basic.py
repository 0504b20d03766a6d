"""
Basic tests for autodoc.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import json
import logging

import pytest

from autodoc import version, internal_error
from autodoc.config import Config, InitializationOptions, LogLevel
from autodoc.text.replacements import Replacement, ReplacementScope, store_replacements
from autodoc.templates.serializer import store_templates
from autodoc.templates.model import TemplateEntry, TemplateSet
from autodoc.templates.types import DeclarationKind


@pytest.fixture
def restore_log_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


class TestBasicFunctionality:
    """Test basic functionality of autodoc."""

    def test_version(self):
        """Test version information."""
        ver = version()
        assert ver == "0.4.2"
        assert isinstance(ver, str)

    def test_internal_error(self, caplog):
        """Test internal error logging."""
        internal_error("Test error message")
        assert "Internal Error: Test error message" in caplog.text

    def test_internal_error_with_args(self, caplog):
        """Test internal error logging with format arguments."""
        internal_error("Bad template {}", "method.getter")
        assert "Internal Error: Bad template method.getter" in caplog.text

    def test_config_creation(self):
        """Test configuration creation."""
        config = Config()
        assert config.config_file is None
        assert config.initialization_options is None
        assert config.properties == {}


class TestInitializationOptions:
    """Test initialization options parsing."""

    def test_defaults(self):
        options = InitializationOptions.from_dict({})
        assert options.templates_file is None
        assert options.replacements_file is None
        assert options.properties == {}
        assert options.log_level == LogLevel.INFO

    def test_invalid_log_level(self, caplog):
        """Invalid log levels are reported and ignored."""
        options = InitializationOptions.from_dict({'log_level': 'chatty'})
        assert options.log_level == LogLevel.INFO
        assert "Invalid log level: chatty" in caplog.text

    def test_relative_paths(self, tmp_path):
        """Relative paths resolve against the base directory."""
        options = InitializationOptions.from_dict(
            {'templates': 'templates.json', 'replacements': str(tmp_path / 'abs.json')},
            base_dir=tmp_path / 'conf'
        )
        assert options.templates_file == tmp_path / 'conf' / 'templates.json'
        assert options.replacements_file == tmp_path / 'abs.json'


class TestConfig:
    """Test configuration loading."""

    def test_builtin_templates_and_replacements(self):
        config = Config()
        templates = config.load_templates()
        assert templates.find("method.getter") is not None

        replacer = config.load_replacements()
        assert replacer.lookup("get", ReplacementScope.METHOD).replacement == "Gets the"

    def test_load_config(self, tmp_path, restore_log_level):
        """Test loading templates, replacements and properties from a config file."""
        templates = TemplateSet()
        templates.add(TemplateEntry(DeclarationKind.FIELD, "field.any", r"\w+", "The ${e.g(0)}."))
        store_templates(templates, tmp_path / "templates.json")
        store_replacements([Replacement("m", "", ReplacementScope.FIELD)], tmp_path / "replacements.json")

        config_path = tmp_path / "autodoc.json"
        config_path.write_text(json.dumps({
            'templates': 'templates.json',
            'replacements': 'replacements.json',
            'properties': {'author': 'Jane'},
            'log_level': 'debug'
        }), encoding='utf-8')

        config = Config()
        config.load_config(config_path)

        assert config.config_file == config_path.resolve()
        assert config.properties == {'author': 'Jane'}
        assert logging.getLogger().level == logging.DEBUG

        loaded = config.load_templates()
        assert [entry.name for entry in loaded] == ["field.any"]

        replacer = config.load_replacements()
        assert len(replacer) == 1
        assert replacer.lookup("get", ReplacementScope.METHOD) is None

    def test_load_missing_config(self, tmp_path, caplog):
        """Test that a missing config file is logged and raised."""
        config = Config()
        with pytest.raises(FileNotFoundError):
            config.load_config(tmp_path / "missing.json")
        assert "Failed to load config" in caplog.text

    def test_properties_and_extra_replacements(self):
        config = Config()
        config.set_property("author", "Jane")
        config.add_replacement(Replacement("calc", "Calculates the"))

        assert config.properties == {"author": "Jane"}
        replacer = config.load_replacements()
        assert replacer.lookup("CALC", ReplacementScope.METHOD).replacement == "Calculates the"
        # built-in replacements are still present
        assert replacer.lookup("get", ReplacementScope.METHOD) is not None

    def test_to_dict_and_clear(self):
        config = Config()
        config.set_property("author", "Jane")
        data = config.to_dict()
        assert data['properties'] == {"author": "Jane"}
        assert data['templates'] is None
        assert data['log_level'] == "info"

        config.clear()
        assert config.initialization_options is None
        assert config.properties == {}
