"""
Tests for template resolution.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import pytest

from autodoc.elements import SourceElement
from autodoc.templates.model import TemplateEntry, TemplateSet
from autodoc.templates.resolver import MatchingElement, TemplateResolver
from autodoc.templates.types import DeclarationKind, InvalidKindError, PatternError

TYPE = DeclarationKind.TYPE
FIELD = DeclarationKind.FIELD
METHOD = DeclarationKind.METHOD
PARAMETER = DeclarationKind.PARAMETER
EXCEPTION = DeclarationKind.EXCEPTION


@pytest.fixture
def templates() -> TemplateSet:
    templates = TemplateSet()
    service = TemplateEntry(TYPE, "service", r"\w+Service")
    save = service.add_child(TemplateEntry(METHOD, "service.save", r"save(\w+)"))
    save.add_child(TemplateEntry(PARAMETER, "service.save.param", r"\w+"))
    templates.add(service)
    templates.add(TemplateEntry(TYPE, "type.any", r"\w+"))
    templates.add(TemplateEntry(FIELD, "field.any", r"\w+"))
    templates.add(TemplateEntry(METHOD, "method.any", r"\w+"))
    templates.add(TemplateEntry(PARAMETER, "parameter.any", r"\w+"))
    return templates


class UnknownKindElement(SourceElement):
    """Declaration reporting a kind outside of DeclarationKind."""

    @property
    def kind(self):
        return "package"


class TestMatching:
    """Test matching against global templates."""

    def test_first_match_wins(self):
        templates = TemplateSet()
        templates.add(TemplateEntry(METHOD, "first", r"get\w+"))
        templates.add(TemplateEntry(METHOD, "second", r"\w+"))
        resolver = TemplateResolver(templates)

        assert resolver.resolve(SourceElement(METHOD, "getName")).rule.name == "first"
        assert resolver.resolve(SourceElement(METHOD, "run")).rule.name == "second"

    def test_full_match(self):
        templates = TemplateSet()
        templates.add(TemplateEntry(METHOD, "foo", "foo"))
        resolver = TemplateResolver(templates)

        assert resolver.resolve(SourceElement(METHOD, "foo")) is not None
        assert resolver.resolve(SourceElement(METHOD, "foobar")) is None

    def test_no_templates(self):
        resolver = TemplateResolver(TemplateSet())
        assert resolver.resolve(SourceElement(EXCEPTION, "IOException")) is None

    def test_signature_matching(self):
        templates = TemplateSet()
        templates.add(TemplateEntry(METHOD, "void", r"void (\w+)\(\)", use_signature=True))
        resolver = TemplateResolver(templates)

        element = resolver.resolve(SourceElement(METHOD, "run", "void run()"))
        assert element.rule.name == "void"
        assert str(element.group(1)) == "run"
        assert resolver.resolve(SourceElement(METHOD, "size", "int size()")) is None

    def test_groups_strip_generics(self):
        templates = TemplateSet()
        templates.add(TemplateEntry(FIELD, "typed", r"([\w<>, ]+) (\w+)", use_signature=True))
        resolver = TemplateResolver(templates)

        element = resolver.resolve(SourceElement(FIELD, "items", "List<String> items"))
        assert str(element.group(1)) == "List"
        assert str(element.g(2)) == "items"
        assert element.text == "List<String> items"
        assert element.group(3) is None

    def test_pattern_error_propagates(self):
        templates = TemplateSet()
        templates.add(TemplateEntry(METHOD, "broken", r"(\w+"))
        resolver = TemplateResolver(templates)

        with pytest.raises(PatternError):
            resolver.resolve(SourceElement(METHOD, "run"))

    def test_invalid_kind(self, templates):
        resolver = TemplateResolver(templates)
        with pytest.raises(InvalidKindError):
            resolver.resolve(UnknownKindElement(TYPE, "x"))


class TestScopes:
    """Test resolution in the scope of enclosing declarations."""

    def test_nested_template_takes_precedence(self, templates):
        user_service = SourceElement(TYPE, "UserService")
        save_user = user_service.add(METHOD, "saveUser")
        resolver = TemplateResolver(templates)

        type_element = resolver.resolve(user_service)
        element = resolver.resolve(save_user)

        assert type_element.rule.name == "service"
        assert element.rule.name == "service.save"
        assert element.parent is type_element
        assert element.parent.declaration is user_service
        assert str(element.g(1)) == "User"

    def test_enclosing_resolved_on_demand(self, templates):
        """Members can be resolved without resolving the enclosing type first."""
        user_service = SourceElement(TYPE, "UserService")
        save_user = user_service.add(METHOD, "saveUser")
        resolver = TemplateResolver(templates)

        element = resolver.resolve(save_user)
        assert element.rule.name == "service.save"
        assert element.p.rule.name == "service"
        assert resolver.cached_type_scope is element.parent

    def test_other_type_uses_global_templates(self, templates):
        helper = SourceElement(TYPE, "Helper")
        save_user = helper.add(METHOD, "saveUser")
        resolver = TemplateResolver(templates)

        element = resolver.resolve(save_user)
        assert element.rule.name == "method.any"
        assert element.parent.rule.name == "type.any"

    def test_parameter_in_method_scope(self, templates):
        user_service = SourceElement(TYPE, "UserService")
        save_user = user_service.add(METHOD, "saveUser", "void saveUser(User user)")
        user = save_user.add(PARAMETER, "user")
        resolver = TemplateResolver(templates)

        element = resolver.resolve(user)
        assert element.rule.name == "service.save.param"
        assert element.parent.declaration is save_user
        assert element.parent.parent.declaration is user_service

    def test_unmatched_enclosing_type(self):
        """Members of a type without template fall back to global templates."""
        templates = TemplateSet()
        service = TemplateEntry(TYPE, "service", r"\w+Service")
        service.add_child(TemplateEntry(METHOD, "service.any", r"\w+"))
        templates.add(service)
        templates.add(TemplateEntry(METHOD, "method.any", r"\w+"))
        resolver = TemplateResolver(templates)

        helper = SourceElement(TYPE, "Helper")
        run = helper.add(METHOD, "run")

        assert resolver.resolve(helper) is None
        element = resolver.resolve(run)
        assert element.rule.name == "method.any"
        assert element.parent is None

    def test_top_level_declaration_clears_scope(self, templates):
        user_service = SourceElement(TYPE, "UserService")
        resolver = TemplateResolver(templates)
        resolver.resolve(user_service)

        element = resolver.resolve(SourceElement(METHOD, "saveUser"))
        assert element.rule.name == "method.any"
        assert element.parent is None
        assert resolver.cached_type_scope is None

    def test_top_level_parameter_clears_method_scope(self, templates):
        user_service = SourceElement(TYPE, "UserService")
        save_user = user_service.add(METHOD, "saveUser")
        resolver = TemplateResolver(templates)
        resolver.resolve(save_user)
        assert resolver.cached_method_scope is not None

        element = resolver.resolve(SourceElement(PARAMETER, "user"))
        assert element.rule.name == "parameter.any"
        assert resolver.cached_method_scope is None

    def test_switching_types(self, templates):
        """Changing the enclosing type refreshes both cached scopes."""
        user_service = SourceElement(TYPE, "UserService")
        user_service.add(METHOD, "saveUser").add(PARAMETER, "user")
        helper = SourceElement(TYPE, "Helper")
        save_order = helper.add(METHOD, "saveOrder")
        order = save_order.add(PARAMETER, "order")
        resolver = TemplateResolver(templates)

        for declaration in user_service.walk():
            resolver.resolve(declaration)

        element = resolver.resolve(order)
        assert element.rule.name == "parameter.any"
        assert element.parent.declaration is save_order
        assert element.parent.rule.name == "method.any"
        assert resolver.cached_type_scope.declaration is helper

    def test_method_scope_survives_type_level_field(self, templates):
        """Returning to a field of the same type keeps the cached method scope."""
        user_service = SourceElement(TYPE, "UserService")
        save_user = user_service.add(METHOD, "saveUser")
        user = save_user.add(PARAMETER, "user")
        name = user_service.add(FIELD, "name")
        resolver = TemplateResolver(templates)

        resolver.resolve(user_service)
        method_element = resolver.resolve(save_user)
        resolver.resolve(name)

        assert resolver.cached_method_scope is method_element
        element = resolver.resolve(user)
        assert element.rule.name == "service.save.param"
        assert element.parent is method_element

    def test_type_refresh_clears_method_scope(self, templates):
        """Resolving a member of another type drops the cached method scope."""
        user_service = SourceElement(TYPE, "UserService")
        save_user = user_service.add(METHOD, "saveUser")
        other = SourceElement(TYPE, "Other")
        count = other.add(FIELD, "count")
        resolver = TemplateResolver(templates)

        resolver.resolve(save_user)
        assert resolver.cached_method_scope is not None

        resolver.resolve(count)
        assert resolver.cached_method_scope is None
        assert resolver.cached_type_scope.declaration is other

    def test_document_order_traversal(self, templates):
        user_service = SourceElement(TYPE, "UserService")
        user_service.add(FIELD, "name")
        save_user = user_service.add(METHOD, "saveUser")
        save_user.add(PARAMETER, "user")
        user_service.add(METHOD, "getName")
        resolver = TemplateResolver(templates)

        names = [resolver.resolve(d).rule.name for d in user_service.walk()]
        assert names == ["service", "field.any", "service.save", "service.save.param", "method.any"]

    def test_idempotent_across_resolvers(self, templates):
        user_service = SourceElement(TYPE, "UserService")
        user = user_service.add(METHOD, "saveUser").add(PARAMETER, "user")

        first = TemplateResolver(templates).resolve(user)
        second = TemplateResolver(templates).resolve(user)
        assert first.rule is second.rule
        assert first.text == second.text

    def test_reset(self, templates):
        user_service = SourceElement(TYPE, "UserService")
        resolver = TemplateResolver(templates)
        resolver.resolve(user_service.add(METHOD, "saveUser"))
        resolver.reset()
        assert resolver.cached_type_scope is None
        assert resolver.cached_method_scope is None


class TestMatchExample:
    """Test matching example text."""

    def test_match_example(self, templates):
        resolver = TemplateResolver(templates)
        save = templates.find("service.save")

        element = resolver.match_example(save, "saveOrder", "OrderService")
        assert isinstance(element, MatchingElement)
        assert element.declaration is None
        assert str(element.g(1)) == "Order"
        assert element.parent.text == "OrderService"

    def test_match_example_without_match(self, templates):
        resolver = TemplateResolver(templates)
        save = templates.find("service.save")

        assert resolver.match_example(save, "loadOrder") is None
        element = resolver.match_example(save, "saveOrder", "Helper")
        assert element.parent is None
