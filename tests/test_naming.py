"""
Tests for partial_templates.naming
==================================

Script tag ids are looked up by client-side code, so these cases pin the
exact conversion, including the letter-by-letter handling of acronyms.
"""

import pytest

from partial_templates.naming import id_from_partial_view_name, id_prefix, template_id


class TestIdFromPartialViewName:
    """Tests for the camelCase to kebab-case conversion."""

    def test_pascal_case(self) -> None:
        """Test the canonical example."""
        assert id_from_partial_view_name("MyFirstTemplate") == "my-first-template"

    def test_single_word(self) -> None:
        """Test that a leading capital gets no hyphen."""
        assert id_from_partial_view_name("Template") == "template"

    def test_camel_case(self) -> None:
        """Test a name starting with a lowercase letter."""
        assert id_from_partial_view_name("myFirstTemplate") == "my-first-template"

    def test_acronym_letters_each_hyphenated(self) -> None:
        """Test that consecutive capitals each get a hyphen."""
        assert id_from_partial_view_name("HTMLPage") == "h-t-m-l-page"

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("lowercase", "lowercase"),
            ("", ""),
            ("A", "a"),
            ("Item2Template", "item2-template"),
            ("Item_Template", "item_-template"),
            ("Foo.min", "foo.min"),
        ],
    )
    def test_edge_cases(self, name: str, expected: str) -> None:
        """Test names with digits, punctuation and trivial lengths."""
        assert id_from_partial_view_name(name) == expected


class TestTemplateId:
    """Tests for controller prefixed ids."""

    def test_prefix_is_lowercased(self) -> None:
        """Test that the controller name is lowercased."""
        assert id_prefix("Home") == "home-"
        assert id_prefix("ADMIN") == "admin-"

    def test_template_id(self) -> None:
        """Test the full id for a controller and template."""
        assert template_id("Home", "MyFirstTemplate") == "home-my-first-template"

    def test_controller_case_is_not_kebabbed(self) -> None:
        """Test that only the template name is converted to kebab-case."""
        assert template_id("UserAdmin", "ListTemplate") == "useradmin-list-template"
