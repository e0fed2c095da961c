"""
Contract tests for project prompt overrides:
a project's .project-memory/prompts/ files replace the built-in prompt for an
operation, base.md is always placed first, and init never consults overrides.
"""

import pytest

from project_memory.models import ResultKind
from project_memory.operations import get_operation, invoke_operation, list_operations

COMPOSABLE = [op.name for op in list_operations() if op.composable]


class TestBuiltInFallback:
    """Projects without overrides receive the built-in prompts."""

    @pytest.mark.parametrize("name", COMPOSABLE)
    def test_no_project_memory_directory(self, tmp_path, name):
        """
        Given: A project root without .project-memory/prompts/
        When: A composable operation is invoked
        Then: The operation's built-in text is returned byte-for-byte
        """
        result = invoke_operation(name, tmp_path)

        assert result.text == get_operation(name).default_text


class TestOverrideComposition:
    """Overrides replace the built-in prompt entirely."""

    def test_base_only_returns_base_without_separator(self, tmp_path, write_prompt):
        """
        Given: base.md = "B" and no review.md
        When: review is invoked
        Then: Exactly "B" is returned
        """
        write_prompt("base.md", "B")

        assert invoke_operation("review", tmp_path).text == "B"

    def test_base_and_operation_override(self, tmp_path, write_prompt):
        """
        Given: base.md = "B" and review.md = "R"
        When: review is invoked
        Then: base comes first, joined by the fixed separator, without the default
        """
        write_prompt("base.md", "B")
        write_prompt("review.md", "R")

        text = invoke_operation("review", tmp_path).text

        assert text == "B\n\n---\n\nR"
        assert get_operation("review").default_text not in text

    @pytest.mark.parametrize("name", COMPOSABLE)
    def test_any_override_suppresses_default(self, tmp_path, write_prompt, name):
        write_prompt(f"{name}.md", "project specific")

        text = invoke_operation(name, tmp_path).text

        assert text == "project specific"
        assert get_operation(name).default_text not in text


class TestInitIsNeverComposed:
    """init bootstraps the override files and therefore ignores them."""

    def test_init_ignores_overrides(self, tmp_path, write_prompt):
        """
        Given: base.md and init.md both exist
        When: init is invoked
        Then: The fixed init text is returned verbatim
        """
        write_prompt("base.md", "B")
        write_prompt("init.md", "I")

        result = invoke_operation("init", tmp_path)

        assert result.text == get_operation("init").default_text


class TestUnknownOperation:
    """Unrecognised identifiers are reported, not dispatched."""

    def test_unknown_operation_is_named_in_error(self, tmp_path):
        """
        Given: Any project root
        When: "frobnicate" is invoked
        Then: An unknown-operation error naming "frobnicate" is returned
        """
        result = invoke_operation("frobnicate", tmp_path)

        assert result.kind is ResultKind.UNKNOWN_OPERATION
        assert result.is_error
        assert "frobnicate" in result.message
