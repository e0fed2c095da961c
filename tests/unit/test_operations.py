"""Unit tests for the operation table and dispatch."""

import logging

import pytest

from project_memory.models import ResultKind
from project_memory.operations import (
    OPERATIONS,
    get_operation,
    invoke_operation,
    list_operations,
    prompt_overrides,
)
from project_memory.prompts import (
    CREATE_SPEC_PROMPT,
    INIT_PROMPT,
    ORGANIZE_PROMPT,
    PARSE_TASKS_PROMPT,
    REVIEW_PROMPT,
    SYNC_PROMPT,
    TASK_JSON_SCHEMA,
)

COMPOSABLE = {
    "parse-tasks": ("parse-tasks.md", PARSE_TASKS_PROMPT),
    "review": ("review.md", REVIEW_PROMPT),
    "sync": ("sync.md", SYNC_PROMPT),
}


class TestOperationTable:
    """Test cases for the static operation table."""

    def test_declared_operations(self):
        assert [op.name for op in list_operations()] == [
            "init", "parse-tasks", "review", "sync", "organize", "create-spec",
        ]

    def test_every_operation_is_valid(self):
        for operation in OPERATIONS.values():
            assert operation.validate() == [], operation.name

    @pytest.mark.parametrize("name", sorted(COMPOSABLE))
    def test_override_filename_matches_name(self, name):
        operation = get_operation(name)

        assert operation.override_filename == f"{name}.md"
        assert operation.default_text == COMPOSABLE[name][1]

    @pytest.mark.parametrize("name", ["init", "organize", "create-spec"])
    def test_fixed_text_operations(self, name):
        assert not get_operation(name).composable

    def test_get_operation_unknown(self):
        assert get_operation("frobnicate") is None

    def test_init_text_appends_workflow_templates(self):
        text = get_operation("init").default_text

        assert text.startswith(INIT_PROMPT)
        assert "## FALLBACK PROMPT TEMPLATES" in text
        assert "### Template for parse-tasks.md:\n" + PARSE_TASKS_PROMPT in text
        assert "### Template for review.md:\n" + REVIEW_PROMPT in text
        assert "### Template for sync.md:\n" + SYNC_PROMPT in text

    def test_task_prompts_embed_schema(self):
        for text in (PARSE_TASKS_PROMPT, REVIEW_PROMPT, SYNC_PROMPT, ORGANIZE_PROMPT, INIT_PROMPT):
            assert TASK_JSON_SCHEMA in text

    def test_create_spec_targets_specs_directory(self):
        assert ".project-memory/specs/" in CREATE_SPEC_PROMPT


class TestInvokeOperation:
    """Test cases for dispatching an operation."""

    @pytest.mark.parametrize("name", sorted(COMPOSABLE))
    def test_defaults_without_overrides(self, tmp_path, name):
        result = invoke_operation(name, tmp_path)

        assert result.ok
        assert result.text == COMPOSABLE[name][1]

    def test_uses_project_override(self, tmp_path, write_prompt):
        write_prompt("sync.md", "Team sync")

        assert invoke_operation("sync", tmp_path).text == "Team sync"

    @pytest.mark.parametrize("name", ["organize", "create-spec"])
    def test_fixed_operations_ignore_overrides(self, tmp_path, write_prompt, name):
        write_prompt("base.md", "B")
        write_prompt(f"{name}.md", "X")

        assert invoke_operation(name, tmp_path).text == get_operation(name).default_text

    def test_unknown_operation_does_not_touch_filesystem(self, tmp_path, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("filesystem accessed")

        monkeypatch.setattr("project_memory.operations.compose_prompt", fail)

        result = invoke_operation("frobnicate", tmp_path)

        assert result.kind is ResultKind.UNKNOWN_OPERATION
        assert "frobnicate" in result.message

    def test_io_error_is_returned(self, tmp_path, prompts_dir):
        (prompts_dir / "review.md").mkdir()

        result = invoke_operation("review", tmp_path)

        assert result.kind is ResultKind.IO_ERROR

    def test_logs_operation(self, tmp_path, caplog):
        caplog.set_level(logging.INFO, logger="project_memory.operations")

        invoke_operation("review", tmp_path)

        messages = [r.getMessage() for r in caplog.records if r.name == "project_memory.operations"]
        assert "Starting operation: review" in messages
        assert any(m.startswith("Completed operation: review") for m in messages)


class TestPromptOverrides:
    """Test cases for the override listing."""

    def test_lists_base_and_composable_operations(self, tmp_path, write_prompt):
        write_prompt("base.md", "B")

        status = {entry["filename"]: entry["exists"] for entry in prompt_overrides(tmp_path)}

        assert status == {
            "base.md": True,
            "parse-tasks.md": False,
            "review.md": False,
            "sync.md": False,
        }
