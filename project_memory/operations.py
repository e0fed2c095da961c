"""Operation table and dispatch.

Every tool the server exposes is declared once in ``OPERATIONS``. Composable
operations are resolved against the project's prompt overrides; the others
always return their built-in text.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .memory_logging import log_operation
from .models import Operation, PromptResult
from .prompt_loader import compose_prompt, override_status
from .prompts import (
    CREATE_SPEC_PROMPT,
    ORGANIZE_PROMPT,
    PARSE_TASKS_PROMPT,
    REVIEW_PROMPT,
    SYNC_PROMPT,
    build_init_prompt,
)

logger = logging.getLogger("project_memory.operations")


def _operation_table(*operations: Operation) -> Dict[str, Operation]:
    table: Dict[str, Operation] = {}
    for operation in operations:
        issues = operation.validate()
        if issues:
            raise ValueError(f"Invalid operation '{operation.name}': {'; '.join(issues)}")
        table[operation.name] = operation
    return table


OPERATIONS: Dict[str, Operation] = _operation_table(
    Operation(
        name="init",
        description=(
            "Initialize project memory system. Creates folder structure, generates project-specific "
            "prompts, and sets up claude.md instructions. Only run once per project."
        ),
        default_text=build_init_prompt(),
    ),
    Operation(
        name="parse-tasks",
        description=(
            "Parse tasks from spec files or implementation plans. Extracts tasks with IDs, descriptions, "
            "acceptance criteria, dependencies, and adds them to tasks-active.json after user approval."
        ),
        default_text=PARSE_TASKS_PROMPT,
        override_filename="parse-tasks.md",
    ),
    Operation(
        name="review",
        description=(
            "Review uncommitted code changes. Analyzes git diff, checks against current tasks and "
            "architecture, identifies issues, and proposes task/architecture updates for user approval."
        ),
        default_text=REVIEW_PROMPT,
        override_filename="review.md",
    ),
    Operation(
        name="sync",
        description=(
            "Sync project memory with recent commits. Updates tasks (marks completed), prunes commit log "
            "to last 20 commits, updates architecture if needed, and extracts new commands."
        ),
        default_text=SYNC_PROMPT,
        override_filename="sync.md",
    ),
    Operation(
        name="organize",
        description=(
            "Organize existing CLAUDE.md into project-memory structure. Migrates architecture, conventions, "
            "commands, tasks, and specs from CLAUDE.md to .project-memory/ files while keeping minimal "
            "references. Requires user approval."
        ),
        default_text=ORGANIZE_PROMPT,
    ),
    Operation(
        name="create-spec",
        description=(
            "Create detailed specification from user requirements or file content. Initializes/syncs "
            "project memory, clarifies ambiguity, validates against codebase, considers security/edge "
            "cases/tests, and writes spec to .project-memory/specs/. Asks for larger context and flags "
            "inconsistencies."
        ),
        default_text=CREATE_SPEC_PROMPT,
    ),
)


def get_operation(name: str) -> Optional[Operation]:
    return OPERATIONS.get(name)


def list_operations() -> List[Operation]:
    """Operations in declaration order."""
    return list(OPERATIONS.values())


def invoke_operation(name: str, project_root: Path | str) -> PromptResult:
    """Resolve the prompt ``name`` should return for ``project_root``."""
    operation = get_operation(name)
    if operation is None:
        logger.warning(f"Unknown operation requested: {name}")
        return PromptResult.unknown_operation(name)

    with log_operation(operation.name, project_root=str(project_root)):
        if not operation.composable:
            return PromptResult.success(operation.default_text)
        return compose_prompt(project_root, operation.override_filename, operation.default_text)


def prompt_overrides(project_root: Path | str) -> List[Dict[str, Any]]:
    """Override file status for ``base.md`` and every composable operation."""
    filenames = [op.override_filename for op in list_operations() if op.composable]
    return override_status(project_root, filenames)
