"""Project-specific prompt overrides.

Overrides live under ``<project root>/.project-memory/prompts/``. A shared
``base.md`` is prepended to the operation's own override file; when neither
exists the operation's built-in default is used unchanged.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List

from .models import PromptResult, ResultKind

logger = logging.getLogger("project_memory.prompts")

MEMORY_DIR_NAME = ".project-memory"
PROMPTS_DIR_NAME = "prompts"
BASE_PROMPT_FILENAME = "base.md"
PROMPT_SEPARATOR = "\n\n---\n\n"

# Maximum lines per prompt file before a context bloat warning
MAX_PROMPT_LINES = 200


def prompts_dir(project_root: Path | str) -> Path:
    return Path(project_root) / MEMORY_DIR_NAME / PROMPTS_DIR_NAME


def prompt_path(project_root: Path | str, filename: str) -> Path:
    """Return the location of ``filename`` inside the project's prompts directory."""
    return prompts_dir(project_root) / filename


def validate_prompt_length(content: str, filename: str) -> int:
    """Warn when a prompt file exceeds ``MAX_PROMPT_LINES``.

    Advisory only: the content is never modified and nothing is raised.
    Returns the line count.
    """
    line_count = len(content.split("\n"))
    if line_count > MAX_PROMPT_LINES:
        logger.warning(
            f"{filename} has {line_count} lines, exceeding the {MAX_PROMPT_LINES} line limit. "
            "Consider splitting this prompt to prevent context bloat."
        )
    return line_count


def lookup_override(project_root: Path | str, filename: str) -> PromptResult:
    """Read an optional override file.

    A missing file yields ``not_found``. Any other read failure yields
    ``io_error`` carrying the failure message.
    """
    path = prompt_path(project_root, filename)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return PromptResult.not_found(path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read prompt override {path}: {e}")
        return PromptResult.io_error(f"Failed to read {path}: {e}", path)

    validate_prompt_length(content, filename)
    return PromptResult.success(content, path)


def compose_prompt(project_root: Path | str, override_filename: str, default_text: str) -> PromptResult:
    """Compose base + operation override, falling back to ``default_text``.

    Overrides fully replace the default; they are never merged with it.
    """
    lookups = [
        lookup_override(project_root, BASE_PROMPT_FILENAME),
        lookup_override(project_root, override_filename),
    ]

    for lookup in lookups:
        if lookup.kind is ResultKind.IO_ERROR:
            return lookup

    parts = [lookup.text for lookup in lookups if lookup.ok and lookup.text]
    if not parts:
        logger.debug(f"No project overrides for {override_filename}, using built-in prompt")
        return PromptResult.success(default_text)

    return PromptResult.success(PROMPT_SEPARATOR.join(parts))


def override_status(project_root: Path | str, filenames: Iterable[str]) -> List[Dict[str, Any]]:
    """Report which override files exist for ``base.md`` and ``filenames``."""
    status = []
    for filename in [BASE_PROMPT_FILENAME, *filenames]:
        path = prompt_path(project_root, filename)
        status.append({
            "filename": filename,
            "path": str(path),
            "exists": path.is_file(),
        })
    return status
