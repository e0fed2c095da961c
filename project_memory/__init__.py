"""Project Memory MCP server - prompt resolution package."""

from .models import Operation, PromptResult, ResultKind
from .operations import (
    OPERATIONS,
    get_operation,
    invoke_operation,
    list_operations,
    prompt_overrides,
)
from .prompt_loader import (
    BASE_PROMPT_FILENAME,
    MAX_PROMPT_LINES,
    PROMPT_SEPARATOR,
    compose_prompt,
    lookup_override,
    prompt_path,
    validate_prompt_length,
)

__all__ = [
    "BASE_PROMPT_FILENAME",
    "MAX_PROMPT_LINES",
    "OPERATIONS",
    "Operation",
    "PROMPT_SEPARATOR",
    "PromptResult",
    "ResultKind",
    "compose_prompt",
    "get_operation",
    "invoke_operation",
    "list_operations",
    "lookup_override",
    "prompt_overrides",
    "prompt_path",
    "validate_prompt_length",
]
