"""MCP server exposing Project Memory workflow prompts."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError

from project_memory import Operation, invoke_operation, list_operations, prompt_overrides
from project_memory.memory_logging import log_error_with_context, setup_logging

mcp = FastMCP("project-memory")

logger = logging.getLogger("project_memory.server")

PROJECT_ROOT_ENV = "PROJECT_MEMORY_ROOT"
LOG_LEVEL_ENV = "PROJECT_MEMORY_LOG_LEVEL"
LOG_FILE_ENV = "PROJECT_MEMORY_LOG_FILE"


def _resolve_root() -> Path:
    env_root = os.getenv(PROJECT_ROOT_ENV)
    if env_root:
        env_path = Path(env_root).expanduser().resolve()
        if not env_path.exists():
            raise ValueError(
                f"Environment variable {PROJECT_ROOT_ENV} points to '{env_root}', which does not exist."
            )
        return env_path

    return Path.cwd()


def run_operation(name: str) -> str:
    """Return the prompt for ``name`` in the current project.

    Failures are raised as ``ToolError`` so FastMCP reports them as an
    error result instead of tearing down the session.
    """
    try:
        result = invoke_operation(name, _resolve_root())
    except ValueError as e:
        raise ToolError(str(e)) from e
    except Exception as e:
        log_error_with_context(e, {"operation": name})
        raise

    if result.is_error:
        raise ToolError(result.message)
    return result.text


def _register_tool(operation: Operation) -> None:
    def tool() -> str:
        return run_operation(operation.name)

    tool.__name__ = operation.name.replace("-", "_")
    tool.__doc__ = operation.description
    mcp.add_tool(tool, name=operation.name, description=operation.description)


for _operation in list_operations():
    _register_tool(_operation)


@mcp.resource("project-memory://prompts")
def resource_prompts() -> str:
    """Resource view showing which prompt override files the project defines."""

    root = _resolve_root()
    lines = [f"Project Memory Prompts ({root})"]
    for entry in prompt_overrides(root):
        state = "override" if entry["exists"] else "not found"
        lines.append(f"- {entry['filename']}: {state}")
    lines.append("")
    lines.append("Operations without an override use their built-in prompt.")
    return "\n".join(lines)


def main() -> None:
    try:
        log_file = os.getenv(LOG_FILE_ENV)
        setup_logging(
            os.getenv(LOG_LEVEL_ENV, "INFO").upper(),
            Path(log_file).expanduser() if log_file else None,
        )
        logger.info("Project Memory MCP server running on stdio")
        mcp.run(transport="stdio")
    except Exception as e:
        logger.critical(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
