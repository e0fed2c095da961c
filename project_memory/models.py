"""Data models for the Project Memory prompt server.

This module contains the core data structures used throughout the system:
the static operation definitions and the explicit result type returned by
override lookups, composition and dispatch.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional


class ResultKind(str, Enum):
    """Outcome of resolving or composing a prompt."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    IO_ERROR = "io_error"
    UNKNOWN_OPERATION = "unknown_operation"


@dataclass(slots=True, frozen=True)
class PromptResult:
    """Explicit result of a prompt lookup.

    ``text`` is set for successes, ``message`` for errors. ``path`` points at
    the override file involved, when there is one.
    """

    kind: ResultKind
    text: Optional[str] = None
    message: Optional[str] = None
    path: Optional[Path] = None

    @classmethod
    def success(cls, text: str, path: Optional[Path] = None) -> "PromptResult":
        return cls(ResultKind.SUCCESS, text=text, path=path)

    @classmethod
    def not_found(cls, path: Optional[Path] = None) -> "PromptResult":
        return cls(ResultKind.NOT_FOUND, path=path)

    @classmethod
    def io_error(cls, message: str, path: Optional[Path] = None) -> "PromptResult":
        return cls(ResultKind.IO_ERROR, message=message, path=path)

    @classmethod
    def unknown_operation(cls, name: str) -> "PromptResult":
        return cls(ResultKind.UNKNOWN_OPERATION, message=f"Unknown tool: {name}")

    @property
    def ok(self) -> bool:
        return self.kind is ResultKind.SUCCESS

    @property
    def is_error(self) -> bool:
        """True for failures; ``not_found`` is an expected state, not an error."""
        return self.kind in (ResultKind.IO_ERROR, ResultKind.UNKNOWN_OPERATION)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "kind": self.kind.value,
            "text": self.text,
            "message": self.message,
            "path": str(self.path) if self.path else None,
        }


@dataclass(slots=True, frozen=True)
class Operation:
    """A named tool and the prompt it serves.

    Operations without an ``override_filename`` always return their
    ``default_text`` and never consult project overrides.
    """

    name: str
    description: str
    default_text: str
    override_filename: Optional[str] = None

    @property
    def composable(self) -> bool:
        return self.override_filename is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "name": self.name,
            "description": self.description,
            "override_filename": self.override_filename,
            "composable": self.composable,
        }

    def validate(self) -> list[str]:
        """Validate the definition and return any issues."""
        issues = []

        if not self.name:
            issues.append("Operation name is required")
        if not self.description:
            issues.append("Description is required")
        if not self.default_text:
            issues.append("Default text must not be empty")
        if self.override_filename is not None and not self.override_filename.endswith(".md"):
            issues.append("Override filename must be a markdown file")

        return issues
