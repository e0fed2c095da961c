"""Built-in prompt bodies served when a project has no overrides."""

from .create_spec import CREATE_SPEC_PROMPT
from .init import INIT_PROMPT, build_init_prompt
from .organize import ORGANIZE_PROMPT
from .parse_tasks import PARSE_TASKS_PROMPT
from .review import REVIEW_PROMPT
from .sync import SYNC_PROMPT
from .task_schema import TASK_JSON_SCHEMA

__all__ = [
    "CREATE_SPEC_PROMPT",
    "INIT_PROMPT",
    "ORGANIZE_PROMPT",
    "PARSE_TASKS_PROMPT",
    "REVIEW_PROMPT",
    "SYNC_PROMPT",
    "TASK_JSON_SCHEMA",
    "build_init_prompt",
]
