"""Shared fixtures for the Project Memory test suite."""

import logging

import pytest


@pytest.fixture(autouse=True)
def restore_project_memory_logger():
    """Undo handler and level changes made by setup_logging."""
    logger = logging.getLogger("project_memory")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def prompts_dir(tmp_path):
    """A project root with an empty .project-memory/prompts directory."""
    directory = tmp_path / ".project-memory" / "prompts"
    directory.mkdir(parents=True)
    return directory


@pytest.fixture
def write_prompt(prompts_dir):
    """Write an override file into the project's prompts directory."""

    def _write(filename, content):
        path = prompts_dir / filename
        path.write_text(content, encoding="utf-8")
        return path

    return _write
