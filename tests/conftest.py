"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Return an empty project directory."""
    proj = tmp_path / "proj"
    proj.mkdir()
    return proj


@pytest.fixture
def template_file(tmp_path: Path) -> Path:
    """Return a template file with non-ASCII and CRLF content."""
    path = tmp_path / "templates" / "ai.js"
    path.parent.mkdir()
    path.write_bytes(
        b"// custom helper \xe2\x9c\xa8\r\n"
        b"export async function fetchAIResponse(prompt) {\r\n"
        b"  return callModel(prompt);\r\n"
        b"}\r\n"
    )
    return path
