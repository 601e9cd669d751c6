"""
Generators — produce file content without touching the filesystem.
"""

from aifile.core.generators.ai_stub import DEFAULT_CONTENT, DEFAULT_FILENAME, generate_ai_stub

__all__ = ["DEFAULT_CONTENT", "DEFAULT_FILENAME", "generate_ai_stub"]
