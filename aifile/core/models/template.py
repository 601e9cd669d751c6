"""
Generated file model — what a generator hands back before anything is written.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced by a generator.

    Attributes:
        path:    Filename relative to the target directory.
        content: Full file content.
        reason:  Why this file was generated.
    """

    path: str
    content: str
    reason: str = ""
