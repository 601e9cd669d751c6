"""
Request / outcome models for a single ensure run.

A Request is built once from the command line (plus optional config
file) and never changes afterwards.  The Outcome is the terminal state
the ensurer reached.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from aifile.core.generators.ai_stub import DEFAULT_FILENAME


class Outcome(str, Enum):
    """Terminal states of an ensure run."""

    ALREADY_EXISTS = "already_exists"
    COPIED_FROM_TEMPLATE = "copied_from_template"
    CREATED_DEFAULT = "created_default"


class Request(BaseModel):
    """Where the helper file must exist, and what to fill it from."""

    model_config = ConfigDict(frozen=True)

    directory: Path = Path(".")
    filename: str = DEFAULT_FILENAME
    template_path: Path | None = None

    @property
    def target_path(self) -> Path:
        """Absolute location of the helper file."""
        return Path(os.path.abspath(self.directory / self.filename))

    @property
    def resolved_template(self) -> Path | None:
        if self.template_path is None:
            return None
        return Path(os.path.abspath(self.template_path))
