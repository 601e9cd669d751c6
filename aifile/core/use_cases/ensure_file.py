"""
Ensure-file use case — run the ensurer for a Request and report the result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from aifile.core.models.request import Outcome, Request
from aifile.core.services.ensurer import ensure

logger = logging.getLogger(__name__)

_MESSAGES = {
    Outcome.ALREADY_EXISTS: "AI file already exists at {target}",
    Outcome.COPIED_FROM_TEMPLATE: "Copied template to {target}",
    Outcome.CREATED_DEFAULT: "Created default AI file at {target}",
}


@dataclass
class EnsureResult:
    """Result of one ensure run."""

    target_path: Path
    outcome: Outcome | None = None
    template_path: Path | None = None
    template_missing: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        if self.outcome is None:
            return ""
        return _MESSAGES[self.outcome].format(target=self.target_path)

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "outcome": self.outcome.value if self.outcome else None,
            "target_path": str(self.target_path),
            "template_path": str(self.template_path) if self.template_path else None,
            "template_missing": self.template_missing,
            "message": self.message,
            "error": self.error,
        }


def run_ensure(request: Request) -> EnsureResult:
    """Ensure the helper file for *request* exists.

    Write and copy failures are captured into ``result.error``.
    """
    result = EnsureResult(
        target_path=request.target_path,
        template_path=request.resolved_template,
    )

    def _template_missing(_template: Path) -> None:
        result.template_missing = True

    try:
        result.outcome = ensure(
            request.directory,
            request.filename,
            request.template_path,
            on_template_missing=_template_missing,
        )
    except OSError as e:
        logger.debug("Ensure failed for %s", result.target_path, exc_info=True)
        result.error = str(e)
        return result

    logger.info("%s (%s)", result.message, result.outcome.value)
    return result
