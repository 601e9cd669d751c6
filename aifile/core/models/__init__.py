"""
Domain models — Pydantic types for aifile.

    from aifile.core.models import GeneratedFile, Outcome, Request
"""

from aifile.core.models.request import Outcome, Request
from aifile.core.models.template import GeneratedFile

__all__ = [
    "GeneratedFile",
    "Outcome",
    "Request",
]
