"""
AI helper stub generator — the fallback file written when no template is given.

The stub exports a single async ``fetchAIResponse(prompt)`` that throws
until a real implementation is dropped in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aifile.core.models.template import GeneratedFile

DEFAULT_FILENAME = "ai.js"

# Byte-exact; tests compare against this.
DEFAULT_CONTENT = """\
// Auto-generated AI helper functions

/**
 * Fetches AI response for a given prompt.
 * @param {string} prompt
 * @returns {Promise<string>} AI response
 */
export async function fetchAIResponse(prompt) {
  throw new Error('fetchAIResponse not implemented. Provide your AI implementation.');
}
"""


def generate_ai_stub(filename: str = DEFAULT_FILENAME) -> GeneratedFile:
    """Build the default AI helper stub.

    Returns:
        GeneratedFile with the fixed stub content.
    """
    from aifile.core.models.template import GeneratedFile

    return GeneratedFile(
        path=filename,
        content=DEFAULT_CONTENT,
        reason="No AI helper found; generated a not-implemented stub",
    )
