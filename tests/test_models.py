"""
Tests for domain models and the default stub generator.
"""

import os
from pathlib import Path

import pytest
from pydantic import ValidationError

from aifile.core.generators import DEFAULT_CONTENT, DEFAULT_FILENAME, generate_ai_stub
from aifile.core.models import GeneratedFile, Outcome, Request


class TestRequest:
    def test_defaults(self):
        r = Request()
        assert r.directory == Path(".")
        assert r.filename == DEFAULT_FILENAME
        assert r.template_path is None
        assert r.resolved_template is None

    def test_target_path_is_absolute(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        r = Request(directory=Path("sub"), filename="ai.js")
        assert r.target_path == Path.cwd() / "sub" / "ai.js"

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="needs symlinks")
    def test_target_path_keeps_symlink(self, tmp_path: Path):
        (tmp_path / "ai.js").symlink_to(tmp_path / "missing.js")
        r = Request(directory=tmp_path)
        assert r.target_path == tmp_path / "ai.js"

    def test_frozen(self):
        r = Request()
        with pytest.raises(ValidationError):
            r.filename = "other.js"


class TestOutcome:
    def test_values(self):
        assert {o.value for o in Outcome} == {
            "already_exists",
            "copied_from_template",
            "created_default",
        }


class TestAIStubGenerator:
    def test_default_filename(self):
        assert DEFAULT_FILENAME == "ai.js"

    def test_generated_file(self):
        f = generate_ai_stub()
        assert isinstance(f, GeneratedFile)
        assert f.path == "ai.js"
        assert f.content == DEFAULT_CONTENT
        assert f.reason

    def test_custom_name(self):
        assert generate_ai_stub("helper.ts").path == "helper.ts"

    def test_stub_throws_not_implemented(self):
        assert DEFAULT_CONTENT.startswith("// Auto-generated AI helper functions\n")
        assert "export async function fetchAIResponse(prompt) {" in DEFAULT_CONTENT
        assert (
            "throw new Error('fetchAIResponse not implemented. "
            "Provide your AI implementation.');"
        ) in DEFAULT_CONTENT
        assert " * @param {string} prompt\n" in DEFAULT_CONTENT
        assert " * @returns {Promise<string>} AI response\n" in DEFAULT_CONTENT
        assert DEFAULT_CONTENT.endswith("}\n")
