"""Tests for prompt template and JSON schema loading."""

import json
from pathlib import Path

import pytest

from csv_insights.analysis.analyzer import ANALYSIS_NAMES, Analyzer
from csv_insights.analysis.exceptions import AnalysisError
from csv_insights.analysis.prompt_loader import load_json_schema, load_prompt_template


class TestLoadPromptTemplate:
    @pytest.mark.parametrize("name", ANALYSIS_NAMES)
    def test_bundled_templates_have_placeholder(self, name: str) -> None:
        template = load_prompt_template(name)
        assert "{csv_content}" in template
        template.format(csv_content="x")

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Hello {csv_content}")
        assert load_prompt_template("company_info", custom) == "Hello {csv_content}"

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(AnalysisError, match="Failed to load prompt"):
            load_prompt_template("company_info", Path("/nonexistent/file.txt"))


class TestLoadJsonSchema:
    @pytest.mark.parametrize("name", ANALYSIS_NAMES)
    def test_bundled_schemas_are_strict_objects(self, name: str) -> None:
        schema = json.loads(load_json_schema(name))
        assert schema["type"] == "object"
        assert schema["additionalProperties"] is False
        assert set(schema["required"]) == set(schema["properties"])

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(AnalysisError, match="Failed to load JSON schema"):
            load_json_schema("company_info", Path("/nonexistent/schema.json"))


class TestCustomPromptDir:
    def test_analyzer_reads_prompt_dir(self, tmp_path: Path) -> None:
        for name in ANALYSIS_NAMES:
            (tmp_path / f"{name}_prompt.txt").write_text(f"{name}: {{csv_content}}")
            (tmp_path / f"{name}_schema.json").write_text('{"type": "object"}')
        Analyzer(client=object(), model="m", prompt_dir=tmp_path)  # type: ignore[arg-type]

    def test_analyzer_fails_on_incomplete_prompt_dir(self, tmp_path: Path) -> None:
        with pytest.raises(AnalysisError):
            Analyzer(client=object(), model="m", prompt_dir=tmp_path)  # type: ignore[arg-type]
