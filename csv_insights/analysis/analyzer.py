"""AI-powered analysis of CSV excerpts."""

import json
from pathlib import Path
from typing import Any

from csv_insights.analysis.base import BaseAnalyzer
from csv_insights.analysis.client_base import BaseAnalysisClient
from csv_insights.analysis.exceptions import AnalysisError
from csv_insights.analysis.models import CompanyInfo, KeyEmployee, LinkedInAnalysis
from csv_insights.analysis.prompt_loader import load_json_schema, load_prompt_template
from csv_insights.analysis.validator import (
    build_company_info,
    build_key_employees,
    build_linkedin_analysis,
)
from csv_insights.logging.logger import Log

COMPANY_INFO = "company_info"
LINKEDIN_ANALYSIS = "linkedin_analysis"
KEY_EMPLOYEES = "key_employees"
ANALYSIS_NAMES = (COMPANY_INFO, LINKEDIN_ANALYSIS, KEY_EMPLOYEES)


class Analyzer(BaseAnalyzer):
    """Sends CSV excerpts to an AI provider and validates the structured replies."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.0,
        prompt_dir: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._system_prompt = system_prompt
        self._templates: dict[str, str] = {}
        self._schemas: dict[str, dict[str, object]] = {}
        for name in ANALYSIS_NAMES:
            self._templates[name] = load_prompt_template(
                name, prompt_dir / f"{name}_prompt.txt" if prompt_dir else None
            )
            self._schemas[name] = json.loads(
                load_json_schema(name, prompt_dir / f"{name}_schema.json" if prompt_dir else None)
            )

    async def company_info(self, csv_content: str) -> CompanyInfo:
        result = build_company_info(await self._request(COMPANY_INFO, csv_content))
        Log.info(f"Company info ready (website: {result.website or '-'})")
        return result

    async def linkedin_analysis(self, csv_content: str) -> LinkedInAnalysis:
        result = build_linkedin_analysis(await self._request(LINKEDIN_ANALYSIS, csv_content))
        Log.info(
            f"LinkedIn analysis ready: {result.activity_level.value}, "
            f"{len(result.authors)} authors"
        )
        return result

    async def key_employees(self, csv_content: str) -> list[KeyEmployee]:
        result = build_key_employees(await self._request(KEY_EMPLOYEES, csv_content))
        Log.info(f"Key employees ready: {len(result)} identified")
        return result

    async def _request(self, name: str, csv_content: str) -> Any:
        prompt = self._templates[name].format(csv_content=csv_content)
        Log.debug(f"{name} prompt:\n{prompt}")
        try:
            raw = await self._client.create_chat_completion(
                model=self._model,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
                schema_name=name,
                json_schema=self._schemas[name],
            )
            Log.debug(f"{name} raw response:\n{raw}")
            return self._parse_json(raw)
        except AnalysisError as exc:
            Log.error(f"Error calling AI provider for {name}: {exc}")
            raise type(exc)(f"AI analysis failed: {exc}") from exc
        except Exception as exc:
            Log.error(f"Error calling AI provider for {name}: {exc}")
            raise AnalysisError(
                f"AI analysis failed: {str(exc) or 'An unknown error occurred'}"
            ) from exc

    @staticmethod
    def _parse_json(raw: str) -> Any:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines).strip()

        if not cleaned:
            raise AnalysisError("The AI model returned an empty response.")
        try:
            return json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise AnalysisError(f"Invalid JSON response: {exc}") from exc
