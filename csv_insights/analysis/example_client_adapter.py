"""Offline analysis client.

Returns canned, schema-valid JSON for each analysis so the whole run can be
exercised locally without an API key. Also a template for new provider
adapters: implement BaseAnalysisClient and register it in AnalyzerFactory.
"""

import json
from typing import ClassVar

from csv_insights.analysis.client_base import BaseAnalysisClient
from csv_insights.analysis.exceptions import AnalysisError


class ExampleClientAdapter(BaseAnalysisClient):
    """Returns a fixed response per schema name. No network calls."""

    RESPONSES: ClassVar[dict[str, object]] = {
        "company_info": {
            "summary": "Example Corp builds example products for example customers.",
            "website": "https://www.example.com",
        },
        "linkedin_analysis": {
            "activityLevel": "Unknown",
            "authors": [
                {"name": "Jane Doe", "linkedinUrl": "https://www.linkedin.com/in/jane-doe"},
            ],
            "postSummary": "",
        },
        "key_employees": {
            "employees": [
                {
                    "name": "Jane Doe",
                    "role": "CEO",
                    "linkedinUrl": "https://www.linkedin.com/in/jane-doe",
                },
            ],
        },
    }

    async def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        schema_name: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt, json_schema
        if schema_name not in self.RESPONSES:
            raise AnalysisError(f"No example response for '{schema_name}'")
        return json.dumps(self.RESPONSES[schema_name])
