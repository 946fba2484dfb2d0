"""Validates parsed AI responses and builds the analysis models."""

from typing import Any

from csv_insights.analysis.exceptions import AnalysisValidationError
from csv_insights.analysis.models import (
    ActivityLevel,
    Author,
    CompanyInfo,
    KeyEmployee,
    LinkedInAnalysis,
)

_ACTIVITY_LABELS = {level.value: level for level in ActivityLevel}


def build_company_info(data: Any) -> CompanyInfo:
    """Build CompanyInfo; both ``summary`` and ``website`` must be strings.

    Raises:
        AnalysisValidationError: on any shape violation.
    """
    if (
        not isinstance(data, dict)
        or not isinstance(data.get("summary"), str)
        or not isinstance(data.get("website"), str)
    ):
        raise AnalysisValidationError(
            "The AI model returned an invalid data structure for company info."
        )
    return CompanyInfo(summary=data["summary"], website=data["website"])


def build_linkedin_analysis(data: Any) -> LinkedInAnalysis:
    """Build LinkedInAnalysis from ``activityLevel``, ``authors`` and ``postSummary``.

    Raises:
        AnalysisValidationError: on any shape violation or unknown activity label.
    """
    invalid = AnalysisValidationError(
        "The AI model returned an invalid data structure for LinkedIn analysis."
    )
    if not isinstance(data, dict):
        raise invalid
    label = data.get("activityLevel")
    level = _ACTIVITY_LABELS.get(label) if isinstance(label, str) else None
    authors = data.get("authors")
    summary = data.get("postSummary")
    if level is None or not isinstance(authors, list) or not isinstance(summary, str):
        raise invalid
    if not all(_has_string_fields(item, "name", "linkedinUrl") for item in authors):
        raise invalid
    return LinkedInAnalysis(
        activity_level=level,
        authors=[Author(name=a["name"], profile_url=a["linkedinUrl"]) for a in authors],
        post_summary=summary,
    )


def build_key_employees(data: Any) -> list[KeyEmployee]:
    """Build the key-employee list from a bare array or ``{"employees": [...]}``.

    Raises:
        AnalysisValidationError: if any element is malformed.
    """
    if isinstance(data, dict):
        data = data.get("employees")
    if not isinstance(data, list) or not all(
        _has_string_fields(item, "name", "role", "linkedinUrl") for item in data
    ):
        raise AnalysisValidationError(
            "The AI model returned an invalid data structure for key employees."
        )
    return [
        KeyEmployee(name=item["name"], role=item["role"], profile_url=item["linkedinUrl"])
        for item in data
    ]


def _has_string_fields(item: Any, *names: str) -> bool:
    return isinstance(item, dict) and all(isinstance(item.get(n), str) for n in names)
