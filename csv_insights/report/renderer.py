"""Plain-text rendering of a processed session for the terminal."""

from enum import Enum
from typing import Any

from csv_insights.analysis.models import CompanyInfo, KeyEmployee, LinkedInAnalysis
from csv_insights.orchestration.session import PipelineState, SessionContext


class PanelStatus(Enum):
    LOADING = "loading"
    ERROR = "error"
    SUCCESS = "success"
    EMPTY = "empty"


def panel_status(state: PipelineState[Any]) -> PanelStatus:
    if state.loading:
        return PanelStatus.LOADING
    if state.error is not None:
        return PanelStatus.ERROR
    if state.result is not None:
        return PanelStatus.SUCCESS
    return PanelStatus.EMPTY


def render_session(session: SessionContext) -> str:
    sections = [
        _panel("Company Summary", session.company, _company_body),
        _panel("LinkedIn Activity", session.linkedin, _linkedin_body),
        _panel("Key Employees", session.employees, _employees_body),
    ]
    if session.header_sets:
        sections.append(_headers_section(session))
    return "\n\n".join(s for s in sections if s)


def _panel(title: str, state: PipelineState[Any], body: Any) -> str:
    status = panel_status(state)
    if status is PanelStatus.EMPTY:
        return ""
    lines = [title, "=" * len(title)]
    if status is PanelStatus.LOADING:
        lines.append("Analyzing...")
    elif status is PanelStatus.ERROR:
        lines.append(f"Error: {state.error}")
    else:
        lines.extend(body(state.result))
    return "\n".join(lines)


def _company_body(info: CompanyInfo) -> list[str]:
    lines = [info.summary]
    if info.website:
        lines.append(f"Website: {info.website}")
    return lines


def _linkedin_body(analysis: LinkedInAnalysis) -> list[str]:
    lines = [f"Activity level: {analysis.activity_level.value}"]
    if analysis.post_summary:
        lines.append(f"Product & update posts: {analysis.post_summary}")
    if analysis.authors:
        lines.append("Authors:")
        lines.extend(f"  - {a.name} <{a.profile_url}>" for a in analysis.authors)
    else:
        lines.append("No authors identified.")
    return lines


def _employees_body(employees: list[KeyEmployee]) -> list[str]:
    if not employees:
        return ["No key employees identified."]
    return [f"  - {e.name}, {e.role} <{e.profile_url}>" for e in employees]


def _headers_section(session: SessionContext) -> str:
    lines = ["Extracted Headers", "================="]
    for header_set in session.header_sets:
        if header_set.error is not None:
            lines.append(f"{header_set.file_name}: error: {header_set.error}")
        elif header_set.headers:
            lines.append(f"{header_set.file_name}: {', '.join(header_set.headers)}")
        else:
            lines.append(f"{header_set.file_name}: (no headers found)")
    return "\n".join(lines)
