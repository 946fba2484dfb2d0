from csv_insights.analysis.models import (
    ActivityLevel,
    Author,
    CompanyInfo,
    KeyEmployee,
    LinkedInAnalysis,
)
from csv_insights.intake.models import ParsedHeaderSet
from csv_insights.orchestration.session import PipelineState, SessionContext
from csv_insights.report.renderer import PanelStatus, panel_status, render_session


class TestPanelStatus:
    def test_empty(self) -> None:
        assert panel_status(PipelineState()) is PanelStatus.EMPTY

    def test_loading_wins(self) -> None:
        assert panel_status(PipelineState(error="x", loading=True)) is PanelStatus.LOADING

    def test_error(self) -> None:
        assert panel_status(PipelineState(error="x")) is PanelStatus.ERROR

    def test_success(self) -> None:
        assert panel_status(PipelineState(result=[])) is PanelStatus.SUCCESS


class TestRenderSession:
    def test_empty_session_renders_nothing(self) -> None:
        assert render_session(SessionContext()) == ""

    def test_renders_results_errors_and_headers(self) -> None:
        session = SessionContext()
        session.company.result = CompanyInfo(summary="Widgets.", website="https://example.com")
        session.linkedin.error = "AI analysis failed: timeout"
        session.employees.result = [KeyEmployee(name="Jane Doe", role="CEO", profile_url="u")]
        session.header_sets = [
            ParsedHeaderSet(file_name="company.csv", headers=["name", "website"]),
            ParsedHeaderSet(file_name="bad.csv", error="File is empty."),
        ]

        text = render_session(session)

        assert "Company Summary" in text
        assert "Website: https://example.com" in text
        assert "Error: AI analysis failed: timeout" in text
        assert "Jane Doe, CEO <u>" in text
        assert "company.csv: name, website" in text
        assert "bad.csv: error: File is empty." in text

    def test_renders_linkedin_analysis(self) -> None:
        session = SessionContext()
        session.linkedin.result = LinkedInAnalysis(
            activity_level=ActivityLevel.LESS_ACTIVE,
            authors=[Author(name="Jane Doe", profile_url="u")],
        )
        text = render_session(session)
        assert "Activity level: Less Active" in text
        assert "Jane Doe <u>" in text
        assert "Product & update posts" not in text

    def test_loading_panel(self) -> None:
        session = SessionContext()
        session.employees.loading = True
        assert "Analyzing..." in render_session(session)
