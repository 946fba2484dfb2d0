from abc import ABC, abstractmethod

from csv_insights.analysis.models import CompanyInfo, KeyEmployee, LinkedInAnalysis


class BaseAnalyzer(ABC):
    """Contract for the three remote analysis calls."""

    @abstractmethod
    async def company_info(self, csv_content: str) -> CompanyInfo:
        """Summarize a company-details CSV excerpt.

        Raises:
            AnalysisError: on any failure.
        """

    @abstractmethod
    async def linkedin_analysis(self, csv_content: str) -> LinkedInAnalysis:
        """Classify posting activity and list authors from a LinkedIn-posts excerpt.

        Raises:
            AnalysisError: on any failure.
        """

    @abstractmethod
    async def key_employees(self, csv_content: str) -> list[KeyEmployee]:
        """Identify key contacts in an employee-list excerpt.

        Raises:
            AnalysisError: on any failure.
        """
