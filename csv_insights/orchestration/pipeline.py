from abc import ABC, abstractmethod
from pathlib import Path
from typing import ClassVar, Generic, TypeVar

from csv_insights.analysis.base import BaseAnalyzer
from csv_insights.analysis.models import CompanyInfo, KeyEmployee, LinkedInAnalysis
from csv_insights.intake.excerpt_reader import ExcerptReader
from csv_insights.intake.models import SlotRole
from csv_insights.logging.logger import Log

T = TypeVar("T")


class AnalysisPipeline(ABC, Generic[T]):
    """Read-then-analyze sequence for one slot."""

    role: ClassVar[SlotRole]

    def __init__(self, excerpt_reader: ExcerptReader, analyzer: BaseAnalyzer) -> None:
        self._excerpt_reader = excerpt_reader
        self._analyzer = analyzer

    async def run(self, path: Path) -> T:
        csv_content = await self._excerpt_reader.read(path)
        Log.info(f"Read {len(csv_content)} chars from {path.name} for {self.role.value}")
        return await self.analyze(csv_content)

    @abstractmethod
    async def analyze(self, csv_content: str) -> T:
        raise NotImplementedError


class CompanyInfoPipeline(AnalysisPipeline[CompanyInfo]):
    role = SlotRole.COMPANY

    async def analyze(self, csv_content: str) -> CompanyInfo:
        return await self._analyzer.company_info(csv_content)


class LinkedInAnalysisPipeline(AnalysisPipeline[LinkedInAnalysis]):
    role = SlotRole.LINKEDIN_POSTS

    async def analyze(self, csv_content: str) -> LinkedInAnalysis:
        return await self._analyzer.linkedin_analysis(csv_content)


class KeyEmployeesPipeline(AnalysisPipeline[list[KeyEmployee]]):
    role = SlotRole.EMPLOYEES

    async def analyze(self, csv_content: str) -> list[KeyEmployee]:
        return await self._analyzer.key_employees(csv_content)
