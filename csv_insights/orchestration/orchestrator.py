import asyncio
from pathlib import Path
from typing import Any

from csv_insights.analysis.factory import AnalyzerFactory
from csv_insights.analysis.models import KeyEmployee, LinkedInAnalysis
from csv_insights.config.settings import Settings
from csv_insights.intake.excerpt_reader import ExcerptReader
from csv_insights.intake.file_loader import FileLoader
from csv_insights.intake.header_extractor import HeaderExtractor
from csv_insights.intake.models import FileSlot, ParsedHeaderSet, SlotRole
from csv_insights.logging.logger import Log
from csv_insights.orchestration.aggregation import aggregate_profiles
from csv_insights.orchestration.pipeline import (
    AnalysisPipeline,
    CompanyInfoPipeline,
    KeyEmployeesPipeline,
    LinkedInAnalysisPipeline,
)
from csv_insights.orchestration.session import SessionContext

UNKNOWN_ERROR = "An unknown error occurred"


def error_message(exc: BaseException) -> str:
    return str(exc) or UNKNOWN_ERROR


class Orchestrator:
    """Runs header extraction and every slot pipeline concurrently, then aggregates.

    Each slot's failure is caught inside its own task and recorded on the
    session; process() itself never raises.
    """

    def __init__(
        self,
        header_extractor: HeaderExtractor,
        pipelines: list[AnalysisPipeline[Any]],
    ) -> None:
        self._header_extractor = header_extractor
        self._pipelines = pipelines

    async def process(self, session: SessionContext) -> None:
        generation = session.begin_run()
        slots = session.filled_slots()
        Log.info(f"Run {generation}: processing {len(slots)} file(s)")

        header_sets, *outcomes = await asyncio.gather(
            self._extract_all_headers(slots),
            *(
                self._run_pipeline(session, generation, p, session.slots[p.role].path)
                for p in self._pipelines
            ),
        )
        by_role = {p.role: outcome for p, outcome in zip(self._pipelines, outcomes)}

        employees: list[KeyEmployee] | None = by_role.get(SlotRole.EMPLOYEES)
        analysis: LinkedInAnalysis | None = by_role.get(SlotRole.LINKEDIN_POSTS)
        profiles = aggregate_profiles(employees, analysis)
        session.finish_run(generation, header_sets, profiles)
        Log.info(f"Run {generation} finished: {len(profiles)} downloadable profiles")

    async def _extract_all_headers(self, slots: list[FileSlot]) -> list[ParsedHeaderSet]:
        return list(await asyncio.gather(*(self._extract_headers(s) for s in slots)))

    async def _extract_headers(self, slot: FileSlot) -> ParsedHeaderSet:
        assert slot.path is not None
        try:
            headers = await self._header_extractor.extract(slot.path)
        except Exception as exc:
            Log.warning(f"Header extraction failed for {slot.path.name}: {exc}")
            return ParsedHeaderSet(file_name=slot.path.name, error=error_message(exc))
        Log.info(f"Extracted {len(headers)} headers from {slot.path.name}")
        return ParsedHeaderSet(file_name=slot.path.name, headers=headers)

    async def _run_pipeline(
        self,
        session: SessionContext,
        generation: int,
        pipeline: AnalysisPipeline[Any],
        path: Path | None,
    ) -> Any:
        if path is None:
            return None
        role = pipeline.role
        session.set_loading(role, generation, True)
        try:
            result = await pipeline.run(path)
        except Exception as exc:
            Log.error(f"{role.label} analysis failed: {exc}")
            session.record(role, generation, error=error_message(exc))
            return None
        finally:
            session.set_loading(role, generation, False)
        session.record(role, generation, result=result)
        return result


def build_orchestrator(settings: Settings) -> Orchestrator:
    """Build an Orchestrator with all required adapters."""
    file_loader = FileLoader()
    analyzer = AnalyzerFactory.create(settings)
    excerpt_reader = ExcerptReader(file_loader, default_size=settings.excerpt_read_bytes)
    return Orchestrator(
        header_extractor=HeaderExtractor(file_loader, read_bytes=settings.header_read_bytes),
        pipelines=[
            CompanyInfoPipeline(excerpt_reader, analyzer),
            LinkedInAnalysisPipeline(excerpt_reader, analyzer),
            KeyEmployeesPipeline(excerpt_reader, analyzer),
        ],
    )
