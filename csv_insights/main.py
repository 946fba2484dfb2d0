import argparse
import asyncio
from pathlib import Path

from csv_insights.config.settings import Settings
from csv_insights.export.csv_export import ProfileExporter
from csv_insights.intake.models import SlotRole
from csv_insights.logging.logger import Log
from csv_insights.orchestration.orchestrator import build_orchestrator
from csv_insights.orchestration.session import SessionContext
from csv_insights.report.renderer import render_session


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="csv-insights",
        description=(
            "Extract CSV headers and run AI analysis of company details, "
            "LinkedIn posts, and employee lists."
        ),
    )
    parser.add_argument("--company", type=Path, help="Company details CSV")
    parser.add_argument("--posts", type=Path, help="LinkedIn posts CSV")
    parser.add_argument("--employees", type=Path, help="Employee list CSV")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path.cwd(),
        help="Directory for the profile export (default: current directory)",
    )
    return parser


def session_from_args(args: argparse.Namespace) -> SessionContext:
    session = SessionContext()
    session.set_file(SlotRole.COMPANY, args.company)
    session.set_file(SlotRole.LINKEDIN_POSTS, args.posts)
    session.set_file(SlotRole.EMPLOYEES, args.employees)
    return session


def main(argv: list[str] | None = None) -> None:
    """Entry point: parse args -> build dependencies -> run one pass -> report and export."""
    parser = build_parser()
    args = parser.parse_args(argv)
    session = session_from_args(args)
    if not session.has_files:
        parser.error("at least one of --company, --posts, --employees is required")

    settings = Settings()
    Log.configure(settings.log_level)

    orchestrator = build_orchestrator(settings)
    asyncio.run(orchestrator.process(session))

    print(render_session(session))
    saved = ProfileExporter(settings.export_filename).save(session.profiles, args.output_dir)
    if saved is not None:
        print(f"\nSaved {len(session.profiles)} profiles to {saved}")


if __name__ == "__main__":
    main()
