import csv
import io
from pathlib import Path

from csv_insights.logging.logger import Log
from csv_insights.orchestration.session import DownloadableProfile

HEADER_ROW = "Name,LinkedIn Profile URL"


def profiles_to_csv(profiles: list[DownloadableProfile]) -> str:
    """Serialize profiles with every data field quoted and embedded quotes doubled."""
    buf = io.StringIO()
    buf.write(HEADER_ROW + "\n")
    writer = csv.writer(buf, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows((p.name, p.profile_url) for p in profiles)
    return buf.getvalue()


class ProfileExporter:
    """Saves the deduplicated profile list as a CSV file."""

    DEFAULT_FILENAME = "linkedin_profiles.csv"

    def __init__(self, filename: str = DEFAULT_FILENAME) -> None:
        self._filename = filename

    def save(self, profiles: list[DownloadableProfile], directory: Path) -> Path | None:
        """Write ``profiles`` into ``directory``; returns None without writing when empty."""
        if not profiles:
            Log.info("No profiles to export")
            return None
        path = directory / self._filename
        path.write_text(profiles_to_csv(profiles), encoding="utf-8", newline="")
        Log.info(f"Exported {len(profiles)} profiles to {path}")
        return path
