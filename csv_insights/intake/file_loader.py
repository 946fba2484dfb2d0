import asyncio
from pathlib import Path

from csv_insights.intake.exceptions import EmptyFileError, FileReadError, MissingFileError


def decode_prefix(raw: bytes) -> str:
    """Decode a byte prefix as UTF-8, dropping a BOM and replacing a split trailing char."""
    return raw.decode("utf-8-sig", errors="replace")


class FileLoader:
    """Reads a bounded prefix of a local file without blocking the event loop."""

    async def read_prefix(
        self,
        path: Path | None,
        limit: int,
        *,
        reject_empty: bool = False,
    ) -> bytes:
        """Return at most ``limit`` leading bytes of ``path``.

        Raises:
            MissingFileError: if no path is given or it does not exist.
            EmptyFileError: if ``reject_empty`` is set and the file is zero-length.
            FileReadError: if the file cannot be opened or read.
        """
        if path is None:
            raise MissingFileError("No file provided.")
        if not path.is_file():
            raise MissingFileError(f"File not found: {path}")
        if reject_empty and path.stat().st_size == 0:
            raise EmptyFileError("File is empty.")
        return await asyncio.to_thread(self._read, path, limit)

    @staticmethod
    def _read(path: Path, limit: int) -> bytes:
        try:
            with path.open("rb") as handle:
                return handle.read(limit)
        except OSError as exc:
            raise FileReadError(f"Error reading the file: {exc}") from exc
