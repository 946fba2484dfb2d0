from pathlib import Path

from csv_insights.intake.exceptions import FileReadError
from csv_insights.intake.file_loader import FileLoader, decode_prefix


class ExcerptReader:
    """Reads the leading bytes of a CSV file as text for AI analysis."""

    DEFAULT_SIZE = 4096

    def __init__(
        self,
        file_loader: FileLoader | None = None,
        default_size: int = DEFAULT_SIZE,
    ) -> None:
        self._file_loader = file_loader if file_loader is not None else FileLoader()
        self._default_size = default_size

    async def read(self, path: Path | None, size: int | None = None) -> str:
        """Return up to ``size`` leading bytes of ``path`` decoded as text.

        Raises:
            MissingFileError: if the path is absent.
            FileReadError: if the read yields no text.
        """
        limit = size if size is not None else self._default_size
        text = decode_prefix(await self._file_loader.read_prefix(path, limit))
        if not text:
            raise FileReadError("Could not read file content.")
        return text
