"""Header-row extraction from the first line of a CSV file."""

import csv
import re
from pathlib import Path

from csv_insights.intake.exceptions import FileReadError, HeaderParseError
from csv_insights.intake.file_loader import FileLoader, decode_prefix

_LINE_BREAK = re.compile(r"\r\n|\n")


def parse_header_line(line: str) -> list[str]:
    """Split one CSV line into header names.

    Commas inside double quotes are not delimiters and surrounding quotes are
    removed. Tokens are trimmed; empty tokens are dropped.
    """
    try:
        row = next(csv.reader([line], skipinitialspace=True), [])
    except csv.Error as exc:
        raise HeaderParseError(f"Failed to parse CSV headers: {exc}") from exc
    return [token.strip() for token in row if token.strip()]


def first_line(text: str) -> str:
    return _LINE_BREAK.split(text, maxsplit=1)[0]


class HeaderExtractor:
    """Reads a small prefix of a file and returns its header row."""

    DEFAULT_READ_BYTES = 1024

    def __init__(
        self,
        file_loader: FileLoader | None = None,
        read_bytes: int = DEFAULT_READ_BYTES,
    ) -> None:
        self._file_loader = file_loader if file_loader is not None else FileLoader()
        self._read_bytes = read_bytes

    async def extract(self, path: Path | None) -> list[str]:
        """Return the ordered header names of ``path``.

        Raises:
            MissingFileError: if the path is absent.
            EmptyFileError: if the file is zero-length.
            FileReadError: if the prefix decodes to no text.
            HeaderParseError: if the first line is empty.
        """
        raw = await self._file_loader.read_prefix(path, self._read_bytes, reject_empty=True)
        text = decode_prefix(raw)
        if not text:
            raise FileReadError("Could not read file content.")
        line = first_line(text)
        if not line:
            raise HeaderParseError("File contains no headers.")
        return parse_header_line(line)
