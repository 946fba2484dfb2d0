from collections.abc import Callable
from pathlib import Path

import pytest

from csv_insights.intake.exceptions import FileReadError, MissingFileError
from csv_insights.intake.excerpt_reader import ExcerptReader
from csv_insights.intake.file_loader import FileLoader, decode_prefix

WriteCsv = Callable[[str, str | bytes], Path]


class TestDecodePrefix:
    def test_replaces_split_multibyte_char(self) -> None:
        raw = "é".encode("utf-8")[:1]
        assert decode_prefix(b"ab" + raw) == "ab�"

    def test_drops_bom(self) -> None:
        assert decode_prefix(b"\xef\xbb\xbfx") == "x"


class TestFileLoader:
    @pytest.mark.asyncio
    async def test_reads_at_most_limit(self, write_csv: WriteCsv) -> None:
        path = write_csv("data.csv", b"0123456789")
        assert await FileLoader().read_prefix(path, 4) == b"0123"

    @pytest.mark.asyncio
    async def test_empty_file_allowed_by_default(self, write_csv: WriteCsv) -> None:
        path = write_csv("empty.csv", b"")
        assert await FileLoader().read_prefix(path, 4) == b""


class TestExcerptReader:
    @pytest.mark.asyncio
    async def test_reads_whole_small_file(self, employees_csv: Path) -> None:
        text = await ExcerptReader().read(employees_csv)
        assert text.startswith("full_name,title\n")
        assert "Alex Roe" in text

    @pytest.mark.asyncio
    async def test_default_size_is_4096_bytes(self, write_csv: WriteCsv) -> None:
        path = write_csv("big.csv", "x" * 10_000)
        assert len(await ExcerptReader().read(path)) == 4096

    @pytest.mark.asyncio
    async def test_explicit_size_overrides_default(self, write_csv: WriteCsv) -> None:
        path = write_csv("big.csv", "x" * 100)
        assert await ExcerptReader(default_size=50).read(path, size=10) == "x" * 10

    @pytest.mark.asyncio
    async def test_missing_path_raises(self) -> None:
        with pytest.raises(MissingFileError):
            await ExcerptReader().read(None)

    @pytest.mark.asyncio
    async def test_empty_file_raises(self, write_csv: WriteCsv) -> None:
        path = write_csv("empty.csv", b"")
        with pytest.raises(FileReadError, match="Could not read file content"):
            await ExcerptReader().read(path)
