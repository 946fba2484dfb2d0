from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture()
def write_csv(tmp_path: Path) -> Callable[[str, str | bytes], Path]:
    """Write text or bytes to a file under tmp_path and return its path."""

    def _write(name: str, content: str | bytes) -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def company_csv(write_csv: Callable[[str, str | bytes], Path]) -> Path:
    return write_csv(
        "company.csv",
        'name,industry,"hq, country",website\n'
        "Example Corp,Software,\"Berlin, DE\",https://www.example.com\n",
    )


@pytest.fixture()
def posts_csv(write_csv: Callable[[str, str | bytes], Path]) -> Path:
    return write_csv(
        "posts.csv",
        "date,author,text\n"
        "2025-01-02,jane doe,Launching our new product\n"
        "2025-01-05,John Smith,Quarterly update\n",
    )


@pytest.fixture()
def employees_csv(write_csv: Callable[[str, str | bytes], Path]) -> Path:
    return write_csv(
        "employees.csv",
        "full_name,title\nJane Doe,CEO\nAlex Roe,Engineer\n",
    )
