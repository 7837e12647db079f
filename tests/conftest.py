"""Pytest configuration and shared fixtures for Daijirin parser tests."""

import json
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from daijirin_parser import Entry


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test file operations.

    Yields:
        Path to temporary directory
    """
    tmp = Path(tempfile.mkdtemp())
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def sample_entries() -> list[Entry]:
    """A handful of entries covering the common heading shapes."""
    return [
        Entry("たべる【食べる】", "（動バ下一）\n食物を口に入れ、かんで飲み込む。"),
        Entry("かなし・い【悲しい・哀しい】", "（形）\n心が痛んで泣けてくるような気持ちだ。"),
        Entry("の", "（格助）\n連体修飾語をつくる。"),
        Entry("【】", "見出しのない項目"),
    ]


@pytest.fixture
def write_jsonl(temp_dir: Path):
    """Write a list of objects (or raw strings) as a JSONL file."""

    def _write(rows: list, name: str = "entries.jsonl") -> Path:
        path = temp_dir / name
        with open(path, "w", encoding="utf-8") as f:
            for row in rows:
                line = row if isinstance(row, str) else json.dumps(row, ensure_ascii=False)
                f.write(line + "\n")
        return path

    return _write
