"""Tests for the extract_daijirin command-line driver."""

import json
import logging
from pathlib import Path

import pytest

import extract_daijirin
from daijirin_parser import REVISION, ExtractionStats


def _read_jsonl(path: Path) -> list:
    with open(path, encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]


class TestIterEntries:
    """Tests for reading JSONL entries."""

    def test_reads_entries(self, write_jsonl) -> None:
        """Test that well-formed lines become entries."""
        path = write_jsonl([
            {"heading": "たべる【食べる】", "text": "（動バ下一）"},
            {"heading": "の", "text": "（格助）"},
        ])
        entries = list(extract_daijirin.iter_entries(path))
        assert [e.heading for e in entries] == ["たべる【食べる】", "の"]

    def test_skips_malformed_lines(self, write_jsonl, caplog) -> None:
        """Test that bad lines are logged and skipped."""
        path = write_jsonl([
            "{not json",
            {"heading": "あ"},
            {"heading": 1, "text": "x"},
            "[1, 2]",
            "",
            {"heading": "の", "text": "（格助）"},
        ])
        with open(path, "ab") as f:
            f.write(b'{"heading": "\xff", "text": "x"}\n')
            f.write('{"heading": "ん", "text": "（名）"}\n'.encode("utf-8"))

        with caplog.at_level(logging.WARNING):
            entries = list(extract_daijirin.iter_entries(path))

        messages = [record.getMessage() for record in caplog.records]
        assert [e.heading for e in entries] == ["の", "ん"]
        assert len(messages) == 5
        assert "Line 1" in messages[0]
        assert messages[-1] == "Line 7: invalid UTF-8"


class TestMain:
    """Tests for the main entry point."""

    def test_rows_output(self, write_jsonl, temp_dir: Path) -> None:
        """Test extraction to term bank rows."""
        path = write_jsonl([
            {"heading": "たべ-る【食べ(る)】", "text": "（動バ下一）"},
            {"heading": "【】", "text": ""},
        ])
        output = temp_dir / "terms.jsonl"

        assert extract_daijirin.main([str(path), "-o", str(output), "--no-progress"]) == 0
        assert _read_jsonl(output) == [
            ["食べる", "たべる", "v1 動バ下一", "v1", 0, "（動バ下一）"],
            ["食べ", "たべる", "v1 動バ下一", "v1", 0, "（動バ下一）"],
        ]

    def test_records_output(self, write_jsonl, temp_dir: Path) -> None:
        """Test extraction to record objects."""
        path = write_jsonl([{"heading": "の", "text": "（格助）"}])
        output = temp_dir / "records.jsonl"

        extract_daijirin.main([str(path), "-o", str(output), "-f", "records", "--no-progress"])
        assert _read_jsonl(output) == [{
            "expression": "の",
            "reading": "",
            "glossary": ["（格助）"],
            "tags": ["格助"],
            "rules": [],
            "score": 0,
        }]

    def test_stdout_and_stats(self, write_jsonl, capsys) -> None:
        """Test writing to stdout with stats on stderr."""
        path = write_jsonl([{"heading": "の", "text": "（格助）"}])

        extract_daijirin.main([str(path), "--stats", "--no-progress"])
        captured = capsys.readouterr()

        assert json.loads(captured.out) == ["の", "", "格助", "", 0, "（格助）"]
        assert json.loads(captured.err[captured.err.index("{"):])["records"] == 1

    def test_revision(self, capsys) -> None:
        """Test that --revision prints the revision."""
        assert extract_daijirin.main(["--revision"]) == 0
        assert capsys.readouterr().out.strip() == REVISION

    def test_missing_input(self, temp_dir: Path) -> None:
        """Test that a missing input file is a usage error."""
        with pytest.raises(SystemExit):
            extract_daijirin.main([str(temp_dir / "missing.jsonl")])

    def test_no_input(self) -> None:
        """Test that input is required."""
        with pytest.raises(SystemExit):
            extract_daijirin.main([])

    def test_unknown_log_level(self, monkeypatch) -> None:
        """Test that a bad DAIJIRIN_LOG_LEVEL is a usage error."""
        monkeypatch.setenv("DAIJIRIN_LOG_LEVEL", "chatty")
        with pytest.raises(SystemExit):
            extract_daijirin.main(["--revision"])

    def test_log_level_case_insensitive(self, monkeypatch, capsys) -> None:
        """Test that level names are accepted in any case."""
        monkeypatch.setenv("DAIJIRIN_LOG_LEVEL", "warning")
        assert extract_daijirin.main(["--revision"]) == 0
        assert capsys.readouterr().out.strip() == REVISION

    @pytest.mark.parametrize(
        "extra_args, env_progress, expected",
        [
            ([], None, True),
            (["--no-progress"], None, False),
            ([], "0", False),
        ],
    )
    def test_stdout_progress_setting(
        self, write_jsonl, monkeypatch, extra_args, env_progress, expected
    ) -> None:
        """Test that stdout output honours the progress settings."""
        path = write_jsonl([{"heading": "の", "text": "（格助）"}])
        if env_progress is None:
            monkeypatch.delenv("DAIJIRIN_PROGRESS", raising=False)
        else:
            monkeypatch.setenv("DAIJIRIN_PROGRESS", env_progress)

        seen = {}

        def fake_run(input_path, output, output_format="rows", show_progress=True):
            seen["show_progress"] = show_progress
            return ExtractionStats()

        monkeypatch.setattr(extract_daijirin, "run", fake_run)
        assert extract_daijirin.main([str(path), *extra_args]) == 0
        assert seen["show_progress"] is expected
