"""Tests for record building and the extractor facade."""

import pytest

from daijirin_parser import (
    REVISION,
    DaijirinExtractor,
    Entry,
    ExtractionStats,
    Record,
    build_records,
    extract,
    extract_entries,
    get_extraction_stats,
)
from daijirin_parser.glyphs import FONT_NARROW, FONT_WIDE
from daijirin_parser.models import TagClassification


class TestExtract:
    """Tests for extract."""

    def test_simple_entry(self) -> None:
        """Test a heading with one reading and one expression."""
        text = "（動バ下一）\n食物を口に入れ、かんで飲み込む。"
        records = extract("たべる【食べる】", text)

        assert len(records) == 1
        record = records[0]
        assert record.expression == "食べる"
        assert record.reading == "たべる"
        assert record.glossary == [text]
        assert record.tags == {"動バ下一", "v1"}
        assert record.rules == {"v1"}

    def test_optional_span(self) -> None:
        """Test that an optional span yields two records."""
        records = extract("たべ-る【食べ(る)】", "")
        assert [(r.expression, r.reading) for r in records] == [
            ("食べる", "たべる"),
            ("食べ", "たべる"),
        ]

    def test_multiple_expressions(self) -> None:
        """Test that joined forms share reading, gloss and tags."""
        records = extract("かなし・い【悲しい・哀しい】", "（形）\n説明")

        assert [r.expression for r in records] == ["悲しい", "哀しい"]
        for record in records:
            assert record.reading == "かなしい"
            assert record.glossary == ["（形）\n説明"]
            assert record.tags == {"形", "adj-i"}
            assert record.rules == {"adj-i"}

    def test_fullwidth_letters(self) -> None:
        """Test two full-width candidates joined by a middle dot."""
        records = extract("R【Ａ・Ｂ】", "text")
        assert [(r.expression, r.reading) for r in records] == [("Ａ", "R"), ("Ｂ", "R")]

    def test_reading_only(self) -> None:
        """Test that a bare reading becomes the expression."""
        records = extract("の", "（格助）\n連体修飾語をつくる。")

        assert len(records) == 1
        assert records[0].expression == "の"
        assert records[0].reading == ""
        assert records[0].tags == {"格助"}

    def test_reading_only_markers_stripped(self) -> None:
        """Test that the reading used as expression is normalized."""
        records = extract("ア・ル-ト（名）", "")
        assert [(r.expression, r.reading) for r in records] == [("アルト", "")]

    def test_empty_expression_field(self) -> None:
        """Test that 【】 behaves like a missing expression field."""
        records = extract("あ【】", "")
        assert [(r.expression, r.reading) for r in records] == [("あ", "")]

    @pytest.mark.parametrize("heading", ["", "【漢字】", "（注）", "-・-"])
    def test_unrecognized_heading(self, heading: str) -> None:
        """Test that unusable headings yield no records."""
        assert extract(heading, "（名）") == []

    def test_idempotent(self) -> None:
        """Test that extraction has no hidden state."""
        args = ("たべ-る【食べ(る)】", "（動バ下一）")
        assert extract(*args) == extract(*args)

    def test_records_do_not_share_sets(self) -> None:
        """Test that mutating one record leaves its siblings alone."""
        first, second = extract("R【Ａ・Ｂ】", "（名）")
        first.add_tags("extra")
        first.glossary.append("more")
        assert "extra" not in second.tags
        assert second.glossary == ["（名）"]


class TestBuildRecords:
    """Tests for build_records."""

    def test_cross_product(self) -> None:
        """Test one record per expression and reading."""
        classification = TagClassification(tags=frozenset({"名"}))
        records = build_records(["r"], ["a", "b"], "gloss", classification)
        assert [(r.expression, r.reading) for r in records] == [("a", "r"), ("b", "r")]
        assert all(r.tags == {"名"} for r in records)

    def test_no_readings(self) -> None:
        """Test that no readings produce no records."""
        assert build_records([], ["a"], "gloss", TagClassification()) == []


class TestRecord:
    """Tests for the Record model."""

    def test_add_is_idempotent(self) -> None:
        """Test that adding a tag twice keeps one copy."""
        record = Record(expression="a")
        record.add_tags("名", "名")
        record.add_rules("v5")
        record.add_rules("v5")
        assert record.tags == {"名"}
        assert record.rules == {"v5"}

    def test_to_term_row(self) -> None:
        """Test the term bank row layout."""
        record = Record("食べる", "たべる", ["gloss"], {"動バ下一", "v1"}, {"v1"})
        assert record.to_term_row() == ["食べる", "たべる", "v1 動バ下一", "v1", 0, "gloss"]

    def test_dict_round_trip(self) -> None:
        """Test conversion to and from a dictionary."""
        record = Record("食べる", "たべる", ["gloss"], {"動バ下一", "v1"}, {"v1"})
        data = record.to_dict()
        assert data["tags"] == ["v1", "動バ下一"]
        assert Record.from_dict(data) == record


class TestDaijirinExtractor:
    """Tests for the DaijirinExtractor facade."""

    def test_extract_terms(self) -> None:
        """Test that the facade delegates to extract."""
        entry = Entry("たべる【食べる】", "（動バ下一）")
        assert DaijirinExtractor().extract_terms(entry) == extract(entry.heading, entry.text)

    def test_extract_kanji(self) -> None:
        """Test that no kanji entries are produced."""
        assert DaijirinExtractor().extract_kanji(Entry("かん【漢】", "")) == []

    def test_revision(self) -> None:
        """Test the fixed revision identifier."""
        extractor = DaijirinExtractor()
        extractor.extract_terms(Entry("たべる【食べる】", ""))
        assert extractor.revision == REVISION == "daijirin:1"

    def test_fonts(self) -> None:
        """Test that the glyph tables are exposed."""
        extractor = DaijirinExtractor()
        assert extractor.font_narrow() is FONT_NARROW
        assert extractor.font_wide() is FONT_WIDE


class TestExtractionStats:
    """Tests for batch extraction and statistics."""

    def test_extract_entries(self, sample_entries: list[Entry]) -> None:
        """Test that batch extraction flattens records in order."""
        records = extract_entries(sample_entries)
        assert [r.expression for r in records] == ["食べる", "悲しい", "哀しい", "の"]

    def test_stats_accumulate(self, sample_entries: list[Entry]) -> None:
        """Test the stats accumulator."""
        stats = ExtractionStats()
        extract_entries(sample_entries, stats=stats)

        assert stats.entries == 4
        assert stats.records == 4
        assert stats.skipped == 1
        assert stats.phonetic_only == 1
        assert stats.rule_counts == {"v1": 1, "adj-i": 2}
        assert stats.tag_counts["形"] == 2

    def test_get_extraction_stats(self, sample_entries: list[Entry]) -> None:
        """Test the stats dictionary."""
        results = [extract(e.heading, e.text) for e in sample_entries]
        stats = get_extraction_stats(results)

        assert stats["entries"] == 4
        assert stats["records"] == 4
        assert stats["skipped"] == 1
        assert stats["records_per_entry"] == 1.0
        assert list(stats["by_rule"]) == ["adj-i", "v1"]

    def test_empty_stats(self) -> None:
        """Test stats for no entries."""
        stats = get_extraction_stats([])
        assert stats["entries"] == 0
        assert stats["records_per_entry"] == 0.0
