"""
Term extraction for Daijirin entries.

Ties the segmenter and the tag classifier together and builds one record per
expression/reading pair.

Usage:
    from daijirin_parser import DaijirinExtractor, Entry

    extractor = DaijirinExtractor()
    for record in extractor.extract_terms(Entry(heading, text)):
        print(record.expression, record.reading, sorted(record.tags))
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional
import logging

from .classifiers import classify_text
from .glyphs import FONT_NARROW, FONT_WIDE
from .models import Entry, Record, TagClassification
from .segmenter import expand_expressions, parse_readings, segment_heading

logger = logging.getLogger(__name__)

# Bumped whenever extraction output changes, so imported data can be migrated
REVISION = "daijirin:1"


def build_records(
    readings: List[str],
    expressions: List[str],
    text: str,
    classification: TagClassification,
) -> List[Record]:
    """
    Build the records for one entry.

    With written forms: one record per expression and reading.
    Without: one record per reading, the reading standing in as expression.

    Args:
        readings: Normalized readings (at most one for Daijirin)
        expressions: Expanded written forms
        text: Entry body, stored verbatim as the only gloss
        classification: Tags and rules shared by every record

    Returns:
        List of records, possibly empty
    """
    if expressions:
        pairs = [(expression, reading) for expression in expressions for reading in readings]
    else:
        pairs = [(reading, "") for reading in readings]

    records = []
    for expression, reading in pairs:
        record = Record(expression=expression, reading=reading, glossary=[text])
        record.add_tags(*classification.tags)
        record.add_rules(*classification.rules)
        records.append(record)
    return records


def extract(heading: str, text: str) -> List[Record]:
    """
    Extract records from one decoded entry.

    Args:
        heading: Entry heading
        text: Entry body

    Returns:
        Records for the entry; empty if the heading is not recognized
    """
    segments = segment_heading(heading)
    if segments is None:
        return []

    readings = parse_readings(segments.reading_field)
    if not readings:
        logger.debug(f"Heading has no reading after normalization: {heading!r}")
        return []

    expressions = expand_expressions(segments.expression_field)
    classification = classify_text(text)

    return build_records(readings, expressions, text, classification)


class DaijirinExtractor:
    """
    Extractor for the Daijirin EPWING dictionary.

    Stateless: one instance can be shared by any number of callers.
    """

    @property
    def revision(self) -> str:
        return REVISION

    def extract_terms(self, entry: Entry) -> List[Record]:
        """Extract term records from an entry."""
        return extract(entry.heading, entry.text)

    def extract_kanji(self, entry: Entry) -> list:
        """Daijirin has no kanji entries."""
        return []

    def font_narrow(self) -> Mapping[int, str]:
        return FONT_NARROW

    def font_wide(self) -> Mapping[int, str]:
        return FONT_WIDE


@dataclass
class ExtractionStats:
    """Statistics from extracting many entries."""
    entries: int = 0
    records: int = 0
    skipped: int = 0
    phonetic_only: int = 0
    tag_counts: Dict[str, int] = field(default_factory=dict)
    rule_counts: Dict[str, int] = field(default_factory=dict)

    def add(self, records: List[Record]):
        """Account for the records of one entry."""
        self.entries += 1
        self.records += len(records)
        if not records:
            self.skipped += 1

        for record in records:
            if not record.reading:
                self.phonetic_only += 1
            for tag in record.tags:
                self.tag_counts[tag] = self.tag_counts.get(tag, 0) + 1
            for rule in record.rules:
                self.rule_counts[rule] = self.rule_counts.get(rule, 0) + 1

    def to_dict(self) -> dict:
        return {
            "entries": self.entries,
            "records": self.records,
            "skipped": self.skipped,
            "phonetic_only": self.phonetic_only,
            "records_per_entry": round(self.records / self.entries, 2) if self.entries else 0.0,
            "by_tag": dict(sorted(self.tag_counts.items(), key=lambda kv: (-kv[1], kv[0]))),
            "by_rule": dict(sorted(self.rule_counts.items(), key=lambda kv: (-kv[1], kv[0]))),
        }


def extract_entries(
    entries: Iterable[Entry],
    stats: Optional[ExtractionStats] = None,
) -> List[Record]:
    """
    Extract records from many entries, in order.

    Args:
        entries: Decoded entries
        stats: Optional accumulator updated per entry

    Returns:
        All records, flattened
    """
    records = []
    for entry in entries:
        entry_records = extract(entry.heading, entry.text)
        if stats is not None:
            stats.add(entry_records)
        records.extend(entry_records)
    return records


def get_extraction_stats(results: Iterable[List[Record]]) -> dict:
    """
    Get extraction statistics.

    Args:
        results: One record list per entry

    Returns:
        Dictionary with entry, record and tag counts
    """
    stats = ExtractionStats()
    for records in results:
        stats.add(records)
    return stats.to_dict()
