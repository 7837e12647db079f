"""
Data models for Daijirin entry extraction.

Entry is what the source reader hands over (one decoded heading and body).
Record is what the extractor produces for the sink: one row per
expression/reading pair.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Set


class FontWidth(str, Enum):
    """Gaiji font a glyph code belongs to."""
    NARROW = "narrow"
    WIDE = "wide"


@dataclass(frozen=True)
class Entry:
    """A decoded dictionary entry."""
    heading: str
    text: str

    @classmethod
    def from_dict(cls, data: dict) -> "Entry":
        """Create from a {"heading", "text"} dictionary."""
        return cls(heading=data["heading"], text=data["text"])

    def to_dict(self) -> dict:
        return {"heading": self.heading, "text": self.text}


@dataclass(frozen=True)
class TagClassification:
    """Tags and inflection rules derived from one entry's body text."""
    tags: frozenset = frozenset()
    rules: frozenset = frozenset()


@dataclass
class Record:
    """A single extracted term."""
    expression: str
    reading: str = ""  # Empty when the headword is purely phonetic
    glossary: List[str] = field(default_factory=list)
    tags: Set[str] = field(default_factory=set)
    rules: Set[str] = field(default_factory=set)
    score: int = 0

    def add_tags(self, *tags: str):
        """Add tags, ignoring ones already present."""
        self.tags.update(tags)

    def add_rules(self, *rules: str):
        """Add inflection rules, ignoring ones already present."""
        self.rules.update(rules)

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dictionary."""
        return {
            "expression": self.expression,
            "reading": self.reading,
            "glossary": list(self.glossary),
            "tags": sorted(self.tags),
            "rules": sorted(self.rules),
            "score": self.score,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Record":
        """Create from dictionary."""
        return cls(
            expression=data["expression"],
            reading=data.get("reading", ""),
            glossary=list(data.get("glossary", [])),
            tags=set(data.get("tags", [])),
            rules=set(data.get("rules", [])),
            score=data.get("score", 0),
        )

    def to_term_row(self) -> list:
        """
        Convert to a term bank row.

        Layout: [expression, reading, tags, rules, score, *glossary], with
        tags and rules space-separated in sorted order.
        """
        return [
            self.expression,
            self.reading,
            " ".join(sorted(self.tags)),
            " ".join(sorted(self.rules)),
            self.score,
            *self.glossary,
        ]
