"""
Daijirin Parser - Extract dictionary terms from decoded Daijirin EPWING entries.

Takes the heading and body of each entry (already decoded to text by an EPWING
reader) and produces term records with expression, reading, gloss,
part-of-speech tags and inflection rules.

Usage:
    from daijirin_parser import extract

    records = extract("たべる【食べる】", "（動バ下一）\\n食物を口に入れ...")
    for record in records:
        print(record.expression, record.reading, sorted(record.tags))

Batch extraction with statistics:
    from daijirin_parser import Entry, ExtractionStats, extract_entries

    stats = ExtractionStats()
    records = extract_entries(entries, stats=stats)
    print(stats.to_dict())

Gaiji repair (for EPWING readers):
    from daijirin_parser import FontWidth, lookup_glyph

    lookup_glyph(49441, FontWidth.NARROW)  # 'á'
"""

from .models import Entry, Record, FontWidth, TagClassification
from .segmenter import (
    HeadingSegments,
    segment_heading,
    parse_readings,
    expand_variants,
    expand_expressions,
)
from .classifiers import (
    TagClassifier,
    extract_tag_candidates,
    classify_tags,
    classify_text,
    get_tag_stats,
)
from .vocabulary import PART_OF_SPEECH_TAGS
from .glyphs import (
    FONT_NARROW,
    FONT_WIDE,
    get_font_table,
    lookup_glyph,
    repair_gaiji,
)
from .extractor import (
    REVISION,
    DaijirinExtractor,
    ExtractionStats,
    build_records,
    extract,
    extract_entries,
    get_extraction_stats,
)
from .patterns import PATTERNS

__version__ = "1.0.0"
__all__ = [
    # Models
    "Entry",
    "Record",
    "FontWidth",
    "TagClassification",
    # Segmenter
    "HeadingSegments",
    "segment_heading",
    "parse_readings",
    "expand_variants",
    "expand_expressions",
    # Classifiers
    "TagClassifier",
    "extract_tag_candidates",
    "classify_tags",
    "classify_text",
    "get_tag_stats",
    "PART_OF_SPEECH_TAGS",
    # Glyphs
    "FONT_NARROW",
    "FONT_WIDE",
    "get_font_table",
    "lookup_glyph",
    "repair_gaiji",
    # Extractor
    "REVISION",
    "DaijirinExtractor",
    "ExtractionStats",
    "build_records",
    "extract",
    "extract_entries",
    "get_extraction_stats",
    # Patterns
    "PATTERNS",
]
