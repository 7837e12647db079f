"""
Regular expressions for the Daijirin heading and body conventions.

A heading looks like:

    たべる【食べる】〖Eat〗（動バ下一）

- reading: everything before the first （, 【 or 〖
- 【...】: written forms, joined by ・, optional kana in ASCII parentheses
- 〖...〗: foreign-word spelling (not used for extraction)
- （...）: grammatical annotation

The body repeats grammatical annotations in full-width parentheses, e.g.
"（名・形動）". Everything is compiled once at import.
"""

import re
from typing import Optional

# === HEADINGS ===

# Matched from the start of the heading; groups are greedy
HEADING_PARTS = re.compile(r'([^（【〖]+)(?:【(.*)】)?(?:〖(.*)〗)?(?:（(.*)）)?')

# Length and syllable markers inside the reading (e.g. "たべ-る", "ア・ルバイト")
PHONETIC_MARKS = re.compile(r'[-・]+')

# Optional okurigana in a written form: 食べ(る)
OPTIONAL_SPAN = re.compile(r'\((.*)\)')

# Full-width annotation, used both in headings and body lines
ANNOTATION = re.compile(r'（(.*)）')

# Separator between written forms and between annotation labels
FORM_SEPARATOR = "・"

# === CONJUGATION CLASSES ===

# Five-grade verbs, plus classical bigrade verbs that became godan
GODAN_VERB = re.compile(r'(動.五)|(動..二)')

# One-grade verbs (上一 / 下一)
ICHIDAN_VERB = re.compile(r'動..一')


PATTERNS = {
    "heading_parts": HEADING_PARTS,
    "phonetic_marks": PHONETIC_MARKS,
    "optional_span": OPTIONAL_SPAN,
    "annotation": ANNOTATION,
    "godan_verb": GODAN_VERB,
    "ichidan_verb": ICHIDAN_VERB,
}


def find_annotation(line: str) -> Optional[str]:
    """Return the inner text of the first full-width annotation in a line."""
    match = ANNOTATION.search(line)
    if match:
        return match.group(1)
    return None


def strip_annotations(text: str) -> str:
    """Remove full-width annotation spans."""
    return ANNOTATION.sub('', text)


def strip_phonetic_marks(text: str) -> str:
    """Remove length and syllable markers from a reading."""
    return PHONETIC_MARKS.sub('', text)
