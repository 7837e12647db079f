"""
Heading segmentation for Daijirin entries.

Splits a heading into its reading, written forms and annotations, then
expands the written forms into every surface form a user might look up.

Examples:
    "たべる【食べる】"          -> reading たべる, expressions [食べる]
    "あいまい【曖昧】（形動）"  -> annotation 形動 is captured, not expanded
    "かなしい【悲しい・哀しい】" -> expressions [悲しい, 哀しい]
    "たべ-る【食べ(る)】"       -> reading たべる, expressions [食べる, 食べ]
"""

from dataclasses import dataclass
from typing import List, Optional
import logging

from .patterns import (
    FORM_SEPARATOR,
    HEADING_PARTS,
    OPTIONAL_SPAN,
    strip_annotations,
    strip_phonetic_marks,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeadingSegments:
    """Raw fields captured from a heading. Missing fields are empty strings."""
    reading_field: str
    expression_field: str = ""
    variant_field: str = ""  # 〖...〗
    annotation_field: str = ""  # （...）


def segment_heading(heading: str) -> Optional[HeadingSegments]:
    """
    Split a heading into its raw fields.

    Args:
        heading: Decoded heading text

    Returns:
        HeadingSegments, or None if the heading has no reading field
    """
    match = HEADING_PARTS.match(heading)
    if match is None:
        logger.debug(f"Heading does not match grammar: {heading!r}")
        return None

    reading, expression, variant, annotation = match.groups(default="")
    return HeadingSegments(
        reading_field=reading,
        expression_field=expression,
        variant_field=variant,
        annotation_field=annotation,
    )


def parse_readings(reading_field: str) -> List[str]:
    """
    Normalize the reading field.

    Daijirin headings carry one reading, so the result holds at most one
    element. A field made only of markers yields no reading.
    """
    reading = strip_phonetic_marks(reading_field)
    if not reading:
        return []
    return [reading]


def expand_variants(form: str) -> List[str]:
    """
    Expand the optional span of one written form.

    The form with the optional part comes first; the shortened form follows
    only if the form had a span to drop.

        食べ(る) -> [食べる, 食べ]
        食事     -> [食事]
    """
    inclusive = OPTIONAL_SPAN.sub(r'\1', form)
    if inclusive == form:
        return [form]
    return [inclusive, OPTIONAL_SPAN.sub('', form)]


def expand_expressions(expression_field: str) -> List[str]:
    """
    Expand the 【...】 field into surface forms, in heading order.

    Annotations inside the field are dropped before splitting on ・.
    Duplicates are kept.
    """
    if not expression_field:
        return []

    expressions = []
    for form in strip_annotations(expression_field).split(FORM_SEPARATOR):
        expressions.extend(e for e in expand_variants(form) if e)
    return expressions
