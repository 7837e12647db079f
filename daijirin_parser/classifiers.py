"""
Part-of-speech tagging from Daijirin body annotations.

Body lines carry grammatical annotations in full-width parentheses:

    （名・形動）
    （動カ五［四］）

Each annotation is split on ・ into candidate labels. Candidates are then:
- kept as tags when they belong to the closed vocabulary
- mapped to inflection rules (adj-i, v5, v1) by conjugation class
"""

import re
from typing import Callable, Iterable, List, Set, Tuple
import logging

from .models import TagClassification
from .patterns import FORM_SEPARATOR, GODAN_VERB, ICHIDAN_VERB, find_annotation
from .vocabulary import ADJECTIVE_TAG, PART_OF_SPEECH_TAGS

logger = logging.getLogger(__name__)


def _matches(pattern: re.Pattern) -> Callable[[str], bool]:
    return lambda label: pattern.search(label) is not None


# Checked in order; the first match wins
INFLECTION_RULES: Tuple[Tuple[Callable[[str], bool], str], ...] = (
    (lambda label: label == ADJECTIVE_TAG, "adj-i"),
    (_matches(GODAN_VERB), "v5"),
    (_matches(ICHIDAN_VERB), "v1"),
)


def extract_tag_candidates(text: str) -> Set[str]:
    """
    Collect annotation labels from body text.

    Only the first annotation on each line is read.

    Args:
        text: Entry body

    Returns:
        Set of candidate labels, unfiltered
    """
    candidates = set()
    for line in text.split("\n"):
        annotation = find_annotation(line)
        if annotation is not None:
            candidates.update(annotation.split(FORM_SEPARATOR))
    return candidates


class TagClassifier:
    """
    Turns candidate labels into tags and inflection rules.

    Vocabulary and rules are fixed for the Daijirin dialect; the constructor
    arguments exist so tests and other callers can narrow them.
    """

    def __init__(
        self,
        vocabulary: Iterable[str] = PART_OF_SPEECH_TAGS,
        inflection_rules: Iterable[Tuple[Callable[[str], bool], str]] = INFLECTION_RULES,
    ):
        """
        Initialize the classifier.

        Args:
            vocabulary: Labels accepted as tags
            inflection_rules: Ordered (predicate, rule) pairs
        """
        self.vocabulary = frozenset(vocabulary)
        self.inflection_rules = tuple(inflection_rules)

    def classify(self, candidates: Iterable[str]) -> TagClassification:
        """
        Classify candidate labels.

        Args:
            candidates: Labels from extract_tag_candidates

        Returns:
            TagClassification with tags and rules
        """
        candidates = set(candidates)
        tags = {label for label in candidates if label in self.vocabulary}
        rules = set()

        unknown = candidates - tags
        if unknown:
            logger.debug(f"Ignoring labels outside vocabulary: {sorted(unknown)}")

        for label in candidates:
            rule = self.inflection_rule(label)
            if rule:
                tags.add(rule)
                rules.add(rule)

        return TagClassification(tags=frozenset(tags), rules=frozenset(rules))

    def inflection_rule(self, label: str) -> str:
        """Return the inflection rule for a label, or an empty string."""
        for predicate, rule in self.inflection_rules:
            if predicate(label):
                return rule
        return ""


_default_classifier = TagClassifier()


def classify_tags(candidates: Iterable[str]) -> TagClassification:
    """Classify candidate labels with the Daijirin vocabulary."""
    return _default_classifier.classify(candidates)


def classify_text(text: str) -> TagClassification:
    """Extract and classify the annotation labels of a body text."""
    return classify_tags(extract_tag_candidates(text))


def get_tag_stats(classifications: List[TagClassification]) -> dict:
    """
    Count tag and rule usage over many entries.

    Args:
        classifications: One classification per entry

    Returns:
        Dictionary with per-tag and per-rule counts
    """
    tag_counts = {}
    rule_counts = {}

    for classification in classifications:
        for tag in classification.tags:
            tag_counts[tag] = tag_counts.get(tag, 0) + 1
        for rule in classification.rules:
            rule_counts[rule] = rule_counts.get(rule, 0) + 1

    return {
        "entries": len(classifications),
        "untagged": sum(1 for c in classifications if not c.tags),
        "by_tag": dict(sorted(tag_counts.items(), key=lambda kv: (-kv[1], kv[0]))),
        "by_rule": dict(sorted(rule_counts.items(), key=lambda kv: (-kv[1], kv[0]))),
    }
