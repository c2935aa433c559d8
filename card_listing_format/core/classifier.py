"""
Format Classifier Module

This module detects which card listing format a single line of text uses,
such as "4x Chandra's Spitfire", "4 Chandra's Spitfire" or a plain card name.
"""

import re
from typing import Dict, Optional, Pattern
from dataclasses import dataclass
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class ListingFormat(Enum):
    """Card listing formats, in matching priority order."""
    NUMBER_AND_X = "NumberAndX"   # e.g. "4x Chandra's Spitfire"
    NUMBER_ONLY = "NumberOnly"    # e.g. "4 Chandra's Spitfire"
    PLAIN = "Plain"               # e.g. "Chandra's Spitfire"

    @property
    def regex(self) -> Pattern:
        """Compiled pattern recognising this format at the start of a line."""
        return _FORMAT_PATTERNS[self]


_FORMAT_PATTERNS: Dict[ListingFormat, Pattern] = {
    ListingFormat.NUMBER_AND_X: re.compile(r'^\d+[xX]'),
    ListingFormat.NUMBER_ONLY: re.compile(r'^\d+\s+'),
    ListingFormat.PLAIN: re.compile(r'^[^\d\s]'),
}


class NoMatchError(ValueError):
    """Raised when a result without a detected format is unwrapped."""


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of a classification: a detected format, or no match."""
    format: Optional[ListingFormat] = None

    @property
    def matched(self) -> bool:
        return self.format is not None

    def unwrap(self) -> ListingFormat:
        """
        Return the detected format.

        Raises:
            NoMatchError: If no format was detected
        """
        if self.format is None:
            raise NoMatchError("no listing format matched")
        return self.format

    def __str__(self):
        if self.format is None:
            return "Err(NoMatch)"
        return f"Ok({self.format.value})"


NO_MATCH = ClassificationResult()


class FormatClassifier:
    """
    Classifier for single card listing lines.

    Patterns are tried in ListingFormat declaration order and the first
    one that matches wins, so "4x ..." never falls through to NUMBER_ONLY.
    """

    def __init__(self):
        """Initialize the classifier."""
        self.formats = list(ListingFormat)

    def classify_line(self, line: str) -> ClassificationResult:
        """
        Classify a single line of text.

        Args:
            line: One line without an embedded newline

        Returns:
            ClassificationResult with the first matching format, or NO_MATCH
        """
        normalized = line.replace('\t', ' ')

        for listing_format in self.formats:
            if listing_format.regex.match(normalized):
                logger.debug(f"Line {line!r} classified as {listing_format.value}")
                return ClassificationResult(listing_format)

        logger.debug(f"Line {line!r} matched no listing format")
        return NO_MATCH


_default_classifier = FormatClassifier()


def classify_line(line: str) -> ClassificationResult:
    """Classify one line with the shared default classifier."""
    return _default_classifier.classify_line(line)
