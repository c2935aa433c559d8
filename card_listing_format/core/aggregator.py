"""
Format Aggregator Module

This module classifies multi-line card lists by running the line classifier
over every line and taking a plurality vote over the detected formats.
"""

from collections import Counter
from typing import Optional
import logging

from .classifier import (
    ClassificationResult, FormatClassifier, ListingFormat, NO_MATCH
)

logger = logging.getLogger(__name__)


class FormatAggregator:
    """
    Aggregator deciding the listing format of a whole text.

    Lines that match no format are dropped from the vote. Ties between
    formats go to the one declared first in ListingFormat.
    """

    def __init__(self, classifier: Optional[FormatClassifier] = None):
        """
        Initialize the aggregator.

        Args:
            classifier: Line classifier to use, a new FormatClassifier by default
        """
        self.classifier = classifier or FormatClassifier()

    def tally(self, text: str) -> Counter:
        """
        Count the detected format of each line of the text.

        Args:
            text: Text split into lines on '\\n'

        Returns:
            Counter mapping ListingFormat to number of lines
        """
        counts: Counter = Counter()
        for line in text.split('\n'):
            result = self.classifier.classify_line(line)
            if result.matched:
                counts[result.format] += 1
        return counts

    def classify_text(self, text: str) -> ClassificationResult:
        """
        Classify a text that may hold one or several lines.

        Args:
            text: Content to classify

        Returns:
            ClassificationResult with the most common format, or NO_MATCH
        """
        if '\n' not in text:
            return self.classifier.classify_line(text)

        counts = self.tally(text)
        summary = {fmt.value: n for fmt, n in counts.items()}
        logger.debug(f"Format tally: {summary}")

        if not counts:
            return NO_MATCH

        # max() keeps the first maximal item, so declaration order breaks ties
        winner = max(ListingFormat, key=lambda fmt: counts[fmt])
        return ClassificationResult(winner)


_default_aggregator = FormatAggregator()


def classify_text(text: str) -> ClassificationResult:
    """Classify text with the shared default aggregator."""
    return _default_aggregator.classify_text(text)
