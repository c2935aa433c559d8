"""
Core modules for card listing format detection.
"""

from .classifier import (
    ListingFormat, ClassificationResult, FormatClassifier, NoMatchError,
    NO_MATCH, classify_line
)
from .aggregator import FormatAggregator, classify_text
from .loader import read_listing_file

__all__ = [
    'ListingFormat',
    'ClassificationResult',
    'FormatClassifier',
    'FormatAggregator',
    'NoMatchError',
    'NO_MATCH',
    'classify_line',
    'classify_text',
    'read_listing_file'
]
