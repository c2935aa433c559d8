"""
card-listing-format

Detects the listing format of trading card lists ("4x Card", "4 Card" or "Card").
"""

__version__ = "1.0.0"

from .core.classifier import (
    ListingFormat, ClassificationResult, FormatClassifier, NoMatchError,
    NO_MATCH, classify_line
)
from .core.aggregator import FormatAggregator, classify_text
from .core.loader import read_listing_file

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
