"""
Test package for card-listing-format.

This package contains:
- Unit tests for the classifier, aggregator and loader
- Integration tests for the command-line interface
- Property-based tests using Hypothesis
"""
