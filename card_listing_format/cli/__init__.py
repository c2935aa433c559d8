"""
Command-line interface for card-listing-format.
"""
